"""
Servicio de disponibilidades.
Traduce los esquemas de la API a entidades, delega en el repositorio y
confirma la transacción de cada operación de escritura.
"""

from typing import List, Optional, Tuple
import logging

from repositories.disponibilidad_repository import DisponibilidadRepository
from repositories.interconsulta_repository import InterconsultaRepository
from database.models import DisponibilidadORM
from models.disponibilidades import DisponibilidadCreate, DisponibilidadUpdate
from core.exceptions import ValidationException
from core.pagination import page_to_limit

logger = logging.getLogger(__name__)


class DisponibilidadService:
    """Lógica de negocio de las disponibilidades."""

    def __init__(
        self,
        repository: DisponibilidadRepository,
        interconsulta_repository: InterconsultaRepository
    ):
        """
        Inicializa el servicio de disponibilidades.

        Args:
            repository: DisponibilidadRepository instance
            interconsulta_repository: InterconsultaRepository instance
        """
        self.repository = repository
        self.interconsulta_repo = interconsulta_repository

    @staticmethod
    def _validar_rango(disponibilidad: DisponibilidadORM) -> None:
        if disponibilidad.fecha_fin <= disponibilidad.fecha_inicio:
            raise ValidationException(
                message="fecha_fin debe ser posterior a fecha_inicio",
                field="fecha_fin",
            )

    def _validar_interconsulta(self, nid_interconsulta: Optional[int]) -> None:
        if nid_interconsulta is not None and not self.interconsulta_repo.exists(nid_interconsulta):
            raise ValidationException(
                message=f"Interconsulta {nid_interconsulta} no encontrada",
                field="nid_interconsulta",
            )

    def create_disponibilidad(self, data: DisponibilidadCreate) -> DisponibilidadORM:
        """
        Crea una disponibilidad nueva.

        Args:
            data: Datos de la disponibilidad

        Returns:
            La disponibilidad guardada

        Raises:
            ValidationException: Si el rango de fechas no es válido o la
                interconsulta no existe
        """
        disponibilidad = DisponibilidadORM(**data.model_dump())
        self._validar_rango(disponibilidad)
        self._validar_interconsulta(disponibilidad.nid_interconsulta)

        created = self.repository.create(disponibilidad)
        self.repository.commit()
        logger.info(f"Disponibilidad creada: {created.uuid}")
        return created

    def get_disponibilidades(
        self,
        page: int = 0,
        page_size: int = 50,
        nid_interconsulta: Optional[int] = None,
        disponible: Optional[bool] = None,
    ) -> Tuple[List[DisponibilidadORM], int]:
        """
        Lista disponibilidades con paginación.

        Returns:
            Tupla (disponibilidades de la página, total de coincidencias)
        """
        filters = {
            key: value
            for key, value in {
                "nid_interconsulta": nid_interconsulta,
                "disponible": disponible,
            }.items()
            if value is not None
        }
        filters["limit"] = page_to_limit(page, page_size)

        items = self.repository.get(filters)
        total = self.repository.count(filters)
        return items, total

    def get_disponibilidad(self, uuid: str) -> DisponibilidadORM:
        """Obtiene una disponibilidad por su uuid."""
        return self.repository.by_uuid_or_fail(uuid)

    def update_disponibilidad(self, uuid: str, data: DisponibilidadUpdate) -> DisponibilidadORM:
        """
        Actualiza los campos enviados de una disponibilidad.

        Args:
            uuid: uuid de la disponibilidad
            data: Campos a modificar

        Returns:
            La disponibilidad actualizada

        Raises:
            NotFoundException: Si la disponibilidad no existe
            ValidationException: Si el uuid, el rango de fechas o la
                interconsulta no son válidos
        """
        disponibilidad = self.repository.by_uuid_or_fail(uuid)
        cambios = data.model_dump(exclude_unset=True)
        #antes de modificar la entidad: la consulta haría autoflush
        if "nid_interconsulta" in cambios:
            self._validar_interconsulta(cambios["nid_interconsulta"])

        for field, value in cambios.items():
            setattr(disponibilidad, field, value)
        self._validar_rango(disponibilidad)

        updated = self.repository.update(disponibilidad)
        self.repository.commit()
        return updated
