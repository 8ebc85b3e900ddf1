"""
Repositorio para la entidad Disponibilidad.
Gestiona las operaciones de base de datos de las franjas de disponibilidad
y siempre carga la interconsulta asociada.
"""

from typing import Optional, Type
from sqlalchemy.orm import Session
import logging

from repositories.base_repository import BaseRepository
from database.models import DisponibilidadORM
from core.guards import assert_found, validate_uuid

logger = logging.getLogger(__name__)


class DisponibilidadRepository(BaseRepository[DisponibilidadORM]):
    """Repositorio para la entidad Disponibilidad."""

    eager_relations = ("interconsulta",)
    resource_name = "disponibilidad"

    def __init__(
        self,
        db: Optional[Session],
        model_class: Type[DisponibilidadORM] = DisponibilidadORM
    ):
        """
        Inicializa el repositorio de disponibilidades.

        Args:
            db: Sesión de SQLAlchemy (o None si no hay conexión)
            model_class: Modelo de disponibilidad a usar
        """
        super().__init__(db, model_class)

    def by_uuid_or_fail(self, uuid: str) -> DisponibilidadORM:
        """
        Busca una disponibilidad por su uuid.

        Si la base de datos devolviera varias coincidencias se usa la primera;
        la columna uuid es única, así que solo se registra una advertencia.

        Args:
            uuid: uuid de la disponibilidad, en cualquier forma que acepte validate_uuid

        Returns:
            La disponibilidad encontrada

        Raises:
            ValidationException: Si el uuid no tiene un formato válido
            NotFoundException: Si no existe una disponibilidad con ese uuid
        """
        uuid = validate_uuid(uuid)
        res = self.find({"uuid": uuid})

        if len(res) > 1:
            logger.warning(f"Se encontraron {len(res)} disponibilidades con uuid {uuid}, se usa la primera")

        return assert_found(res[0] if res else None, self.resource_name, uuid)
