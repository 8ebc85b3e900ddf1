"""
Repositorio para la entidad Interconsulta.
Lo usa el servicio de disponibilidades para validar la referencia
nid_interconsulta antes de guardar.
"""

from typing import Optional
from sqlalchemy.orm import Session

from repositories.base_repository import BaseRepository
from database.models import InterconsultaORM


class InterconsultaRepository(BaseRepository[InterconsultaORM]):
    """Repositorio para la entidad Interconsulta."""

    resource_name = "interconsulta"

    def __init__(self, db: Optional[Session]):
        super().__init__(db, InterconsultaORM)

    def exists(self, id_interconsulta: int) -> bool:
        """Indica si hay una interconsulta con ese id."""
        return self.count({"id": id_interconsulta}) > 0
