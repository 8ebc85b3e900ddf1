"""
Repositorio base con operaciones CRUD comunes:
Este repositorio genérico proporciona operaciones de base de datos estándar
que se pueden reutilizar en todos los repositorios de entidades
"""

from typing import TypeVar, Generic, List, Optional, Type
from sqlalchemy.orm import Session, joinedload
from sqlalchemy.exc import SQLAlchemyError
import logging

from core.exceptions import DatabaseException, PreconditionException
from core.guards import assert_is_instance, assert_is_updatable
from core.pagination import split_limit, pagination_window

logger = logging.getLogger(__name__)

T = TypeVar('T')


class BaseRepository(Generic[T]):
    """
    Repositorio genérico proporciona operaciones CRUD estándar

    Esta clase debe ser heredada por repositorios de entidades específicos.
    El repositorio no guarda más estado que la sesión y la clase del modelo
    que recibe al construirse.
    """

    #relaciones que se cargan junto con cada lectura
    eager_relations: tuple[str, ...] = ()
    resource_name: str = "entidad"

    def __init__(self, db: Optional[Session], model_class: Type[T]):
        """
        Inicializa el repositorio.

        Args:
            db: Sesión SQLAlchemy. Puede ser None; en ese caso cualquier
                operación que necesite la base de datos falla de inmediato.
            model_class: Clase del modelo ORM para este repositorio
        """
        self.db = db
        self.model_class = model_class

    @property
    def session(self) -> Session:
        """Sesión activa del repositorio."""
        if self.db is None:
            raise PreconditionException(
                message=f"El repositorio de {self.resource_name} no tiene conexión a base de datos"
            )
        return self.db

    def create(self, entity: T) -> T:
        """
        Guarda una entidad nueva.

        Args:
            entity: La entidad a crear

        Returns:
            La entidad guardada, con su id asignado

        Raises:
            TypeError: Si la entidad no es una instancia del modelo del repositorio
        """
        assert_is_instance(entity, self.model_class)
        return self.persist(entity)

    def update(self, entity: T) -> T:
        """
        Actualiza una entidad que ya fue guardada.

        Args:
            entity: La entidad a actualizar

        Returns:
            La entidad actualizada

        Raises:
            PreconditionException: Si la entidad no tiene id
        """
        assert_is_updatable(entity, self.resource_name)
        return self.persist(entity)

    def persist(self, entity: T) -> T:
        """
        Escribe el estado completo de la entidad en la base de datos.

        Inserta o actualiza según tenga o no id, y devuelve la instancia que
        queda asociada a la sesión con las columnas generadas ya cargadas.
        """
        session = self.session
        try:
            persisted = session.merge(entity)
            session.flush()
            session.refresh(persisted)
            return persisted
        except SQLAlchemyError as e:
            logger.error(f"Error persisting {self.model_class.__name__}: {e}")
            session.rollback()
            raise DatabaseException(f"Error al guardar {self.resource_name}")

    def find(self, filters: Optional[dict] = None, pagination: Optional[dict] = None) -> List[T]:
        """
        Busca entidades por igualdad exacta en todos los filtros.

        Args:
            filters: Campo -> valor; sin filtros devuelve todo
            pagination: Diccionario opcional con ``skip`` y ``take``

        Returns:
            Lista de entidades, vacía si no hay coincidencias
        """
        session = self.session
        skip, take = pagination_window(pagination)
        try:
            query = session.query(self.model_class).filter_by(**(filters or {}))

            for relation in self.eager_relations:
                query = query.options(joinedload(getattr(self.model_class, relation)))

            if skip is not None:
                query = query.offset(skip)
            if take is not None:
                query = query.limit(take)

            return query.all()
        except SQLAlchemyError as e:
            logger.error(f"Error finding {self.model_class.__name__} with filters {filters}: {e}")
            raise DatabaseException(f"Error al buscar {self.resource_name}")

    def get(self, filters: dict) -> List[T]:
        """
        Busca entidades usando el campo ``limit`` de los filtros como ventana.

        Args:
            filters: Filtros con ``limit`` = ``[skip, take]``

        Returns:
            Lista de entidades de la ventana pedida

        Raises:
            KeyError: Si los filtros no incluyen ``limit``
        """
        remaining, pagination = split_limit(filters)
        return self.find(remaining, pagination)

    def count(self, filters: Optional[dict] = None) -> int:
        """
        Cuenta las entidades que coinciden con los filtros.

        El campo ``limit`` se descarta: el conteo es siempre del total de
        coincidencias, no del tamaño de la página.

        Args:
            filters: Filtros opcionales, pueden incluir ``limit``

        Returns:
            Número total de coincidencias
        """
        remaining = dict(filters or {})
        remaining.pop("limit", None)
        session = self.session
        try:
            return session.query(self.model_class).filter_by(**remaining).count()
        except SQLAlchemyError as e:
            logger.error(f"Error counting {self.model_class.__name__}: {e}")
            raise DatabaseException(f"Error al contar {self.resource_name}")

    def commit(self) -> None:
        """Realiza el commit de la transacción actual."""
        session = self.session
        try:
            session.commit()
        except SQLAlchemyError as e:
            logger.error(f"Error committing transaction: {e}")
            session.rollback()
            raise DatabaseException("Error al guardar cambios en la base de datos")

    def rollback(self) -> None:
        """Realiza el rollback de la transacción actual."""
        self.session.rollback()
