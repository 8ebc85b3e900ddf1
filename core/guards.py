"""
Validaciones previas que usan los repositorios antes de tocar la base de datos.

Son funciones puras: no guardan estado y se pueden probar sin un repositorio.
"""

import re
from typing import Any, Optional, Type, TypeVar
from uuid import UUID

from core.exceptions import (
    NotFoundException,
    PreconditionException,
    ValidationException,
)

T = TypeVar('T')

_UUID_HEX = r"[0-9a-f]{8}-[0-9a-f]{4}-[0-9a-f]{4}-[0-9a-f]{4}-[0-9a-f]{12}"
#solo la forma con guiones, con o sin llaves
_UUID_SHAPE = re.compile(rf"{_UUID_HEX}|\{{{_UUID_HEX}\}}", re.IGNORECASE)


def assert_is_updatable(entity: Any, resource: str = "disponibilidad") -> None:
    """
    Valida que la entidad ya tenga id, es decir, que esté guardada en base de datos.

    Args:
        entity: Entidad a validar
        resource: Nombre del recurso para el mensaje de error

    Raises:
        PreconditionException: Si la entidad no tiene id
    """
    if getattr(entity, "id", None) is None:
        raise PreconditionException(
            message=f"No se puede actualizar la {resource}",
            details={"resource": resource},
        )


def assert_found(value: Optional[T], resource: str = "disponibilidad", identifier: Optional[str] = None) -> T:
    """
    Valida que el resultado de una búsqueda exista.

    Args:
        value: Resultado de la búsqueda (None si no hubo coincidencias)
        resource: Nombre del recurso para el mensaje de error
        identifier: Identificador buscado

    Returns:
        El mismo valor, ya sin None

    Raises:
        NotFoundException: Si el valor es None
    """
    if value is None:
        raise NotFoundException(resource=resource, identifier=identifier)
    return value


def validate_uuid(value: Any, field_name: str = "uuid") -> str:
    """
    Valida que una cadena sea un UUID en formato textual con guiones.

    Acepta mayúsculas y llaves; devuelve siempre la forma canónica en
    minúsculas, que es como se guardan los uuid.

    Args:
        value: Cadena a validar
        field_name: Nombre del campo para mensajes de error

    Returns:
        El UUID en forma canónica

    Raises:
        ValidationException: Si el valor no es un UUID válido
    """
    try:
        if not _UUID_SHAPE.fullmatch(value):
            raise ValueError(value)
        return str(UUID(value))
    except (ValueError, AttributeError, TypeError):
        raise ValidationException(
            message=f"{field_name} debe ser un UUID válido",
            field=field_name,
            details={"value": str(value)},
        )


def assert_is_instance(value: Any, model_class: Type[Any]) -> None:
    """Falla si el valor recibido no es una instancia del modelo esperado."""
    if not isinstance(value, model_class):
        raise TypeError(f"No se recibió un modelo de {model_class.__name__}")
