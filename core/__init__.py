""" Utilidades principales y componentes compartidos para la aplicación.

Este paquete contiene:

- Excepciones personalizadas clasificadas por tipo
- Validaciones previas de los repositorios
- Funciones auxiliares de paginación
"""

from .exceptions import (
    ErrorKind,
    AppException,
    ValidationException,
    NotFoundException,
    PreconditionException,
    DatabaseException,
)
from .guards import (
    assert_is_updatable,
    assert_found,
    validate_uuid,
    assert_is_instance,
)
from .pagination import (
    PaginationMeta,
    calculate_pagination_meta,
    create_paginated_response,
    calculate_skip,
    page_to_limit,
    split_limit,
    pagination_window,
)

__all__ = [
    # Excepciones
    "ErrorKind",
    "AppException",
    "ValidationException",
    "NotFoundException",
    "PreconditionException",
    "DatabaseException",
    # validaciones
    "assert_is_updatable",
    "assert_found",
    "validate_uuid",
    "assert_is_instance",
    # paginacion
    "PaginationMeta",
    "calculate_pagination_meta",
    "create_paginated_response",
    "calculate_skip",
    "page_to_limit",
    "split_limit",
    "pagination_window",
]
