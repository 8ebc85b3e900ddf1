"""
Excepciones personalizadas para la aplicación.

Cada excepción lleva un ``ErrorKind`` fijado al construirla. La capa HTTP
traduce ese tipo a un código de estado sin inspeccionar el mensaje.
"""

from enum import Enum
from typing import Optional, Any


class ErrorKind(str, Enum):
    """Clasificación de los errores de la aplicación."""
    INVALID_INPUT = "invalid_input"
    NOT_FOUND = "not_found"
    PRECONDITION = "precondition"
    DATABASE = "database"


STATUS_BY_KIND: dict[ErrorKind, int] = {
    ErrorKind.INVALID_INPUT: 400,
    ErrorKind.NOT_FOUND: 404,
    ErrorKind.PRECONDITION: 500,
    ErrorKind.DATABASE: 500,
}


class AppException(Exception):
    """Excepción base para todos los errores de la aplicación."""

    def __init__(
        self,
        message: str,
        kind: ErrorKind,
        details: Optional[dict[str, Any]] = None,
    ):
        self.message = message
        self._kind = ErrorKind(kind)
        self.details = details or {}
        super().__init__(self.message)

    @property
    def kind(self) -> ErrorKind:
        return self._kind

    @property
    def status_code(self) -> int:
        """Código HTTP equivalente al tipo de error."""
        return STATUS_BY_KIND[self._kind]


class ValidationException(AppException):
    """Excepción para datos de entrada con formato inválido."""

    def __init__(
        self,
        message: str,
        field: Optional[str] = None,
        details: Optional[dict[str, Any]] = None,
    ):
        if field:
            details = details or {}
            details["field"] = field
        super().__init__(message=message, kind=ErrorKind.INVALID_INPUT, details=details)


class NotFoundException(AppException):
    """Excepción cuando un recurso no se encuentra."""

    def __init__(
        self,
        resource: str,
        identifier: Optional[str] = None,
        details: Optional[dict[str, Any]] = None,
    ):
        message = f"No se encontró la {resource}"
        if identifier:
            message += f": {identifier}"
        super().__init__(message=message, kind=ErrorKind.NOT_FOUND, details=details)


class PreconditionException(AppException):
    """Excepción cuando una operación se invoca sobre un registro sin el estado requerido."""

    def __init__(
        self,
        message: str,
        details: Optional[dict[str, Any]] = None,
    ):
        super().__init__(message=message, kind=ErrorKind.PRECONDITION, details=details)


class DatabaseException(AppException):
    """Excepción para errores de base de datos."""

    def __init__(
        self,
        message: str = "Error de base de datos",
        details: Optional[dict[str, Any]] = None,
    ):
        super().__init__(message=message, kind=ErrorKind.DATABASE, details=details)
