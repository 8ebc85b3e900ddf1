"""
Tests for the classified exceptions.
"""

import pytest

from core.exceptions import (
    ErrorKind,
    AppException,
    ValidationException,
    NotFoundException,
    PreconditionException,
    DatabaseException,
)


class TestErrorKinds:
    """Each exception carries its kind and the matching status code."""

    @pytest.mark.parametrize("exc, kind, status_code", [
        (ValidationException("uuid inválido", field="uuid"), ErrorKind.INVALID_INPUT, 400),
        (NotFoundException("disponibilidad"), ErrorKind.NOT_FOUND, 404),
        (PreconditionException("No se puede actualizar la disponibilidad"), ErrorKind.PRECONDITION, 500),
        (DatabaseException(), ErrorKind.DATABASE, 500),
    ])
    def test_kind_y_status(self, exc, kind, status_code):
        assert isinstance(exc, AppException)
        assert exc.kind is kind
        assert exc.status_code == status_code

    def test_kind_es_de_solo_lectura(self):
        exc = NotFoundException("disponibilidad")

        with pytest.raises(AttributeError):
            exc.kind = ErrorKind.DATABASE

    def test_kind_desde_cadena(self):
        exc = AppException("error", kind="not_found")

        assert exc.kind is ErrorKind.NOT_FOUND

    def test_validation_exception_guarda_campo(self):
        exc = ValidationException("uuid inválido", field="uuid", details={"value": "x"})

        assert exc.details == {"value": "x", "field": "uuid"}

    def test_not_found_mensaje(self):
        exc = NotFoundException("disponibilidad", identifier="abc")

        assert exc.message == "No se encontró la disponibilidad: abc"
        assert str(exc) == exc.message
