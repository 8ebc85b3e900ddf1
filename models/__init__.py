from .disponibilidades import (
    Disponibilidad,
    DisponibilidadCreate,
    DisponibilidadUpdate,
    InterconsultaResumen,
)

__all__ = [
    "Disponibilidad",
    "DisponibilidadCreate",
    "DisponibilidadUpdate",
    "InterconsultaResumen",
]
