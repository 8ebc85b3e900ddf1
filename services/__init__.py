"""
Capa de servicio para la lógica de negocio.
Este paquete contiene clases de servicio que implementan la lógica de negocio
y coordinan las operaciones del repositorio.
"""

from .disponibilidad_service import DisponibilidadService

__all__ = [
    "DisponibilidadService",
]
