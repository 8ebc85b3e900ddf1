from pydantic import BaseModel, ConfigDict, Field, field_validator
from typing import Optional
from datetime import datetime


class InterconsultaResumen(BaseModel):
    """Datos de la interconsulta incluidos en cada disponibilidad."""
    model_config = ConfigDict(from_attributes=True)

    id: int
    uuid: str
    motivo: Optional[str] = None
    estado: Optional[str] = None


class DisponibilidadBase(BaseModel):
    fecha_inicio: datetime
    fecha_fin: datetime
    disponible: bool = True
    nota: Optional[str] = Field(None, max_length=255)
    nid_interconsulta: Optional[int] = Field(None, ge=1)


class DisponibilidadCreate(DisponibilidadBase):
    """Crear una nueva disponibilidad."""
    pass


class DisponibilidadUpdate(BaseModel):
    """Actualizar una disponibilidad existente."""
    fecha_inicio: Optional[datetime] = None
    fecha_fin: Optional[datetime] = None
    disponible: Optional[bool] = None
    nota: Optional[str] = Field(None, max_length=255)
    nid_interconsulta: Optional[int] = Field(None, ge=1)

    @field_validator("fecha_inicio", "fecha_fin", "disponible")
    @classmethod
    def rechazar_nulos(cls, v):
        """Estos campos se pueden omitir, pero no enviar como null."""
        if v is None:
            raise ValueError("El campo no puede ser null")
        return v


class Disponibilidad(DisponibilidadBase):
    """Modelo de respuesta de Disponibilidad."""
    model_config = ConfigDict(from_attributes=True)

    id: int
    uuid: str
    interconsulta: Optional[InterconsultaResumen] = None
