from datetime import datetime, timezone
from uuid import uuid4

from sqlalchemy import Column, String, Integer, DateTime, ForeignKey, Boolean
from sqlalchemy.orm import declarative_base, relationship

Base = declarative_base()


def gen_uuid_str():
    return str(uuid4())


#ORM: Interconsultas (solicitudes de asesoría)
class InterconsultaORM(Base):
    __tablename__ = "interconsultas"
    id = Column("id_interconsulta", Integer, primary_key=True, autoincrement=True)
    uuid = Column(String(36), unique=True, nullable=False, default=gen_uuid_str)
    motivo = Column(String(200))
    estado = Column(String(20), default="pendiente")
    fecha_solicitud = Column(DateTime, default=lambda: datetime.now(timezone.utc))


#ORM: Disponibilidades
class DisponibilidadORM(Base):
    """
    Franja horaria disponible asociada a una interconsulta.

    El id interno lo asigna la base de datos al guardar por primera vez;
    mientras sea None la disponibilidad es nueva y no se puede actualizar.
    """
    __tablename__ = "disponibilidades"
    #columna en DB: id_disponibilidad, atributo python: id
    id = Column("id_disponibilidad", Integer, primary_key=True, autoincrement=True)
    uuid = Column(String(36), unique=True, nullable=True, default=gen_uuid_str)
    fecha_inicio = Column(DateTime, nullable=False)
    fecha_fin = Column(DateTime, nullable=False)
    disponible = Column(Boolean, default=True, nullable=False)
    nota = Column(String(255), nullable=True)
    nid_interconsulta = Column(Integer, ForeignKey("interconsultas.id_interconsulta"), nullable=True)

    #Relationship: interconsulta (nidInterconsulta), se carga siempre desde el repositorio
    interconsulta = relationship("InterconsultaORM", lazy="select")

    def __repr__(self):
        return f"<Disponibilidad {self.id} {self.uuid}>"


#ORM: Aula (solo forma de almacenamiento)
class AulaORM(Base):
    __tablename__ = "aula"
    id = Column(Integer, primary_key=True, autoincrement=True, nullable=False)
    edificio = Column(String(100), nullable=False)
    no_asignacion = Column("no_asignacion", String(50), nullable=False)
    nota = Column(String(255), nullable=True)


__all__ = [
    "Base",
    "InterconsultaORM",
    "DisponibilidadORM",
    "AulaORM",
]
