from .db import (
    SessionLocal,
    create_tables,
    engine,
    get_db,
    get_database_url,
    InterconsultaORM,
    DisponibilidadORM,
    AulaORM,
)

__all__ = [
    "SessionLocal",
    "create_tables",
    "engine",
    "get_db",
    "get_database_url",
    "InterconsultaORM",
    "DisponibilidadORM",
    "AulaORM",
]
