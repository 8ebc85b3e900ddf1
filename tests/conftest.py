"""
Configuración de fixtures para pytest.

Este módulo contiene fixtures reutilizables para todos los tests.
"""

import pytest
import os
from typing import Generator, Dict, Any
from datetime import datetime, timedelta
from sqlalchemy import create_engine, event
from sqlalchemy.orm import sessionmaker, Session
from sqlalchemy.pool import StaticPool
from fastapi.testclient import TestClient

# Configurar para usar base de datos en memoria para tests
os.environ["DATABASE_URL"] = "sqlite:///:memory:"

from main import app
from database.db import get_db
from database.models import Base, InterconsultaORM, DisponibilidadORM


# ==================== Database Fixtures ====================

@pytest.fixture(scope="function")
def db_engine():
    """Create an in-memory SQLite database engine for testing."""
    engine = create_engine(
        "sqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )

    # Enable foreign keys for SQLite
    @event.listens_for(engine, "connect")
    def set_sqlite_pragma(dbapi_conn, connection_record):
        cursor = dbapi_conn.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()

    Base.metadata.create_all(bind=engine)
    yield engine
    Base.metadata.drop_all(bind=engine)
    engine.dispose()


@pytest.fixture(scope="function")
def db_session(db_engine) -> Generator[Session, None, None]:
    """Create a new database session for a test."""
    TestingSessionLocal = sessionmaker(
        autocommit=False,
        autoflush=False,
        bind=db_engine
    )
    session = TestingSessionLocal()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture(scope="function")
def client(db_session: Session) -> Generator[TestClient, None, None]:
    """Create a test client with database session override."""
    def override_get_db():
        try:
            yield db_session
        finally:
            pass

    app.dependency_overrides[get_db] = override_get_db

    with TestClient(app) as test_client:
        yield test_client

    app.dependency_overrides.clear()


# ==================== Interconsulta Fixtures ====================

@pytest.fixture
def interconsulta_instance(db_session: Session) -> InterconsultaORM:
    """Create an interconsulta in the database."""
    interconsulta = InterconsultaORM(
        uuid="aaaaaaaa-aaaa-4aaa-8aaa-aaaaaaaaaaaa",
        motivo="Asesoría de cálculo",
        estado="pendiente",
    )
    db_session.add(interconsulta)
    db_session.commit()
    db_session.refresh(interconsulta)
    return interconsulta


# ==================== Disponibilidad Fixtures ====================

@pytest.fixture
def disponibilidad_data(interconsulta_instance: InterconsultaORM) -> Dict[str, Any]:
    """Sample disponibilidad data for testing."""
    inicio = datetime(2026, 11, 3, 10, 0, 0)
    return {
        "fecha_inicio": inicio,
        "fecha_fin": inicio + timedelta(hours=1),
        "disponible": True,
        "nota": "Sala de tutorías",
        "nid_interconsulta": interconsulta_instance.id,
    }


@pytest.fixture
def disponibilidad_instance(
    db_session: Session,
    disponibilidad_data: Dict[str, Any]
) -> DisponibilidadORM:
    """Create a disponibilidad in the database."""
    disponibilidad = DisponibilidadORM(
        uuid="cccccccc-cccc-4ccc-8ccc-cccccccccccc",
        **disponibilidad_data,
    )
    db_session.add(disponibilidad)
    db_session.commit()
    db_session.refresh(disponibilidad)
    return disponibilidad
