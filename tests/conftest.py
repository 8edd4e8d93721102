"""
Configuración de fixtures para pytest.

Este módulo contiene fixtures reutilizables para todos los tests.
"""

import pytest
import os
from typing import Generator, Dict, Any
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker, Session
from sqlalchemy.pool import StaticPool
from fastapi.testclient import TestClient

# Configurar para usar base de datos en memoria para tests
os.environ["DATABASE_URL"] = "sqlite:///:memory:"

from main import app
from database.db import get_db, register_sqlite_functions
from database.models import Base, LaboratorioORM, LaboratoryORM, SampleORM


# ==================== Database Fixtures ====================

@pytest.fixture(scope="function")
def db_engine():
    """Create an in-memory SQLite database engine for testing."""
    engine = create_engine(
        "sqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    register_sqlite_functions(engine)
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


# ==================== Laboratorio Fixtures ====================

@pytest.fixture
def laboratorio_data() -> Dict[str, Any]:
    """Sample laboratorio data for testing."""
    return {
        "nombre": "Laboratorio Central",
        "descripcion": "Análisis de sangre rutinarios",
        "tipo": "Hematologia",
        "capacidad": 120,
        "estado": "ACTIVO",
        "tipoAnalisis": "Hemograma",
    }


@pytest.fixture
def laboratorio_instance(db_session: Session) -> LaboratorioORM:
    """Create a laboratorio in the database."""
    laboratorio = LaboratorioORM(
        nombre="Laboratorio Norte",
        descripcion="Bioquímica clínica",
        tipo="Bioquimica",
        capacidad=80,
        estado="ACTIVO",
        tipo_analisis="Perfil lipídico",
    )
    db_session.add(laboratorio)
    db_session.commit()
    db_session.refresh(laboratorio)
    return laboratorio


# ==================== Laboratory Fixtures ====================

@pytest.fixture
def laboratory_data() -> Dict[str, Any]:
    """Sample laboratory data for testing."""
    return {
        "name": "Hemato",
        "description": "Sangre",
        "state": "ACTIVO",
    }


@pytest.fixture
def laboratory_instance(db_session: Session) -> LaboratoryORM:
    """Create a laboratory in the database."""
    laboratory = LaboratoryORM(
        name="Microbiologia",
        description="Cultivos y antibiogramas",
        state="ACTIVO",
    )
    db_session.add(laboratory)
    db_session.commit()
    db_session.refresh(laboratory)
    return laboratory


# ==================== Sample Fixtures ====================

@pytest.fixture
def sample_data() -> Dict[str, Any]:
    """Sample (muestra) data for testing."""
    return {
        "code": "S0001",
        "description": "Tubo rojo",
        "technician": "T",
        "laboratory": "L",
    }


@pytest.fixture
def sample_instance(db_session: Session) -> SampleORM:
    """Create a sample in the database."""
    sample = SampleORM(
        code="M-2024-001",
        description="Tubo lila EDTA",
        technician="Ana Torres",
        laboratory="Hematologia",
    )
    db_session.add(sample)
    db_session.commit()
    db_session.refresh(sample)
    return sample
