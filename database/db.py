"""módulo de base de datos con manejo de errores y configuración centralizada."""
from typing import Any, Dict, Generator
import logging

from sqlalchemy import create_engine, event, text
from sqlalchemy.orm import sessionmaker, Session
from sqlalchemy.exc import SQLAlchemyError

# import ORM classes and Base from models.py
from .models import Base

#import configuration
from config import settings

logger = logging.getLogger(__name__)


def _engine_options(database_url: str) -> Dict[str, Any]:
    """Opciones del engine según el motor de base de datos."""
    if database_url.startswith("sqlite"):
        #los workers de FastAPI usan hilos distintos
        return {"connect_args": {"check_same_thread": False}}
    return {
        "pool_pre_ping": True,  #verifica conexiones antes de usarlas
        "pool_recycle": 3600,   #recicla conexiones cada hora
    }


def _unicode_lower(value):
    return value.lower() if isinstance(value, str) else value


def register_sqlite_functions(engine) -> None:
    """Sustituye ``lower`` en SQLite por una versión Unicode.

    El ``lower`` nativo de SQLite solo convierte ASCII; los índices únicos
    de clave de duplicado deben plegar igual que ``str.lower``.
    """
    if engine.dialect.name != "sqlite":
        return

    @event.listens_for(engine, "connect")
    def set_sqlite_functions(dbapi_conn, connection_record):
        dbapi_conn.create_function("lower", 1, _unicode_lower, deterministic=True)


#engine / session con configuración centralizada
engine = create_engine(
    settings.database_url,
    echo=settings.debug_mode,
    future=True,
    **_engine_options(settings.database_url)
)
register_sqlite_functions(engine)
SessionLocal = sessionmaker(bind=engine, autoflush=False, autocommit=False)


def get_db() -> Generator[Session, None, None]:
    """dependencia de FastAPI que provee una sesión por request.

    Yields:
        Session: Sesión de SQLAlchemy

    Nota:
        - Hace rollback automático si hay excepciones SQLAlchemy
        - Cierra la sesión de forma segura
    """
    db = SessionLocal()
    try:
        yield db
    except SQLAlchemyError as e:
        logger.error("Error de base de datos en sesión: %s", e)
        db.rollback()
        raise
    finally:
        db.close()


def create_tables() -> None:
    """Crear tablas ORM en la base de datos.

    Raises:
        SQLAlchemyError: Si hay error al crear las tablas
    """
    try:
        Base.metadata.create_all(bind=engine)
        logger.info("Tablas de base de datos creadas/verificadas exitosamente")
    except SQLAlchemyError as e:
        logger.error("Error al crear tablas: %s", e, exc_info=True)
        raise


def check_connection() -> bool:
    """Ejecuta un SELECT 1 contra la base de datos."""
    try:
        with engine.connect() as conn:
            conn.execute(text("SELECT 1"))
        return True
    except SQLAlchemyError as e:
        logger.error("Error de conexión a BD: %s", e)
        return False


def get_database_url() -> str:
    """Obtiene la URL de la base de datos (sin credenciales sensibles)."""
    return engine.url.render_as_string(hide_password=True)
