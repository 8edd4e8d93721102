from .db import (
    SessionLocal,
    check_connection,
    create_tables,
    engine,
    get_database_url,
    get_db,
    register_sqlite_functions,
)
from .models import (
    Base,
    LaboratorioORM,
    LaboratoryORM,
    SampleORM,
)

__all__ = [
    "SessionLocal",
    "check_connection",
    "create_tables",
    "engine",
    "get_database_url",
    "get_db",
    "register_sqlite_functions",
    "Base",
    "LaboratorioORM",
    "LaboratoryORM",
    "SampleORM",
]
