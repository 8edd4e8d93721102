"""
Clasificación de errores de integridad de SQLAlchemy.

Permite distinguir una violación de unicidad (clave de duplicado) de otras
violaciones (NOT NULL, CHECK) sin exponer los mensajes internos del motor.
"""
import logging
from enum import Enum

from sqlalchemy.exc import IntegrityError

logger = logging.getLogger(__name__)


class IntegrityKind(str, Enum):
    UNIQUE = "unique"
    NOT_NULL = "not_null"
    CHECK = "check"
    UNKNOWN = "unknown"


# https://www.postgresql.org/docs/current/errcodes-appendix.html
PGCODE_KIND_MAP = {
    "23505": IntegrityKind.UNIQUE,
    "23502": IntegrityKind.NOT_NULL,
    "23514": IntegrityKind.CHECK,
}

#fragmentos de mensaje de SQLite / Oracle / MySQL
MESSAGE_KIND_MAP = (
    (("unique constraint", "duplicate", "ora-00001"), IntegrityKind.UNIQUE),
    (("not null", "ora-01400"), IntegrityKind.NOT_NULL),
    (("check constraint", "ora-02290"), IntegrityKind.CHECK),
)


def classify_integrity_error(error: IntegrityError) -> IntegrityKind:
    """Determina el tipo de violación de integridad."""
    orig = getattr(error, "orig", None)
    pgcode = getattr(orig, "pgcode", None)
    if pgcode in PGCODE_KIND_MAP:
        return PGCODE_KIND_MAP[pgcode]

    msg = str(orig if orig is not None else error).lower()
    for keywords, kind in MESSAGE_KIND_MAP:
        if any(keyword in msg for keyword in keywords):
            return kind

    logger.debug("IntegrityError no clasificado: %s", msg)
    return IntegrityKind.UNKNOWN


def is_unique_violation(error: IntegrityError) -> bool:
    return classify_integrity_error(error) is IntegrityKind.UNIQUE
