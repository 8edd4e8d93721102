""" Utilidades principales y componentes compartidos para la aplicación.

Este paquete contiene:

- Excepciones personalizadas
- Descriptor de recurso
- Utilidades de validación
- Clasificación de errores de integridad
"""

from .exceptions import (
    AppException,
    BadRequestException,
    NotFoundException,
    ValidationException,
    DuplicateException,
    DatabaseException,
)
from .resource import ResourceDescriptor
from .validation import (
    errors_to_field_map,
    validate_payload,
)
from .integrity import (
    IntegrityKind,
    classify_integrity_error,
    is_unique_violation,
)

__all__ = [
    # Excepciones
    "AppException",
    "BadRequestException",
    "NotFoundException",
    "ValidationException",
    "DuplicateException",
    "DatabaseException",
    # recursos
    "ResourceDescriptor",
    # validación
    "errors_to_field_map",
    "validate_payload",
    # integridad
    "IntegrityKind",
    "classify_integrity_error",
    "is_unique_violation",
]
