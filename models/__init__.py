from .laboratorios import Laboratorio, LaboratorioCreate
from .laboratories import Laboratory, LaboratoryCreate
from .samples import Sample, SampleCreate
from .common import (
    ErrorResponse,
    HealthCheckResponse,
    TextoRequerido,
    create_error_detail,
)

__all__ = [
    # Laboratorios
    "Laboratorio", "LaboratorioCreate",
    # Laboratories
    "Laboratory", "LaboratoryCreate",
    # Samples
    "Sample", "SampleCreate",
    # Common
    "ErrorResponse",
    "HealthCheckResponse",
    "TextoRequerido",
    "create_error_detail",
]
