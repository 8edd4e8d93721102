"""
Tipos y modelos comunes de la API.

Estos modelos proporcionan respuestas consistentes y estandarizadas
para todos los endpoints de la API.
"""
from typing import Annotated, Any, Optional
from datetime import datetime, timezone

from pydantic import BaseModel, BeforeValidator, Field
from pydantic_core import PydanticCustomError


ESTADO_PATTERN = r"^(ACTIVO|INACTIVO)$"


def _no_vacio(value: Any) -> Any:
    """Rechaza null, cadena vacía y cadenas con solo espacios."""
    if value is None or (isinstance(value, str) and not value.strip()):
        raise PydanticCustomError("blank", "El campo no puede estar vacío")
    return value


#texto obligatorio: no admite null, vacío ni solo espacios
TextoRequerido = Annotated[str, BeforeValidator(_no_vacio)]


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class ErrorResponse(BaseModel):
    """Respuesta estándar de error."""
    detail: Any = Field(..., description="Mensaje de error o mapa campo -> mensaje")


class HealthCheckResponse(BaseModel):
    """Respuesta del health check."""
    status: str = Field(..., description="Estado general (healthy/unhealthy)")
    service: str = Field(..., description="Nombre del servicio")
    version: str = Field(..., description="Versión de la API")
    database: str = Field(..., description="Estado de la base de datos")
    environment: str = Field(..., description="Entorno (production/development)")
    timestamp: datetime = Field(default_factory=_utcnow)


def create_error_detail(message: str, errors: Optional[dict] = None) -> Any:
    """Helper para construir el ``detail`` de una respuesta de error."""
    if errors:
        return {"message": message, "errors": errors}
    return message
