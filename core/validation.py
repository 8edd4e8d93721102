"""
Validación de cuerpos de petición contra el esquema de un recurso.

Convierte los errores de pydantic en un mapa ``campo -> mensaje`` con un
único mensaje por campo. Nunca hay aceptación parcial: si algún campo
falla, se lanza ``ValidationException`` y el registro no llega al servicio.
"""

import logging
from typing import Any, Dict, Type

from pydantic import BaseModel, ValidationError

from core.exceptions import ValidationException

logger = logging.getLogger(__name__)


MESSAGES = {
    "missing": "El campo es obligatorio",
    "blank": "El campo no puede estar vacío",
    "string_type": "Debe ser un texto",
    "string_too_short": "Debe tener al menos {min_length} caracteres",
    "string_too_long": "Debe tener como máximo {max_length} caracteres",
    "string_pattern_mismatch": "Valor no permitido",
    "int_type": "Debe ser un número entero",
    "int_parsing": "Debe ser un número entero",
    "int_from_float": "Debe ser un número entero",
    "greater_than_equal": "El valor mínimo es {ge}",
    "less_than_equal": "El valor máximo es {le}",
}

#mensajes específicos por campo (tienen prioridad sobre MESSAGES)
FIELD_MESSAGES = {
    ("estado", "string_pattern_mismatch"): "El estado debe ser ACTIVO o INACTIVO",
    ("state", "string_pattern_mismatch"): "El estado debe ser ACTIVO o INACTIVO",
}


def _json_name(schema: Type[BaseModel], loc: Any) -> str:
    """Nombre público (JSON) del campo que originó el error."""
    name = str(loc)
    field = schema.model_fields.get(name)
    if field is not None and field.serialization_alias:
        return field.serialization_alias
    return name


def _render(field: str, error: Dict[str, Any]) -> str:
    kind = error.get("type", "")
    if kind in ("int_type", "string_type") and error.get("input") is None:
        return MESSAGES["missing"]
    template = FIELD_MESSAGES.get((field, kind)) or MESSAGES.get(kind)
    if template is None:
        return error.get("msg", "Valor inválido")
    return template.format(**error.get("ctx", {}))


def errors_to_field_map(schema: Type[BaseModel], exc: ValidationError) -> Dict[str, str]:
    """Reduce los errores de pydantic a un mensaje por campo."""
    errors: Dict[str, str] = {}
    for error in exc.errors():
        loc = error.get("loc") or ("__root__",)
        field = _json_name(schema, loc[0])
        #primer error de cada campo
        errors.setdefault(field, _render(field, error))
    return errors


def validate_payload(schema: Type[BaseModel], payload: Dict[str, Any]) -> BaseModel:
    """Valida ``payload`` con ``schema``.

    Returns:
        Instancia del esquema con los datos validados

    Raises:
        ValidationException: con el mapa campo -> mensaje
    """
    try:
        return schema.model_validate(payload)
    except ValidationError as e:
        errors = errors_to_field_map(schema, e)
        logger.info("Validación fallida para %s: %s", schema.__name__, errors)
        raise ValidationException(errors)
