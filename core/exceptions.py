"""
Excepciones personalizadas para la aplicación.

Estas excepciones proporcionan una forma estructurada de manejar errores de lógica de negocio
y mapearlos a códigos de estado HTTP apropiados en la capa de API.
"""

from typing import Optional, Any


class AppException(Exception):
    """Excepción base para todos los errores de la aplicación."""

    def __init__(
        self,
        message: str,
        status_code: int = 500,
        details: Optional[dict[str, Any]] = None,
    ):
        self.message = message
        self.status_code = status_code
        self.details = details or {}
        super().__init__(self.message)


class BadRequestException(AppException):
    """Excepción cuando el cuerpo de la petición no se puede interpretar."""

    def __init__(
        self,
        message: str = "Cuerpo de la petición inválido",
        details: Optional[dict[str, Any]] = None,
    ):
        super().__init__(message=message, status_code=400, details=details)


class NotFoundException(AppException):
    """Excepción cuando un recurso no se encuentra."""

    def __init__(
        self,
        resource: str,
        identifier: Optional[str] = None,
        details: Optional[dict[str, Any]] = None,
    ):
        message = f"{resource} no encontrado"
        if identifier:
            message += f": {identifier}"
        super().__init__(message=message, status_code=404, details=details)


class ValidationException(AppException):
    """Excepción para errores de validación.

    ``errors`` contiene un mensaje por cada campo que no cumple sus restricciones.
    """

    def __init__(
        self,
        errors: dict[str, str],
        message: str = "Error de validación",
        details: Optional[dict[str, Any]] = None,
    ):
        self.errors = dict(errors)
        details = details or {}
        details["errors"] = self.errors
        super().__init__(message=message, status_code=400, details=details)


class DuplicateException(AppException):
    """Excepción cuando se intenta crear un recurso duplicado."""

    def __init__(
        self,
        resource: str,
        field: Optional[str] = None,
        value: Optional[str] = None,
        details: Optional[dict[str, Any]] = None,
    ):
        message = f"{resource} duplicado (ya existe)"
        if field and value:
            message += f": {field}='{value}'"
        super().__init__(message=message, status_code=409, details=details)


class DatabaseException(AppException):
    """Excepción para errores de base de datos."""

    def __init__(
        self,
        message: str = "Error de base de datos",
        details: Optional[dict[str, Any]] = None,
    ):
        super().__init__(message=message, status_code=500, details=details)
