"""
Manejadores de excepciones a nivel de aplicación.

Cubren los errores que FastAPI detecta antes de llegar a las rutas
(identidad de la ruta inválida, JSON mal formado) y cualquier
``AppException`` que escape de una ruta.
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from config import settings
from core.exceptions import AppException, DuplicateException
from models.common import create_error_detail

logger = logging.getLogger(__name__)


async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """400 Bad Request para peticiones mal formadas."""
    errors = {}
    for error in exc.errors():
        if error.get("type") == "json_invalid":
            logger.info("JSON mal formado en %s %s", request.method, request.url.path)
            return JSONResponse(
                status_code=status.HTTP_400_BAD_REQUEST,
                content={"detail": "El cuerpo de la petición no es un JSON válido"},
            )
        loc = [str(part) for part in error.get("loc", ()) if part not in ("path", "body", "query")]
        errors.setdefault(".".join(loc) or "request", error.get("msg", "Valor inválido"))

    logger.info("Petición inválida en %s %s: %s", request.method, request.url.path, errors)
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"detail": create_error_detail("Petición inválida", errors)},
    )


async def app_exception_handler(request: Request, exc: AppException) -> JSONResponse:
    """Respuesta para ``AppException`` no convertidas por la ruta."""
    status_code = exc.status_code
    if isinstance(exc, DuplicateException):
        status_code = settings.duplicate_status_code
    if status_code >= 500:
        logger.error("AppException en %s %s: %s", request.method, request.url.path, exc.message)
    return JSONResponse(status_code=status_code, content={"detail": exc.message})


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.add_exception_handler(AppException, app_exception_handler)
