"""
Rutas CRUD genéricas (Controllers) - Layered Architecture.

Este módulo construye el ``APIRouter`` de un recurso a partir de su
descriptor. Toda la lógica de negocio se delega en ``CrudService``.

Responsibilities:
- Parse HTTP requests
- Validate request bodies against the resource schema
- Delegate to service layer
- Format HTTP responses
- Handle errors and status codes
"""

from typing import Any, Callable, List
import logging

from fastapi import APIRouter, Body, Depends, HTTPException, Path, Response, status

from config import settings
from core.exceptions import (
    AppException,
    BadRequestException,
    DuplicateException,
    NotFoundException,
    ValidationException,
)
from core.resource import ResourceDescriptor
from core.validation import validate_payload
from dependencies import crud_service_dependency
from models.common import ErrorResponse, create_error_detail
from services.crud_service import CrudService

logger = logging.getLogger(__name__)

#identidades INTEGER de 64 bits
MAX_ID = 2**63 - 1


# ==================== Exception Handler ====================

def handle_service_exception(e: Exception) -> HTTPException:
    """Convert service layer exceptions to HTTP exceptions."""
    if isinstance(e, ValidationException):
        return HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=create_error_detail(e.message, e.errors)
        )
    elif isinstance(e, NotFoundException):
        return HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=e.message
        )
    elif isinstance(e, DuplicateException):
        return HTTPException(
            status_code=settings.duplicate_status_code,
            detail=e.message
        )
    elif isinstance(e, BadRequestException):
        return HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=e.message
        )
    elif isinstance(e, AppException):
        if e.status_code >= 500:
            logger.error("Service error: %s", e.message)
        return HTTPException(
            status_code=e.status_code,
            detail=e.message
        )
    else:
        logger.error("Unexpected error: %s", e, exc_info=True)
        return HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Error interno del servidor"
        )


def _run(operation: Callable[[], Any]) -> Any:
    try:
        return operation()
    except AppException as e:
        raise handle_service_exception(e)
    except HTTPException:
        raise
    except Exception as e:
        raise handle_service_exception(e)


def _require_object(payload: Any) -> dict:
    """Rechaza cuerpos vacíos o que no son un objeto JSON."""
    if payload is None:
        raise BadRequestException("El cuerpo de la petición es obligatorio")
    if not isinstance(payload, dict):
        raise BadRequestException("El cuerpo de la petición debe ser un objeto JSON")
    return payload


# ==================== Router Factory ====================

def create_crud_router(descriptor: ResourceDescriptor) -> APIRouter:
    """
    Build the router exposing list, get, create, update, delete and filter
    for ``descriptor``.
    """
    router = APIRouter(prefix=descriptor.prefix, tags=list(descriptor.tags))
    get_service = crud_service_dependency(descriptor)
    name = descriptor.name
    schema = descriptor.schema
    response_schema = descriptor.response_schema
    error_responses = {
        400: {"model": ErrorResponse},
        404: {"model": ErrorResponse},
        409: {"model": ErrorResponse},
    }

    @router.get("", response_model=List[response_schema])
    def listar(service: CrudService = Depends(get_service)):
        """Retorna la colección completa del recurso."""
        logger.info("[GET] Solicitando listado completo de %s", name)
        return _run(service.get_all)

    @router.get(descriptor.item_path, response_model=response_schema, responses=error_responses)
    def obtener_por_id(
        id: int = Path(..., ge=1, le=MAX_ID, description=f"ID del {name}"),
        service: CrudService = Depends(get_service),
    ):
        """Busca un registro por su ID."""
        logger.info("[GET] Buscando %s con ID: %s", name, id)
        return _run(lambda: service.get_by_id(id))

    @router.post(
        "",
        response_model=response_schema,
        status_code=status.HTTP_201_CREATED,
        responses=error_responses,
    )
    def crear(
        payload: Any = Body(None, description=f"Datos del {name}"),
        service: CrudService = Depends(get_service),
    ):
        """Crea un registro nuevo validando sus datos."""
        logger.info("[POST] Creando %s", name)

        def operation():
            data = validate_payload(schema, _require_object(payload))
            return service.create(data)

        return _run(operation)

    @router.put(descriptor.item_path, response_model=response_schema, responses=error_responses)
    def actualizar(
        id: int = Path(..., ge=1, le=MAX_ID, description=f"ID del {name}"),
        payload: Any = Body(None, description=f"Datos del {name}"),
        service: CrudService = Depends(get_service),
    ):
        """Actualiza un registro existente; el ID de la ruta prevalece."""
        logger.info("[PUT] Actualizando %s con ID: %s", name, id)

        def operation():
            data = validate_payload(schema, _require_object(payload))
            return service.update(id, data)

        return _run(operation)

    @router.delete(
        descriptor.item_path,
        status_code=status.HTTP_204_NO_CONTENT,
        response_class=Response,
        responses={404: {"model": ErrorResponse}},
    )
    def eliminar(
        id: int = Path(..., ge=1, le=MAX_ID, description=f"ID del {name}"),
        service: CrudService = Depends(get_service),
    ):
        """Elimina un registro por su ID."""
        logger.info("[DELETE] Eliminando %s con ID: %s", name, id)
        _run(lambda: service.delete(id))
        return Response(status_code=status.HTTP_204_NO_CONTENT)

    @router.get(
        descriptor.filter_route,
        response_model=List[response_schema],
        responses={204: {"description": "Sin resultados"}},
    )
    def buscar_por_filtro(value: str, service: CrudService = Depends(get_service)):
        """Registros cuyo atributo de filtro coincide exactamente con ``value``."""
        logger.info("[GET] Buscando %s por %s: %s", name, descriptor.filter_attribute, value)
        items = _run(lambda: service.find_by_filter(value))
        if not items:
            logger.warning("No se encontraron %s con %s=%s", name, descriptor.filter_attribute, value)
            return Response(status_code=status.HTTP_204_NO_CONTENT)
        return items

    return router
