"""
Dependency injection for services and repositories.

This module provides FastAPI dependencies for injecting the generic
CRUD service of a resource into route handlers.
"""

from typing import Callable
from sqlalchemy.orm import Session
from fastapi import Depends

from core.resource import ResourceDescriptor
from database.db import get_db
from repositories.base_repository import BaseRepository
from services.crud_service import CrudService


def get_repository(descriptor: ResourceDescriptor, db: Session) -> BaseRepository:
    """
    Get the repository for a resource.

    Args:
        descriptor: Resource descriptor
        db: Database session

    Returns:
        BaseRepository bound to the resource ORM model
    """
    return BaseRepository(db, descriptor.model)


def get_crud_service(descriptor: ResourceDescriptor, db: Session) -> CrudService:
    """
    Get the CrudService for a resource with its repository injected.
    """
    return CrudService(get_repository(descriptor, db), descriptor)


def crud_service_dependency(descriptor: ResourceDescriptor) -> Callable[..., CrudService]:
    """
    Build the FastAPI dependency that yields the service of ``descriptor``.

    Example:
        ```python
        get_service = crud_service_dependency(LABORATORY)

        @router.get("/")
        def listar(service: CrudService = Depends(get_service)):
            return service.get_all()
        ```
    """
    def _get_service(db: Session = Depends(get_db)) -> CrudService:
        return get_crud_service(descriptor, db)

    _get_service.__name__ = f"get_{descriptor.name.lower()}_service"
    return _get_service
