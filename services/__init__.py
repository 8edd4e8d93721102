"""
Capa de servicio para la lógica de negocio.
Este paquete contiene el servicio CRUD genérico que implementa la lógica de
negocio y orquesta las operaciones del repositorio.
"""

from .crud_service import CrudService

__all__ = [
    "CrudService",
]
