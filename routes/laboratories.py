"""
Rutas de Laboratory: /api/laboratories/id/{id}, filtro por state.
"""

from descriptors import LABORATORY
from routes.base_router import create_crud_router

router = create_crud_router(LABORATORY)
