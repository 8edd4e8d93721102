"""
Rutas de Sample: /api/samples/id/{id}, filtro por laboratory.
"""

from descriptors import SAMPLE
from routes.base_router import create_crud_router

router = create_crud_router(SAMPLE)
