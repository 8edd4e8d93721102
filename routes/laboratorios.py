"""
Rutas de Laboratorio: /api/laboratorios, filtro por tipo.
"""

from descriptors import LABORATORIO
from routes.base_router import create_crud_router

router = create_crud_router(LABORATORIO)
