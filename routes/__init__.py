from .laboratorios import router as laboratorios_router
from .laboratories import router as laboratories_router
from .samples import router as samples_router

__all__ = [
    "laboratorios_router",
    "laboratories_router",
    "samples_router",
]
