from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from contextlib import asynccontextmanager
import uvicorn
import logging

from config import settings, configure_logging

from routes import (
    laboratorios_router,
    laboratories_router,
    samples_router,
)
from core.handlers import register_exception_handlers
from database.db import check_connection, create_tables
from models.common import HealthCheckResponse

logger = logging.getLogger(__name__)

# Configurar logging una sola vez al inicio
configure_logging()

@asynccontextmanager
async def lifespan(app: FastAPI):
    """Maneja el ciclo de vida de la aplicación."""
    # Startup
    try:
        create_tables()
    except Exception as e:
        logger.warning("No se pudieron crear tablas en la base de datos: %s", e)
    yield
    # Shutdown

app = FastAPI(
    title=settings.app_name,
    description="Backend administrativo de laboratorios clínicos: laboratorios y muestras.",
    version=settings.app_version,
    docs_url="/docs",
    redoc_url="/redoc",
    lifespan=lifespan,
    debug=settings.debug_mode
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins_list,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

register_exception_handlers(app)

@app.get("/")
async def root():
    """Endpoint raíz con información de la API."""
    return {
        "message": f"{settings.app_name} - Gestión de Laboratorios Clínicos",
        "version": settings.app_version,
        "status": "active",
        "environment": "production" if settings.is_production else "development",
        "docs": "/docs",
        "redoc": "/redoc"
    }

app.include_router(laboratorios_router)
app.include_router(laboratories_router)
app.include_router(samples_router)

@app.get("/health", response_model=HealthCheckResponse)
def health_check():
    """Health check endpoint con verificación de base de datos."""
    db_status = "connected" if check_connection() else "disconnected"

    return HealthCheckResponse(
        status="healthy" if db_status == "connected" else "unhealthy",
        service=settings.app_name,
        version=settings.app_version,
        database=db_status,
        environment="production" if settings.is_production else "development",
    )

if __name__ == "__main__":
    uvicorn.run(
        app,
        host="0.0.0.0",
        port=8000,
        log_level="info"
    )
