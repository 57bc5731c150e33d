# backend/client_orders/main.py
"""
Punto de entrada principal de la aplicación FastAPI.

Este módulo configura y inicializa la aplicación FastAPI completa,
incluyendo el registro de rutas, los manejadores de errores, la
documentación automática (Swagger en /api-docs) y el ciclo de vida del
gateway de persistencia.

El gateway se crea una sola vez por proceso y se guarda en app.state;
los endpoints lo reciben a través de las dependencias de api/deps.py.
"""

import logging
from contextlib import asynccontextmanager
from typing import Optional

import uvicorn
from fastapi import FastAPI

from client_orders.api.errors import register_exception_handlers
from client_orders.api.router import api_router
from client_orders.core.config import Settings, settings as default_settings
from client_orders.core.logging_config import setup_logging
from client_orders.db.database import create_engine
from client_orders.db.gateway import PersistenceGateway

logger = logging.getLogger(__name__)


def create_app(settings: Optional[Settings] = None, gateway: Optional[PersistenceGateway] = None) -> FastAPI:
    """
    Construye la aplicación.

    Args:
        settings: configuración a usar (por defecto la instancia global)
        gateway: gateway ya construido; si no se indica se crea uno sobre
            settings.SQLALCHEMY_DATABASE_URI

    Returns:
        FastAPI: aplicación lista para servir
    """
    settings = settings or default_settings
    gateway = gateway or PersistenceGateway(create_engine(settings.SQLALCHEMY_DATABASE_URI))

    # ========================================
    # EVENTOS DEL CICLO DE VIDA DE LA APLICACIÓN
    # ========================================

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        await gateway.create_schema()
        logger.info(f"Swagger Docs: {settings.docs_link}")
        try:
            yield
        finally:
            await gateway.dispose()

    app = FastAPI(
        title=settings.PROJECT_NAME,
        description=settings.PROJECT_DESCRIPTION,
        version=settings.PROJECT_VERSION,
        docs_url=settings.DOCS_URL,
        openapi_url=f"{settings.DOCS_URL}/openapi.json",
        redoc_url=None,
        lifespan=lifespan,
    )
    app.state.settings = settings
    app.state.gateway = gateway

    register_exception_handlers(app)
    app.include_router(api_router)

    # Endpoint raíz para verificación básica del estado de la API
    @app.get("/", tags=["Root"])
    async def read_root():
        """
        Health check básico: confirma que el servicio responde.

        Example:
            GET /
            Response: {"message": "Welcome to Client Orders API v1.0.0"}
        """
        return {"message": f"Welcome to {settings.PROJECT_NAME} v{settings.PROJECT_VERSION}"}

    return app


def run() -> None:
    """Arranca el servidor uvicorn con la configuración global."""
    setup_logging(default_settings)
    uvicorn.run(create_app(default_settings), host=default_settings.HOST, port=default_settings.PORT)


if __name__ == "__main__":
    run()
