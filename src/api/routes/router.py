"""Agregador de rotas: registra todos os sub-routers.

Uso:
    from api.routes import create_api_router

    app = FastAPI()
    app.include_router(create_api_router())
"""

from __future__ import annotations

from fastapi import APIRouter

from api.routes.auth.router import router as auth_router
from api.routes.calendar.router import router as calendar_router
from api.routes.health.router import router as health_router
from api.routes.vapi.webhook import router as vapi_router


def create_api_router() -> APIRouter:
    """Cria router principal com todos os sub-routers registrados.

    Returns:
        APIRouter configurado com todos os endpoints.
    """
    api_router = APIRouter()

    # Health check na raiz
    api_router.include_router(health_router, tags=["health"])

    api_router.include_router(auth_router, prefix="/auth", tags=["auth"])
    api_router.include_router(calendar_router, prefix="/calendar", tags=["calendar"])
    api_router.include_router(vapi_router, prefix="/webhook/vapi", tags=["vapi"])

    return api_router
