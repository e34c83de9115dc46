"""
===============================================================================
TARJETA CRC — router.py (Router raíz / Composición)
===============================================================================

Responsabilidades:
  - Definir el APIRouter raíz que se incluye en FastAPI (app.include_router).
  - Centralizar responses RFC7807 para OpenAPI.
  - Componer routers por feature (profiles/projects/fuentes/cache/admin).

Patrones aplicados:
  - Composition over inheritance: router raíz compone sub-routers.
  - Factory: build_router() para testear composición y evitar side-effects al importar.

Colaboradores:
  - crosscutting.error_responses.OPENAPI_ERROR_RESPONSES
  - routers.* (sub-routers por feature)

Notas:
  - Este router se incluye desde app/api/main.py con prefix="/v1".
===============================================================================
"""

from __future__ import annotations

from fastapi import APIRouter

from ....crosscutting.error_responses import OPENAPI_ERROR_RESPONSES
from .routers import (
    admin_router,
    cache_router,
    github_router,
    linkedin_router,
    profiles_router,
    projects_router,
    translation_router,
)


def build_router() -> APIRouter:
    """Construye el router raíz v1."""
    api_router = APIRouter(responses=OPENAPI_ERROR_RESPONSES)

    # Orden recomendado: core primero, admin al final.
    api_router.include_router(profiles_router)
    api_router.include_router(projects_router)
    api_router.include_router(github_router)
    api_router.include_router(linkedin_router)
    api_router.include_router(translation_router)
    api_router.include_router(cache_router)
    api_router.include_router(admin_router)

    return api_router


router = build_router()

__all__ = ["router", "build_router"]
