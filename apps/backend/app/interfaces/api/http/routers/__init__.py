"""
===============================================================================
TARJETA CRC — app/interfaces/api/http/routers/__init__.py
===============================================================================

Name:
    Routers Package (HTTP)

Responsibilities:
    - Exponer routers segmentados por feature para ser incluidos por el
      router principal.
    - Mantener importaciones limpias y explícitas.

Collaborators:
    - routers.profiles
    - routers.projects
    - routers.github / routers.linkedin / routers.translation
    - routers.cache
    - routers.admin

Notas:
    - Este archivo NO define endpoints. Solo re-exporta routers.
===============================================================================
"""

from .admin import router as admin_router
from .cache import router as cache_router
from .github import router as github_router
from .linkedin import router as linkedin_router
from .profiles import router as profiles_router
from .projects import router as projects_router
from .translation import router as translation_router

__all__ = [
    "admin_router",
    "cache_router",
    "github_router",
    "linkedin_router",
    "profiles_router",
    "projects_router",
    "translation_router",
]
