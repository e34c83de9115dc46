"""
===============================================================================
USE CASE: Clear Source Cache
===============================================================================

Business Goal:
    Permitir a un operador invalidar el cache de una fuente (github, skills,
    linkedin), completo o para un solo username.

Reglas:
    - Idempotente: limpiar algo vacío o inexistente también es éxito.
    - "github" cubre profile + repos + admin repos; "skills" es aparte.
===============================================================================
"""

from __future__ import annotations

from enum import Enum
from typing import Any

from ....crosscutting.logger import logger
from ....domain.cache import (
    GITHUB_NAMESPACES,
    GITHUB_SKILLS,
    LINKEDIN_PROFILE,
    SourceCache,
    cache_key,
)


class CacheTarget(str, Enum):
    GITHUB = "github"
    SKILLS = "skills"
    LINKEDIN = "linkedin"


_NAMESPACES: dict[CacheTarget, tuple[str, ...]] = {
    CacheTarget.GITHUB: GITHUB_NAMESPACES,
    CacheTarget.SKILLS: (GITHUB_SKILLS,),
    CacheTarget.LINKEDIN: (LINKEDIN_PROFILE,),
}

_MESSAGES: dict[CacheTarget, str] = {
    CacheTarget.GITHUB: "GitHub cache cleared",
    CacheTarget.SKILLS: "Skills cache cleared",
    CacheTarget.LINKEDIN: "LinkedIn cache cleared",
}


class ClearSourceCacheUseCase:
    def __init__(self, cache: SourceCache) -> None:
        self._cache = cache

    def execute(self, target: CacheTarget, username: str | None = None) -> str:
        for namespace in _NAMESPACES[target]:
            if username:
                self._cache.delete(cache_key(namespace, username))
            else:
                self._cache.clear(namespace)

        logger.info(
            "Source cache cleared",
            extra={"target": target.value, "scoped": bool(username)},
        )
        return _MESSAGES[target]


class GetCacheStatsUseCase:
    def __init__(self, cache: SourceCache) -> None:
        self._cache = cache

    def execute(self) -> dict[str, Any]:
        return self._cache.stats()
