"""
===============================================================================
CACHED SOURCE (Base de adapters de fuentes externas)
===============================================================================

Algoritmo común (GitHub, LinkedIn):
    1) clave = "<namespace>:<identifier>"
    2) hit  -> devolver el valor normalizado cacheado
    3) miss -> un request al proveedor (cliente HTTP)
    4) falla -> SourceUnavailableError propaga; NO se cachea nada
    5) éxito -> normalizar, cachear, devolver

Colaboradores:
    - domain.cache.SourceCache (inyectado por el container)
===============================================================================
"""

from __future__ import annotations

from typing import Any, Callable

from ....crosscutting.logger import logger
from ....domain.cache import SourceCache, cache_key


class CachedSource:
    """Base con el lookup/populate del cache TTL."""

    def __init__(self, cache: SourceCache) -> None:
        self._cache = cache

    def _cached(
        self, namespace: str, identifier: str, loader: Callable[[], Any]
    ) -> Any:
        key = cache_key(namespace, identifier)

        cached = self._cache.get(key)
        if cached is not None:
            logger.debug("Source cache hit", extra={"cache_key": key})
            return cached

        # R: si loader lanza, no se escribe el cache (sin negative caching).
        value = loader()
        self._cache.set(key, value)
        return value
