"""
===============================================================================
TARJETA CRC — app/interfaces/api/http/routers/cache.py
===============================================================================

Name:
    Cache Admin Router

Responsibilities:
    - Invalidar el cache de fuentes por grupo (github | skills | linkedin),
      opcionalmente acotado a un username.
    - Exponer stats del backend de cache.

Collaborators:
    - container.get_clear_source_cache_use_case / get_cache_stats_use_case
    - identity.auth.require_admin

Notas:
    - Idempotente: limpiar un cache vacío responde 200 igual.
===============================================================================
"""

from __future__ import annotations

from app.application.usecases import (
    CacheTarget,
    ClearSourceCacheUseCase,
    GetCacheStatsUseCase,
)
from app.container import get_cache_stats_use_case, get_clear_source_cache_use_case
from app.identity.auth import Principal, require_admin
from fastapi import APIRouter, Depends, Query

from ..schemas.cache import CacheClearRes, CacheStatsRes

router = APIRouter(prefix="/cache", tags=["cache"])


@router.post("/clear/{target}", response_model=CacheClearRes)
def clear_cache(
    target: CacheTarget,
    username: str | None = Query(None, min_length=1),
    use_case: ClearSourceCacheUseCase = Depends(get_clear_source_cache_use_case),
    _admin: Principal = Depends(require_admin),
):
    return CacheClearRes(message=use_case.execute(target, username))


@router.get("/stats", response_model=CacheStatsRes)
def cache_stats(
    use_case: GetCacheStatsUseCase = Depends(get_cache_stats_use_case),
    _admin: Principal = Depends(require_admin),
):
    return CacheStatsRes(stats=use_case.execute())
