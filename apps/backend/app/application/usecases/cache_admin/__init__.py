"""Cache administration use cases."""

from .clear_source_cache import (  # noqa: F401
    CacheTarget,
    ClearSourceCacheUseCase,
    GetCacheStatsUseCase,
)

__all__ = ["CacheTarget", "ClearSourceCacheUseCase", "GetCacheStatsUseCase"]
