"""
===============================================================================
TARJETA CRC — schemas/cache.py
===============================================================================

Módulo:
    Schemas HTTP para administración del cache de fuentes
===============================================================================
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel


class CacheClearRes(BaseModel):
    message: str


class CacheStatsRes(BaseModel):
    stats: dict[str, Any]
