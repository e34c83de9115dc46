"""
============================================================
TARJETA CRC — app/infrastructure/cache.py
============================================================
Module: Source Cache (TTL por namespace + Backends)

Responsibilities:
  - Cachear respuestas normalizadas de GitHub / LinkedIn para no golpear
    las APIs externas en cada request.
  - Expirar por TTL según el namespace de la clave
    (github_* = 24 h, linkedin_profile = 7 días por defecto).
  - Backends:
      - In-memory (default): LRU + Lock + reloj inyectable.
      - Redis (CACHE_BACKEND=redis): JSON con timestamp + SETEX.
  - Exponer stats simples (hits/misses/expired) y métricas Prometheus.

Collaborators:
  - domain.cache.SourceCache (contrato que implementan los backends)
  - redis-py (backend compartido entre workers)
  - crosscutting.metrics (lookups por namespace/outcome)

Policy / Design Notes:
  - Un entry es válido solo si (now - inserted_at) < ttl. Con edad == ttl
    ya es miss, y se evicta en la lectura.
  - Cache es best-effort: si Redis falla, se considera miss y se loguea.
  - LRU real: en memoria usamos OrderedDict para eviction determinística.
============================================================
"""

from __future__ import annotations

import json
import math
import time
from collections import OrderedDict
from dataclasses import dataclass
from threading import Lock
from typing import Any, Callable, Mapping, Optional

import redis

from ..crosscutting.logger import logger
from ..crosscutting.metrics import record_cache_lookup
from ..domain.cache import (
    GITHUB_ADMIN_REPOS,
    GITHUB_PROFILE,
    GITHUB_REPOS,
    GITHUB_SKILLS,
    KEY_SEPARATOR,
    LINKEDIN_PROFILE,
    namespace_of,
)

Clock = Callable[[], float]

DAY_SECONDS = 24 * 60 * 60


# ============================================================
# Política de TTL por namespace
# ============================================================
@dataclass(frozen=True)
class TTLPolicy:
    """
    TTL (segundos) por namespace.

    Namespaces desconocidos usan `default_ttl_seconds`.
    """

    ttls: Mapping[str, float]
    default_ttl_seconds: float = DAY_SECONDS

    def ttl_for(self, key: str) -> float:
        return float(self.ttls.get(namespace_of(key), self.default_ttl_seconds))

    @classmethod
    def build(
        cls,
        *,
        github_ttl_seconds: float = DAY_SECONDS,
        linkedin_ttl_seconds: float = 7 * DAY_SECONDS,
    ) -> "TTLPolicy":
        if github_ttl_seconds <= 0 or linkedin_ttl_seconds <= 0:
            raise ValueError("ttl_seconds must be > 0")
        return cls(
            ttls={
                GITHUB_PROFILE: github_ttl_seconds,
                GITHUB_SKILLS: github_ttl_seconds,
                GITHUB_REPOS: github_ttl_seconds,
                GITHUB_ADMIN_REPOS: github_ttl_seconds,
                LINKEDIN_PROFILE: linkedin_ttl_seconds,
            },
            default_ttl_seconds=github_ttl_seconds,
        )


# ============================================================
# Entry con timestamp de inserción
# ============================================================
@dataclass(frozen=True, slots=True)
class CacheEntry:
    """
    Entrada de caché.

    Invariante:
      - inserted_at es epoch seconds (según el reloj del backend).
    """

    value: Any
    inserted_at: float

    def is_expired(self, ttl_seconds: float, now: float) -> bool:
        """True si la edad alcanzó el TTL (edad == ttl ya es expirado)."""
        return (now - self.inserted_at) >= ttl_seconds


# ============================================================
# In-memory backend (LRU + TTL por namespace)
# ============================================================
class InMemorySourceCache:
    """
    Caché en memoria con:
      - TTL por namespace (TTLPolicy)
      - Eviction LRU usando OrderedDict
      - Thread-safety con Lock
      - Reloj inyectable (tests de frontera de TTL)

    Nota:
      - Este backend NO comparte estado entre procesos.
    """

    def __init__(
        self,
        *,
        policy: TTLPolicy | None = None,
        max_size: int = 1000,
        clock: Clock = time.time,
    ) -> None:
        if max_size <= 0:
            raise ValueError("max_size must be > 0")

        self._policy = policy or TTLPolicy.build()
        self._max_size = int(max_size)
        self._clock = clock

        self._cache: "OrderedDict[str, CacheEntry]" = OrderedDict()
        self._lock = Lock()

        self._hits = 0
        self._misses = 0
        self._evictions = 0
        self._expired = 0

    def get(self, key: str) -> Optional[Any]:
        now = self._clock()
        namespace = namespace_of(key)

        with self._lock:
            entry = self._cache.get(key)
            if entry is None:
                self._misses += 1
                outcome = "miss"
                value = None
            elif entry.is_expired(self._policy.ttl_for(key), now):
                self._cache.pop(key, None)
                self._expired += 1
                self._misses += 1
                outcome = "expired"
                value = None
            else:
                self._cache.move_to_end(key, last=True)
                self._hits += 1
                outcome = "hit"
                value = entry.value

        record_cache_lookup(namespace, outcome)
        return value

    def set(self, key: str, value: Any) -> None:
        now = self._clock()

        with self._lock:
            if key in self._cache:
                self._cache[key] = CacheEntry(value=value, inserted_at=now)
                self._cache.move_to_end(key, last=True)
                return

            if len(self._cache) >= self._max_size:
                self._cache.popitem(last=False)  # LRU
                self._evictions += 1

            self._cache[key] = CacheEntry(value=value, inserted_at=now)

    def delete(self, key: str) -> None:
        with self._lock:
            self._cache.pop(key, None)

    def clear(self, namespace: str) -> None:
        prefix = f"{namespace}{KEY_SEPARATOR}"
        with self._lock:
            for key in [k for k in self._cache if k.startswith(prefix)]:
                del self._cache[key]

    def stats(self) -> dict[str, Any]:
        with self._lock:
            total = self._hits + self._misses
            return {
                "backend": "in-memory",
                "size": len(self._cache),
                "max_size": self._max_size,
                "hits": self._hits,
                "misses": self._misses,
                "expired": self._expired,
                "evictions": self._evictions,
                "hit_rate": (self._hits / total) if total > 0 else 0.0,
            }


# ============================================================
# Redis backend (JSON + timestamp + TTL nativo)
# ============================================================
class RedisSourceCache:
    """
    Caché Redis de fuentes externas.

    Formato:
      - clave: "portfolio:source:<namespace>:<identifier>"
      - valor: {"value": <json>, "inserted_at": <epoch>}
      - SETEX con ceil(ttl) como red de seguridad; la validez real la decide
        inserted_at para respetar la frontera exacta del TTL.
    """

    CACHE_PREFIX = "portfolio:source:"

    def __init__(
        self,
        *,
        client: "redis.Redis",
        policy: TTLPolicy | None = None,
        clock: Clock = time.time,
    ) -> None:
        self._client = client
        self._policy = policy or TTLPolicy.build()
        self._clock = clock

        self._hits = 0
        self._misses = 0
        self._expired = 0
        self._errors = 0

    @classmethod
    def from_url(cls, redis_url: str, **kwargs: Any) -> "RedisSourceCache":
        if not redis_url:
            raise ValueError("redis_url is required")
        return cls(client=redis.from_url(redis_url, decode_responses=True), **kwargs)

    def _k(self, key: str) -> str:
        return f"{self.CACHE_PREFIX}{key}"

    def get(self, key: str) -> Optional[Any]:
        namespace = namespace_of(key)
        try:
            data = self._client.get(self._k(key))
        except redis.RedisError as exc:
            self._errors += 1
            self._misses += 1
            logger.warning(
                "Redis cache get failed", extra={"cache_key": key, "error": str(exc)}
            )
            record_cache_lookup(namespace, "error")
            return None

        if data is None:
            self._misses += 1
            record_cache_lookup(namespace, "miss")
            return None

        try:
            payload = json.loads(data)
            entry = CacheEntry(
                value=payload["value"], inserted_at=float(payload["inserted_at"])
            )
        except (ValueError, KeyError, TypeError):
            self._errors += 1
            self._misses += 1
            record_cache_lookup(namespace, "error")
            return None

        if entry.is_expired(self._policy.ttl_for(key), self._clock()):
            self._expired += 1
            self._misses += 1
            self.delete(key)
            record_cache_lookup(namespace, "expired")
            return None

        self._hits += 1
        record_cache_lookup(namespace, "hit")
        return entry.value

    def set(self, key: str, value: Any) -> None:
        ttl = max(1, math.ceil(self._policy.ttl_for(key)))
        payload = json.dumps({"value": value, "inserted_at": self._clock()})
        try:
            self._client.setex(self._k(key), ttl, payload)
        except redis.RedisError as exc:
            self._errors += 1
            logger.warning(
                "Redis cache set failed", extra={"cache_key": key, "error": str(exc)}
            )

    def delete(self, key: str) -> None:
        try:
            self._client.delete(self._k(key))
        except redis.RedisError as exc:
            self._errors += 1
            logger.warning(
                "Redis cache delete failed",
                extra={"cache_key": key, "error": str(exc)},
            )

    def clear(self, namespace: str) -> None:
        pattern = f"{self.CACHE_PREFIX}{namespace}{KEY_SEPARATOR}*"
        try:
            keys = list(self._client.scan_iter(match=pattern))
            if keys:
                self._client.delete(*keys)
        except redis.RedisError as exc:
            self._errors += 1
            logger.warning(
                "Redis cache clear failed",
                extra={"namespace": namespace, "error": str(exc)},
            )

    def stats(self) -> dict[str, Any]:
        size = -1
        try:
            size = sum(1 for _ in self._client.scan_iter(match=f"{self.CACHE_PREFIX}*"))
        except redis.RedisError:
            self._errors += 1

        total = self._hits + self._misses
        return {
            "backend": "redis",
            "size": size,
            "hits": self._hits,
            "misses": self._misses,
            "expired": self._expired,
            "errors": self._errors,
            "hit_rate": (self._hits / total) if total > 0 else 0.0,
        }


# ============================================================
# Factory
# ============================================================
def build_source_cache(
    *,
    backend: str,
    policy: TTLPolicy,
    max_size: int = 1000,
    redis_url: str = "",
):
    """
    Selecciona backend según configuración.

    Política:
      - "redis": se verifica con ping; si no responde, se degrada a memoria
        (y se loguea) para no tirar la API por el cache.
      - cualquier otro valor: memoria.
    """
    if backend == "redis":
        try:
            cache = RedisSourceCache.from_url(redis_url, policy=policy)
            cache._client.ping()
            return cache
        except (redis.RedisError, ValueError) as exc:
            logger.warning(
                "Redis cache unavailable, falling back to in-memory",
                extra={"error": str(exc)},
            )

    return InMemorySourceCache(policy=policy, max_size=max_size)
