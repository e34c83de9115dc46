"""
===============================================================================
ARCHIVO: crosscutting/metrics.py
===============================================================================

CRC CARD (Módulo)
-------------------------------------------------------------------------------
Nombre:
    Métricas (Prometheus) — Observabilidad de bajo acoplamiento

Responsabilidades:
    - Definir métricas Prometheus en un registry propio.
    - Proveer funciones pequeñas y estables para registrar eventos/duraciones.
    - Cuidar cardinalidad (NO usernames, NO URLs completas).
    - Exponer helpers para generar la respuesta /metrics.

Colaboradores:
    - crosscutting.middleware: registra latencia y conteo HTTP.
    - infrastructure.cache: registra hits/misses por namespace.
    - infrastructure.services.*: registra fallas de fuentes externas.
    - application.usecases.sources.translation: registra outcomes de traducción.
===============================================================================
"""

from __future__ import annotations

import re

from prometheus_client import (
    CONTENT_TYPE_LATEST,
    CollectorRegistry,
    Counter,
    Histogram,
    generate_latest,
)

_registry = CollectorRegistry()

# ------------------------
# HTTP
# ------------------------
_requests_total = Counter(
    "portfolio_requests_total",
    "Total de requests HTTP",
    ["endpoint", "method", "status"],
    registry=_registry,
)

_request_latency = Histogram(
    "portfolio_request_latency_seconds",
    "Latencia de requests HTTP (segundos)",
    ["endpoint", "method"],
    buckets=(0.01, 0.025, 0.05, 0.1, 0.25, 0.5, 1.0, 2.5, 5.0, 10.0),
    registry=_registry,
)

# ------------------------
# Cache de fuentes
# ------------------------
_cache_lookups_total = Counter(
    "portfolio_source_cache_lookups_total",
    "Lookups del cache de fuentes externas",
    ["namespace", "outcome"],
    registry=_registry,
)

# ------------------------
# Fuentes externas
# ------------------------
_source_failures_total = Counter(
    "portfolio_source_failures_total",
    "Fallas de fuentes externas (GitHub, LinkedIn, traducción)",
    ["source", "reason"],
    registry=_registry,
)

_source_latency = Histogram(
    "portfolio_source_latency_seconds",
    "Latencia de llamadas a fuentes externas (segundos)",
    ["source"],
    buckets=(0.05, 0.1, 0.25, 0.5, 1.0, 2.5, 5.0, 10.0, 30.0),
    registry=_registry,
)

# ------------------------
# Traducción
# ------------------------
_translations_total = Counter(
    "portfolio_translations_total",
    "Traducciones por origen del resultado",
    ["origin"],
    registry=_registry,
)


def record_request_metrics(
    endpoint: str, method: str, status_code: int, latency_seconds: float
) -> None:
    """Registra un request HTTP (endpoint normalizado + bucket de status)."""
    normalized = _normalize_endpoint(endpoint)
    _requests_total.labels(
        endpoint=normalized, method=method, status=_status_bucket(status_code)
    ).inc()
    _request_latency.labels(endpoint=normalized, method=method).observe(
        latency_seconds
    )


def record_cache_lookup(namespace: str, outcome: str) -> None:
    """outcome: hit | miss | expired | error."""
    _cache_lookups_total.labels(namespace=namespace, outcome=outcome).inc()


def record_source_failure(source: str, reason: str) -> None:
    _source_failures_total.labels(source=source, reason=reason).inc()


def observe_source_latency(source: str, seconds: float) -> None:
    _source_latency.labels(source=source).observe(seconds)


def record_translation(origin: str) -> None:
    """origin: noop | cache | api | fallback."""
    _translations_total.labels(origin=origin).inc()


# -----------------------------------------------------------------------------
# Helpers internos
# -----------------------------------------------------------------------------


def _normalize_endpoint(path: str) -> str:
    """Normaliza paths para evitar cardinalidad alta (usernames, UUIDs)."""
    path = re.sub(
        r"[0-9a-f]{8}-[0-9a-f]{4}-[0-9a-f]{4}-[0-9a-f]{4}-[0-9a-f]{12}",
        "{id}",
        path,
        flags=re.IGNORECASE,
    )
    path = re.sub(
        r"/(profiles|profile|repos|skills)/(?!me\b|aggregated\b)[^/]+",
        r"/\1/{username}",
        path,
    )
    return path


def _status_bucket(code: int) -> str:
    """Agrupa status code para baja cardinalidad."""
    if 200 <= code < 300:
        return "2xx"
    if 400 <= code < 500:
        return "4xx"
    if 500 <= code < 600:
        return "5xx"
    return "other"


def get_metrics_response() -> tuple[bytes, str]:
    """Genera el body y content-type para /metrics."""
    return generate_latest(_registry), CONTENT_TYPE_LATEST
