"""app.infrastructure.services.retry

Name: Retry Helper with Exponential Backoff + Jitter

Qué es
------
Utilidad de **resiliencia** para las llamadas HTTP a fuentes externas
(GitHub REST, actor de Apify para LinkedIn, API de traducción Lingva).
Implementa:
  - Clasificación de errores: **transient** (reintentar) vs **permanent** (fail-fast)
  - Decorator de `tenacity` para aplicar **exponential backoff + jitter**
  - Logging estructurado de intentos de retry

CRC (Component Card)
--------------------
Component: retry helper
Responsibilities:
  - Decidir qué errores de httpx son reintentables
  - Proveer un decorator estándar (tenacity) con backoff+jitter
  - Loguear intentos (el request_id llega solo vía contextvars)
Collaborators:
  - tenacity (motor de retry)
  - httpx (tipos de error de transporte / status)
  - crosscutting.config.get_settings (config de attempts/delays)
Constraints:
  - Reintentar SOLO errores transitorios (408, 429, 5xx, timeouts, connection issues)
  - No reintentar errores permanentes (400, 401, 403, 404, 422)
  - Jitter para evitar thundering herd
"""

from __future__ import annotations

from typing import Callable, Optional, TypeVar

import httpx
from tenacity import (
    RetryCallState,
    retry,
    retry_if_exception,
    stop_after_attempt,
    wait_exponential_jitter,
)

from ...crosscutting.config import get_settings
from ...crosscutting.logger import logger

T = TypeVar("T")


# R: HTTP status codes que indican fallas transitorias (reintentables)
TRANSIENT_HTTP_CODES: frozenset[int] = frozenset(
    {
        408,  # Request Timeout
        429,  # Too Many Requests (rate limit de GitHub sin token)
        500,
        502,
        503,
        504,
    }
)

# R: HTTP status codes que indican fallas permanentes (no reintentar)
PERMANENT_HTTP_CODES: frozenset[int] = frozenset({400, 401, 403, 404, 422})


def get_http_status_code(exception: BaseException) -> int | None:
    """R: Extrae el status code HTTP de un httpx.HTTPStatusError (o similar)."""
    resp = getattr(exception, "response", None)
    if resp is not None and isinstance(getattr(resp, "status_code", None), int):
        return resp.status_code

    status_code = getattr(exception, "status_code", None)
    if isinstance(status_code, int):
        return status_code

    return None


def is_transient_error(exception: BaseException) -> bool:
    """R: Decide si un error es transitorio (reintentar) o permanente (fail-fast).

    Reglas (en orden):
      1) Si hay status code HTTP: permanent → False, transient → True.
      2) Errores de transporte de httpx (timeouts, connect, read): True.
      3) Tipos built-in de timeout/conexión: True.
      4) Default: fail-fast (False).
    """
    status_code = get_http_status_code(exception)
    if status_code is not None:
        if status_code in PERMANENT_HTTP_CODES:
            return False
        return status_code in TRANSIENT_HTTP_CODES

    if isinstance(exception, httpx.TransportError):
        # R: TimeoutException, ConnectError, ReadError, RemoteProtocolError...
        return True

    if isinstance(exception, (TimeoutError, ConnectionError)):
        return True

    return False


def _log_retry(retry_state: RetryCallState) -> None:
    """R: Loguea cada intento antes de dormir (before_sleep)."""
    fn = getattr(retry_state, "fn", None)
    fn_name = getattr(fn, "__name__", "unknown")
    wait_time = (
        retry_state.next_action.sleep
        if getattr(retry_state, "next_action", None) is not None
        else 0
    )

    exc: Optional[BaseException] = None
    if getattr(retry_state, "outcome", None) is not None:
        exc = retry_state.outcome.exception()

    logger.warning(
        "Retrying external call",
        extra={
            "function": fn_name,
            "attempt": retry_state.attempt_number,
            "wait_seconds": round(float(wait_time), 2),
            "error": str(exc) if exc else None,
            "error_type": type(exc).__name__ if exc else None,
        },
    )


def create_retry_decorator(
    max_attempts: int | None = None,
    base_delay: float | None = None,
    max_delay: float | None = None,
) -> Callable[[Callable[..., T]], Callable[..., T]]:
    """R: Crea un decorator `tenacity` con exponential backoff + jitter.

    Config:
      - stop: `stop_after_attempt(max_attempts)`
      - wait: `wait_exponential_jitter(initial=base_delay, max=max_delay)`
      - retry: solo si `is_transient_error(exception)`
      - before_sleep: `_log_retry`
      - reraise: True (propaga la última excepción al adapter, que la
        traduce a SourceUnavailableError)
    """
    settings = get_settings()

    _max_attempts = (
        settings.retry_max_attempts if max_attempts is None else max_attempts
    )
    _base_delay = (
        settings.retry_base_delay_seconds if base_delay is None else float(base_delay)
    )
    _max_delay = (
        settings.retry_max_delay_seconds if max_delay is None else float(max_delay)
    )

    if _max_attempts <= 0:
        raise ValueError("max_attempts must be > 0")
    if _base_delay < 0:
        raise ValueError("base_delay must be >= 0")
    if _max_delay <= 0:
        raise ValueError("max_delay must be > 0")

    return retry(
        stop=stop_after_attempt(_max_attempts),
        wait=wait_exponential_jitter(
            initial=_base_delay,
            max=_max_delay,
            jitter=_base_delay,
        ),
        retry=retry_if_exception(is_transient_error),
        before_sleep=_log_retry,
        reraise=True,
    )
