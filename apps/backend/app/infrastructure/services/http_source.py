"""
============================================================
TARJETA CRC — infrastructure/services/http_source.py
============================================================
Class: HttpSourceClient

Responsibilities:
  - Base común de los clientes HTTP de fuentes externas.
  - Timeout explícito + retry (tenacity) solo para errores transitorios.
  - Traducir cualquier falla (no-2xx, red, JSON inválido) a
    SourceUnavailableError, sin filtrar tokens en el mensaje.
  - Registrar latencia y fallas por fuente (Prometheus).

Collaborators:
  - httpx (HTTP client; inyectable para tests con MockTransport)
  - infrastructure.services.retry (política transient/permanent)
  - crosscutting.metrics (observe_source_latency, record_source_failure)
  - crosscutting.exceptions.SourceUnavailableError
============================================================
"""

from __future__ import annotations

import time
from typing import Any

import httpx

from ...crosscutting.exceptions import SourceUnavailableError
from ...crosscutting.logger import logger
from ...crosscutting.metrics import observe_source_latency, record_source_failure
from .retry import create_retry_decorator


class HttpSourceClient:
    """Cliente HTTP con retry/backoff y errores tipados para una fuente."""

    source: str = "external"

    def __init__(
        self,
        *,
        http_client: httpx.Client | None = None,
        timeout_s: float = 10.0,
        retry_max_attempts: int = 3,
        retry_base_delay_s: float = 0.5,
        retry_max_delay_s: float = 5.0,
    ):
        # R: solo se cierra el cliente propio; uno inyectado es del caller.
        self._owns_http = http_client is None
        self._http = http_client or httpx.Client(timeout=timeout_s)
        self._timeout = timeout_s
        retrying = create_retry_decorator(
            max_attempts=retry_max_attempts,
            base_delay=retry_base_delay_s,
            max_delay=retry_max_delay_s,
        )
        self._send_with_retry = retrying(self._send)

    def _send(self, method: str, url: str, **kwargs: Any) -> httpx.Response:
        resp = self._http.request(method, url, timeout=self._timeout, **kwargs)
        # R: HTTPStatusError lleva el status → is_transient_error decide.
        resp.raise_for_status()
        return resp

    def _request_json(self, method: str, url: str, **kwargs: Any) -> Any:
        """
        Ejecuta el request y devuelve el JSON decodificado.

        Raises:
            SourceUnavailableError: no-2xx, falla de transporte o JSON inválido.
        """
        start = time.perf_counter()
        try:
            resp = self._send_with_retry(method, url, **kwargs)
            return resp.json()
        except httpx.HTTPStatusError as exc:
            status = exc.response.status_code
            self._fail("http_status", f"{self.source} responded HTTP {status}", exc, status)
        except httpx.TransportError as exc:
            self._fail("transport", f"{self.source} is unreachable", exc)
        except ValueError as exc:
            self._fail("invalid_json", f"{self.source} returned invalid JSON", exc)
        finally:
            observe_source_latency(self.source, time.perf_counter() - start)

    def _fail(
        self,
        reason: str,
        message: str,
        exc: Exception,
        status_code: int | None = None,
    ) -> None:
        record_source_failure(self.source, reason)
        logger.warning(
            "External source call failed",
            extra={
                "source": self.source,
                "reason": reason,
                "status_code": status_code,
                "error_type": type(exc).__name__,
            },
        )
        raise SourceUnavailableError(
            self.source, message, status_code=status_code, original_error=exc
        ) from exc

    def close(self) -> None:
        if self._owns_http:
            self._http.close()
