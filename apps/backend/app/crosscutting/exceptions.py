# apps/backend/app/crosscutting/exceptions.py
"""
===============================================================================
MÓDULO: Excepciones tipadas del backend (errores internos)
===============================================================================

Objetivo
--------
Tener excepciones internas coherentes, con:
- error_code estable
- error_id para correlación con logs
- message “humana” (sin filtrar tokens ni payloads de terceros)

-------------------------------------------------------------------------------
CRC (Component Card)
-------------------------------------------------------------------------------
Componente:
  PortfolioError + subclases

Responsabilidades:
  - Estandarizar errores internos que luego se mapean a HTTP
  - Distinguir fallas de fuentes externas (recuperables por el agregador)
    de fallas de configuración (fail-fast, sin reintento)

Colaboradores:
  - api/exception_handlers.py (mapea a AppHTTPException)
  - infrastructure/services/* (GitHub, Apify, Lingva)
===============================================================================
"""

from __future__ import annotations

from uuid import uuid4


class PortfolioError(Exception):
    """Base para errores internos del sistema (error_code + error_id + message)."""

    error_code: str = "PORTFOLIO_ERROR"

    def __init__(
        self,
        message: str,
        error_id: str | None = None,
        original_error: Exception | None = None,
    ):
        self.message = message
        self.error_id = error_id or str(uuid4())
        self.original_error = original_error
        super().__init__(message)


class DatabaseError(PortfolioError):
    """Errores de DB (conexión, query, timeout, pool)."""

    error_code: str = "DATABASE_ERROR"


class SourceUnavailableError(PortfolioError):
    """
    Fuente externa caída o respondió no-2xx (GitHub, Apify, Lingva).

    Nunca se cachea: la próxima llamada reintenta contra el proveedor.
    """

    error_code: str = "SOURCE_UNAVAILABLE"

    def __init__(
        self,
        source: str,
        message: str,
        *,
        status_code: int | None = None,
        original_error: Exception | None = None,
    ):
        self.source = source
        self.status_code = status_code
        super().__init__(message, original_error=original_error)


class ConfigurationMissingError(PortfolioError):
    """Credencial requerida ausente o placeholder (ej: APIFY_TOKEN)."""

    error_code: str = "CONFIGURATION_MISSING"

    def __init__(self, setting: str, message: str | None = None):
        self.setting = setting
        super().__init__(message or f"{setting} is missing or invalid")


class TranslationFailedError(PortfolioError):
    """La API de traducción falló; el llamador recibe el texto original."""

    error_code: str = "TRANSLATION_FAILED"
