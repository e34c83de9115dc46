"""
===============================================================================
TARJETA CRC — app/api/exception_handlers.py (Manejo Centralizado de Excepciones)
===============================================================================

Responsabilidades:
  - Traducir excepciones de la aplicación a respuestas HTTP RFC7807.
  - Centralizar logging de errores con request_id + error_id.
  - Evitar filtrar detalles internos en errores no controlados.

Mapeo:
  - SourceUnavailableError     -> 502 SOURCE_UNAVAILABLE
  - ConfigurationMissingError  -> 500 CONFIGURATION_MISSING (mensaje claro)
  - DatabaseError              -> 503 DATABASE_ERROR
  - PortfolioError (base)      -> 500 INTERNAL_ERROR
  - RequestValidationError     -> 422 VALIDATION_ERROR (loc/msg/type por campo)
  - Exception                  -> 500 INTERNAL_ERROR (sin detalles en prod)

Colaboradores:
  - crosscutting.error_responses: AppHTTPException, ErrorCode, app_exception_handler
  - crosscutting.exceptions: PortfolioError y derivadas
  - crosscutting.config.get_settings (para decidir nivel de detalle)
===============================================================================
"""

from __future__ import annotations

from fastapi import Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from ..crosscutting.config import get_settings
from ..crosscutting.error_responses import (
    AppHTTPException,
    ErrorCode,
    app_exception_handler,
    validation_error,
)
from ..crosscutting.exceptions import (
    ConfigurationMissingError,
    DatabaseError,
    PortfolioError,
    SourceUnavailableError,
)
from ..crosscutting.logger import logger


def _request_id_from(request: Request) -> str | None:
    return getattr(getattr(request, "state", None), "request_id", None)


async def _handle_service_error(
    request: Request,
    *,
    exc: PortfolioError,
    code: ErrorCode,
    status_code: int,
    detail: str | None = None,
) -> JSONResponse:
    """Helper común para errores tipados de servicios."""
    request_id = _request_id_from(request)

    logger.error(
        "Error de servicio",
        extra={
            "code": code.value,
            "error_id": exc.error_id,
            "error_message": exc.message,
            "request_id": request_id,
        },
    )

    app_exc = AppHTTPException(
        status_code=status_code,
        code=code,
        detail=detail or exc.message,
        errors=[{"error_id": exc.error_id}],
    )
    return await app_exception_handler(request, app_exc)


async def source_unavailable_handler(
    request: Request, exc: SourceUnavailableError
) -> JSONResponse:
    return await _handle_service_error(
        request,
        exc=exc,
        code=ErrorCode.SOURCE_UNAVAILABLE,
        status_code=502,
        detail=f"{exc.source}: {exc.message}",
    )


async def configuration_missing_handler(
    request: Request, exc: ConfigurationMissingError
) -> JSONResponse:
    return await _handle_service_error(
        request, exc=exc, code=ErrorCode.CONFIGURATION_MISSING, status_code=500
    )


async def database_error_handler(request: Request, exc: DatabaseError) -> JSONResponse:
    # R: el mensaje del driver no sale al cliente.
    return await _handle_service_error(
        request,
        exc=exc,
        code=ErrorCode.DATABASE_ERROR,
        status_code=503,
        detail="Falla en operación de base de datos",
    )


async def portfolio_error_handler(
    request: Request, exc: PortfolioError
) -> JSONResponse:
    # R: Errores base: tratamos como INTERNAL_ERROR por defecto.
    return await _handle_service_error(
        request, exc=exc, code=ErrorCode.INTERNAL_ERROR, status_code=500
    )


async def request_validation_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    # R: solo loc/msg/type; "input" y "ctx" pueden no ser serializables.
    errors = [
        {
            "loc": [str(part) for part in err.get("loc", ())],
            "msg": str(err.get("msg", "")),
            "type": str(err.get("type", "")),
        }
        for err in exc.errors()
    ]
    return await app_exception_handler(
        request, validation_error("Request inválido", errors=errors)
    )


async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """
    Handler para excepciones no tipadas.

    - Log completo (stacktrace).
    - Respuesta genérica (evita filtrar internos).
    """
    request_id = _request_id_from(request)

    logger.error(
        "Excepción no controlada",
        exc_info=True,
        extra={"request_id": request_id, "error": str(exc)},
    )

    # R: En desarrollo ayudamos un poco más; en producción evitamos filtrar detalles.
    detail = str(exc) if not get_settings().is_production() else "Error interno."

    app_exc = AppHTTPException(
        status_code=500, code=ErrorCode.INTERNAL_ERROR, detail=detail
    )
    return await app_exception_handler(request, app_exc)


def register_exception_handlers(app) -> None:
    """
    Registra handlers en la app FastAPI.

    Importante:
      - AppHTTPException debe registrarse para respetar RFC7807.
      - Exception genérica se registra al final como fallback.
    """
    app.add_exception_handler(SourceUnavailableError, source_unavailable_handler)
    app.add_exception_handler(ConfigurationMissingError, configuration_missing_handler)
    app.add_exception_handler(DatabaseError, database_error_handler)
    app.add_exception_handler(PortfolioError, portfolio_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.add_exception_handler(AppHTTPException, app_exception_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)


__all__ = ["register_exception_handlers"]
