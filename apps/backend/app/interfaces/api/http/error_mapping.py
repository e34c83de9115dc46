"""
===============================================================================
TARJETA CRC — error_mapping.py (UseCase Error -> HTTP RFC7807)
===============================================================================

Responsabilidades:
  - Traducir códigos de error de casos de uso a HTTP Exceptions RFC7807.
  - Centralizar el mapeo para evitar duplicación en routers.
  - Mantener el dominio libre de HTTP.

Reglas:
  - Los use cases devuelven errores tipados (code + message).
  - La API traduce a RFC7807 (crosscutting.error_responses).
  - Fallas de fuentes externas NO pasan por acá: son excepciones
    (PortfolioError) resueltas por los exception handlers globales.

Colaboradores:
  - application.usecases.* (ProfileErrorCode, AdminErrorCode, ProjectErrorCode)
  - crosscutting.error_responses (validation_error, not_found, conflict,
    forbidden)
===============================================================================
"""

from __future__ import annotations

from app.application.usecases.admin import AdminErrorCode
from app.application.usecases.profiles import ProfileErrorCode
from app.application.usecases.projects import ProjectError, ProjectErrorCode
from app.crosscutting.error_responses import (
    conflict,
    forbidden,
    not_found,
    validation_error,
)


def raise_profile_error(
    error_code: ProfileErrorCode, message: str, identifier: str | None = None
) -> None:
    """Traduce ProfileErrorCode -> HTTP."""
    if error_code == ProfileErrorCode.NOT_FOUND:
        raise not_found("Profile", identifier or "unknown")
    # Fallback seguro: si aparece un código nuevo, lo tratamos como 422
    raise validation_error(message)


def raise_admin_error(
    error_code: AdminErrorCode, message: str, identifier: str | None = None
) -> None:
    """Traduce AdminErrorCode -> HTTP."""
    if error_code == AdminErrorCode.CONFLICT:
        raise conflict(message)
    if error_code == AdminErrorCode.NOT_FOUND:
        raise not_found("User", identifier or "unknown")
    raise validation_error(message)


def raise_project_error(error: ProjectError) -> None:
    """Traduce ProjectError -> HTTP (el recurso puede ser Project o User)."""
    if error.code == ProjectErrorCode.NOT_FOUND:
        raise not_found(error.resource, error.identifier or "unknown")
    if error.code == ProjectErrorCode.FORBIDDEN:
        raise forbidden(error.message)
    if error.code == ProjectErrorCode.CONFLICT:
        raise conflict(error.message)
    raise validation_error(error.message)
