"""
===============================================================================
TARJETA CRC — dependencies.py (Dependencias y helpers comunes)
===============================================================================

Responsabilidades:
  - Centralizar helpers que se repiten en routers:
      * conversión Profile / Project / User (dominio) -> DTOs HTTP
      * Principal -> ProjectActor (policy de proyectos)
      * base URL pública del request (para absolutizar media)
      * validación de identificadores de fuentes externas

Colaboradores:
  - domain.entities.Profile
  - identity.users.User
  - schemas.profiles / schemas.projects / schemas.admin
  - domain.project_policy.ProjectActor
  - crosscutting.error_responses (RFC7807 factories)
===============================================================================
"""

from __future__ import annotations

import re
from dataclasses import asdict
from enum import Enum
from typing import Any

from app.crosscutting.error_responses import validation_error
from app.domain.entities import Profile, Project
from app.domain.project_policy import ProjectActor
from app.identity.auth import Principal
from app.identity.users import User
from fastapi import Request

from .schemas.admin import UserRes
from .schemas.profiles import ProfileRes
from .schemas.projects import ProjectRes

# Usernames de GitHub/LinkedIn: alfanumérico + guiones/underscore/punto.
_SOURCE_USERNAME_RE = re.compile(r"^[A-Za-z0-9][A-Za-z0-9._-]{0,99}$")


def _plain_factory(items: list[tuple[str, Any]]) -> dict[str, Any]:
    return {k: (v.value if isinstance(v, Enum) else v) for k, v in items}


def to_profile_res(profile: Profile) -> ProfileRes:
    """Profile (dominio) -> DTO HTTP. Enums de origen se serializan como str."""
    return ProfileRes.model_validate(asdict(profile, dict_factory=_plain_factory))


def to_project_res(project: Project) -> ProjectRes:
    return ProjectRes.model_validate(asdict(project, dict_factory=_plain_factory))


def to_project_actor(principal: Principal | None) -> ProjectActor | None:
    if principal is None:
        return None
    return ProjectActor(user_id=principal.user_id, role=principal.role)


def to_user_res(user: User) -> UserRes:
    return UserRes(
        id=user.id,
        username=user.username,
        email=user.email,
        role=user.role,
        is_active=user.is_active,
        created_at=user.created_at,
    )


def request_base_url(request: Request) -> str:
    """Base URL del request (scheme + host [+ root_path]) sin barra final."""
    return str(request.base_url).rstrip("/")


def validate_source_username(username: str) -> str:
    """Fail-fast antes de ir a la red con un identificador inválido."""
    value = (username or "").strip()
    if not _SOURCE_USERNAME_RE.match(value):
        raise validation_error(f"Invalid username: {username!r}")
    return value
