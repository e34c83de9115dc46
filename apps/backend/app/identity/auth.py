"""
===============================================================================
TARJETA CRC — identity/auth.py
===============================================================================
Módulo:
    Autenticación (JWT) y autorización por rol

Responsabilidades:
    - Decodificar y validar JWT de acceso (firma HS256, exp, claims mínimos).
    - Construir el Principal (user_id, username, email, role).
    - Exponer dependencias FastAPI: require_user / require_admin /
      optional_user (rutas públicas que muestran más al dueño).
    - Emitir tokens (create_access_token) para tooling y tests; el login vive
      fuera de este backend.

Colaboradores:
    - crosscutting.config.get_settings: jwt_secret, TTL.
    - crosscutting.error_responses: unauthorized/forbidden estándar.
    - identity.users: User / UserRole.

Decisiones de diseño:
    - Claims: sub, username, email, role, iat, exp, typ.
    - No loguear secretos ni tokens.
===============================================================================
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from uuid import UUID

import jwt
from fastapi import Depends, Header, Request

from ..crosscutting.config import get_settings
from ..crosscutting.error_responses import forbidden, unauthorized
from .users import User, UserRole

JWT_ALGORITHM: str = "HS256"

CLAIM_SUB: str = "sub"
CLAIM_USERNAME: str = "username"
CLAIM_EMAIL: str = "email"
CLAIM_ROLE: str = "role"
CLAIM_IAT: str = "iat"
CLAIM_EXP: str = "exp"
CLAIM_TYP: str = "typ"

TOKEN_TYPE_ACCESS: str = "access"


@dataclass(frozen=True, slots=True)
class Principal:
    """Identidad autenticada del request."""

    user_id: UUID
    username: str
    email: str
    role: UserRole

    @property
    def is_admin(self) -> bool:
        return self.role == UserRole.ADMIN


# ---------------------------------------------------------------------------
# Tokens JWT (emitir / decodificar)
# ---------------------------------------------------------------------------
def create_access_token(
    user: User, *, secret: str | None = None, ttl_minutes: int | None = None
) -> str:
    """Crea un JWT de acceso firmado."""
    settings = get_settings()
    now = datetime.now(timezone.utc)
    ttl = settings.jwt_access_ttl_minutes if ttl_minutes is None else ttl_minutes

    payload: dict[str, object] = {
        CLAIM_SUB: str(user.id),
        CLAIM_USERNAME: user.username,
        CLAIM_EMAIL: user.email,
        CLAIM_ROLE: user.role.value,
        CLAIM_IAT: int(now.timestamp()),
        CLAIM_EXP: int((now + timedelta(minutes=ttl)).timestamp()),
        CLAIM_TYP: TOKEN_TYPE_ACCESS,
    }
    return jwt.encode(payload, secret or settings.jwt_secret, algorithm=JWT_ALGORITHM)


def decode_access_token(token: str, *, secret: str | None = None) -> Principal:
    """
    Decodifica y valida un JWT de acceso.

    Errores:
        - 401 si expiró, firma inválida o faltan claims mínimos.
    """
    try:
        payload = jwt.decode(
            token,
            secret or get_settings().jwt_secret,
            algorithms=[JWT_ALGORITHM],
            options={"require": [CLAIM_SUB, CLAIM_ROLE, CLAIM_EXP]},
        )
    except jwt.ExpiredSignatureError as exc:
        raise unauthorized("Token expirado.") from exc
    except jwt.InvalidTokenError as exc:
        raise unauthorized("Token inválido.") from exc

    token_type = payload.get(CLAIM_TYP)
    # R: si viene typ, lo validamos; si no viene, lo aceptamos por compatibilidad.
    if token_type is not None and token_type != TOKEN_TYPE_ACCESS:
        raise unauthorized("Tipo de token inválido.")

    try:
        user_id = UUID(str(payload[CLAIM_SUB]))
        role = UserRole(str(payload[CLAIM_ROLE]))
    except ValueError as exc:
        raise unauthorized("Token inválido.") from exc

    return Principal(
        user_id=user_id,
        username=str(payload.get(CLAIM_USERNAME) or ""),
        email=str(payload.get(CLAIM_EMAIL) or ""),
        role=role,
    )


def _extract_bearer_token(authorization: str | None) -> str | None:
    """Extrae token desde `Authorization: Bearer <token>`."""
    if not authorization:
        return None
    parts = authorization.strip().split(" ", 1)
    if len(parts) != 2 or parts[0].lower() != "bearer":
        return None
    return parts[1].strip() or None


# ---------------------------------------------------------------------------
# Dependencias FastAPI
# ---------------------------------------------------------------------------
def require_user(
    request: Request,
    authorization: str | None = Header(None, alias="Authorization"),
) -> Principal:
    """Dependency FastAPI: requiere JWT válido."""
    token = _extract_bearer_token(authorization)
    if not token:
        raise unauthorized("Falta token Bearer.")
    principal = decode_access_token(token)
    request.state.principal = principal
    return principal


def optional_user(
    request: Request,
    authorization: str | None = Header(None, alias="Authorization"),
) -> Principal | None:
    """Dependency FastAPI: Principal si hay token; None si es anónimo.

    Un token presente pero inválido sigue siendo 401.
    """
    if _extract_bearer_token(authorization) is None:
        return None
    return require_user(request, authorization)


def require_admin(principal: Principal = Depends(require_user)) -> Principal:
    """Dependency FastAPI: requiere rol admin."""
    if not principal.is_admin:
        raise forbidden("Rol insuficiente.")
    return principal
