"""
===============================================================================
TARJETA CRC — schemas/admin.py
===============================================================================

Módulo:
    Schemas HTTP para Admin (usuarios + stats)

Responsabilidades:
    - DTOs de request/response para el alta, consulta, cambio de rol/estado, listado y baja de usuarios.
    - Contrato estable para los conteos del panel.

Colaboradores:
    - identity.users.User
    - domain.entities.PortfolioStats
===============================================================================
"""

from __future__ import annotations

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field

from app.identity.users import UserRole


class CreateUserReq(BaseModel):
    username: str = Field(..., min_length=1, max_length=100)
    email: str = Field(..., min_length=3, max_length=320)
    role: UserRole = UserRole.USER


class UpdateUserReq(BaseModel):
    # R: solo role/is_active; identidad (email/username) no se toca acá.
    model_config = ConfigDict(extra="forbid")

    role: UserRole | None = None
    is_active: bool | None = None


class UserRes(BaseModel):
    id: UUID
    username: str
    email: str
    role: UserRole
    is_active: bool
    created_at: datetime | None = None


class UsersListRes(BaseModel):
    users: list[UserRes]


class AdminStatsRes(BaseModel):
    users: int
    active_users: int
    profiles: int
