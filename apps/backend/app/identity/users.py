"""
===============================================================================
TARJETA CRC — identity/users.py
===============================================================================

Módulo:
    Modelos de Usuario

Responsabilidades:
    - Definir el enum de roles (admin | user) para autorización.
    - Definir el dataclass User (dueño de un Profile).

Colaboradores:
    - identity/auth.py: construye el Principal desde el JWT.
    - infrastructure/repositories/*/user.py: mapea filas -> User.
    - application/usecases/admin: aprovisiona usuarios.

Notas:
    - Este módulo NO contiene lógica de negocio: solo “shapes” de datos.
    - La emisión de credenciales (login/password) vive fuera de este backend.
===============================================================================
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from uuid import UUID


class UserRole(str, Enum):
    """Roles soportados."""

    ADMIN = "admin"
    USER = "user"


@dataclass(frozen=True, slots=True)
class User:
    """Usuario del portfolio (username único, email único)."""

    id: UUID
    username: str
    email: str
    role: UserRole
    is_active: bool = True
    created_at: datetime | None = None
