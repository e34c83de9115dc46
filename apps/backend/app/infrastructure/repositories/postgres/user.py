"""
============================================================
TARJETA CRC — infrastructure/repositories/postgres/user.py
============================================================
Class: PostgresUserRepository

Responsibilities:
  - Cargar usuarios por id / username / email.
  - Crear, listar, contar, actualizar (role/is_active) y borrar usuarios
    (profile y projects caen por FK CASCADE).
  - Mapear filas crudas -> `User` validando `UserRole`.

Collaborators:
  - PostgresRepository (pool + helpers)
  - identity.users.User / UserRole

Constraints:
  - Retorna None cuando no existe el recurso.
  - Rol persistido inválido -> DatabaseError.
  - Orden estable en listados: created_at DESC, id DESC.
============================================================
"""

from __future__ import annotations

from typing import List, Optional
from uuid import UUID

from ....crosscutting.exceptions import DatabaseError
from ....identity.users import User, UserRole
from .base import PostgresRepository

_USER_COLUMNS = "id, username, email, role, is_active, created_at"
_USER_ORDER_BY = "created_at DESC, id DESC"


def _row_to_user(row: tuple) -> User:
    try:
        role = UserRole(row[3])
    except ValueError as exc:
        raise DatabaseError(f"Invalid user role in database: {row[3]}") from exc

    return User(
        id=row[0],
        username=row[1],
        email=row[2],
        role=role,
        is_active=row[4],
        created_at=row[5],
    )


class PostgresUserRepository(PostgresRepository):
    def _get_one(self, column: str, value: object) -> Optional[User]:
        row = self._fetchone(
            query=f"SELECT {_USER_COLUMNS} FROM users WHERE {column} = %s",
            params=[value],
            context_msg="Failed to load user",
            extra={"lookup": column},
        )
        return _row_to_user(row) if row else None

    def get_by_id(self, user_id: UUID) -> Optional[User]:
        return self._get_one("id", user_id)

    def get_by_username(self, username: str) -> Optional[User]:
        return self._get_one("username", username)

    def get_by_email(self, email: str) -> Optional[User]:
        return self._get_one("email", email)

    def list_users(self) -> List[User]:
        rows = self._fetchall(
            query=f"SELECT {_USER_COLUMNS} FROM users ORDER BY {_USER_ORDER_BY}",
            context_msg="Failed to list users",
            extra={},
        )
        return [_row_to_user(r) for r in rows]

    def create_user(self, user: User) -> User:
        row = self._fetchone(
            query=f"""
                INSERT INTO users (id, username, email, role, is_active, created_at)
                VALUES (%s, %s, %s, %s, %s, COALESCE(%s, NOW()))
                RETURNING {_USER_COLUMNS}
            """,
            params=[
                user.id,
                user.username,
                user.email,
                user.role.value,
                user.is_active,
                user.created_at,
            ],
            context_msg="Failed to create user",
            extra={"user_id": str(user.id)},
        )
        if row is None:
            raise DatabaseError("Failed to create user: no row returned")
        return _row_to_user(row)

    def update_user(self, user: User) -> Optional[User]:
        row = self._fetchone(
            query=f"""
                UPDATE users SET role = %s, is_active = %s
                WHERE id = %s
                RETURNING {_USER_COLUMNS}
            """,
            params=[user.role.value, user.is_active, user.id],
            context_msg="Failed to update user",
            extra={"user_id": str(user.id)},
        )
        return _row_to_user(row) if row else None

    def delete_user(self, user_id: UUID) -> bool:
        deleted = self._execute(
            query="DELETE FROM users WHERE id = %s",
            params=[user_id],
            context_msg="Failed to delete user",
            extra={"user_id": str(user_id)},
        )
        return deleted > 0

    def count_users(self, *, active_only: bool = False) -> int:
        where = " WHERE is_active" if active_only else ""
        row = self._fetchone(
            query=f"SELECT COUNT(*) FROM users{where}",
            params=[],
            context_msg="Failed to count users",
            extra={"active_only": active_only},
        )
        return int(row[0]) if row else 0
