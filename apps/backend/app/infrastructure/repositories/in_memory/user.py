"""
============================================================
TARJETA CRC — infrastructure/repositories/in_memory/user.py
============================================================
Class: InMemoryUserRepository

Responsibilities:
  - Guardar usuarios en memoria (tests / local dev).
  - Emular el ON DELETE CASCADE de Postgres sobre perfiles y proyectos.
  - Orden alineado con Postgres: created_at DESC.

Constraints:
  - Thread-safe: acceso protegido por Lock.
  - User es frozen: no hace falta copiar al devolver.
============================================================
"""

from __future__ import annotations

from datetime import datetime, timezone
from threading import Lock
from typing import Dict, List, Optional
from uuid import UUID

from ....identity.users import User
from .profile import InMemoryProfileRepository
from .project import InMemoryProjectRepository


class InMemoryUserRepository:
    def __init__(
        self,
        profiles: InMemoryProfileRepository | None = None,
        projects: InMemoryProjectRepository | None = None,
    ) -> None:
        self._lock = Lock()
        self._users: Dict[UUID, User] = {}
        self._profiles = profiles
        self._projects = projects

    def get_by_id(self, user_id: UUID) -> Optional[User]:
        with self._lock:
            return self._users.get(user_id)

    def get_by_username(self, username: str) -> Optional[User]:
        with self._lock:
            return next(
                (u for u in self._users.values() if u.username == username), None
            )

    def get_by_email(self, email: str) -> Optional[User]:
        with self._lock:
            return next((u for u in self._users.values() if u.email == email), None)

    def list_users(self) -> List[User]:
        oldest = datetime.min.replace(tzinfo=timezone.utc)
        with self._lock:
            return sorted(
                self._users.values(),
                key=lambda u: u.created_at or oldest,
                reverse=True,
            )

    def create_user(self, user: User) -> User:
        with self._lock:
            self._users[user.id] = user
            return user

    def update_user(self, user: User) -> Optional[User]:
        with self._lock:
            if user.id not in self._users:
                return None
            self._users[user.id] = user
            return user

    def delete_user(self, user_id: UUID) -> bool:
        with self._lock:
            removed = self._users.pop(user_id, None) is not None
        if removed and self._profiles is not None:
            self._profiles.delete_by_user_id(user_id)
        if removed and self._projects is not None:
            self._projects.delete_by_user_id(user_id)
        return removed

    def count_users(self, *, active_only: bool = False) -> int:
        with self._lock:
            return sum(1 for u in self._users.values() if u.is_active or not active_only)
