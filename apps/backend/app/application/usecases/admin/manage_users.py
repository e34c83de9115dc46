"""
===============================================================================
USE CASES: Administración de usuarios
===============================================================================

Business Goal:
    Alta, consulta, listado, cambio de rol/estado y baja de usuarios del
    portfolio por un administrador, más conteos para el panel.

-------------------------------------------------------------------------------
CRC CARD (Class-Responsibility-Collaborator)
-------------------------------------------------------------------------------
Classes:
    ProvisionUserUseCase  -> crea User + Profile sembrado (contact_email)
    ListUsersUseCase      -> lista usuarios
    GetUserUseCase        -> un usuario por id
    UpdateUserUseCase     -> cambia role y/o is_active
    DeleteUserUseCase     -> borra User (el Profile cae en cascada)
    GetAdminStatsUseCase  -> PortfolioStats

Error Mapping:
    - VALIDATION_ERROR: username/email vacíos; update sin cambios
    - CONFLICT: username o email ya registrados
    - NOT_FOUND: usuario inexistente (get/update/delete)

Collaborators:
    - UserRepository / ProfileRepository
===============================================================================
"""

from __future__ import annotations

from dataclasses import replace
from datetime import datetime, timezone
from uuid import UUID, uuid4

from ....crosscutting.logger import logger
from ....domain.entities import PortfolioStats, Profile
from ....domain.repositories import ProfileRepository, UserRepository
from ....identity.users import User, UserRole
from .admin_results import (
    AdminError,
    AdminErrorCode,
    DeleteUserResult,
    UserListResult,
    UserResult,
)


class ProvisionUserUseCase:
    def __init__(
        self, user_repository: UserRepository, profile_repository: ProfileRepository
    ) -> None:
        self._users = user_repository
        self._profiles = profile_repository

    def execute(
        self, *, username: str, email: str, role: UserRole = UserRole.USER
    ) -> UserResult:
        username = (username or "").strip()
        email = (email or "").strip().lower()
        if not username or not email:
            return UserResult(
                error=AdminError(
                    AdminErrorCode.VALIDATION_ERROR, "username and email are required"
                )
            )

        if self._users.get_by_username(username) is not None:
            return self._conflict("Username already taken")
        if self._users.get_by_email(email) is not None:
            return self._conflict("Email already registered")

        now = datetime.now(timezone.utc)
        user = self._users.create_user(
            User(
                id=uuid4(),
                username=username,
                email=email,
                role=role,
                is_active=True,
                created_at=now,
            )
        )
        self._profiles.save_profile(
            Profile(user_id=user.id, contact_email=email, created_at=now, updated_at=now)
        )

        logger.info(
            "User provisioned",
            extra={"user_id": str(user.id), "role": user.role.value},
        )
        return UserResult(user=user)

    @staticmethod
    def _conflict(message: str) -> UserResult:
        return UserResult(error=AdminError(AdminErrorCode.CONFLICT, message))


class ListUsersUseCase:
    def __init__(self, user_repository: UserRepository) -> None:
        self._users = user_repository

    def execute(self) -> UserListResult:
        return UserListResult(users=self._users.list_users())


class GetUserUseCase:
    def __init__(self, user_repository: UserRepository) -> None:
        self._users = user_repository

    def execute(self, user_id: UUID) -> UserResult:
        user = self._users.get_by_id(user_id)
        if user is None:
            return UserResult(error=AdminError(AdminErrorCode.NOT_FOUND, "User not found"))
        return UserResult(user=user)


class UpdateUserUseCase:
    """
    Cambia rol y/o estado de un usuario.

    Nota:
      - Los tokens ya emitidos no se revocan: el rol del token vale hasta que
        expira.
    """

    def __init__(self, user_repository: UserRepository) -> None:
        self._users = user_repository

    def execute(
        self,
        user_id: UUID,
        *,
        role: UserRole | None = None,
        is_active: bool | None = None,
    ) -> UserResult:
        if role is None and is_active is None:
            return UserResult(
                error=AdminError(
                    AdminErrorCode.VALIDATION_ERROR, "role or is_active is required"
                )
            )

        user = self._users.get_by_id(user_id)
        if user is None:
            return UserResult(error=AdminError(AdminErrorCode.NOT_FOUND, "User not found"))

        changes = {}
        if role is not None:
            changes["role"] = role
        if is_active is not None:
            changes["is_active"] = is_active
        updated = self._users.update_user(replace(user, **changes))
        if updated is None:
            return UserResult(error=AdminError(AdminErrorCode.NOT_FOUND, "User not found"))

        logger.info(
            "User updated",
            extra={
                "user_id": str(user_id),
                "role": updated.role.value,
                "is_active": updated.is_active,
            },
        )
        return UserResult(user=updated)


class DeleteUserUseCase:
    def __init__(self, user_repository: UserRepository) -> None:
        self._users = user_repository

    def execute(self, user_id: UUID) -> DeleteUserResult:
        if not self._users.delete_user(user_id):
            return DeleteUserResult(
                deleted=False,
                error=AdminError(AdminErrorCode.NOT_FOUND, "User not found"),
            )
        logger.info("User deleted", extra={"user_id": str(user_id)})
        return DeleteUserResult(deleted=True)


class GetAdminStatsUseCase:
    def __init__(
        self, user_repository: UserRepository, profile_repository: ProfileRepository
    ) -> None:
        self._users = user_repository
        self._profiles = profile_repository

    def execute(self) -> PortfolioStats:
        return PortfolioStats(
            users=self._users.count_users(),
            active_users=self._users.count_users(active_only=True),
            profiles=self._profiles.count_profiles(),
        )
