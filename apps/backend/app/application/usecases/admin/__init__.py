"""Admin use cases (usuarios + stats)."""

from .admin_results import (  # noqa: F401
    AdminError,
    AdminErrorCode,
    DeleteUserResult,
    UserListResult,
    UserResult,
)
from .manage_users import (  # noqa: F401
    DeleteUserUseCase,
    GetAdminStatsUseCase,
    GetUserUseCase,
    ListUsersUseCase,
    ProvisionUserUseCase,
    UpdateUserUseCase,
)

__all__ = [
    "AdminError",
    "AdminErrorCode",
    "DeleteUserResult",
    "UserListResult",
    "UserResult",
    "DeleteUserUseCase",
    "GetAdminStatsUseCase",
    "GetUserUseCase",
    "ListUsersUseCase",
    "ProvisionUserUseCase",
    "UpdateUserUseCase",
]
