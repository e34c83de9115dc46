"""
===============================================================================
ADMIN USE CASE RESULTS
===============================================================================

Responsibilities:
    - AdminErrorCode / AdminError
    - UserResult, UserListResult, DeleteUserResult
===============================================================================
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import List

from ....identity.users import User


class AdminErrorCode(str, Enum):
    VALIDATION_ERROR = "VALIDATION_ERROR"
    NOT_FOUND = "NOT_FOUND"
    CONFLICT = "CONFLICT"


@dataclass(frozen=True)
class AdminError:
    code: AdminErrorCode
    message: str


@dataclass
class UserResult:
    user: User | None = None
    error: AdminError | None = None


@dataclass
class UserListResult:
    users: List[User]
    error: AdminError | None = None


@dataclass
class DeleteUserResult:
    deleted: bool
    error: AdminError | None = None
