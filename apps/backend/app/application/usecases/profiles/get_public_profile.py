"""
===============================================================================
USE CASE: Get Public Profile
===============================================================================

Business Goal:
    Leer el perfil público de un usuario por username.

Error Mapping:
    - NOT_FOUND: username inexistente o usuario sin perfil.
===============================================================================
"""

from __future__ import annotations

from ....domain.repositories import ProfileRepository, UserRepository
from .profile_results import ProfileError, ProfileErrorCode, ProfileResult


class GetPublicProfileUseCase:
    def __init__(
        self, user_repository: UserRepository, profile_repository: ProfileRepository
    ) -> None:
        self._users = user_repository
        self._profiles = profile_repository

    def execute(self, username: str) -> ProfileResult:
        user = self._users.get_by_username(username)
        if user is None:
            return ProfileResult(
                error=ProfileError(ProfileErrorCode.NOT_FOUND, "User not found")
            )

        profile = self._profiles.get_by_user_id(user.id)
        if profile is None:
            return ProfileResult(
                error=ProfileError(ProfileErrorCode.NOT_FOUND, "Profile not found")
            )

        return ProfileResult(profile=profile, user=user)
