"""
===============================================================================
USE CASE: Get My Profile (lazy create)
===============================================================================

Business Goal:
    Devolver el perfil del usuario autenticado; si todavía no existe, se crea
    vacío (con su email como contacto) en ese momento.

Error Mapping:
    - NOT_FOUND: el usuario del token ya no existe.
===============================================================================
"""

from __future__ import annotations

from uuid import UUID

from ....crosscutting.logger import logger
from ....domain.entities import Profile
from ....domain.repositories import ProfileRepository, UserRepository
from .profile_results import ProfileError, ProfileErrorCode, ProfileResult


class GetMyProfileUseCase:
    def __init__(
        self, user_repository: UserRepository, profile_repository: ProfileRepository
    ) -> None:
        self._users = user_repository
        self._profiles = profile_repository

    def execute(self, user_id: UUID) -> ProfileResult:
        user = self._users.get_by_id(user_id)
        if user is None:
            return ProfileResult(
                error=ProfileError(ProfileErrorCode.NOT_FOUND, "User not found")
            )

        profile = self._profiles.get_by_user_id(user.id)
        if profile is None:
            profile = self._profiles.save_profile(
                Profile(user_id=user.id, contact_email=user.email)
            )
            logger.info("Profile created lazily", extra={"user_id": str(user.id)})

        return ProfileResult(profile=profile, user=user)
