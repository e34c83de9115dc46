"""
Profile use cases (lectura pública, perfil propio, update, vista agregada).
"""

from .get_aggregated_profile import GetAggregatedProfileUseCase  # noqa: F401
from .get_my_profile import GetMyProfileUseCase  # noqa: F401
from .get_public_profile import GetPublicProfileUseCase  # noqa: F401
from .profile_results import (  # noqa: F401
    AggregatedProfileResult,
    AggregatedProfileView,
    ProfileError,
    ProfileErrorCode,
    ProfileResult,
    SourceState,
    SourceStatus,
)
from .update_my_profile import UpdateMyProfileUseCase  # noqa: F401

__all__ = [
    "GetAggregatedProfileUseCase",
    "GetMyProfileUseCase",
    "GetPublicProfileUseCase",
    "UpdateMyProfileUseCase",
    "AggregatedProfileResult",
    "AggregatedProfileView",
    "ProfileError",
    "ProfileErrorCode",
    "ProfileResult",
    "SourceState",
    "SourceStatus",
]
