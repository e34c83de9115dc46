"""
Use Cases Layer (Business Operations)

Structure
---------
usecases/
├── sources/      # GitHub / LinkedIn adapters + traducción memoizada
├── profiles/     # perfil público, perfil propio, update, vista agregada
├── projects/     # proyectos del portfolio (visibilidad, CRUD, reorder)
├── admin/        # alta/baja/rol de usuarios y stats
└── cache_admin/  # invalidación del cache de fuentes

Usage
-----
    from app.application.usecases.profiles import GetAggregatedProfileUseCase
"""

from .admin import (  # noqa: F401
    DeleteUserUseCase,
    GetAdminStatsUseCase,
    GetUserUseCase,
    ListUsersUseCase,
    ProvisionUserUseCase,
    UpdateUserUseCase,
)
from .cache_admin import (  # noqa: F401
    CacheTarget,
    ClearSourceCacheUseCase,
    GetCacheStatsUseCase,
)
from .profiles import (  # noqa: F401
    GetAggregatedProfileUseCase,
    GetMyProfileUseCase,
    GetPublicProfileUseCase,
    UpdateMyProfileUseCase,
)
from .projects import (  # noqa: F401
    CreateProjectUseCase,
    DeleteProjectUseCase,
    GetProjectUseCase,
    ListMyProjectsUseCase,
    ListUserProjectsUseCase,
    ReorderProjectsUseCase,
    SetProjectVisibilityUseCase,
    UpdateProjectUseCase,
)
from .sources import GitHubSource, LinkedInSource, TranslationService  # noqa: F401

__all__ = [
    "DeleteUserUseCase",
    "GetAdminStatsUseCase",
    "GetUserUseCase",
    "ListUsersUseCase",
    "ProvisionUserUseCase",
    "UpdateUserUseCase",
    "CacheTarget",
    "ClearSourceCacheUseCase",
    "GetCacheStatsUseCase",
    "GetAggregatedProfileUseCase",
    "GetMyProfileUseCase",
    "GetPublicProfileUseCase",
    "UpdateMyProfileUseCase",
    "CreateProjectUseCase",
    "DeleteProjectUseCase",
    "GetProjectUseCase",
    "ListMyProjectsUseCase",
    "ListUserProjectsUseCase",
    "ReorderProjectsUseCase",
    "SetProjectVisibilityUseCase",
    "UpdateProjectUseCase",
    "GitHubSource",
    "LinkedInSource",
    "TranslationService",
]
