"""
Project use cases (listados con visibilidad, CRUD, reorder, visibilidad).
"""

from .list_projects import ListMyProjectsUseCase, ListUserProjectsUseCase  # noqa: F401
from .manage_projects import (  # noqa: F401
    CreateProjectUseCase,
    DeleteProjectUseCase,
    GetProjectUseCase,
    ReorderProjectsUseCase,
    SetProjectVisibilityUseCase,
    UpdateProjectUseCase,
)
from .project_results import (  # noqa: F401
    DeleteProjectResult,
    ProjectError,
    ProjectErrorCode,
    ProjectListResult,
    ProjectResult,
)

__all__ = [
    "ListMyProjectsUseCase",
    "ListUserProjectsUseCase",
    "CreateProjectUseCase",
    "DeleteProjectUseCase",
    "GetProjectUseCase",
    "ReorderProjectsUseCase",
    "SetProjectVisibilityUseCase",
    "UpdateProjectUseCase",
    "DeleteProjectResult",
    "ProjectError",
    "ProjectErrorCode",
    "ProjectListResult",
    "ProjectResult",
]
