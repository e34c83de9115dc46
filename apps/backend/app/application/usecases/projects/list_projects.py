"""
===============================================================================
USE CASES: Listado de proyectos
===============================================================================

Business Goal:
    Listar los proyectos de un portfolio (por username o user_id) y los del
    usuario autenticado.

Reglas:
    - Anónimos y terceros solo ven proyectos con is_visible_in_portfolio.
    - Dueño y admin ven también los ocultos.
    - Orden: importados primero, order asc, destacados, más nuevos.

Error Mapping:
    - VALIDATION_ERROR: ni username ni user_id.
    - NOT_FOUND: usuario inexistente.
===============================================================================
"""

from __future__ import annotations

from uuid import UUID

from ....domain.project_policy import ProjectActor, sees_hidden_projects
from ....domain.repositories import ProjectRepository, UserRepository
from .project_results import ProjectError, ProjectErrorCode, ProjectListResult


class ListUserProjectsUseCase:
    def __init__(
        self, user_repository: UserRepository, project_repository: ProjectRepository
    ) -> None:
        self._users = user_repository
        self._projects = project_repository

    def execute(
        self,
        *,
        username: str | None = None,
        user_id: UUID | None = None,
        actor: ProjectActor | None = None,
    ) -> ProjectListResult:
        if user_id is not None:
            user = self._users.get_by_id(user_id)
        elif username:
            user = self._users.get_by_username(username)
        else:
            return ProjectListResult(
                error=ProjectError(
                    ProjectErrorCode.VALIDATION_ERROR,
                    "Either userId or username is required",
                )
            )

        if user is None:
            return ProjectListResult(
                error=ProjectError(
                    ProjectErrorCode.NOT_FOUND,
                    "User not found",
                    resource="User",
                    identifier=str(user_id) if user_id else username,
                )
            )

        visible_only = not sees_hidden_projects(user.id, actor)
        return ProjectListResult(
            projects=self._projects.list_by_user(user.id, visible_only=visible_only)
        )


class ListMyProjectsUseCase:
    def __init__(self, project_repository: ProjectRepository) -> None:
        self._projects = project_repository

    def execute(self, user_id: UUID) -> ProjectListResult:
        return ProjectListResult(projects=self._projects.list_by_user(user_id))
