"""
===============================================================================
USE CASES: Gestión de proyectos del portfolio
===============================================================================

Business Goal:
    Leer, crear, editar, borrar, reordenar y ocultar/mostrar proyectos.

-------------------------------------------------------------------------------
CRC CARD (Class-Responsibility-Collaborator)
-------------------------------------------------------------------------------
Classes:
    GetProjectUseCase            -> un proyecto (ocultos solo dueño/admin)
    CreateProjectUseCase         -> alta al final del orden del usuario
    UpdateProjectUseCase         -> cambios parciales (dueño o admin)
    DeleteProjectUseCase         -> baja (dueño o admin)
    ReorderProjectsUseCase       -> asigna order en lote (solo dueño)
    SetProjectVisibilityUseCase  -> is_visible_in_portfolio en lote

Reglas:
    - El order de un proyecto nuevo es el mayor del usuario + 1.
    - Un repo de GitHub (source_type=github + source_id) se importa una vez.
    - Update ignora id, user_id, timestamps e image_url.
    - Las operaciones en lote validan todos los items antes de escribir.

Error Mapping:
    - VALIDATION_ERROR: título vacío o valor con tipo inválido
    - NOT_FOUND: proyecto inexistente
    - FORBIDDEN: el actor no es dueño (ni admin, donde aplica)
    - CONFLICT: import duplicado de GitHub

Collaborators:
    - ProjectRepository
    - domain.project_policy
===============================================================================
"""

from __future__ import annotations

from dataclasses import replace
from typing import Any, Mapping, Sequence
from uuid import UUID, uuid4

from ....crosscutting.logger import logger
from ....domain.entities import Project, ProjectSourceType
from ....domain.project_policy import ProjectActor, can_manage_project, can_view_project
from ....domain.repositories import ProjectRepository
from .project_results import (
    DeleteProjectResult,
    ProjectError,
    ProjectErrorCode,
    ProjectListResult,
    ProjectResult,
)

RESTRICTED_FIELDS: frozenset[str] = frozenset(
    {"id", "user_id", "created_at", "updated_at", "image_url"}
)

_TEXT_FIELDS = ("description", "detailed_description")
_OPTIONAL_TEXT_FIELDS = ("image_url", "project_url", "github_url", "source_id")
_BOOL_FIELDS = ("featured", "is_imported", "is_visible_in_portfolio")

DUPLICATE_IMPORT_MESSAGE = "This project has already been imported."


class InvalidProjectData(ValueError):
    """Valor con tipo inválido en el payload de un proyecto."""


def _not_found(project_id: UUID) -> ProjectError:
    return ProjectError(
        ProjectErrorCode.NOT_FOUND, "Project not found", identifier=str(project_id)
    )


def _forbidden(message: str) -> ProjectError:
    return ProjectError(ProjectErrorCode.FORBIDDEN, message)


def _clean(data: Mapping[str, Any]) -> dict[str, Any]:
    """Normaliza y valida los campos conocidos; el resto se descarta."""
    out: dict[str, Any] = {}
    for key, value in data.items():
        if key == "title":
            if not isinstance(value, str) or not value.strip():
                raise InvalidProjectData("Project title is required")
            out[key] = value.strip()
        elif key in _TEXT_FIELDS:
            if not isinstance(value, str):
                raise InvalidProjectData(f'Field "{key}" must be a string')
            out[key] = value.strip()
        elif key in _OPTIONAL_TEXT_FIELDS:
            if value is not None and not isinstance(value, str):
                raise InvalidProjectData(f'Field "{key}" must be a string')
            out[key] = (value or "").strip() or None
        elif key in _BOOL_FIELDS:
            if not isinstance(value, bool):
                raise InvalidProjectData(f'Field "{key}" must be a boolean')
            out[key] = value
        elif key == "technologies":
            if not isinstance(value, list) or not all(
                isinstance(t, str) for t in value
            ):
                raise InvalidProjectData(
                    'Field "technologies" must be a list of strings'
                )
            out[key] = [t.strip() for t in value if t.strip()]
        elif key == "order":
            if isinstance(value, bool) or not isinstance(value, int) or value < 0:
                raise InvalidProjectData('Field "order" must be a non-negative integer')
            out[key] = value
        elif key == "source_type":
            try:
                out[key] = ProjectSourceType(value)
            except ValueError as exc:
                raise InvalidProjectData(f"Invalid source_type {value!r}") from exc
    return out


def _is_github_import(project: Project) -> bool:
    return project.source_type == ProjectSourceType.GITHUB and bool(project.source_id)


class GetProjectUseCase:
    def __init__(self, project_repository: ProjectRepository) -> None:
        self._projects = project_repository

    def execute(
        self, project_id: UUID, actor: ProjectActor | None = None
    ) -> ProjectResult:
        project = self._projects.get_by_id(project_id)
        if project is None:
            return ProjectResult(error=_not_found(project_id))
        if not can_view_project(project, actor):
            return ProjectResult(
                error=_forbidden("You do not have permission to view this project")
            )
        return ProjectResult(project=project)


class CreateProjectUseCase:
    def __init__(self, project_repository: ProjectRepository) -> None:
        self._projects = project_repository

    def execute(self, user_id: UUID, data: Mapping[str, Any]) -> ProjectResult:
        try:
            fields = _clean(
                {k: v for k, v in data.items() if k not in {"id", "user_id"}}
            )
        except InvalidProjectData as exc:
            return ProjectResult(
                error=ProjectError(ProjectErrorCode.VALIDATION_ERROR, str(exc))
            )
        if "title" not in fields:
            return ProjectResult(
                error=ProjectError(
                    ProjectErrorCode.VALIDATION_ERROR, "Project title is required"
                )
            )

        fields["order"] = self._projects.next_order(user_id)
        project = Project(id=uuid4(), user_id=user_id, **fields)

        if _is_github_import(project) and self._projects.get_by_source_id(
            user_id, project.source_id
        ):
            return ProjectResult(
                error=ProjectError(ProjectErrorCode.CONFLICT, DUPLICATE_IMPORT_MESSAGE)
            )

        created = self._projects.create_project(project)
        logger.info(
            "Project created",
            extra={
                "project_id": str(created.id),
                "user_id": str(user_id),
                "source_type": created.source_type.value,
            },
        )
        return ProjectResult(project=created)


class UpdateProjectUseCase:
    def __init__(self, project_repository: ProjectRepository) -> None:
        self._projects = project_repository

    def execute(
        self, project_id: UUID, actor: ProjectActor, changes: Mapping[str, Any]
    ) -> ProjectResult:
        project = self._projects.get_by_id(project_id)
        if project is None:
            return ProjectResult(error=_not_found(project_id))
        if not can_manage_project(project, actor):
            return ProjectResult(
                error=_forbidden("You do not have permission to update this project")
            )

        try:
            fields = _clean(
                {k: v for k, v in changes.items() if k not in RESTRICTED_FIELDS}
            )
        except InvalidProjectData as exc:
            return ProjectResult(
                error=ProjectError(ProjectErrorCode.VALIDATION_ERROR, str(exc))
            )

        updated = replace(project, **fields)
        if _is_github_import(updated):
            existing = self._projects.get_by_source_id(
                updated.user_id, updated.source_id
            )
            if existing is not None and existing.id != updated.id:
                return ProjectResult(
                    error=ProjectError(
                        ProjectErrorCode.CONFLICT, DUPLICATE_IMPORT_MESSAGE
                    )
                )

        saved = self._projects.update_project(updated)
        if saved is None:
            return ProjectResult(error=_not_found(project_id))
        return ProjectResult(project=saved)


class DeleteProjectUseCase:
    def __init__(self, project_repository: ProjectRepository) -> None:
        self._projects = project_repository

    def execute(self, project_id: UUID, actor: ProjectActor) -> DeleteProjectResult:
        project = self._projects.get_by_id(project_id)
        if project is None:
            return DeleteProjectResult(deleted=False, error=_not_found(project_id))
        if not can_manage_project(project, actor):
            return DeleteProjectResult(
                deleted=False,
                error=_forbidden("You do not have permission to delete this project"),
            )

        deleted = self._projects.delete_project(project_id)
        if deleted:
            logger.info(
                "Project deleted",
                extra={"project_id": str(project_id), "user_id": str(project.user_id)},
            )
        return DeleteProjectResult(deleted=deleted)


class ReorderProjectsUseCase:
    """
    Asigna order a varios proyectos del actor.

    Nota:
      - Solo el dueño reordena (un admin no reordena portfolios ajenos).
    """

    def __init__(self, project_repository: ProjectRepository) -> None:
        self._projects = project_repository

    def execute(
        self, actor: ProjectActor, orders: Sequence[tuple[UUID, int]]
    ) -> ProjectListResult:
        pending: list[Project] = []
        for project_id, order in orders:
            project = self._projects.get_by_id(project_id)
            if project is None:
                return ProjectListResult(error=_not_found(project_id))
            if project.user_id != actor.user_id:
                return ProjectListResult(
                    error=_forbidden(
                        f"Project with ID {project_id} does not belong to you"
                    )
                )
            pending.append(replace(project, order=order))

        saved = [p for p in map(self._projects.update_project, pending) if p]
        logger.info(
            "Projects reordered",
            extra={"user_id": str(actor.user_id), "count": len(saved)},
        )
        return ProjectListResult(projects=saved)


class SetProjectVisibilityUseCase:
    def __init__(self, project_repository: ProjectRepository) -> None:
        self._projects = project_repository

    def execute(
        self, actor: ProjectActor, visibility: Sequence[tuple[UUID, bool]]
    ) -> ProjectListResult:
        pending: list[Project] = []
        for project_id, is_visible in visibility:
            project = self._projects.get_by_id(project_id)
            if project is None:
                return ProjectListResult(error=_not_found(project_id))
            if not can_manage_project(project, actor):
                return ProjectListResult(
                    error=_forbidden(
                        "You do not have permission to update this project"
                    )
                )
            pending.append(replace(project, is_visible_in_portfolio=is_visible))

        saved = [p for p in map(self._projects.update_project, pending) if p]
        return ProjectListResult(projects=saved)
