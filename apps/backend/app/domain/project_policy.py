"""
===============================================================================
TARJETA CRC — domain/project_policy.py
===============================================================================

Módulo:
    Política de Acceso a Proyectos (Lectura/Escritura)

Responsabilidades:
    - Definir reglas puras de acceso a proyectos (sin DB, sin FastAPI).
    - Separar "policy" de "repos" (repos solo traen datos, policy decide).

Colaboradores:
    - domain.entities.Project
    - identity.users.UserRole
    - application.usecases.projects: consultan esta policy.

Reglas:
    - Admin puede todo.
    - Owner puede leer/escribir sus proyectos (visibles u ocultos).
    - Anónimos y terceros solo leen proyectos visibles.
===============================================================================
"""

from __future__ import annotations

from dataclasses import dataclass
from uuid import UUID

from ..identity.users import UserRole
from .entities import Project


@dataclass(frozen=True, slots=True)
class ProjectActor:
    """Actor para decisiones de acceso a proyectos (None = anónimo)."""

    user_id: UUID | None
    role: UserRole | None


def sees_hidden_projects(owner_id: UUID, actor: ProjectActor | None) -> bool:
    """True si el actor ve los proyectos ocultos del usuario owner_id."""
    if actor is None or actor.role is None:
        return False
    if actor.role == UserRole.ADMIN:
        return True
    return actor.user_id is not None and actor.user_id == owner_id


def can_manage_project(project: Project, actor: ProjectActor | None) -> bool:
    """Evalúa permiso de escritura (update/delete/visibilidad)."""
    return sees_hidden_projects(project.user_id, actor)


def can_view_project(project: Project, actor: ProjectActor | None) -> bool:
    if project.is_visible_in_portfolio:
        return True
    return can_manage_project(project, actor)
