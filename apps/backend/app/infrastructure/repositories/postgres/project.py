"""
============================================================
TARJETA CRC — infrastructure/repositories/postgres/project.py
============================================================
Class: PostgresProjectRepository

Responsibilities:
- CRUD de proyectos del portfolio (tabla projects).
- Orden estable en SQL: importados primero, sort_order asc, destacados,
  más nuevos.
- technologies se guarda como JSONB (lista de strings).

Collaborators:
- PostgresRepository (pool + helpers)
- domain.entities.Project / ProjectSourceType
- psycopg.types.json.Jsonb

Notas:
- La columna se llama sort_order ("order" es palabra reservada en SQL).
- El borrado del User cae en cascada por FK (ON DELETE CASCADE).
============================================================
"""

from __future__ import annotations

from typing import List, Optional
from uuid import UUID

from psycopg.types.json import Jsonb

from ....crosscutting.exceptions import DatabaseError
from ....domain.entities import Project, ProjectSourceType
from .base import PostgresRepository

_PROJECT_COLUMNS = """
    id, user_id, title, description, detailed_description,
    image_url, project_url, github_url, technologies,
    featured, sort_order, is_imported, source_type, source_id,
    is_visible, created_at, updated_at
"""

_ORDER_BY = "ORDER BY is_imported DESC, sort_order ASC, featured DESC, created_at DESC"


def _row_to_project(row: tuple) -> Project:
    (
        project_id,
        user_id,
        title,
        description,
        detailed_description,
        image_url,
        project_url,
        github_url,
        technologies,
        featured,
        sort_order,
        is_imported,
        source_type,
        source_id,
        is_visible,
        created_at,
        updated_at,
    ) = row

    try:
        parsed_source = ProjectSourceType(source_type)
    except ValueError as exc:
        raise DatabaseError(f"Invalid project source_type: {source_type}") from exc

    return Project(
        id=project_id,
        user_id=user_id,
        title=title,
        description=description or "",
        detailed_description=detailed_description or "",
        image_url=image_url,
        project_url=project_url,
        github_url=github_url,
        technologies=list(technologies or []),
        featured=bool(featured),
        order=int(sort_order or 0),
        is_imported=bool(is_imported),
        source_type=parsed_source,
        source_id=source_id,
        is_visible_in_portfolio=bool(is_visible),
        created_at=created_at,
        updated_at=updated_at,
    )


class PostgresProjectRepository(PostgresRepository):
    def get_by_id(self, project_id: UUID) -> Optional[Project]:
        row = self._fetchone(
            query=f"SELECT {_PROJECT_COLUMNS} FROM projects WHERE id = %s",
            params=[project_id],
            context_msg="Failed to load project",
            extra={"project_id": str(project_id)},
        )
        return _row_to_project(row) if row else None

    def list_by_user(
        self, user_id: UUID, *, visible_only: bool = False
    ) -> List[Project]:
        visible = " AND is_visible" if visible_only else ""
        rows = self._fetchall(
            query=(
                f"SELECT {_PROJECT_COLUMNS} FROM projects "
                f"WHERE user_id = %s{visible} {_ORDER_BY}"
            ),
            params=[user_id],
            context_msg="Failed to list projects",
            extra={"user_id": str(user_id)},
        )
        return [_row_to_project(r) for r in rows]

    def get_by_source_id(self, user_id: UUID, source_id: str) -> Optional[Project]:
        row = self._fetchone(
            query=(
                f"SELECT {_PROJECT_COLUMNS} FROM projects "
                "WHERE user_id = %s AND source_id = %s"
            ),
            params=[user_id, source_id],
            context_msg="Failed to load project by source",
            extra={"user_id": str(user_id)},
        )
        return _row_to_project(row) if row else None

    def next_order(self, user_id: UUID) -> int:
        row = self._fetchone(
            query="SELECT MAX(sort_order) FROM projects WHERE user_id = %s",
            params=[user_id],
            context_msg="Failed to compute project order",
            extra={"user_id": str(user_id)},
        )
        highest = row[0] if row else None
        return int(highest) + 1 if highest is not None else 0

    def create_project(self, project: Project) -> Project:
        row = self._fetchone(
            query=f"""
                INSERT INTO projects (
                    id, user_id, title, description, detailed_description,
                    image_url, project_url, github_url, technologies,
                    featured, sort_order, is_imported, source_type, source_id,
                    is_visible, created_at, updated_at
                )
                VALUES (
                    %s, %s, %s, %s, %s,
                    %s, %s, %s, %s,
                    %s, %s, %s, %s, %s,
                    %s, COALESCE(%s, NOW()), NOW()
                )
                RETURNING {_PROJECT_COLUMNS}
            """,
            params=[
                project.id,
                project.user_id,
                project.title,
                project.description,
                project.detailed_description,
                project.image_url,
                project.project_url,
                project.github_url,
                Jsonb(list(project.technologies)),
                project.featured,
                project.order,
                project.is_imported,
                project.source_type.value,
                project.source_id,
                project.is_visible_in_portfolio,
                project.created_at,
            ],
            context_msg="Failed to create project",
            extra={"project_id": str(project.id), "user_id": str(project.user_id)},
        )
        if row is None:
            raise DatabaseError("Failed to create project: no row returned")
        return _row_to_project(row)

    def update_project(self, project: Project) -> Optional[Project]:
        row = self._fetchone(
            query=f"""
                UPDATE projects SET
                    title = %s,
                    description = %s,
                    detailed_description = %s,
                    image_url = %s,
                    project_url = %s,
                    github_url = %s,
                    technologies = %s,
                    featured = %s,
                    sort_order = %s,
                    is_imported = %s,
                    source_type = %s,
                    source_id = %s,
                    is_visible = %s,
                    updated_at = NOW()
                WHERE id = %s
                RETURNING {_PROJECT_COLUMNS}
            """,
            params=[
                project.title,
                project.description,
                project.detailed_description,
                project.image_url,
                project.project_url,
                project.github_url,
                Jsonb(list(project.technologies)),
                project.featured,
                project.order,
                project.is_imported,
                project.source_type.value,
                project.source_id,
                project.is_visible_in_portfolio,
                project.id,
            ],
            context_msg="Failed to update project",
            extra={"project_id": str(project.id)},
        )
        return _row_to_project(row) if row else None

    def delete_project(self, project_id: UUID) -> bool:
        deleted = self._execute(
            query="DELETE FROM projects WHERE id = %s",
            params=[project_id],
            context_msg="Failed to delete project",
            extra={"project_id": str(project_id)},
        )
        return deleted > 0
