"""
============================================================
TARJETA CRC — infrastructure/repositories/in_memory/project.py
============================================================
Class: InMemoryProjectRepository

Responsibilities:
  - Guardar proyectos en memoria (tests / local dev), keyed por id.
  - Orden alineado con Postgres (project_sort_key).
  - Borrado por usuario para emular el ON DELETE CASCADE.

Constraints:
  - Thread-safe: acceso protegido por Lock.
  - Copias defensivas: los callers nunca mutan el estado interno.
============================================================
"""

from __future__ import annotations

import copy
from datetime import datetime, timezone
from threading import Lock
from typing import Dict, List, Optional
from uuid import UUID

from ....domain.entities import Project, project_sort_key


class InMemoryProjectRepository:
    def __init__(self) -> None:
        self._lock = Lock()
        self._projects: Dict[UUID, Project] = {}

    def get_by_id(self, project_id: UUID) -> Optional[Project]:
        with self._lock:
            project = self._projects.get(project_id)
            return copy.deepcopy(project) if project else None

    def list_by_user(
        self, user_id: UUID, *, visible_only: bool = False
    ) -> List[Project]:
        with self._lock:
            projects = [
                copy.deepcopy(p)
                for p in self._projects.values()
                if p.user_id == user_id
                and (p.is_visible_in_portfolio or not visible_only)
            ]
        return sorted(projects, key=project_sort_key)

    def get_by_source_id(self, user_id: UUID, source_id: str) -> Optional[Project]:
        with self._lock:
            project = next(
                (
                    p
                    for p in self._projects.values()
                    if p.user_id == user_id and p.source_id == source_id
                ),
                None,
            )
            return copy.deepcopy(project) if project else None

    def next_order(self, user_id: UUID) -> int:
        with self._lock:
            orders = [p.order for p in self._projects.values() if p.user_id == user_id]
        return max(orders) + 1 if orders else 0

    def create_project(self, project: Project) -> Project:
        now = datetime.now(timezone.utc)
        stored = copy.deepcopy(project)
        stored.created_at = project.created_at or now
        stored.updated_at = now
        with self._lock:
            self._projects[stored.id] = stored
        return copy.deepcopy(stored)

    def update_project(self, project: Project) -> Optional[Project]:
        with self._lock:
            existing = self._projects.get(project.id)
            if existing is None:
                return None
            stored = copy.deepcopy(project)
            stored.user_id = existing.user_id
            stored.created_at = existing.created_at
            stored.updated_at = datetime.now(timezone.utc)
            self._projects[project.id] = stored
            return copy.deepcopy(stored)

    def delete_project(self, project_id: UUID) -> bool:
        with self._lock:
            return self._projects.pop(project_id, None) is not None

    def delete_by_user_id(self, user_id: UUID) -> None:
        with self._lock:
            for project_id in [
                p.id for p in self._projects.values() if p.user_id == user_id
            ]:
                del self._projects[project_id]
