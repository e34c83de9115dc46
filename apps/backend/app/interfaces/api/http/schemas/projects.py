"""
===============================================================================
TARJETA CRC — schemas/projects.py
===============================================================================

Módulo:
    Schemas HTTP para Proyectos del portfolio

Responsabilidades:
    - DTO de response de Project y listado {results, projects}.
    - Requests de alta, update parcial, reorder y visibilidad en lote.

Colaboradores:
    - domain.entities.Project / ProjectSourceType

Notas:
    - Update: un null explícito en un campo no anulable lo rechaza el use case
      (422); image_url se ignora.
===============================================================================
"""

from __future__ import annotations

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, Field

from app.domain.entities import ProjectSourceType


class ProjectRes(BaseModel):
    id: UUID
    user_id: UUID
    title: str
    description: str = ""
    detailed_description: str = ""
    image_url: str | None = None
    project_url: str | None = None
    github_url: str | None = None
    technologies: list[str] = Field(default_factory=list)
    featured: bool = False
    order: int = 0
    is_imported: bool = False
    source_type: str = "manual"
    source_id: str | None = None
    is_visible_in_portfolio: bool = True
    created_at: datetime | None = None
    updated_at: datetime | None = None


class ProjectsListRes(BaseModel):
    results: int
    projects: list[ProjectRes]


class CreateProjectReq(BaseModel):
    title: str = Field(..., min_length=1, max_length=200)
    description: str = ""
    detailed_description: str = ""
    image_url: str | None = None
    project_url: str | None = None
    github_url: str | None = None
    technologies: list[str] = Field(default_factory=list)
    featured: bool = False
    is_imported: bool = False
    source_type: ProjectSourceType = ProjectSourceType.MANUAL
    source_id: str | None = Field(None, max_length=255)
    is_visible_in_portfolio: bool = True


class UpdateProjectReq(BaseModel):
    title: str | None = Field(None, max_length=200)
    description: str | None = None
    detailed_description: str | None = None
    project_url: str | None = None
    github_url: str | None = None
    technologies: list[str] | None = None
    featured: bool | None = None
    order: int | None = Field(None, ge=0)
    is_imported: bool | None = None
    source_type: ProjectSourceType | None = None
    source_id: str | None = Field(None, max_length=255)
    is_visible_in_portfolio: bool | None = None


class ProjectOrderItem(BaseModel):
    id: UUID
    order: int = Field(..., ge=0)


class ReorderProjectsReq(BaseModel):
    project_orders: list[ProjectOrderItem]


class ProjectVisibilityItem(BaseModel):
    id: UUID
    is_visible_in_portfolio: bool


class SetProjectVisibilityReq(BaseModel):
    projects: list[ProjectVisibilityItem]
