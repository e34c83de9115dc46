"""
===============================================================================
TARJETA CRC — domain/entities.py
===============================================================================

Módulo:
    Entidades del Dominio (Profile, Skill, LanguageEntry, ExperienceEntry,
    ProfileSettings, Project, TranslationRecord)

Responsabilidades:
    - Definir estructuras centrales del portfolio (sin infraestructura).
    - Brindar helpers mínimos para invariantes simples (visibilidad, links).
    - Mantener tipos claros para casos de uso y repositorios.

Colaboradores:
    - domain.repositories: persisten/recuperan estas entidades.
    - application/usecases: construyen/consumen estas entidades.
    - interfaces/api: serializan/retornan DTOs basados en estas entidades.

Principios:
    - Sin dependencias a DB/Redis/FastAPI.
    - Datos + comportamiento mínimo.
===============================================================================
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from typing import Dict, List, Optional
from uuid import UUID


def _utcnow() -> datetime:
    """Fecha/hora UTC (helper interno)."""
    return datetime.now(timezone.utc)


# ---------------------------------------------------------------------------
# Items de perfil
# ---------------------------------------------------------------------------


class ItemSource(str, Enum):
    """Origen de un item del perfil (skill, idioma, experiencia)."""

    GITHUB = "github"
    LINKEDIN = "linkedin"
    CUSTOM = "custom"


@dataclass
class Skill:
    name: str
    source: ItemSource = ItemSource.CUSTOM
    is_visible: bool = True


@dataclass
class LanguageEntry:
    label: str
    source: ItemSource = ItemSource.CUSTOM
    is_visible: bool = True


@dataclass
class ExperienceEntry:
    title: str
    company: str = ""
    description: str = ""
    start_date: str = ""
    end_date: str = ""
    source: ItemSource = ItemSource.CUSTOM
    is_visible: bool = True


@dataclass
class ProfileSettings:
    """Preferencias de presentación del portfolio."""

    theme: str = "light"
    show_skills: bool = True
    show_contact: bool = True
    show_github: bool = True
    show_linkedin: bool = True


# R: Campos de media que se sirven como URL absoluta en la vista agregada.
MEDIA_FIELDS: tuple[str, ...] = (
    "profile_image_url",
    "header_image_url",
    "cv_view_url",
    "cv_download_url",
    "cv_file_url",
)


# ---------------------------------------------------------------------------
# Profile
# ---------------------------------------------------------------------------


@dataclass
class Profile:
    """
    Perfil público de un usuario (1:1 con User, keyed por user_id).

    Importante:
      - social_links guarda URLs por proveedor (github, linkedin, twitter, ...).
      - Solo el dueño lo modifica; se elimina junto con su User.
    """

    user_id: UUID
    name: str = ""
    title: str = ""
    bio: str = ""
    location: str = ""
    contact_email: str = ""
    phone: str = ""
    skills: List[Skill] = field(default_factory=list)
    languages: List[LanguageEntry] = field(default_factory=list)
    experience: List[ExperienceEntry] = field(default_factory=list)
    social_links: Dict[str, str] = field(default_factory=dict)
    profile_image_url: Optional[str] = None
    header_image_url: Optional[str] = None
    cv_view_url: Optional[str] = None
    cv_download_url: Optional[str] = None
    cv_file_url: Optional[str] = None
    settings: ProfileSettings = field(default_factory=ProfileSettings)
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    def visible_skill_names(self) -> List[str]:
        """Nombres de skills visibles, en el orden del perfil."""
        return [s.name for s in self.skills if s.is_visible and s.name]

    def social_link(self, provider: str) -> Optional[str]:
        """URL configurada para un proveedor (None si vacía)."""
        value = (self.social_links.get(provider) or "").strip()
        return value or None

    def touch(self, *, at: datetime | None = None) -> None:
        self.updated_at = at or _utcnow()


# ---------------------------------------------------------------------------
# Project
# ---------------------------------------------------------------------------


class ProjectSourceType(str, Enum):
    """Origen de un proyecto del portfolio."""

    MANUAL = "manual"
    GITHUB = "github"
    EXTERNAL = "external"


@dataclass
class Project:
    """
    Proyecto mostrado en el portfolio de un usuario.

    Importante:
      - source_id identifica el item de origen (ej. repo de GitHub); un mismo
        usuario no puede importarlo dos veces.
      - is_visible_in_portfolio=False lo oculta a todos salvo dueño y admin.
    """

    id: UUID
    user_id: UUID
    title: str
    description: str = ""
    detailed_description: str = ""
    image_url: Optional[str] = None
    project_url: Optional[str] = None
    github_url: Optional[str] = None
    technologies: List[str] = field(default_factory=list)
    featured: bool = False
    order: int = 0
    is_imported: bool = False
    source_type: ProjectSourceType = ProjectSourceType.MANUAL
    source_id: Optional[str] = None
    is_visible_in_portfolio: bool = True
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    def touch(self, *, at: datetime | None = None) -> None:
        self.updated_at = at or _utcnow()


def project_sort_key(project: Project) -> tuple:
    """Importados primero, luego order asc, destacados y más nuevos."""
    created = project.created_at.timestamp() if project.created_at else 0.0
    return (
        not project.is_imported,
        project.order,
        not project.featured,
        -created,
    )


# ---------------------------------------------------------------------------
# Translation memo
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class TranslationRecord:
    """
    Traducción memoizada por (hash, source_language, target_language).

    Nunca se actualiza ni expira.
    """

    hash: str
    source_language: str
    target_language: str
    original_text: str
    translated_text: str
    created_at: Optional[datetime] = None


@dataclass(frozen=True)
class PortfolioStats:
    """Conteos para el panel de administración."""

    users: int
    active_users: int
    profiles: int
