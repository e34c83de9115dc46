"""
===============================================================================
TARJETA CRC — schemas/profiles.py
===============================================================================

Módulo:
    Schemas HTTP para Perfiles (público, propio, vista agregada)

Responsabilidades:
    - DTOs de response para Profile y sus items (skills, idiomas, experiencia).
    - Request de update parcial (PATCH /profiles/me) tipado: items con
      nombre obligatorio y source válido; las reglas de campos permitidos
      viven en el use case.
    - Envelope {status, data} de la vista agregada.

Colaboradores:
    - domain.entities.Profile
    - application.usecases.profiles.AggregatedProfileView
===============================================================================
"""

from __future__ import annotations

from datetime import datetime
from typing import Any, Literal
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field

from app.domain.entities import ItemSource


class SkillRes(BaseModel):
    name: str
    source: str = "custom"
    is_visible: bool = True


class LanguageRes(BaseModel):
    label: str
    source: str = "custom"
    is_visible: bool = True


class ExperienceRes(BaseModel):
    title: str
    company: str = ""
    description: str = ""
    start_date: str = ""
    end_date: str = ""
    source: str = "custom"
    is_visible: bool = True


class ProfileSettingsRes(BaseModel):
    theme: str = "light"
    show_skills: bool = True
    show_contact: bool = True
    show_github: bool = True
    show_linkedin: bool = True


class ProfileRes(BaseModel):
    """Perfil serializable (sin datos de identidad del User)."""

    user_id: UUID
    name: str = ""
    title: str = ""
    bio: str = ""
    location: str = ""
    contact_email: str = ""
    phone: str = ""
    skills: list[SkillRes] = Field(default_factory=list)
    languages: list[LanguageRes] = Field(default_factory=list)
    experience: list[ExperienceRes] = Field(default_factory=list)
    social_links: dict[str, str] = Field(default_factory=dict)
    profile_image_url: str | None = None
    header_image_url: str | None = None
    cv_view_url: str | None = None
    cv_download_url: str | None = None
    cv_file_url: str | None = None
    settings: ProfileSettingsRes = Field(default_factory=ProfileSettingsRes)
    created_at: datetime | None = None
    updated_at: datetime | None = None


class OwnerRes(BaseModel):
    username: str
    email: str


class PublicProfileRes(BaseModel):
    user: OwnerRes
    profile: ProfileRes


class SkillReq(BaseModel):
    name: str = Field(..., min_length=1, max_length=100)
    source: ItemSource = ItemSource.CUSTOM
    is_visible: bool = True


class LanguageReq(BaseModel):
    label: str = Field(..., min_length=1, max_length=100)
    source: ItemSource = ItemSource.CUSTOM
    is_visible: bool = True


class ExperienceReq(BaseModel):
    title: str = Field(..., min_length=1, max_length=200)
    company: str = ""
    description: str = ""
    start_date: str = ""
    end_date: str = ""
    source: ItemSource = ItemSource.CUSTOM
    is_visible: bool = True


class ProfileSettingsReq(BaseModel):
    theme: str = "light"
    show_skills: bool = True
    show_contact: bool = True
    show_github: bool = True
    show_linkedin: bool = True


class UpdateProfileReq(BaseModel):
    """
    Cambios parciales del perfil.

    Se aceptan claves extra para poder rechazar campos de identidad
    (email/username/role/password) con un mensaje claro. Los campos de texto
    no admiten null (se omiten o se envían como string); solo las URLs de
    media admiten null para limpiarlas.
    """

    model_config = ConfigDict(extra="allow")

    name: str = ""
    title: str = ""
    bio: str = ""
    about: str = ""
    location: str = ""
    contact_email: str = ""
    phone: str = ""
    skills: list[SkillReq] = Field(default_factory=list)
    languages: list[LanguageReq] = Field(default_factory=list)
    experience: list[ExperienceReq] = Field(default_factory=list)
    social_links: dict[str, str | None] = Field(default_factory=dict)
    header_image_url: str | None = None
    cv_view_url: str | None = None
    cv_download_url: str | None = None
    settings: ProfileSettingsReq = Field(default_factory=ProfileSettingsReq)


class CombinedSkillsRes(BaseModel):
    programming_languages: list[str] = Field(default_factory=list)
    other_skills: list[str] = Field(default_factory=list)


class AggregatedProfileData(BaseModel):
    username: str
    profile: ProfileRes
    combined_skills: CombinedSkillsRes
    github_skills: dict[str, list[str]]
    linkedin_data: dict[str, Any] | None = None


class AggregatedProfileRes(BaseModel):
    status: Literal["success"] = "success"
    data: AggregatedProfileData
