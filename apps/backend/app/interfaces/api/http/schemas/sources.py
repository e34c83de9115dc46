"""
===============================================================================
TARJETA CRC — schemas/sources.py
===============================================================================

Módulo:
    Schemas HTTP para fuentes externas (GitHub, LinkedIn, traducción)

Responsabilidades:
    - Envelopes de response de los endpoints de integración.
    - Request de traducción con validación de borde (texto no vacío).

Notas:
    - Los payloads de GitHub/LinkedIn ya vienen normalizados por la capa
      application: acá solo se tipa el envelope, no cada campo.
===============================================================================
"""

from __future__ import annotations

from typing import Any, Literal

from pydantic import BaseModel, Field


class GitHubProfileRes(BaseModel):
    projects: list[dict[str, Any]]
    skills: dict[str, list[str]]


class GitHubSkillsRes(BaseModel):
    status: Literal["success"] = "success"
    data: dict[str, list[str]]


class LinkedInProfileRes(BaseModel):
    profile: dict[str, Any]
    bio: dict[str, str]


class TranslateReq(BaseModel):
    text: str = Field(..., min_length=1)
    source: str = Field("en", min_length=2, max_length=8)
    target: str = Field("de", min_length=2, max_length=8)


class TranslateRes(BaseModel):
    translation: str
    source: Literal["cache", "api", "noop"]
