"""
===============================================================================
PROFILE USE CASE RESULTS (Shared Result / Error Models)
===============================================================================

Why (Context / Intención):
    - Los use cases devuelven resultados tipados en lugar de lanzar excepciones
      “hacia afuera”; la capa HTTP mapea ProfileErrorCode a status codes.
    - Las fallas de fuentes externas NO son errores de estos resultados:
      el agregador degrada y lo registra en source_status.

-------------------------------------------------------------------------------
CRC CARD (Class-Responsibility-Collaborator)
-------------------------------------------------------------------------------
Component:
    profile_results models (module)

Responsibilities:
    - ProfileErrorCode / ProfileError
    - ProfileResult (perfil + dueño)
    - SourceStatus (ok | unavailable | not_configured) por fuente
    - AggregatedProfileView / AggregatedProfileResult

Collaborators:
    - domain.entities.Profile
    - identity.users.User
===============================================================================
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict

from ....domain.entities import Profile
from ....identity.users import User


class ProfileErrorCode(str, Enum):
    VALIDATION_ERROR = "VALIDATION_ERROR"
    NOT_FOUND = "NOT_FOUND"


@dataclass(frozen=True)
class ProfileError:
    code: ProfileErrorCode
    message: str


@dataclass
class ProfileResult:
    """
    Contrato:
      - éxito: profile y user presentes, error None
      - fallo: error presente
    """

    profile: Profile | None = None
    user: User | None = None
    error: ProfileError | None = None


class SourceState(str, Enum):
    OK = "ok"
    UNAVAILABLE = "unavailable"
    NOT_CONFIGURED = "not_configured"


@dataclass(frozen=True)
class SourceStatus:
    """Resultado interno por fuente (no se expone en el payload público)."""

    state: SourceState
    reason: str | None = None

    @classmethod
    def ok(cls) -> "SourceStatus":
        return cls(SourceState.OK)

    @classmethod
    def unavailable(cls, reason: str) -> "SourceStatus":
        return cls(SourceState.UNAVAILABLE, reason)

    @classmethod
    def not_configured(cls) -> "SourceStatus":
        return cls(SourceState.NOT_CONFIGURED)


@dataclass
class AggregatedProfileView:
    """
    Proyección de lectura (no persistida): Profile + datos de fuentes.

    media_urls contiene las URLs de media ya absolutas.
    """

    username: str
    profile: Profile
    combined_skills: Dict[str, list[str]]
    github_skills: Dict[str, list[str]]
    linkedin_data: Dict[str, Any] | None
    media_urls: Dict[str, str | None] = field(default_factory=dict)


@dataclass
class AggregatedProfileResult:
    view: AggregatedProfileView | None = None
    source_status: Dict[str, SourceStatus] = field(default_factory=dict)
    error: ProfileError | None = None
