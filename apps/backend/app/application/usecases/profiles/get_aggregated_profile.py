"""
===============================================================================
USE CASE: Get Aggregated Profile
===============================================================================

Business Goal:
    Producir la vista pública unificada de un portfolio a partir de un
    username: perfil local + skills de GitHub + datos de LinkedIn.

Why (Context / Intención):
    - Cada fuente está aislada: si GitHub o LinkedIn fallan, la vista se
      devuelve igual con esa sección vacía/nula (degradación parcial).
    - El resultado por fuente (SourceStatus) se conserva y se loguea para
      debugging, aunque el payload público no lo exponga.

-------------------------------------------------------------------------------
CRC CARD (Class-Responsibility-Collaborator)
-------------------------------------------------------------------------------
Class:
    GetAggregatedProfileUseCase

Responsibilities:
    1) username -> User -> Profile (NOT_FOUND si falta alguno)
    2) social_links.github -> GitHubSource.get_skills (falla => skills vacías)
    3) social_links.linkedin -> LinkedInSource.fetch_profile_data
       (falla => linkedin_data None; sin link => no hay llamada)
    4) programming_languages = dedupe(skills visibles ++ GitHub);
       other_skills = solo GitHub
    5) media relativa -> absoluta (server_url o base URL del request)

Collaborators:
    - UserRepository / ProfileRepository
    - GitHubSource / LinkedInSource
    - application.normalizers.social_links
===============================================================================
"""

from __future__ import annotations

from typing import Any, Callable, Iterable

from ....crosscutting.exceptions import PortfolioError
from ....crosscutting.logger import logger
from ....domain.entities import MEDIA_FIELDS, Profile
from ....domain.repositories import ProfileRepository, UserRepository
from ...normalizers.social_links import github_identifier, linkedin_identifier
from ..sources.github_source import GitHubSource
from ..sources.linkedin_source import LinkedInSource
from .profile_results import (
    AggregatedProfileResult,
    AggregatedProfileView,
    ProfileError,
    ProfileErrorCode,
    SourceStatus,
)

GITHUB = "github"
LINKEDIN = "linkedin"


def dedupe(items: Iterable[str]) -> list[str]:
    """Quita duplicados preservando el orden (case-sensitive)."""
    seen: set[str] = set()
    out: list[str] = []
    for item in items:
        if item not in seen:
            seen.add(item)
            out.append(item)
    return out


def absolute_url(url: str | None, base_url: str) -> str | None:
    if not url:
        return url
    if url.startswith(("http://", "https://", "//")):
        return url
    return f"{base_url.rstrip('/')}/{url.lstrip('/')}"


class GetAggregatedProfileUseCase:
    def __init__(
        self,
        user_repository: UserRepository,
        profile_repository: ProfileRepository,
        github_source: GitHubSource,
        linkedin_source: LinkedInSource,
        *,
        server_url: str | None = None,
    ) -> None:
        self._users = user_repository
        self._profiles = profile_repository
        self._github = github_source
        self._linkedin = linkedin_source
        self._server_url = (server_url or "").strip() or None

    def execute(self, username: str, base_url: str) -> AggregatedProfileResult:
        # ---------------------------------------------------------------------
        # 1) Perfil local (único error "duro" del agregador).
        # ---------------------------------------------------------------------
        user = self._users.get_by_username(username)
        profile = self._profiles.get_by_user_id(user.id) if user else None
        if user is None or profile is None:
            return AggregatedProfileResult(
                error=ProfileError(ProfileErrorCode.NOT_FOUND, "Profile not found")
            )

        # ---------------------------------------------------------------------
        # 2-3) Fuentes externas, secuenciales y aisladas.
        # ---------------------------------------------------------------------
        status: dict[str, SourceStatus] = {}

        github_skills, status[GITHUB] = self._fetch(
            GITHUB,
            github_identifier(profile.social_link(GITHUB)),
            self._github.get_skills,
        )
        if github_skills is None:
            github_skills = {"programmingLanguages": [], "otherSkills": []}

        linkedin_data, status[LINKEDIN] = self._fetch(
            LINKEDIN,
            linkedin_identifier(profile.social_link(LINKEDIN)),
            self._linkedin.fetch_profile_data,
        )

        # ---------------------------------------------------------------------
        # 4) Merge de skills (asimétrico: custom solo entra en lenguajes).
        # ---------------------------------------------------------------------
        combined = {
            "programming_languages": dedupe(
                [
                    *profile.visible_skill_names(),
                    *github_skills.get("programmingLanguages", []),
                ]
            ),
            "other_skills": list(github_skills.get("otherSkills", [])),
        }

        logger.info(
            "Aggregated profile built",
            extra={
                "username": username,
                "source_status": {k: v.state.value for k, v in status.items()},
            },
        )

        view = AggregatedProfileView(
            username=user.username,
            profile=profile,
            combined_skills=combined,
            github_skills=github_skills,
            linkedin_data=linkedin_data,
            media_urls=self._media_urls(profile, self._server_url or base_url),
        )
        return AggregatedProfileResult(view=view, source_status=status)

    def _fetch(
        self, source: str, identifier: str | None, call: Callable[[str], Any]
    ) -> tuple[Any, SourceStatus]:
        if not identifier:
            return None, SourceStatus.not_configured()
        try:
            return call(identifier), SourceStatus.ok()
        except PortfolioError as exc:
            # R: SourceUnavailable y ConfigurationMissing degradan la sección.
            logger.warning(
                "Source unavailable during aggregation",
                extra={
                    "source": source,
                    "identifier": identifier,
                    "error_code": exc.error_code,
                    "error_id": exc.error_id,
                },
            )
            return None, SourceStatus.unavailable(exc.error_code)

    @staticmethod
    def _media_urls(profile: Profile, base_url: str) -> dict[str, str | None]:
        return {
            name: absolute_url(getattr(profile, name), base_url)
            for name in MEDIA_FIELDS
        }
