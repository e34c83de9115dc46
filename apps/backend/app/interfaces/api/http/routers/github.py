"""
===============================================================================
TARJETA CRC — app/interfaces/api/http/routers/github.py
===============================================================================

Name:
    GitHub Router

Responsibilities:
    - Exponer datos normalizados de GitHub (proyectos, repos, skills).
    - Endpoint admin con repos no privados (incluye forks).

Collaborators:
    - container.get_github_source
    - identity.auth.require_admin
    - schemas.sources

Notas:
    - Fallas de GitHub se propagan como SourceUnavailableError y el handler
      global responde 502 problem+json.
===============================================================================
"""

from __future__ import annotations

from typing import Any

from app.application.usecases import GitHubSource
from app.container import get_github_source
from app.identity.auth import Principal, require_admin
from fastapi import APIRouter, Depends

from ..dependencies import validate_source_username
from ..schemas.sources import GitHubProfileRes, GitHubSkillsRes

router = APIRouter(prefix="/github", tags=["github"])


@router.get("/profile/{username}", response_model=GitHubProfileRes)
def get_github_profile(
    username: str, source: GitHubSource = Depends(get_github_source)
):
    return source.get_profile(validate_source_username(username))


@router.get("/repos/{username}")
def get_github_repos(
    username: str, source: GitHubSource = Depends(get_github_source)
) -> list[dict[str, Any]]:
    return source.get_user_repos(validate_source_username(username))


@router.get("/admin/repos/{username}")
def get_github_admin_repos(
    username: str,
    source: GitHubSource = Depends(get_github_source),
    _admin: Principal = Depends(require_admin),
) -> list[dict[str, Any]]:
    return source.get_admin_repos(validate_source_username(username))


@router.get("/skills/{username}", response_model=GitHubSkillsRes)
def get_github_skills(
    username: str, source: GitHubSource = Depends(get_github_source)
):
    return GitHubSkillsRes(data=source.get_skills(validate_source_username(username)))
