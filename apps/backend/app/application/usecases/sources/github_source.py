"""
===============================================================================
USE CASE: GitHub Source Adapter
===============================================================================

Business Goal:
    Exponer skills, proyectos y repos de un usuario de GitHub, cacheados
    24 h por namespace, sin golpear el rate limit de la API pública.

-------------------------------------------------------------------------------
CRC CARD (Class-Responsibility-Collaborator)
-------------------------------------------------------------------------------
Class:
    GitHubSource

Responsibilities:
    - get_skills(username)      -> {programmingLanguages, otherSkills}
    - get_profile(username)     -> {projects, skills}
    - get_user_repos(username)  -> repos públicos, sin forks
    - get_admin_repos(username) -> repos no privados (forks incluidos)

Collaborators:
    - domain.services.GitHubClient (HTTP)
    - domain.cache.SourceCache (TTL)
    - application.normalizers.github (funciones puras)
===============================================================================
"""

from __future__ import annotations

from typing import Any

from ....domain.cache import (
    GITHUB_ADMIN_REPOS,
    GITHUB_PROFILE,
    GITHUB_REPOS,
    GITHUB_SKILLS,
    SourceCache,
)
from ....domain.services import GitHubClient
from ...normalizers.github import (
    extract_skills,
    filter_admin_repos,
    filter_user_repos,
    repos_to_projects,
)
from .cached_source import CachedSource


class GitHubSource(CachedSource):
    def __init__(self, client: GitHubClient, cache: SourceCache) -> None:
        super().__init__(cache)
        self._client = client

    def get_skills(self, username: str) -> dict[str, list[str]]:
        return self._cached(
            GITHUB_SKILLS,
            username,
            lambda: extract_skills(self._client.list_repos(username)),
        )

    def get_profile(self, username: str) -> dict[str, Any]:
        def load() -> dict[str, Any]:
            repos = self._client.list_repos(username)
            return {
                "projects": repos_to_projects(repos),
                "skills": extract_skills(repos),
            }

        return self._cached(GITHUB_PROFILE, username, load)

    def get_user_repos(self, username: str) -> list[dict[str, Any]]:
        return self._cached(
            GITHUB_REPOS,
            username,
            lambda: filter_user_repos(self._client.list_repos(username)),
        )

    def get_admin_repos(self, username: str) -> list[dict[str, Any]]:
        return self._cached(
            GITHUB_ADMIN_REPOS,
            username,
            lambda: filter_admin_repos(self._client.list_repos(username)),
        )
