"""
============================================================
TARJETA CRC — infrastructure/services/github_client.py
============================================================
Class: GitHubRestClient

Responsibilities:
  - Implementar domain.services.GitHubClient contra la API REST v3.
  - Listar repos de un usuario (orden por último push, 100 por página).
  - Autenticación opcional (GITHUB_TOKEN) para subir el rate limit.

Collaborators:
  - infrastructure.services.http_source.HttpSourceClient
============================================================
"""

from __future__ import annotations

from typing import Any
from urllib.parse import quote

from ...crosscutting.exceptions import SourceUnavailableError
from .http_source import HttpSourceClient

DEFAULT_GITHUB_API_BASE = "https://api.github.com"


class GitHubRestClient(HttpSourceClient):
    source = "github"

    def __init__(
        self,
        *,
        api_base: str = DEFAULT_GITHUB_API_BASE,
        token: str | None = None,
        **kwargs: Any,
    ):
        super().__init__(**kwargs)
        self._api_base = api_base.rstrip("/")
        self._headers = {"Accept": "application/vnd.github+json"}
        if token:
            self._headers["Authorization"] = f"Bearer {token}"

    def list_repos(self, username: str) -> list[dict[str, Any]]:
        url = f"{self._api_base}/users/{quote(username, safe='')}/repos"
        data = self._request_json(
            "GET",
            url,
            params={"sort": "pushed", "per_page": 100},
            headers=self._headers,
        )
        if not isinstance(data, list):
            raise SourceUnavailableError(
                self.source, "github returned an unexpected payload"
            )
        return [repo for repo in data if isinstance(repo, dict)]
