"""
============================================================
TARJETA CRC — infrastructure/services/apify_linkedin_client.py
============================================================
Class: ApifyLinkedInClient

Responsibilities:
  - Implementar domain.services.LinkedInClient usando el actor de Apify
    (run-sync-get-dataset-items).
  - Fallar rápido (sin red) si APIFY_TOKEN falta o es un placeholder.
  - Devolver el primer item del dataset; lista vacía = fuente sin datos.

Collaborators:
  - infrastructure.services.http_source.HttpSourceClient
  - crosscutting.config.PLACEHOLDER_SECRETS
============================================================
"""

from __future__ import annotations

from typing import Any

from ...crosscutting.config import PLACEHOLDER_SECRETS
from ...crosscutting.exceptions import (
    ConfigurationMissingError,
    SourceUnavailableError,
)
from .http_source import HttpSourceClient

DEFAULT_APIFY_ACTOR_URL = (
    "https://api.apify.com/v2/acts/apimaestro~linkedin-profile-detail"
    "/run-sync-get-dataset-items"
)


class ApifyLinkedInClient(HttpSourceClient):
    source = "linkedin"

    def __init__(
        self,
        *,
        token: str | None,
        actor_url: str = DEFAULT_APIFY_ACTOR_URL,
        **kwargs: Any,
    ):
        super().__init__(**kwargs)
        self._token = (token or "").strip()
        self._actor_url = actor_url

    def has_token(self) -> bool:
        return bool(self._token) and self._token.lower() not in PLACEHOLDER_SECRETS

    def fetch_profile(self, username: str) -> dict[str, Any]:
        if not self.has_token():
            raise ConfigurationMissingError("APIFY_TOKEN")

        data = self._request_json(
            "POST",
            self._actor_url,
            params={"token": self._token},
            json={"username": username, "includeEmail": True},
        )
        if not isinstance(data, list) or not data:
            raise SourceUnavailableError(self.source, "No profile data returned")
        first = data[0]
        if not isinstance(first, dict):
            raise SourceUnavailableError(self.source, "No profile data returned")
        return first
