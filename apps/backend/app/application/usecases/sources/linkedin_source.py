"""
===============================================================================
USE CASE: LinkedIn Source Adapter
===============================================================================

Business Goal:
    Obtener el perfil de LinkedIn de un usuario (vía actor de Apify),
    normalizado y con bio bilingüe, cacheado 7 días.

-------------------------------------------------------------------------------
CRC CARD (Class-Responsibility-Collaborator)
-------------------------------------------------------------------------------
Class:
    LinkedInSource

Responsibilities:
    - fetch_profile_data(username) -> {profile, bio: {en, de}}
    - Bio en inglés derivada del perfil; alemán vía TranslationService
      (si la traducción falla, de == en).

Collaborators:
    - domain.services.LinkedInClient (HTTP; ConfigurationMissingError si no
      hay token)
    - domain.cache.SourceCache (TTL)
    - TranslationService
    - application.normalizers.linkedin
===============================================================================
"""

from __future__ import annotations

from typing import Any

from ....domain.cache import LINKEDIN_PROFILE, SourceCache
from ....domain.services import LinkedInClient
from ...normalizers.linkedin import english_bio, normalize_linkedin_profile
from .cached_source import CachedSource
from .translation import TranslationService


class LinkedInSource(CachedSource):
    def __init__(
        self,
        client: LinkedInClient,
        cache: SourceCache,
        translator: TranslationService,
    ) -> None:
        super().__init__(cache)
        self._client = client
        self._translator = translator

    def fetch_profile_data(self, username: str) -> dict[str, Any]:
        def load() -> dict[str, Any]:
            profile = normalize_linkedin_profile(self._client.fetch_profile(username))
            bio_en = english_bio(profile)
            bio_de = self._translator.translate(bio_en, "en", "de").text
            return {"profile": profile, "bio": {"en": bio_en, "de": bio_de}}

        return self._cached(LINKEDIN_PROFILE, username, load)
