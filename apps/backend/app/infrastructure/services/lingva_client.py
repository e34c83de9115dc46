"""
============================================================
TARJETA CRC — infrastructure/services/lingva_client.py
============================================================
Class: LingvaTranslationClient

Responsibilities:
  - Implementar domain.services.TranslationClient contra Lingva
    (GET {base}/{source}/{target}/{texto url-encoded}).
  - Validar que la respuesta traiga "translation" como string.

Collaborators:
  - infrastructure.services.http_source.HttpSourceClient
============================================================
"""

from __future__ import annotations

from typing import Any
from urllib.parse import quote

from ...crosscutting.exceptions import SourceUnavailableError
from .http_source import HttpSourceClient

DEFAULT_LINGVA_API_BASE = "https://lingva.ml/api/v1"


class LingvaTranslationClient(HttpSourceClient):
    source = "translation"

    def __init__(self, *, api_base: str = DEFAULT_LINGVA_API_BASE, **kwargs: Any):
        super().__init__(**kwargs)
        self._api_base = api_base.rstrip("/")

    def translate(self, text: str, source: str, target: str) -> str:
        # R: safe="" también codifica "/" (el texto va como segmento de path).
        url = f"{self._api_base}/{source}/{target}/{quote(text, safe='')}"
        data = self._request_json("GET", url)
        translation = data.get("translation") if isinstance(data, dict) else None
        if not isinstance(translation, str):
            raise SourceUnavailableError(
                self.source, "translation response has no translation"
            )
        return translation
