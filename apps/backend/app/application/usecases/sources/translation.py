"""
===============================================================================
USE CASE: Translation Service (memoización durable)
===============================================================================

Business Goal:
    Traducir texto entre idiomas (en/de) memoizando cada traducción por
    (hash del texto, idioma origen, idioma destino), sin TTL.

-------------------------------------------------------------------------------
CRC CARD (Class-Responsibility-Collaborator)
-------------------------------------------------------------------------------
Class:
    TranslationService

Responsibilities:
    - source == target o texto vacío -> no-op (sin llamada, sin escritura)
    - hit en el memo -> devolver traducción guardada
    - miss -> API externa -> persistir (insert-if-absent) -> devolver
    - falla -> devolver el texto original con origin=fallback + error

Collaborators:
    - domain.services.TranslationClient (HTTP)
    - domain.repositories.TranslationRepository (memo durable)
    - application.content_hash.compute_text_hash
===============================================================================
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from ....crosscutting.exceptions import SourceUnavailableError, TranslationFailedError
from ....crosscutting.logger import logger
from ....crosscutting.metrics import record_translation
from ....domain.entities import TranslationRecord
from ....domain.repositories import TranslationRepository
from ....domain.services import TranslationClient
from ...content_hash import compute_text_hash


class TranslationOrigin(str, Enum):
    NOOP = "noop"
    CACHE = "cache"
    API = "api"
    FALLBACK = "fallback"


@dataclass(frozen=True)
class TranslationOutcome:
    """
    Resultado de translate().

    Contrato:
      - text siempre está presente (traducción o, si falló, el original).
      - error != None solo cuando origin == FALLBACK.
    """

    text: str
    origin: TranslationOrigin
    error: TranslationFailedError | None = None

    @property
    def failed(self) -> bool:
        return self.origin == TranslationOrigin.FALLBACK


class TranslationService:
    def __init__(
        self, client: TranslationClient, repository: TranslationRepository
    ) -> None:
        self._client = client
        self._repository = repository

    def translate(
        self, text: str, source: str = "en", target: str = "de"
    ) -> TranslationOutcome:
        if source == target or not text:
            return self._done(text, TranslationOrigin.NOOP)

        text_hash = compute_text_hash(text)
        record = self._repository.get(text_hash, source, target)
        if record is not None:
            return self._done(record.translated_text, TranslationOrigin.CACHE)

        try:
            translated = self._client.translate(text, source, target)
        except SourceUnavailableError as exc:
            logger.warning(
                "Translation failed, returning original text",
                extra={
                    "source_language": source,
                    "target_language": target,
                    "error": exc.message,
                },
            )
            error = TranslationFailedError(
                f"Translation {source}->{target} failed", original_error=exc
            )
            return self._done(text, TranslationOrigin.FALLBACK, error)

        self._repository.save_if_absent(
            TranslationRecord(
                hash=text_hash,
                source_language=source,
                target_language=target,
                original_text=text,
                translated_text=translated,
            )
        )
        return self._done(translated, TranslationOrigin.API)

    @staticmethod
    def _done(
        text: str,
        origin: TranslationOrigin,
        error: TranslationFailedError | None = None,
    ) -> TranslationOutcome:
        record_translation(origin.value)
        return TranslationOutcome(text=text, origin=origin, error=error)
