"""
============================================================
TARJETA CRC — infrastructure/repositories/postgres/translation.py
============================================================
Class: PostgresTranslationRepository

Responsibilities:
- Lookup del memo por (hash, source_language, target_language).
- Insert-if-absent con ON CONFLICT DO NOTHING: dos writers concurrentes
  del mismo triple nunca generan duplicados (índice único).

Collaborators:
- PostgresRepository (pool + helpers)
- domain.entities.TranslationRecord
============================================================
"""

from __future__ import annotations

from typing import Optional

from ....domain.entities import TranslationRecord
from .base import PostgresRepository


class PostgresTranslationRepository(PostgresRepository):
    def get(
        self, text_hash: str, source_language: str, target_language: str
    ) -> Optional[TranslationRecord]:
        row = self._fetchone(
            query="""
                SELECT hash, source_language, target_language,
                       original_text, translated_text, created_at
                FROM translations
                WHERE hash = %s AND source_language = %s AND target_language = %s
            """,
            params=[text_hash, source_language, target_language],
            context_msg="Failed to load translation",
            extra={"source_language": source_language, "target_language": target_language},
        )
        if row is None:
            return None
        return TranslationRecord(
            hash=row[0],
            source_language=row[1],
            target_language=row[2],
            original_text=row[3],
            translated_text=row[4],
            created_at=row[5],
        )

    def save_if_absent(self, record: TranslationRecord) -> None:
        self._execute(
            query="""
                INSERT INTO translations (
                    hash, source_language, target_language,
                    original_text, translated_text
                )
                VALUES (%s, %s, %s, %s, %s)
                ON CONFLICT (hash, source_language, target_language) DO NOTHING
            """,
            params=[
                record.hash,
                record.source_language,
                record.target_language,
                record.original_text,
                record.translated_text,
            ],
            context_msg="Failed to save translation",
            extra={
                "source_language": record.source_language,
                "target_language": record.target_language,
            },
        )
