"""
============================================================
TARJETA CRC — infrastructure/repositories/in_memory/translation.py
============================================================
Class: InMemoryTranslationRepository

Responsibilities:
  - Memo de traducciones en memoria, keyed por (hash, source, target).
  - save_if_absent bajo Lock: el primer writer gana, el resto se ignora.
============================================================
"""

from __future__ import annotations

from dataclasses import replace
from datetime import datetime, timezone
from threading import Lock
from typing import Dict, Optional, Tuple

from ....domain.entities import TranslationRecord

_Key = Tuple[str, str, str]


class InMemoryTranslationRepository:
    def __init__(self) -> None:
        self._lock = Lock()
        self._records: Dict[_Key, TranslationRecord] = {}

    def get(
        self, text_hash: str, source_language: str, target_language: str
    ) -> Optional[TranslationRecord]:
        with self._lock:
            return self._records.get((text_hash, source_language, target_language))

    def save_if_absent(self, record: TranslationRecord) -> None:
        key = (record.hash, record.source_language, record.target_language)
        with self._lock:
            if key not in self._records:
                self._records[key] = replace(
                    record, created_at=record.created_at or datetime.now(timezone.utc)
                )

    def count(self) -> int:
        with self._lock:
            return len(self._records)
