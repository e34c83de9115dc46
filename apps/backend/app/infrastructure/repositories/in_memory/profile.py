"""
============================================================
TARJETA CRC — infrastructure/repositories/in_memory/profile.py
============================================================
Class: InMemoryProfileRepository

Responsibilities:
  - Guardar perfiles en memoria (tests / local dev), keyed por user_id.
  - Upsert con timestamps (created_at se conserva, updated_at se renueva).

Constraints:
  - Thread-safe: acceso protegido por Lock.
  - Copias defensivas: los callers nunca mutan el estado interno.
============================================================
"""

from __future__ import annotations

import copy
from datetime import datetime, timezone
from threading import Lock
from typing import Dict, Optional
from uuid import UUID

from ....domain.entities import Profile


class InMemoryProfileRepository:
    def __init__(self) -> None:
        self._lock = Lock()
        self._profiles: Dict[UUID, Profile] = {}

    def get_by_user_id(self, user_id: UUID) -> Optional[Profile]:
        with self._lock:
            profile = self._profiles.get(user_id)
            return copy.deepcopy(profile) if profile else None

    def save_profile(self, profile: Profile) -> Profile:
        now = datetime.now(timezone.utc)
        with self._lock:
            stored = copy.deepcopy(profile)
            existing = self._profiles.get(profile.user_id)
            stored.created_at = (
                existing.created_at if existing else profile.created_at or now
            )
            stored.updated_at = now
            self._profiles[profile.user_id] = stored
            return copy.deepcopy(stored)

    def delete_by_user_id(self, user_id: UUID) -> None:
        with self._lock:
            self._profiles.pop(user_id, None)

    def count_profiles(self) -> int:
        with self._lock:
            return len(self._profiles)
