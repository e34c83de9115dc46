"""
============================================================
TARJETA CRC — infrastructure/repositories/postgres/profile.py
============================================================
Class: PostgresProfileRepository

Responsibilities:
- Leer/guardar el Profile de un usuario (1:1 por user_id, upsert).
- Serializar listas/mapas anidados (skills, languages, experience,
  social_links, settings) como JSONB.

Collaborators:
- PostgresRepository (pool + helpers)
- domain.entities.Profile y value objects
- psycopg.types.json.Jsonb
============================================================
"""

from __future__ import annotations

from dataclasses import asdict
from typing import Any, Optional
from uuid import UUID

from psycopg.types.json import Jsonb

from ....crosscutting.exceptions import DatabaseError
from ....domain.entities import (
    ExperienceEntry,
    ItemSource,
    LanguageEntry,
    Profile,
    ProfileSettings,
    Skill,
)
from .base import PostgresRepository

_PROFILE_COLUMNS = """
    user_id, name, title, bio, location, contact_email, phone,
    skills, languages, experience, social_links,
    profile_image_url, header_image_url, cv_view_url, cv_download_url, cv_file_url,
    settings, created_at, updated_at
"""


def _items_to_json(items: list[Any]) -> list[dict[str, Any]]:
    out = []
    for item in items:
        data = asdict(item)
        data["source"] = item.source.value
        out.append(data)
    return out


def _items_from_json(factory, data: Any) -> list[Any]:
    items = []
    for raw in data or []:
        raw = dict(raw)
        raw["source"] = ItemSource(raw.get("source") or ItemSource.CUSTOM)
        items.append(factory(**raw))
    return items


def _row_to_profile(row: tuple) -> Profile:
    (
        user_id,
        name,
        title,
        bio,
        location,
        contact_email,
        phone,
        skills,
        languages,
        experience,
        social_links,
        profile_image_url,
        header_image_url,
        cv_view_url,
        cv_download_url,
        cv_file_url,
        settings,
        created_at,
        updated_at,
    ) = row

    return Profile(
        user_id=user_id,
        name=name or "",
        title=title or "",
        bio=bio or "",
        location=location or "",
        contact_email=contact_email or "",
        phone=phone or "",
        skills=_items_from_json(Skill, skills),
        languages=_items_from_json(LanguageEntry, languages),
        experience=_items_from_json(ExperienceEntry, experience),
        social_links=dict(social_links or {}),
        profile_image_url=profile_image_url,
        header_image_url=header_image_url,
        cv_view_url=cv_view_url,
        cv_download_url=cv_download_url,
        cv_file_url=cv_file_url,
        settings=ProfileSettings(**(settings or {})),
        created_at=created_at,
        updated_at=updated_at,
    )


class PostgresProfileRepository(PostgresRepository):
    def get_by_user_id(self, user_id: UUID) -> Optional[Profile]:
        row = self._fetchone(
            query=f"SELECT {_PROFILE_COLUMNS} FROM profiles WHERE user_id = %s",
            params=[user_id],
            context_msg="Failed to load profile",
            extra={"user_id": str(user_id)},
        )
        return _row_to_profile(row) if row else None

    def save_profile(self, profile: Profile) -> Profile:
        row = self._fetchone(
            query=f"""
                INSERT INTO profiles (
                    user_id, name, title, bio, location, contact_email, phone,
                    skills, languages, experience, social_links,
                    profile_image_url, header_image_url, cv_view_url,
                    cv_download_url, cv_file_url, settings,
                    created_at, updated_at
                )
                VALUES (
                    %s, %s, %s, %s, %s, %s, %s,
                    %s, %s, %s, %s,
                    %s, %s, %s,
                    %s, %s, %s,
                    COALESCE(%s, NOW()), COALESCE(%s, NOW())
                )
                ON CONFLICT (user_id) DO UPDATE SET
                    name = EXCLUDED.name,
                    title = EXCLUDED.title,
                    bio = EXCLUDED.bio,
                    location = EXCLUDED.location,
                    contact_email = EXCLUDED.contact_email,
                    phone = EXCLUDED.phone,
                    skills = EXCLUDED.skills,
                    languages = EXCLUDED.languages,
                    experience = EXCLUDED.experience,
                    social_links = EXCLUDED.social_links,
                    profile_image_url = EXCLUDED.profile_image_url,
                    header_image_url = EXCLUDED.header_image_url,
                    cv_view_url = EXCLUDED.cv_view_url,
                    cv_download_url = EXCLUDED.cv_download_url,
                    cv_file_url = EXCLUDED.cv_file_url,
                    settings = EXCLUDED.settings,
                    updated_at = NOW()
                RETURNING {_PROFILE_COLUMNS}
            """,
            params=[
                profile.user_id,
                profile.name,
                profile.title,
                profile.bio,
                profile.location,
                profile.contact_email,
                profile.phone,
                Jsonb(_items_to_json(profile.skills)),
                Jsonb(_items_to_json(profile.languages)),
                Jsonb(_items_to_json(profile.experience)),
                Jsonb(profile.social_links),
                profile.profile_image_url,
                profile.header_image_url,
                profile.cv_view_url,
                profile.cv_download_url,
                profile.cv_file_url,
                Jsonb(asdict(profile.settings)),
                profile.created_at,
                profile.updated_at,
            ],
            context_msg="Failed to save profile",
            extra={"user_id": str(profile.user_id)},
        )
        if row is None:
            raise DatabaseError("Failed to save profile: no row returned")
        return _row_to_profile(row)

    def count_profiles(self) -> int:
        row = self._fetchone(
            query="SELECT COUNT(*) FROM profiles",
            params=[],
            context_msg="Failed to count profiles",
            extra={},
        )
        return int(row[0]) if row else 0
