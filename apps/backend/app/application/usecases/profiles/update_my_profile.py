"""
===============================================================================
USE CASE: Update My Profile
===============================================================================

Business Goal:
    Aplicar cambios parciales al perfil del usuario autenticado (upsert).

Reglas:
    - Campos de identidad (email, username, role, password) pertenecen al
      User: si aparecen, se rechaza el request completo (VALIDATION_ERROR).
    - Campos restringidos (user_id, timestamps, URLs de archivos subidos)
      se ignoran en silencio.
    - "about" (legacy) se mapea a "bio" cuando "bio" no viene.
    - settings se mergea sobre los valores actuales.
    - Claves desconocidas se ignoran.

Error Mapping:
    - VALIDATION_ERROR: campo de identidad presente, o un valor con tipo
      inválido (null en un campo de texto, item sin nombre, source desconocido).
      Se valida antes de persistir: nunca se guarda un perfil inválido.
    - NOT_FOUND: el usuario del token ya no existe.
===============================================================================
"""

from __future__ import annotations

from dataclasses import asdict, fields, replace
from typing import Any, Callable, Mapping
from uuid import UUID

from ....domain.entities import (
    ExperienceEntry,
    ItemSource,
    LanguageEntry,
    Profile,
    ProfileSettings,
    Skill,
)
from ....domain.repositories import ProfileRepository, UserRepository
from .profile_results import ProfileError, ProfileErrorCode, ProfileResult

USER_OWNED_FIELDS: tuple[str, ...] = ("email", "username", "role", "password")
RESTRICTED_FIELDS: frozenset[str] = frozenset(
    {"user_id", "created_at", "updated_at", "profile_image_url", "cv_file_url"}
)

_TEXT_FIELDS: frozenset[str] = frozenset(
    {"name", "title", "bio", "location", "contact_email", "phone"}
)
# R: URLs de media opcionales; null las limpia.
_NULLABLE_URL_FIELDS: frozenset[str] = frozenset(
    {"header_image_url", "cv_view_url", "cv_download_url"}
)


class InvalidProfileUpdate(ValueError):
    """Valor con tipo inválido en el payload de update."""


def _with_source(item: Any, list_name: str) -> dict[str, Any]:
    if not isinstance(item, Mapping):
        raise InvalidProfileUpdate(f'Items of "{list_name}" must be objects')
    data = dict(item)
    try:
        data["source"] = ItemSource(data.get("source") or ItemSource.CUSTOM)
    except ValueError as exc:
        raise InvalidProfileUpdate(
            f'Invalid source {data.get("source")!r} in "{list_name}"'
        ) from exc
    return data


def _build_list(
    factory: Callable[..., Any], key_field: str
) -> Callable[[Any, str], list[Any]]:
    allowed = {f.name for f in fields(factory)}

    def build(items: Any, list_name: str) -> list[Any]:
        if not isinstance(items, list):
            raise InvalidProfileUpdate(f'Field "{list_name}" must be a list')
        built = []
        for item in items:
            data = _with_source(item, list_name)
            value = data.get(key_field)
            if not isinstance(value, str) or not value.strip():
                raise InvalidProfileUpdate(
                    f'Items of "{list_name}" require a non-empty "{key_field}"'
                )
            built.append(factory(**{k: v for k, v in data.items() if k in allowed}))
        return built

    return build


_LIST_BUILDERS: dict[str, Callable[[Any, str], list[Any]]] = {
    "skills": _build_list(Skill, "name"),
    "languages": _build_list(LanguageEntry, "label"),
    "experience": _build_list(ExperienceEntry, "title"),
}


class UpdateMyProfileUseCase:
    def __init__(
        self, user_repository: UserRepository, profile_repository: ProfileRepository
    ) -> None:
        self._users = user_repository
        self._profiles = profile_repository

    def execute(self, user_id: UUID, changes: Mapping[str, Any]) -> ProfileResult:
        for name in USER_OWNED_FIELDS:
            if name in changes:
                return ProfileResult(
                    error=ProfileError(
                        ProfileErrorCode.VALIDATION_ERROR,
                        f'Field "{name}" belongs to user identity and cannot '
                        "be updated via profile",
                    )
                )

        user = self._users.get_by_id(user_id)
        if user is None:
            return ProfileResult(
                error=ProfileError(ProfileErrorCode.NOT_FOUND, "User not found")
            )

        updates = {k: v for k, v in changes.items() if k not in RESTRICTED_FIELDS}
        about = updates.pop("about", None)
        if isinstance(about, str) and not updates.get("bio"):
            updates["bio"] = about

        profile = self._profiles.get_by_user_id(user.id) or Profile(user_id=user.id)
        try:
            self._apply(profile, updates)
        except InvalidProfileUpdate as exc:
            return ProfileResult(
                error=ProfileError(ProfileErrorCode.VALIDATION_ERROR, str(exc))
            )
        profile.touch()

        return ProfileResult(profile=self._profiles.save_profile(profile), user=user)

    @staticmethod
    def _apply(profile: Profile, updates: Mapping[str, Any]) -> None:
        """Aplica sobre una copia del repo; si algo falla, no se persiste nada."""
        for key, value in updates.items():
            if key in _TEXT_FIELDS:
                if not isinstance(value, str):
                    raise InvalidProfileUpdate(f'Field "{key}" must be a string')
                setattr(profile, key, value)
            elif key in _NULLABLE_URL_FIELDS:
                if value is not None and not isinstance(value, str):
                    raise InvalidProfileUpdate(f'Field "{key}" must be a string')
                setattr(profile, key, value or None)
            elif key in _LIST_BUILDERS:
                setattr(profile, key, _LIST_BUILDERS[key](value, key))
            elif key == "social_links":
                if not isinstance(value, Mapping):
                    raise InvalidProfileUpdate('Field "social_links" must be an object')
                profile.social_links = {
                    str(k): str(v) for k, v in value.items() if v is not None
                }
            elif key == "settings":
                if not isinstance(value, Mapping):
                    raise InvalidProfileUpdate('Field "settings" must be an object')
                current = asdict(profile.settings)
                allowed = {
                    k: v for k, v in value.items() if k in current and v is not None
                }
                for k, v in allowed.items():
                    if type(v) is not type(current[k]):
                        raise InvalidProfileUpdate(f'Invalid value for settings.{k}')
                profile.settings = replace(ProfileSettings(**current), **allowed)
