"""
CRC — domain/repositories.py

Name
- Domain Repository Interfaces (Protocols)

Responsibilities
- Define persistence contracts for users, profiles, projects and translation memo.
- Keep the application/domain independent from infrastructure (PostgreSQL, in-memory).
- Enable dependency inversion and straightforward unit testing.

Collaborators
- domain.entities: Profile, Project, TranslationRecord
- identity.users: User
- infrastructure.repositories: postgres/*, in_memory/* implementations

Constraints
- Pure interfaces only: no side effects, no infrastructure imports, no SQL.
- Implementations MUST match method signatures exactly.
"""

from typing import List, Optional, Protocol
from uuid import UUID

from ..identity.users import User
from .entities import Profile, Project, TranslationRecord


class UserRepository(Protocol):
    """R: Users (username and email are unique)."""

    def get_by_id(self, user_id: UUID) -> Optional[User]: ...

    def get_by_username(self, username: str) -> Optional[User]: ...

    def get_by_email(self, email: str) -> Optional[User]: ...

    def list_users(self) -> List[User]: ...

    def create_user(self, user: User) -> User:
        """R: Persist a new user. Caller checks uniqueness first."""
        ...

    def update_user(self, user: User) -> Optional[User]:
        """R: Persist role/is_active of an existing user. None if absent."""
        ...

    def delete_user(self, user_id: UUID) -> bool:
        """R: Delete user, its profile and projects (cascade). False if absent."""
        ...

    def count_users(self, *, active_only: bool = False) -> int: ...


class ProfileRepository(Protocol):
    """R: One profile per user, keyed by user_id."""

    def get_by_user_id(self, user_id: UUID) -> Optional[Profile]: ...

    def save_profile(self, profile: Profile) -> Profile:
        """R: Upsert by user_id."""
        ...

    def count_profiles(self) -> int: ...


class ProjectRepository(Protocol):
    """R: Portfolio projects, many per user."""

    def get_by_id(self, project_id: UUID) -> Optional[Project]: ...

    def list_by_user(
        self, user_id: UUID, *, visible_only: bool = False
    ) -> List[Project]:
        """R: Sorted: imported first, order asc, featured first, newest first."""
        ...

    def get_by_source_id(self, user_id: UUID, source_id: str) -> Optional[Project]: ...

    def next_order(self, user_id: UUID) -> int:
        """R: Highest order of the user plus one (0 without projects)."""
        ...

    def create_project(self, project: Project) -> Project: ...

    def update_project(self, project: Project) -> Optional[Project]:
        """R: Replace all mutable fields. None if absent."""
        ...

    def delete_project(self, project_id: UUID) -> bool: ...


class TranslationRepository(Protocol):
    """R: Durable memo of translations, never updated nor expired."""

    def get(
        self, text_hash: str, source_language: str, target_language: str
    ) -> Optional[TranslationRecord]: ...

    def save_if_absent(self, record: TranslationRecord) -> None:
        """R: Insert; a concurrent duplicate is silently ignored."""
        ...
