"""Implementaciones PostgreSQL (SQL crudo vía psycopg)."""

from .profile import PostgresProfileRepository
from .project import PostgresProjectRepository
from .translation import PostgresTranslationRepository
from .user import PostgresUserRepository

__all__ = [
    "PostgresProfileRepository",
    "PostgresProjectRepository",
    "PostgresTranslationRepository",
    "PostgresUserRepository",
]
