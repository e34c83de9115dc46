"""Implementaciones in-memory (tests / local dev, sin persistencia)."""

from .profile import InMemoryProfileRepository
from .project import InMemoryProjectRepository
from .translation import InMemoryTranslationRepository
from .user import InMemoryUserRepository

__all__ = [
    "InMemoryProfileRepository",
    "InMemoryProjectRepository",
    "InMemoryTranslationRepository",
    "InMemoryUserRepository",
]
