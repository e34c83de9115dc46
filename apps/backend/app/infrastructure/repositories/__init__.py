"""
============================================================
TARJETA CRC
============================================================
Class: app.infrastructure.repositories (Package exports)

Responsibilities:
- Exponer implementaciones concretas de repositorios (Postgres e InMemory)
  en un único punto de importación.

Collaborators:
- Repositorios Postgres (SQL crudo)
- Repositorios InMemory (testing / dev sin DATABASE_URL)
============================================================
"""

# ---------------------------
# In-memory implementations
# No persisten datos tras reiniciar la app.
# ---------------------------
from .in_memory import (
    InMemoryProfileRepository,
    InMemoryProjectRepository,
    InMemoryTranslationRepository,
    InMemoryUserRepository,
)

# ---------------------------
# Postgres implementations
# ---------------------------
from .postgres import (
    PostgresProfileRepository,
    PostgresProjectRepository,
    PostgresTranslationRepository,
    PostgresUserRepository,
)

__all__ = [
    "PostgresProfileRepository",
    "PostgresProjectRepository",
    "PostgresTranslationRepository",
    "PostgresUserRepository",
    "InMemoryProfileRepository",
    "InMemoryProjectRepository",
    "InMemoryTranslationRepository",
    "InMemoryUserRepository",
]
