"""
Pool psycopg compartido por los repositorios Postgres (users, profiles,
translations). Solo se inicializa cuando hay DATABASE_URL.
"""

from .errors import (
    DatabasePoolError,
    PoolAlreadyInitializedError,
    PoolNotInitializedError,
)
from .pool import close_pool, get_pool, init_pool

__all__ = [
    "init_pool",
    "get_pool",
    "close_pool",
    "PoolNotInitializedError",
    "PoolAlreadyInitializedError",
    "DatabasePoolError",
]
