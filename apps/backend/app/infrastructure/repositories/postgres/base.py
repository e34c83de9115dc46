"""
============================================================
TARJETA CRC — infrastructure/repositories/postgres/base.py
============================================================
Class: PostgresRepository

Responsibilities:
- Acceso al pool (inyectable para tests; global en producción).
- Helpers de ejecución con errores consistentes: cualquier falla del
  driver se loguea y se relanza como DatabaseError.

Collaborators:
- psycopg_pool.ConnectionPool
- crosscutting.exceptions.DatabaseError
============================================================
"""

from __future__ import annotations

from typing import Iterable, Optional

import psycopg
from psycopg_pool import ConnectionPool

from ....crosscutting.exceptions import DatabaseError
from ....crosscutting.logger import logger


class PostgresRepository:
    def __init__(self, pool: Optional[ConnectionPool] = None):
        # R: Pool inyectable para tests; en producción se obtiene por factory global.
        self._pool = pool

    def _get_pool(self) -> ConnectionPool:
        if self._pool is not None:
            return self._pool

        from ...db.pool import get_pool

        return get_pool()

    def _fail(self, context_msg: str, extra: dict, exc: Exception) -> DatabaseError:
        logger.exception(context_msg, extra={**extra, "error": str(exc)})
        return DatabaseError(f"{context_msg}: {exc}", original_error=exc)

    def _fetchone(
        self, *, query: str, params: Iterable[object], context_msg: str, extra: dict
    ) -> tuple | None:
        try:
            with self._get_pool().connection() as conn:
                return conn.execute(query, tuple(params)).fetchone()
        except psycopg.Error as exc:
            raise self._fail(context_msg, extra, exc) from exc

    def _fetchall(
        self,
        *,
        query: str,
        params: Iterable[object] = (),
        context_msg: str,
        extra: dict,
    ) -> list[tuple]:
        try:
            with self._get_pool().connection() as conn:
                return conn.execute(query, tuple(params)).fetchall()
        except psycopg.Error as exc:
            raise self._fail(context_msg, extra, exc) from exc

    def _execute(
        self, *, query: str, params: Iterable[object], context_msg: str, extra: dict
    ) -> int:
        """Ejecuta un comando y devuelve rowcount."""
        try:
            with self._get_pool().connection() as conn:
                return conn.execute(query, tuple(params)).rowcount
        except psycopg.Error as exc:
            raise self._fail(context_msg, extra, exc) from exc

    def ping(self) -> bool:
        """Health check liviano (SELECT 1). Nunca lanza."""
        try:
            with self._get_pool().connection() as conn:
                conn.execute("SELECT 1")
            return True
        except Exception as exc:
            logger.warning("DB ping failed", extra={"error": str(exc)})
            return False
