"""
===============================================================================
TARJETA CRC — domain/cache.py
===============================================================================

Módulo:
    Puerto de Cache TTL de fuentes externas (Dominio)

Responsabilidades:
    - Definir el contrato (Protocol) para cachear respuestas normalizadas de
      GitHub / LinkedIn por namespace.
    - Fijar el formato de claves "<namespace>:<identifier>" y los namespaces.
    - Habilitar Inversión de Dependencias:
        * application/usecases depende de esta interfaz
        * infrastructure/cache implementa backends (memoria / Redis)

Colaboradores:
    - infrastructure/cache.py: implementaciones concretas.
    - application/usecases/sources: adapters que consultan antes de ir a la red.
    - application/usecases/cache_admin: limpieza por namespace.

Restricciones / Reglas:
    - Este módulo ES dominio: no importa Redis, métricas, etc.
    - Un entry es válido solo si (now - inserted_at) < ttl(namespace).
      Con edad == ttl ya es miss.
===============================================================================
"""

from __future__ import annotations

from typing import Any, Protocol

# R: Namespaces conocidos (cada uno con su TTL en infraestructura).
GITHUB_PROFILE = "github_profile"
GITHUB_SKILLS = "github_skills"
GITHUB_REPOS = "github_repos"
GITHUB_ADMIN_REPOS = "github_admin_repos"
LINKEDIN_PROFILE = "linkedin_profile"

GITHUB_NAMESPACES: tuple[str, ...] = (GITHUB_PROFILE, GITHUB_REPOS, GITHUB_ADMIN_REPOS)
ALL_NAMESPACES: tuple[str, ...] = (
    GITHUB_PROFILE,
    GITHUB_SKILLS,
    GITHUB_REPOS,
    GITHUB_ADMIN_REPOS,
    LINKEDIN_PROFILE,
)

KEY_SEPARATOR = ":"


def cache_key(namespace: str, identifier: str) -> str:
    """Construye la clave determinística de un entry."""
    return f"{namespace}{KEY_SEPARATOR}{identifier}"


def namespace_of(key: str) -> str:
    """Namespace de una clave (todo lo anterior al primer separador)."""
    return key.split(KEY_SEPARATOR, 1)[0]


class SourceCache(Protocol):
    """
    Cache TTL de respuestas de fuentes externas.

    Semántica:
      - get(key) retorna None si no existe / expiró (y lo evicta).
      - set(key, value) guarda (value, now) con overwrite.
      - delete / clear son idempotentes.
      - Errores del backend degradan a miss; nunca rompen al llamador.
    """

    def get(self, key: str) -> Any | None: ...

    def set(self, key: str, value: Any) -> None: ...

    def delete(self, key: str) -> None: ...

    def clear(self, namespace: str) -> None:
        """Elimina todas las entradas cuyo namespace coincide."""
        ...

    def stats(self) -> dict[str, Any]: ...
