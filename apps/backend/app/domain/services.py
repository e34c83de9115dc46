"""
===============================================================================
TARJETA CRC — domain/services.py
===============================================================================

Módulo:
    Puertos de Servicios Externos (Protocols)

Responsabilidades:
    - Definir contratos para los clientes HTTP de GitHub, LinkedIn (Apify)
      y traducción.
    - Proteger a application de detalles del proveedor (URLs, tokens).

Colaboradores:
    - infrastructure/services/*: implementaciones concretas (httpx).
    - application/usecases/sources: consumen estos puertos.

Reglas:
    - SOLO interfaces: nada de implementación.
    - Ante no-2xx o falla de red, las implementaciones lanzan
      SourceUnavailableError (crosscutting.exceptions).
===============================================================================
"""

from __future__ import annotations

from typing import Any, Protocol


class GitHubClient(Protocol):
    """Cliente de la API REST de GitHub."""

    def list_repos(self, username: str) -> list[dict[str, Any]]:
        """Repos del usuario (raw JSON), ordenados por último push."""
        ...


class LinkedInClient(Protocol):
    """Cliente del scraper de perfiles de LinkedIn."""

    def fetch_profile(self, username: str) -> dict[str, Any]:
        """Primer perfil raw devuelto por el proveedor."""
        ...


class TranslationClient(Protocol):
    """Cliente de la API de traducción."""

    def translate(self, text: str, source: str, target: str) -> str: ...
