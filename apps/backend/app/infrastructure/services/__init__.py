"""
Infrastructure Services (Infrastructure Layer)

Qué es este módulo
------------------
Facade/Barrel del paquete `infrastructure.services`: re-exporta los clientes
HTTP de fuentes externas y las utilidades de retry para que la composición
(container) importe desde un único lugar.

CRC (Component Card)
--------------------
Component: infrastructure.services (Facade)
Responsibilities:
  - Publicar un “surface area” estable del paquete (imports canónicos)
Collaborators:
  - composition root / container (inyecta dependencias)
Constraints:
  - No contener lógica (solo re-export)
"""

# ---------------------------------------------------------------------------
# Fuentes externas
# ---------------------------------------------------------------------------
from .apify_linkedin_client import ApifyLinkedInClient  # noqa: F401
from .github_client import GitHubRestClient  # noqa: F401
from .lingva_client import LingvaTranslationClient  # noqa: F401

# ---------------------------------------------------------------------------
# Resilience / Retry utilities
# ---------------------------------------------------------------------------
from .retry import (  # noqa: F401
    PERMANENT_HTTP_CODES,
    TRANSIENT_HTTP_CODES,
    create_retry_decorator,
    is_transient_error,
)

__all__ = [
    "ApifyLinkedInClient",
    "GitHubRestClient",
    "LingvaTranslationClient",
    "is_transient_error",
    "create_retry_decorator",
    "TRANSIENT_HTTP_CODES",
    "PERMANENT_HTTP_CODES",
]
