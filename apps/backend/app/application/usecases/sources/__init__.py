"""
Source adapters (GitHub, LinkedIn) y servicio de traducción memoizada.
"""

from .github_source import GitHubSource  # noqa: F401
from .linkedin_source import LinkedInSource  # noqa: F401
from .translation import (  # noqa: F401
    TranslationOrigin,
    TranslationOutcome,
    TranslationService,
)

__all__ = [
    "GitHubSource",
    "LinkedInSource",
    "TranslationOrigin",
    "TranslationOutcome",
    "TranslationService",
]
