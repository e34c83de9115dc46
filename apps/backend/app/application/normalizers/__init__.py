"""
Normalizers (Application Layer)

Funciones puras que transforman payloads de proveedores externos (GitHub,
LinkedIn) a las formas internas que cachean y devuelven los adapters.
Sin IO, sin logging, sin estado.
"""

from .github import (  # noqa: F401
    PROGRAMMING_LANGUAGES,
    extract_skills,
    filter_admin_repos,
    filter_public_repos,
    filter_user_repos,
    format_topic,
    repo_to_project,
)
from .linkedin import english_bio, language_code, normalize_linkedin_profile  # noqa: F401
from .social_links import github_identifier, linkedin_identifier  # noqa: F401

__all__ = [
    "PROGRAMMING_LANGUAGES",
    "extract_skills",
    "filter_admin_repos",
    "filter_public_repos",
    "filter_user_repos",
    "format_topic",
    "repo_to_project",
    "english_bio",
    "language_code",
    "normalize_linkedin_profile",
    "github_identifier",
    "linkedin_identifier",
]
