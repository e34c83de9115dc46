"""
===============================================================================
TARJETA CRC — domain/__init__.py
===============================================================================

Módulo:
    Exportaciones de la Capa de Dominio (API pública del dominio)

Responsabilidades:
    - Centralizar exports para imports limpios en application/interfaces.
    - Mantener estable el “surface area” del dominio.

Colaboradores:
    - domain.entities: Profile y sus items (Skill, LanguageEntry, ...)
    - domain.entities: Project (proyectos del portfolio)
    - domain.repositories: Puertos de persistencia
    - domain.services: Puertos de fuentes externas (GitHub, LinkedIn, traducción)
    - domain.cache: Namespaces, claves y puerto del cache de fuentes

Reglas:
    - Solo re-exporta contratos/entidades del dominio.
    - No importar infraestructura aquí.
===============================================================================
"""

from .cache import (
    ALL_NAMESPACES,
    GITHUB_ADMIN_REPOS,
    GITHUB_NAMESPACES,
    GITHUB_PROFILE,
    GITHUB_REPOS,
    GITHUB_SKILLS,
    LINKEDIN_PROFILE,
    SourceCache,
    cache_key,
    namespace_of,
)
from .entities import (
    ExperienceEntry,
    ItemSource,
    LanguageEntry,
    Profile,
    ProfileSettings,
    Project,
    ProjectSourceType,
    Skill,
    TranslationRecord,
)
from .repositories import (
    ProfileRepository,
    ProjectRepository,
    TranslationRepository,
    UserRepository,
)
from .services import GitHubClient, LinkedInClient, TranslationClient

__all__ = [
    # Entities
    "Profile",
    "ProfileSettings",
    "Skill",
    "LanguageEntry",
    "ExperienceEntry",
    "ItemSource",
    "Project",
    "ProjectSourceType",
    "TranslationRecord",
    # Repository Interfaces (Ports)
    "UserRepository",
    "ProfileRepository",
    "ProjectRepository",
    "TranslationRepository",
    # Source Interfaces (Ports)
    "GitHubClient",
    "LinkedInClient",
    "TranslationClient",
    # Cache
    "SourceCache",
    "cache_key",
    "namespace_of",
    "GITHUB_PROFILE",
    "GITHUB_SKILLS",
    "GITHUB_REPOS",
    "GITHUB_ADMIN_REPOS",
    "LINKEDIN_PROFILE",
    "GITHUB_NAMESPACES",
    "ALL_NAMESPACES",
]
