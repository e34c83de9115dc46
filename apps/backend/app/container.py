"""
===============================================================================
TARJETA CRC — app/container.py (Composition Root / DI manual)
===============================================================================

Responsabilidades:
  - Componer dependencias (repositorios, cache, clientes HTTP, use cases)
    siguiendo DIP.
  - Exponer factories para FastAPI (Depends).
  - Mantener singletons con caching (lru_cache) para recursos pesados
    (cache de fuentes, clientes httpx, repos).
  - Centralizar decisiones runtime basadas en Settings (config).

Colaboradores:
  - app.crosscutting.config.get_settings
  - app.domain.* (puertos)
  - app.infrastructure.* (implementaciones)
  - app.application.usecases.* (casos de uso)

Notas:
  - Este archivo NO contiene lógica de negocio.
  - Este archivo NO debe depender de FastAPI (solo expone factories).
  - Tests: usar reset_container() después de cambiar env/settings.
===============================================================================
"""

from __future__ import annotations

from functools import lru_cache

from .application.usecases import (
    ClearSourceCacheUseCase,
    CreateProjectUseCase,
    DeleteProjectUseCase,
    DeleteUserUseCase,
    GetAdminStatsUseCase,
    GetAggregatedProfileUseCase,
    GetCacheStatsUseCase,
    GetMyProfileUseCase,
    GetProjectUseCase,
    GetPublicProfileUseCase,
    GetUserUseCase,
    GitHubSource,
    LinkedInSource,
    ListMyProjectsUseCase,
    ListUserProjectsUseCase,
    ListUsersUseCase,
    ProvisionUserUseCase,
    ReorderProjectsUseCase,
    SetProjectVisibilityUseCase,
    TranslationService,
    UpdateMyProfileUseCase,
    UpdateProjectUseCase,
    UpdateUserUseCase,
)
from .crosscutting.config import get_settings
from .domain.cache import SourceCache
from .domain.repositories import (
    ProfileRepository,
    ProjectRepository,
    TranslationRepository,
    UserRepository,
)
from .infrastructure.cache import TTLPolicy, build_source_cache
from .infrastructure.repositories import (
    InMemoryProfileRepository,
    InMemoryProjectRepository,
    InMemoryTranslationRepository,
    InMemoryUserRepository,
    PostgresProfileRepository,
    PostgresProjectRepository,
    PostgresTranslationRepository,
    PostgresUserRepository,
)
from .infrastructure.services import (
    ApifyLinkedInClient,
    GitHubRestClient,
    LingvaTranslationClient,
)

# =============================================================================
# Helpers internos
# =============================================================================


def _http_kwargs() -> dict:
    """Timeout + retry comunes a todos los clientes de fuentes externas."""
    s = get_settings()
    return {
        "timeout_s": s.http_timeout_seconds,
        "retry_max_attempts": s.retry_max_attempts,
        "retry_base_delay_s": s.retry_base_delay_seconds,
        "retry_max_delay_s": s.retry_max_delay_seconds,
    }


# =============================================================================
# Repositorios (singletons)
# =============================================================================


@lru_cache(maxsize=1)
def get_profile_repository() -> ProfileRepository:
    if get_settings().uses_postgres():
        return PostgresProfileRepository()
    return InMemoryProfileRepository()


@lru_cache(maxsize=1)
def get_project_repository() -> ProjectRepository:
    if get_settings().uses_postgres():
        return PostgresProjectRepository()
    return InMemoryProjectRepository()


@lru_cache(maxsize=1)
def get_user_repository() -> UserRepository:
    if get_settings().uses_postgres():
        return PostgresUserRepository()
    # R: el repo in-memory emula el ON DELETE CASCADE sobre perfiles y proyectos.
    return InMemoryUserRepository(
        profiles=get_profile_repository(), projects=get_project_repository()
    )


@lru_cache(maxsize=1)
def get_translation_repository() -> TranslationRepository:
    if get_settings().uses_postgres():
        return PostgresTranslationRepository()
    return InMemoryTranslationRepository()


# =============================================================================
# Cache + fuentes externas (singletons)
# =============================================================================


@lru_cache(maxsize=1)
def get_source_cache() -> SourceCache:
    s = get_settings()
    policy = TTLPolicy.build(
        github_ttl_seconds=s.github_cache_ttl_seconds,
        linkedin_ttl_seconds=s.linkedin_cache_ttl_seconds,
    )
    return build_source_cache(
        backend=s.cache_backend,
        policy=policy,
        max_size=s.cache_max_entries,
        redis_url=s.redis_url,
    )


@lru_cache(maxsize=1)
def get_github_client() -> GitHubRestClient:
    s = get_settings()
    return GitHubRestClient(
        api_base=s.github_api_base, token=s.github_token or None, **_http_kwargs()
    )


@lru_cache(maxsize=1)
def get_linkedin_client() -> ApifyLinkedInClient:
    s = get_settings()
    return ApifyLinkedInClient(
        token=s.apify_token, actor_url=s.apify_actor_url, **_http_kwargs()
    )


@lru_cache(maxsize=1)
def get_translation_client() -> LingvaTranslationClient:
    return LingvaTranslationClient(
        api_base=get_settings().translation_api_base, **_http_kwargs()
    )


@lru_cache(maxsize=1)
def get_translation_service() -> TranslationService:
    return TranslationService(get_translation_client(), get_translation_repository())


@lru_cache(maxsize=1)
def get_github_source() -> GitHubSource:
    return GitHubSource(get_github_client(), get_source_cache())


@lru_cache(maxsize=1)
def get_linkedin_source() -> LinkedInSource:
    return LinkedInSource(
        get_linkedin_client(), get_source_cache(), get_translation_service()
    )


# =============================================================================
# Use cases (instancias livianas por request)
# =============================================================================


def get_public_profile_use_case() -> GetPublicProfileUseCase:
    return GetPublicProfileUseCase(get_user_repository(), get_profile_repository())


def get_my_profile_use_case() -> GetMyProfileUseCase:
    return GetMyProfileUseCase(get_user_repository(), get_profile_repository())


def get_update_my_profile_use_case() -> UpdateMyProfileUseCase:
    return UpdateMyProfileUseCase(get_user_repository(), get_profile_repository())


def get_aggregated_profile_use_case() -> GetAggregatedProfileUseCase:
    return GetAggregatedProfileUseCase(
        get_user_repository(),
        get_profile_repository(),
        get_github_source(),
        get_linkedin_source(),
        server_url=get_settings().server_url,
    )


def get_list_user_projects_use_case() -> ListUserProjectsUseCase:
    return ListUserProjectsUseCase(get_user_repository(), get_project_repository())


def get_list_my_projects_use_case() -> ListMyProjectsUseCase:
    return ListMyProjectsUseCase(get_project_repository())


def get_project_use_case() -> GetProjectUseCase:
    return GetProjectUseCase(get_project_repository())


def get_create_project_use_case() -> CreateProjectUseCase:
    return CreateProjectUseCase(get_project_repository())


def get_update_project_use_case() -> UpdateProjectUseCase:
    return UpdateProjectUseCase(get_project_repository())


def get_delete_project_use_case() -> DeleteProjectUseCase:
    return DeleteProjectUseCase(get_project_repository())


def get_reorder_projects_use_case() -> ReorderProjectsUseCase:
    return ReorderProjectsUseCase(get_project_repository())


def get_set_project_visibility_use_case() -> SetProjectVisibilityUseCase:
    return SetProjectVisibilityUseCase(get_project_repository())


def get_clear_source_cache_use_case() -> ClearSourceCacheUseCase:
    return ClearSourceCacheUseCase(get_source_cache())


def get_cache_stats_use_case() -> GetCacheStatsUseCase:
    return GetCacheStatsUseCase(get_source_cache())


def get_provision_user_use_case() -> ProvisionUserUseCase:
    return ProvisionUserUseCase(get_user_repository(), get_profile_repository())


def get_list_users_use_case() -> ListUsersUseCase:
    return ListUsersUseCase(get_user_repository())


def get_user_use_case() -> GetUserUseCase:
    return GetUserUseCase(get_user_repository())


def get_update_user_use_case() -> UpdateUserUseCase:
    return UpdateUserUseCase(get_user_repository())


def get_delete_user_use_case() -> DeleteUserUseCase:
    return DeleteUserUseCase(get_user_repository())


def get_admin_stats_use_case() -> GetAdminStatsUseCase:
    return GetAdminStatsUseCase(get_user_repository(), get_profile_repository())


# =============================================================================
# Shutdown
# =============================================================================

_HTTP_CLIENTS = (get_github_client, get_linkedin_client, get_translation_client)
# R: singletons que retienen un cliente; se descartan junto con él.
_HTTP_DEPENDENTS = (get_translation_service, get_github_source, get_linkedin_source)


def close_http_clients() -> None:
    """Cierra los clientes httpx ya creados (no crea ninguno nuevo)."""
    for factory in _HTTP_CLIENTS:
        if factory.cache_info().currsize:
            factory().close()
            factory.cache_clear()
    for factory in _HTTP_DEPENDENTS:
        factory.cache_clear()


# =============================================================================
# Reset (tests)
# =============================================================================

_SINGLETONS = (
    get_profile_repository,
    get_project_repository,
    get_user_repository,
    get_translation_repository,
    get_source_cache,
    get_github_client,
    get_linkedin_client,
    get_translation_client,
    get_translation_service,
    get_github_source,
    get_linkedin_source,
)


def reset_container() -> None:
    """Limpia los singletons (tests / cambio de settings)."""
    for factory in _SINGLETONS:
        factory.cache_clear()
