"""
Name: Application Configuration (Settings)

Responsibilities:
  - Centralized, typed configuration using pydantic-settings
  - Validate environment variables at startup
  - Provide defaults that match current behavior (24h GitHub cache, 7d LinkedIn cache)

Collaborators:
  - api/main.py: reads settings for CORS and startup validation
  - container.py: reads settings for cache TTLs, HTTP clients and repositories
  - identity/auth.py: reads JWT settings

Constraints:
  - Lives in API/infrastructure layer, NOT in domain/application
  - No business logic — pure configuration

Notes:
  - Uses pydantic-settings for env parsing and validation
  - Singleton via lru_cache for performance
  - DATABASE_URL vacío => repositorios in-memory (dev/tests)
"""

from functools import lru_cache

from pydantic import field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

# R: Valores "placeholder" que no cuentan como credencial configurada.
PLACEHOLDER_SECRETS: frozenset[str] = frozenset(
    {
        "your_apify_token_here",
        "changeme",
        "change-me",
        "placeholder",
        "xxx",
    }
)


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.

    Attributes:
        app_env: Application environment (development/production/test)
        database_url: PostgreSQL connection string (empty => in-memory)
        repository_backend: memory|postgres (default: derived from database_url)
        allowed_origins: Comma-separated CORS origins
        server_url: Public base URL used to absolutize media URLs (optional)
        log_level: Logging level (default: INFO)
        log_json: Emit JSON logs (default: True)
        github_api_base: GitHub REST API base URL
        github_token: Optional GitHub token (raises rate limits)
        github_cache_ttl_seconds: TTL for GitHub namespaces (default: 24h)
        linkedin_cache_ttl_seconds: TTL for LinkedIn namespace (default: 7d)
        apify_token: Token for the LinkedIn scraping actor (Apify)
        apify_actor_url: Actor run-sync endpoint
        translation_api_base: Lingva-compatible translation API base URL
        http_timeout_seconds: Timeout for every outbound HTTP call
        cache_backend: memory|redis
        redis_url: Redis connection string (only for cache_backend=redis)
        cache_max_entries: Max entries for the in-memory cache
        jwt_secret: Secret used to verify JWT access tokens
        jwt_access_ttl_minutes: Access token TTL in minutes
    """

    # Environment
    app_env: str = "development"

    # Persistence
    database_url: str = ""
    repository_backend: str = ""

    # CORS configuration
    allowed_origins: str = "http://localhost:5173,http://localhost:3000"
    cors_allow_credentials: bool = False

    # Public URLs
    server_url: str = ""

    # Logging
    log_level: str = "INFO"
    log_json: bool = True

    # GitHub
    github_api_base: str = "https://api.github.com"
    github_token: str = ""
    github_cache_ttl_seconds: float = 24 * 60 * 60

    # LinkedIn (Apify actor)
    apify_token: str = ""
    apify_actor_url: str = (
        "https://api.apify.com/v2/acts/apimaestro~linkedin-profile-detail"
        "/run-sync-get-dataset-items"
    )
    linkedin_cache_ttl_seconds: float = 7 * 24 * 60 * 60

    # Translation (Lingva)
    translation_api_base: str = "https://lingva.ml/api/v1"

    # Outbound HTTP
    http_timeout_seconds: float = 10.0

    # Cache
    cache_backend: str = "memory"
    redis_url: str = ""
    cache_max_entries: int = 1000

    # Security - JWT Auth
    jwt_secret: str = "dev-secret"
    jwt_access_ttl_minutes: int = 60 * 24

    # Database - Connection Pool
    db_pool_min_size: int = 1
    db_pool_max_size: int = 10
    db_statement_timeout_ms: int = 30000  # 30 seconds

    # Retry/Resilience
    retry_max_attempts: int = 3
    retry_base_delay_seconds: float = 0.5
    retry_max_delay_seconds: float = 5.0

    @field_validator(
        "github_cache_ttl_seconds",
        "linkedin_cache_ttl_seconds",
        "http_timeout_seconds",
    )
    @classmethod
    def must_be_positive(cls, v: float) -> float:
        if v <= 0:
            raise ValueError("value must be greater than 0")
        return v

    @field_validator("cache_backend")
    @classmethod
    def cache_backend_valid(cls, v: str) -> str:
        backend = (v or "memory").strip().lower()
        if backend not in {"memory", "redis"}:
            raise ValueError("cache_backend must be memory or redis")
        return backend

    @field_validator("repository_backend")
    @classmethod
    def repository_backend_valid(cls, v: str) -> str:
        backend = (v or "").strip().lower()
        if backend not in {"", "memory", "postgres"}:
            raise ValueError("repository_backend must be memory or postgres")
        return backend

    @field_validator("retry_max_attempts")
    @classmethod
    def retry_attempts_positive(cls, v: int) -> int:
        if v <= 0:
            raise ValueError("retry_max_attempts must be > 0")
        return v

    @model_validator(mode="after")
    def validate_cache_requirements(self):
        if self.cache_backend == "redis" and not self.redis_url.strip():
            raise ValueError("REDIS_URL is required when CACHE_BACKEND=redis")
        return self

    @model_validator(mode="after")
    def validate_security_requirements(self):
        if not self.is_production():
            return self

        insecure_secrets = {"dev-secret", "changeme", "change-me", "password"}
        jwt_secret = (self.jwt_secret or "").strip()
        if not jwt_secret or jwt_secret in insecure_secrets:
            raise ValueError(
                "JWT_SECRET must be set to a strong, non-default value in production"
            )
        if len(jwt_secret) < 32:
            raise ValueError("JWT_SECRET must be at least 32 characters in production")
        return self

    def get_allowed_origins_list(self) -> list[str]:
        """Parse comma-separated origins into a list."""
        return [
            origin.strip()
            for origin in self.allowed_origins.split(",")
            if origin.strip()
        ]

    def uses_postgres(self) -> bool:
        """True si los repositorios deben ir contra PostgreSQL."""
        if self.repository_backend:
            return self.repository_backend == "postgres"
        return bool(self.database_url.strip())

    def has_apify_token(self) -> bool:
        token = (self.apify_token or "").strip()
        return bool(token) and token.lower() not in PLACEHOLDER_SECRETS

    def is_production(self) -> bool:
        return self.app_env.strip().lower() == "production"

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",  # Ignore unknown env vars
    )


@lru_cache
def get_settings() -> Settings:
    """
    Get singleton Settings instance.

    Raises:
        ValidationError: If env vars are invalid
    """
    return Settings()
