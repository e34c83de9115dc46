"""
Name: Settings Validation Tests

Responsibilities:
  - Verify TTL / timeout validation (must be > 0)
  - Verify backend selection (memory vs postgres, memory vs redis)
  - Verify production security rules for JWT_SECRET
  - Verify APIFY token placeholder detection
"""

import pytest
from pydantic import ValidationError

from app.crosscutting.config import Settings

pytestmark = pytest.mark.unit


def test_defaults():
    settings = Settings()

    assert settings.github_cache_ttl_seconds == 86_400
    assert settings.linkedin_cache_ttl_seconds == 604_800
    assert settings.http_timeout_seconds == 10.0
    assert settings.cache_backend == "memory"


@pytest.mark.parametrize(
    "field", ["github_cache_ttl_seconds", "linkedin_cache_ttl_seconds", "http_timeout_seconds"]
)
@pytest.mark.parametrize("value", [0, -1])
def test_non_positive_durations_rejected(field, value):
    with pytest.raises(ValidationError):
        Settings(**{field: value})


def test_retry_attempts_must_be_positive():
    with pytest.raises(ValidationError):
        Settings(retry_max_attempts=0)


def test_repository_backend_follows_database_url():
    assert Settings(database_url="").uses_postgres() is False
    assert Settings(database_url="postgresql://u:p@db/portfolio").uses_postgres() is True
    assert (
        Settings(
            database_url="postgresql://u:p@db/portfolio", repository_backend="memory"
        ).uses_postgres()
        is False
    )


def test_unknown_repository_backend():
    with pytest.raises(ValidationError):
        Settings(repository_backend="sqlite")


def test_redis_backend_requires_url():
    with pytest.raises(ValidationError, match="REDIS_URL"):
        Settings(cache_backend="redis")

    assert Settings(cache_backend="REDIS", redis_url="redis://cache:6379/0").cache_backend == "redis"


def test_unknown_cache_backend():
    with pytest.raises(ValidationError):
        Settings(cache_backend="memcached")


@pytest.mark.parametrize("secret", ["dev-secret", "changeme", "short-but-custom"])
def test_weak_jwt_secret_rejected_in_production(secret):
    with pytest.raises(ValidationError, match="JWT_SECRET"):
        Settings(app_env="production", jwt_secret=secret)


def test_strong_jwt_secret_accepted_in_production():
    settings = Settings(app_env="production", jwt_secret="x" * 40)
    assert settings.is_production() is True


@pytest.mark.parametrize(
    "token, expected",
    [("", False), ("your_apify_token_here", False), ("  ", False), ("apify_api_real", True)],
)
def test_has_apify_token(token, expected):
    assert Settings(apify_token=token).has_apify_token() is expected


def test_allowed_origins_list():
    settings = Settings(allowed_origins="https://a.dev, ,https://b.dev")
    assert settings.get_allowed_origins_list() == ["https://a.dev", "https://b.dev"]
