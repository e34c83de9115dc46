"""
Name: Pytest Configuration and Shared Fixtures

Responsibilities:
  - Provide reusable test fixtures
  - Fake external sources (GitHub, LinkedIn, translation) and the clock
  - Configure test environment (no .env, APP_ENV=test)
  - Setup test data factories (users, profiles, projects, raw repos)

Collaborators:
  - pytest: Test framework
  - app.domain / app.identity: entities and protocols
  - app.infrastructure: in-memory repositories and cache

Notes:
  - Fixtures are auto-discovered by pytest
  - Use @pytest.fixture(scope="function") for per-test isolation
"""

import os
import sys
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Dict, List
from uuid import uuid4

import pytest

ROOT_DIR = Path(__file__).resolve().parents[1]
if str(ROOT_DIR) not in sys.path:
    sys.path.insert(0, str(ROOT_DIR))

from app.crosscutting import config as app_config  # noqa: E402

app_config.Settings.model_config["env_file"] = None

os.environ.setdefault("APP_ENV", "test")

from app.crosscutting.exceptions import SourceUnavailableError  # noqa: E402
from app.domain.entities import Profile, Project, Skill  # noqa: E402
from app.identity.users import User, UserRole  # noqa: E402
from app.infrastructure.cache import InMemorySourceCache, TTLPolicy  # noqa: E402
from app.infrastructure.repositories import (  # noqa: E402
    InMemoryProfileRepository,
    InMemoryProjectRepository,
    InMemoryTranslationRepository,
    InMemoryUserRepository,
)


def pytest_configure(config) -> None:
    config.addinivalue_line(
        "markers", "unit: Unit tests (fast, no external dependencies)"
    )


# ============================================================================
# Fakes
# ============================================================================


class FakeClock:
    """Reloj manual (epoch seconds) para tests de TTL."""

    def __init__(self, start: float = 1_700_000_000.0) -> None:
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


class FakeGitHubClient:
    def __init__(self, repos: List[Dict[str, Any]] | None = None) -> None:
        self.repos = repos or []
        self.calls: List[str] = []
        self.error: Exception | None = None

    def list_repos(self, username: str) -> List[Dict[str, Any]]:
        self.calls.append(username)
        if self.error:
            raise self.error
        return self.repos


class FakeLinkedInClient:
    def __init__(self, payload: Dict[str, Any] | None = None) -> None:
        self.payload = payload or {}
        self.calls: List[str] = []
        self.error: Exception | None = None

    def fetch_profile(self, username: str) -> Dict[str, Any]:
        self.calls.append(username)
        if self.error:
            raise self.error
        return self.payload


class FakeTranslationClient:
    """Traduce agregando un prefijo "[de] " (o falla si error está seteado)."""

    def __init__(self) -> None:
        self.calls: List[tuple] = []
        self.error: Exception | None = None

    def translate(self, text: str, source: str, target: str) -> str:
        self.calls.append((text, source, target))
        if self.error:
            raise self.error
        return f"[{target}] {text}"


# ============================================================================
# Factories
# ============================================================================


def make_repo(
    name: str,
    *,
    language: str | None = None,
    topics: List[str] | None = None,
    fork: bool = False,
    private: bool = False,
    description: str | None = None,
) -> Dict[str, Any]:
    return {
        "name": name,
        "language": language,
        "topics": topics or [],
        "fork": fork,
        "private": private,
        "description": description,
        "html_url": f"https://github.com/jdoe/{name}",
        "pushed_at": "2024-05-01T10:00:00Z",
        "stargazers_count": 3,
        "forks_count": 1,
    }


def make_user(
    username: str = "jdoe",
    *,
    email: str | None = None,
    role: UserRole = UserRole.USER,
) -> User:
    return User(
        id=uuid4(),
        username=username,
        email=email or f"{username}@example.com",
        role=role,
        is_active=True,
        created_at=datetime.now(timezone.utc),
    )


def make_project(
    user_id,
    title: str = "Portfolio",
    *,
    order: int = 0,
    visible: bool = True,
    **fields: Any,
) -> Project:
    return Project(
        id=uuid4(),
        user_id=user_id,
        title=title,
        order=order,
        is_visible_in_portfolio=visible,
        **fields,
    )


def source_error(source: str = "github") -> SourceUnavailableError:
    return SourceUnavailableError(source, f"{source} responded HTTP 503", status_code=503)


# ============================================================================
# Fixtures
# ============================================================================


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def cache(clock: FakeClock) -> InMemorySourceCache:
    return InMemorySourceCache(policy=TTLPolicy.build(), max_size=100, clock=clock)


@pytest.fixture
def profile_repo() -> InMemoryProfileRepository:
    return InMemoryProfileRepository()


@pytest.fixture
def project_repo() -> InMemoryProjectRepository:
    return InMemoryProjectRepository()


@pytest.fixture
def user_repo(
    profile_repo: InMemoryProfileRepository, project_repo: InMemoryProjectRepository
) -> InMemoryUserRepository:
    return InMemoryUserRepository(profiles=profile_repo, projects=project_repo)


@pytest.fixture
def translation_repo() -> InMemoryTranslationRepository:
    return InMemoryTranslationRepository()


@pytest.fixture
def github_client() -> FakeGitHubClient:
    return FakeGitHubClient(
        [
            make_repo("app-one", language="Python"),
            make_repo("app-two", language="Python"),
            make_repo("widget", language="TypeScript"),
            make_repo("ml-lab", topics=["machine-learning"]),
        ]
    )


@pytest.fixture
def linkedin_client() -> FakeLinkedInClient:
    return FakeLinkedInClient(
        {
            "basic_info": {
                "fullname": "Jane Doe",
                "headline": "Engineer",
                "about": "Builds things.",
                "skills": ["Leadership"],
            }
        }
    )


@pytest.fixture
def translation_client() -> FakeTranslationClient:
    return FakeTranslationClient()


@pytest.fixture
def jdoe(
    user_repo: InMemoryUserRepository, profile_repo: InMemoryProfileRepository
) -> User:
    """Usuario jdoe con perfil: skill "Go" y links a GitHub/LinkedIn."""
    user = user_repo.create_user(make_user("jdoe"))
    profile_repo.save_profile(
        Profile(
            user_id=user.id,
            name="Jane Doe",
            skills=[Skill(name="Go")],
            social_links={
                "github": "https://github.com/jdoe",
                "linkedin": "https://linkedin.com/in/jane-doe",
            },
        )
    )
    return user
