"""
Name: Admin Bootstrap Script + Container Wiring Tests

Responsibilities:
  - Verify the script provisions an admin once (idempotent)
  - Verify --print-token emits a decodable admin token
  - Verify the container picks in-memory backends without DATABASE_URL
  - Verify shutdown closes only the HTTP clients that were created
"""

import importlib.util
from pathlib import Path
from unittest.mock import patch

import pytest
from fastapi.testclient import TestClient

from app import container
from app.api.main import create_app
from app.crosscutting.config import get_settings
from app.identity.auth import decode_access_token
from app.infrastructure.cache import InMemorySourceCache
from app.infrastructure.repositories import (
    InMemoryProfileRepository,
    InMemoryUserRepository,
)

pytestmark = pytest.mark.unit

SCRIPT = Path(__file__).resolve().parents[2] / "scripts" / "create_admin.py"


@pytest.fixture(autouse=True)
def in_memory_env(monkeypatch):
    monkeypatch.delenv("DATABASE_URL", raising=False)
    monkeypatch.delenv("REPOSITORY_BACKEND", raising=False)
    monkeypatch.delenv("CACHE_BACKEND", raising=False)
    get_settings.cache_clear()
    container.reset_container()
    yield
    get_settings.cache_clear()
    container.reset_container()


def _load_script():
    spec = importlib.util.spec_from_file_location("create_admin", SCRIPT)
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)
    return module


def test_container_uses_in_memory_backends():
    assert isinstance(container.get_user_repository(), InMemoryUserRepository)
    assert isinstance(container.get_profile_repository(), InMemoryProfileRepository)
    assert isinstance(container.get_source_cache(), InMemorySourceCache)
    assert container.get_github_source() is container.get_github_source()


def test_creates_admin_once(capsys):
    script = _load_script()

    script.main(["--username", "root", "--email", "Root@Example.com"])
    script.main(["--", "--username", "root", "--email", "root@example.com"])

    out = capsys.readouterr().out
    assert "Created user" in out
    assert "User already exists" in out
    assert container.get_user_repository().count_users() == 1
    profile = container.get_profile_repository().get_by_user_id(
        container.get_user_repository().get_by_username("root").id
    )
    assert profile.contact_email == "root@example.com"


def test_print_token(capsys):
    script = _load_script()

    script.main(
        ["--username", "root", "--email", "root@example.com", "--print-token"]
    )

    token = capsys.readouterr().out.strip().splitlines()[-1]
    principal = decode_access_token(token)
    assert principal.username == "root"
    assert principal.is_admin is True


def test_duplicate_email_exits(capsys):
    script = _load_script()
    script.main(["--username", "root", "--email", "root@example.com"])

    with pytest.raises(SystemExit, match="CONFLICT"):
        script.main(["--username", "other", "--email", "root@example.com"])


def test_close_http_clients_only_closes_created_ones():
    github_client = container.get_github_client()
    source = container.get_github_source()

    container.close_http_clients()

    assert github_client._http.is_closed
    assert container.get_linkedin_client.cache_info().currsize == 0
    assert container.get_translation_client.cache_info().currsize == 0
    assert container.get_github_source() is not source
    assert container.get_github_client() is not github_client


def test_lifespan_closes_http_clients_on_shutdown():
    with patch("app.api.main.close_http_clients") as close:
        with TestClient(create_app()):
            close.assert_not_called()

    close.assert_called_once_with()
