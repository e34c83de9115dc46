"""
Name: JWT Authentication Tests

Responsibilities:
  - Test access token issue/decode round trip
  - Test expired, tampered and malformed tokens (401)
  - Test FastAPI guards: require_user (401) and require_admin (403)
  - Test optional_user: anonymous passes, a bad token is still 401

Notes:
  - Unit tests (no external dependencies)
  - Explicit secrets: independent from environment settings
"""

from uuid import uuid4

import jwt
import pytest
from fastapi import Depends, FastAPI
from fastapi.testclient import TestClient

from app.api.exception_handlers import register_exception_handlers
from app.crosscutting.error_responses import AppHTTPException
from app.identity.auth import (
    JWT_ALGORITHM,
    Principal,
    create_access_token,
    decode_access_token,
    optional_user,
    require_admin,
    require_user,
)
from app.identity.users import UserRole

from conftest import make_user

pytestmark = pytest.mark.unit

SECRET = "unit-test-secret-unit-test-secret-0123"


class TestAccessTokens:
    def test_round_trip(self):
        user = make_user("alice", role=UserRole.ADMIN)

        principal = decode_access_token(
            create_access_token(user, secret=SECRET), secret=SECRET
        )

        assert principal.user_id == user.id
        assert principal.username == "alice"
        assert principal.email == "alice@example.com"
        assert principal.is_admin is True

    def test_expired_token(self):
        token = create_access_token(make_user(), secret=SECRET, ttl_minutes=-1)

        with pytest.raises(AppHTTPException) as exc_info:
            decode_access_token(token, secret=SECRET)

        assert exc_info.value.status_code == 401
        assert "expirado" in exc_info.value.detail

    def test_wrong_secret(self):
        token = create_access_token(make_user(), secret=SECRET)

        with pytest.raises(AppHTTPException) as exc_info:
            decode_access_token(token, secret="another-secret-another-secret-0000")

        assert exc_info.value.status_code == 401

    def test_wrong_token_type(self):
        token = jwt.encode(
            {"sub": str(uuid4()), "role": "user", "exp": 9_999_999_999, "typ": "refresh"},
            SECRET,
            algorithm=JWT_ALGORITHM,
        )

        with pytest.raises(AppHTTPException, match="401"):
            decode_access_token(token, secret=SECRET)

    def test_unknown_role(self):
        token = jwt.encode(
            {"sub": str(uuid4()), "role": "root", "exp": 9_999_999_999},
            SECRET,
            algorithm=JWT_ALGORITHM,
        )

        with pytest.raises(AppHTTPException):
            decode_access_token(token, secret=SECRET)

    def test_missing_required_claims(self):
        token = jwt.encode({"role": "user"}, SECRET, algorithm=JWT_ALGORITHM)

        with pytest.raises(AppHTTPException):
            decode_access_token(token, secret=SECRET)


def _guarded_app() -> FastAPI:
    app = FastAPI()
    register_exception_handlers(app)

    @app.get("/me")
    def me(principal: Principal = Depends(require_user)):
        return {"username": principal.username}

    @app.get("/admin")
    def admin(principal: Principal = Depends(require_admin)):
        return {"ok": True}

    @app.get("/public")
    def public(principal: Principal | None = Depends(optional_user)):
        return {"username": principal.username if principal else None}

    return app


class TestGuards:
    @pytest.fixture
    def client(self) -> TestClient:
        return TestClient(_guarded_app())

    def _auth(self, role: UserRole = UserRole.USER) -> dict:
        token = create_access_token(make_user("bob", role=role))
        return {"Authorization": f"Bearer {token}"}

    def test_missing_bearer(self, client):
        response = client.get("/me")

        assert response.status_code == 401
        assert response.headers["content-type"].startswith("application/problem+json")
        assert response.json()["code"] == "UNAUTHORIZED"

    def test_non_bearer_scheme(self, client):
        response = client.get("/me", headers={"Authorization": "Basic abc"})
        assert response.status_code == 401

    def test_valid_user(self, client):
        response = client.get("/me", headers=self._auth())

        assert response.status_code == 200
        assert response.json() == {"username": "bob"}

    def test_admin_guard_rejects_user(self, client):
        response = client.get("/admin", headers=self._auth())

        assert response.status_code == 403
        assert response.json()["code"] == "FORBIDDEN"

    def test_admin_guard_accepts_admin(self, client):
        response = client.get("/admin", headers=self._auth(UserRole.ADMIN))
        assert response.status_code == 200

    def test_optional_user_anonymous(self, client):
        response = client.get("/public")

        assert response.status_code == 200
        assert response.json() == {"username": None}

    def test_optional_user_with_token(self, client):
        response = client.get("/public", headers=self._auth())
        assert response.json() == {"username": "bob"}

    def test_optional_user_rejects_invalid_token(self, client):
        response = client.get("/public", headers={"Authorization": "Bearer nope"})

        assert response.status_code == 401
        assert response.json()["code"] == "UNAUTHORIZED"
