"""
Name: PostgreSQL Repositories Unit Tests (mocked pool)

Responsibilities:
  - Verify row mapping (users, profiles, projects, translations)
  - Verify SQL intent (upsert, ON CONFLICT DO NOTHING, cascade via FK)
  - Verify driver errors surface as DatabaseError
  - Verify ping never raises

Notes:
  - No real database: ConnectionPool is a MagicMock
"""

from datetime import datetime, timezone
from unittest.mock import MagicMock
from uuid import uuid4

import psycopg
import pytest
from app.crosscutting.exceptions import DatabaseError
from app.domain.entities import (
    ItemSource,
    Profile,
    ProjectSourceType,
    Skill,
    TranslationRecord,
)
from app.identity.users import UserRole
from app.infrastructure.repositories import (
    PostgresProfileRepository,
    PostgresProjectRepository,
    PostgresTranslationRepository,
    PostgresUserRepository,
)
from psycopg.types.json import Jsonb

from conftest import make_project, make_user

pytestmark = pytest.mark.unit

NOW = datetime(2025, 1, 1, tzinfo=timezone.utc)


def _pool_returning(*, fetchone=None, fetchall=None, rowcount=0, error=None):
    pool = MagicMock()
    conn = MagicMock()
    pool.connection.return_value.__enter__.return_value = conn
    if error is not None:
        conn.execute.side_effect = error
    else:
        cursor = conn.execute.return_value
        cursor.fetchone.return_value = fetchone
        cursor.fetchall.return_value = fetchall or []
        cursor.rowcount = rowcount
    return pool, conn


def _user_row(username="jdoe", role="user"):
    return (uuid4(), username, f"{username}@example.com", role, True, NOW)


class TestPostgresUserRepository:
    def test_get_by_username_maps_row(self):
        pool, conn = _pool_returning(fetchone=_user_row())

        user = PostgresUserRepository(pool=pool).get_by_username("jdoe")

        assert user.username == "jdoe"
        assert user.role == UserRole.USER
        query, params = conn.execute.call_args.args
        assert "WHERE username = %s" in query
        assert params == ("jdoe",)

    def test_missing_user(self):
        pool, _ = _pool_returning(fetchone=None)
        assert PostgresUserRepository(pool=pool).get_by_id(uuid4()) is None

    def test_invalid_role_is_database_error(self):
        pool, _ = _pool_returning(fetchone=_user_row(role="superuser"))

        with pytest.raises(DatabaseError, match="Invalid user role"):
            PostgresUserRepository(pool=pool).get_by_email("jdoe@example.com")

    def test_list_orders_newest_first(self):
        pool, conn = _pool_returning(fetchall=[_user_row("a"), _user_row("b")])

        users = PostgresUserRepository(pool=pool).list_users()

        assert [u.username for u in users] == ["a", "b"]
        assert "ORDER BY created_at DESC, id DESC" in conn.execute.call_args.args[0]

    def test_delete_reports_rowcount(self):
        pool, _ = _pool_returning(rowcount=1)
        assert PostgresUserRepository(pool=pool).delete_user(uuid4()) is True

        pool, _ = _pool_returning(rowcount=0)
        assert PostgresUserRepository(pool=pool).delete_user(uuid4()) is False

    def test_update_user_returns_updated_row(self):
        user_id = uuid4()
        row = (user_id, "jdoe", "jdoe@example.com", "admin", False, NOW)
        pool, conn = _pool_returning(fetchone=row)
        user = PostgresUserRepository(pool=pool).get_by_id(user_id)

        updated = PostgresUserRepository(pool=pool).update_user(user)

        query, params = conn.execute.call_args.args
        assert "UPDATE users SET role = %s, is_active = %s" in query
        assert "RETURNING" in query
        assert params == ("admin", False, user_id)
        assert (updated.role, updated.is_active) == (UserRole.ADMIN, False)

    def test_update_missing_user(self):
        pool, _ = _pool_returning(fetchone=None)
        assert PostgresUserRepository(pool=pool).update_user(make_user()) is None

    def test_count_active(self):
        pool, conn = _pool_returning(fetchone=(3,))

        assert PostgresUserRepository(pool=pool).count_users(active_only=True) == 3
        assert "WHERE is_active" in conn.execute.call_args.args[0]

    def test_driver_error_wrapped(self):
        pool, _ = _pool_returning(error=psycopg.OperationalError("down"))

        with pytest.raises(DatabaseError):
            PostgresUserRepository(pool=pool).count_users()


class TestPostgresProfileRepository:
    def _row(self, user_id):
        return (
            user_id,
            "Jane",
            "",
            "bio",
            None,
            "",
            "",
            [{"name": "Go", "is_visible": True, "source": "custom"}],
            [{"label": "German", "source": "linkedin"}],
            [],
            {"github": "https://github.com/jdoe"},
            "/uploads/me.png",
            None,
            None,
            None,
            None,
            {"theme": "dark"},
            NOW,
            NOW,
        )

    def test_row_mapping(self):
        user_id = uuid4()
        pool, _ = _pool_returning(fetchone=self._row(user_id))

        profile = PostgresProfileRepository(pool=pool).get_by_user_id(user_id)

        assert profile.name == "Jane"
        assert profile.location == ""
        assert profile.skills[0].name == "Go"
        assert profile.languages[0].source == ItemSource.LINKEDIN
        assert profile.settings.theme == "dark"
        assert profile.social_links["github"] == "https://github.com/jdoe"

    def test_save_is_an_upsert_with_jsonb(self):
        user_id = uuid4()
        pool, conn = _pool_returning(fetchone=self._row(user_id))

        PostgresProfileRepository(pool=pool).save_profile(
            Profile(user_id=user_id, skills=[Skill(name="Go")])
        )

        query, params = conn.execute.call_args.args
        assert "ON CONFLICT (user_id) DO UPDATE" in query
        assert isinstance(params[7], Jsonb)
        assert params[7].obj == [{"name": "Go", "is_visible": True, "source": "custom"}]

    def test_save_without_row_fails(self):
        pool, _ = _pool_returning(fetchone=None)

        with pytest.raises(DatabaseError):
            PostgresProfileRepository(pool=pool).save_profile(Profile(user_id=uuid4()))


class TestPostgresProjectRepository:
    def _row(self, project_id, user_id, *, source_type="github"):
        return (
            project_id,
            user_id,
            "Portfolio",
            None,
            "",
            None,
            "https://example.com",
            None,
            ["Go", "SQL"],
            True,
            3,
            True,
            source_type,
            "42",
            False,
            NOW,
            NOW,
        )

    def test_row_mapping(self):
        project_id, user_id = uuid4(), uuid4()
        pool, _ = _pool_returning(fetchone=self._row(project_id, user_id))

        project = PostgresProjectRepository(pool=pool).get_by_id(project_id)

        assert project.description == ""
        assert project.technologies == ["Go", "SQL"]
        assert project.order == 3
        assert project.source_type == ProjectSourceType.GITHUB
        assert project.is_visible_in_portfolio is False

    def test_invalid_source_type_is_database_error(self):
        pool, _ = _pool_returning(
            fetchone=self._row(uuid4(), uuid4(), source_type="gitlab")
        )

        with pytest.raises(DatabaseError, match="Invalid project source_type"):
            PostgresProjectRepository(pool=pool).get_by_id(uuid4())

    def test_list_visible_only_uses_portfolio_order(self):
        user_id = uuid4()
        pool, conn = _pool_returning(fetchall=[self._row(uuid4(), user_id)])

        projects = PostgresProjectRepository(pool=pool).list_by_user(
            user_id, visible_only=True
        )

        query, params = conn.execute.call_args.args
        assert len(projects) == 1
        assert "AND is_visible" in query
        assert (
            "ORDER BY is_imported DESC, sort_order ASC, featured DESC, "
            "created_at DESC" in query
        )
        assert params == (user_id,)

    def test_next_order(self):
        pool, _ = _pool_returning(fetchone=(None,))
        assert PostgresProjectRepository(pool=pool).next_order(uuid4()) == 0

        pool, _ = _pool_returning(fetchone=(4,))
        assert PostgresProjectRepository(pool=pool).next_order(uuid4()) == 5

    def test_create_serializes_technologies_as_jsonb(self):
        project = make_project(uuid4(), technologies=["Go"])
        pool, conn = _pool_returning(fetchone=self._row(project.id, project.user_id))

        PostgresProjectRepository(pool=pool).create_project(project)

        query, params = conn.execute.call_args.args
        assert "INSERT INTO projects" in query
        assert isinstance(params[8], Jsonb)
        assert params[8].obj == ["Go"]
        assert params[12] == "manual"

    def test_update_missing_and_delete(self):
        pool, _ = _pool_returning(fetchone=None)
        repo = PostgresProjectRepository(pool=pool)
        assert repo.update_project(make_project(uuid4())) is None

        pool, _ = _pool_returning(rowcount=1)
        assert PostgresProjectRepository(pool=pool).delete_project(uuid4()) is True


class TestPostgresTranslationRepository:
    def test_get_maps_row(self):
        pool, _ = _pool_returning(
            fetchone=("h" * 64, "en", "de", "Hello", "Hallo", NOW)
        )

        record = PostgresTranslationRepository(pool=pool).get("h" * 64, "en", "de")

        assert record.translated_text == "Hallo"
        assert record.created_at == NOW

    def test_save_if_absent_does_nothing_on_conflict(self):
        pool, conn = _pool_returning(rowcount=0)

        PostgresTranslationRepository(pool=pool).save_if_absent(
            TranslationRecord(
                hash="h" * 64,
                source_language="en",
                target_language="de",
                original_text="Hello",
                translated_text="Hallo",
            )
        )

        assert "DO NOTHING" in conn.execute.call_args.args[0]


def test_ping_never_raises():
    pool, _ = _pool_returning(error=psycopg.OperationalError("down"))
    assert PostgresUserRepository(pool=pool).ping() is False

    pool, _ = _pool_returning(fetchone=(1,))
    assert PostgresUserRepository(pool=pool).ping() is True
