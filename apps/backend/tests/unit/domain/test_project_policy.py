"""
Name: Project Policy and Ordering Unit Tests

Responsibilities:
  - Verify who sees hidden projects (owner, admin) and who does not
  - Verify write permission (owner or admin)
  - Verify portfolio ordering (imported, order, featured, newest)

Notes:
  - Pure unit tests (no repositories)
"""

from datetime import datetime, timedelta, timezone
from uuid import uuid4

import pytest
from app.domain.entities import project_sort_key
from app.domain.project_policy import (
    ProjectActor,
    can_manage_project,
    can_view_project,
    sees_hidden_projects,
)
from app.identity.users import UserRole

from conftest import make_project

pytestmark = pytest.mark.unit

OWNER = uuid4()


class TestProjectPolicy:
    @pytest.fixture
    def hidden(self):
        return make_project(OWNER, visible=False)

    def test_anonymous_only_sees_visible(self, hidden):
        assert can_view_project(make_project(OWNER), None) is True
        assert can_view_project(hidden, None) is False
        assert sees_hidden_projects(OWNER, None) is False

    def test_owner_sees_and_manages_hidden(self, hidden):
        owner = ProjectActor(user_id=OWNER, role=UserRole.USER)

        assert can_view_project(hidden, owner) is True
        assert can_manage_project(hidden, owner) is True

    def test_admin_manages_any_project(self, hidden):
        admin = ProjectActor(user_id=uuid4(), role=UserRole.ADMIN)

        assert can_view_project(hidden, admin) is True
        assert can_manage_project(hidden, admin) is True

    def test_other_user_cannot_manage(self, hidden):
        other = ProjectActor(user_id=uuid4(), role=UserRole.USER)

        assert can_view_project(hidden, other) is False
        assert can_manage_project(make_project(OWNER), other) is False

    def test_actor_without_role_is_anonymous(self, hidden):
        assert can_view_project(hidden, ProjectActor(user_id=OWNER, role=None)) is False


def test_sort_key_orders_portfolio():
    base = datetime(2025, 1, 1, tzinfo=timezone.utc)
    manual_late = make_project(OWNER, "late", order=2, created_at=base)
    manual_first = make_project(OWNER, "first", order=0, created_at=base)
    featured = make_project(OWNER, "featured", order=1, featured=True, created_at=base)
    plain_new = make_project(
        OWNER, "new", order=1, created_at=base + timedelta(days=1)
    )
    plain_old = make_project(OWNER, "old", order=1, created_at=base)
    imported = make_project(OWNER, "imported", order=9, is_imported=True)

    ordered = sorted(
        [manual_late, plain_old, imported, featured, plain_new, manual_first],
        key=project_sort_key,
    )

    assert [p.title for p in ordered] == [
        "imported",
        "first",
        "featured",
        "new",
        "old",
        "late",
    ]
