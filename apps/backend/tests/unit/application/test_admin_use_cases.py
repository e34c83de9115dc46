"""
Name: Admin + Cache Admin Use Cases Unit Tests

Responsibilities:
  - Verify user provisioning (validation, conflicts, seeded profile)
  - Verify delete cascade and stats
  - Verify admin lookup and role/active updates
  - Verify cache clear targets, scoping and idempotence
"""

from uuid import uuid4

import pytest
from app.application.usecases.admin import (
    AdminErrorCode,
    DeleteUserUseCase,
    GetAdminStatsUseCase,
    GetUserUseCase,
    ListUsersUseCase,
    ProvisionUserUseCase,
    UpdateUserUseCase,
)
from app.application.usecases.cache_admin import (
    CacheTarget,
    ClearSourceCacheUseCase,
    GetCacheStatsUseCase,
)
from app.domain.cache import (
    GITHUB_ADMIN_REPOS,
    GITHUB_PROFILE,
    GITHUB_REPOS,
    GITHUB_SKILLS,
    LINKEDIN_PROFILE,
    cache_key,
)
from app.identity.users import UserRole

pytestmark = pytest.mark.unit


class TestProvisionUser:
    def test_creates_user_and_seeded_profile(self, user_repo, profile_repo):
        result = ProvisionUserUseCase(user_repo, profile_repo).execute(
            username="alice", email="Alice@Example.com", role=UserRole.ADMIN
        )

        assert result.error is None
        assert result.user.email == "alice@example.com"
        assert result.user.role == UserRole.ADMIN
        profile = profile_repo.get_by_user_id(result.user.id)
        assert profile.contact_email == "alice@example.com"

    def test_requires_username_and_email(self, user_repo, profile_repo):
        result = ProvisionUserUseCase(user_repo, profile_repo).execute(
            username=" ", email="a@b.c"
        )
        assert result.error.code == AdminErrorCode.VALIDATION_ERROR

    def test_duplicate_username_conflicts(self, jdoe, user_repo, profile_repo):
        result = ProvisionUserUseCase(user_repo, profile_repo).execute(
            username="jdoe", email="other@example.com"
        )
        assert result.error.code == AdminErrorCode.CONFLICT

    def test_duplicate_email_conflicts(self, jdoe, user_repo, profile_repo):
        result = ProvisionUserUseCase(user_repo, profile_repo).execute(
            username="other", email="jdoe@example.com"
        )
        assert result.error.code == AdminErrorCode.CONFLICT


class TestUserLifecycle:
    def test_delete_cascades_profile(self, jdoe, user_repo, profile_repo):
        result = DeleteUserUseCase(user_repo).execute(jdoe.id)

        assert result.deleted is True
        assert user_repo.get_by_id(jdoe.id) is None
        assert profile_repo.get_by_user_id(jdoe.id) is None

    def test_delete_unknown_user(self, user_repo):
        result = DeleteUserUseCase(user_repo).execute(uuid4())
        assert result.deleted is False
        assert result.error.code == AdminErrorCode.NOT_FOUND

    def test_list_and_stats(self, jdoe, user_repo, profile_repo):
        ProvisionUserUseCase(user_repo, profile_repo).execute(
            username="bob", email="bob@example.com"
        )

        users = ListUsersUseCase(user_repo).execute().users
        stats = GetAdminStatsUseCase(user_repo, profile_repo).execute()

        assert {u.username for u in users} == {"jdoe", "bob"}
        assert (stats.users, stats.active_users, stats.profiles) == (2, 2, 2)


class TestUserAdministration:
    def test_get_user(self, jdoe, user_repo):
        assert GetUserUseCase(user_repo).execute(jdoe.id).user.username == "jdoe"

    def test_get_unknown_user(self, user_repo):
        result = GetUserUseCase(user_repo).execute(uuid4())
        assert result.error.code == AdminErrorCode.NOT_FOUND

    def test_promote_and_deactivate(self, jdoe, user_repo, profile_repo):
        result = UpdateUserUseCase(user_repo).execute(
            jdoe.id, role=UserRole.ADMIN, is_active=False
        )

        assert result.error is None
        stored = user_repo.get_by_id(jdoe.id)
        assert (stored.role, stored.is_active) == (UserRole.ADMIN, False)
        assert stored.email == "jdoe@example.com"
        stats = GetAdminStatsUseCase(user_repo, profile_repo).execute()
        assert stats.active_users == 0

    def test_partial_update_keeps_other_field(self, jdoe, user_repo):
        UpdateUserUseCase(user_repo).execute(jdoe.id, is_active=False)

        stored = user_repo.get_by_id(jdoe.id)
        assert (stored.role, stored.is_active) == (UserRole.USER, False)

    def test_update_without_changes_is_rejected(self, jdoe, user_repo):
        result = UpdateUserUseCase(user_repo).execute(jdoe.id)
        assert result.error.code == AdminErrorCode.VALIDATION_ERROR

    def test_update_unknown_user(self, user_repo):
        result = UpdateUserUseCase(user_repo).execute(uuid4(), is_active=False)
        assert result.error.code == AdminErrorCode.NOT_FOUND


class TestClearSourceCache:
    def _populate(self, cache, username="jdoe"):
        for namespace in (
            GITHUB_PROFILE,
            GITHUB_REPOS,
            GITHUB_ADMIN_REPOS,
            GITHUB_SKILLS,
            LINKEDIN_PROFILE,
        ):
            cache.set(cache_key(namespace, username), {"v": 1})

    def test_github_clears_repo_namespaces_only(self, cache):
        self._populate(cache)

        message = ClearSourceCacheUseCase(cache).execute(CacheTarget.GITHUB)

        assert message == "GitHub cache cleared"
        assert cache.get(cache_key(GITHUB_PROFILE, "jdoe")) is None
        assert cache.get(cache_key(GITHUB_REPOS, "jdoe")) is None
        assert cache.get(cache_key(GITHUB_ADMIN_REPOS, "jdoe")) is None
        assert cache.get(cache_key(GITHUB_SKILLS, "jdoe")) == {"v": 1}
        assert cache.get(cache_key(LINKEDIN_PROFILE, "jdoe")) == {"v": 1}

    def test_skills_and_linkedin_targets(self, cache):
        self._populate(cache)
        use_case = ClearSourceCacheUseCase(cache)

        assert use_case.execute(CacheTarget.SKILLS) == "Skills cache cleared"
        assert use_case.execute(CacheTarget.LINKEDIN) == "LinkedIn cache cleared"
        assert cache.get(cache_key(GITHUB_SKILLS, "jdoe")) is None
        assert cache.get(cache_key(LINKEDIN_PROFILE, "jdoe")) is None
        assert cache.get(cache_key(GITHUB_PROFILE, "jdoe")) == {"v": 1}

    def test_username_scopes_the_clear(self, cache):
        self._populate(cache, "jdoe")
        self._populate(cache, "other")

        ClearSourceCacheUseCase(cache).execute(CacheTarget.SKILLS, "jdoe")

        assert cache.get(cache_key(GITHUB_SKILLS, "jdoe")) is None
        assert cache.get(cache_key(GITHUB_SKILLS, "other")) == {"v": 1}

    @pytest.mark.parametrize("populated", [True, False])
    def test_github_clear_is_idempotent(self, cache, populated):
        if populated:
            self._populate(cache)
        use_case = ClearSourceCacheUseCase(cache)

        first = use_case.execute(CacheTarget.GITHUB)
        second = use_case.execute(CacheTarget.GITHUB)

        assert first == second == "GitHub cache cleared"
        for namespace in (GITHUB_PROFILE, GITHUB_REPOS, GITHUB_ADMIN_REPOS):
            assert cache.get(cache_key(namespace, "jdoe")) is None

    def test_stats_passthrough(self, cache):
        stats = GetCacheStatsUseCase(cache).execute()
        assert stats["backend"] == "in-memory"
