"""
Name: In-Memory Repositories Unit Tests

Responsibilities:
  - Verify profile upsert timestamps and defensive copies
  - Verify user lookups, ordering, update and delete cascade
  - Verify project listing order, visibility filter and next order
  - Verify translation memo is write-once per key
"""

from dataclasses import replace
from datetime import datetime, timedelta, timezone
from uuid import uuid4

import pytest
from app.domain.entities import Profile, Skill, TranslationRecord

from conftest import make_project, make_user

pytestmark = pytest.mark.unit


class TestInMemoryProfileRepository:
    def test_save_sets_timestamps_and_preserves_created_at(self, profile_repo):
        user_id = uuid4()

        first = profile_repo.save_profile(Profile(user_id=user_id, name="A"))
        second = profile_repo.save_profile(Profile(user_id=user_id, name="B"))

        assert first.created_at is not None
        assert second.created_at == first.created_at
        assert second.updated_at >= first.updated_at
        assert profile_repo.get_by_user_id(user_id).name == "B"
        assert profile_repo.count_profiles() == 1

    def test_returned_profiles_are_copies(self, profile_repo):
        user_id = uuid4()
        profile_repo.save_profile(Profile(user_id=user_id, skills=[Skill(name="Go")]))

        loaded = profile_repo.get_by_user_id(user_id)
        loaded.skills.append(Skill(name="Rust"))

        assert [s.name for s in profile_repo.get_by_user_id(user_id).skills] == ["Go"]

    def test_missing_profile(self, profile_repo):
        assert profile_repo.get_by_user_id(uuid4()) is None


class TestInMemoryUserRepository:
    def test_lookups(self, user_repo):
        user = user_repo.create_user(make_user("alice"))

        assert user_repo.get_by_id(user.id) == user
        assert user_repo.get_by_username("alice") == user
        assert user_repo.get_by_email("alice@example.com") == user
        assert user_repo.get_by_username("Alice") is None

    def test_list_newest_first(self, user_repo):
        old = make_user("old")
        old = replace(old, created_at=old.created_at - timedelta(days=1))
        user_repo.create_user(old)
        user_repo.create_user(make_user("new"))

        assert [u.username for u in user_repo.list_users()] == ["new", "old"]

    def test_delete_cascades_to_profiles(self, user_repo, profile_repo):
        user = user_repo.create_user(make_user("gone"))
        profile_repo.save_profile(Profile(user_id=user.id))

        assert user_repo.delete_user(user.id) is True
        assert profile_repo.get_by_user_id(user.id) is None
        assert user_repo.delete_user(user.id) is False

    def test_count_users(self, user_repo):
        user_repo.create_user(make_user("a"))
        user_repo.create_user(replace(make_user("b"), is_active=False))

        assert user_repo.count_users() == 2
        assert user_repo.count_users(active_only=True) == 1

    def test_update_user_replaces_role_and_state(self, user_repo):
        user = user_repo.create_user(make_user("carol"))

        updated = user_repo.update_user(replace(user, is_active=False))

        assert updated.is_active is False
        assert user_repo.get_by_id(user.id).is_active is False
        assert user_repo.update_user(make_user("ghost")) is None

    def test_delete_cascades_to_projects(self, user_repo, project_repo):
        user = user_repo.create_user(make_user("gone"))
        keep = user_repo.create_user(make_user("keep"))
        project_repo.create_project(make_project(user.id))
        kept = project_repo.create_project(make_project(keep.id))

        user_repo.delete_user(user.id)

        assert project_repo.list_by_user(user.id) == []
        assert project_repo.get_by_id(kept.id) is not None


class TestInMemoryProjectRepository:
    def test_list_filters_hidden_and_sorts(self, project_repo):
        owner = uuid4()
        project_repo.create_project(make_project(owner, "b", order=1))
        project_repo.create_project(make_project(owner, "a", order=0))
        project_repo.create_project(make_project(owner, "off", order=2, visible=False))
        project_repo.create_project(make_project(uuid4(), "foreign"))

        assert [p.title for p in project_repo.list_by_user(owner)] == ["a", "b", "off"]
        visible = project_repo.list_by_user(owner, visible_only=True)
        assert [p.title for p in visible] == ["a", "b"]

    def test_next_order(self, project_repo):
        owner = uuid4()
        assert project_repo.next_order(owner) == 0

        project_repo.create_project(make_project(owner, order=4))

        assert project_repo.next_order(owner) == 5

    def test_update_keeps_owner_and_created_at(self, project_repo):
        created = project_repo.create_project(make_project(uuid4()))

        updated = project_repo.update_project(
            replace(created, title="New", user_id=uuid4())
        )

        assert updated.title == "New"
        assert updated.user_id == created.user_id
        assert updated.created_at == created.created_at
        assert project_repo.update_project(make_project(uuid4())) is None

    def test_source_lookup_and_delete(self, project_repo):
        owner = uuid4()
        created = project_repo.create_project(make_project(owner, source_id="42"))

        assert project_repo.get_by_source_id(owner, "42").id == created.id
        assert project_repo.get_by_source_id(uuid4(), "42") is None
        assert project_repo.delete_project(created.id) is True
        assert project_repo.delete_project(created.id) is False

    def test_returned_projects_are_copies(self, project_repo):
        created = project_repo.create_project(
            make_project(uuid4(), technologies=["Go"])
        )

        created.technologies.append("Rust")

        assert project_repo.get_by_id(created.id).technologies == ["Go"]


class TestInMemoryTranslationRepository:
    def _record(self, translated: str) -> TranslationRecord:
        return TranslationRecord(
            hash="h" * 64,
            source_language="en",
            target_language="de",
            original_text="Hello",
            translated_text=translated,
        )

    def test_first_writer_wins(self, translation_repo):
        translation_repo.save_if_absent(self._record("Hallo"))
        translation_repo.save_if_absent(self._record("Servus"))

        stored = translation_repo.get("h" * 64, "en", "de")

        assert stored.translated_text == "Hallo"
        assert stored.created_at <= datetime.now(timezone.utc)
        assert translation_repo.count() == 1

    def test_language_pair_is_part_of_the_key(self, translation_repo):
        translation_repo.save_if_absent(self._record("Hallo"))
        assert translation_repo.get("h" * 64, "en", "fr") is None
