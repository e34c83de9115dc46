"""
Name: Source Adapter Unit Tests (GitHub / LinkedIn)

Responsibilities:
  - Verify cache-aside behavior (miss fetches, hit does not)
  - Verify failures are propagated and never cached
  - Verify LinkedIn bio en/de built through the translation service
"""

import pytest
from app.application.usecases.sources import (
    GitHubSource,
    LinkedInSource,
    TranslationService,
)
from app.crosscutting.exceptions import (
    ConfigurationMissingError,
    SourceUnavailableError,
)
from app.domain.cache import GITHUB_SKILLS, LINKEDIN_PROFILE, cache_key
from app.infrastructure.cache import DAY_SECONDS

from conftest import make_repo, source_error

pytestmark = pytest.mark.unit


@pytest.fixture
def github(github_client, cache) -> GitHubSource:
    return GitHubSource(github_client, cache)


@pytest.fixture
def linkedin(linkedin_client, cache, translation_client, translation_repo):
    translator = TranslationService(translation_client, translation_repo)
    return LinkedInSource(linkedin_client, cache, translator)


class TestGitHubSource:
    def test_skills_are_cached(self, github, github_client, cache):
        first = github.get_skills("jdoe")
        second = github.get_skills("jdoe")

        assert first == second
        assert first["programmingLanguages"] == ["Python", "TypeScript"]
        assert first["otherSkills"] == ["Machine Learning"]
        assert github_client.calls == ["jdoe"]
        assert cache.get(cache_key(GITHUB_SKILLS, "jdoe")) == first

    def test_refetches_after_ttl(self, github, github_client, clock):
        github.get_skills("jdoe")
        clock.advance(DAY_SECONDS)
        github.get_skills("jdoe")

        assert github_client.calls == ["jdoe", "jdoe"]

    def test_failure_propagates_and_is_not_cached(self, github, github_client, cache):
        github_client.error = source_error()

        with pytest.raises(SourceUnavailableError):
            github.get_skills("jdoe")

        assert cache.get(cache_key(GITHUB_SKILLS, "jdoe")) is None

        github_client.error = None
        assert github.get_skills("jdoe")["programmingLanguages"]

    def test_profile_has_projects_and_skills(self, github):
        data = github.get_profile("jdoe")
        assert set(data) == {"projects", "skills"}
        assert len(data["projects"]) == 4

    def test_user_and_admin_repo_views(self, cache, github_client):
        github_client.repos = [
            make_repo("tool"),
            make_repo("upstream", fork=True),
            make_repo("hidden", private=True),
        ]
        source = GitHubSource(github_client, cache)

        assert [r["name"] for r in source.get_user_repos("jdoe")] == ["tool"]
        assert [r["name"] for r in source.get_admin_repos("jdoe")] == [
            "tool",
            "upstream",
        ]

    def test_namespaces_are_independent(self, github, github_client):
        github.get_skills("jdoe")
        github.get_user_repos("jdoe")

        assert len(github_client.calls) == 2


class TestLinkedInSource:
    def test_profile_and_bilingual_bio(self, linkedin, translation_client):
        data = linkedin.fetch_profile_data("jane-doe")

        assert data["profile"]["name"] == "Jane Doe"
        assert data["bio"] == {"en": "Builds things.", "de": "[de] Builds things."}
        assert translation_client.calls == [("Builds things.", "en", "de")]

    def test_cached_for_seven_days(self, linkedin, linkedin_client, clock):
        linkedin.fetch_profile_data("jane-doe")
        clock.advance(7 * DAY_SECONDS - 1)
        linkedin.fetch_profile_data("jane-doe")
        assert linkedin_client.calls == ["jane-doe"]

        clock.advance(1)
        linkedin.fetch_profile_data("jane-doe")
        assert linkedin_client.calls == ["jane-doe", "jane-doe"]

    def test_translation_failure_falls_back_to_english(
        self, linkedin, translation_client
    ):
        translation_client.error = source_error("translation")

        data = linkedin.fetch_profile_data("jane-doe")

        assert data["bio"] == {"en": "Builds things.", "de": "Builds things."}

    def test_missing_credentials_propagate_uncached(
        self, linkedin, linkedin_client, cache
    ):
        linkedin_client.error = ConfigurationMissingError("APIFY_TOKEN")

        with pytest.raises(ConfigurationMissingError, match="APIFY_TOKEN"):
            linkedin.fetch_profile_data("jane-doe")

        assert cache.get(cache_key(LINKEDIN_PROFILE, "jane-doe")) is None
