"""
Name: Translation Memoization Unit Tests

Responsibilities:
  - Verify same-language and empty-text no-ops (no call, no write)
  - Verify memoization by (hash, source, target): second call hits the store
  - Verify fallback to original text on provider failure (nothing stored)
"""

import pytest
from app.application.content_hash import compute_text_hash
from app.application.usecases.sources.translation import (
    TranslationOrigin,
    TranslationService,
)
from app.crosscutting.exceptions import TranslationFailedError

from conftest import source_error

pytestmark = pytest.mark.unit


@pytest.fixture
def service(translation_client, translation_repo) -> TranslationService:
    return TranslationService(translation_client, translation_repo)


def test_same_language_is_noop(service, translation_client, translation_repo):
    outcome = service.translate("Hallo", "de", "de")

    assert outcome.text == "Hallo"
    assert outcome.origin == TranslationOrigin.NOOP
    assert translation_client.calls == []
    assert translation_repo.count() == 0


def test_empty_text_is_noop(service, translation_client):
    outcome = service.translate("", "en", "de")

    assert outcome.text == ""
    assert outcome.origin == TranslationOrigin.NOOP
    assert translation_client.calls == []


def test_miss_calls_api_and_persists(service, translation_client, translation_repo):
    outcome = service.translate("Hello", "en", "de")

    assert outcome.text == "[de] Hello"
    assert outcome.origin == TranslationOrigin.API
    assert translation_client.calls == [("Hello", "en", "de")]

    record = translation_repo.get(compute_text_hash("Hello"), "en", "de")
    assert record is not None
    assert record.original_text == "Hello"
    assert record.translated_text == "[de] Hello"


def test_second_call_is_served_from_store(service, translation_client):
    first = service.translate("Hello", "en", "de")
    second = service.translate("Hello", "en", "de")

    assert second.text == first.text
    assert second.origin == TranslationOrigin.CACHE
    assert len(translation_client.calls) == 1


def test_memo_is_keyed_by_language_pair(service, translation_client):
    service.translate("Hello", "en", "de")
    service.translate("Hello", "en", "fr")

    assert len(translation_client.calls) == 2


def test_failure_returns_original_and_stores_nothing(
    service, translation_client, translation_repo
):
    translation_client.error = source_error("translation")

    outcome = service.translate("Hello", "en", "de")

    assert outcome.text == "Hello"
    assert outcome.origin == TranslationOrigin.FALLBACK
    assert outcome.failed
    assert isinstance(outcome.error, TranslationFailedError)
    assert translation_repo.count() == 0


def test_failure_is_retried_on_next_call(service, translation_client):
    translation_client.error = source_error("translation")
    service.translate("Hello", "en", "de")

    translation_client.error = None
    outcome = service.translate("Hello", "en", "de")

    assert outcome.origin == TranslationOrigin.API
    assert len(translation_client.calls) == 2


def test_text_hash_is_sha256_hex():
    digest = compute_text_hash("Hello")
    assert digest == "185f8db32271fe25f561a6fc938b2e264306ec304eda518007d1764826381969"
