"""
Name: Observability Helpers Tests

Responsibilities:
  - Verify log redaction of secrets (tokens never reach the logs)
  - Verify JSON log lines carry the request context
  - Verify metric label normalization (low cardinality)
"""

import json
import logging

import pytest

from app.context import clear_context, get_context_dict, set_request_context
from app.crosscutting.logger import JSONFormatter, _Redactor
from app.crosscutting.metrics import _normalize_endpoint, _status_bucket

pytestmark = pytest.mark.unit


class TestRedactor:
    def test_sensitive_keys_are_masked(self):
        redactor = _Redactor()

        clean = redactor.sanitize(
            {"apify_token": "abc", "nested": {"Authorization": "Bearer x"}, "ok": 1}
        )

        assert clean["apify_token"] == "***REDACTADO***"
        assert clean["nested"]["Authorization"] == "***REDACTADO***"
        assert clean["ok"] == 1

    def test_long_strings_are_truncated(self):
        out = _Redactor(max_str=5).sanitize("abcdefghij")
        assert out.startswith("abcde")
        assert out.endswith("(truncado)")


def test_json_formatter_includes_request_context():
    set_request_context(request_id="req-1", method="GET", path="/v1/profiles/jdoe")
    try:
        record = logging.LogRecord(
            "portfolio-api", logging.INFO, __file__, 1, "hola", None, None
        )
        record.github_token = "ghp_secret"

        payload = json.loads(JSONFormatter().format(record))
    finally:
        clear_context()

    assert payload["message"] == "hola"
    assert payload["request_id"] == "req-1"
    assert payload["github_token"] == "***REDACTADO***"
    assert get_context_dict() == {}


@pytest.mark.parametrize(
    "path, expected",
    [
        ("/v1/profiles/jdoe", "/v1/profiles/{username}"),
        ("/v1/profiles/jdoe/aggregated", "/v1/profiles/{username}/aggregated"),
        ("/v1/profiles/me", "/v1/profiles/me"),
        ("/v1/github/repos/jdoe", "/v1/github/repos/{username}"),
        ("/v1/linkedin/profile/jane-doe", "/v1/linkedin/profile/{username}"),
        (
            "/v1/admin/users/7c9e6679-7425-40de-944b-e07fc1f90ae7",
            "/v1/admin/users/{id}",
        ),
    ],
)
def test_endpoint_normalization(path, expected):
    assert _normalize_endpoint(path) == expected


def test_status_buckets():
    assert [_status_bucket(c) for c in (200, 204, 404, 502, 101)] == [
        "2xx",
        "2xx",
        "4xx",
        "5xx",
        "other",
    ]
