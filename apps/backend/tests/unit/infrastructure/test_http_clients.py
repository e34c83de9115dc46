"""
Name: External HTTP Clients Unit Tests (GitHub / Apify / Lingva)

Responsibilities:
  - Verify request shape per provider (URL, params, headers, body)
  - Verify non-2xx, transport and payload errors map to SourceUnavailableError
  - Verify transient failures are retried and permanent ones fail fast
  - Verify the LinkedIn client refuses to call without a token

Notes:
  - httpx.MockTransport: no network, deterministic responses
  - Retry delays set to ~0 so tests stay fast
"""

import httpx
import pytest
from app.crosscutting.exceptions import (
    ConfigurationMissingError,
    SourceUnavailableError,
)
from app.infrastructure.services import (
    ApifyLinkedInClient,
    GitHubRestClient,
    LingvaTranslationClient,
)

pytestmark = pytest.mark.unit

FAST_RETRY = {
    "retry_max_attempts": 3,
    "retry_base_delay_s": 0.0,
    "retry_max_delay_s": 0.01,
}


class Recorder:
    """Handler de MockTransport que devuelve respuestas en secuencia."""

    def __init__(self, *responses):
        self.responses = list(responses)
        self.requests: list[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        item = self.responses.pop(0) if len(self.responses) > 1 else self.responses[0]
        if isinstance(item, Exception):
            raise item
        return item


def _http(handler) -> httpx.Client:
    return httpx.Client(transport=httpx.MockTransport(handler))


# ---------------------------------------------------------------------------
# GitHub
# ---------------------------------------------------------------------------


class TestGitHubRestClient:
    def test_lists_repos_with_expected_request(self):
        handler = Recorder(httpx.Response(200, json=[{"name": "a"}, "junk"]))
        client = GitHubRestClient(
            api_base="https://api.github.test/",
            token="ghp_x",
            http_client=_http(handler),
            **FAST_RETRY,
        )

        repos = client.list_repos("jdoe")

        assert repos == [{"name": "a"}]
        request = handler.requests[0]
        assert request.method == "GET"
        assert request.url.path == "/users/jdoe/repos"
        assert request.url.params["sort"] == "pushed"
        assert request.url.params["per_page"] == "100"
        assert request.headers["Accept"] == "application/vnd.github+json"
        assert request.headers["Authorization"] == "Bearer ghp_x"

    def test_no_token_no_auth_header(self):
        handler = Recorder(httpx.Response(200, json=[]))
        client = GitHubRestClient(
            api_base="https://api.github.test", http_client=_http(handler), **FAST_RETRY
        )

        client.list_repos("jdoe")

        assert "Authorization" not in handler.requests[0].headers

    def test_404_fails_fast(self):
        handler = Recorder(httpx.Response(404, json={"message": "Not Found"}))
        client = GitHubRestClient(
            api_base="https://api.github.test", http_client=_http(handler), **FAST_RETRY
        )

        with pytest.raises(SourceUnavailableError) as exc_info:
            client.list_repos("ghost")

        assert exc_info.value.status_code == 404
        assert exc_info.value.source == "github"
        assert len(handler.requests) == 1

    def test_503_is_retried_then_succeeds(self):
        handler = Recorder(
            httpx.Response(503),
            httpx.Response(503),
            httpx.Response(200, json=[{"name": "a"}]),
        )
        client = GitHubRestClient(
            api_base="https://api.github.test", http_client=_http(handler), **FAST_RETRY
        )

        assert client.list_repos("jdoe") == [{"name": "a"}]
        assert len(handler.requests) == 3

    def test_retries_exhausted(self):
        handler = Recorder(httpx.Response(500))
        client = GitHubRestClient(
            api_base="https://api.github.test", http_client=_http(handler), **FAST_RETRY
        )

        with pytest.raises(SourceUnavailableError) as exc_info:
            client.list_repos("jdoe")

        assert exc_info.value.status_code == 500
        assert len(handler.requests) == 3

    def test_transport_error_maps_to_source_unavailable(self):
        handler = Recorder(httpx.ConnectError("refused"))
        client = GitHubRestClient(
            api_base="https://api.github.test", http_client=_http(handler), **FAST_RETRY
        )

        with pytest.raises(SourceUnavailableError, match="unreachable"):
            client.list_repos("jdoe")

        assert len(handler.requests) == 3

    def test_unexpected_payload(self):
        handler = Recorder(httpx.Response(200, json={"message": "rate limited"}))
        client = GitHubRestClient(
            api_base="https://api.github.test", http_client=_http(handler), **FAST_RETRY
        )

        with pytest.raises(SourceUnavailableError):
            client.list_repos("jdoe")

    def test_invalid_json(self):
        handler = Recorder(httpx.Response(200, content=b"<html>"))
        client = GitHubRestClient(
            api_base="https://api.github.test", http_client=_http(handler), **FAST_RETRY
        )

        with pytest.raises(SourceUnavailableError, match="invalid JSON"):
            client.list_repos("jdoe")


# ---------------------------------------------------------------------------
# LinkedIn (Apify)
# ---------------------------------------------------------------------------


class TestApifyLinkedInClient:
    def test_missing_token_never_calls_network(self):
        handler = Recorder(httpx.Response(200, json=[{}]))
        client = ApifyLinkedInClient(token="", http_client=_http(handler), **FAST_RETRY)

        with pytest.raises(ConfigurationMissingError) as exc_info:
            client.fetch_profile("jane-doe")

        assert str(exc_info.value) == "APIFY_TOKEN is missing or invalid"
        assert handler.requests == []

    def test_placeholder_token_is_rejected(self):
        client = ApifyLinkedInClient(token="changeme", **FAST_RETRY)
        assert client.has_token() is False

    def test_posts_username_and_returns_first_item(self):
        handler = Recorder(httpx.Response(200, json=[{"basic_info": {"fullname": "J"}}]))
        client = ApifyLinkedInClient(
            token="apify_real",
            actor_url="https://apify.test/run",
            http_client=_http(handler),
            **FAST_RETRY,
        )

        data = client.fetch_profile("jane-doe")

        assert data == {"basic_info": {"fullname": "J"}}
        request = handler.requests[0]
        assert request.method == "POST"
        assert request.url.params["token"] == "apify_real"
        assert b'"username":"jane-doe"' in request.content.replace(b" ", b"")
        assert b'"includeEmail":true' in request.content.replace(b" ", b"")

    def test_empty_dataset(self):
        handler = Recorder(httpx.Response(200, json=[]))
        client = ApifyLinkedInClient(
            token="apify_real", http_client=_http(handler), **FAST_RETRY
        )

        with pytest.raises(SourceUnavailableError, match="No profile data returned"):
            client.fetch_profile("jane-doe")


# ---------------------------------------------------------------------------
# Translation (Lingva)
# ---------------------------------------------------------------------------


class TestLingvaTranslationClient:
    def test_text_is_path_encoded(self):
        handler = Recorder(httpx.Response(200, json={"translation": "Hallo / Welt"}))
        client = LingvaTranslationClient(
            api_base="https://lingva.test/api/v1",
            http_client=_http(handler),
            **FAST_RETRY,
        )

        assert client.translate("Hello / World", "en", "de") == "Hallo / Welt"
        raw_path = handler.requests[0].url.raw_path.decode()
        assert raw_path == "/api/v1/en/de/Hello%20%2F%20World"

    def test_missing_translation_field(self):
        handler = Recorder(httpx.Response(200, json={"error": "nope"}))
        client = LingvaTranslationClient(http_client=_http(handler), **FAST_RETRY)

        with pytest.raises(SourceUnavailableError):
            client.translate("Hello", "en", "de")

    def test_429_is_retried(self):
        handler = Recorder(
            httpx.Response(429), httpx.Response(200, json={"translation": "Hallo"})
        )
        client = LingvaTranslationClient(http_client=_http(handler), **FAST_RETRY)

        assert client.translate("Hello", "en", "de") == "Hallo"
        assert len(handler.requests) == 2


# ---------------------------------------------------------------------------
# Lifecycle
# ---------------------------------------------------------------------------


class TestClose:
    def test_closes_own_http_client(self):
        client = LingvaTranslationClient(api_base="https://lingva.test/api/v1")

        client.close()

        assert client._http.is_closed

    def test_leaves_injected_http_client_open(self):
        http = _http(Recorder(httpx.Response(200, json=[])))
        client = GitHubRestClient(api_base="https://api.github.test", http_client=http)

        client.close()

        assert not http.is_closed
