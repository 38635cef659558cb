import asyncio
import json

import httpx
import pytest

from app.core.completion_client import (
    CompletionAuthError,
    CompletionBadRequestError,
    CompletionClient,
    CompletionError,
    CompletionRateLimitError,
    CompletionTimeoutError,
)
from app.core.config import Settings


SETTINGS = Settings(perplexity_api_key="pplx-test", request_timeout_s=5)


def _client(handler) -> CompletionClient:
    return CompletionClient(SETTINGS, transport=httpx.MockTransport(handler))


def _answer(content):
    return {"choices": [{"message": {"role": "assistant", "content": content}}]}


def test_returns_message_content_and_sends_bearer_token():
    seen = {}

    def handler(request: httpx.Request) -> httpx.Response:
        seen["auth"] = request.headers["Authorization"]
        seen["url"] = str(request.url)
        seen["body"] = json.loads(request.content)
        return httpx.Response(200, json=_answer("1. Some Scholarship"))

    content = asyncio.run(_client(handler).complete("find scholarships"))

    assert content == "1. Some Scholarship"
    assert seen["auth"] == "Bearer pplx-test"
    assert seen["url"] == SETTINGS.perplexity_api_url
    assert seen["body"]["model"] == SETTINGS.perplexity_model
    assert seen["body"]["stream"] is False
    assert [m["role"] for m in seen["body"]["messages"]] == ["system", "user"]
    assert seen["body"]["messages"][1]["content"] == "find scholarships"


@pytest.mark.parametrize("status, error_cls", [
    (400, CompletionBadRequestError),
    (401, CompletionAuthError),
    (429, CompletionRateLimitError),
])
def test_status_codes_map_to_error_kinds(status, error_cls):
    def handler(request):
        return httpx.Response(status, json={"error": "nope"})

    with pytest.raises(error_cls) as exc_info:
        asyncio.run(_client(handler).complete("q"))

    assert exc_info.value.status_code == status
    assert exc_info.value.body == {"error": "nope"}


def test_other_upstream_failure_is_generic():
    def handler(request):
        return httpx.Response(503, text="upstream down")

    with pytest.raises(CompletionError) as exc_info:
        asyncio.run(_client(handler).complete("q"))

    assert type(exc_info.value) is CompletionError
    assert exc_info.value.body == "upstream down"


def test_missing_content_is_an_error():
    def handler(request):
        return httpx.Response(200, json={"choices": []})

    with pytest.raises(CompletionError, match="Invalid response"):
        asyncio.run(_client(handler).complete("q"))


def test_timeout():
    def handler(request):
        raise httpx.ReadTimeout("timed out", request=request)

    with pytest.raises(CompletionTimeoutError):
        asyncio.run(_client(handler).complete("q"))


def test_connection_failure():
    def handler(request):
        raise httpx.ConnectError("refused", request=request)

    with pytest.raises(CompletionError):
        asyncio.run(_client(handler).complete("q"))
