"""Provider adapters: HTTP completions endpoint and OpenAI-compatible SDK client."""

import asyncio
import json
from types import SimpleNamespace
from unittest.mock import AsyncMock, MagicMock

import httpx
import openai
import pytest

from jai_backend.config.settings import Config
from jai_backend.domain.exceptions import ProviderError
from jai_backend.domain.ports.model_provider import ChatTurn
from jai_backend.infrastructure.llm import (
    HttpCompletionsProvider,
    OpenAIChatProvider,
    build_model_provider,
)

TURNS = [ChatTurn("system", "be helpful"), ChatTurn("user", "hi")]
URL = "https://llm.example.test/v1/chat/completions"


def _http_provider(handler, api_key="k-123"):
    client = httpx.AsyncClient(transport=httpx.MockTransport(handler))
    return HttpCompletionsProvider(client, url=URL, model="llama-test", api_key=api_key)


def _complete(provider):
    async def run():
        try:
            return await provider.complete(TURNS)
        finally:
            await provider.aclose()

    return asyncio.run(run())


# ==================== HTTP ====================


def test_http_provider_posts_openai_style_payload():
    seen = {}

    def handler(request: httpx.Request) -> httpx.Response:
        seen["auth"] = request.headers.get("Authorization")
        seen["body"] = json.loads(request.content)
        return httpx.Response(
            200,
            json={
                "choices": [{"message": {"role": "assistant", "content": "hello!"}}],
                "usage": {"prompt_tokens": 12, "completion_tokens": 3},
            },
        )

    assert _complete(_http_provider(handler)) == "hello!"
    assert seen["auth"] == "Bearer k-123"
    assert seen["body"]["model"] == "llama-test"
    assert seen["body"]["messages"] == [
        {"role": "system", "content": "be helpful"},
        {"role": "user", "content": "hi"},
    ]
    assert seen["body"]["max_tokens"] == 4096
    assert seen["body"]["temperature"] == 0.7


def test_http_provider_non_success_status():
    provider = _http_provider(lambda request: httpx.Response(429, json={"error": "slow down"}))

    with pytest.raises(ProviderError) as exc_info:
        _complete(provider)
    assert exc_info.value.status_code == 429


def test_http_provider_malformed_body():
    provider = _http_provider(lambda request: httpx.Response(200, json={"choices": []}))
    with pytest.raises(ProviderError, match="malformed"):
        _complete(provider)


def test_http_provider_transport_error():
    def handler(request):
        raise httpx.ConnectError("connection refused", request=request)

    with pytest.raises(ProviderError):
        _complete(_http_provider(handler))


# ==================== OPENAI SDK ====================


def _openai_client(create):
    client = MagicMock()
    client.chat.completions.create = create
    client.close = AsyncMock()
    return client


def test_openai_provider_returns_content():
    response = SimpleNamespace(
        usage=SimpleNamespace(prompt_tokens=10, completion_tokens=4),
        choices=[SimpleNamespace(message=SimpleNamespace(content="print('hi')"))],
    )
    create = AsyncMock(return_value=response)
    client = _openai_client(create)

    reply = _complete(OpenAIChatProvider(client, model="llama-3.3-70b-versatile"))

    assert reply == "print('hi')"
    kwargs = create.await_args.kwargs
    assert kwargs["model"] == "llama-3.3-70b-versatile"
    assert kwargs["messages"][1] == {"role": "user", "content": "hi"}
    client.close.assert_awaited_once()


def test_openai_provider_wraps_sdk_errors():
    error = openai.APIConnectionError(request=httpx.Request("POST", URL))
    provider = OpenAIChatProvider(_openai_client(AsyncMock(side_effect=error)), model="m")

    with pytest.raises(ProviderError):
        _complete(provider)


def test_openai_provider_empty_completion():
    response = SimpleNamespace(usage=None, choices=[SimpleNamespace(message=SimpleNamespace(content=""))])
    provider = OpenAIChatProvider(_openai_client(AsyncMock(return_value=response)), model="m")

    with pytest.raises(ProviderError, match="empty"):
        _complete(provider)


# ==================== REGISTRY ====================


class _HttpConfig(Config):
    LLM_PROVIDER = "http"


class _UnknownConfig(Config):
    LLM_PROVIDER = "carrier-pigeon"


def test_registry_selects_provider_by_name():
    provider = build_model_provider(_HttpConfig)
    assert isinstance(provider, HttpCompletionsProvider)
    asyncio.run(provider.aclose())


def test_registry_rejects_unknown_provider():
    with pytest.raises(ValueError, match="carrier-pigeon"):
        build_model_provider(_UnknownConfig)
