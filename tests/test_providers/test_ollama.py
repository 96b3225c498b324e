"""Tests for the Ollama provider against a mocked HTTP transport."""

from __future__ import annotations

import json

import httpx

from namer_suggester.config import ProviderConfig
from namer_suggester.constants import DEFAULT_OLLAMA_ENDPOINT
from namer_suggester.providers.ollama import OllamaProvider, tags_url
from namer_suggester.providers.schemas import PromptContext

CONFIG = ProviderConfig(endpoint=DEFAULT_OLLAMA_ENDPOINT, model="llama3")


def _context() -> PromptContext:
    return PromptContext(original="x", kind="variable")


def test_tags_url() -> None:
    assert tags_url(DEFAULT_OLLAMA_ENDPOINT) == (
        "http://localhost:11434/api/tags"
    )


class TestAvailability:
    async def test_tags_endpoint_ok(self) -> None:
        seen: list[str] = []

        def handler(request: httpx.Request) -> httpx.Response:
            seen.append(str(request.url))
            return httpx.Response(200, json={"models": []})

        provider = OllamaProvider(
            CONFIG, transport=httpx.MockTransport(handler)
        )
        assert await provider.is_available() is True
        assert seen == ["http://localhost:11434/api/tags"]

    async def test_server_error_is_unavailable(self) -> None:
        provider = OllamaProvider(
            CONFIG,
            transport=httpx.MockTransport(lambda _: httpx.Response(500)),
        )
        assert await provider.is_available() is False

    async def test_connection_refused_is_unavailable(self) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("refused", request=request)

        provider = OllamaProvider(
            CONFIG, transport=httpx.MockTransport(handler)
        )
        assert await provider.is_available() is False

    async def test_no_endpoint_is_unavailable(self) -> None:
        assert await OllamaProvider(ProviderConfig()).is_available() is False

    async def test_malformed_endpoint_is_unavailable(self) -> None:
        provider = OllamaProvider(ProviderConfig(endpoint="http://[::1"))
        assert await provider.is_available() is False


class TestGenerate:
    async def test_non_streaming_generate(self) -> None:
        bodies: list[dict[str, object]] = []

        def handler(request: httpx.Request) -> httpx.Response:
            bodies.append(json.loads(request.content))
            return httpx.Response(
                200, json={"response": "value, counter", "done": True}
            )

        provider = OllamaProvider(
            CONFIG, transport=httpx.MockTransport(handler)
        )
        response = await provider.get_suggestions(_context())

        assert response.suggestions == ["value", "counter"]
        assert response.provider == "Ollama"
        assert bodies[0]["model"] == "llama3"
        assert bodies[0]["stream"] is False
        assert '"x"' in str(bodies[0]["prompt"])

    async def test_http_error_yields_empty_response(self) -> None:
        provider = OllamaProvider(
            CONFIG,
            transport=httpx.MockTransport(lambda _: httpx.Response(503)),
        )
        response = await provider.get_suggestions(_context())
        assert response.suggestions == []

    async def test_missing_response_field(self) -> None:
        provider = OllamaProvider(
            CONFIG,
            transport=httpx.MockTransport(
                lambda _: httpx.Response(200, json={"done": True})
            ),
        )
        response = await provider.get_suggestions(_context())
        assert response.suggestions == []
