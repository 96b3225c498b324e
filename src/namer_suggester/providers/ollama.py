"""Ollama local LLM server provider over HTTP (httpx)."""

from __future__ import annotations

import logging
from typing import Any, cast

import httpx

from namer_suggester.config import ProviderConfig
from namer_suggester.constants import (
    AI_REQUEST_TIMEOUT,
    DEFAULT_OLLAMA_MODEL,
    OLLAMA_PROBE_TIMEOUT,
    ProviderName,
)
from namer_suggester.providers.base import BaseAIProvider
from namer_suggester.providers.schemas import PromptContext

logger = logging.getLogger(__name__)


def tags_url(endpoint: str) -> str:
    """The sibling "list models" URL of a ``.../api/generate`` endpoint."""
    return endpoint.replace("/generate", "/tags")


class OllamaProvider(BaseAIProvider):
    """Non-streaming ``/api/generate`` call against a local Ollama server."""

    key = ProviderName.OLLAMA
    label = "Ollama"

    def __init__(
        self,
        config: ProviderConfig,
        timeout: float = AI_REQUEST_TIMEOUT,
        probe_timeout: float = OLLAMA_PROBE_TIMEOUT,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._config = config
        self._timeout = timeout
        self._probe_timeout = probe_timeout
        self._transport = transport

    def _client(self, timeout: float) -> httpx.AsyncClient:
        return httpx.AsyncClient(timeout=timeout, transport=self._transport)

    async def is_available(self) -> bool:
        if not self._config.endpoint:
            return False
        try:
            async with self._client(self._probe_timeout) as client:
                response = await client.get(tags_url(self._config.endpoint))
        except (httpx.HTTPError, httpx.InvalidURL) as exc:
            logger.debug("event=ollama_probe_failed error=%s", exc)
            return False
        return response.is_success

    async def _complete(self, context: PromptContext) -> str | None:
        if not self._config.endpoint:
            return None
        body = {
            "model": self._config.model or DEFAULT_OLLAMA_MODEL,
            "prompt": self.build_prompt(context),
            "stream": False,
        }
        async with self._client(self._timeout) as client:
            response = await client.post(self._config.endpoint, json=body)
            response.raise_for_status()
            data = cast(dict[str, Any], response.json())

        text = data.get("response")
        return str(text) if text else None
