"""Hosted chat-completion providers (OpenAI, Anthropic, Gemini) via litellm."""

from __future__ import annotations

from namer_suggester.config import ProviderConfig
from namer_suggester.constants import (
    AI_REQUEST_TIMEOUT,
    DEFAULT_ANTHROPIC_MODEL,
    DEFAULT_GEMINI_MODEL,
    DEFAULT_OPENAI_MODEL,
    ProviderName,
)
from namer_suggester.prompts import NAMING_SYSTEM_PROMPT
from namer_suggester.providers import _llm_call
from namer_suggester.providers.base import BaseAIProvider
from namer_suggester.providers.schemas import PromptContext


class HostedLLMProvider(BaseAIProvider):
    """A hosted API authenticated by an API key.

    Availability is the presence of a key; no network probe is made.
    Subclasses only set the litellm route prefix and default model.
    """

    litellm_prefix: str
    default_model: str

    def __init__(
        self,
        config: ProviderConfig,
        timeout: float = AI_REQUEST_TIMEOUT,
    ) -> None:
        self._config = config
        self._timeout = timeout

    @property
    def model(self) -> str:
        """litellm route, e.g. ``openai/gpt-4o-mini``."""
        return f"{self.litellm_prefix}/{self._config.model or self.default_model}"

    async def is_available(self) -> bool:
        return bool(self._config.api_key)

    async def _complete(self, context: PromptContext) -> str | None:
        if not self._config.api_key:
            return None
        messages = [
            {"role": "system", "content": NAMING_SYSTEM_PROMPT},
            {"role": "user", "content": self.build_prompt(context)},
        ]
        return await _llm_call.guarded_llm_call(
            self.model,
            messages,
            self._timeout,
            api_key=self._config.api_key,
        )


class OpenAIProvider(HostedLLMProvider):
    key = ProviderName.OPENAI
    label = "OpenAI"
    litellm_prefix = "openai"
    default_model = DEFAULT_OPENAI_MODEL


class AnthropicProvider(HostedLLMProvider):
    key = ProviderName.ANTHROPIC
    label = "Anthropic Claude"
    litellm_prefix = "anthropic"
    default_model = DEFAULT_ANTHROPIC_MODEL


class GeminiProvider(HostedLLMProvider):
    key = ProviderName.GEMINI
    label = "Google Gemini"
    litellm_prefix = "gemini"
    default_model = DEFAULT_GEMINI_MODEL
