"""AI suggestion providers — a closed set keyed by ProviderName."""

from __future__ import annotations

from namer_suggester.config import AIConfig
from namer_suggester.constants import ProviderName
from namer_suggester.providers.base import BaseAIProvider
from namer_suggester.providers.copilot import CopilotProvider
from namer_suggester.providers.hosted import (
    AnthropicProvider,
    GeminiProvider,
    OpenAIProvider,
)
from namer_suggester.providers.ollama import OllamaProvider
from namer_suggester.providers.schemas import PromptContext, ProviderResponse

__all__ = [
    "AnthropicProvider",
    "BaseAIProvider",
    "CopilotProvider",
    "GeminiProvider",
    "OllamaProvider",
    "OpenAIProvider",
    "PromptContext",
    "ProviderResponse",
    "build_providers",
]


def build_providers(config: AIConfig) -> dict[ProviderName, BaseAIProvider]:
    """Instantiate every backend from one immutable AIConfig."""
    timeout = config.request_timeout_seconds
    return {
        ProviderName.COPILOT: CopilotProvider(),
        ProviderName.OPENAI: OpenAIProvider(config.openai, timeout),
        ProviderName.ANTHROPIC: AnthropicProvider(config.anthropic, timeout),
        ProviderName.GEMINI: GeminiProvider(config.gemini, timeout),
        ProviderName.OLLAMA: OllamaProvider(config.ollama, timeout),
    }
