"""Shared contract and behavior for AI suggestion providers."""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod

from namer_suggester.constants import ERROR_TRUNCATION_CHARS, ProviderName
from namer_suggester.prompts import build_naming_prompt
from namer_suggester.providers.schemas import PromptContext, ProviderResponse
from namer_suggester.resilience.errors import classify_error, is_retryable

logger = logging.getLogger(__name__)


class BaseAIProvider(ABC):
    """An AI backend that proposes alternative identifier names.

    Subclasses implement :meth:`is_available` and :meth:`_complete`.
    :meth:`get_suggestions` wraps ``_complete`` so that no transport,
    timeout or payload error ever escapes the provider: failures are
    logged at DEBUG and turned into an empty response.
    """

    key: ProviderName
    label: str

    @abstractmethod
    async def is_available(self) -> bool:
        """Cheap, bounded check of credentials or endpoint reachability.

        Must not raise.
        """

    @abstractmethod
    async def _complete(self, context: PromptContext) -> str | None:
        """Return the raw text answer from the backend, or None."""

    async def get_suggestions(
        self, context: PromptContext
    ) -> ProviderResponse:
        try:
            raw = await self._complete(context)
        except Exception as exc:  # noqa: BLE001
            self.handle_error(exc)
            return ProviderResponse()

        if not raw:
            return ProviderResponse()
        return ProviderResponse(
            suggestions=self.process_suggestions(raw, context.original),
            provider=self.label,
        )

    def build_prompt(self, context: PromptContext) -> str:
        return build_naming_prompt(context)

    @staticmethod
    def process_suggestions(response: str, original: str) -> list[str]:
        """Split a comma-separated answer into usable candidate names.

        Drops empty entries, entries with embedded whitespace and the
        original name. Order is preserved; duplicates collapse.
        """
        seen: set[str] = set()
        names: list[str] = []
        for part in response.split(","):
            name = part.strip()
            if not name or name == original:
                continue
            if any(ch.isspace() for ch in name):
                continue
            if name not in seen:
                seen.add(name)
                names.append(name)
        return names

    def handle_error(self, error: BaseException, context: str = "") -> None:
        """Log a provider failure with its error class, never raise."""
        logger.debug(
            "event=provider_failed provider=%s error_class=%s "
            "retryable=%s detail=%s error=%s",
            self.key,
            classify_error(error).value,
            is_retryable(error),
            context or "-",
            str(error)[:ERROR_TRUNCATION_CHARS],
        )
