"""Combine rule-based and AI suggestions under the configured policy."""

from __future__ import annotations

import asyncio
import logging
import re
from collections.abc import Mapping

from namer_suggester.analysis.schemas import FileContext
from namer_suggester.config import AIConfig
from namer_suggester.constants import (
    PROVIDER_PRIORITY,
    IdentifierKind,
    ProviderName,
    SuggestionPolicy,
)
from namer_suggester.providers import BaseAIProvider, build_providers
from namer_suggester.providers.schemas import PromptContext
from namer_suggester.suggestions.rules import (
    capitalize,
    is_function_kind,
    suggest_names,
)
from namer_suggester.suggestions.suggestion_set import SuggestionSet

logger = logging.getLogger(__name__)

_EVENT_NAME_RE = re.compile(r"click|change|submit", re.IGNORECASE)
_VERY_SHORT_LEN = 3


class SuggestionOrchestrator:
    """Resolve suggestions for one identifier at a time.

    Rules always run first. Under the ``auto`` policy providers are
    tried strictly in :data:`PROVIDER_PRIORITY` order, one at a time,
    and the first non-empty answer wins; a single named provider is
    asked once; ``rules`` skips AI entirely. :meth:`get_suggestions`
    never raises and never returns an empty list.
    """

    def __init__(
        self,
        config: AIConfig,
        providers: Mapping[ProviderName, BaseAIProvider] | None = None,
    ) -> None:
        self._config = config
        self._providers: Mapping[ProviderName, BaseAIProvider] = (
            providers if providers is not None else build_providers(config)
        )

    @property
    def config(self) -> AIConfig:
        return self._config

    async def get_suggestions(
        self,
        original: str,
        kind: IdentifierKind | str,
        context: str = "",
        file_context: FileContext | None = None,
    ) -> list[str]:
        file_context = file_context or FileContext()
        rule_suggestions = suggest_names(original, kind, context, file_context)
        logger.info(
            "event=rules_done name=%s count=%d",
            original,
            len(rule_suggestions),
        )

        ai_suggestions: list[str] = []
        if self._config.uses_ai:
            prompt_context = PromptContext(
                original=original,
                kind=kind,
                context=context,
                file_context=file_context,
            )
            ai_suggestions = await self._ai_suggestions(prompt_context)
            logger.info(
                "event=ai_done name=%s count=%d",
                original,
                len(ai_suggestions),
            )

        combined = SuggestionSet(exclude=[original])
        combined.extend(rule_suggestions)
        combined.extend(ai_suggestions)
        if combined:
            return combined.to_list()

        logger.info(
            "event=fallback_suggestions name=%s kind=%s", original, kind
        )
        return generate_fallback_suggestions(original, kind)

    async def _ai_suggestions(self, context: PromptContext) -> list[str]:
        if self._config.provider == SuggestionPolicy.AUTO:
            return await self._try_all_providers(context)
        return await self._try_single_provider(
            context, self._config.provider
        )

    async def _try_all_providers(self, context: PromptContext) -> list[str]:
        for name in PROVIDER_PRIORITY:
            provider = self._providers.get(name)
            if provider is None:
                continue
            if not await self._is_available(provider):
                continue
            suggestions = await self._ask(provider, context)
            if suggestions:
                return suggestions

        logger.info("event=no_ai_provider_succeeded policy=auto")
        return []

    async def _try_single_provider(
        self, context: PromptContext, name: str
    ) -> list[str]:
        provider = self._providers.get(name)  # type: ignore[call-overload]
        if provider is None:
            logger.warning("event=provider_not_configured provider=%s", name)
            return []
        if not await self._is_available(provider):
            logger.warning("event=provider_unavailable provider=%s", name)
            return []
        return await self._ask(provider, context)

    async def _is_available(self, provider: BaseAIProvider) -> bool:
        try:
            return await asyncio.wait_for(
                provider.is_available(),
                timeout=self._config.request_timeout_seconds,
            )
        except Exception:  # noqa: BLE001
            logger.debug(
                "event=availability_check_failed provider=%s",
                provider.key,
                exc_info=True,
            )
            return False

    async def _ask(
        self, provider: BaseAIProvider, context: PromptContext
    ) -> list[str]:
        """One bounded provider call; any failure means no suggestions."""
        logger.info("event=provider_attempt provider=%s", provider.key)
        try:
            response = await asyncio.wait_for(
                provider.get_suggestions(context),
                timeout=self._config.request_timeout_seconds,
            )
        except Exception:  # noqa: BLE001
            logger.debug(
                "event=provider_call_failed provider=%s",
                provider.key,
                exc_info=True,
            )
            return []

        if response.suggestions:
            logger.info(
                "event=provider_succeeded provider=%s count=%d",
                response.provider or provider.key,
                len(response.suggestions),
            )
        return list(response.suggestions)


def generate_fallback_suggestions(
    original: str, kind: IdentifierKind | str
) -> list[str]:
    """Deterministic last line of defense; never returns an empty list."""
    suggestions = SuggestionSet(exclude=[original])
    if is_function_kind(kind):
        suggestions.add(f"process{capitalize(original)}")
        suggestions.add(f"handle{capitalize(original)}")
        if _EVENT_NAME_RE.search(original):
            suggestions.add(f"on{capitalize(original)}")
        if original.startswith("get"):
            rest = original[len("get"):]
            suggestions.add(f"fetch{rest}")
            suggestions.add(f"retrieve{rest}")
    else:
        suggestions.add(f"{original}Value")
        suggestions.add(f"{original}Data")
        if len(original) <= _VERY_SHORT_LEN:
            suggestions.add(f"{original}Item")
            suggestions.add(f"{original}Element")

    if not suggestions:
        suggestions.add(f"improved{capitalize(original)}")
        suggestions.add(f"better{capitalize(original)}")
    return suggestions.to_list()
