"""Tests for the shared provider behavior and prompt construction."""

from __future__ import annotations

import logging

import pytest

from namer_suggester.analysis.schemas import FileContext
from namer_suggester.constants import DomainTag, ProviderName
from namer_suggester.prompts import build_cli_prompt, build_naming_prompt
from namer_suggester.providers.base import BaseAIProvider
from namer_suggester.providers.schemas import PromptContext


class _EchoProvider(BaseAIProvider):
    key = ProviderName.OLLAMA
    label = "Echo"

    def __init__(
        self, answer: str | None = None, error: Exception | None = None
    ) -> None:
        self._answer = answer
        self._error = error

    async def is_available(self) -> bool:
        return True

    async def _complete(self, context: PromptContext) -> str | None:
        if self._error is not None:
            raise self._error
        return self._answer


def _context(original: str = "data") -> PromptContext:
    return PromptContext(original=original, kind="variable")


class TestProcessSuggestions:
    def test_splits_and_trims(self) -> None:
        assert BaseAIProvider.process_suggestions(
            " userList ,items,  records ", "data"
        ) == ["userList", "items", "records"]

    def test_drops_empty_original_and_multiword(self) -> None:
        assert BaseAIProvider.process_suggestions(
            "a,, data ,user list,b", "data"
        ) == ["a", "b"]

    def test_collapses_duplicates(self) -> None:
        assert BaseAIProvider.process_suggestions(
            "a, b, a", "x"
        ) == ["a", "b"]

    def test_blank_answer(self) -> None:
        assert BaseAIProvider.process_suggestions("  ", "x") == []


class TestGetSuggestions:
    async def test_labels_response(self) -> None:
        response = await _EchoProvider("rows, entries").get_suggestions(
            _context()
        )
        assert response.suggestions == ["rows", "entries"]
        assert response.provider == "Echo"

    async def test_empty_answer(self) -> None:
        response = await _EchoProvider(None).get_suggestions(_context())
        assert response.suggestions == []
        assert response.provider is None

    async def test_errors_are_absorbed_and_classified(
        self, caplog: pytest.LogCaptureFixture
    ) -> None:
        provider = _EchoProvider(error=KeyError("response"))
        with caplog.at_level(
            logging.DEBUG, logger="namer_suggester.providers.base"
        ):
            response = await provider.get_suggestions(_context())
        assert response.suggestions == []
        assert "event=provider_failed" in caplog.text
        assert "error_class=malformed" in caplog.text
        assert "retryable=False" in caplog.text


class TestPrompts:
    def test_naming_prompt_includes_context(self) -> None:
        context = PromptContext(
            original="handleClick",
            kind="function",
            context="Submits the form",
            file_context=FileContext(
                domain=DomainTag.REACT_COMPONENT,
                imports=("react", "./api"),
            ),
        )
        prompt = build_naming_prompt(context)
        assert '"handleClick"' in prompt
        assert "react-component" in prompt
        assert "Submits the form" in prompt
        assert "react, ./api" in prompt
        assert "separated by commas" in prompt

    def test_missing_context_is_marked(self) -> None:
        prompt = build_naming_prompt(_context("x"))
        assert "Additional context: not available." in prompt
        assert "File imports: not available." in prompt

    def test_cli_prompt_is_single_line(self) -> None:
        prompt = build_cli_prompt(_context("tmp"))
        assert "\n" not in prompt
        assert '"tmp"' in prompt
