"""Tests for the GitHub Copilot CLI provider."""

from __future__ import annotations

from unittest.mock import AsyncMock, patch

from namer_suggester.providers.copilot import CopilotProvider
from namer_suggester.providers.schemas import PromptContext


def _context() -> PromptContext:
    return PromptContext(original="handleClick", kind="function")


class TestAvailability:
    async def test_missing_executable_is_unavailable(self) -> None:
        provider = CopilotProvider(executable="gh-does-not-exist-xyz")
        assert await provider.is_available() is False

    async def test_zero_exit_is_available(self) -> None:
        provider = CopilotProvider()
        with patch.object(
            provider, "_run", new=AsyncMock(return_value=(0, "1.0.0"))
        ) as run:
            assert await provider.is_available() is True
        assert run.call_args.args[0] == ["copilot", "--version"]

    async def test_non_zero_exit_is_unavailable(self) -> None:
        provider = CopilotProvider()
        with patch.object(
            provider, "_run", new=AsyncMock(return_value=(1, ""))
        ):
            assert await provider.is_available() is False

    async def test_probe_timeout_is_unavailable(self) -> None:
        provider = CopilotProvider()
        with patch.object(
            provider, "_run", new=AsyncMock(side_effect=TimeoutError())
        ):
            assert await provider.is_available() is False


class TestSuggest:
    async def test_prompt_is_sent_on_stdin(self) -> None:
        provider = CopilotProvider()
        run = AsyncMock(return_value=(0, "onClick, clickHandler\n"))
        with patch.object(provider, "_run", new=run):
            response = await provider.get_suggestions(_context())

        assert response.suggestions == ["onClick", "clickHandler"]
        assert response.provider == "GitHub Copilot CLI"
        args, stdin_text, _ = run.call_args.args
        assert args == ["copilot", "suggest"]
        assert '"handleClick"' in stdin_text

    async def test_failed_command_yields_empty_response(self) -> None:
        provider = CopilotProvider()
        with patch.object(
            provider, "_run", new=AsyncMock(return_value=(2, "boom"))
        ):
            response = await provider.get_suggestions(_context())
        assert response.suggestions == []

    async def test_timeout_yields_empty_response(self) -> None:
        provider = CopilotProvider()
        with patch.object(
            provider, "_run", new=AsyncMock(side_effect=TimeoutError())
        ):
            response = await provider.get_suggestions(_context())
        assert response.suggestions == []
