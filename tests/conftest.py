"""Shared test fixtures — isolated environment, fresh circuit breakers."""

from __future__ import annotations

from pathlib import Path
from typing import Any

import pytest
from circuitbreaker import CircuitBreakerMonitor
from tenacity import wait_none

from namer_suggester.analysis.schemas import FileContext
from namer_suggester.constants import DomainTag
from namer_suggester.providers._llm_call import (
    _breaker_registry,
    guarded_llm_call,
)

FIXTURES_DIR = Path(__file__).parent / "fixtures"

# Environment variables read by Settings; cleared so a developer's
# shell never leaks real keys or a non-default policy into tests.
_SETTINGS_ENV = (
    "AI_PROVIDER",
    "OPENAI_API_KEY",
    "OPENAI_MODEL",
    "ANTHROPIC_API_KEY",
    "ANTHROPIC_MODEL",
    "GEMINI_API_KEY",
    "GEMINI_MODEL",
    "OLLAMA_ENDPOINT",
    "OLLAMA_MODEL",
    "AI_REQUEST_TIMEOUT_SECONDS",
    "LOG_LEVEL",
    "SUGGESTION_LOG_FILE",
    "MAX_SCAN_DEPTH",
    "SKIP_DIRECTORIES",
)


@pytest.fixture(autouse=True)
def _isolated_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in _SETTINGS_ENV:
        monkeypatch.delenv(name, raising=False)


@pytest.fixture(autouse=True)
def _reset_breakers() -> None:
    """Reset circuit breakers between tests."""
    _breaker_registry.clear()
    for cb in CircuitBreakerMonitor.get_circuits():
        cb.reset()  # type: ignore[union-attr]


@pytest.fixture(autouse=True)
def _disable_retry_wait() -> Any:
    """Disable tenacity wait time for fast tests."""
    original_wait = guarded_llm_call.retry.wait  # type: ignore[union-attr]
    guarded_llm_call.retry.wait = wait_none()  # type: ignore[union-attr]
    yield
    guarded_llm_call.retry.wait = original_wait  # type: ignore[union-attr]


@pytest.fixture
def fixtures_dir() -> Path:
    return FIXTURES_DIR


@pytest.fixture
def react_context() -> FileContext:
    return FileContext(domain=DomainTag.REACT_COMPONENT, imports=("react",))


@pytest.fixture
def testing_context() -> FileContext:
    return FileContext(domain=DomainTag.TESTING)
