"""Tests for two-phase singleton logging configuration."""

from __future__ import annotations

import logging
import os
from collections.abc import Iterator
from unittest.mock import patch

import pytest

from namer_suggester.logging_config import (
    _SUPPRESSED_LOGGERS,
    LOG_DATEFMT,
    LOG_FORMAT,
    cleanup_third_party_handlers,
    set_level,
    setup_logging,
)


@pytest.fixture(autouse=True)
def _reset_flags() -> None:
    """Reset singleton flags before each test."""
    import namer_suggester.logging_config as mod

    mod._phase1_done = False
    mod._phase2_done = False


@pytest.fixture
def _restore_root_level() -> Iterator[None]:
    root = logging.getLogger()
    original = root.level
    yield
    root.setLevel(original)


def test_setup_logging_is_idempotent() -> None:
    """Phase 1 executes once even when called twice."""
    with patch(
        "namer_suggester.logging_config.logging.basicConfig"
    ) as mock_bc:
        setup_logging()
        setup_logging()
        mock_bc.assert_called_once()


def test_setup_logging_uses_shared_format() -> None:
    with patch(
        "namer_suggester.logging_config.logging.basicConfig"
    ) as mock_bc:
        setup_logging("info")
    kwargs = mock_bc.call_args.kwargs
    assert kwargs["level"] == logging.INFO
    assert kwargs["format"] == LOG_FORMAT
    assert kwargs["datefmt"] == LOG_DATEFMT


def test_litellm_log_env_var_set(monkeypatch: pytest.MonkeyPatch) -> None:
    """Phase 1 sets LITELLM_LOG=WARNING before litellm import."""
    monkeypatch.delenv("LITELLM_LOG", raising=False)
    setup_logging()
    assert os.environ.get("LITELLM_LOG") == "WARNING"


def test_litellm_log_env_var_preserves_existing(
    monkeypatch: pytest.MonkeyPatch,
) -> None:
    """Phase 1 uses setdefault and keeps a user-set value."""
    monkeypatch.setenv("LITELLM_LOG", "ERROR")
    setup_logging()
    assert os.environ["LITELLM_LOG"] == "ERROR"


def test_suppressed_loggers_at_warning() -> None:
    setup_logging()
    for name in _SUPPRESSED_LOGGERS:
        assert logging.getLogger(name).level == logging.WARNING


def test_cleanup_clears_handlers_once() -> None:
    lg = logging.getLogger("LiteLLM")
    lg.addHandler(logging.StreamHandler())
    lg.propagate = False

    cleanup_third_party_handlers()
    assert lg.handlers == []
    assert lg.propagate is True

    lg.addHandler(logging.NullHandler())
    cleanup_third_party_handlers()  # second call is a no-op
    assert len(lg.handlers) == 1
    lg.handlers.clear()


@pytest.mark.usefixtures("_restore_root_level")
def test_set_level() -> None:
    set_level("debug")
    assert logging.getLogger().level == logging.DEBUG
    set_level("not-a-level")
    assert logging.getLogger().level == logging.WARNING
