"""Tests for the markdown suggestion decision log."""

from __future__ import annotations

import logging
from datetime import UTC, datetime
from pathlib import Path

import pytest

from namer_suggester.analysis.schemas import FileContext, Identifier
from namer_suggester.constants import (
    SUGGESTION_LOG_HEADER,
    DomainTag,
    IdentifierKind,
)
from namer_suggester.logger import (
    SuggestionLogEntry,
    SuggestionLogger,
    format_entry,
)


def _entry(
    selected: str = "onClick", line: int | None = 12
) -> SuggestionLogEntry:
    return SuggestionLogEntry(
        file_path=Path("/repo/src/Button.jsx"),
        identifier=Identifier(
            name="handleClick", kind=IdentifierKind.ARROW_FUNCTION, line=line
        ),
        suggestions=["onClick", "handleClickHandler"],
        selected=selected,
        file_context=FileContext(domain=DomainTag.REACT_COMPONENT),
        timestamp=datetime(2024, 5, 1, 12, 30, tzinfo=UTC),
    )


class TestFormatEntry:
    def test_markdown_block(self) -> None:
        text = format_entry(_entry())
        assert text.startswith(
            "\n## 2024-05-01T12:30:00+00:00 - Button.jsx\n"
        )
        assert "- **File**: `/repo/src/Button.jsx`\n" in text
        assert "- **Kind**: arrow-function\n" in text
        assert "- **Line**: 12\n" in text
        assert "- **Original name**: `handleClick`\n" in text
        assert "- **Context**: react-component\n" in text
        assert (
            "- **Suggestions**: `onClick`, `handleClickHandler`\n" in text
        )
        assert text.endswith("- **Selected**: `onClick`\n\n")

    def test_unknown_line(self) -> None:
        assert "- **Line**: N/A\n" in format_entry(_entry(line=None))


class TestChanged:
    def test_changed_when_a_suggestion_is_selected(self) -> None:
        assert _entry("onClick").changed

    def test_unchanged_when_original_kept(self) -> None:
        assert not _entry("handleClick").changed


class TestSuggestionLogger:
    def test_new_file_gets_header(self, tmp_path: Path) -> None:
        path = tmp_path / "namer.log"
        used = SuggestionLogger([path]).record(_entry())
        assert used == path
        content = path.read_text(encoding="utf-8")
        assert content.startswith(SUGGESTION_LOG_HEADER)
        assert content.count("## ") == 1

    def test_entries_are_appended(self, tmp_path: Path) -> None:
        path = tmp_path / "namer.log"
        logger = SuggestionLogger([path])
        logger.record(_entry())
        logger.record(_entry("handleClick"))
        content = path.read_text(encoding="utf-8")
        assert content.count(SUGGESTION_LOG_HEADER) == 1
        assert content.count("- **Original name**") == 2

    def test_falls_back_to_next_location(self, tmp_path: Path) -> None:
        unwritable = tmp_path / "missing-dir" / "namer.log"
        fallback = tmp_path / "namer.log"
        logger = SuggestionLogger([unwritable, fallback])
        assert logger.last_written is None
        used = logger.record(_entry())
        assert used == fallback
        assert logger.last_written == fallback
        assert fallback.exists()

    def test_all_locations_fail(
        self, tmp_path: Path, caplog: pytest.LogCaptureFixture
    ) -> None:
        unwritable = tmp_path / "missing-dir" / "namer.log"
        with caplog.at_level(logging.ERROR, logger="namer_suggester.logger"):
            used = SuggestionLogger([unwritable]).record(_entry())
        assert used is None
        assert "suggestion_log_unavailable" in caplog.text
        assert "handleClick" in caplog.text

    def test_default_locations(self) -> None:
        paths = SuggestionLogger().log_paths
        assert [p.name for p in paths] == [
            "namer-suggester.log",
            "namer-suggester.log",
        ]
        assert paths[0].parent == Path.cwd()
        assert paths[1].parent == Path.home()
