"""Markdown decision log: one block per reviewed identifier."""

from __future__ import annotations

import logging
from datetime import UTC, datetime
from pathlib import Path

from pydantic import BaseModel, Field

from namer_suggester.analysis.schemas import FileContext, Identifier
from namer_suggester.constants import (
    SUGGESTION_LOG_FILENAME,
    SUGGESTION_LOG_HEADER,
)

__all__ = ["SuggestionLogEntry", "SuggestionLogger", "format_entry"]

logger = logging.getLogger(__name__)


class SuggestionLogEntry(BaseModel):
    """What was proposed for an identifier and what the user picked."""

    file_path: Path
    identifier: Identifier
    suggestions: list[str]
    selected: str
    file_context: FileContext
    timestamp: datetime = Field(default_factory=lambda: datetime.now(UTC))

    @property
    def changed(self) -> bool:
        return self.selected != self.identifier.name


def format_entry(entry: SuggestionLogEntry) -> str:
    ident = entry.identifier
    suggestions = ", ".join(f"`{s}`" for s in entry.suggestions)
    return (
        f"\n## {entry.timestamp.isoformat()} - {entry.file_path.name}\n"
        f"- **File**: `{entry.file_path}`\n"
        f"- **Kind**: {ident.kind}\n"
        f"- **Line**: {ident.line if ident.line is not None else 'N/A'}\n"
        f"- **Original name**: `{ident.name}`\n"
        f"- **Context**: {entry.file_context.domain}\n"
        f"- **Suggestions**: {suggestions}\n"
        f"- **Selected**: `{entry.selected}`\n\n"
    )


class SuggestionLogger:
    """Append entries to the first writable log location.

    Defaults to ``./namer-suggester.log`` and then
    ``~/namer-suggester.log``; a new file starts with a header.
    """

    def __init__(self, log_paths: list[Path] | None = None) -> None:
        self._log_paths = log_paths or [
            Path.cwd() / SUGGESTION_LOG_FILENAME,
            Path.home() / SUGGESTION_LOG_FILENAME,
        ]
        self.last_written: Path | None = None

    @property
    def log_paths(self) -> list[Path]:
        return list(self._log_paths)

    def record(self, entry: SuggestionLogEntry) -> Path | None:
        """Write *entry*; return the file used, or None if all failed."""
        content = format_entry(entry)
        for path in self._log_paths:
            try:
                if not path.exists():
                    path.write_text(SUGGESTION_LOG_HEADER, encoding="utf-8")
                with open(path, "a", encoding="utf-8") as f:
                    f.write(content)
            except OSError as exc:
                logger.debug(
                    "event=suggestion_log_write_failed path=%s error=%s",
                    path,
                    exc,
                )
                continue
            self.last_written = path
            return path

        logger.error(
            "event=suggestion_log_unavailable name=%s suggestions=%s",
            entry.identifier.name,
            ", ".join(entry.suggestions),
        )
        return None
