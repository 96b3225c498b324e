"""Review session: analyze files, resolve suggestions, record decisions.

Identifiers are handled strictly one at a time: suggestions for an
identifier are fully resolved (rules, AI, fallback) and a decision is
recorded before the next identifier starts.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass
from pathlib import Path

from namer_suggester.analysis.identifiers import analyze_file
from namer_suggester.analysis.schemas import (
    AnalysisResult,
    FileContext,
    Identifier,
)
from namer_suggester.logger import SuggestionLogEntry, SuggestionLogger
from namer_suggester.suggestions.orchestrator import SuggestionOrchestrator

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ReviewEvent:
    """Progress event emitted before and after each file."""

    file_path: Path
    completed: int
    total: int
    identifiers: int | None = None  # known once the file is analyzed

    @property
    def percent(self) -> float:
        return 100.0 * self.completed / self.total if self.total else 100.0


@dataclass
class ReviewStats:
    total_files: int = 0
    total_items: int = 0
    changed_items: int = 0


type ChooseCallback = Callable[[Identifier, list[str]], str]
type FileAnalyzer = Callable[[Path], AnalysisResult]
type ProgressCallback = Callable[[ReviewEvent], None]


def keep_first_suggestion(identifier: Identifier, suggestions: list[str]) -> str:
    """Non-interactive chooser: accept the top suggestion."""
    return suggestions[0] if suggestions else identifier.name


async def review_files(
    files: list[Path],
    orchestrator: SuggestionOrchestrator,
    choose: ChooseCallback = keep_first_suggestion,
    suggestion_logger: SuggestionLogger | None = None,
    on_progress: ProgressCallback | None = None,
    analyze: FileAnalyzer = analyze_file,
) -> ReviewStats:
    """Run a review over *files* and return aggregate statistics.

    *choose* receives the identifier and its suggestions and returns the
    selected name; returning the original name means "keep it".
    """
    stats = ReviewStats(total_files=len(files))
    for index, path in enumerate(files):
        if on_progress:
            on_progress(ReviewEvent(path, index, len(files)))

        result = analyze(path)
        stats.total_items += len(result.identifiers)
        if not result.identifiers:
            logger.info("event=no_identifiers path=%s", path)

        for identifier in result.identifiers:
            changed = await _review_identifier(
                path,
                identifier,
                result.file_context,
                orchestrator,
                choose,
                suggestion_logger,
            )
            if changed:
                stats.changed_items += 1

        if on_progress:
            on_progress(
                ReviewEvent(
                    path, index + 1, len(files), len(result.identifiers)
                )
            )
    return stats


async def _review_identifier(
    path: Path,
    identifier: Identifier,
    file_context: FileContext,
    orchestrator: SuggestionOrchestrator,
    choose: ChooseCallback,
    suggestion_logger: SuggestionLogger | None,
) -> bool:
    """Resolve, choose and log one identifier; True if it was renamed."""
    suggestions = await orchestrator.get_suggestions(
        identifier.name,
        identifier.kind,
        identifier.context,
        file_context,
    )
    try:
        selected = choose(identifier, suggestions)
    except EOFError:
        raise
    except Exception:
        logger.exception(
            "event=choose_failed path=%s name=%s", path, identifier.name
        )
        return False

    entry = SuggestionLogEntry(
        file_path=path,
        identifier=identifier,
        suggestions=suggestions,
        selected=selected,
        file_context=file_context,
    )
    if suggestion_logger is not None:
        suggestion_logger.record(entry)
    return entry.changed
