"""Source analysis — identifiers via tree-sitter, file context via regex."""

from namer_suggester.analysis.schemas import (
    AnalysisResult,
    FileContext,
    Identifier,
)

__all__ = ["AnalysisResult", "FileContext", "Identifier"]
