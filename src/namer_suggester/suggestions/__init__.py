"""Suggestion generation — rule engine plus AI orchestration."""

from namer_suggester.suggestions.orchestrator import (
    SuggestionOrchestrator,
    generate_fallback_suggestions,
)
from namer_suggester.suggestions.rules import suggest_names
from namer_suggester.suggestions.suggestion_set import SuggestionSet

__all__ = [
    "SuggestionOrchestrator",
    "SuggestionSet",
    "generate_fallback_suggestions",
    "suggest_names",
]
