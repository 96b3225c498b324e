"""Exception types raised above the suggestion core."""

from __future__ import annotations


class NamerSuggesterError(Exception):
    """Base class for namer-suggester specific errors."""


class ConfigError(NamerSuggesterError):
    """Raised when AI configuration cannot be parsed or saved."""
