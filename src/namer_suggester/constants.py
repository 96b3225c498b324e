"""Shared constants — single source of truth for cross-module values.

StrEnum members are str-compatible, so identifier kinds and domain tags
can be compared against plain strings coming from config files or logs.
"""

from __future__ import annotations

from enum import StrEnum
from typing import Literal

# ── String Enums ─────────────────────────────────────────


class IdentifierKind(StrEnum):
    """Syntactic category of an extracted identifier."""

    FUNCTION = "function"
    ARROW_FUNCTION = "arrow-function"
    METHOD = "method"
    OBJECT_METHOD = "object-method"
    VARIABLE = "variable"
    PROPERTY = "property"


class DomainTag(StrEnum):
    """Coarse classification of a file's purpose."""

    REACT_COMPONENT = "react-component"
    REACT_HOOKS = "react-hooks"
    TESTING = "testing"
    API = "api"
    GENERAL = "general"


class ProviderName(StrEnum):
    """AI backends capable of generating name suggestions."""

    COPILOT = "copilot"
    OPENAI = "openai"
    ANTHROPIC = "anthropic"
    GEMINI = "gemini"
    OLLAMA = "ollama"


class SuggestionPolicy(StrEnum):
    """Policies that are not a single provider name."""

    AUTO = "auto"
    RULES = "rules"


# Value accepted for AIConfig.provider: a policy or one provider name
ProviderSetting = Literal[
    "auto", "rules", "copilot", "openai", "anthropic", "gemini", "ollama"
]

FUNCTION_KINDS = frozenset({
    IdentifierKind.FUNCTION,
    IdentifierKind.ARROW_FUNCTION,
    IdentifierKind.METHOD,
    IdentifierKind.OBJECT_METHOD,
})

REACT_DOMAINS = frozenset({
    DomainTag.REACT_COMPONENT,
    DomainTag.REACT_HOOKS,
})

# Auto policy tries providers in exactly this order
PROVIDER_PRIORITY: tuple[ProviderName, ...] = (
    ProviderName.COPILOT,
    ProviderName.OPENAI,
    ProviderName.ANTHROPIC,
    ProviderName.GEMINI,
    ProviderName.OLLAMA,
)

# ── Provider Defaults ────────────────────────────────────

DEFAULT_OPENAI_MODEL = "gpt-4o-mini"
DEFAULT_ANTHROPIC_MODEL = "claude-3-5-haiku-latest"
DEFAULT_GEMINI_MODEL = "gemini-1.5-flash"
DEFAULT_OLLAMA_MODEL = "llama3"
DEFAULT_OLLAMA_ENDPOINT = "http://localhost:11434/api/generate"

# Only short comma-separated name lists are expected back
LLM_MAX_OUTPUT_TOKENS = 50
LLM_TEMPERATURE = 0.7

# ── Timeouts (seconds) ───────────────────────────────────

AI_REQUEST_TIMEOUT = 10.0
COPILOT_SUGGEST_TIMEOUT = 8.0
COPILOT_PROBE_TIMEOUT = 5.0
OLLAMA_PROBE_TIMEOUT = 3.0

# ── Circuit Breaker Configuration ────────────────────────

CB_LLM_FAILURE_THRESHOLD = 3
CB_LLM_RECOVERY_TIMEOUT = 60

# ── Retry Strategy ───────────────────────────────────────

RETRY_MAX_ATTEMPTS = 2
RETRY_INITIAL_WAIT = 1
RETRY_MAX_WAIT = 4

# ── Scanning ─────────────────────────────────────────────

SOURCE_EXTENSIONS = frozenset({".js", ".jsx", ".ts", ".tsx"})
MAX_SCAN_DEPTH = 10
LARGE_SCAN_THRESHOLD = 20

# ── Config / Log Locations ───────────────────────────────

PROJECT_CONFIG_FILENAME = ".ai-config.json"
GLOBAL_CONFIG_FILENAME = ".namer-suggester-ai-config.json"
SUGGESTION_LOG_FILENAME = "namer-suggester.log"
SUGGESTION_LOG_HEADER = "# Naming Suggestions Log\n\n"

ERROR_TRUNCATION_CHARS = 200
