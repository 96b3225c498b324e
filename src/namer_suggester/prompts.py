"""LLM prompts for name suggestions.

All prompt text lives here so every provider asks the same question
and the comma-separated answer format stays in one place.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from namer_suggester.providers.schemas import PromptContext

DEFAULT_LANGUAGE_LABEL = "JavaScript/TypeScript"
NOT_AVAILABLE = "not available"

NAMING_SYSTEM_PROMPT = (
    "You are an expert in naming things in source code. "
    "Reply only with the suggested names separated by commas, "
    "without explanations."
)


def _domain_label(context: PromptContext) -> str:
    domain = str(context.file_context.domain)
    return domain or DEFAULT_LANGUAGE_LABEL


def build_naming_prompt(context: PromptContext) -> str:
    """Full prompt used by the HTTP-backed providers."""
    domain = _domain_label(context)
    imports = ", ".join(context.file_context.imports) or NOT_AVAILABLE
    return (
        f"You are an expert in code naming conventions for {domain} code.\n"
        f"Give me 3 to 5 better names for a {context.kind} "
        f'called "{context.original}"\n'
        f"in a {domain} {DEFAULT_LANGUAGE_LABEL} file.\n"
        f"Additional context: {context.context or NOT_AVAILABLE}.\n"
        f"File imports: {imports}.\n"
        "Reply ONLY with the alternative names separated by commas, "
        "without explanations."
    )


def build_cli_prompt(context: PromptContext) -> str:
    """Single-line prompt for the Copilot CLI, which reads stdin."""
    return (
        f"Suggest 3 better names for a {context.kind} "
        f'called "{context.original}" in a {_domain_label(context)} '
        f"{DEFAULT_LANGUAGE_LABEL} file. "
        f"Context: {context.context or NOT_AVAILABLE}. "
        "Reply only with the names separated by commas, "
        "without additional explanations."
    )
