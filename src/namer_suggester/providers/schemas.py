"""Pydantic models exchanged with AI providers."""

from pydantic import BaseModel, ConfigDict, Field

from namer_suggester.analysis.schemas import FileContext
from namer_suggester.constants import IdentifierKind


class PromptContext(BaseModel):
    """Everything a provider needs to suggest names for one identifier."""

    model_config = ConfigDict(frozen=True)

    original: str
    kind: IdentifierKind | str
    context: str = ""
    file_context: FileContext = Field(default_factory=FileContext)


class ProviderResponse(BaseModel):
    """Normalized provider output; an empty list means "nothing usable"."""

    suggestions: list[str] = Field(default_factory=lambda: list[str]())
    provider: str | None = None
