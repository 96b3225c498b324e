"""Pydantic models for the analysis data flow."""

from pydantic import BaseModel, ConfigDict, Field

from namer_suggester.constants import DomainTag, IdentifierKind


class Identifier(BaseModel):
    """A named declaration extracted from a source file."""

    model_config = ConfigDict(frozen=True)

    name: str
    kind: IdentifierKind
    context: str = ""  # leading comment text, if any
    line: int | None = None


class FileContext(BaseModel):
    """Per-file facts shared by every identifier in the file."""

    model_config = ConfigDict(frozen=True)

    domain: DomainTag = DomainTag.GENERAL
    imports: tuple[str, ...] = ()
    header_comments: str = ""


class AnalysisResult(BaseModel):
    """Output of analyze_file — identifiers plus their file context."""

    identifiers: list[Identifier] = Field(
        default_factory=lambda: list[Identifier]()
    )
    file_context: FileContext = Field(default_factory=FileContext)
