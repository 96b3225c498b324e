"""Derive a FileContext (domain tag, imports, header comment) from source text."""

from __future__ import annotations

import re

from namer_suggester.analysis.schemas import FileContext
from namer_suggester.constants import DomainTag

_HEADER_COMMENT_RE = re.compile(r"^(//.*|/\*[\s\S]*?\*/)\s*$", re.MULTILINE)
_IMPORT_RE = re.compile(r"""import\s+.*?\s+from\s+['"](.+?)['"]""")

_REACT_COMPONENT_RES = (
    re.compile(r"function\s+[A-Z][a-zA-Z]*\s*\("),
    re.compile(r"const\s+[A-Z][a-zA-Z]*\s*=\s*\(?"),
)
_REACT_HOOKS = ("useState", "useEffect", "useContext", "useReducer")
_TEST_MARKERS = ("test(", "describe(")
_API_MARKERS = ("api", "fetch", "axios")


def extract_file_context(code: str) -> FileContext:
    """Build the :class:`FileContext` for one file's source code."""
    imports = extract_imports(code)
    return FileContext(
        domain=determine_domain(code),
        imports=tuple(imports),
        header_comments=extract_header_comment(code),
    )


def extract_header_comment(code: str) -> str:
    """Return the first line comment or block comment standing on its own."""
    match = _HEADER_COMMENT_RE.search(code)
    return match.group(0).strip() if match else ""


def extract_imports(code: str) -> list[str]:
    """Module paths of every ``import ... from '...'`` statement, in order."""
    return _IMPORT_RE.findall(code)


def determine_domain(code: str) -> DomainTag:
    """Classify the file; the first matching check wins."""
    if is_react_component(code):
        return DomainTag.REACT_COMPONENT
    if has_react_hooks(code):
        return DomainTag.REACT_HOOKS
    if is_test_file(code):
        return DomainTag.TESTING
    if is_api_code(code):
        return DomainTag.API
    return DomainTag.GENERAL


def is_react_component(code: str) -> bool:
    return any(p.search(code) for p in _REACT_COMPONENT_RES)


def has_react_hooks(code: str) -> bool:
    return any(hook in code for hook in _REACT_HOOKS)


def is_test_file(code: str) -> bool:
    return any(marker in code for marker in _TEST_MARKERS)


def is_api_code(code: str) -> bool:
    return any(marker in code for marker in _API_MARKERS)
