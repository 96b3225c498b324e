"""Extract nameable identifiers from JavaScript/TypeScript via tree-sitter."""

from __future__ import annotations

import importlib
import logging
from collections.abc import Iterator
from pathlib import Path

import tree_sitter

from namer_suggester.analysis.context import extract_file_context
from namer_suggester.analysis.schemas import AnalysisResult, Identifier
from namer_suggester.config import EXTENSION_MAP, GRAMMAR_MODULES
from namer_suggester.constants import IdentifierKind

logger = logging.getLogger(__name__)

_FUNCTION_DECLARATIONS = frozenset({
    "function_declaration",
    "generator_function_declaration",
})
_FIELD_DEFINITIONS = frozenset({
    "field_definition",  # javascript
    "public_field_definition",  # typescript
})
_DECLARATION_PARENTS = frozenset({
    "lexical_declaration",
    "variable_declaration",
})
_ARROW_FUNCTION = "arrow_function"


def analyze_file(path: Path) -> AnalysisResult:
    """Read a source file and return its identifiers and file context.

    Unreadable files and unsupported extensions produce an empty
    result with a ``general`` file context (graceful degradation).
    """
    language = EXTENSION_MAP.get(path.suffix.lower())
    if language is None:
        return AnalysisResult()
    try:
        code = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError):
        logger.warning("event=file_read_failed path=%s", path, exc_info=True)
        return AnalysisResult()

    return AnalysisResult(
        identifiers=extract_identifiers(code, language),
        file_context=extract_file_context(code),
    )


def extract_identifiers(code: str, language: str) -> list[Identifier]:
    """Return every named declaration in *code*, in source order."""
    parser = _get_parser(language)
    if parser is None:
        logger.warning("event=grammar_unavailable language=%s", language)
        return []

    tree = parser.parse(code.encode("utf-8"))
    identifiers: list[Identifier] = []
    for node in _walk(tree.root_node):
        identifier = _to_identifier(node)
        if identifier is not None:
            identifiers.append(identifier)
    return identifiers


def _walk(root: tree_sitter.Node) -> Iterator[tree_sitter.Node]:
    """Pre-order traversal without recursion."""
    stack = [root]
    while stack:
        node = stack.pop()
        yield node
        stack.extend(reversed(node.children))


def _to_identifier(node: tree_sitter.Node) -> Identifier | None:
    """Map one syntax node to an Identifier, or None if not a declaration."""
    kind: IdentifierKind | None = None
    name_node: tree_sitter.Node | None = None

    if node.type in _FUNCTION_DECLARATIONS:
        kind = IdentifierKind.FUNCTION
        name_node = node.child_by_field_name("name")
    elif node.type == "variable_declarator":
        value = node.child_by_field_name("value")
        is_arrow = value is not None and value.type == _ARROW_FUNCTION
        kind = (
            IdentifierKind.ARROW_FUNCTION if is_arrow
            else IdentifierKind.VARIABLE
        )
        name_node = node.child_by_field_name("name")
        if name_node is not None and name_node.type != "identifier":
            return None  # destructuring patterns have no single name
    elif node.type == "method_definition":
        parent = node.parent
        kind = (
            IdentifierKind.OBJECT_METHOD
            if parent is not None and parent.type == "object"
            else IdentifierKind.METHOD
        )
        name_node = node.child_by_field_name("name")
    elif node.type in _FIELD_DEFINITIONS:
        kind = IdentifierKind.PROPERTY
        name_node = node.child_by_field_name(
            "property"
        ) or node.child_by_field_name("name")

    if kind is None or name_node is None:
        return None
    if name_node.type not in (
        "identifier", "property_identifier", "type_identifier"
    ):
        return None  # computed keys, string keys, #private names

    name = _text(name_node)
    if not name:
        return None

    return Identifier(
        name=name,
        kind=kind,
        context=_leading_comments(node),
        line=node.start_point[0] + 1,
    )


def _comment_anchor(node: tree_sitter.Node) -> tree_sitter.Node:
    """The statement node whose preceding siblings hold the doc comments."""
    anchor = node
    parent = anchor.parent
    if anchor.type == "variable_declarator" and parent is not None:
        if parent.type in _DECLARATION_PARENTS:
            anchor = parent
            parent = anchor.parent
    if parent is not None and parent.type == "export_statement":
        anchor = parent
    return anchor


def _leading_comments(node: tree_sitter.Node) -> str:
    """Join the comments immediately preceding a declaration."""
    comments: list[str] = []
    prev = _comment_anchor(node).prev_sibling
    while prev is not None and prev.type == "comment":
        comments.append(_comment_value(_text(prev)))
        prev = prev.prev_sibling
    return "\n".join(reversed(comments))


def _comment_value(raw: str) -> str:
    """Strip ``//`` or ``/* */`` delimiters from a comment."""
    if raw.startswith("//"):
        return raw[2:].strip()
    if raw.startswith("/*"):
        return raw[2:].removesuffix("*/").strip("* \n\t")
    return raw.strip()


def _text(node: tree_sitter.Node) -> str:
    return node.text.decode("utf-8") if node.text else ""


# ---------------------------------------------------------------------------
# Parser cache
# ---------------------------------------------------------------------------

_parser_cache: dict[str, tree_sitter.Parser] = {}


def _get_parser(language: str) -> tree_sitter.Parser | None:
    """Get or create a cached tree-sitter parser."""
    if language in _parser_cache:
        return _parser_cache[language]

    grammar = GRAMMAR_MODULES.get(language)
    if grammar is None:
        return None

    module_name, factory = grammar
    try:
        mod = importlib.import_module(module_name)
        capsule: object = getattr(mod, factory)()
        lang = tree_sitter.Language(capsule)
        parser = tree_sitter.Parser(lang)
        _parser_cache[language] = parser
        return parser
    except (ImportError, AttributeError):
        return None
