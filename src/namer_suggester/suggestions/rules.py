"""Rule-based naming heuristics.

Deterministic and total: every heuristic group is evaluated against the
original name, matches are unioned in group order, and the original name
is never part of the result. No I/O, no external dependencies.

Group order (also the presentation order):

1. function-like heuristics (event verbs, accessors, mutators, resource
   fetches, validation, initialization)
2. variable-like heuristics (data holders, counters, flags, short names)
3. React augmentation, for ``react-component`` / ``react-hooks`` files
4. testing augmentation, for ``testing`` files
5. generic short-name augmentation, always
"""

from __future__ import annotations

import re

from namer_suggester.analysis.schemas import FileContext
from namer_suggester.constants import (
    FUNCTION_KINDS,
    REACT_DOMAINS,
    DomainTag,
    IdentifierKind,
)
from namer_suggester.suggestions.suggestion_set import SuggestionSet

_EVENT_VERB_RE = re.compile(r"handle|process|execute", re.IGNORECASE)
_HANDLE_RE = re.compile(r"handle", re.IGNORECASE)
_PROCESS_RE = re.compile(r"process", re.IGNORECASE)
_EXECUTE_RE = re.compile(r"execute", re.IGNORECASE)
_RESOURCE_FETCH_RE = re.compile(r"api|fetch|load|request", re.IGNORECASE)
_RESOURCE_STRIP_RE = re.compile(r"fetch|get|load|request|api", re.IGNORECASE)
_VALIDATION_RE = re.compile(r"check|validate|verify", re.IGNORECASE)
_INITIALIZATION_RE = re.compile(r"init|start|begin", re.IGNORECASE)
# "initialize" is consumed whole so it is not expanded twice
_INITIALIZATION_SWAP_RE = re.compile(r"init(?:ialize)?|start|begin", re.IGNORECASE)

_DATA_HOLDER_RE = re.compile(r"data|info|payload", re.IGNORECASE)
_COLLECTION_RE = re.compile(r"s$|list$|array$", re.IGNORECASE)
_COUNTER_RE = re.compile(r"count|index|num|i$|j$", re.IGNORECASE)
_FLAG_RE = re.compile(r"is|has|should|can|flag", re.IGNORECASE)
_FLAG_PREFIX_RE = re.compile(r"^(is|has|should|can)")

_COMPONENT_RE = re.compile(r"^[A-Z]")
_UI_EVENT_RE = re.compile(r"click|change|submit|input", re.IGNORECASE)
_STATE_RE = re.compile(r"state|status|value|data", re.IGNORECASE)
_TEST_NAME_RE = re.compile(r"test|spec|should", re.IGNORECASE)

_SHORT_NAME_EXEMPT = frozenset({"id", "i", "j"})
_COUNTER_MAX_LEN = 7
_SHORT_NAME_MAX_LEN = 4
_PREFIX_MIN_LEN = 5
_COMPONENT_MIN_LEN = 4


# ── String helpers ───────────────────────────────────────


def capitalize(name: str) -> str:
    """Upper-case the first character only (camelCase stays intact)."""
    return name[:1].upper() + name[1:]


def decapitalize(name: str) -> str:
    return name[:1].lower() + name[1:]


def swap_token(name: str, pattern: re.Pattern[str], replacement: str) -> str:
    """Replace the first match of *pattern* in camelCase-aware fashion.

    A replacement landing mid-name is capitalized: ``doHandle`` with
    ``on`` becomes ``doOn``. Returns *name* unchanged when nothing matches.
    """
    match = pattern.search(name)
    if match is None:
        return name
    token = replacement if match.start() == 0 else capitalize(replacement)
    return name[: match.start()] + token + name[match.end():]


# ── Predicates ───────────────────────────────────────────


def is_function_kind(kind: IdentifierKind | str) -> bool:
    normalized = str(kind).lower()
    return normalized in FUNCTION_KINDS or "function" in normalized


def is_event_verb(name: str) -> bool:
    return _EVENT_VERB_RE.search(name) is not None


def is_accessor(name: str) -> bool:
    return name.startswith("get") and len(name) > _PREFIX_MIN_LEN


def is_mutator(name: str) -> bool:
    return name.startswith("set") and len(name) > _PREFIX_MIN_LEN


def is_resource_fetch(name: str) -> bool:
    return _RESOURCE_FETCH_RE.search(name) is not None


def is_validation(name: str) -> bool:
    return _VALIDATION_RE.search(name) is not None


def is_initialization(name: str) -> bool:
    return _INITIALIZATION_RE.search(name) is not None


def is_data_holder(name: str) -> bool:
    return _DATA_HOLDER_RE.search(name) is not None


def is_collection(name: str) -> bool:
    return _COLLECTION_RE.search(name) is not None


def is_counter(name: str) -> bool:
    return (
        _COUNTER_RE.search(name) is not None
        and len(name) < _COUNTER_MAX_LEN
    )


def is_flag_like(name: str) -> bool:
    return _FLAG_RE.search(name) is not None


def has_flag_prefix(name: str) -> bool:
    return _FLAG_PREFIX_RE.match(name) is not None


def is_short_name(name: str) -> bool:
    return len(name) < _SHORT_NAME_MAX_LEN and name not in _SHORT_NAME_EXEMPT


def is_component_name(name: str) -> bool:
    return _COMPONENT_RE.match(name) is not None


def is_ui_event(name: str) -> bool:
    return _UI_EVENT_RE.search(name) is not None


def is_state_like(name: str) -> bool:
    return _STATE_RE.search(name) is not None


def is_test_name(name: str) -> bool:
    return _TEST_NAME_RE.search(name) is not None


def is_react_domain(file_context: FileContext | None) -> bool:
    return file_context is not None and file_context.domain in REACT_DOMAINS


def is_testing_domain(file_context: FileContext | None) -> bool:
    return (
        file_context is not None
        and file_context.domain == DomainTag.TESTING
    )


# ── Public entry point ───────────────────────────────────


def suggest_names(
    original: str,
    kind: IdentifierKind | str = "",
    item_context: str = "",
    file_context: FileContext | None = None,
) -> list[str]:
    """Return rule-based name suggestions for one identifier.

    *item_context* is accepted for parity with the AI providers; the
    heuristics only look at the name, the kind and the file's domain.
    """
    suggestions = SuggestionSet(exclude=[original])
    function_like = is_function_kind(kind)

    if function_like:
        _add_function_suggestions(original, suggestions)
    else:
        _add_variable_suggestions(original, suggestions)

    if is_react_domain(file_context):
        _add_react_suggestions(original, function_like, suggestions)

    if is_testing_domain(file_context) and function_like:
        _add_testing_suggestions(original, suggestions)

    _add_short_name_suggestions(original, suggestions)
    return suggestions.to_list()


# ── Group 1: functions ───────────────────────────────────


def _add_function_suggestions(original: str, out: SuggestionSet) -> None:
    if is_event_verb(original):
        out.add(swap_token(original, _HANDLE_RE, "on"))
        out.add(swap_token(original, _PROCESS_RE, "transform"))
        out.add(swap_token(original, _EXECUTE_RE, "run"))
        if not original.endswith("Handler"):
            out.add(f"{original}Handler")

    if is_accessor(original):
        rest = original[len("get"):]
        out.add(f"retrieve{rest}")
        out.add(f"fetch{rest}")

    if is_mutator(original):
        rest = original[len("set"):]
        out.add(f"update{rest}")
        out.add(f"modify{rest}")

    if is_resource_fetch(original):
        resource = capitalize(_RESOURCE_STRIP_RE.sub("", original))
        if resource:
            out.add(f"fetch{resource}")
            out.add(f"load{resource}")
            out.add(f"retrieve{resource}")
        else:
            out.extend(("fetchData", "loadContent", "retrieveResources"))

    if is_validation(original):
        base = capitalize(_VALIDATION_RE.sub("", original, count=1))
        out.add(swap_token(original, _VALIDATION_RE, "validate"))
        out.add(f"is{base}Valid")
        out.add(f"ensure{base}Valid")

    if is_initialization(original):
        for verb in ("initialize", "setup", "create"):
            out.add(swap_token(original, _INITIALIZATION_SWAP_RE, verb))


# ── Group 2: variables ───────────────────────────────────


def _add_variable_suggestions(original: str, out: SuggestionSet) -> None:
    if is_data_holder(original):
        out.extend(("payload", "response", "result", "content"))
        if is_collection(original):
            out.extend(("items", "collection", "elements"))

    if is_counter(original):
        out.extend(("counter", "index", "position"))

    if is_flag_like(original) and not has_flag_prefix(original):
        out.add(f"is{capitalize(original)}")
        out.add(f"has{capitalize(original)}")

    _add_short_name_suggestions(original, out)


# ── Group 3: React ───────────────────────────────────────


def _add_react_suggestions(
    original: str, function_like: bool, out: SuggestionSet
) -> None:
    """Only the first applicable React branch contributes."""
    if is_component_name(original):
        if (
            not original.endswith("Component")
            and len(original) > _COMPONENT_MIN_LEN
        ):
            out.add(f"{original}Component")
    elif function_like and not original.startswith("use"):
        out.add(f"use{capitalize(original)}")
    elif (
        function_like
        and is_ui_event(original)
        and not original.startswith("handle")
    ):
        out.add(f"handle{capitalize(original)}")
        out.add(f"on{capitalize(original)}")
    elif not function_like and is_state_like(original):
        base = _STATE_RE.sub("", original, count=1)
        if base:
            out.add(decapitalize(base))
            out.add(f"{decapitalize(base)}State")
        else:
            out.extend(("value", "state", "data"))


# ── Group 4: tests ───────────────────────────────────────


def _add_testing_suggestions(original: str, out: SuggestionSet) -> None:
    if not is_test_name(original):
        return
    base = _TEST_NAME_RE.sub("", original)
    if base:
        out.add(f"should{capitalize(base)}")
        out.add(f"it{capitalize(base)}")


# ── Group 5: short names ─────────────────────────────────


def _add_short_name_suggestions(original: str, out: SuggestionSet) -> None:
    if is_short_name(original):
        out.add(f"{original}Value")
        out.add(f"temp{capitalize(original)}")
