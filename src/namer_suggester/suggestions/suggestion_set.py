"""Insertion-ordered, duplicate-free collection of candidate names."""

from __future__ import annotations

from collections.abc import Iterable, Iterator


class SuggestionSet:
    """Ordered list plus a membership set; only unseen names are appended.

    Comparison is case-sensitive. Names listed in *exclude* are never
    stored, so the identifier being renamed cannot come back as its
    own suggestion.
    """

    def __init__(self, exclude: Iterable[str] = ()) -> None:
        self._items: list[str] = []
        self._seen: set[str] = set(exclude)

    def add(self, name: str) -> None:
        if name and name not in self._seen:
            self._seen.add(name)
            self._items.append(name)

    def extend(self, names: Iterable[str]) -> None:
        for name in names:
            self.add(name)

    def to_list(self) -> list[str]:
        return list(self._items)

    def __contains__(self, name: object) -> bool:
        return name in self._items

    def __iter__(self) -> Iterator[str]:
        return iter(self._items)

    def __len__(self) -> int:
        return len(self._items)
