"""Name search over board parts and nets."""

from __future__ import annotations

from enum import Enum, auto
from typing import Any, Iterable, Sequence


class SearchMode(Enum):
    """How a search string must match a name."""

    SUB = auto()
    PREFIX = auto()
    WHOLE = auto()


def _details(item: Any) -> Iterable[str]:
    method = getattr(item, "searchable_string_details", None)
    return method() if callable(method) else ()


class Searcher:
    """Case-insensitive search of part and net names.

    Items need a ``name`` attribute. When ``search_details`` is set, an item's
    ``searchable_string_details()`` strings are searched as well.
    """

    def __init__(self) -> None:
        self.mode = SearchMode.SUB
        self.search_details = False
        self._nets: list[Any] = []
        self._parts: list[Any] = []

    def set_nets(self, nets: Sequence[Any]) -> None:
        self._nets = list(nets)

    def set_parts(self, parts: Sequence[Any]) -> None:
        self._parts = list(parts)

    def is_mode(self, mode: SearchMode) -> bool:
        return self.mode == mode

    def set_mode(self, mode: SearchMode) -> None:
        self.mode = mode

    def _matches(self, haystack: str, needle: str) -> bool:
        found = haystack.lower().find(needle.lower())
        if found < 0:
            return False
        if self.mode is SearchMode.SUB:
            return True
        if self.mode is SearchMode.PREFIX:
            return found == 0
        return found == 0 and len(needle) == len(haystack)

    def _search(self, search: str, items: Sequence[Any], limit: int) -> list[Any]:
        results: list[Any] = []
        if not search:
            return results
        for item in items:
            match = self._matches(item.name, search)
            if self.search_details and not match:
                match = any(self._matches(detail, search) for detail in _details(item))
            if match:
                results.append(item)
                limit -= 1
            if limit == 0:
                return results
        return results

    def parts(self, search: str, limit: int = -1) -> list[Any]:
        """Return parts matching search, at most limit of them (-1: no limit)."""
        return self._search(search, self._parts, limit)

    def nets(self, search: str, limit: int = -1) -> list[Any]:
        """Return nets matching search, at most limit of them (-1: no limit)."""
        return self._search(search, self._nets, limit)