"""Search over node display text, in plain or regex mode.

The text tested for every node is exactly what the tree renderer shows:
``"label": summary`` for children and just the summary for the root (see
``tree.nodes.display_text``).  Plain mode is a case-insensitive substring
test.  Regex mode compiles the query case-insensitively and silently falls
back to plain mode when the query is not a valid pattern.

Debouncing keystrokes is the presentation layer's job; this module only
answers "which nodes match this query".
"""

from __future__ import annotations

from dataclasses import dataclass

from json_field_picker.cache import PatternCache
from json_field_picker.paths import Path, path_key
from json_field_picker.traversal import iter_nodes
from json_field_picker.tree.nodes import JsonValue, display_text

__all__ = ["SearchMatch", "SearchMatcher", "search"]

# Shared by matchers that are not handed a cache explicitly
_default_patterns = PatternCache()


@dataclass(frozen=True, slots=True)
class SearchMatch:
    """A matching node: its path and the path key the renderer highlights."""

    path: Path
    display_key: str


class SearchMatcher:
    """Case-insensitive matcher for node display text.

    Args:
        query: Search text; surrounding whitespace is ignored.  An empty
            query matches nothing.
        regex: Treat ``query`` as a regular expression.
        patterns: Compiled-pattern cache; a module-wide one by default.
    """

    __slots__ = ("_needle", "_pattern", "query", "regex")

    def __init__(
        self,
        query: str,
        regex: bool = False,
        patterns: PatternCache | None = None,
    ) -> None:
        self.query = query.strip()
        self.regex = regex
        self._needle = self.query.lower()
        self._pattern = None
        if regex and self.query:
            cache = patterns if patterns is not None else _default_patterns
            self._pattern = cache.compile(self.query)

    @property
    def is_empty(self) -> bool:
        return not self.query

    @property
    def uses_regex(self) -> bool:
        """True when regex mode is on and the query compiled."""
        return self._pattern is not None

    def matches(self, text: str) -> bool:
        if self.is_empty:
            return False
        if self._pattern is not None:
            return self._pattern.search(text) is not None
        return self._needle in text.lower()

    def scan(self, value: JsonValue) -> list[SearchMatch]:
        """Test every node of ``value`` depth-first, in key/index order."""
        if self.is_empty:
            return []
        return [
            SearchMatch(path=path, display_key=path_key(path))
            for path, label, node, _kind in iter_nodes(value)
            if self.matches(display_text(node, label))
        ]


def search(
    value: JsonValue,
    query: str,
    regex: bool = False,
    patterns: PatternCache | None = None,
) -> list[SearchMatch]:
    """Return every node of ``value`` whose display text matches ``query``."""
    return SearchMatcher(query, regex=regex, patterns=patterns).scan(value)
