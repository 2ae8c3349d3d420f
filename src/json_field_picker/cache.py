"""LRU-backed caches for generated code and compiled search patterns.

``CodeCache`` wraps the generator registry and transparently caches the
rendered text per ``(target, selections, column name)``.  Generators are
pure, so a cached snippet is always identical to a fresh one.

``PatternCache`` keeps compiled case-insensitive search patterns, remembering
queries that failed to compile so repeated keystrokes do not re-run the
compiler.

Each instance maintains its own ``LRUCache``; there is no class-level
shared state, so two separate instances never interfere with each other.

Example::

    from json_field_picker.cache import CodeCache

    cache = CodeCache(max_size=64)
    code = cache.generate("python", registry.selections(), "payload")
    again = cache.generate("python", registry.selections(), "payload")  # cached
"""

from __future__ import annotations

import logging
import re
from collections.abc import Sequence
from typing import TYPE_CHECKING

from cachetools import LRUCache

from json_field_picker.codegen import GENERATORS, TargetLanguage, resolve_target

if TYPE_CHECKING:
    from json_field_picker.selection import FieldSelection

__all__ = ["CodeCache", "PatternCache"]

_LOG = logging.getLogger(__name__)

_CodeKey = tuple[TargetLanguage, tuple["FieldSelection", ...], str]


class CodeCache:
    """LRU cache of generated snippets.

    Args:
        max_size: Maximum number of snippets held in memory.  When exceeded,
            the least-recently-used entry is silently evicted.
    """

    def __init__(self, max_size: int = 64) -> None:
        self._cache: LRUCache[_CodeKey, str] = LRUCache(maxsize=max_size)

    @property
    def max_size(self) -> int:
        """The maximum number of entries this cache can hold."""
        return int(self._cache.maxsize)

    @property
    def curr_size(self) -> int:
        """The current number of entries stored in the cache."""
        return int(self._cache.currsize)

    def generate(
        self,
        target: TargetLanguage | str,
        selections: Sequence[FieldSelection],
        column_name: str,
    ) -> str:
        """Return generated code; only uncached inputs reach the generator."""
        language = resolve_target(target)
        key: _CodeKey = (language, tuple(selections), column_name)
        cached = self._cache.get(key)
        if cached is not None:
            return cached

        code = GENERATORS[language].generate(key[1], column_name)
        self._cache[key] = code
        return code

    def clear(self) -> None:
        self._cache.clear()


class PatternCache:
    """LRU cache of compiled case-insensitive regular expressions.

    ``compile()`` returns None for queries that are not valid patterns; the
    failure itself is cached too.
    """

    def __init__(self, max_size: int = 128) -> None:
        self._cache: LRUCache[str, re.Pattern[str] | None] = LRUCache(maxsize=max_size)

    @property
    def curr_size(self) -> int:
        return int(self._cache.currsize)

    def compile(self, query: str) -> re.Pattern[str] | None:
        if query in self._cache:
            return self._cache[query]
        try:
            pattern: re.Pattern[str] | None = re.compile(query, re.IGNORECASE)
        except re.error as exc:
            _LOG.debug("invalid search pattern %r, using substring match: %s", query, exc)
            pattern = None
        self._cache[query] = pattern
        return pattern
