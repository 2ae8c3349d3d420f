"""Tests for CodeCache and PatternCache."""

from __future__ import annotations

import logging
from unittest.mock import patch

import pytest

from json_field_picker.cache import CodeCache, PatternCache
from json_field_picker.codegen import GENERATORS, TargetLanguage, generate_code
from json_field_picker.selection import FieldSelection

SELECTIONS = [FieldSelection("a", ("a",)), FieldSelection("b", ("b", 0))]

# ---------------------------------------------------------------------------
# CodeCache
# ---------------------------------------------------------------------------


class TestCodeCache:
    def test_default_size(self) -> None:
        cache = CodeCache()
        assert cache.max_size == 64
        assert cache.curr_size == 0

    def test_matches_uncached_generation(self) -> None:
        cache = CodeCache()
        for language in TargetLanguage:
            assert cache.generate(language, SELECTIONS, "data") == generate_code(
                language, SELECTIONS, "data"
            )

    def test_second_call_is_served_from_cache(self) -> None:
        cache = CodeCache()
        generator = GENERATORS[TargetLanguage.GO]
        with patch.object(type(generator), "generate", autospec=True, return_value="X") as spy:
            assert cache.generate("go", SELECTIONS, "data") == "X"
            assert cache.generate(TargetLanguage.GO, SELECTIONS, "data") == "X"
        assert spy.call_count == 1
        assert cache.curr_size == 1

    def test_key_includes_column_and_target(self) -> None:
        cache = CodeCache()
        cache.generate("python", SELECTIONS, "one")
        cache.generate("python", SELECTIONS, "two")
        cache.generate("rust", SELECTIONS, "one")
        assert cache.curr_size == 3

    def test_lru_eviction(self) -> None:
        cache = CodeCache(max_size=2)
        for column in ("a", "b", "c"):
            cache.generate("python", SELECTIONS, column)
        assert cache.curr_size == 2

    def test_empty_selection_is_cached_as_empty(self) -> None:
        cache = CodeCache()
        assert cache.generate("typescript", [], "data") == ""
        assert cache.generate("typescript", [], "data") == ""

    def test_clear(self) -> None:
        cache = CodeCache()
        cache.generate("python", SELECTIONS, "data")
        cache.clear()
        assert cache.curr_size == 0

    def test_unknown_target(self) -> None:
        with pytest.raises(ValueError, match="Unsupported target language"):
            CodeCache().generate("perl", SELECTIONS, "data")

    def test_instances_are_independent(self) -> None:
        first = CodeCache()
        second = CodeCache()
        first.generate("python", SELECTIONS, "data")
        assert second.curr_size == 0


# ---------------------------------------------------------------------------
# PatternCache
# ---------------------------------------------------------------------------


class TestPatternCache:
    def test_compiles_case_insensitive(self) -> None:
        pattern = PatternCache().compile("ab+c")
        assert pattern is not None
        assert pattern.search("xABBC")

    def test_reuses_compiled_pattern(self) -> None:
        cache = PatternCache()
        assert cache.compile("a.c") is cache.compile("a.c")
        assert cache.curr_size == 1

    def test_invalid_pattern_returns_none(self) -> None:
        assert PatternCache().compile("(unclosed") is None

    def test_failure_is_cached(self) -> None:
        cache = PatternCache()
        cache.compile("[")
        with patch("json_field_picker.cache.re.compile") as compile_spy:
            assert cache.compile("[") is None
        compile_spy.assert_not_called()

    def test_invalid_pattern_is_logged(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.DEBUG, logger="json_field_picker.cache"):
            PatternCache().compile("*bad")
        assert "invalid search pattern" in caplog.text
