"""Tests for the stateless public API functions."""

from __future__ import annotations

import pytest

import json_field_picker
from json_field_picker import (
    DiffResult,
    DiffStatus,
    FieldSelection,
    SelectionRegistry,
    TargetLanguage,
    diff,
    extraction_code,
    select_paths,
)


class TestDiff:
    def test_returns_diff_result(self) -> None:
        result = diff({"x": 1, "y": [1, 2]}, {"x": 2, "y": [1, 2, 3]})
        assert isinstance(result, DiffResult)
        assert dict(result.entries) == {
            '["x"]': DiffStatus.MODIFIED,
            '["y",2]': DiffStatus.ADDED,
        }

    def test_identical(self) -> None:
        assert diff([1, "a"], [1, "a"]).is_identical


class TestSelectPaths:
    def test_builds_registry(self) -> None:
        registry = select_paths([["a", "b"], ["a", "c"]])
        assert isinstance(registry, SelectionRegistry)
        assert [s.field_name for s in registry.selections()] == ["b", "c"]

    def test_toggle_semantics_apply(self) -> None:
        assert len(select_paths([["items", 0, "v"], ["items", 1, "v"]])) == 0

    def test_empty(self) -> None:
        assert len(select_paths([])) == 0


class TestExtractionCode:
    def test_from_paths(self) -> None:
        code = extraction_code([["user", "id"]], "payload")
        assert 'df["payload"]' in code
        assert '"id": safe_get(obj, ["user", "id"])' in code

    def test_from_selections(self) -> None:
        selections = [FieldSelection("renamed", ("a",))]
        code = extraction_code(selections, "data", TargetLanguage.JAVASCRIPT)
        assert '"renamed": safeGet(record, ["a"]),' in code

    def test_target_by_name(self) -> None:
        assert "package extractor" in extraction_code([["a"]], "data", "go")

    @pytest.mark.parametrize("target", list(TargetLanguage))
    def test_nothing_to_extract(self, target: TargetLanguage) -> None:
        assert extraction_code([], "data", target) == ""

    def test_cancelling_paths_produce_empty_output(self) -> None:
        assert extraction_code([["items", 0, "v"], ["items", 1, "v"]], "data") == ""


class TestPublicSurface:
    def test_all_names_resolve(self) -> None:
        for name in json_field_picker.__all__:
            assert hasattr(json_field_picker, name), name
