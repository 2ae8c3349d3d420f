"""Tests for the Go extraction snippet."""

from __future__ import annotations

from json_field_picker.codegen import EMPTY_OUTPUT, GoGenerator, TargetLanguage
from json_field_picker.selection import FieldSelection

SELECTIONS = [
    FieldSelection("name", ("user", "name")),
    FieldSelection("items_value", ("items", 2)),
]


class TestGoGenerator:
    def test_language(self) -> None:
        assert GoGenerator().language == TargetLanguage.GO

    def test_empty_selection(self) -> None:
        assert GoGenerator().generate([], "data") == EMPTY_OUTPUT

    def test_package_and_types(self) -> None:
        code = GoGenerator().generate(SELECTIONS, "data")
        assert "package extractor" in code
        assert "type ExtractedField struct {" in code
        assert "func ExtractFields(record interface{}) []ExtractedField {" in code

    def test_package_comment_precedes_clause(self) -> None:
        code = GoGenerator().generate(SELECTIONS, "data")
        assert code.startswith("// Package extractor extracts 2 field(s): name, items_value")

    def test_ordered_slice_entries(self) -> None:
        code = GoGenerator().generate(SELECTIONS, "data")
        first = code.index(
            '{Name: "name", Value: safeGet(record, []interface{}{"user", "name"})},'
        )
        second = code.index(
            '{Name: "items_value", Value: safeGet(record, []interface{}{"items", 2})},'
        )
        assert first < second

    def test_uses_tabs(self) -> None:
        code = GoGenerator().generate(SELECTIONS, "data")
        body = code.split("func safeGet")[1]
        assert "\n\tcurrent := obj" in body
        assert "\n    " not in body

    def test_missing_steps_yield_nil(self) -> None:
        code = GoGenerator().generate(SELECTIONS, "data")
        assert "return nil" in code

    def test_control_characters_escaped(self) -> None:
        code = GoGenerator().generate([FieldSelection("a\x01", ("k\n",))], "data")
        assert '"a\\u0001"' in code
        assert '"k\\n"' in code

    def test_lone_surrogate_replaced(self) -> None:
        code = GoGenerator().generate([FieldSelection("n", ("\ud800",))], "data")
        assert '"\\ufffd"' in code
