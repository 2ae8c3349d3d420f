"""Tests for the Rust extraction snippet."""

from __future__ import annotations

from json_field_picker.codegen import EMPTY_OUTPUT, RustGenerator, TargetLanguage
from json_field_picker.selection import FieldSelection

SELECTIONS = [
    FieldSelection("id", ("id",)),
    FieldSelection("scores_value", ("scores", 0)),
]


class TestRustGenerator:
    def test_language(self) -> None:
        assert RustGenerator().language == TargetLanguage.RUST

    def test_empty_selection(self) -> None:
        assert RustGenerator().generate([], "data") == EMPTY_OUTPUT

    def test_uses_serde_json(self) -> None:
        code = RustGenerator().generate(SELECTIONS, "data")
        assert "use serde_json::Value;" in code
        assert "pub enum PathStep {" in code
        assert (
            "pub fn extract_fields(record: &Value) -> Vec<(&'static str, Value)> {" in code
        )

    def test_entries_in_order(self) -> None:
        code = RustGenerator().generate(SELECTIONS, "data")
        first = code.index(
            '("id", safe_get(record, &[PathStep::Key("id")]).cloned().unwrap_or(Value::Null)),'
        )
        second = code.index(
            '("scores_value", safe_get(record, &[PathStep::Key("scores"), '
            "PathStep::Index(0)]).cloned().unwrap_or(Value::Null)),"
        )
        assert first < second

    def test_negative_index_never_panics(self) -> None:
        code = RustGenerator().generate([FieldSelection("v", ("a", -1))], "data")
        assert "PathStep::Index(-1)" in code
        assert "usize::try_from(*index).ok()?" in code

    def test_braced_unicode_escapes(self) -> None:
        code = RustGenerator().generate([FieldSelection("x\x7f", ("k",))], "data")
        assert '"x\\u{7f}"' in code

    def test_doc_comment_header(self) -> None:
        code = RustGenerator().generate(SELECTIONS, "my col")
        assert code.startswith('//! Extracts 2 field(s): id, scores_value from JSON column "my col".')
