"""RustGenerator: ``extract_fields(&Value)`` over ``serde_json`` values."""

from __future__ import annotations

from collections.abc import Sequence
from typing import TYPE_CHECKING

from json_field_picker.codegen._literals import escape_rust, quote, summary
from json_field_picker.codegen.protocols import EMPTY_OUTPUT, TargetLanguage
from json_field_picker.paths import Path

if TYPE_CHECKING:
    from json_field_picker.selection import FieldSelection

__all__ = ["RustGenerator"]


def _rust_path(path: Path) -> str:
    steps = [
        f"PathStep::Index({step})"
        if isinstance(step, int)
        else f"PathStep::Key({quote(step, escape_rust)})"
        for step in path
    ]
    return f"&[{', '.join(steps)}]"


class RustGenerator:
    language = TargetLanguage.RUST

    def generate(self, selections: Sequence[FieldSelection], column_name: str) -> str:
        if not selections:
            return EMPTY_OUTPUT

        doc = summary([s.field_name for s in selections], column_name, escape_rust)
        field_lines = [
            f"        ({quote(s.field_name, escape_rust)}, "
            f"safe_get(record, {_rust_path(s.path)}).cloned().unwrap_or(Value::Null)),"
            for s in selections
        ]

        return "\n".join(
            [
                f"//! {doc}",
                "//!",
                "//! Records are `serde_json::Value`s already parsed from that column.",
                "",
                "use serde_json::Value;",
                "",
                "/// One step of a selected path.",
                "#[derive(Debug, Clone, Copy)]",
                "pub enum PathStep {",
                "    Key(&'static str),",
                "    Index(i64),",
                "}",
                "",
                "pub fn safe_get<'a>(obj: &'a Value, path: &[PathStep]) -> Option<&'a Value> {",
                "    let mut current = obj;",
                "    for step in path {",
                "        current = match (step, current) {",
                "            (PathStep::Key(key), Value::Object(map)) => map.get(*key)?,",
                "            (PathStep::Index(index), Value::Array(items)) => {",
                "                let position = usize::try_from(*index).ok()?;",
                "                items.get(position)?",
                "            }",
                "            _ => return None,",
                "        };",
                "    }",
                "    Some(current)",
                "}",
                "",
                "/// Extracted `(field name, value)` pairs, in selection order.",
                "pub fn extract_fields(record: &Value) -> Vec<(&'static str, Value)> {",
                "    vec![",
                *field_lines,
                "    ]",
                "}",
            ]
        )
