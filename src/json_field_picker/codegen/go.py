"""GoGenerator: ``ExtractFields(record)`` over ``encoding/json`` values.

Go maps do not keep insertion order, so the extracted fields are returned
as an ordered ``[]ExtractedField`` slice that follows selection order.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import TYPE_CHECKING

from json_field_picker.codegen._literals import escape_go, quote, summary
from json_field_picker.codegen.protocols import EMPTY_OUTPUT, TargetLanguage
from json_field_picker.paths import Path

if TYPE_CHECKING:
    from json_field_picker.selection import FieldSelection

__all__ = ["GoGenerator"]


def _go_path(path: Path) -> str:
    steps = [str(step) if isinstance(step, int) else quote(step, escape_go) for step in path]
    return f"[]interface{{}}{{{', '.join(steps)}}}"


class GoGenerator:
    language = TargetLanguage.GO

    def generate(self, selections: Sequence[FieldSelection], column_name: str) -> str:
        if not selections:
            return EMPTY_OUTPUT

        doc = summary([s.field_name for s in selections], column_name, escape_go)
        field_lines = [
            f"\t\t{{Name: {quote(s.field_name, escape_go)}, "
            f"Value: safeGet(record, {_go_path(s.path)})}},"
            for s in selections
        ]

        return "\n".join(
            [
                f"// Package extractor {doc[0].lower()}{doc[1:]}",
                "//",
                "// Records are values decoded by encoding/json into an interface{}.",
                "package extractor",
                "",
                "// ExtractedField is one extracted value, in selection order.",
                "type ExtractedField struct {",
                "\tName  string",
                "\tValue interface{}",
                "}",
                "",
                "func safeGet(obj interface{}, path []interface{}) interface{} {",
                "\tcurrent := obj",
                "\tfor _, step := range path {",
                "\t\tswitch s := step.(type) {",
                "\t\tcase int:",
                "\t\t\titems, ok := current.([]interface{})",
                "\t\t\tif !ok || s < 0 || s >= len(items) {",
                "\t\t\t\treturn nil",
                "\t\t\t}",
                "\t\t\tcurrent = items[s]",
                "\t\tcase string:",
                "\t\t\tfields, ok := current.(map[string]interface{})",
                "\t\t\tif !ok {",
                "\t\t\t\treturn nil",
                "\t\t\t}",
                "\t\t\tvalue, exists := fields[s]",
                "\t\t\tif !exists {",
                "\t\t\t\treturn nil",
                "\t\t\t}",
                "\t\t\tcurrent = value",
                "\t\tdefault:",
                "\t\t\treturn nil",
                "\t\t}",
                "\t}",
                "\treturn current",
                "}",
                "",
                "// ExtractFields walks every selected path against an already-parsed record.",
                "func ExtractFields(record interface{}) []ExtractedField {",
                "\treturn []ExtractedField{",
                *field_lines,
                "\t}",
                "}",
            ]
        )
