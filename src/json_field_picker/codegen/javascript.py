"""JavaScriptGenerator and TypeScriptGenerator: ``extractFields(record)`` snippets.

Both walk each selected path against an already-parsed record and build an
object literal whose properties follow selection order.  Any step that does
not resolve yields ``null``.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import TYPE_CHECKING

from json_field_picker.codegen._literals import (
    escape_c_like,
    path_array_literal,
    quote,
    summary,
)
from json_field_picker.codegen.protocols import EMPTY_OUTPUT, TargetLanguage

if TYPE_CHECKING:
    from json_field_picker.selection import FieldSelection

__all__ = ["JavaScriptGenerator", "TypeScriptGenerator"]


def _property_lines(selections: Sequence[FieldSelection]) -> list[str]:
    return [
        f"    {quote(s.field_name)}: safeGet(record, {path_array_literal(s.path)}),"
        for s in selections
    ]


def _header(selections: Sequence[FieldSelection], column_name: str) -> list[str]:
    doc = summary([s.field_name for s in selections], column_name, escape_c_like)
    return [
        "/**",
        f" * {doc}",
        " * `record` is the already-parsed JSON value of that column.",
        " */",
    ]


class JavaScriptGenerator:
    language = TargetLanguage.JAVASCRIPT

    def generate(self, selections: Sequence[FieldSelection], column_name: str) -> str:
        if not selections:
            return EMPTY_OUTPUT

        return "\n".join(
            [
                *_header(selections, column_name),
                "function safeGet(obj, path) {",
                "  let current = obj;",
                "  for (const step of path) {",
                '    if (typeof step === "number") {',
                "      if (!Array.isArray(current) || step < 0 || step >= current.length) {",
                "        return null;",
                "      }",
                "    } else if (",
                "      current === null ||",
                '      typeof current !== "object" ||',
                "      Array.isArray(current) ||",
                "      !Object.prototype.hasOwnProperty.call(current, step)",
                "    ) {",
                "      return null;",
                "    }",
                "    current = current[step];",
                "  }",
                "  return current === undefined ? null : current;",
                "}",
                "",
                "function extractFields(record) {",
                "  return {",
                *_property_lines(selections),
                "  };",
                "}",
                "",
                "module.exports = { extractFields, safeGet };",
            ]
        )


class TypeScriptGenerator:
    language = TargetLanguage.TYPESCRIPT

    def generate(self, selections: Sequence[FieldSelection], column_name: str) -> str:
        if not selections:
            return EMPTY_OUTPUT

        interface_lines = [f"  {quote(s.field_name)}: JsonValue;" for s in selections]

        return "\n".join(
            [
                *_header(selections, column_name),
                "export type JsonValue =",
                "  | string",
                "  | number",
                "  | boolean",
                "  | null",
                "  | JsonValue[]",
                "  | { [key: string]: JsonValue };",
                "",
                "export type PathStep = string | number;",
                "",
                "export interface ExtractedFields {",
                *interface_lines,
                "}",
                "",
                "export function safeGet(obj: JsonValue, path: readonly PathStep[]): JsonValue {",
                "  let current: JsonValue = obj;",
                "  for (const step of path) {",
                '    if (typeof step === "number") {',
                "      if (!Array.isArray(current) || step < 0 || step >= current.length) {",
                "        return null;",
                "      }",
                "      current = current[step] ?? null;",
                "    } else {",
                "      if (",
                "        current === null ||",
                '        typeof current !== "object" ||',
                "        Array.isArray(current) ||",
                "        !Object.prototype.hasOwnProperty.call(current, step)",
                "      ) {",
                "        return null;",
                "      }",
                "      current = current[step] ?? null;",
                "    }",
                "  }",
                "  return current;",
                "}",
                "",
                "export function extractFields(record: JsonValue): ExtractedFields {",
                "  return {",
                *_property_lines(selections),
                "  };",
                "}",
            ]
        )
