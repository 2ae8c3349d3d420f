"""Codegen subpackage for json-field-picker.

One generator per target language, all satisfying the ``CodeGenerator``
Protocol structurally.  ``generate_code`` dispatches on ``TargetLanguage``
(or its string value) through the ``GENERATORS`` registry.

Every generator is a pure function of the selection list and column name:
the same inputs always produce the same text, and an empty selection list
always produces ``EMPTY_OUTPUT``.
"""

from __future__ import annotations

from collections.abc import Sequence
from types import MappingProxyType
from typing import TYPE_CHECKING

from json_field_picker.codegen.go import GoGenerator
from json_field_picker.codegen.javascript import JavaScriptGenerator, TypeScriptGenerator
from json_field_picker.codegen.protocols import EMPTY_OUTPUT, CodeGenerator, TargetLanguage
from json_field_picker.codegen.python import PythonGenerator
from json_field_picker.codegen.rust import RustGenerator

if TYPE_CHECKING:
    from json_field_picker.selection import FieldSelection

__all__ = [
    "EMPTY_OUTPUT",
    "GENERATORS",
    "CodeGenerator",
    "GoGenerator",
    "JavaScriptGenerator",
    "PythonGenerator",
    "RustGenerator",
    "TargetLanguage",
    "TypeScriptGenerator",
    "generate_code",
    "resolve_target",
]

GENERATORS: MappingProxyType[TargetLanguage, CodeGenerator] = MappingProxyType(
    {
        TargetLanguage.PYTHON: PythonGenerator(),
        TargetLanguage.JAVASCRIPT: JavaScriptGenerator(),
        TargetLanguage.TYPESCRIPT: TypeScriptGenerator(),
        TargetLanguage.GO: GoGenerator(),
        TargetLanguage.RUST: RustGenerator(),
    }
)


def resolve_target(target: TargetLanguage | str) -> TargetLanguage:
    """Coerce a target name to ``TargetLanguage``.

    Raises:
        ValueError: If ``target`` names no supported language.
    """
    try:
        return TargetLanguage(str(target).lower())
    except ValueError:
        supported = ", ".join(language.value for language in TargetLanguage)
        msg = f"Unsupported target language {target!r}; expected one of: {supported}"
        raise ValueError(msg) from None


def generate_code(
    target: TargetLanguage | str,
    selections: Sequence[FieldSelection],
    column_name: str,
) -> str:
    """Render extraction code for ``selections`` in the ``target`` language.

    Args:
        target:      Target language (enum member or its value, e.g. ``"go"``).
        selections:  Selections in registry insertion order.
        column_name: Name of the source column holding the JSON text.

    Returns:
        Source text, or ``EMPTY_OUTPUT`` when ``selections`` is empty.
    """
    return GENERATORS[resolve_target(target)].generate(selections, column_name)
