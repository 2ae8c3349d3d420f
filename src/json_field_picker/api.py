"""Public API functions for json-field-picker.

Stateless conveniences over the core for callers that do not need an
``Explorer`` session: parse, diff, select and generate.  Each call builds
whatever it needs fresh, so no state is shared between calls.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from typing import Any

from json_field_picker.algorithm.differ import StructuralDiffer
from json_field_picker.codegen import TargetLanguage
from json_field_picker.codegen import generate_code as _generate_code
from json_field_picker.result import DiffResult
from json_field_picker.selection import FieldSelection, SelectionRegistry
from json_field_picker.tree.nodes import JsonValue

__all__ = ["diff", "extraction_code", "select_paths"]


def diff(left: JsonValue, right: JsonValue) -> DiffResult:
    """Structurally compare two JSON values.

    Args:
        left:  The original value.
        right: The value compared against it.

    Returns:
        A ``DiffResult`` whose ``entries`` map each differing path key to
        ``added``, ``removed`` or ``modified``.
    """
    return StructuralDiffer().compare(left, right)


def select_paths(paths: Iterable[Iterable[Any]]) -> SelectionRegistry:
    """Toggle each path in turn into an empty registry.

    Toggle semantics apply: two paths sharing a selection key cancel out.
    """
    registry = SelectionRegistry()
    for path in paths:
        registry = registry.toggle(path)
    return registry


def extraction_code(
    paths_or_selections: Iterable[Iterable[Any]] | Sequence[FieldSelection],
    column_name: str,
    target: TargetLanguage | str = TargetLanguage.PYTHON,
) -> str:
    """Generate extraction code for a list of paths or ready-made selections.

    Args:
        paths_or_selections: Raw paths (toggled through a fresh registry) or
            ``FieldSelection`` objects used as-is.
        column_name: Name of the source column holding the JSON text.
        target: Target language.  Defaults to Python.

    Returns:
        Generated source text, or ``""`` when there is nothing to extract.
    """
    items = list(paths_or_selections)
    if all(isinstance(item, FieldSelection) for item in items):
        selections = items
    else:
        selections = select_paths(items).selections()  # type: ignore[arg-type]
    return _generate_code(target, selections, column_name)  # type: ignore[arg-type]
