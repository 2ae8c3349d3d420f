"""JsonType StrEnum and the canonical JSON value model.

The canonical value is the plain Python value produced by ``parse_json``:
``None``, ``bool``, ``int``/``float``, ``str``, ``dict`` (insertion-ordered)
or ``list``.  Every component dispatches on ``classify()`` rather than
inspecting Python types ad hoc.

This module also owns the renderer-facing text helpers (``format_value``,
``display_text``) because the search matcher must reproduce exactly what
the presentation layer shows for a node.
"""

from __future__ import annotations

import math
from decimal import Decimal
from enum import StrEnum, auto
from typing import Any

# Type alias for valid JSON values
JsonValue = dict[str, Any] | list[Any] | str | int | float | bool | None


class JsonType(StrEnum):
    """The six variant tags of a JSON value.

    - NULL    -> "null"
    - BOOLEAN -> "boolean"
    - NUMBER  -> "number"
    - STRING  -> "string"
    - OBJECT  -> "object"
    - ARRAY   -> "array"
    """

    NULL = auto()
    BOOLEAN = auto()
    NUMBER = auto()
    STRING = auto()
    OBJECT = auto()
    ARRAY = auto()


CONTAINER_TYPES = frozenset({JsonType.OBJECT, JsonType.ARRAY})


def classify(value: Any) -> JsonType:
    """Return the variant tag of a JSON value.

    bool MUST be checked before int because bool subclasses int, and lists
    are checked before the generic object fallback.

    Raises:
        TypeError: If ``value`` is not a JSON value.
    """
    if value is None:
        return JsonType.NULL
    if isinstance(value, bool):
        return JsonType.BOOLEAN
    if isinstance(value, list):
        return JsonType.ARRAY
    if isinstance(value, str):
        return JsonType.STRING
    if isinstance(value, (int, float)):
        return JsonType.NUMBER
    if isinstance(value, dict):
        return JsonType.OBJECT

    raise TypeError(f"Unsupported JSON value type: {type(value)!r}")


def is_container(value: Any) -> bool:
    """True for objects and arrays."""
    return classify(value) in CONTAINER_TYPES


def format_number(number: int | float) -> str:
    """Format a number the way a JavaScript runtime prints a double.

    Integral values print without a fractional part; exponent notation is
    used only outside ``1e-7 < |n| < 1e21``.
    """
    if isinstance(number, int):
        return str(number)
    if math.isnan(number):
        return "NaN"
    if math.isinf(number):
        return "Infinity" if number > 0 else "-Infinity"
    if number == 0:
        return "0"

    shortest = repr(number)
    mantissa, _, exponent = shortest.partition("e")
    if not exponent:
        return shortest.removesuffix(".0")

    exp = int(exponent)
    if -7 < exp < 21:
        return format(Decimal(shortest), "f")
    sign = "+" if exp > 0 else "-"
    return f"{mantissa}e{sign}{abs(exp)}"


def format_value(value: JsonValue) -> str:
    """Return the one-line summary the tree renderer shows for a value.

    Strings are quoted verbatim, containers are summarised by size
    (``{2 keys}``, ``[1 item]``).
    """
    match classify(value):
        case JsonType.STRING:
            return f'"{value}"'
        case JsonType.NULL:
            return "null"
        case JsonType.BOOLEAN:
            return "true" if value else "false"
        case JsonType.NUMBER:
            return format_number(value)  # type: ignore[arg-type]
        case JsonType.OBJECT:
            keys = len(value)  # type: ignore[arg-type]
            return f"{{{keys} {'key' if keys == 1 else 'keys'}}}"
        case JsonType.ARRAY:
            length = len(value)  # type: ignore[arg-type]
            return f"[{length} {'item' if length == 1 else 'items'}]"


def display_text(value: JsonValue, label: str | int | None = None) -> str:
    """Build a node's display text: ``"label": summary`` or just the summary."""
    prefix = f'"{label}": ' if label is not None else ""
    return f"{prefix}{format_value(value)}"
