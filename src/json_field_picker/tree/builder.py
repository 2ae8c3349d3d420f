"""parse_json: strict JSON text -> canonical JSON value.

Wraps the stdlib decoder with the strictness rules of the input format:
- NaN / Infinity / -Infinity literals are rejected (not JSON).
- Integers outside the IEEE-754 safe range become floats, so every number
  behaves as a double.
- Object key insertion order is preserved; on duplicate keys the last value
  wins at the position of the first occurrence.

Decoder failures are re-raised as ``ParseError`` with a message, line and
column derived from the decoder's own error.
"""

from __future__ import annotations

import json

from json_field_picker.exceptions import ParseError
from json_field_picker.tree.nodes import JsonValue

__all__ = ["MAX_SAFE_INTEGER", "parse_json"]

MAX_SAFE_INTEGER = 2**53 - 1


def _parse_int(literal: str) -> int | float:
    number = int(literal)
    if abs(number) > MAX_SAFE_INTEGER:
        return float(number)
    return number


def _reject_constant(literal: str) -> float:
    msg = f"Unexpected token {literal!r}: non-finite numbers are not valid JSON"
    raise ParseError(msg)


def parse_json(text: str | bytes) -> JsonValue:
    """Parse strict JSON text into the canonical value.

    Args:
        text: JSON text.  ``bytes`` are decoded as UTF-8 (a BOM is accepted).

    Returns:
        The parsed value (dict, list, str, int, float, bool or None).

    Raises:
        ParseError: If the text is not valid UTF-8 or not strict JSON.
    """
    if isinstance(text, bytes):
        try:
            text = text.decode("utf-8-sig")
        except UnicodeDecodeError as exc:
            msg = f"Input is not valid UTF-8: {exc.reason}"
            raise ParseError(msg) from exc

    try:
        return json.loads(
            text,
            parse_int=_parse_int,
            parse_constant=_reject_constant,
        )
    except json.JSONDecodeError as exc:
        raise ParseError(exc.msg, line=exc.lineno, column=exc.colno) from exc
    except RecursionError as exc:
        msg = "Document is nested too deeply to parse"
        raise ParseError(msg) from exc
