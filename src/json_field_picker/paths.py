"""Path model: canonical paths, segments, selection keys and path rendering.

A path is a tuple of steps, each a string key or an integer index; the
empty tuple is the root.  Paths may arrive from collaborators with indices
as decimal strings, so ``normalize_path`` canonicalises them before any
comparison.

Segments are the compacted structural view used for selection identity:
a key directly followed by an index becomes one ``array`` segment, any
other key a ``key`` segment.  Concrete index values are dropped, so every
element of an array shares one selection key per structural position.
"""

from __future__ import annotations

import json
from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from enum import StrEnum
from typing import Any

from json_field_picker.tree.nodes import JsonType, JsonValue, classify, format_value

__all__ = [
    "ROOT_PATH_KEY",
    "Path",
    "Segment",
    "SegmentType",
    "build_segments",
    "create_selection_key",
    "json_fragment",
    "normalize_path",
    "parse_path_key",
    "path_key",
    "path_to_dot_notation",
    "path_to_python_accessor",
    "resolve_path",
]

PathStep = str | int
Path = tuple[PathStep, ...]

ROOT_PATH_KEY = "[]"

# Integers beyond this magnitude are not exactly representable as doubles
_MAX_EXACT_INTEGER = 2**53


class SegmentType(StrEnum):
    """Tag of a path segment."""

    KEY = "key"
    ARRAY_ELEMENT = "array"


@dataclass(frozen=True, slots=True)
class Segment:
    """A compacted structural step: an object key, optionally indexed."""

    type: SegmentType
    key: str

    def __str__(self) -> str:
        return f"{self.type}:{self.key}"


def _as_index(step: str) -> int | None:
    try:
        number = int(step)
    except ValueError:
        return None
    if str(number) != step or abs(number) > _MAX_EXACT_INTEGER:
        return None
    return number


def normalize_path(path: Iterable[Any]) -> Path:
    """Canonicalise a path so decimal-string indices become ints.

    A string step converts only when it round-trips exactly
    (``str(int(s)) == s``): "0" and "-1" convert, "01", "1.5", " 1" and
    "1e3" stay strings.  Idempotent.
    """
    normalized: list[PathStep] = []
    for step in path:
        if isinstance(step, int) and not isinstance(step, bool):
            normalized.append(step)
            continue
        text = str(step)
        index = _as_index(text)
        normalized.append(text if index is None else index)
    return tuple(normalized)


def build_segments(path: Sequence[PathStep]) -> list[Segment]:
    """Compact a path into segments; integer steps produce no segment."""
    segments: list[Segment] = []
    for position, step in enumerate(path):
        if isinstance(step, int):
            continue
        following = path[position + 1] if position + 1 < len(path) else None
        segment_type = (
            SegmentType.ARRAY_ELEMENT
            if isinstance(following, int)
            else SegmentType.KEY
        )
        segments.append(Segment(type=segment_type, key=step))
    return segments


def create_selection_key(segments: Sequence[Segment], path: Sequence[PathStep]) -> str:
    """Derive the selection identity for a path.

    Non-empty segments join as ``type:key`` with ``>``.  A path with no
    segments (the root, or indices only) falls back to its path key.
    """
    if not segments:
        return path_key(path)
    return ">".join(str(segment) for segment in segments)


def path_key(path: Sequence[PathStep]) -> str:
    """Compact JSON encoding of a path, e.g. ``["a",0]``; the root is ``[]``."""
    return json.dumps(list(path), separators=(",", ":"), ensure_ascii=False)


def parse_path_key(key: str) -> Path:
    """Inverse of ``path_key``.

    Raises:
        ValueError: If ``key`` is not a JSON array of strings and integers.
    """
    decoded = json.loads(key)
    if not isinstance(decoded, list) or not all(
        isinstance(step, str) or (isinstance(step, int) and not isinstance(step, bool))
        for step in decoded
    ):
        msg = f"Not a path key: {key!r}"
        raise ValueError(msg)
    return tuple(decoded)


def resolve_path(value: JsonValue, path: Sequence[PathStep]) -> tuple[bool, JsonValue]:
    """Walk ``path`` against ``value``.

    Returns:
        ``(True, found_value)`` when every step resolves, else ``(False, None)``.
    """
    current = value
    for step in path:
        kind = classify(current)
        if isinstance(step, int):
            if kind != JsonType.ARRAY or not 0 <= step < len(current):  # type: ignore[arg-type]
                return False, None
            current = current[step]  # type: ignore[index]
        else:
            if kind != JsonType.OBJECT or step not in current:  # type: ignore[operator]
                return False, None
            current = current[step]  # type: ignore[index]
    return True, current


def path_to_dot_notation(path: Sequence[PathStep]) -> str:
    """Render a path as ``a.b[0].c``; the root renders as an empty string."""
    rendered = ""
    for step in path:
        if isinstance(step, int):
            rendered = f"{rendered}[{step}]"
        else:
            rendered = f"{rendered}.{step}" if rendered else step
    return rendered


def path_to_python_accessor(path: Sequence[PathStep], root: str = "task") -> str:
    """Render a path as a Python subscript chain, e.g. ``task["a"][0]``."""
    parts = []
    for step in path:
        if isinstance(step, int):
            parts.append(f"[{step}]")
        else:
            parts.append(f"[{json.dumps(step, ensure_ascii=False)}]")
    return root + "".join(parts)


def json_fragment(value: JsonValue) -> str:
    """Text copied for a node: indented JSON for containers, display text otherwise."""
    kind = classify(value)
    if kind in (JsonType.OBJECT, JsonType.ARRAY):
        return json.dumps(value, indent=2, ensure_ascii=False)
    if kind == JsonType.STRING:
        return value  # type: ignore[return-value]
    return format_value(value)
