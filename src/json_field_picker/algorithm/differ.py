"""StructuralDiffer: path-level structural comparison of two JSON values.

Walks both values in lockstep and records a status for every path that
differs:

- Variant tags differ        -> MODIFIED at that path, no descent.
- Same primitive tag         -> MODIFIED iff the values are not equal.
- Arrays                     -> positional; extra right elements are ADDED,
                                missing ones REMOVED, shared ones recursed.
- Objects                    -> union of keys (left order, then right-only
                                keys); right-only ADDED, left-only REMOVED,
                                shared ones recursed.

A container whose contents differ gets no entry of its own unless its tag
changed.  The walk uses an explicit work stack that replays the recursive
visiting order, so results come out in pre-order without recursion limits.
"""

from __future__ import annotations

import time
from typing import Any

from json_field_picker.paths import Path, path_key
from json_field_picker.result import DiffResult, DiffStatus
from json_field_picker.tree.nodes import JsonType, JsonValue, classify

__all__ = ["DiffStatus", "StructuralDiffer", "compute_diff"]

# Work items: ("visit", left, right, path) or ("record", path, status)
_Work = tuple[Any, ...]


def _expand_visit(left: JsonValue, right: JsonValue, path: Path) -> list[_Work]:
    """Return the work items produced by one node pair, in visiting order."""
    kind = classify(left)
    if kind != classify(right):
        return [("record", path, DiffStatus.MODIFIED)]

    if kind == JsonType.ARRAY:
        items: list[_Work] = []
        for index in range(max(len(left), len(right))):  # type: ignore[arg-type]
            child_path = (*path, index)
            if index >= len(left):  # type: ignore[arg-type]
                items.append(("record", child_path, DiffStatus.ADDED))
            elif index >= len(right):  # type: ignore[arg-type]
                items.append(("record", child_path, DiffStatus.REMOVED))
            else:
                items.append(("visit", left[index], right[index], child_path))  # type: ignore[index]
        return items

    if kind == JsonType.OBJECT:
        items = []
        keys = list(left)  # type: ignore[arg-type]
        keys.extend(key for key in right if key not in left)  # type: ignore[union-attr, operator]
        for key in keys:
            child_path = (*path, key)
            if key not in left:  # type: ignore[operator]
                items.append(("record", child_path, DiffStatus.ADDED))
            elif key not in right:  # type: ignore[operator]
                items.append(("record", child_path, DiffStatus.REMOVED))
            else:
                items.append(("visit", left[key], right[key], child_path))  # type: ignore[index]
        return items

    if left != right:
        return [("record", path, DiffStatus.MODIFIED)]
    return []


def compute_diff(
    left: JsonValue, right: JsonValue, path: Path = ()
) -> dict[str, DiffStatus]:
    """Compare two JSON values and map each differing path key to its status.

    Args:
        left:  The original value.
        right: The value compared against it.
        path:  Path of ``left``/``right`` inside their documents; prefixes
               every reported path.  Defaults to the root.

    Returns:
        A fresh dict ``{path_key: DiffStatus}`` in traversal order; empty
        when the values are structurally identical.
    """
    entries: dict[str, DiffStatus] = {}
    stack: list[_Work] = [("visit", left, right, tuple(path))]
    while stack:
        item = stack.pop()
        if item[0] == "record":
            entries[path_key(item[1])] = item[2]
            continue
        _tag, left_value, right_value, item_path = item
        stack.extend(reversed(_expand_visit(left_value, right_value, item_path)))
    return entries


class StructuralDiffer:
    """Produces a rich ``DiffResult`` from ``compute_diff``.

    Stateless: each ``compare()`` call returns a fresh, complete result that
    shares nothing with earlier calls.

    Example::

        differ = StructuralDiffer()
        result = differ.compare({"x": 1, "y": [1, 2]}, {"x": 2, "y": [1, 2, 3]})
        dict(result.entries)   # {'["x"]': 'modified', '["y",2]': 'added'}
    """

    def compare(self, left: JsonValue, right: JsonValue) -> DiffResult:
        t0 = time.perf_counter()
        entries = compute_diff(left, right)
        elapsed_ms = (time.perf_counter() - t0) * 1000.0
        return DiffResult(entries=entries, computation_time_ms=elapsed_ms)
