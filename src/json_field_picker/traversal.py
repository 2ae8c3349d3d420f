"""Traversal engine: expansion planning, leaf enumeration and statistics.

Every traversal here is depth-first, visits object keys in insertion order
and array elements in index order, and uses an explicit stack so deeply
nested documents never hit the interpreter recursion limit.

Only ``count_expandable_nodes`` short-circuits (at its cap); it exists so a
huge document can be size-classified without a full traversal.  Everything
else visits every node.
"""

from __future__ import annotations

import json
from collections.abc import Iterator

import numpy as np

from json_field_picker.algorithm.config import ExplorerConfig, SizeClass
from json_field_picker.paths import ROOT_PATH_KEY, Path, path_key
from json_field_picker.result import DocumentStats, ExpansionPlan
from json_field_picker.tree.nodes import JsonType, JsonValue, classify, format_number

__all__ = [
    "build_expanded_set_all",
    "build_expanded_set_for_depth",
    "collect_expandable_paths",
    "collect_expandable_paths_to_depth",
    "collect_leaf_paths",
    "compute_stats",
    "count_expandable_nodes",
    "iter_nodes",
    "plan_expansion",
]


def _children(value: JsonValue, kind: JsonType) -> list[tuple[str | int, JsonValue]]:
    if kind == JsonType.OBJECT:
        return list(value.items())  # type: ignore[union-attr]
    if kind == JsonType.ARRAY:
        return list(enumerate(value))  # type: ignore[arg-type]
    return []


def iter_nodes(
    value: JsonValue, base_path: Path = ()
) -> Iterator[tuple[Path, str | int | None, JsonValue, JsonType]]:
    """Yield ``(path, label, value, type)`` for every node in pre-order.

    ``label`` is the key or index under which the node sits in its parent,
    or None for the starting node.
    """
    stack: list[tuple[Path, str | int | None, JsonValue]] = [(base_path, None, value)]
    while stack:
        path, label, node = stack.pop()
        kind = classify(node)
        yield path, label, node, kind
        for step, child in reversed(_children(node, kind)):
            stack.append(((*path, step), step, child))


def count_expandable_nodes(value: JsonValue, cap: int) -> int:
    """Count object/array nodes, stopping as soon as the count reaches ``cap``.

    Returns:
        ``min(number_of_containers, cap)`` for any ``cap >= 0``.
    """
    if cap <= 0:
        return 0

    count = 0
    stack: list[JsonValue] = [value]
    while stack:
        node = stack.pop()
        kind = classify(node)
        if kind == JsonType.OBJECT:
            stack.extend(node.values())  # type: ignore[union-attr]
        elif kind == JsonType.ARRAY:
            stack.extend(node)  # type: ignore[arg-type]
        else:
            continue
        count += 1
        if count >= cap:
            break
    return count


def collect_expandable_paths_to_depth(
    value: JsonValue, depth: int, base_path: Path = ()
) -> list[Path]:
    """Collect container paths at most ``depth`` steps below ``base_path``.

    A container at exactly ``depth`` is included but not descended into.
    A negative depth collects nothing.
    """
    paths: list[Path] = []
    if depth < 0:
        return paths

    stack: list[tuple[Path, JsonValue, int]] = [(base_path, value, depth)]
    while stack:
        path, node, remaining = stack.pop()
        kind = classify(node)
        if kind not in (JsonType.OBJECT, JsonType.ARRAY):
            continue
        paths.append(path)
        if remaining == 0:
            continue
        for step, child in reversed(_children(node, kind)):
            stack.append(((*path, step), child, remaining - 1))
    return paths


def collect_expandable_paths(value: JsonValue, base_path: Path = ()) -> list[Path]:
    """Collect every container path (used by "expand all")."""
    return [
        path
        for path, _label, _node, kind in iter_nodes(value, base_path)
        if kind in (JsonType.OBJECT, JsonType.ARRAY)
    ]


def _as_expansion_set(paths: list[Path]) -> frozenset[str]:
    keys = frozenset(path_key(path) for path in paths)
    if not keys:
        return frozenset({ROOT_PATH_KEY})
    return keys


def build_expanded_set_for_depth(value: JsonValue, depth: int) -> frozenset[str]:
    """Path keys of containers up to ``depth``; ``{ROOT_PATH_KEY}`` if none."""
    return _as_expansion_set(collect_expandable_paths_to_depth(value, depth))


def build_expanded_set_all(value: JsonValue) -> frozenset[str]:
    """Path keys of every container; ``{ROOT_PATH_KEY}`` if none."""
    return _as_expansion_set(collect_expandable_paths(value))


def collect_leaf_paths(value: JsonValue, base_path: Path = ()) -> list[Path]:
    """Collect every path ending in a primitive, prefixed with ``base_path``.

    A primitive ``value`` yields ``[base_path]``; empty containers contribute
    nothing.
    """
    return [
        path
        for path, _label, _node, kind in iter_nodes(value, base_path)
        if kind not in (JsonType.OBJECT, JsonType.ARRAY)
    ]


def _utf8_length(text: str) -> int:
    return len(text.encode("utf-8", "surrogatepass"))


def _encoded_length(node: JsonValue, kind: JsonType, label: str | int | None) -> int:
    """Bytes a node adds to the compact encoding, excluding its children.

    Numbers are measured in their JavaScript spelling (``1`` not ``1.0``).
    """
    size = 0
    if isinstance(label, str):
        # "key":
        size += _utf8_length(json.dumps(label, ensure_ascii=False)) + 1
    if kind in (JsonType.OBJECT, JsonType.ARRAY):
        return size + 2 + max(len(node) - 1, 0)  # type: ignore[arg-type]
    if kind == JsonType.NUMBER:
        return size + len(format_number(node))  # type: ignore[arg-type]
    return size + _utf8_length(json.dumps(node, ensure_ascii=False))


def compute_stats(value: JsonValue) -> DocumentStats:
    """Compute aggregate statistics in a single traversal.

    ``byte_length`` is the UTF-8 length of the compact encoding with numbers
    spelled as a JavaScript runtime prints them.
    """
    type_counts = dict.fromkeys(JsonType, 0)
    total_keys = 0
    leaf_count = 0
    byte_length = 0
    depths: list[int] = []

    for path, label, node, kind in iter_nodes(value):
        type_counts[kind] += 1
        byte_length += _encoded_length(node, kind, label)
        depths.append(len(path))
        if kind == JsonType.OBJECT:
            total_keys += len(node)  # type: ignore[arg-type]
        elif kind != JsonType.ARRAY:
            leaf_count += 1

    histogram = np.bincount(np.asarray(depths, dtype=np.int64))

    return DocumentStats(
        total_nodes=len(depths),
        total_keys=total_keys,
        max_depth=len(histogram) - 1,
        leaf_count=leaf_count,
        type_counts=type_counts,
        byte_length=byte_length,
        depth_histogram=tuple(int(count) for count in histogram),
    )


def plan_expansion(value: JsonValue, config: ExplorerConfig | None = None) -> ExpansionPlan:
    """Choose the initial expansion set for a freshly parsed document.

    The capped container estimate picks a size class; the size class picks
    the auto-expand depth and how many children each container shows.
    """
    config = config if config is not None else ExplorerConfig()
    estimated = count_expandable_nodes(value, config.estimate_cap)

    if estimated > config.very_large_threshold:
        return ExpansionPlan(
            size_class=SizeClass.VERY_LARGE,
            estimated_nodes=estimated,
            expanded=frozenset({ROOT_PATH_KEY}),
            max_children_to_show=config.very_large_max_children,
        )
    if estimated > config.large_threshold:
        return ExpansionPlan(
            size_class=SizeClass.LARGE,
            estimated_nodes=estimated,
            expanded=build_expanded_set_for_depth(value, config.large_expand_depth),
            max_children_to_show=config.large_max_children,
        )
    return ExpansionPlan(
        size_class=SizeClass.NORMAL,
        estimated_nodes=estimated,
        expanded=build_expanded_set_for_depth(value, config.default_expand_depth),
        max_children_to_show=config.normal_max_children,
    )
