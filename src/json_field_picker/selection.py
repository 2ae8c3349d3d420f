"""Selection registry: field naming and toggle / subtree-select semantics.

A selection pairs a canonical path with the output field name the code
generators emit.  Selections are keyed by the segment-derived selection key
(see ``paths.create_selection_key``), so one key stands for a structural
position rather than a concrete index: toggling ``items[0].v`` and then
``items[1].v`` selects and then deselects the same rule.

``SelectionRegistry`` is an immutable snapshot.  Every mutator returns a new
registry and leaves the receiver untouched, so a renderer holding the old
snapshot never observes a half-applied change.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Mapping, Sequence
from dataclasses import dataclass
from typing import Any

from json_field_picker.paths import (
    Path,
    Segment,
    SegmentType,
    build_segments,
    create_selection_key,
    normalize_path,
    path_key,
)
from json_field_picker.traversal import collect_leaf_paths
from json_field_picker.tree.nodes import JsonValue
from json_field_picker.tree.normalizer import FieldNameSanitizer

__all__ = [
    "FieldSelection",
    "SelectionRegistry",
    "SubtreeSelection",
    "ensure_unique_field_name",
    "generate_field_name",
    "sanitize_field_name",
]

# Module-level sanitizer (stateless, safe to share)
_sanitizer = FieldNameSanitizer()


@dataclass(frozen=True, slots=True)
class FieldSelection:
    """A selected path and the field name it is extracted under."""

    field_name: str
    path: Path


@dataclass(frozen=True, slots=True)
class SubtreeSelection:
    """Outcome of ``SelectionRegistry.select_subtree``.

    At most one of ``added`` / ``removed`` is non-zero; both are zero only
    when the subtree has no leaves.
    """

    registry: SelectionRegistry
    added: int = 0
    removed: int = 0


def sanitize_field_name(raw: str | None) -> str:
    """Sanitize a raw key into a lowercase identifier-safe field name."""
    return _sanitizer.sanitize(raw)


def generate_field_name(segments: Sequence[Segment], fallback_path: Sequence[Any]) -> str:
    """Derive a base field name for a path.

    The last segment with a non-empty key names the field; an ``array``
    segment gets a ``_value`` suffix.  Paths without usable segments name
    the field from their last raw step (``value_<index>`` for an index).
    """
    for segment in reversed(segments):
        if not segment.key:
            continue
        if segment.type == SegmentType.ARRAY_ELEMENT:
            return sanitize_field_name(f"{segment.key}_value")
        return sanitize_field_name(segment.key)

    if not fallback_path:
        return sanitize_field_name(None)
    last = fallback_path[-1]
    if isinstance(last, int):
        return sanitize_field_name(f"value_{last}")
    return sanitize_field_name(str(last))


def ensure_unique_field_name(
    base_name: str, selections: Iterable[FieldSelection]
) -> str:
    """Return ``base_name``, or the first free ``base_name_N`` (N >= 2).

    Only assigned field names are checked, never raw keys.
    """
    used = {selection.field_name for selection in selections}
    if base_name not in used:
        return base_name
    counter = 2
    while f"{base_name}_{counter}" in used:
        counter += 1
    return f"{base_name}_{counter}"


def _identify(path: Iterable[Any]) -> tuple[Path, list[Segment], str]:
    normalized = normalize_path(path)
    segments = build_segments(normalized)
    return normalized, segments, create_selection_key(segments, normalized)


class SelectionRegistry:
    """Immutable, insertion-ordered mapping of selection key -> FieldSelection.

    Example::

        registry = SelectionRegistry()
        registry = registry.toggle(["a", "b"])
        registry = registry.toggle(["a", "c"])
        [s.field_name for s in registry.selections()]   # ["b", "c"]
        len(registry.toggle(["a", "b"]))                # 1
    """

    __slots__ = ("_selections",)

    def __init__(self, selections: Mapping[str, FieldSelection] | None = None) -> None:
        self._selections: dict[str, FieldSelection] = dict(selections or {})

    # ------------------------------------------------------------------
    # Read side
    # ------------------------------------------------------------------

    def __len__(self) -> int:
        return len(self._selections)

    def __contains__(self, key: object) -> bool:
        return key in self._selections

    def __iter__(self) -> Iterator[str]:
        return iter(self._selections)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, SelectionRegistry):
            return NotImplemented
        return list(self._selections.items()) == list(other._selections.items())

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"SelectionRegistry({self._selections!r})"

    def get(self, key: str) -> FieldSelection | None:
        return self._selections.get(key)

    def keys(self) -> list[str]:
        """Selection keys in insertion order."""
        return list(self._selections)

    def items(self) -> list[tuple[str, FieldSelection]]:
        return list(self._selections.items())

    def selections(self) -> list[FieldSelection]:
        """Selections in insertion order (the order code is generated in)."""
        return list(self._selections.values())

    def selected_path_keys(self) -> frozenset[str]:
        """Path keys of the concrete paths that were selected."""
        return frozenset(path_key(s.path) for s in self._selections.values())

    def key_for(self, path: Iterable[Any]) -> str:
        """The selection key a path would toggle."""
        return _identify(path)[2]

    def is_selected(self, path: Iterable[Any]) -> bool:
        return self.key_for(path) in self._selections

    # ------------------------------------------------------------------
    # Transitions (each returns a new registry)
    # ------------------------------------------------------------------

    def toggle(self, path: Iterable[Any]) -> SelectionRegistry:
        """Deselect the path's key if present, otherwise select it.

        Applying ``toggle`` twice with no change in between restores the
        original set of selection keys.  A re-selected key moves to the end
        and gets a freshly assigned field name.
        """
        normalized, segments, key = _identify(path)
        updated = dict(self._selections)
        if key in updated:
            del updated[key]
            return SelectionRegistry(updated)

        base_name = generate_field_name(segments, normalized)
        field_name = ensure_unique_field_name(base_name, updated.values())
        updated[key] = FieldSelection(field_name=field_name, path=normalized)
        return SelectionRegistry(updated)

    def select_subtree(self, path: Iterable[Any], value: JsonValue) -> SubtreeSelection:
        """Bulk toggle every leaf under ``value`` (located at ``path``).

        If every leaf key is already selected they are all removed;
        otherwise every missing one is added and present ones stay as they are.
        """
        leaves = [_identify(leaf) for leaf in collect_leaf_paths(value, tuple(path))]
        if not leaves:
            return SubtreeSelection(registry=self)

        updated = dict(self._selections)
        if all(key in updated for _path, _segments, key in leaves):
            removed = 0
            for _path, _segments, key in leaves:
                if updated.pop(key, None) is not None:
                    removed += 1
            return SubtreeSelection(registry=SelectionRegistry(updated), removed=removed)

        added = 0
        for normalized, segments, key in leaves:
            if key in updated:
                continue
            base_name = generate_field_name(segments, normalized)
            field_name = ensure_unique_field_name(base_name, updated.values())
            updated[key] = FieldSelection(field_name=field_name, path=normalized)
            added += 1
        return SubtreeSelection(registry=SelectionRegistry(updated), added=added)

    def rename(self, key: str, new_name: str) -> SelectionRegistry:
        """Overwrite a selection's field name.

        No uniqueness check is applied, so two selections may share a name.
        An unknown key returns the registry unchanged.
        """
        current = self._selections.get(key)
        if current is None:
            return self
        updated = dict(self._selections)
        updated[key] = FieldSelection(field_name=new_name, path=current.path)
        return SelectionRegistry(updated)

    def clear(self) -> SelectionRegistry:
        return SelectionRegistry()
