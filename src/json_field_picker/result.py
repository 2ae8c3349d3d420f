"""Frozen result types returned by the core.

This module provides the immutable value objects handed to the presentation
layer: document statistics, the expansion plan chosen after a parse, the
outcome of a structural comparison, and user-visible status messages.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from enum import StrEnum, auto
from types import MappingProxyType
from typing import TYPE_CHECKING

from json_field_picker.tree.nodes import JsonType

if TYPE_CHECKING:
    from json_field_picker.algorithm.config import SizeClass

__all__ = [
    "DiffResult",
    "DiffStatus",
    "DocumentStats",
    "ExpansionPlan",
    "Message",
    "MessageKind",
]


class DiffStatus(StrEnum):
    """Status of a path that differs between two documents."""

    ADDED = auto()
    REMOVED = auto()
    MODIFIED = auto()


class MessageKind(StrEnum):
    SUCCESS = auto()
    ERROR = auto()


@dataclass(frozen=True, slots=True)
class Message:
    """A recoverable, user-visible status line."""

    kind: MessageKind
    text: str

    @classmethod
    def success(cls, text: str) -> Message:
        return cls(MessageKind.SUCCESS, text)

    @classmethod
    def error(cls, text: str) -> Message:
        return cls(MessageKind.ERROR, text)

    @property
    def is_error(self) -> bool:
        return self.kind == MessageKind.ERROR


@dataclass(frozen=True, slots=True)
class DocumentStats:
    """Aggregate statistics of a JSON value, produced in one traversal.

    Attributes:
        total_nodes: Every value in the tree, root included.
        total_keys: Sum of key counts over all objects.
        max_depth: Distance of the deepest node from the root (root = 0).
        leaf_count: Number of primitive-valued positions.
        type_counts: Node count per JsonType; every type is present.
        byte_length: UTF-8 byte length of the compact JSON encoding.
        depth_histogram: ``depth_histogram[d]`` nodes sit at depth ``d``.
    """

    total_nodes: int
    total_keys: int
    max_depth: int
    leaf_count: int
    type_counts: Mapping[JsonType, int]
    byte_length: int
    depth_histogram: tuple[int, ...]


@dataclass(frozen=True, slots=True)
class ExpansionPlan:
    """Initial expansion state chosen after a parse.

    Attributes:
        size_class: Size bucket from the capped container estimate.
        estimated_nodes: Capped container count used for classification.
        expanded: Path keys of containers that start open; never empty.
        max_children_to_show: Children rendered per container before truncation.
    """

    size_class: SizeClass
    estimated_nodes: int
    expanded: frozenset[str]
    max_children_to_show: int


@dataclass(frozen=True, slots=True)
class DiffResult:
    """Result of a structural comparison.

    Attributes:
        entries: Read-only view of path key -> status for every differing path,
            in traversal order.
        computation_time_ms: Wall-clock duration of the comparison in milliseconds.
    """

    entries: Mapping[str, DiffStatus] = field(default_factory=dict)
    computation_time_ms: float = 0.0

    def __post_init__(self) -> None:
        object.__setattr__(self, "entries", MappingProxyType(dict(self.entries)))

    def _count(self, status: DiffStatus) -> int:
        return sum(1 for value in self.entries.values() if value == status)

    @property
    def added(self) -> int:
        return self._count(DiffStatus.ADDED)

    @property
    def removed(self) -> int:
        return self._count(DiffStatus.REMOVED)

    @property
    def modified(self) -> int:
        return self._count(DiffStatus.MODIFIED)

    @property
    def is_identical(self) -> bool:
        return not self.entries

    def __len__(self) -> int:
        return len(self.entries)
