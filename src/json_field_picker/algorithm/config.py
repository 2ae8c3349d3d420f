"""ExplorerConfig and SizeClass for document size classification.

ExplorerConfig is a frozen (immutable) dataclass holding the thresholds that
choose how much of a freshly parsed document starts expanded and how many
children per container the renderer shows.  SizeClass names the three
buckets a document can fall into.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum, auto


class SizeClass(StrEnum):
    """Size bucket of a parsed document, by estimated container count.

    - NORMAL:     At or below ``large_threshold``.
    - LARGE:      Above ``large_threshold``.
    - VERY_LARGE: Above ``very_large_threshold``; the tree starts fully collapsed.
    """

    NORMAL = auto()
    LARGE = auto()
    VERY_LARGE = auto()


@dataclass(frozen=True, slots=True)
class ExplorerConfig:
    """Immutable configuration for expansion planning and code caching.

    Attributes:
        estimate_cap: Stop counting containers once this many are seen.  The
            estimate only classifies size, so it never needs to be exact.
        large_threshold: Estimated containers above which a document is LARGE.
        very_large_threshold: Estimated containers above which a document is
            VERY_LARGE.  Must be >= ``large_threshold``.
        default_expand_depth: Depth expanded after parsing a NORMAL document.
        large_expand_depth: Depth expanded after parsing a LARGE document.
        normal_max_children: Children shown per container for NORMAL documents.
        large_max_children: Children shown per container for LARGE documents.
        very_large_max_children: Children shown per container for VERY_LARGE
            documents.
        code_cache_size: Generated snippets kept in the per-explorer LRU cache.
    """

    estimate_cap: int = 10_000
    large_threshold: int = 2_000
    very_large_threshold: int = 5_000
    default_expand_depth: int = 0
    large_expand_depth: int = 0
    normal_max_children: int = 200
    large_max_children: int = 100
    very_large_max_children: int = 50
    code_cache_size: int = 64

    def __post_init__(self) -> None:
        if self.estimate_cap < 0:
            msg = f"estimate_cap must be >= 0, got {self.estimate_cap}"
            raise ValueError(msg)
        if self.large_threshold < 0:
            msg = f"large_threshold must be >= 0, got {self.large_threshold}"
            raise ValueError(msg)
        if self.very_large_threshold < self.large_threshold:
            msg = (
                "very_large_threshold must be >= large_threshold, got "
                f"{self.very_large_threshold} < {self.large_threshold}"
            )
            raise ValueError(msg)
        if self.default_expand_depth < 0 or self.large_expand_depth < 0:
            msg = (
                "expand depths must be >= 0, got "
                f"{self.default_expand_depth} and {self.large_expand_depth}"
            )
            raise ValueError(msg)
        for name in (
            "normal_max_children",
            "large_max_children",
            "very_large_max_children",
            "code_cache_size",
        ):
            if getattr(self, name) < 1:
                msg = f"{name} must be >= 1, got {getattr(self, name)}"
                raise ValueError(msg)
