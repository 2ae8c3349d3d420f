"""Tests for ExplorerConfig validation and SizeClass."""

from __future__ import annotations

import dataclasses

import pytest

from json_field_picker.algorithm.config import ExplorerConfig, SizeClass


class TestDefaults:
    def test_default_values(self) -> None:
        config = ExplorerConfig()
        assert config.estimate_cap == 10_000
        assert config.large_threshold == 2_000
        assert config.very_large_threshold == 5_000
        assert config.default_expand_depth == 0
        assert config.large_expand_depth == 0
        assert config.normal_max_children == 200
        assert config.large_max_children == 100
        assert config.very_large_max_children == 50
        assert config.code_cache_size == 64

    def test_frozen(self) -> None:
        config = ExplorerConfig()
        with pytest.raises(dataclasses.FrozenInstanceError):
            config.large_threshold = 1  # type: ignore[misc]

    def test_size_class_values(self) -> None:
        assert [c.value for c in SizeClass] == ["normal", "large", "very_large"]


class TestValidation:
    def test_negative_cap(self) -> None:
        with pytest.raises(ValueError, match="estimate_cap"):
            ExplorerConfig(estimate_cap=-1)

    def test_negative_large_threshold(self) -> None:
        with pytest.raises(ValueError, match="large_threshold"):
            ExplorerConfig(large_threshold=-1)

    def test_thresholds_must_be_ordered(self) -> None:
        with pytest.raises(ValueError, match="very_large_threshold"):
            ExplorerConfig(large_threshold=10, very_large_threshold=5)

    def test_negative_depth(self) -> None:
        with pytest.raises(ValueError, match="expand depths"):
            ExplorerConfig(default_expand_depth=-1)

    @pytest.mark.parametrize(
        "name",
        [
            "normal_max_children",
            "large_max_children",
            "very_large_max_children",
            "code_cache_size",
        ],
    )
    def test_positive_counts(self, name: str) -> None:
        with pytest.raises(ValueError, match=name):
            ExplorerConfig(**{name: 0})

    def test_equal_thresholds_allowed(self) -> None:
        config = ExplorerConfig(large_threshold=5, very_large_threshold=5)
        assert config.large_threshold == config.very_large_threshold
