"""Integration tests for the json-field-picker pytest plugin.

These tests verify that the assert_json_unchanged fixture is auto-discovered
via the pytest11 entry point and behaves correctly.

NOTE: These tests require json-field-picker to be installed (even in editable mode
via ``pip install -e .``). The pytest11 entry point is only registered at
install time -- running from a raw source checkout without installing will not
discover the fixture.
"""

from __future__ import annotations

import subprocess
import sys
from pathlib import Path
from typing import Any

import pytest


def test_fixture_passes_identical_docs(assert_json_unchanged: Any) -> None:
    """Structurally identical documents pass regardless of key order."""
    assert_json_unchanged({"a": 1, "b": [1, 2]}, {"b": [1, 2], "a": 1})


def test_fixture_int_and_float_are_equal(assert_json_unchanged: Any) -> None:
    assert_json_unchanged({"n": 1.0}, {"n": 1})


def test_fixture_fails_on_modification(assert_json_unchanged: Any) -> None:
    with pytest.raises(AssertionError, match=r'\["a"\]: modified'):
        assert_json_unchanged({"a": 2}, {"a": 1})


def test_fixture_reports_added_and_removed(assert_json_unchanged: Any) -> None:
    """Statuses read from expected to actual: extra actual keys are 'added'."""
    with pytest.raises(AssertionError) as exc_info:
        assert_json_unchanged({"new": 1}, {"old": 1})

    error_message = str(exc_info.value)
    assert "differ at 2 path(s)" in error_message
    assert '["old"]: removed' in error_message
    assert '["new"]: added' in error_message
    assert "actual:" in error_message
    assert "expected:" in error_message


def test_fixture_returns_callable(assert_json_unchanged: Any) -> None:
    """The fixture should return a callable, not None or a direct assertion result."""
    assert callable(assert_json_unchanged), (
        "assert_json_unchanged fixture must return a callable, not a direct value"
    )


def test_plugin_discovery() -> None:
    """Verify assert_json_unchanged appears in pytest --fixtures output."""
    result = subprocess.run(
        [sys.executable, "-m", "pytest", "--fixtures", "-q"],
        capture_output=True,
        text=True,
        cwd=str(Path(__file__).resolve().parents[2]),
    )
    assert "assert_json_unchanged" in result.stdout, (
        f"assert_json_unchanged not found in pytest --fixtures output.\n"
        f"stdout:\n{result.stdout}\n"
        f"stderr:\n{result.stderr}"
    )
