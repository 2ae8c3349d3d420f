"""pytest plugin for json-field-picker.

Auto-discovered by pytest via the pytest11 entry point declared in pyproject.toml.
When the package is installed (even in editable mode), pytest discovers this plugin
automatically -- no conftest.py changes are needed.

Source: https://docs.pytest.org/en/stable/how-to/writing_plugins.html
"""

from __future__ import annotations

from typing import Any

import pytest

from json_field_picker import compute_diff


@pytest.fixture(scope="session")
def assert_json_unchanged() -> Any:
    """Fixture that returns a callable structural-equality asserter.

    The fixture is session-scoped because the returned callable is stateless
    (delegates to compute_diff(), which builds a fresh result per call).

    Usage in tests::

        def test_roundtrip(assert_json_unchanged):
            assert_json_unchanged(json.loads(dumped), original)

        def test_detects_change(assert_json_unchanged):
            with pytest.raises(AssertionError, match=r"modified"):
                assert_json_unchanged({"a": 1}, {"a": 2})

    Returns:
        A callable ``_assert(actual, expected) -> None`` that raises
        ``AssertionError`` listing every differing path.
    """

    def _assert(actual: Any, expected: Any) -> None:
        """Assert that two JSON values are structurally identical.

        Statuses are reported from ``expected`` to ``actual``: a path only in
        ``actual`` is "added", one only in ``expected`` is "removed".

        Raises:
            AssertionError: When any path differs, with one line per path.
        """
        entries = compute_diff(expected, actual)
        if entries:
            lines = "\n".join(f"  {path}: {status}" for path, status in entries.items())
            raise AssertionError(
                f"JSON documents differ at {len(entries)} path(s):\n{lines}\n"
                f"  actual:   {actual}\n"
                f"  expected: {expected}"
            )

    return _assert
