"""Packaging correctness verification for json-field-picker.

Tests validate:
- Base install imports without optional extras
- py.typed marker ships with the package
- Pytest plugin entry point is registered
- Package metadata is correct
"""

from __future__ import annotations

import importlib.metadata
from pathlib import Path

PROJECT_ROOT = Path(__file__).parent.parent.parent


class TestBaseInstall:
    def test_import_json_field_picker(self) -> None:
        import json_field_picker

        assert hasattr(json_field_picker, "Explorer")
        assert hasattr(json_field_picker, "diff")
        assert hasattr(json_field_picker, "extraction_code")

    def test_py_typed_marker_present(self) -> None:
        import json_field_picker

        package_dir = Path(json_field_picker.__file__).parent
        assert (package_dir / "py.typed").exists()


class TestMetadata:
    def test_version_matches_package(self) -> None:
        import json_field_picker

        assert importlib.metadata.version("json-field-picker") == json_field_picker.__version__

    def test_pytest_plugin_entry_point(self) -> None:
        entry_points = importlib.metadata.entry_points(group="pytest11")
        names = {ep.name: ep.value for ep in entry_points}
        assert names.get("json_field_picker") == "json_field_picker.integrations._pytest_plugin"

    def test_declared_dependencies(self) -> None:
        requires = importlib.metadata.requires("json-field-picker") or []
        declared = {req.split(">")[0].split("=")[0].split(";")[0].strip() for req in requires}
        assert {"cachetools", "numpy"} <= declared

    def test_pyproject_present(self) -> None:
        assert (PROJECT_ROOT / "pyproject.toml").exists()
