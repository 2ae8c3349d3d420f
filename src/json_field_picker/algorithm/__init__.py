"""algorithm subpackage: size configuration and the structural differ.

Import from this module (not from sub-modules directly) to stay on the
stable public interface.

Example::

    from json_field_picker.algorithm import StructuralDiffer

    result = StructuralDiffer().compare({"a": 1}, {"a": 2})
    dict(result.entries)   # {'["a"]': 'modified'}
"""

from __future__ import annotations

from json_field_picker.algorithm.config import ExplorerConfig, SizeClass
from json_field_picker.algorithm.differ import DiffStatus, StructuralDiffer, compute_diff

__all__ = ["DiffStatus", "ExplorerConfig", "SizeClass", "StructuralDiffer", "compute_diff"]
