"""json-field-picker - pick fields out of JSON documents and generate extraction code."""

from __future__ import annotations

from json_field_picker.algorithm.config import ExplorerConfig, SizeClass
from json_field_picker.algorithm.differ import StructuralDiffer, compute_diff
from json_field_picker.api import diff, extraction_code, select_paths
from json_field_picker.codegen import TargetLanguage, generate_code
from json_field_picker.exceptions import JsonFieldPickerError, ParseError
from json_field_picker.explorer import Explorer, ExplorerState
from json_field_picker.paths import (
    ROOT_PATH_KEY,
    build_segments,
    create_selection_key,
    normalize_path,
)
from json_field_picker.result import DiffResult, DiffStatus, DocumentStats, ExpansionPlan
from json_field_picker.search import SearchMatch, search
from json_field_picker.selection import FieldSelection, SelectionRegistry
from json_field_picker.traversal import (
    collect_leaf_paths,
    compute_stats,
    count_expandable_nodes,
    plan_expansion,
)
from json_field_picker.tree import JsonType, classify, parse_json

__version__: str = "0.1.0"
__all__: list[str] = [
    "ROOT_PATH_KEY",
    "DiffResult",
    "DiffStatus",
    "DocumentStats",
    "ExpansionPlan",
    "Explorer",
    "ExplorerConfig",
    "ExplorerState",
    "FieldSelection",
    "JsonFieldPickerError",
    "JsonType",
    "ParseError",
    "SearchMatch",
    "SelectionRegistry",
    "SizeClass",
    "StructuralDiffer",
    "TargetLanguage",
    "build_segments",
    "classify",
    "collect_leaf_paths",
    "compute_diff",
    "compute_stats",
    "count_expandable_nodes",
    "create_selection_key",
    "diff",
    "extraction_code",
    "generate_code",
    "normalize_path",
    "parse_json",
    "plan_expansion",
    "search",
    "select_paths",
]
