"""Tree subpackage for the canonical JSON value model.

Re-exports the public API for the tree module:
- JsonType: StrEnum of the six JSON variant tags
- classify: maps a parsed value to its JsonType
- parse_json: strict JSON text -> canonical value
- FieldNameSanitizer: turns raw keys into identifier-safe field names
"""

from json_field_picker.tree.builder import parse_json
from json_field_picker.tree.nodes import (
    JsonType,
    JsonValue,
    classify,
    display_text,
    format_number,
    format_value,
    is_container,
)
from json_field_picker.tree.normalizer import FieldNameSanitizer

__all__ = [
    "FieldNameSanitizer",
    "JsonType",
    "JsonValue",
    "classify",
    "display_text",
    "format_number",
    "format_value",
    "is_container",
    "parse_json",
]
