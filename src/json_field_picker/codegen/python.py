"""PythonGenerator: pandas ``transform(df)`` extraction snippet.

The snippet parses the JSON column of every row and joins one new column
per selection onto the frame.  Upstream path collection may prepend the
column name as a pseudo-root step, so a leading step equal to the column
name is stripped; the other targets receive an already-parsed record and
use paths unmodified.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import TYPE_CHECKING

from json_field_picker.codegen._literals import (
    escape_c_like,
    path_array_literal,
    quote,
    summary,
)
from json_field_picker.codegen.protocols import EMPTY_OUTPUT, TargetLanguage
from json_field_picker.paths import Path

if TYPE_CHECKING:
    from json_field_picker.selection import FieldSelection

__all__ = ["PythonGenerator", "trim_path_for_column"]


def trim_path_for_column(path: Path, column_name: str) -> Path:
    """Drop a leading string step equal to ``column_name``."""
    if path and isinstance(path[0], str) and path[0] == column_name:
        return path[1:]
    return path


class PythonGenerator:
    language = TargetLanguage.PYTHON

    def generate(self, selections: Sequence[FieldSelection], column_name: str) -> str:
        if not selections:
            return EMPTY_OUTPUT

        series_lines = [
            f"            {quote(s.field_name)}: safe_get(obj, "
            f"{path_array_literal(trim_path_for_column(s.path, column_name))})"
            for s in selections
        ]
        doc = summary([s.field_name for s in selections], column_name, escape_c_like)

        return "\n".join(
            [
                "import pandas as pd",
                "",
                "def transform(df):",
                f'    """{doc}"""',
                "    import json",
                "",
                "    def parse_json(val):",
                "        if isinstance(val, (dict, list)):",
                "            return val",
                "        if pd.isna(val):",
                "            return {}",
                "        try:",
                "            return json.loads(val)",
                "        except Exception:",
                "            return {}",
                "",
                "    def safe_get(obj, path):",
                "        current = obj",
                "        for step in path:",
                "            if isinstance(step, int):",
                "                if isinstance(current, (list, tuple)) and 0 <= step < len(current):",
                "                    current = current[step]",
                "                else:",
                "                    return None",
                "            else:",
                "                if isinstance(current, dict):",
                "                    current = current.get(step)",
                "                else:",
                "                    return None",
                "        return current",
                "",
                "    def extract_fields(val):",
                "        obj = parse_json(val)",
                "",
                "        return pd.Series({",
                ",\n".join(series_lines),
                "        })",
                "",
                f"    extracted = df[{quote(column_name)}].apply(extract_fields)",
                "    return df.join(extracted)",
            ]
        )
