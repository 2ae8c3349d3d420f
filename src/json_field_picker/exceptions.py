"""Exception hierarchy for json-field-picker.

Only parsing can fail: traversal, diffing, selection and code generation
are total over well-formed values.
"""

from __future__ import annotations

__all__ = ["JsonFieldPickerError", "ParseError"]


class JsonFieldPickerError(Exception):
    """Base class for all json-field-picker errors."""


class ParseError(JsonFieldPickerError, ValueError):
    """Raised when input text is not strict JSON.

    Attributes:
        message: Human-readable description derived from the parser error.
        line:    1-based line of the failure, or None when unknown.
        column:  1-based column of the failure, or None when unknown.
    """

    def __init__(
        self,
        message: str,
        line: int | None = None,
        column: int | None = None,
    ) -> None:
        self.message = message
        self.line = line
        self.column = column
        if line is not None and column is not None:
            super().__init__(f"{message} (line {line}, column {column})")
        else:
            super().__init__(message)
