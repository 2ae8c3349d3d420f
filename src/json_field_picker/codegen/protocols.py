"""CodeGenerator Protocol and TargetLanguage enum for the codegen extension point.

Defines the structural interface every target renderer satisfies.  Users can
plug in their own generator without inheriting from any base class: any
object with a ``language`` attribute and a conformant ``generate`` method
passes ``isinstance`` checks.

Example::

    from json_field_picker.codegen.protocols import CodeGenerator, TargetLanguage

    class CsvHeaderGenerator:
        language = TargetLanguage.PYTHON

        def generate(self, selections, column_name):
            return ",".join(s.field_name for s in selections)

    assert isinstance(CsvHeaderGenerator(), CodeGenerator)
"""

from __future__ import annotations

from collections.abc import Sequence
from enum import StrEnum
from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from json_field_picker.selection import FieldSelection

# Returned by every generator when there is nothing to extract
EMPTY_OUTPUT = ""


class TargetLanguage(StrEnum):
    """Languages extraction code can be generated for."""

    PYTHON = "python"
    JAVASCRIPT = "javascript"
    TYPESCRIPT = "typescript"
    GO = "go"
    RUST = "rust"


@runtime_checkable
class CodeGenerator(Protocol):
    """Structural protocol for code generators.

    ``generate`` must:
    - Return ``EMPTY_OUTPUT`` when ``selections`` is empty.
    - Emit one field per selection, in the given order.
    - Treat field names as already safe: quote them, never re-sanitize.
    - Produce extraction logic that yields the target's null value, never an
      error, when a path step does not resolve.
    """

    language: TargetLanguage

    def generate(
        self, selections: Sequence[FieldSelection], column_name: str
    ) -> str: ...
