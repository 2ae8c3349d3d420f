"""String-literal and comment escaping shared by the code generators.

Every target accepts double-quoted strings with backslash escapes; they
differ only in how an arbitrary code point is spelled (``\\u0001`` versus
Rust's ``\\u{1}``) and in whether lone surrogates are representable.
"""

from __future__ import annotations

from collections.abc import Callable, Sequence

from json_field_picker.paths import PathStep

_SIMPLE_ESCAPES = {
    "\\": "\\\\",
    '"': '\\"',
    "\n": "\\n",
    "\r": "\\r",
    "\t": "\\t",
}


def _u4(code_point: int) -> str:
    return f"\\u{code_point:04x}"


def _u_braced(code_point: int) -> str:
    return f"\\u{{{code_point:x}}}"


def _escape(
    text: str,
    spell: Callable[[int], str],
    surrogates_allowed: bool,
) -> str:
    out: list[str] = []
    for char in text:
        simple = _SIMPLE_ESCAPES.get(char)
        if simple is not None:
            out.append(simple)
            continue
        code_point = ord(char)
        if code_point < 0x20 or code_point == 0x7F:
            out.append(spell(code_point))
        elif 0xD800 <= code_point <= 0xDFFF:
            out.append(spell(code_point) if surrogates_allowed else spell(0xFFFD))
        else:
            out.append(char)
    return "".join(out)


def escape_c_like(text: str) -> str:
    """Escape for Python, JavaScript and TypeScript double-quoted strings."""
    return _escape(text, _u4, surrogates_allowed=True)


def escape_go(text: str) -> str:
    return _escape(text, _u4, surrogates_allowed=False)


def escape_rust(text: str) -> str:
    return _escape(text, _u_braced, surrogates_allowed=False)


def quote(text: str, escape: Callable[[str], str] = escape_c_like) -> str:
    return f'"{escape(text)}"'


def comment_safe(text: str, escape: Callable[[str], str] = escape_c_like) -> str:
    """Escape text for embedding in a comment or docstring.

    The escaped form has no raw newlines or quotes, and ``*/`` is broken up
    so block comments cannot be closed early.
    """
    return escape(text).replace("*/", "*\\/")


def path_array_literal(
    path: Sequence[PathStep], escape: Callable[[str], str] = escape_c_like
) -> str:
    """Render ``["a", 0]``-style array literals (Python / JS / TS)."""
    parts = [str(step) if isinstance(step, int) else quote(step, escape) for step in path]
    return f"[{', '.join(parts)}]"


def summary(field_names: Sequence[str], column_name: str, escape: Callable[[str], str]) -> str:
    """The one-line description heading every generated snippet."""
    names = ", ".join(comment_safe(name, escape) for name in field_names)
    column = comment_safe(column_name, escape)
    return f'Extracts {len(field_names)} field(s): {names} from JSON column "{column}".'
