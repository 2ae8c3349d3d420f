"""FieldNameSanitizer: converts raw JSON keys into safe output field names.

Output names are lowercase identifiers made of ``[0-9a-z_]`` that every
code-generation target can use as a dictionary key or column name:
- "First Name"  -> "first_name"
- "user-id"     -> "user_id"
- "__private"   -> "private"
- "2024 total"  -> "field_2024_total"
- "!!!"         -> "value"
"""

import re

# Compiled regex patterns (module-level, compiled once)

# Runs of whitespace become a single underscore
_WHITESPACE = re.compile(r"\s+")

# Anything that is not an ASCII letter, digit or underscore
_INVALID = re.compile(r"[^0-9a-zA-Z_]")

# Repeated underscores collapse to one
_UNDERSCORES = re.compile(r"_+")

# Leading underscores are dropped
_LEADING_UNDERSCORES = re.compile(r"^_+")

# Names must not start with a digit
_LEADING_DIGIT = re.compile(r"^\d")

DEFAULT_FIELD_NAME = "value"
DIGIT_PREFIX = "field_"


class FieldNameSanitizer:
    """Sanitizes raw keys into lowercase identifier-safe field names.

    Example usage:
        sanitizer = FieldNameSanitizer()
        sanitizer.sanitize("First Name")   # "first_name"
        sanitizer.sanitize("123")          # "field_123"
        sanitizer.sanitize("")             # "value"
    """

    def sanitize(self, raw: str | None) -> str:
        """Sanitize a raw key into a field name.

        Processing pipeline (applied in order):
        1. Trim surrounding whitespace.
        2. Replace whitespace runs with "_".
        3. Replace characters outside [0-9A-Za-z_] with "_".
        4. Collapse repeated "_" and strip leading "_".
        5. Lowercase.
        6. Empty result -> "value"; leading digit -> "field_" prefix.
        """
        s = (DEFAULT_FIELD_NAME if raw is None else str(raw)).strip()
        s = _WHITESPACE.sub("_", s)
        s = _INVALID.sub("_", s)
        s = _UNDERSCORES.sub("_", s)
        s = _LEADING_UNDERSCORES.sub("", s).lower()

        if not s:
            s = DEFAULT_FIELD_NAME
        if _LEADING_DIGIT.match(s):
            s = f"{DIGIT_PREFIX}{s}"
        return s
