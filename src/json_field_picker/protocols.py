"""Storage Protocol for the optional persistence collaborator.

Defines the structural interface a key-value store must satisfy to let an
``Explorer`` remember its last input text, column name and bookmarks.  Any
class with conformant ``load`` and ``save`` methods passes ``isinstance``
checks, no inheritance required.  The core works with no storage at all.

Example::

    from json_field_picker.protocols import Storage

    class DictStorage:
        def __init__(self):
            self.data = {}

        def load(self, key: str) -> str | None:
            return self.data.get(key)

        def save(self, key: str, value: str) -> None:
            self.data[key] = value

    assert isinstance(DictStorage(), Storage)  # True: structural conformance
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable

__all__ = ["MemoryStorage", "Storage"]


@runtime_checkable
class Storage(Protocol):
    """Structural protocol for key-value persistence.

    - ``load`` returns the stored string, or None when the key is unset.
    - ``save`` stores a string under a key, replacing any previous value.
    Either method may raise; the ``Explorer`` reports such failures as
    recoverable messages.
    """

    def load(self, key: str) -> str | None: ...

    def save(self, key: str, value: str) -> None: ...


class MemoryStorage:
    """In-process ``Storage`` backed by a dict."""

    def __init__(self) -> None:
        self._data: dict[str, str] = {}

    def load(self, key: str) -> str | None:
        return self._data.get(key)

    def save(self, key: str, value: str) -> None:
        self._data[key] = value
