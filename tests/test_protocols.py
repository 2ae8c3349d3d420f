"""Tests for the Storage protocol and MemoryStorage."""

from __future__ import annotations

from json_field_picker.protocols import MemoryStorage, Storage


class TestStorageProtocol:
    def test_memory_storage_conforms(self) -> None:
        assert isinstance(MemoryStorage(), Storage)

    def test_structural_conformance(self) -> None:
        class DictStorage:
            def __init__(self) -> None:
                self.data: dict[str, str] = {}

            def load(self, key: str) -> str | None:
                return self.data.get(key)

            def save(self, key: str, value: str) -> None:
                self.data[key] = value

        assert isinstance(DictStorage(), Storage)

    def test_missing_method_does_not_conform(self) -> None:
        class ReadOnly:
            def load(self, key: str) -> str | None:
                return None

        assert not isinstance(ReadOnly(), Storage)


class TestMemoryStorage:
    def test_round_trip(self) -> None:
        storage = MemoryStorage()
        assert storage.load("k") is None
        storage.save("k", "v")
        assert storage.load("k") == "v"

    def test_overwrite(self) -> None:
        storage = MemoryStorage()
        storage.save("k", "1")
        storage.save("k", "2")
        assert storage.load("k") == "2"
