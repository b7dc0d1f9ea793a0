"""Shared test doubles: memory store plus a store that always fails."""

from __future__ import annotations

from profitshare.core.exceptions import StorageError
from profitshare.persistence.memory_backend import MemoryKeyValueStore


class FailingKeyValueStore:
    """IKeyValueStore whose every call raises StorageError."""

    def list_keys(self, prefix: str) -> list[str]:
        raise StorageError("store unavailable")

    def get(self, key: str) -> str | None:
        raise StorageError("store unavailable")

    def set(self, key: str, value: str) -> None:
        raise StorageError("store unavailable")

    def delete(self, key: str) -> None:
        raise StorageError("store unavailable")


__all__ = ["FailingKeyValueStore", "MemoryKeyValueStore"]
