"""In-memory backend for unit tests and local development, dict-backed."""

from __future__ import annotations


class MemoryKeyValueStore:
    """Dict-backed IKeyValueStore."""

    def __init__(self) -> None:
        self._store: dict[str, str] = {}

    def list_keys(self, prefix: str) -> list[str]:
        return [k for k in self._store if k.startswith(prefix)]

    def get(self, key: str) -> str | None:
        return self._store.get(key)

    def set(self, key: str, value: str) -> None:
        self._store[key] = value

    def delete(self, key: str) -> None:
        self._store.pop(key, None)
