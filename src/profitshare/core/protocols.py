"""Protocol interfaces for profit share abstractions.

Persistence is injected wherever it is needed: structural typing,
no inheritance required, easy to test with isinstance().
"""

from __future__ import annotations

from typing import Callable, Protocol, runtime_checkable


# ---------------------------------------------------------------------------
# Persistence: Key/Value Store
# ---------------------------------------------------------------------------

@runtime_checkable
class IKeyValueStore(Protocol):
    """String key/value store holding serialized reports."""

    def list_keys(self, prefix: str) -> list[str]: ...

    def get(self, key: str) -> str | None: ...

    def set(self, key: str, value: str) -> None: ...

    def delete(self, key: str) -> None: ...


# ---------------------------------------------------------------------------
# Clock
# ---------------------------------------------------------------------------

# Returns the current time in epoch milliseconds.
Clock = Callable[[], int]
