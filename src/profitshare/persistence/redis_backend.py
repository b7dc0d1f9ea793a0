"""Redis backend implementing IKeyValueStore."""

from __future__ import annotations

import redis

from profitshare.core.exceptions import StorageError


class RedisKeyValueStore:
    """Production IKeyValueStore backed by Redis string keys."""

    SCAN_COUNT = 500

    def __init__(self, host: str = "localhost", port: int = 6379, db: int = 0) -> None:
        self._host = host
        self._port = port
        self._db = db
        self._client = redis.Redis(
            host=host, port=port, db=db, decode_responses=True,
        )

    def list_keys(self, prefix: str) -> list[str]:
        try:
            return list(self._client.scan_iter(match=f"{prefix}*", count=self.SCAN_COUNT))
        except Exception as exc:
            raise StorageError(f"Redis SCAN failed for prefix={prefix!r}: {exc}") from exc

    def get(self, key: str) -> str | None:
        try:
            return self._client.get(key)
        except Exception as exc:
            raise StorageError(f"Redis GET failed for key={key!r}: {exc}") from exc

    def set(self, key: str, value: str) -> None:
        try:
            self._client.set(key, value)
        except Exception as exc:
            raise StorageError(f"Redis SET failed for key={key!r}: {exc}") from exc

    def delete(self, key: str) -> None:
        try:
            self._client.delete(key)
        except Exception as exc:
            raise StorageError(f"Redis DELETE failed for key={key!r}: {exc}") from exc
