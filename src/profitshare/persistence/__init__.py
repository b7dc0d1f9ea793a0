"""Pluggable report stores behind the IKeyValueStore protocol."""

from __future__ import annotations

from profitshare.core.config import AppSettings
from profitshare.persistence.memory_backend import MemoryKeyValueStore
from profitshare.persistence.protocols import IKeyValueStore
from profitshare.persistence.redis_backend import RedisKeyValueStore
from profitshare.persistence.s3_backend import S3KeyValueStore


def create_store(settings: AppSettings | None = None) -> IKeyValueStore:
    """Create the report store selected by ``settings.storage_backend``."""
    if settings is None:
        settings = AppSettings()

    if settings.storage_backend == "redis":
        return RedisKeyValueStore(
            host=settings.redis.host,
            port=settings.redis.port,
            db=settings.redis.db,
        )

    if settings.storage_backend == "s3":
        return S3KeyValueStore(
            bucket=settings.s3.bucket,
            region=settings.s3.region,
            endpoint_url=settings.s3.endpoint_url,
        )

    return MemoryKeyValueStore()
