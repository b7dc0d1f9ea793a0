"""Tests for the dict-backed store and backend selection."""

from __future__ import annotations

from moto import mock_aws

from profitshare.core.config import AppSettings
from profitshare.core.protocols import IKeyValueStore
from profitshare.persistence import create_store
from profitshare.persistence.memory_backend import MemoryKeyValueStore
from profitshare.persistence.redis_backend import RedisKeyValueStore
from profitshare.persistence.s3_backend import S3KeyValueStore


class TestMemoryKeyValueStore:
    def test_satisfies_protocol(self):
        assert isinstance(MemoryKeyValueStore(), IKeyValueStore)

    def test_set_get_delete(self):
        store = MemoryKeyValueStore()
        store.set("report:1", "a")
        assert store.get("report:1") == "a"
        store.delete("report:1")
        assert store.get("report:1") is None

    def test_list_keys_filters_by_prefix(self):
        store = MemoryKeyValueStore()
        store.set("report:1", "a")
        store.set("draft:1", "b")
        assert store.list_keys("report:") == ["report:1"]


class TestCreateStore:
    def test_defaults_to_memory(self):
        assert isinstance(create_store(AppSettings(storage_backend="memory")), MemoryKeyValueStore)

    def test_redis_backend(self):
        store = create_store(AppSettings(storage_backend="redis"))
        assert isinstance(store, RedisKeyValueStore)

    def test_s3_backend(self):
        with mock_aws():
            store = create_store(AppSettings(storage_backend="s3"))
            assert isinstance(store, S3KeyValueStore)
            assert isinstance(store, IKeyValueStore)
