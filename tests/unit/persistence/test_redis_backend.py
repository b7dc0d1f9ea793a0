"""Unit tests for RedisKeyValueStore using fakeredis."""

from __future__ import annotations

import json
from unittest.mock import patch

import fakeredis
import pytest

from profitshare.core.exceptions import StorageError
from profitshare.persistence.redis_backend import RedisKeyValueStore


@pytest.fixture
def fake_server():
    return fakeredis.FakeServer()


@pytest.fixture
def backend(fake_server):
    with patch("redis.Redis", return_value=fakeredis.FakeRedis(server=fake_server, decode_responses=True)):
        return RedisKeyValueStore(host="localhost", port=6379, db=0)


class TestGet:
    def test_returns_none_on_miss(self, backend):
        assert backend.get("report:missing") is None

    def test_returns_stored_string(self, backend):
        data = {"name": "Week 1", "date": "2025-01-01T00:00:00.000Z", "calculators": []}
        backend.set("report:1", json.dumps(data))
        assert backend.get("report:1") == json.dumps(data)


class TestSet:
    def test_overwrites_existing_value(self, backend):
        backend.set("k", "old")
        backend.set("k", "new")
        assert backend.get("k") == "new"


class TestListKeys:
    def test_returns_only_prefixed_keys(self, backend):
        backend.set("report:1", "a")
        backend.set("report:2", "b")
        backend.set("draft:3", "c")
        assert sorted(backend.list_keys("report:")) == ["report:1", "report:2"]

    def test_empty_when_nothing_matches(self, backend):
        assert backend.list_keys("report:") == []


class TestDelete:
    def test_removes_existing_key(self, backend):
        backend.set("report:1", "val")
        backend.delete("report:1")
        assert backend.get("report:1") is None

    def test_noop_on_missing_key(self, backend):
        backend.delete("never_existed")  # should not raise


class TestErrorWrapping:
    @pytest.fixture
    def broken(self):
        b = RedisKeyValueStore.__new__(RedisKeyValueStore)
        b._client = None  # will cause AttributeError -> StorageError
        return b

    def test_get_wraps_redis_error(self, broken):
        with pytest.raises(StorageError):
            broken.get("k")

    def test_list_wraps_redis_error(self, broken):
        with pytest.raises(StorageError):
            broken.list_keys("report:")

    def test_set_wraps_redis_error(self, broken):
        with pytest.raises(StorageError):
            broken.set("k", "v")
