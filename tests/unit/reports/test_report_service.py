"""Tests for ReportService against the in-memory store."""

from __future__ import annotations

import json
import logging

import pytest

from profitshare.core.exceptions import (
    InvalidReportNameError,
    ReportDecodeError,
    ReportNotFoundError,
    StorageError,
)
from profitshare.models.job import Job
from profitshare.reports.service import ReportService
from tests.fakes import FailingKeyValueStore, MemoryKeyValueStore

NOW_MS = 1_700_000_000_000


@pytest.fixture
def store():
    return MemoryKeyValueStore()


@pytest.fixture
def service(store):
    return ReportService(store, clock=lambda: NOW_MS)


@pytest.fixture
def jobs():
    return [
        Job(id=1, customer_name="Alvarez", job_number="R-1", contract_amount="10,000",
            cash_check="10000", house_fee_percent="10", labor_material="1000", num_vets="2"),
        Job(id=3, customer_name="Nguyen", dealer_fee="5%", finance_amount="2000.", num_reps="1"),
    ]


class TestSaveReport:
    def test_returns_prefixed_timestamp_key(self, service):
        assert service.save_report("Week 1", []) == f"report:{NOW_MS}"

    def test_stores_camel_case_record(self, service, store, jobs):
        key = service.save_report("Week 1", jobs)
        record = json.loads(store.get(key))
        assert record["name"] == "Week 1"
        assert record["date"] == "2023-11-14T22:13:20.000Z"
        assert record["calculators"][0]["customerName"] == "Alvarez"
        assert record["calculators"][0]["houseFeePercent"] == "10"
        assert record["calculators"][1]["numRideAlongs"] == ""

    def test_same_millisecond_gets_next_free_key(self, service):
        first = service.save_report("A", [])
        second = service.save_report("B", [])
        assert first == f"report:{NOW_MS}"
        assert second == f"report:{NOW_MS + 1}"

    @pytest.mark.parametrize("name", ["", "   "])
    def test_blank_name_rejected(self, service, store, name):
        with pytest.raises(InvalidReportNameError):
            service.save_report(name, [])
        assert store.list_keys("report:") == []

    def test_custom_prefix(self, store):
        svc = ReportService(store, key_prefix="alta:", clock=lambda: 5)
        assert svc.save_report("A", []) == "alta:5"

    def test_store_failure_propagates(self):
        svc = ReportService(FailingKeyValueStore(), clock=lambda: NOW_MS)
        with pytest.raises(StorageError):
            svc.save_report("A", [])


class TestLoadReport:
    def test_round_trip_preserves_jobs_field_for_field(self, service, jobs):
        key = service.save_report("Week 1", jobs)
        loaded = service.load_report(key)
        assert loaded.name == "Week 1"
        assert [j.model_dump() for j in loaded.calculators] == [j.model_dump() for j in jobs]

    def test_snapshot_ignores_later_edits(self, service, jobs):
        key = service.save_report("Week 1", jobs)
        jobs[0].customer_name = "Changed"
        assert service.load_report(key).calculators[0].customer_name == "Alvarez"

    def test_missing_key_raises(self, service):
        with pytest.raises(ReportNotFoundError):
            service.load_report("report:404")

    @pytest.mark.parametrize("raw", ["{not json", '{"foo": 1}', "[]"])
    def test_malformed_value_raises(self, service, store, raw):
        store.set("report:1", raw)
        with pytest.raises(ReportDecodeError):
            service.load_report("report:1")

    def test_older_records_with_nulls_and_numbers_load(self, service, store):
        store.set("report:1", json.dumps({
            "name": "Old", "date": "2024-05-01T10:00:00.000Z",
            "calculators": [{"id": 1, "numVets": 2, "numReps": None}],
        }))
        job = service.load_report("report:1").calculators[0]
        assert job.num_vets == "2"
        assert job.num_reps == ""
        assert job.num_ride_alongs == ""


class TestListReports:
    def test_newest_first(self, store):
        ticks = iter([1000, 3000, 2000])
        svc = ReportService(store, clock=lambda: next(ticks))
        for name in ["first", "second", "third"]:
            svc.save_report(name, [])
        reports = svc.list_reports()
        assert [r.name for r in reports] == ["second", "third", "first"]
        assert reports[0].key == "report:3000"

    def test_skips_unreadable_entries(self, service, store, caplog):
        service.save_report("good", [])
        store.set("report:1", "{not json")
        with caplog.at_level(logging.WARNING, logger="profitshare.reports.service"):
            reports = service.list_reports()
        assert [r.name for r in reports] == ["good"]
        assert "report:1" in caplog.text

    def test_ignores_other_prefixes(self, service, store):
        store.set("draft:1", "{}")
        assert service.list_reports() == []

    def test_store_failure_degrades_to_empty(self, caplog):
        svc = ReportService(FailingKeyValueStore())
        with caplog.at_level(logging.ERROR, logger="profitshare.reports.service"):
            assert svc.list_reports() == []
        assert "Listing reports failed" in caplog.text


class TestDeleteReport:
    def test_removes_report(self, service):
        key = service.save_report("Week 1", [])
        service.delete_report(key)
        assert service.list_reports() == []

    def test_store_failure_propagates(self):
        with pytest.raises(StorageError):
            ReportService(FailingKeyValueStore()).delete_report("report:1")
