"""ReportService: save, list, load and delete named job-sheet snapshots.

Reports live in an injected IKeyValueStore as JSON under
``report:<epoch-ms>``. A saved report is never edited in place: it is
written once and later deleted whole.
"""

from __future__ import annotations

import json
import logging
import time
from datetime import datetime, timezone

from pydantic import ValidationError

from profitshare.core.exceptions import (
    InvalidReportNameError,
    ReportDecodeError,
    ReportNotFoundError,
    StorageError,
)
from profitshare.core.protocols import Clock, IKeyValueStore
from profitshare.core.types import ReportKey
from profitshare.models.job import Job
from profitshare.models.report import Report, SavedReport

logger = logging.getLogger(__name__)

DEFAULT_KEY_PREFIX = "report:"


def _epoch_ms() -> int:
    return time.time_ns() // 1_000_000


def _iso_timestamp(epoch_ms: int) -> str:
    """ISO-8601 UTC with millisecond precision and a ``Z`` suffix."""
    moment = datetime.fromtimestamp(epoch_ms / 1000, tz=timezone.utc)
    return moment.isoformat(timespec="milliseconds").replace("+00:00", "Z")


class ReportService:
    """Report persistence on top of a key/value store."""

    def __init__(
        self,
        store: IKeyValueStore,
        *,
        key_prefix: str = DEFAULT_KEY_PREFIX,
        clock: Clock = _epoch_ms,
    ) -> None:
        self._store = store
        self._prefix = key_prefix
        self._clock = clock

    @property
    def key_prefix(self) -> str:
        return self._prefix

    def _free_key(self, epoch_ms: int) -> ReportKey:
        """First unused key at or after ``epoch_ms``."""
        key = f"{self._prefix}{epoch_ms}"
        while self._store.get(key) is not None:
            epoch_ms += 1
            key = f"{self._prefix}{epoch_ms}"
        return key

    def _sort_key(self, key: ReportKey) -> int:
        suffix = key[len(self._prefix):]
        return int(suffix) if suffix.isdigit() else -1

    def save_report(self, name: str, jobs: list[Job]) -> ReportKey:
        """Snapshot ``jobs`` under ``name`` and return the new store key.

        Raises:
            InvalidReportNameError: name is blank.
            StorageError: the store rejected the write.
        """
        if not name or not name.strip():
            raise InvalidReportNameError("Please enter a report name")

        now = self._clock()
        report = Report(
            name=name,
            date=_iso_timestamp(now),
            calculators=[job.model_copy(deep=True) for job in jobs],
        )
        key = self._free_key(now)
        self._store.set(key, report.model_dump_json(by_alias=True))
        logger.info("Saved report %r under %s with %d jobs", name, key, len(jobs))
        return key

    def load_report(self, key: ReportKey) -> Report:
        """Read one report.

        Raises:
            ReportNotFoundError: nothing stored under ``key``.
            ReportDecodeError: the stored value is not a report record.
        """
        raw = self._store.get(key)
        if raw is None:
            raise ReportNotFoundError(key)
        try:
            return Report.model_validate(json.loads(raw))
        except (json.JSONDecodeError, ValidationError) as exc:
            raise ReportDecodeError(key, str(exc)) from exc

    def list_reports(self) -> list[SavedReport]:
        """All readable reports, newest first.

        Unreadable entries are skipped. If the store itself fails the
        listing degrades to an empty list.
        """
        try:
            keys = self._store.list_keys(self._prefix)
        except StorageError as exc:
            logger.error("Listing reports failed: %s", exc)
            return []

        reports: list[SavedReport] = []
        for key in sorted(keys, key=self._sort_key, reverse=True):
            try:
                report = self.load_report(key)
            except (ReportNotFoundError, ReportDecodeError, StorageError) as exc:
                logger.warning("Skipping report %s: %s", key, exc)
                continue
            reports.append(SavedReport(
                key=key, name=report.name, date=report.date, calculators=report.calculators,
            ))
        return reports

    def delete_report(self, key: ReportKey) -> None:
        """Remove a report. Store failures propagate as StorageError."""
        self._store.delete(key)
        logger.info("Deleted report %s", key)
