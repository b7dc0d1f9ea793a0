"""Saved report models: named, timestamped snapshots of the job sheet."""

from __future__ import annotations

from pydantic import BaseModel, Field

from profitshare.models.job import Job


class Report(BaseModel):
    """Persisted record: ``{"name", "date", "calculators"}``."""

    name: str
    date: str  # ISO-8601, e.g. "2025-03-14T15:09:26.535Z"
    calculators: list[Job] = Field(default_factory=list)


class SavedReport(Report):
    """A report together with the store key it was read from."""

    key: str


class ReportDraft(BaseModel):
    """Request body for saving the current sheet as a report."""

    name: str
    calculators: list[Job] = Field(default_factory=list)
