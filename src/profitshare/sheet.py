"""JobSheet: the live, unsaved list of jobs being edited."""

from __future__ import annotations

from profitshare.core.exceptions import JobNotFoundError, LastJobError, UnknownFieldError
from profitshare.core.types import RawValue
from profitshare.engine.payout import aggregate, calculate_job
from profitshare.models.job import Job, field_name
from profitshare.models.payout import JobPayout, PayoutTotals


class JobSheet:
    """Ordered jobs on screen. Starts with a single empty job.

    Edits replace a whole field on a copy of the job, so job instances
    handed out earlier (e.g. in a saved snapshot) never change.
    """

    def __init__(self, jobs: list[Job] | None = None) -> None:
        self._jobs: list[Job] = []
        self.replace(jobs or [])

    @property
    def jobs(self) -> list[Job]:
        return list(self._jobs)

    def __len__(self) -> int:
        return len(self._jobs)

    def add_job(self) -> Job:
        """Append an empty job with the next id."""
        next_id = max((job.id for job in self._jobs), default=0) + 1
        job = Job(id=next_id)
        self._jobs.append(job)
        return job

    def update_field(self, index: int, field: str, value: RawValue) -> Job:
        """Replace one entry field of the job at ``index``."""
        name = field_name(field)
        if name is None:
            raise UnknownFieldError(field)
        if not 0 <= index < len(self._jobs):
            raise JobNotFoundError(f"No job at index {index}")
        updated = Job.model_validate({**self._jobs[index].model_dump(), name: value})
        self._jobs[index] = updated
        return updated

    def remove_job(self, job_id: int) -> None:
        """Drop the job with ``job_id``; the last job cannot be removed."""
        remaining = [job for job in self._jobs if job.id != job_id]
        if len(remaining) == len(self._jobs):
            raise JobNotFoundError(f"No job with id {job_id}")
        if not remaining:
            raise LastJobError("The sheet must keep at least one job")
        self._jobs = remaining

    def replace(self, jobs: list[Job]) -> None:
        """Load ``jobs`` (e.g. from a saved report) as the live list."""
        self._jobs = [job.model_copy(deep=True) for job in jobs] or [Job(id=1)]

    def snapshot(self) -> list[Job]:
        return [job.model_copy(deep=True) for job in self._jobs]

    def payouts(self) -> list[JobPayout]:
        return [calculate_job(job) for job in self._jobs]

    def totals(self) -> PayoutTotals:
        return aggregate(self._jobs)
