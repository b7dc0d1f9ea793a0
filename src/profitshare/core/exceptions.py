"""Profit share exception hierarchy."""

from __future__ import annotations


class ProfitShareError(Exception):
    """Base exception for all profit share errors."""


class StorageError(ProfitShareError):
    """Key/value store operation failed."""


class ReportError(ProfitShareError):
    """Error handling a saved report."""


class ReportNotFoundError(ReportError):
    """No report stored under the requested key."""

    def __init__(self, key: str) -> None:
        self.key = key
        super().__init__(f"No report stored under key={key!r}")


class ReportDecodeError(ReportError):
    """Stored report value is not a valid report record."""

    def __init__(self, key: str, message: str) -> None:
        self.key = key
        super().__init__(f"Report {key!r} could not be decoded: {message}")


class InvalidReportNameError(ReportError):
    """Report name is blank."""


class JobSheetError(ProfitShareError):
    """Invalid operation on the live job sheet."""


class JobNotFoundError(JobSheetError):
    """No job at the given index or with the given id."""


class UnknownFieldError(JobSheetError):
    """Field name is not a job field."""

    def __init__(self, field: str) -> None:
        self.field = field
        super().__init__(f"Unknown job field: {field!r}")


class LastJobError(JobSheetError):
    """The sheet must keep at least one job."""
