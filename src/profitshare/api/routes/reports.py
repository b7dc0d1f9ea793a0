"""Saved report endpoints."""

from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException, Request, Response

from profitshare.core.exceptions import (
    InvalidReportNameError,
    ReportDecodeError,
    ReportNotFoundError,
    StorageError,
)
from profitshare.models.payout import PayoutSummary
from profitshare.models.report import Report, ReportDraft, SavedReport
from profitshare.reports.service import ReportService
from profitshare.reports.summary import build_summary

router = APIRouter(tags=["reports"])


def get_report_service(request: Request) -> ReportService:
    return request.app.state.reports


def _load(service: ReportService, key: str) -> Report:
    try:
        return service.load_report(key)
    except ReportNotFoundError as exc:
        raise HTTPException(status_code=404, detail=str(exc)) from exc
    except ReportDecodeError as exc:
        raise HTTPException(status_code=422, detail=str(exc)) from exc
    except StorageError as exc:
        raise HTTPException(status_code=502, detail=str(exc)) from exc


@router.get("", response_model=list[SavedReport])
def list_reports(service: ReportService = Depends(get_report_service)) -> list[SavedReport]:
    """All saved reports, newest first. Empty if the store is unavailable."""
    return service.list_reports()


@router.post("", status_code=201)
def save_report(
    draft: ReportDraft, service: ReportService = Depends(get_report_service)
) -> dict[str, str]:
    try:
        key = service.save_report(draft.name, draft.calculators)
    except InvalidReportNameError as exc:
        raise HTTPException(status_code=422, detail=str(exc)) from exc
    except StorageError as exc:
        raise HTTPException(status_code=502, detail=f"Error saving report: {exc}") from exc
    return {"key": key}


@router.get("/{key}", response_model=Report)
def get_report(key: str, service: ReportService = Depends(get_report_service)) -> Report:
    return _load(service, key)


@router.get("/{key}/summary", response_model=PayoutSummary)
def get_report_summary(
    key: str, service: ReportService = Depends(get_report_service)
) -> PayoutSummary:
    """Payout summary table for a saved report's jobs."""
    return build_summary(_load(service, key).calculators)


@router.delete("/{key}", status_code=204)
def delete_report(key: str, service: ReportService = Depends(get_report_service)) -> Response:
    try:
        service.delete_report(key)
    except StorageError as exc:
        raise HTTPException(status_code=502, detail=f"Error deleting report: {exc}") from exc
    return Response(status_code=204)
