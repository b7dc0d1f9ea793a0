"""Health check endpoints."""

from __future__ import annotations

from fastapi import APIRouter, HTTPException, Request

from profitshare.core.exceptions import StorageError

router = APIRouter(tags=["health"])


@router.get("/health")
async def health() -> dict[str, str]:
    return {"status": "healthy"}


@router.get("/ready")
def ready(request: Request) -> dict[str, str]:
    """Ready once the report store answers a listing."""
    try:
        request.app.state.store.list_keys(request.app.state.settings.report_key_prefix)
    except StorageError as exc:
        raise HTTPException(status_code=503, detail=str(exc)) from exc
    return {"status": "ready"}
