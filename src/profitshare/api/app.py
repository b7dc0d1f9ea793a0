"""FastAPI application with lifespan and router mounting."""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator

from fastapi import FastAPI

from profitshare.api.routes import health, payouts, reports
from profitshare.core.config import AppSettings
from profitshare.core.protocols import IKeyValueStore
from profitshare.persistence import create_store
from profitshare.reports.service import ReportService

logger = logging.getLogger(__name__)


def create_app(
    settings: AppSettings | None = None,
    store: IKeyValueStore | None = None,
) -> FastAPI:
    """Create and configure the FastAPI application.

    ``store`` overrides the backend selected by ``settings``.
    """

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        """Initialize and tear down application resources."""
        app_settings = settings or AppSettings()
        logging.basicConfig(
            level=app_settings.log_level,
            format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        )
        report_store = store if store is not None else create_store(app_settings)
        app.state.settings = app_settings
        app.state.store = report_store
        app.state.reports = ReportService(
            report_store, key_prefix=app_settings.report_key_prefix,
        )
        logger.info(
            "Profit share API started (environment=%s, storage=%s)",
            app_settings.environment,
            type(report_store).__name__,
        )
        yield

    app = FastAPI(
        title="Profit Share Calculator",
        version="0.1.0",
        lifespan=lifespan,
    )
    app.include_router(health.router)
    app.include_router(payouts.router)
    app.include_router(reports.router, prefix="/reports")
    return app
