"""Seed the report store with sample reports for local development.

Usage:
    python scripts/seed_reports.py --backend redis
    python scripts/seed_reports.py --backend s3 --endpoint-url http://localhost:4566
"""

from __future__ import annotations

import argparse
import json
from pathlib import Path
from typing import Any

from profitshare.core.config import AppSettings
from profitshare.models.report import ReportDraft
from profitshare.persistence import create_store
from profitshare.reports.service import ReportService

DEFAULT_SEED_PATH = Path(__file__).resolve().parent.parent / "config" / "sample_reports.json"


def load_sample_reports(path: Path = DEFAULT_SEED_PATH) -> list[ReportDraft]:
    """Read report drafts from a ``{"reports": [...]}`` JSON file."""
    data = json.loads(path.read_text())
    return [ReportDraft.model_validate(item) for item in data["reports"]]


def seed_reports(service: ReportService, drafts: list[ReportDraft]) -> list[str]:
    """Save each draft as a report. Returns the new keys in order."""
    keys: list[str] = []
    for draft in drafts:
        key = service.save_report(draft.name, draft.calculators)
        print(f"  Saved {draft.name!r} ({len(draft.calculators)} jobs) as {key}")
        keys.append(key)
    return keys


def main() -> None:
    parser = argparse.ArgumentParser(description="Seed sample profit share reports")
    parser.add_argument("--backend", choices=["memory", "redis", "s3"], default=None,
                        help="Report store (defaults to PROFITSHARE_STORAGE_BACKEND)")
    parser.add_argument("--endpoint-url", default=None, help="S3 endpoint (e.g. http://localhost:4566)")
    parser.add_argument("--seed-file", type=Path, default=DEFAULT_SEED_PATH, help="Sample reports JSON")
    args = parser.parse_args()

    settings = AppSettings()
    overrides: dict[str, Any] = {}
    if args.backend:
        overrides["storage_backend"] = args.backend
    if args.endpoint_url:
        overrides["s3"] = settings.s3.model_copy(update={"endpoint_url": args.endpoint_url})
    if overrides:
        settings = settings.model_copy(update=overrides)

    service = ReportService(create_store(settings), key_prefix=settings.report_key_prefix)

    print("Seeding reports...")
    seed_reports(service, load_sample_reports(args.seed_file))

    print("Done!")


if __name__ == "__main__":
    main()
