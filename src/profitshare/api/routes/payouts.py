"""Calculation endpoints: stateless wrappers over the payout engine."""

from __future__ import annotations

from fastapi import APIRouter

from profitshare.engine.payout import aggregate, calculate_job
from profitshare.models.job import Job
from profitshare.models.payout import JobDetail, JobPayout, PayoutSummary, PayoutTotals
from profitshare.reports.summary import build_detail, build_summary

router = APIRouter(tags=["payouts"])


@router.post("/calculate", response_model=JobPayout)
async def calculate(job: Job) -> JobPayout:
    """Payout breakdown for a single job."""
    return calculate_job(job)


@router.post("/totals", response_model=PayoutTotals)
async def totals(jobs: list[Job]) -> PayoutTotals:
    return aggregate(jobs)


@router.post("/summary", response_model=PayoutSummary)
async def summary(jobs: list[Job]) -> PayoutSummary:
    return build_summary(jobs)


@router.post("/detail", response_model=JobDetail)
async def detail(job: Job) -> JobDetail:
    """Formatted detail sheet for a single job."""
    return build_detail(job)
