"""Formatted payout views: the summary table and the single-job detail sheet.

The summary has one row per job plus a totals row. A role's column group
(vets, reps, ride-alongs) is shown when any job on the sheet has people
in that role; within a row the role cells stay blank for a job that has
none. The detail sheet drops a role's line entirely when the job has
nobody in it.
"""

from __future__ import annotations

from profitshare.engine.formatting import format_currency, format_percent, format_rate
from profitshare.engine.parsing import parse_amount
from profitshare.engine.payout import aggregate, calculate_job
from profitshare.models.job import Job
from profitshare.models.payout import (
    JobDetail,
    PayoutSummary,
    RoleLine,
    SummaryRow,
    SummaryTotals,
)

NOT_AVAILABLE = "N/A"


def _count(value: float) -> str:
    if not value:
        return ""
    return str(int(value)) if value == int(value) else str(value)


def _money(raw: str) -> str:
    return format_currency(parse_amount(raw))


def _row(number: int, job: Job) -> SummaryRow:
    payout = calculate_job(job)
    vets = parse_amount(job.num_vets)
    reps = parse_amount(job.num_reps)
    ride_alongs = parse_amount(job.num_ride_alongs)

    row = SummaryRow(
        number=number,
        customer_name=job.customer_name or NOT_AVAILABLE,
        job_number=job.job_number or NOT_AVAILABLE,
        vets=_count(vets),
        reps=_count(reps),
        ride_alongs=_count(ride_alongs),
        combined=format_currency(payout.combined_payout),
        profit=format_currency(payout.profit),
    )
    if vets > 0:
        row.per_vet = format_currency(payout.final_per_vet_payout)
        row.total_vets = format_currency(payout.final_total_vets_payout)
    if reps > 0:
        row.per_rep = format_currency(payout.final_per_rep_payout)
        row.total_reps = format_currency(payout.final_total_reps_payout)
    if ride_alongs > 0:
        row.per_ride_along = format_currency(payout.per_ride_along_payout)
        row.total_ride_alongs = format_currency(payout.total_ride_along_payout)
    return row


def build_summary(jobs: list[Job]) -> PayoutSummary:
    """Build the payout summary table for ``jobs`` in sheet order."""
    totals = aggregate(jobs)
    return PayoutSummary(
        has_vets=any(parse_amount(job.num_vets) > 0 for job in jobs),
        has_reps=any(parse_amount(job.num_reps) > 0 for job in jobs),
        has_ride_alongs=any(parse_amount(job.num_ride_alongs) > 0 for job in jobs),
        rows=[_row(i, job) for i, job in enumerate(jobs, start=1)],
        totals=SummaryTotals(
            total_vets=format_currency(totals.total_vet_payout),
            total_reps=format_currency(totals.total_rep_payout),
            total_ride_alongs=format_currency(totals.total_ride_along_payout),
            combined=format_currency(totals.total_combined_payout),
            profit=format_currency(totals.total_profit),
        ),
    )


def build_detail(job: Job) -> JobDetail:
    """Formatted detail sheet for a single job."""
    payout = calculate_job(job)
    vets = parse_amount(job.num_vets)
    reps = parse_amount(job.num_reps)
    ride_alongs = parse_amount(job.num_ride_alongs)

    detail = JobDetail(
        customer_name=job.customer_name or NOT_AVAILABLE,
        job_number=job.job_number or NOT_AVAILABLE,
        contract_amount=_money(job.contract_amount),
        cash_check=_money(job.cash_check),
        labor_material=_money(job.labor_material),
        finance_amount=_money(job.finance_amount),
        dealer_fee=job.dealer_fee or NOT_AVAILABLE,
        dealer_fee_amount=format_currency(payout.dealer_fee_amount),
        credit_card=_money(job.credit_card),
        credit_card_fee=job.credit_card_fee or NOT_AVAILABLE,
        credit_card_fee_amount=format_currency(payout.credit_card_fee_amount),
        house_fee_percent=format_percent(parse_amount(job.house_fee_percent)),
        house_fee_amount=format_currency(payout.house_fee_amount),
        ride_along_fee=_money(job.ride_along),
        ride_along_fee_per_person=format_currency(payout.ride_along_fee_per_person),
        ride_along_bonus=_money(job.ride_along_bonus),
        total_after_fees=format_currency(payout.total_after_fees),
        percent_of_contract=format_percent(payout.percent_of_contract),
        vet_rate=format_rate(payout.vet_rate),
        rep_rate=format_rate(payout.rep_rate),
        combined=format_currency(payout.combined_payout),
        profit=format_currency(payout.profit),
    )
    if vets > 0:
        detail.vets = RoleLine(
            count=_count(vets),
            per_person=format_currency(payout.final_per_vet_payout),
            total=format_currency(payout.final_total_vets_payout),
        )
    if reps > 0:
        detail.reps = RoleLine(
            count=_count(reps),
            per_person=format_currency(payout.final_per_rep_payout),
            total=format_currency(payout.final_total_reps_payout),
        )
    if ride_alongs > 0:
        detail.ride_alongs = RoleLine(
            count=_count(ride_alongs),
            per_person=format_currency(payout.per_ride_along_payout),
            total=format_currency(payout.total_ride_along_payout),
        )
    return detail
