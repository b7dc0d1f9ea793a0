"""Payout engine: per-job profit share and sheet totals.

Pure functions: no I/O, no caching. Every call recomputes from the raw
entry strings. Headcount of zero yields zero payouts rather than a
division error; nothing is clamped, so negative payouts and profit are
valid results.
"""

from __future__ import annotations

from collections.abc import Iterable

from profitshare.engine.parsing import parse_amount, parse_percent_fee
from profitshare.engine.tiers import tier_for
from profitshare.models.job import Job
from profitshare.models.payout import JobPayout, PayoutTotals


def _per_person(amount: float, people: float) -> float:
    return amount / people if people > 0 else 0.0


def calculate_job(job: Job) -> JobPayout:
    """Derive every payout figure for one job."""
    contract_amount = parse_amount(job.contract_amount)
    house_fee_amount = contract_amount * parse_amount(job.house_fee_percent) / 100

    dealer_fee_amount = parse_percent_fee(job.finance_amount, job.dealer_fee)
    credit_card_fee_amount = parse_percent_fee(job.credit_card, job.credit_card_fee)

    total_payments = (
        parse_amount(job.cash_check)
        + parse_amount(job.finance_amount)
        + parse_amount(job.credit_card)
    )
    after_house_fee = total_payments - house_fee_amount
    total_after_fees = after_house_fee - parse_amount(job.labor_material)
    percent_of_contract = (
        total_after_fees / after_house_fee * 100 if after_house_fee > 0 else 0.0
    )

    tier = tier_for(percent_of_contract)

    vets = parse_amount(job.num_vets)
    reps = parse_amount(job.num_reps)
    people = vets + reps

    per_vet_payout = _per_person(total_after_fees * tier.vet_rate / 100, people)
    per_rep_payout = _per_person(total_after_fees * tier.rep_rate / 100, people)

    ride_along_fee = parse_amount(job.ride_along)
    ride_along_bonus = parse_amount(job.ride_along_bonus)
    ride_along_fee_per_person = _per_person(ride_along_fee, people)
    dealer_fee_per_person = _per_person(dealer_fee_amount, people)
    credit_card_fee_per_person = _per_person(credit_card_fee_amount, people)

    final_per_vet_payout = per_vet_payout - ride_along_fee_per_person - dealer_fee_per_person - credit_card_fee_per_person
    final_per_rep_payout = per_rep_payout - ride_along_fee_per_person - dealer_fee_per_person - credit_card_fee_per_person

    final_total_vets_payout = final_per_vet_payout * vets
    final_total_reps_payout = final_per_rep_payout * reps

    total_ride_along_payout = ride_along_fee + ride_along_bonus
    num_ride_alongs = parse_amount(job.num_ride_alongs)
    per_ride_along_payout = (
        total_ride_along_payout / num_ride_alongs if num_ride_alongs > 0 else 0.0
    )

    profit = total_after_fees - final_total_vets_payout - final_total_reps_payout - total_ride_along_payout

    return JobPayout(
        contract_amount=contract_amount,
        house_fee_amount=house_fee_amount,
        dealer_fee_amount=dealer_fee_amount,
        credit_card_fee_amount=credit_card_fee_amount,
        total_payments=total_payments,
        after_house_fee=after_house_fee,
        total_after_fees=total_after_fees,
        percent_of_contract=percent_of_contract,
        vet_rate=tier.vet_rate,
        rep_rate=tier.rep_rate,
        people=people,
        per_vet_payout=per_vet_payout,
        per_rep_payout=per_rep_payout,
        ride_along_fee_per_person=ride_along_fee_per_person,
        dealer_fee_per_person=dealer_fee_per_person,
        credit_card_fee_per_person=credit_card_fee_per_person,
        final_per_vet_payout=final_per_vet_payout,
        final_per_rep_payout=final_per_rep_payout,
        final_total_vets_payout=final_total_vets_payout,
        final_total_reps_payout=final_total_reps_payout,
        combined_payout=final_total_vets_payout + final_total_reps_payout,
        total_ride_along_payout=total_ride_along_payout,
        per_ride_along_payout=per_ride_along_payout,
        profit=profit,
    )


def aggregate(jobs: Iterable[Job]) -> PayoutTotals:
    """Sum vet, rep and ride-along payouts and post-fee totals across jobs."""
    vets = reps = ride_alongs = after_fees = 0.0
    for job in jobs:
        payout = calculate_job(job)
        vets += payout.final_total_vets_payout
        reps += payout.final_total_reps_payout
        ride_alongs += payout.total_ride_along_payout
        after_fees += payout.total_after_fees

    return PayoutTotals(
        total_vet_payout=vets,
        total_rep_payout=reps,
        total_ride_along_payout=ride_alongs,
        total_after_fees=after_fees,
        total_combined_payout=vets + reps,
        total_profit=after_fees - vets - reps - ride_alongs,
    )
