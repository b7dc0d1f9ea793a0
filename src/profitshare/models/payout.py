"""Payout engine outputs: per-job breakdown, sheet totals and formatted views."""

from __future__ import annotations

from pydantic import BaseModel, Field
from pydantic.alias_generators import to_camel


class _CamelModel(BaseModel):
    """Snake_case attributes, camelCase on the wire like Job."""

    model_config = {"alias_generator": to_camel, "populate_by_name": True}


class JobPayout(_CamelModel):
    """Every derived figure for a single job, unrounded."""

    # --- Fees ---
    contract_amount: float = 0.0
    house_fee_amount: float = 0.0
    dealer_fee_amount: float = 0.0
    credit_card_fee_amount: float = 0.0

    # --- Payments ---
    total_payments: float = 0.0
    after_house_fee: float = 0.0
    total_after_fees: float = 0.0
    percent_of_contract: float = 0.0

    # --- Tier ---
    vet_rate: int = 0
    rep_rate: int = 0

    # --- Per-person breakdown ---
    people: float = 0.0
    per_vet_payout: float = 0.0
    per_rep_payout: float = 0.0
    ride_along_fee_per_person: float = 0.0
    dealer_fee_per_person: float = 0.0
    credit_card_fee_per_person: float = 0.0
    final_per_vet_payout: float = 0.0
    final_per_rep_payout: float = 0.0

    # --- Totals ---
    final_total_vets_payout: float = 0.0
    final_total_reps_payout: float = 0.0
    combined_payout: float = 0.0
    total_ride_along_payout: float = 0.0
    per_ride_along_payout: float = 0.0
    profit: float = 0.0


class PayoutTotals(_CamelModel):
    """Aggregated totals across every job on the sheet."""

    total_vet_payout: float = 0.0
    total_rep_payout: float = 0.0
    total_ride_along_payout: float = 0.0
    total_after_fees: float = 0.0
    total_combined_payout: float = 0.0
    total_profit: float = 0.0


class SummaryRow(_CamelModel):
    """One formatted row of the payout summary table.

    Role cells are blank strings when the job has no people in that role.
    """

    number: int
    customer_name: str
    job_number: str
    vets: str = ""
    per_vet: str = ""
    total_vets: str = ""
    reps: str = ""
    per_rep: str = ""
    total_reps: str = ""
    ride_alongs: str = ""
    per_ride_along: str = ""
    total_ride_alongs: str = ""
    combined: str = ""
    profit: str = ""


class SummaryTotals(_CamelModel):
    """Formatted totals row of the payout summary table."""

    total_vets: str = "$0.00"
    total_reps: str = "$0.00"
    total_ride_alongs: str = "$0.00"
    combined: str = "$0.00"
    profit: str = "$0.00"


class PayoutSummary(_CamelModel):
    """Payout summary table for a list of jobs."""

    has_vets: bool = False
    has_reps: bool = False
    has_ride_alongs: bool = False
    rows: list[SummaryRow] = Field(default_factory=list)
    totals: SummaryTotals = SummaryTotals()


class RoleLine(_CamelModel):
    """Headcount with per-person and total payout for one role."""

    count: str
    per_person: str
    total: str


class JobDetail(_CamelModel):
    """Formatted single-job sheet: inputs, fees, tier rates and payouts.

    A role line is None when the job has nobody in that role.
    """

    customer_name: str
    job_number: str

    # --- Contract & Payment ---
    contract_amount: str
    cash_check: str
    labor_material: str

    # --- Finance ---
    finance_amount: str
    dealer_fee: str
    dealer_fee_amount: str
    credit_card: str
    credit_card_fee: str
    credit_card_fee_amount: str

    # --- Fees & Bonuses ---
    house_fee_percent: str
    house_fee_amount: str
    ride_along_fee: str
    ride_along_fee_per_person: str
    ride_along_bonus: str

    # --- Calculated ---
    total_after_fees: str
    percent_of_contract: str
    vet_rate: str
    rep_rate: str

    # --- Team payouts ---
    vets: RoleLine | None = None
    reps: RoleLine | None = None
    ride_alongs: RoleLine | None = None
    combined: str
    profit: str
