"""Job record: one calculator instance on the sheet.

Every entry field is kept as the raw display string the user typed so a
partially typed value (``"12."``) survives; parsing happens only in the
payout engine. Wire names are camelCase.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, field_validator
from pydantic.alias_generators import to_camel

# Entry fields in on-screen order, snake_case.
JOB_FIELDS: tuple[str, ...] = (
    "customer_name",
    "job_number",
    "contract_amount",
    "cash_check",
    "finance_amount",
    "dealer_fee",
    "credit_card",
    "credit_card_fee",
    "house_fee_percent",
    "labor_material",
    "ride_along",
    "ride_along_bonus",
    "num_ride_alongs",
    "num_vets",
    "num_reps",
)


class Job(BaseModel):
    """Single job as entered; every entry field is an unparsed string."""

    id: int = 1

    # --- Identity Fields ---
    customer_name: str = ""
    job_number: str = ""

    # --- Contract & Payment ---
    contract_amount: str = ""
    cash_check: str = ""
    labor_material: str = ""

    # --- Finance ---
    finance_amount: str = ""
    dealer_fee: str = ""  # e.g. "5%"
    credit_card: str = ""
    credit_card_fee: str = ""  # e.g. "3%"

    # --- Fees & Bonuses ---
    house_fee_percent: str = ""
    ride_along: str = ""
    ride_along_bonus: str = ""

    # --- Headcount ---
    num_ride_alongs: str = ""
    num_vets: str = ""
    num_reps: str = ""

    model_config = {"alias_generator": to_camel, "populate_by_name": True}

    @field_validator(*JOB_FIELDS, mode="before")
    @classmethod
    def _coerce_display_string(cls, value: Any) -> Any:
        """Older snapshots may hold null, bare numbers or booleans."""
        if value is None:
            return ""
        if isinstance(value, (int, float)):
            return str(value)
        return value


def field_name(name: str) -> str | None:
    """Resolve a snake_case or camelCase entry field name to snake_case."""
    if name in JOB_FIELDS:
        return name
    for candidate in JOB_FIELDS:
        if to_camel(candidate) == name:
            return candidate
    return None
