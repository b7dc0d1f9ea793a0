"""Commission tier lookup.

The share of the post-fee total that goes to vets and reps steps up with
the job's margin (percent of contract left after labor and material).
"""

from __future__ import annotations

from pydantic import BaseModel


class CommissionTier(BaseModel):
    """Vet and rep commission rates (whole percents) from a margin floor up."""

    min_percent: float
    vet_rate: int
    rep_rate: int


# Highest floor first; floors are inclusive.
TIERS: list[CommissionTier] = [
    CommissionTier(min_percent=50, vet_rate=55, rep_rate=40),
    CommissionTier(min_percent=40, vet_rate=45, rep_rate=30),
    CommissionTier(min_percent=33, vet_rate=35, rep_rate=25),
]

BASE_TIER = CommissionTier(min_percent=float("-inf"), vet_rate=25, rep_rate=20)


def tier_for(percent_of_contract: float) -> CommissionTier:
    """Return the commission tier for a margin percentage."""
    for tier in TIERS:
        if percent_of_contract >= tier.min_percent:
            return tier
    return BASE_TIER
