"""Pure payout engine: parsing, tier lookup, per-job and sheet totals."""

from __future__ import annotations

from profitshare.engine.formatting import format_currency, format_percent, format_rate
from profitshare.engine.parsing import parse_amount, parse_percent_fee
from profitshare.engine.payout import aggregate, calculate_job
from profitshare.engine.tiers import tier_for

__all__ = [
    "aggregate",
    "calculate_job",
    "format_currency",
    "format_percent",
    "format_rate",
    "parse_amount",
    "parse_percent_fee",
    "tier_for",
]
