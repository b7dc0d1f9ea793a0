"""Lenient parsing of entry-field strings into numbers.

Parsing never raises: empty, null and non-numeric input all read as zero.
A leading numeric prefix is accepted, so ``"12abc"`` reads as 12.
"""

from __future__ import annotations

import math
import re
from decimal import ROUND_HALF_UP, Decimal

from profitshare.core.types import RawValue

# Characters the money inputs allow but float() does not.
IGNORE_CHARS = ",$"

_WHOLE_FLOAT = 2.0 ** 53

NUMBER_PREFIX_RGX = re.compile(r"[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?", re.ASCII)


def _leading_float(text: str) -> float | None:
    match = NUMBER_PREFIX_RGX.match(text.lstrip())
    if match is None:
        return None
    value = float(match.group(0))
    return value if math.isfinite(value) else None


def parse_amount(raw: RawValue) -> float:
    """Parse a money or count field, stripping commas and dollar signs."""
    if raw is None or raw == "":
        return 0.0
    text = str(raw)
    for ch in IGNORE_CHARS:
        text = text.replace(ch, "")
    value = _leading_float(text)
    return 0.0 if value is None else value


def round_cents(value: float) -> float:
    """Round to 2 places, half away from zero on the cent boundary."""
    cents = value * 100
    # Past 2**53 every float is already a whole number of cents.
    if not math.isfinite(cents) or abs(cents) >= _WHOLE_FLOAT:
        return value
    scaled = Decimal(cents).quantize(Decimal("1"), rounding=ROUND_HALF_UP)
    return float(scaled) / 100


def parse_percent_fee(base_amount: RawValue, fee_rate: RawValue) -> float:
    """Dollar amount of a percentage fee such as ``"5%"`` on ``base_amount``.

    Returns 0 when ``fee_rate`` is empty. Only a trailing ``%`` is
    stripped from the rate; commas and dollar signs are not.
    """
    if not fee_rate:
        return 0.0
    text = str(fee_rate).strip().removesuffix("%")
    percent = _leading_float(text) or 0.0
    return round_cents(parse_amount(base_amount) * percent / 100)
