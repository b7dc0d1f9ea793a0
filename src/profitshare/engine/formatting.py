"""USD currency and percentage rendering for display."""

from __future__ import annotations

import math
from decimal import ROUND_HALF_UP, Decimal, InvalidOperation
from typing import Any


def format_currency(value: Any) -> str:
    """Render ``value`` as US dollars, e.g. ``$1,234.50`` or ``-$12.00``.

    None, NaN, infinities and anything non-numeric render as ``$0.00``.
    """
    try:
        number = float(value)
    except (TypeError, ValueError):
        return "$0.00"
    if not math.isfinite(number):
        return "$0.00"

    try:
        cents = Decimal(number).quantize(Decimal("0.01"), rounding=ROUND_HALF_UP)
    except InvalidOperation:
        # Too many digits for the default context.
        cents = Decimal(f"{number:.2f}")
    if cents == 0:
        return "$0.00"
    sign = "-" if cents < 0 else ""
    return f"{sign}${abs(cents):,.2f}"


def format_rate(rate: Any) -> str:
    """Whole-number percentage for tier rates, e.g. ``55%``."""
    return f"{int(rate)}%"


def format_percent(value: float) -> str:
    """One-decimal percentage for ad-hoc ratios, e.g. ``88.9%``."""
    return f"{value:.1f}%"
