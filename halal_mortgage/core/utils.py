from __future__ import annotations

import math
import numbers


def usd(value: float) -> str:
    return f"${value:,.0f}"


def round_half_up(value: float) -> float:
    """Round to the nearest whole unit, halves away from zero for positives.

    ``round()`` uses banker's rounding (``round(2.5) == 2``); payment helpers
    round halves up instead.
    """
    return float(math.floor(value + 0.5))


def grow(value: float, annual_rate_pct: float, years: int) -> float:
    """Compound ``value`` yearly at ``annual_rate_pct`` percent for ``years``."""
    if years <= 0:
        return value
    return value * (1 + annual_rate_pct / 100.0) ** years


def is_finite_number(value: object) -> bool:
    if isinstance(value, bool) or not isinstance(value, numbers.Real):
        return False
    return math.isfinite(value)
