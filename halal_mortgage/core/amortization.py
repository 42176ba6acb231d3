from __future__ import annotations

from typing import Final

import pandas as pd

from .errors import InvalidPrincipal, InvalidTerm
from .utils import is_finite_number, round_half_up


MONTHS_IN_YEAR: Final[int] = 12

YEARLY_SUM_COLUMNS: Final[list] = [
    "conventional_total_payment",
    "conventional_interest_paid",
    "conventional_principal_paid",
    "halal_total_payment",
    "halal_rent_component",
    "halal_buyout_component",
]


def check_term(years: object) -> int:
    """Return ``years`` as an int, or raise InvalidTerm."""
    if not is_finite_number(years) or years <= 0 or int(years) != years:
        raise InvalidTerm(f"term must be a positive whole number of years, got {years!r}")
    return int(years)


def check_positive_amount(value: object, name: str) -> float:
    if not is_finite_number(value) or value <= 0:
        raise InvalidPrincipal(f"{name} must be a positive finite amount, got {value!r}")
    return float(value)


def fixed_monthly_payment(principal: float, annual_rate_pct: float, n_months: int) -> float:
    """Compute the fixed monthly payment for a fully amortizing loan.

    Parameters
    ----------
    principal : float
        Financed amount.
    annual_rate_pct : float
        Nominal annual interest rate in percent (e.g., 6.9 for 6.9%).
    n_months : int
        Number of monthly payments.

    Returns
    -------
    float
        The constant monthly payment. With a zero rate the loan is repaid
        straight-line, ``principal / n_months``.
    """
    monthly_rate = annual_rate_pct / 100 / MONTHS_IN_YEAR
    if monthly_rate == 0:
        return principal / n_months
    return principal * monthly_rate / (1 - (1 + monthly_rate) ** (-n_months))


def fair_market_rent(home_value: float, annual_rental_rate: float) -> float:
    """Monthly rent for ``home_value`` at ``annual_rental_rate`` percent a year."""
    return round_half_up(home_value * annual_rental_rate / MONTHS_IN_YEAR / 100)


def monthly_buyout(principal: float, years: int) -> float:
    """Fixed monthly amount that buys out ``principal`` over ``years``.

    Raises
    ------
    InvalidTerm
        If ``years`` is not a positive whole number.
    InvalidPrincipal
        If ``principal`` is not a positive finite amount.
    """
    years = check_term(years)
    principal = check_positive_amount(principal, "principal")
    return round_half_up(principal / (years * MONTHS_IN_YEAR))


def rent_schedule_total(
    principal: float,
    buyout: float,
    annual_rental_rate: float,
    annual_rent_growth: float,
    n_months: int,
) -> float:
    """Total rent over a diminishing partnership, in closed form per period.

    The financier's share before payment ``i`` is ``principal - i * buyout``
    (never below zero); rent on it grows by ``annual_rent_growth`` percent at
    each anniversary.
    """
    monthly_rent_rate = annual_rental_rate / 100 / MONTHS_IN_YEAR
    growth = 1 + annual_rent_growth / 100
    total = 0.0
    for i in range(n_months):
        share = max(principal - i * buyout, 0.0)
        total += share * monthly_rent_rate * growth ** (i // MONTHS_IN_YEAR)
    return total


def aggregate_yearly(schedule: pd.DataFrame) -> pd.DataFrame:
    """Aggregate a flat monthly comparison schedule by year.

    Sums the payment components and keeps the first beginning balance and
    last ending balance of each structure per year.
    """
    if schedule.empty:
        return pd.DataFrame(columns=["year"] + YEARLY_SUM_COLUMNS, data=[])

    schedule = schedule.copy()
    schedule["year"] = (schedule["month"] - 1) // MONTHS_IN_YEAR + 1
    grouped = schedule.groupby("year", as_index=False)
    sums = grouped[YEARLY_SUM_COLUMNS].sum()
    starts = grouped[["conventional_beginning_balance", "halal_beginning_balance"]].first()
    ends = grouped[["conventional_ending_balance", "halal_ending_balance"]].last()
    return (
        sums.merge(starts, on="year", how="left")
        .merge(ends, on="year", how="left")
        .sort_values("year")
        .reset_index(drop=True)
    )
