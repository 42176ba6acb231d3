from __future__ import annotations

import logging
from dataclasses import asdict, dataclass
from typing import List

import pandas as pd

from .amortization import (
    MONTHS_IN_YEAR,
    check_positive_amount,
    check_term,
    fixed_monthly_payment,
)
from .errors import InvalidPrincipal, InvalidRate
from .utils import grow, is_finite_number, round_half_up

logger = logging.getLogger(__name__)

HALAL: str = "Halal"
CONVENTIONAL: str = "Conventional"
EQUAL: str = "Equal"


@dataclass(frozen=True)
class ComparisonInput:
    home_price: float
    down_payment_percent: float
    term_years: int
    interest_rate: float  # annual %, conventional loan
    monthly_buyout: float
    annual_rental_rate: float  # annual %, on the financier's remaining share
    annual_home_growth: float
    annual_rent_growth: float

    @property
    def months(self) -> int:
        return int(self.term_years) * MONTHS_IN_YEAR

    @property
    def loan_amount(self) -> float:
        return self.home_price * (1 - self.down_payment_percent / 100)

    @property
    def down_payment(self) -> float:
        return self.home_price - self.loan_amount

    @property
    def monthly_interest_rate(self) -> float:
        return self.interest_rate / 100 / MONTHS_IN_YEAR


@dataclass(frozen=True)
class ConventionalPeriod:
    total_payment: float
    beginning_balance: float
    ending_balance: float
    interest_paid: float
    principal_paid: float


@dataclass(frozen=True)
class HalalPeriod:
    total_payment: float
    rent_component: float
    buyout_component: float
    beginning_balance: float
    ending_balance: float


@dataclass(frozen=True)
class MonthlyRecord:
    month: int
    conventional: ConventionalPeriod
    halal: HalalPeriod


@dataclass(frozen=True)
class YearlyRecord:
    year: int
    conventional: ConventionalPeriod
    halal: HalalPeriod


@dataclass(frozen=True)
class ConventionalSummary:
    average_monthly_payment: float
    total_payments: float
    total_cost: float
    bank_profit: float
    net_gain: float


@dataclass(frozen=True)
class HalalSummary:
    average_monthly_payment: float
    rent_component: float
    total_payments: float
    total_cost: float
    bank_profit: float
    net_gain: float


@dataclass(frozen=True)
class HouseSummary:
    initial_value: float
    projected_value: float
    appreciation: float


@dataclass(frozen=True)
class Advantage:
    net_wealth_position: float
    overall_advantage: str
    advantage_amount: float
    better_option: str


@dataclass(frozen=True)
class ComparisonResult:
    loan_amount: float
    conventional: ConventionalSummary
    halal: HalalSummary
    house: HouseSummary
    advantage: Advantage
    monthly_breakdown: List[MonthlyRecord]
    yearly_breakdown: List[YearlyRecord]

    def monthly_frame(self) -> pd.DataFrame:
        """Monthly breakdown flattened to ``month``, ``conventional_*``, ``halal_*`` columns."""
        return _records_frame(self.monthly_breakdown)

    def yearly_frame(self) -> pd.DataFrame:
        return _records_frame(self.yearly_breakdown)


def _records_frame(records) -> pd.DataFrame:
    return pd.json_normalize([asdict(r) for r in records], sep="_")


def _validate(params: ComparisonInput) -> int:
    term_years = check_term(params.term_years)

    rates = {
        "down_payment_percent": params.down_payment_percent,
        "interest_rate": params.interest_rate,
        "annual_rental_rate": params.annual_rental_rate,
        "annual_home_growth": params.annual_home_growth,
        "annual_rent_growth": params.annual_rent_growth,
    }
    for name, value in rates.items():
        if not is_finite_number(value) or value < 0:
            raise InvalidRate(f"{name} must be a non-negative finite percentage, got {value!r}")

    check_positive_amount(params.home_price, "home_price")
    if params.loan_amount <= 0:
        raise InvalidPrincipal(
            f"down payment of {params.down_payment_percent}% leaves nothing to finance"
        )
    check_positive_amount(params.monthly_buyout, "monthly_buyout")
    return term_years


def describe_advantage(net_wealth_position: float, term_years: int) -> str:
    amount = int(round_half_up(abs(net_wealth_position)))
    if net_wealth_position > 0:
        return (
            f"After {term_years} years with your chosen market conditions, "
            f"you'll gain ${amount:,} more with halal financing."
        )
    if net_wealth_position < 0:
        return (
            f"After {term_years} years with your chosen market conditions, "
            f"you'll gain ${amount:,} more with interest-based financing."
        )
    return "Both financing options offer you the same financial outcome."


def compare(params: ComparisonInput) -> ComparisonResult:
    """Build both schedules and the comparison summary for ``params``.

    Conventional: fixed-rate amortizing loan. Halal: rent on the financier's
    remaining share plus a fixed monthly buyout of that share, with rent
    stepped up by ``annual_rent_growth`` at each anniversary. The last period
    retires whatever balance is left so both schedules end at exactly zero.

    Raises
    ------
    InvalidTerm, InvalidRate, InvalidPrincipal
        Before any computation, on the first invalid input.
    """
    term_years = _validate(params)

    months = term_years * MONTHS_IN_YEAR
    loan_amount = params.loan_amount
    down_payment = params.down_payment
    r = params.monthly_interest_rate
    buyout = float(params.monthly_buyout)
    monthly_rent_rate = params.annual_rental_rate / 100 / MONTHS_IN_YEAR
    rent_growth = 1 + params.annual_rent_growth / 100

    monthly_payment = fixed_monthly_payment(loan_amount, params.interest_rate, months)
    logger.debug(
        "Comparing %d months on %.2f financed: payment %.2f, buyout %.2f",
        months,
        loan_amount,
        monthly_payment,
        buyout,
    )

    monthly_breakdown: List[MonthlyRecord] = []
    yearly_breakdown: List[YearlyRecord] = []

    conv_balance = loan_amount
    halal_balance = loan_amount
    total_rent_paid = 0.0

    year_interest = year_principal = year_rent = year_buyout = 0.0
    year_start_conv = conv_balance
    year_start_halal = halal_balance

    for i in range(months):
        current_year = i // MONTHS_IN_YEAR
        last_period = i == months - 1

        conv_begin = conv_balance
        interest = conv_balance * r
        principal = min(monthly_payment - interest, conv_balance)
        if last_period:
            principal = conv_balance
        conv_balance = max(conv_balance - principal, 0.0)

        halal_begin = halal_balance
        rent = halal_balance * monthly_rent_rate * rent_growth ** current_year
        buyout_paid = halal_balance if last_period else min(buyout, halal_balance)
        halal_balance = max(halal_balance - buyout_paid, 0.0)
        total_rent_paid += rent

        year_interest += interest
        year_principal += principal
        year_rent += rent
        year_buyout += buyout_paid

        monthly_breakdown.append(
            MonthlyRecord(
                month=i + 1,
                conventional=ConventionalPeriod(
                    total_payment=interest + principal if last_period else monthly_payment,
                    beginning_balance=conv_begin,
                    ending_balance=conv_balance,
                    interest_paid=interest,
                    principal_paid=principal,
                ),
                halal=HalalPeriod(
                    total_payment=rent + buyout_paid,
                    rent_component=rent,
                    buyout_component=buyout_paid,
                    beginning_balance=halal_begin,
                    ending_balance=halal_balance,
                ),
            )
        )

        if (i + 1) % MONTHS_IN_YEAR == 0 or last_period:
            yearly_breakdown.append(
                YearlyRecord(
                    year=current_year + 1,
                    conventional=ConventionalPeriod(
                        total_payment=year_interest + year_principal,
                        beginning_balance=year_start_conv,
                        ending_balance=conv_balance,
                        interest_paid=year_interest,
                        principal_paid=year_principal,
                    ),
                    halal=HalalPeriod(
                        total_payment=year_rent + year_buyout,
                        rent_component=year_rent,
                        buyout_component=year_buyout,
                        beginning_balance=year_start_halal,
                        ending_balance=halal_balance,
                    ),
                )
            )
            year_interest = year_principal = year_rent = year_buyout = 0.0
            year_start_conv = conv_balance
            year_start_halal = halal_balance

    total_payments_conventional = monthly_payment * months
    total_payments_halal = total_rent_paid + loan_amount

    projected_value = grow(params.home_price, params.annual_home_growth, term_years)
    net_gain_conventional = projected_value - total_payments_conventional - down_payment
    net_gain_halal = projected_value - total_payments_halal - down_payment
    net_wealth_position = net_gain_halal - net_gain_conventional

    if net_wealth_position > 0:
        better_option = HALAL
    elif net_wealth_position < 0:
        better_option = CONVENTIONAL
    else:
        better_option = EQUAL

    logger.debug(
        "Total paid: conventional %.2f, halal %.2f; better option %s",
        total_payments_conventional,
        total_payments_halal,
        better_option,
    )

    return ComparisonResult(
        loan_amount=loan_amount,
        conventional=ConventionalSummary(
            average_monthly_payment=monthly_payment,
            total_payments=total_payments_conventional,
            total_cost=total_payments_conventional + down_payment,
            bank_profit=total_payments_conventional - loan_amount,
            net_gain=net_gain_conventional,
        ),
        halal=HalalSummary(
            average_monthly_payment=total_rent_paid / months + buyout,
            rent_component=total_rent_paid / months,
            total_payments=total_payments_halal,
            total_cost=total_payments_halal + down_payment,
            bank_profit=total_rent_paid,
            net_gain=net_gain_halal,
        ),
        house=HouseSummary(
            initial_value=params.home_price,
            projected_value=projected_value,
            appreciation=projected_value - params.home_price,
        ),
        advantage=Advantage(
            net_wealth_position=net_wealth_position,
            overall_advantage=describe_advantage(net_wealth_position, term_years),
            advantage_amount=abs(net_wealth_position),
            better_option=better_option,
        ),
        monthly_breakdown=monthly_breakdown,
        yearly_breakdown=yearly_breakdown,
    )
