import math

import numpy as np
import pytest

from halal_mortgage.core.amortization import (
    fair_market_rent,
    fixed_monthly_payment,
    monthly_buyout,
    rent_schedule_total,
)
from halal_mortgage.core.errors import InvalidPrincipal, InvalidTerm


def test_fixed_payment_known_case():
    # 240k @ 6.9% over 20y, closed form ~ 1846.34
    payment = fixed_monthly_payment(240_000, 6.9, 240)
    assert math.isclose(payment, 1846.34, abs_tol=0.5)


def test_fixed_payment_zero_rate_is_straight_line():
    assert fixed_monthly_payment(240_000, 0.0, 240) == 240_000 / 240


def test_fair_market_rent():
    assert fair_market_rent(300_000, 8.4) == 2100.0
    # halves round up
    assert fair_market_rent(150, 2.0) == 0.0
    assert fair_market_rent(300, 2.0) == 1.0


def test_monthly_buyout_even_split():
    assert monthly_buyout(240_000, 20) == 1000.0
    assert monthly_buyout(100_000, 30) == 278.0


def test_monthly_buyout_rejects_zero_term():
    with pytest.raises(InvalidTerm):
        monthly_buyout(240_000, 0)
    with pytest.raises(InvalidTerm):
        monthly_buyout(240_000, 2.5)


def test_monthly_buyout_rejects_non_positive_principal():
    with pytest.raises(InvalidPrincipal):
        monthly_buyout(0, 20)
    with pytest.raises(InvalidPrincipal):
        monthly_buyout(float("nan"), 20)


def test_rent_schedule_total_flat_without_buyout_growth():
    # one year, buyout retires 1200 of 12000 each month, no growth
    total = rent_schedule_total(12_000, 1_000, 12.0, 0.0, 12)
    expected = sum((12_000 - i * 1_000) * 0.01 for i in range(12))
    assert math.isclose(total, expected)


def test_rent_schedule_total_stops_when_share_is_bought_out():
    total = rent_schedule_total(2_000, 1_000, 12.0, 0.0, 12)
    assert math.isclose(total, 2_000 * 0.01 + 1_000 * 0.01)


def test_monthly_buyout_accepts_numpy_integers():
    assert monthly_buyout(np.int64(240_000), np.int64(20)) == 1000.0
