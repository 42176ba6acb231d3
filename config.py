from __future__ import annotations

import yaml
from pathlib import Path
from typing import Any, Dict

from halal_mortgage.core.amortization import monthly_buyout
from halal_mortgage.core.comparator import ComparisonInput

# Project root (parent of this file)
BASE_DIR = Path(__file__).resolve().parent


def _load_yaml() -> Dict[str, Any]:
    with open(BASE_DIR / "config.yaml", "r", encoding="utf-8") as f:
        data = yaml.safe_load(f) or {}
        if not isinstance(data, dict):
            return {}
        return data


CFG = _load_yaml()

# Purchase
HOME_PRICE: float = float(CFG["home_price"])
DOWN_PAYMENT_PERCENT: float = float(CFG["down_payment_percent"])
TERM_YEARS: int = int(CFG["term_years"])

# Financing (annual %, engine units)
INTEREST_RATE: float = float(CFG["interest_rate"])
ANNUAL_RENTAL_RATE: float = float(CFG["annual_rental_rate"])

# Market growth (annual %)
ANNUAL_HOME_GROWTH: float = float(CFG["annual_home_growth"])
ANNUAL_RENT_GROWTH: float = float(CFG["annual_rent_growth"])

LOG_LEVEL: str = str(CFG.get("log_level", "INFO")).upper()


def default_input() -> ComparisonInput:
    loan_amount = HOME_PRICE * (1 - DOWN_PAYMENT_PERCENT / 100)
    return ComparisonInput(
        home_price=HOME_PRICE,
        down_payment_percent=DOWN_PAYMENT_PERCENT,
        term_years=TERM_YEARS,
        interest_rate=INTEREST_RATE,
        monthly_buyout=monthly_buyout(loan_amount, TERM_YEARS),
        annual_rental_rate=ANNUAL_RENTAL_RATE,
        annual_home_growth=ANNUAL_HOME_GROWTH,
        annual_rent_growth=ANNUAL_RENT_GROWTH,
    )
