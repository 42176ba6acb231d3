from __future__ import annotations

import logging
import os
import sys
from dataclasses import replace
from typing import List

import numpy as np
import pandas as pd
import streamlit as st

# Ensure package import works on Streamlit Cloud when CWD != repo root
_THIS_DIR = os.path.dirname(__file__)
_REPO_ROOT = os.path.abspath(os.path.join(_THIS_DIR, "..", ".."))
if _REPO_ROOT not in sys.path:
    sys.path.insert(0, _REPO_ROOT)

from halal_mortgage.core import plots
from halal_mortgage.core.amortization import fair_market_rent, monthly_buyout
from halal_mortgage.core.comparator import ComparisonInput, ComparisonResult, compare
from halal_mortgage.core.errors import ComparisonError
from halal_mortgage.core.utils import usd
from config import (
    HOME_PRICE,
    DOWN_PAYMENT_PERCENT,
    TERM_YEARS,
    INTEREST_RATE,
    ANNUAL_RENTAL_RATE,
    ANNUAL_HOME_GROWTH,
    ANNUAL_RENT_GROWTH,
    LOG_LEVEL,
)

logging.basicConfig(level=LOG_LEVEL, format="%(asctime)s %(levelname)s %(name)s: %(message)s")
logger = logging.getLogger(__name__)

st.set_page_config(page_title="Halal vs conventional mortgage", layout="wide")


def default_buyout(loan_amount: float, term_years: int) -> float:
    # number_input rejects a value below its min_value of 1
    return max(monthly_buyout(loan_amount, term_years), 1.0)


def sidebar_inputs() -> ComparisonInput:
    st.sidebar.header("Home")
    home_price = st.sidebar.number_input("Home price ($)", min_value=1, value=int(HOME_PRICE), step=5_000)
    down_payment_percent = st.sidebar.slider("Down payment (%)", min_value=0.0, max_value=99.0, value=DOWN_PAYMENT_PERCENT, step=0.5)
    term_years = int(st.sidebar.number_input("Term (years)", min_value=1, max_value=40, value=TERM_YEARS, step=1))

    st.sidebar.subheader("Conventional loan")
    interest_rate = st.sidebar.number_input("Interest rate (% annual)", min_value=0.0, max_value=30.0, value=INTEREST_RATE, step=0.05, format="%0.2f")

    st.sidebar.subheader("Halal financing")
    annual_rental_rate = st.sidebar.number_input("Rental rate (% of value/year)", min_value=0.0, max_value=30.0, value=ANNUAL_RENTAL_RATE, step=0.1, format="%0.1f")
    loan_amount = home_price * (1 - down_payment_percent / 100)
    suggested_buyout = default_buyout(loan_amount, term_years)
    buyout = st.sidebar.number_input("Monthly buyout ($)", min_value=1.0, value=suggested_buyout, step=50.0, help=f"Even buyout over the term: {usd(suggested_buyout)}")
    st.sidebar.caption(f"Fair market rent on the home today: {usd(fair_market_rent(home_price, annual_rental_rate))}/month")

    st.sidebar.subheader("Market")
    annual_home_growth = st.sidebar.number_input("Home price growth (% annual)", min_value=0.0, max_value=20.0, value=ANNUAL_HOME_GROWTH, step=0.1, format="%0.1f")
    annual_rent_growth = st.sidebar.number_input("Rent growth (% annual)", min_value=0.0, max_value=20.0, value=ANNUAL_RENT_GROWTH, step=0.1, format="%0.1f")

    return ComparisonInput(
        home_price=float(home_price),
        down_payment_percent=float(down_payment_percent),
        term_years=term_years,
        interest_rate=float(interest_rate),
        monthly_buyout=float(buyout),
        annual_rental_rate=float(annual_rental_rate),
        annual_home_growth=float(annual_home_growth),
        annual_rent_growth=float(annual_rent_growth),
    )


def style_with_commas(df: pd.DataFrame):
    num_cols = [c for c in df.select_dtypes(include=["number"]).columns if c not in ("month", "year")]
    if len(num_cols) == 0:
        return df
    return df.style.format({col: "{:,.0f}" for col in num_cols})


def render_summary(result: ComparisonResult, inputs: ComparisonInput):
    st.subheader("Summary")
    st.info(result.advantage.overall_advantage)
    c1, c2, c3 = st.columns(3)
    with c1:
        st.markdown("**Conventional**")
        st.metric("Monthly payment", usd(result.conventional.average_monthly_payment))
        st.metric("Total cost", usd(result.conventional.total_cost))
        st.metric("Bank profit (interest)", usd(result.conventional.bank_profit))
        st.metric("Net gain", usd(result.conventional.net_gain))
    with c2:
        st.markdown("**Halal**")
        st.metric("Average monthly payment", usd(result.halal.average_monthly_payment))
        st.metric("Total cost", usd(result.halal.total_cost))
        st.metric("Bank profit (rent)", usd(result.halal.bank_profit))
        st.metric("Net gain", usd(result.halal.net_gain))
    with c3:
        st.markdown("**Home**")
        st.metric("Financed", usd(result.loan_amount))
        st.metric(f"Value after {inputs.term_years} years", usd(result.house.projected_value))
        st.metric("Appreciation", usd(result.house.appreciation))
        st.metric("Better option", result.advantage.better_option, delta=usd(result.advantage.net_wealth_position))


def render_graphs(result: ComparisonResult, inputs: ComparisonInput):
    st.subheader("Graphs")
    yearly_df = result.yearly_frame()
    c1, c2 = st.columns(2)
    with c1:
        st.plotly_chart(plots.balance_curves(yearly_df), use_container_width=True)
    with c2:
        st.plotly_chart(plots.yearly_payment_bars(yearly_df), use_container_width=True)

    components = {
        "Conventional": {
            "Down payment": inputs.down_payment,
            "Principal": result.loan_amount,
            "Interest / rent": result.conventional.bank_profit,
        },
        "Halal": {
            "Down payment": inputs.down_payment,
            "Principal": result.loan_amount,
            "Interest / rent": result.halal.bank_profit,
        },
    }
    st.plotly_chart(plots.cost_comparison_bars(components), use_container_width=True)


def render_tables(result: ComparisonResult):
    st.subheader("Tables")
    view_monthly = st.toggle("Monthly view", value=False)
    if view_monthly:
        df = result.monthly_frame()
        file_name = "comparison_monthly.csv"
    else:
        df = result.yearly_frame()
        file_name = "comparison_yearly.csv"
    st.dataframe(style_with_commas(df), use_container_width=True)
    st.download_button(
        "Export CSV",
        data=df.to_csv(index=False).encode("utf-8"),
        file_name=file_name,
        mime="text/csv",
    )


def render_sensitivity(inputs: ComparisonInput):
    st.subheader("Sensitivity")
    growth_min = max(0.0, inputs.annual_rent_growth - 3.0)
    growth_max = inputs.annual_rent_growth + 3.0
    rent_growths: List[float] = np.linspace(growth_min, growth_max, 13).tolist()
    ys = [compare(replace(inputs, annual_rent_growth=g)).advantage.net_wealth_position for g in rent_growths]
    st.plotly_chart(plots.advantage_curve(rent_growths, ys, "Rent growth (%)"), use_container_width=True)

    rate_min = max(0.0, inputs.interest_rate - 3.0)
    rate_max = inputs.interest_rate + 3.0
    rates: List[float] = np.linspace(rate_min, rate_max, 13).tolist()
    ys = [compare(replace(inputs, interest_rate=r)).advantage.net_wealth_position for r in rates]
    st.plotly_chart(plots.advantage_curve(rates, ys, "Interest rate (%)"), use_container_width=True)


def main():
    st.title("Halal vs conventional mortgage")
    inputs = sidebar_inputs()
    try:
        result = compare(inputs)
    except ComparisonError as exc:
        logger.info("Rejected inputs: %s", exc)
        st.error(str(exc))
        return

    tabs = st.tabs(["Summary", "Graphs", "Tables", "Sensitivity", "How it works"])
    with tabs[0]:
        render_summary(result, inputs)
    with tabs[1]:
        render_graphs(result, inputs)
    with tabs[2]:
        render_tables(result)
    with tabs[3]:
        render_sensitivity(inputs)
    with tabs[4]:
        st.subheader("How the comparison works")
        st.markdown(
            """
            - Conventional: a fixed-rate loan on the financed amount. Each month interest accrues on the
              remaining balance and the rest of the fixed payment reduces it.
            - Halal (diminishing partnership): the financier owns the financed share of the home. Each month
              you pay rent on the financier's remaining share and buy part of it back with a fixed buyout.
              Rent rises by the rent growth rate at each anniversary.
            - Net gain = projected home value - total payments - down payment. The option with the higher
              net gain is the better one.
            """
        )


if __name__ == "__main__":
    main()
