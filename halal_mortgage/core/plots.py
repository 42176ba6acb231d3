from __future__ import annotations

from typing import Dict, List

import pandas as pd
import plotly.graph_objects as go


def balance_curves(yearly_df: pd.DataFrame, title: str = "Remaining balance") -> go.Figure:
    fig = go.Figure()
    fig.add_trace(
        go.Scatter(
            x=yearly_df["year"],
            y=yearly_df["conventional_ending_balance"],
            mode="lines",
            name="Conventional loan",
        )
    )
    fig.add_trace(
        go.Scatter(
            x=yearly_df["year"],
            y=yearly_df["halal_ending_balance"],
            mode="lines",
            name="Financier's share (halal)",
        )
    )
    fig.update_layout(title=title, xaxis_title="Year", yaxis_title="$")
    return fig


def yearly_payment_bars(yearly_df: pd.DataFrame, title: str = "Yearly payments") -> go.Figure:
    """Stacked bars per year: interest + principal next to rent + buyout."""
    fig = go.Figure()
    fig.add_bar(
        x=yearly_df["year"], y=yearly_df["conventional_interest_paid"],
        name="Interest", offsetgroup="conventional",
    )
    fig.add_bar(
        x=yearly_df["year"], y=yearly_df["conventional_principal_paid"],
        name="Principal", offsetgroup="conventional",
        base=yearly_df["conventional_interest_paid"],
    )
    fig.add_bar(
        x=yearly_df["year"], y=yearly_df["halal_rent_component"],
        name="Rent", offsetgroup="halal",
    )
    fig.add_bar(
        x=yearly_df["year"], y=yearly_df["halal_buyout_component"],
        name="Buyout", offsetgroup="halal",
        base=yearly_df["halal_rent_component"],
    )
    fig.update_layout(title=title, xaxis_title="Year", yaxis_title="$", barmode="group")
    return fig


def cost_comparison_bars(components: Dict[str, Dict[str, float]], title: str = "Total cost") -> go.Figure:
    """Grouped bars of cost components per financing option.

    components: option label -> {component label -> amount}
    """
    fig = go.Figure()
    labels = list(components)
    component_names: List[str] = []
    for parts in components.values():
        for name in parts:
            if name not in component_names:
                component_names.append(name)
    for name in component_names:
        fig.add_bar(x=labels, y=[components[label].get(name, 0.0) for label in labels], name=name)
    fig.update_layout(title=title, yaxis_title="$", barmode="stack")
    return fig


def advantage_curve(xs: List[float], ys: List[float], x_label: str) -> go.Figure:
    fig = go.Figure(go.Scatter(x=xs, y=ys, mode="lines+markers"))
    fig.add_hline(y=0, line_dash="dot")
    fig.update_layout(
        title=f"Halal advantage vs {x_label}", xaxis_title=x_label, yaxis_title="$"
    )
    return fig
