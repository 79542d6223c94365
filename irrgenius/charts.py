"""Plotly figures for growth trajectories."""

from datetime import date
from typing import Iterable, Sequence

import plotly.graph_objects as go
from dateutil.relativedelta import relativedelta

from irrgenius.models.follow_on import FollowOnInvestment, InvestmentType
from irrgenius.models.results import GrowthPoint

LINE_COLOR = "#1a1a2e"
BUY_COLOR = "#2ecc71"
SELL_COLOR = "#e94560"


def follow_on_months(
    follow_ons: Iterable[FollowOnInvestment], initial_date: date
) -> list[tuple[int, InvestmentType]]:
    """Chart month of each follow-on: whole months from the base date, min 0."""
    markers = []
    for follow_on in follow_ons:
        delta = relativedelta(follow_on.investment_date, initial_date)
        months = max(0, delta.years * 12 + delta.months)
        markers.append((months, follow_on.investment_type))
    return sorted(markers, key=lambda m: m[0])


def growth_chart(
    points: Sequence[GrowthPoint],
    title: str = "Investment Growth",
    markers: Sequence[tuple[int, InvestmentType]] = (),
) -> go.Figure:
    fig = go.Figure()
    fig.add_trace(go.Scatter(
        x=[p.month for p in points],
        y=[p.value for p in points],
        mode="lines+markers" if len(points) <= 60 else "lines",
        name="Value",
        line=dict(color=LINE_COLOR, width=3),
    ))

    for month, investment_type in markers:
        fig.add_vline(
            x=month,
            line_dash="dash",
            line_color=SELL_COLOR if investment_type == InvestmentType.SELL else BUY_COLOR,
        )

    fig.update_layout(
        title=title,
        xaxis_title="Month",
        yaxis_title="Value ($)",
        hovermode="x unified",
    )
    return fig
