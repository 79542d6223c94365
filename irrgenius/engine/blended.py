"""Blended IRR: base investment plus ordered follow-on buy/sell events.

Pure functions. No I/O.

Follow-ons are folded into aggregate invested capital and aggregate terminal
value, and the blended rate is the ordinary closed-form IRR over those
aggregates.
"""

from dataclasses import dataclass
from datetime import date
import logging
import math
from typing import Iterable

from irrgenius.engine.rates import irr, growth_factor
from irrgenius.models.follow_on import FollowOnInvestment, InvestmentType, ValuationType

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class BlendedCashFlows:
    base_rate: float
    total_invested: float
    total_proceeds: float
    final_outcome: float


def sort_follow_ons(follow_ons: Iterable[FollowOnInvestment]) -> list[FollowOnInvestment]:
    """Ascending by resolved date. Stable for events on the same day."""
    return sorted(follow_ons, key=lambda f: f.investment_date)


def elapsed_years(follow_on: FollowOnInvestment, initial_date: date) -> float:
    """Years from the base investment to the event, clamped at 0."""
    years = follow_on.years_from(initial_date)
    if years < 0:
        logger.warning(
            "Follow-on dated %s precedes base investment %s; treating as elapsed=0",
            follow_on.investment_date, initial_date,
        )
        return 0.0
    return years


def tag_along_ratio(initial: float, outcome: float, base_rate: float, years: float) -> float:
    """Outcome / value of the base investment after `years` at `base_rate`.

    Scales a value at the event date up to its terminal value. 0 when the
    current value is degenerate.
    """
    factor = growth_factor(base_rate, years)
    if factor is None:
        return 0.0
    current_value = initial * factor
    if not (current_value > 0 and math.isfinite(current_value)):
        return 0.0
    return outcome / current_value


def sell_proceeds(follow_on: FollowOnInvestment, ratio: float) -> float:
    """Terminal-date proceeds of a partial sale.

    SPECIFIED sales realize their amount as stated. Every other sale is the
    sold stake scaled by the tag-along ratio; a COMPUTED valuation scales the
    stake and the company alike and cancels out.
    """
    if follow_on.is_custom and follow_on.valuation_type == ValuationType.SPECIFIED:
        return follow_on.amount
    return follow_on.amount * ratio


def aggregate_cash_flows(
    initial: float,
    outcome: float,
    years: float,
    follow_ons: Iterable[FollowOnInvestment],
    initial_date: date,
) -> BlendedCashFlows:
    """Fold follow-on events into total invested capital and terminal value."""
    base_rate = irr(initial, outcome, years)
    total_invested = initial
    total_proceeds = 0.0

    for follow_on in sort_follow_ons(follow_ons):
        years_in = elapsed_years(follow_on, initial_date)
        ratio = tag_along_ratio(initial, outcome, base_rate, years_in)

        if follow_on.investment_type == InvestmentType.BUY:
            total_invested += follow_on.amount
        elif follow_on.investment_type == InvestmentType.SELL:
            total_proceeds += sell_proceeds(follow_on, ratio)
        else:
            # BUY_SELL contributes capital and realizes pro-rata at the base rate
            total_invested += follow_on.amount
            total_proceeds += follow_on.amount * ratio

    return BlendedCashFlows(
        base_rate=base_rate,
        total_invested=total_invested,
        total_proceeds=total_proceeds,
        final_outcome=outcome + total_proceeds,
    )


def blended_irr(
    initial: float,
    outcome: float,
    years: float,
    follow_ons: Iterable[FollowOnInvestment],
    initial_date: date,
) -> float:
    """Blended IRR across the base investment and its follow-ons.

    With no follow-ons this is exactly irr(initial, outcome, years).
    """
    follow_ons = list(follow_ons)
    if not follow_ons:
        return irr(initial, outcome, years)

    flows = aggregate_cash_flows(initial, outcome, years, follow_ons, initial_date)
    return irr(flows.total_invested, flows.final_outcome, years)
