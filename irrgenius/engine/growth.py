"""Monthly valuation trajectories for charting.

Pure functions. No I/O. Every series runs from month 0 to
floor(years * 12) inclusive and is fully re-derivable from its inputs.
"""

from datetime import date
import math
from typing import Iterable

from dateutil.relativedelta import relativedelta

from irrgenius.engine.blended import elapsed_years, sort_follow_ons
from irrgenius.engine.portfolio import portfolio_unit_irr, portfolio_unit_blended_irr
from irrgenius.engine.rates import growth_factor, safe_pow
from irrgenius.models.follow_on import FollowOnInvestment, InvestmentType, ValuationType
from irrgenius.models.portfolio import PortfolioUnitBatch
from irrgenius.models.results import GrowthPoint

GrowthSeries = tuple[GrowthPoint, ...]


def total_months(years: float) -> int:
    if not (math.isfinite(years) and years > 0):
        return 0
    return math.floor(years * 12)


def _grow(amount: float, rate: float, years: float) -> float:
    factor = growth_factor(rate, years)
    if factor is None:
        return 0.0
    value = amount * factor
    return value if math.isfinite(value) else 0.0


def growth_points(initial: float, rate: float, years: float) -> GrowthSeries:
    """initial compounded monthly at an annual `rate`."""
    return tuple(
        GrowthPoint(month=month, value=_grow(initial, rate, month / 12.0))
        for month in range(total_months(years) + 1)
    )


def custom_growth_rate(
    follow_on: FollowOnInvestment,
    initial: float,
    rate: float,
    years: float,
    elapsed: float,
) -> float:
    """Annual rate a CUSTOM follow-on grows at from its own date.

    COMPUTED events with an IRR use it directly. Otherwise the rate is the
    one that takes the stated valuation to the base investment's terminal
    value over the remaining time. Falls back to `rate`.
    """
    if follow_on.valuation_type == ValuationType.COMPUTED and follow_on.irr is not None:
        return follow_on.irr

    remaining = years - elapsed
    final_value = _grow(initial, rate, years)
    if follow_on.valuation > 0 and remaining > 0 and final_value > 0:
        multiple = safe_pow(final_value / follow_on.valuation, 1.0 / remaining)
        if multiple is not None:
            return multiple - 1.0
    return rate


def growth_points_with_follow_ons(
    initial: float,
    rate: float,
    years: float,
    follow_ons: Iterable[FollowOnInvestment],
    initial_date: date,
) -> GrowthSeries:
    """Base trajectory with each follow-on overlaid from its own date.

    Buys add their amount grown since the event (at `rate`, or at their
    custom rate); sells subtract theirs grown at `rate`.
    """
    events = []
    for follow_on in sort_follow_ons(follow_ons):
        elapsed = elapsed_years(follow_on, initial_date)
        if follow_on.investment_type == InvestmentType.SELL or not follow_on.is_custom:
            event_rate = rate
        else:
            event_rate = custom_growth_rate(follow_on, initial, rate, years, elapsed)
        events.append((follow_on, elapsed, event_rate))

    points = []
    for month in range(total_months(years) + 1):
        year_fraction = month / 12.0
        current_date = initial_date + relativedelta(months=month)
        value = _grow(initial, rate, year_fraction)

        for follow_on, elapsed, event_rate in events:
            since = year_fraction - elapsed
            if current_date < follow_on.investment_date or since < 0:
                continue
            contribution = _grow(follow_on.amount, event_rate, since)
            if follow_on.investment_type == InvestmentType.SELL:
                value -= contribution
            else:
                value += contribution

        points.append(GrowthPoint(month=month, value=value))
    return tuple(points)


def portfolio_unit_growth_points(
    investment_amount: float,
    unit_price: float,
    success_rate: float,
    outcome_per_unit: float,
    investor_share: float,
    years: float,
    fee_percentage: float = 0.0,
) -> GrowthSeries:
    rate = portfolio_unit_irr(
        investment_amount, unit_price, success_rate, outcome_per_unit,
        investor_share, years, fee_percentage,
    )
    return growth_points(investment_amount, rate, years)


def portfolio_unit_blended_growth_points(
    initial_batch: PortfolioUnitBatch,
    years: float,
    success_rate: float,
    outcome_per_unit: float,
    investor_share: float,
    follow_on_batches: Iterable[PortfolioUnitBatch] = (),
    fee_percentage: float = 0.0,
) -> GrowthSeries:
    """Initial batch as the base, later batches as tag-along buys at the pooled rate."""
    follow_on_batches = list(follow_on_batches)
    rate = portfolio_unit_blended_irr(
        initial_batch, years, success_rate, outcome_per_unit, investor_share,
        follow_on_batches, fee_percentage,
    )
    buys = [
        FollowOnInvestment(amount=batch.investment_amount, investment_date=batch.investment_date)
        for batch in follow_on_batches
    ]
    return growth_points_with_follow_ons(
        initial_batch.investment_amount, rate, years, buys, initial_batch.investment_date,
    )
