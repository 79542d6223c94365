"""Portfolio unit investments: capital buys units, a share of which succeed.

Pure functions. No I/O.

    units            = amount / unit_price
    successful units = units * success_rate / 100
    net per unit     = outcome_per_unit * investor_share / 100 * (1 - fee / 100)
    total outcome    = successful units * net per unit

Percentages are 0-100. Out-of-range percentages are invalid (IRR 0), not clamped.
"""

from typing import Iterable

from irrgenius.engine.rates import irr
from irrgenius.engine.validation import is_percentage
from irrgenius.models.portfolio import PortfolioUnitBatch


def _percentages_valid(success_rate: float, investor_share: float, fee_percentage: float) -> bool:
    return (
        is_percentage(success_rate)
        and is_percentage(investor_share)
        and is_percentage(fee_percentage)
    )


def net_outcome_per_unit(
    outcome_per_unit: float, investor_share: float, fee_percentage: float = 0.0
) -> float:
    """Investor's cut of one successful unit after fees."""
    gross = outcome_per_unit * (investor_share / 100.0)
    return gross * (1.0 - fee_percentage / 100.0)


def portfolio_unit_outcome(
    units: float,
    success_rate: float,
    outcome_per_unit: float,
    investor_share: float,
    fee_percentage: float = 0.0,
) -> float:
    """Expected total payout for a pool of units."""
    successful_units = units * (success_rate / 100.0)
    return successful_units * net_outcome_per_unit(outcome_per_unit, investor_share, fee_percentage)


def portfolio_unit_irr(
    investment_amount: float,
    unit_price: float,
    success_rate: float,
    outcome_per_unit: float,
    investor_share: float,
    years: float,
    fee_percentage: float = 0.0,
) -> float:
    """IRR of a single batch of units."""
    if not (investment_amount > 0 and unit_price > 0 and years > 0):
        return 0.0
    if not _percentages_valid(success_rate, investor_share, fee_percentage):
        return 0.0

    total_outcome = portfolio_unit_outcome(
        investment_amount / unit_price,
        success_rate,
        outcome_per_unit,
        investor_share,
        fee_percentage,
    )
    return irr(investment_amount, total_outcome, years)


def pooled_batches(
    initial_batch: PortfolioUnitBatch,
    follow_on_batches: Iterable[PortfolioUnitBatch] = (),
) -> tuple[float, float]:
    """(total invested, total units) across all batches.

    Each batch converts its own amount at its own unit price.
    """
    total_investment = initial_batch.investment_amount
    total_units = initial_batch.units
    for batch in follow_on_batches:
        total_investment += batch.investment_amount
        total_units += batch.units
    return total_investment, total_units


def portfolio_unit_blended_irr(
    initial_batch: PortfolioUnitBatch,
    years: float,
    success_rate: float,
    outcome_per_unit: float,
    investor_share: float,
    follow_on_batches: Iterable[PortfolioUnitBatch] = (),
    fee_percentage: float = 0.0,
) -> float:
    """IRR over the combined unit pool of several batches.

    Batch dates do not weight the result; every batch is treated as held
    for the full `years`.
    """
    if not years > 0:
        return 0.0
    if not _percentages_valid(success_rate, investor_share, fee_percentage):
        return 0.0

    total_investment, total_units = pooled_batches(initial_batch, follow_on_batches)
    total_outcome = portfolio_unit_outcome(
        total_units, success_rate, outcome_per_unit, investor_share, fee_percentage
    )
    return irr(total_investment, total_outcome, years)
