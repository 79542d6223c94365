"""Calculation orchestrator: request in, CalculationResult out.

Pure computation. No I/O. Dispatches on the request's type; each handler
computes the scalar result and the growth series for its mode.
"""

import logging
from typing import Callable

from irrgenius.engine.blended import blended_irr
from irrgenius.engine.growth import (
    growth_points,
    growth_points_with_follow_ons,
    portfolio_unit_growth_points,
    portfolio_unit_blended_growth_points,
)
from irrgenius.engine.portfolio import portfolio_unit_irr, portfolio_unit_blended_irr
from irrgenius.engine.rates import irr, future_value, present_value
from irrgenius.models.requests import (
    CalculationRequest,
    IRRRequest,
    OutcomeRequest,
    InitialInvestmentRequest,
    BlendedIRRRequest,
    PortfolioUnitRequest,
    PortfolioUnitBlendedRequest,
)
from irrgenius.models.results import CalculationResult

logger = logging.getLogger(__name__)


def _calculate_irr(req: IRRRequest) -> CalculationResult:
    rate = irr(req.initial, req.outcome, req.years)
    return CalculationResult(req.mode, rate, growth_points(req.initial, rate, req.years))


def _calculate_outcome(req: OutcomeRequest) -> CalculationResult:
    outcome = future_value(req.initial, req.irr, req.years)
    return CalculationResult(req.mode, outcome, growth_points(req.initial, req.irr, req.years))


def _calculate_initial(req: InitialInvestmentRequest) -> CalculationResult:
    initial = present_value(req.outcome, req.irr, req.years)
    return CalculationResult(req.mode, initial, growth_points(initial, req.irr, req.years))


def _calculate_blended(req: BlendedIRRRequest) -> CalculationResult:
    rate = blended_irr(req.initial, req.outcome, req.years, req.follow_ons, req.initial_date)
    if req.follow_ons:
        points = growth_points_with_follow_ons(
            req.initial, rate, req.years, req.follow_ons, req.initial_date
        )
    else:
        points = growth_points(req.initial, rate, req.years)
    return CalculationResult(req.mode, rate, points)


def _calculate_portfolio(req: PortfolioUnitRequest) -> CalculationResult:
    args = (
        req.investment_amount,
        req.unit_price,
        req.success_rate,
        req.outcome_per_unit,
        req.investor_share,
        req.years,
        req.fee_percentage,
    )
    return CalculationResult(req.mode, portfolio_unit_irr(*args), portfolio_unit_growth_points(*args))


def _calculate_portfolio_blended(req: PortfolioUnitBlendedRequest) -> CalculationResult:
    args = (
        req.initial_batch,
        req.years,
        req.success_rate,
        req.outcome_per_unit,
        req.investor_share,
        req.follow_on_batches,
        req.fee_percentage,
    )
    return CalculationResult(
        req.mode, portfolio_unit_blended_irr(*args), portfolio_unit_blended_growth_points(*args)
    )


_HANDLERS: dict[type, Callable[..., CalculationResult]] = {
    IRRRequest: _calculate_irr,
    OutcomeRequest: _calculate_outcome,
    InitialInvestmentRequest: _calculate_initial,
    BlendedIRRRequest: _calculate_blended,
    PortfolioUnitRequest: _calculate_portfolio,
    PortfolioUnitBlendedRequest: _calculate_portfolio_blended,
}


def calculate(request: CalculationRequest) -> CalculationResult:
    """Run one calculation.

    Invalid numeric inputs give a 0.0 result (see engine.validation to
    report them). An unknown request type is a programming error and raises
    TypeError.
    """
    handler = _HANDLERS.get(type(request))
    if handler is None:
        raise TypeError(f"Unsupported calculation request: {type(request).__name__}")

    result = handler(request)
    logger.debug(
        "%s -> %s (%d growth points)", request.mode.value, result.value, len(result.growth_points)
    )
    return result
