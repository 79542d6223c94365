"""Calculation routes: one endpoint per calculation mode."""

from datetime import date
import logging

from fastapi import APIRouter, HTTPException

from irrgenius.api.schemas import (
    IRRCalculationRequest,
    OutcomeCalculationRequest,
    InitialInvestmentCalculationRequest,
    BlendedIRRCalculationRequest,
    FollowOnInvestmentSchema,
    PortfolioUnitCalculationRequest,
    PortfolioUnitBatchSchema,
    PortfolioUnitBlendedCalculationRequest,
    CalculationResponse,
    FollowOnMarkerResponse,
    GrowthPointResponse,
)
from irrgenius.charts import follow_on_months
from irrgenius.config import settings
from irrgenius.engine.calculator import calculate
from irrgenius.engine.validation import ValidationSeverity, validate_request
from irrgenius.models.follow_on import FollowOnInvestment
from irrgenius.models.portfolio import PortfolioUnitBatch
from irrgenius.models.requests import (
    CalculationRequest,
    IRRRequest,
    OutcomeRequest,
    InitialInvestmentRequest,
    BlendedIRRRequest,
    PortfolioUnitRequest,
    PortfolioUnitBlendedRequest,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/v1/calculate", tags=["calculations"])


def _build_follow_on(schema: FollowOnInvestmentSchema, initial_date: date) -> FollowOnInvestment:
    """Resolve a follow-on to an absolute date once, here, at the API boundary."""
    kwargs = dict(
        investment_type=schema.investment_type,
        valuation_mode=schema.valuation_mode,
        valuation_type=schema.valuation_type,
        valuation=schema.valuation,
        irr=schema.irr,
    )
    if schema.investment_date is not None and schema.offset is not None:
        raise ValueError("Follow-on investment takes either investment_date or offset, not both")
    if schema.investment_date is not None:
        return FollowOnInvestment(
            amount=schema.amount, investment_date=schema.investment_date, **kwargs
        )
    if schema.offset is not None:
        return FollowOnInvestment.after(
            initial_date, schema.offset, schema.unit, schema.amount, **kwargs
        )
    raise ValueError("Follow-on investment needs either investment_date or offset")


def _build_batch(schema: PortfolioUnitBatchSchema) -> PortfolioUnitBatch:
    return PortfolioUnitBatch(
        investment_amount=schema.investment_amount,
        unit_price=schema.unit_price,
        investment_date=schema.investment_date,
    )


def _run(request: CalculationRequest) -> CalculationResponse:
    """Validate, calculate, and convert to the API response.

    Invalid input is reported as 400 rather than as the engine's 0.0.
    """
    problems = validate_request(request)
    errors = [p for p in problems if p.severity == ValidationSeverity.ERROR]
    for warning in (p for p in problems if p.severity != ValidationSeverity.ERROR):
        logger.warning("%s: %s (%s)", request.mode.value, warning.message, warning.field)
    if errors:
        raise HTTPException(
            status_code=400,
            detail=[{"field": e.field, "message": e.message} for e in errors],
        )
    if request.years > settings.max_years:
        raise HTTPException(
            status_code=400,
            detail=f"Time period exceeds the maximum of {settings.max_years:g} years",
        )

    result = calculate(request)
    logger.info("Calculated %s: %s", result.mode.value, result.value)
    return CalculationResponse(
        mode=result.mode.value,
        result=result.value,
        growth_points=[
            GrowthPointResponse(month=p.month, value=p.value) for p in result.growth_points
        ],
    )


@router.post("/irr", response_model=CalculationResponse)
async def calculate_irr(req: IRRCalculationRequest):
    """IRR from initial investment, outcome and time."""
    return _run(IRRRequest(initial=req.initial, outcome=req.outcome, years=req.years))


@router.post("/outcome", response_model=CalculationResponse)
async def calculate_outcome(req: OutcomeCalculationRequest):
    return _run(OutcomeRequest(initial=req.initial, irr=req.irr, years=req.years))


@router.post("/initial-investment", response_model=CalculationResponse)
async def calculate_initial_investment(req: InitialInvestmentCalculationRequest):
    return _run(InitialInvestmentRequest(outcome=req.outcome, irr=req.irr, years=req.years))


@router.post("/blended-irr", response_model=CalculationResponse)
async def calculate_blended_irr(req: BlendedIRRCalculationRequest):
    """Blended IRR with follow-on buy/sell events."""
    try:
        follow_ons = [_build_follow_on(f, req.initial_date) for f in req.follow_ons]
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))

    response = _run(BlendedIRRRequest(
        initial=req.initial,
        outcome=req.outcome,
        years=req.years,
        initial_date=req.initial_date,
        follow_ons=follow_ons,
    ))
    response.follow_on_markers = [
        FollowOnMarkerResponse(month=month, investment_type=investment_type)
        for month, investment_type in follow_on_months(follow_ons, req.initial_date)
    ]
    return response


@router.post("/portfolio-unit", response_model=CalculationResponse)
async def calculate_portfolio_unit(req: PortfolioUnitCalculationRequest):
    return _run(PortfolioUnitRequest(
        investment_amount=req.investment_amount,
        unit_price=req.unit_price,
        success_rate=req.success_rate,
        outcome_per_unit=req.outcome_per_unit,
        investor_share=req.investor_share,
        years=req.years,
        fee_percentage=req.fee_percentage,
    ))


@router.post("/portfolio-unit/blended", response_model=CalculationResponse)
async def calculate_portfolio_unit_blended(req: PortfolioUnitBlendedCalculationRequest):
    """Portfolio unit IRR pooled across several purchase batches."""
    try:
        initial_batch = _build_batch(req.initial_batch)
        follow_on_batches = [_build_batch(b) for b in req.follow_on_batches]
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))

    return _run(PortfolioUnitBlendedRequest(
        initial_batch=initial_batch,
        years=req.years,
        success_rate=req.success_rate,
        outcome_per_unit=req.outcome_per_unit,
        investor_share=req.investor_share,
        fee_percentage=req.fee_percentage,
        follow_on_batches=follow_on_batches,
    ))
