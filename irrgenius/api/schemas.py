"""Pydantic schemas for API request/response models.

Rates are decimal fractions (0.15 for 15%). Portfolio percentages are 0-100.
"""

from datetime import date

from pydantic import BaseModel, Field

from irrgenius.models.follow_on import InvestmentType, TimeUnit, ValuationMode, ValuationType


# ---- Request schemas ----

class IRRCalculationRequest(BaseModel):
    initial: float = Field(..., description="Initial investment")
    outcome: float = Field(..., description="Value at the end of the period")
    years: float


class OutcomeCalculationRequest(BaseModel):
    initial: float
    irr: float = Field(..., description="Annual rate as a decimal fraction")
    years: float


class InitialInvestmentCalculationRequest(BaseModel):
    outcome: float
    irr: float = Field(..., description="Annual rate as a decimal fraction")
    years: float


class FollowOnInvestmentSchema(BaseModel):
    """Either `investment_date` or `offset` + `unit` (relative to the initial date)."""
    amount: float
    investment_type: InvestmentType = InvestmentType.BUY

    investment_date: date | None = None
    offset: float | None = Field(None, description="Time after the initial investment")
    unit: TimeUnit = TimeUnit.YEARS

    valuation_mode: ValuationMode = ValuationMode.TAG_ALONG
    valuation_type: ValuationType = ValuationType.COMPUTED
    valuation: float = 0.0
    irr: float | None = None


class BlendedIRRCalculationRequest(BaseModel):
    initial: float
    outcome: float
    years: float
    initial_date: date
    follow_ons: list[FollowOnInvestmentSchema] = Field(default_factory=list)


class PortfolioUnitCalculationRequest(BaseModel):
    investment_amount: float
    unit_price: float
    success_rate: float = Field(..., description="Percent of units that succeed (0-100)")
    outcome_per_unit: float
    investor_share: float = Field(..., description="Percent of outcome paid to the investor (0-100)")
    years: float
    fee_percentage: float = 0.0


class PortfolioUnitBatchSchema(BaseModel):
    investment_amount: float
    unit_price: float
    investment_date: date


class PortfolioUnitBlendedCalculationRequest(BaseModel):
    initial_batch: PortfolioUnitBatchSchema
    years: float
    success_rate: float
    outcome_per_unit: float
    investor_share: float
    fee_percentage: float = 0.0
    follow_on_batches: list[PortfolioUnitBatchSchema] = Field(default_factory=list)


# ---- Response schemas ----

class GrowthPointResponse(BaseModel):
    month: int
    value: float


class FollowOnMarkerResponse(BaseModel):
    month: int = Field(..., description="Whole months after the initial investment")
    investment_type: InvestmentType


class CalculationResponse(BaseModel):
    mode: str
    result: float
    growth_points: list[GrowthPointResponse]
    follow_on_markers: list[FollowOnMarkerResponse] = Field(default_factory=list)


class GrowthChartRequest(BaseModel):
    title: str = "Investment Growth"
    points: list[GrowthPointResponse]
    buy_months: list[int] = Field(default_factory=list)
    sell_months: list[int] = Field(default_factory=list)
