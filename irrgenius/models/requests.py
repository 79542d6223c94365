"""Calculation requests: one frozen dataclass per calculation mode.

`CalculationRequest` is the union of all variants. Rates are decimal
fractions (0.15 for 15%); portfolio percentages are 0-100.
"""

from dataclasses import dataclass
from datetime import date
from enum import Enum
from typing import ClassVar, Union

from irrgenius.models.follow_on import FollowOnInvestment
from irrgenius.models.portfolio import PortfolioUnitBatch


class CalculationMode(Enum):
    IRR = "irr"
    OUTCOME = "outcome"
    INITIAL_INVESTMENT = "initial_investment"
    BLENDED_IRR = "blended_irr"
    PORTFOLIO_UNIT = "portfolio_unit"
    PORTFOLIO_UNIT_BLENDED = "portfolio_unit_blended"


@dataclass(frozen=True)
class IRRRequest:
    mode: ClassVar[CalculationMode] = CalculationMode.IRR

    initial: float
    outcome: float
    years: float


@dataclass(frozen=True)
class OutcomeRequest:
    mode: ClassVar[CalculationMode] = CalculationMode.OUTCOME

    initial: float
    irr: float
    years: float


@dataclass(frozen=True)
class InitialInvestmentRequest:
    mode: ClassVar[CalculationMode] = CalculationMode.INITIAL_INVESTMENT

    outcome: float
    irr: float
    years: float


@dataclass(frozen=True)
class BlendedIRRRequest:
    mode: ClassVar[CalculationMode] = CalculationMode.BLENDED_IRR

    initial: float
    outcome: float
    years: float
    initial_date: date
    follow_ons: tuple[FollowOnInvestment, ...] = ()

    def __post_init__(self):
        object.__setattr__(self, "follow_ons", tuple(self.follow_ons))


@dataclass(frozen=True)
class PortfolioUnitRequest:
    mode: ClassVar[CalculationMode] = CalculationMode.PORTFOLIO_UNIT

    investment_amount: float
    unit_price: float
    success_rate: float  # 0-100
    outcome_per_unit: float
    investor_share: float  # 0-100
    years: float
    fee_percentage: float = 0.0  # 0-100


@dataclass(frozen=True)
class PortfolioUnitBlendedRequest:
    mode: ClassVar[CalculationMode] = CalculationMode.PORTFOLIO_UNIT_BLENDED

    initial_batch: PortfolioUnitBatch
    years: float
    success_rate: float
    outcome_per_unit: float
    investor_share: float
    fee_percentage: float = 0.0
    follow_on_batches: tuple[PortfolioUnitBatch, ...] = ()

    def __post_init__(self):
        object.__setattr__(self, "follow_on_batches", tuple(self.follow_on_batches))

    @property
    def initial_date(self) -> date:
        return self.initial_batch.investment_date


CalculationRequest = Union[
    IRRRequest,
    OutcomeRequest,
    InitialInvestmentRequest,
    BlendedIRRRequest,
    PortfolioUnitRequest,
    PortfolioUnitBlendedRequest,
]
