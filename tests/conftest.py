"""Shared fixtures.

Base deal: $100K invested on 2023-01-01, worth $200K after 5 years.
Portfolio: $10K of $100 units, 50% succeed, $1,000 per success, 40% to the
investor, 10% fees, 3 years.
"""

import pytest
from datetime import date

from irrgenius.models.follow_on import (
    FollowOnInvestment,
    InvestmentType,
    TimeUnit,
    ValuationMode,
    ValuationType,
)
from irrgenius.models.portfolio import PortfolioUnitBatch
from irrgenius.models.requests import BlendedIRRRequest, PortfolioUnitRequest


@pytest.fixture
def base_date() -> date:
    return date(2023, 1, 1)


@pytest.fixture
def blended_request(base_date) -> BlendedIRRRequest:
    return BlendedIRRRequest(
        initial=100000.0,
        outcome=200000.0,
        years=5.0,
        initial_date=base_date,
    )


@pytest.fixture
def tag_along_sell(base_date) -> FollowOnInvestment:
    """Tag-along partial sale one year in."""
    return FollowOnInvestment.after(
        base_date, 1, TimeUnit.YEARS, 10000.0,
        investment_type=InvestmentType.SELL,
    )


@pytest.fixture
def specified_sell(base_date) -> FollowOnInvestment:
    """Sale at a stated price three years in."""
    return FollowOnInvestment.after(
        base_date, 3, TimeUnit.YEARS, 10000.0,
        investment_type=InvestmentType.SELL,
        valuation_mode=ValuationMode.CUSTOM,
        valuation_type=ValuationType.SPECIFIED,
        valuation=10000.0,
    )


@pytest.fixture
def portfolio_request() -> PortfolioUnitRequest:
    return PortfolioUnitRequest(
        investment_amount=10000.0,
        unit_price=100.0,
        success_rate=50.0,
        outcome_per_unit=1000.0,
        investor_share=40.0,
        years=3.0,
        fee_percentage=10.0,
    )


@pytest.fixture
def initial_batch(base_date) -> PortfolioUnitBatch:
    return PortfolioUnitBatch(investment_amount=10000.0, unit_price=100.0, investment_date=base_date)
