from datetime import date

import pytest

from irrgenius.engine.portfolio import (
    net_outcome_per_unit,
    pooled_batches,
    portfolio_unit_blended_irr,
    portfolio_unit_irr,
    portfolio_unit_outcome,
)
from irrgenius.engine.rates import irr
from irrgenius.models.portfolio import PortfolioUnitBatch


def _single(**overrides):
    args = dict(
        investment_amount=10000.0,
        unit_price=100.0,
        success_rate=50.0,
        outcome_per_unit=1000.0,
        investor_share=40.0,
        years=3.0,
        fee_percentage=10.0,
    )
    args.update(overrides)
    return portfolio_unit_irr(**args)


class TestOutcome:
    def test_net_per_unit(self):
        # $1,000 * 40% share * (1 - 10% fee)
        assert net_outcome_per_unit(1000.0, 40.0, 10.0) == pytest.approx(360.0)

    def test_pool_outcome(self):
        # 100 units, half succeed, $360 each
        assert portfolio_unit_outcome(100.0, 50.0, 1000.0, 40.0, 10.0) == pytest.approx(18000.0)


class TestPortfolioUnitIRR:
    def test_basic(self):
        assert _single() == pytest.approx(irr(10000.0, 18000.0, 3.0))
        assert _single() == pytest.approx(1.8 ** (1 / 3) - 1)

    def test_no_fee_default(self):
        rate = portfolio_unit_irr(10000.0, 100.0, 50.0, 1000.0, 40.0, 3.0)
        assert rate == pytest.approx(irr(10000.0, 20000.0, 3.0))

    def test_percentage_bounds_inclusive(self):
        assert _single(success_rate=100.0) > 0
        assert _single(investor_share=100.0, fee_percentage=0.0) > 0

    def test_out_of_range_percentages_return_zero(self):
        assert _single(success_rate=100.5) == 0
        assert _single(success_rate=-1.0) == 0
        assert _single(investor_share=101.0) == 0
        assert _single(investor_share=-0.01) == 0
        assert _single(fee_percentage=150.0) == 0
        assert _single(fee_percentage=-5.0) == 0

    def test_nothing_succeeds(self):
        assert _single(success_rate=0.0) == 0

    def test_all_fees(self):
        assert _single(fee_percentage=100.0) == 0

    def test_invalid_amounts(self):
        assert _single(investment_amount=0.0) == 0
        assert _single(unit_price=0.0) == 0
        assert _single(unit_price=-10.0) == 0
        assert _single(years=0.0) == 0


class TestPortfolioUnitBlendedIRR:
    def test_pools_units_at_each_price(self, initial_batch):
        cheaper = PortfolioUnitBatch(investment_amount=5000.0, unit_price=50.0,
                                     investment_date=date(2024, 1, 1))
        assert pooled_batches(initial_batch, [cheaper]) == (15000.0, 200.0)

        rate = portfolio_unit_blended_irr(
            initial_batch, 3.0, 50.0, 1000.0, 40.0, [cheaper], fee_percentage=10.0
        )
        # 200 units, 100 succeed at $360
        assert rate == pytest.approx(irr(15000.0, 36000.0, 3.0))

    def test_no_follow_ons_matches_single_batch(self, initial_batch):
        blended = portfolio_unit_blended_irr(initial_batch, 3.0, 50.0, 1000.0, 40.0, fee_percentage=10.0)
        assert blended == pytest.approx(_single())

    def test_batch_timing_is_ignored(self, initial_batch):
        early = PortfolioUnitBatch(5000.0, 50.0, date(2023, 2, 1))
        late = PortfolioUnitBatch(5000.0, 50.0, date(2025, 12, 1))
        assert portfolio_unit_blended_irr(initial_batch, 3.0, 50.0, 1000.0, 40.0, [early]) == \
            portfolio_unit_blended_irr(initial_batch, 3.0, 50.0, 1000.0, 40.0, [late])

    def test_out_of_range_returns_zero(self, initial_batch):
        assert portfolio_unit_blended_irr(initial_batch, 3.0, 120.0, 1000.0, 40.0) == 0
        assert portfolio_unit_blended_irr(initial_batch, 3.0, 50.0, 1000.0, 40.0, fee_percentage=-1) == 0

    def test_zero_years(self, initial_batch):
        assert portfolio_unit_blended_irr(initial_batch, 0.0, 50.0, 1000.0, 40.0) == 0


class TestPortfolioUnitBatch:
    def test_units(self, initial_batch):
        assert initial_batch.units == 100.0

    def test_rejects_non_positive_price(self):
        with pytest.raises(ValueError, match="unit price"):
            PortfolioUnitBatch(investment_amount=1000.0, unit_price=0.0, investment_date=date(2024, 1, 1))

    def test_rejects_non_positive_amount(self):
        with pytest.raises(ValueError, match="investment amount"):
            PortfolioUnitBatch(investment_amount=-1.0, unit_price=10.0, investment_date=date(2024, 1, 1))
