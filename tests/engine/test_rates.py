import pytest

from irrgenius.engine.rates import irr, future_value, present_value, growth_factor, safe_pow


class TestIRR:
    def test_known_value(self):
        """$100 becomes $150 in 2 years = 22.47%."""
        assert irr(100, 150, 2) == pytest.approx(0.2247448714, abs=1e-9)

    def test_one_year(self):
        assert irr(100, 110, 1) == pytest.approx(0.10)

    def test_fractional_years(self):
        assert irr(100, 121, 2.0) == pytest.approx(0.10)
        assert irr(100, 110, 0.5) == pytest.approx(0.21)

    def test_loss(self):
        assert irr(100, 50, 1) == pytest.approx(-0.5)

    def test_zero_guards(self):
        assert irr(0, 100, 1) == 0
        assert irr(100, 0, 1) == 0
        assert irr(100, 150, 0) == 0

    def test_negative_inputs(self):
        assert irr(-100, 150, 2) == 0
        assert irr(100, -150, 2) == 0
        assert irr(100, 150, -2) == 0

    def test_nan_years(self):
        assert irr(100, 150, float("nan")) == 0

    def test_overflow_returns_zero(self):
        assert irr(1, 1e300, 1e-3) == 0

    def test_rate_is_not_scaled(self):
        """Rates are decimal fractions; percentage scaling is the caller's job."""
        assert irr(100, 200, 1) == pytest.approx(1.0)


class TestFutureValue:
    def test_known_value(self):
        assert future_value(100, 0.15, 3) == pytest.approx(152.0875, abs=1e-9)

    def test_zero_years_is_initial(self):
        assert future_value(100, 0.15, 0) == 100

    def test_negative_rate(self):
        assert future_value(100, -0.10, 2) == pytest.approx(81.0)

    def test_total_loss(self):
        assert future_value(100, -1.0, 3) == 0

    def test_guards(self):
        assert future_value(0, 0.15, 3) == 0
        assert future_value(-100, 0.15, 3) == 0
        assert future_value(100, 0.15, -1) == 0

    def test_no_real_result(self):
        """Rate below -100% with fractional years has no real value."""
        assert future_value(100, -2.0, 0.5) == 0

    def test_overflow(self):
        assert future_value(1e300, 1e10, 100) == 0


class TestPresentValue:
    def test_known_value(self):
        assert present_value(200, 0.10, 5) == pytest.approx(124.1841, abs=1e-3)

    def test_zero_years_is_outcome(self):
        assert present_value(200, 0.10, 0) == 200

    def test_zero_divisor(self):
        assert present_value(200, -1.0, 2) == 0

    def test_guards(self):
        assert present_value(0, 0.10, 5) == 0
        assert present_value(-200, 0.10, 5) == 0
        assert present_value(200, 0.10, -5) == 0


class TestRoundTrip:
    def test_irr_recovers_rate(self):
        for initial, rate, years in [(1000, 0.20, 3), (250, -0.35, 1.5), (1, 0.07, 30), (50000, 0.0, 4)]:
            outcome = future_value(initial, rate, years)
            assert abs(irr(initial, outcome, years) - rate) < 1e-6

    def test_present_value_inverts_future_value(self):
        for x, rate, years in [(100, 0.15, 3), (12345.67, 0.042, 12.25), (10, -0.2, 2)]:
            assert abs(present_value(future_value(x, rate, years), rate, years) - x) < 1e-6


class TestHelpers:
    def test_growth_factor(self):
        assert growth_factor(0.10, 2) == pytest.approx(1.21)

    def test_growth_factor_degenerate(self):
        assert growth_factor(-2.0, 0.5) is None

    def test_safe_pow_zero_division(self):
        assert safe_pow(0.0, -1.0) is None
