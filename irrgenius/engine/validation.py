"""Input validation for calculation requests.

The engine returns 0.0 for inputs outside its domain. Callers that need to
tell the user *why* run `validate_request` first; it applies the same
preconditions and reports them as ValidationErrors.
"""

from dataclasses import dataclass
from enum import Enum
import math

from irrgenius.models.follow_on import FollowOnInvestment, ValuationType
from irrgenius.models.requests import (
    CalculationRequest,
    IRRRequest,
    OutcomeRequest,
    InitialInvestmentRequest,
    BlendedIRRRequest,
    PortfolioUnitRequest,
    PortfolioUnitBlendedRequest,
)


class ValidationSeverity(Enum):
    ERROR = "error"
    WARNING = "warning"


@dataclass(frozen=True)
class ValidationError:
    field: str
    message: str
    severity: ValidationSeverity = ValidationSeverity.ERROR


def is_positive(value: float) -> bool:
    return math.isfinite(value) and value > 0


def is_non_negative(value: float) -> bool:
    return math.isfinite(value) and value >= 0


def is_percentage(value: float) -> bool:
    return math.isfinite(value) and 0 <= value <= 100


def is_rate(value: float) -> bool:
    """A decimal rate the compounding formulas accept (above -100%)."""
    return math.isfinite(value) and value > -1


class _Checker:
    def __init__(self):
        self.errors: list[ValidationError] = []

    def check(self, ok: bool, field: str, message: str,
              severity: ValidationSeverity = ValidationSeverity.ERROR) -> None:
        if not ok:
            self.errors.append(ValidationError(field, message, severity))

    def positive(self, value: float, field: str, label: str) -> None:
        self.check(is_positive(value), field, f"{label} must be a positive number")

    def non_negative(self, value: float, field: str, label: str) -> None:
        self.check(is_non_negative(value), field, f"{label} must not be negative")

    def percentage(self, value: float, field: str, label: str) -> None:
        self.check(is_percentage(value), field, f"{label} must be between 0 and 100")

    def rate(self, value: float, field: str) -> None:
        self.check(is_rate(value), field, "IRR must be a valid rate greater than -100%")


def _check_follow_on(checker: _Checker, index: int, follow_on: FollowOnInvestment,
                     request: BlendedIRRRequest) -> None:
    prefix = f"follow_ons[{index}]"
    checker.check(
        follow_on.investment_date >= request.initial_date,
        f"{prefix}.investment_date",
        "Follow-on investment date must not precede the initial investment",
    )
    if not follow_on.is_custom:
        return
    if follow_on.valuation_type == ValuationType.SPECIFIED:
        checker.positive(follow_on.valuation, f"{prefix}.valuation", "Valuation")
    elif follow_on.irr is not None:
        checker.rate(follow_on.irr, f"{prefix}.irr")


def validate_request(request: CalculationRequest) -> list[ValidationError]:
    """All precondition failures for a request. Empty list means valid."""
    checker = _Checker()

    if isinstance(request, IRRRequest):
        checker.positive(request.initial, "initial", "Initial investment")
        checker.positive(request.outcome, "outcome", "Outcome amount")
        checker.positive(request.years, "years", "Time period")

    elif isinstance(request, OutcomeRequest):
        checker.positive(request.initial, "initial", "Initial investment")
        checker.rate(request.irr, "irr")
        checker.non_negative(request.years, "years", "Time period")

    elif isinstance(request, InitialInvestmentRequest):
        checker.positive(request.outcome, "outcome", "Outcome amount")
        checker.rate(request.irr, "irr")
        checker.non_negative(request.years, "years", "Time period")

    elif isinstance(request, BlendedIRRRequest):
        checker.positive(request.initial, "initial", "Initial investment")
        checker.positive(request.outcome, "outcome", "Outcome amount")
        checker.positive(request.years, "years", "Time period")
        for i, follow_on in enumerate(request.follow_ons):
            _check_follow_on(checker, i, follow_on, request)

    elif isinstance(request, PortfolioUnitRequest):
        checker.positive(request.investment_amount, "investment_amount", "Investment amount")
        checker.positive(request.unit_price, "unit_price", "Unit price")
        checker.positive(request.years, "years", "Time period")
        checker.positive(request.outcome_per_unit, "outcome_per_unit", "Outcome per unit")
        checker.percentage(request.success_rate, "success_rate", "Success rate")
        checker.percentage(request.investor_share, "investor_share", "Investor share")
        checker.percentage(request.fee_percentage, "fee_percentage", "Fee percentage")

    elif isinstance(request, PortfolioUnitBlendedRequest):
        checker.positive(request.years, "years", "Time period")
        checker.positive(request.outcome_per_unit, "outcome_per_unit", "Outcome per unit")
        checker.percentage(request.success_rate, "success_rate", "Success rate")
        checker.percentage(request.investor_share, "investor_share", "Investor share")
        checker.percentage(request.fee_percentage, "fee_percentage", "Fee percentage")
        for i, batch in enumerate(request.follow_on_batches):
            # Batch timing does not change the rate, only the chart
            checker.check(
                batch.investment_date >= request.initial_date,
                f"follow_on_batches[{i}].investment_date",
                "Batch date precedes the initial batch",
                ValidationSeverity.WARNING,
            )

    else:
        raise TypeError(f"Unsupported calculation request: {type(request).__name__}")

    return checker.errors


def is_valid(request: CalculationRequest) -> bool:
    """True when the request has no ERROR-severity problems."""
    return not any(
        e.severity == ValidationSeverity.ERROR for e in validate_request(request)
    )
