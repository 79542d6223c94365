from dataclasses import dataclass
from datetime import date, timedelta
from enum import Enum
import math

from dateutil.relativedelta import relativedelta

DAYS_PER_YEAR = 365.25


class InvestmentType(Enum):
    BUY = "buy"
    SELL = "sell"
    BUY_SELL = "buy_sell"


class ValuationMode(Enum):
    TAG_ALONG = "tag_along"  # Grows at the base investment's rate
    CUSTOM = "custom"


class ValuationType(Enum):
    COMPUTED = "computed"  # Derived from a supplied IRR
    SPECIFIED = "specified"  # Valuation used literally


class TimeUnit(Enum):
    DAYS = "days"
    MONTHS = "months"
    YEARS = "years"


def resolve_relative_date(base_date: date, offset: float, unit: TimeUnit) -> date:
    """Absolute date `offset` units after `base_date`.

    Fractional days and months are truncated. Years are converted to days
    at 365.25 days/year so fractional years keep their precision.
    """
    if not math.isfinite(offset):
        raise ValueError("Relative time must be a finite number")
    if offset < 0:
        raise ValueError("Relative time must not be negative")
    try:
        if unit == TimeUnit.DAYS:
            return base_date + timedelta(days=int(offset))
        if unit == TimeUnit.MONTHS:
            return base_date + relativedelta(months=int(offset))
        return base_date + timedelta(days=int(offset * DAYS_PER_YEAR))
    except (OverflowError, ValueError) as e:
        # Past date.max
        raise ValueError("Relative time is out of range") from e


@dataclass(frozen=True)
class FollowOnInvestment:
    """An additional buy/sell event after the base investment.

    The date is always absolute. Use `after()` to build one from an offset
    relative to the base investment date.
    """
    amount: float
    investment_date: date
    investment_type: InvestmentType = InvestmentType.BUY
    valuation_mode: ValuationMode = ValuationMode.TAG_ALONG
    valuation_type: ValuationType = ValuationType.COMPUTED  # Only used when CUSTOM
    valuation: float = 0.0
    irr: float | None = None  # Decimal fraction, CUSTOM + COMPUTED only

    def __post_init__(self):
        if not self.amount > 0:
            raise ValueError("Investment amount must be a positive number")
        if self.valuation < 0:
            raise ValueError("Valuation must not be negative")

    @classmethod
    def after(
        cls,
        base_date: date,
        offset: float,
        unit: TimeUnit,
        amount: float,
        **kwargs,
    ) -> "FollowOnInvestment":
        return cls(
            amount=amount,
            investment_date=resolve_relative_date(base_date, offset, unit),
            **kwargs,
        )

    @property
    def is_custom(self) -> bool:
        return self.valuation_mode == ValuationMode.CUSTOM

    def years_from(self, base_date: date) -> float:
        """Years between the base investment and this event (365.25-day years)."""
        return (self.investment_date - base_date).days / DAYS_PER_YEAR
