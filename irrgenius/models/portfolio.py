from dataclasses import dataclass
from datetime import date


@dataclass(frozen=True)
class PortfolioUnitBatch:
    """One purchase of units (leads, royalties, claims) at a point in time."""
    investment_amount: float
    unit_price: float
    investment_date: date

    def __post_init__(self):
        if not self.investment_amount > 0:
            raise ValueError("Batch investment amount must be a positive number")
        if not self.unit_price > 0:
            raise ValueError("Batch unit price must be a positive number")

    @property
    def units(self) -> float:
        return self.investment_amount / self.unit_price
