from dataclasses import dataclass, field
import math

from irrgenius.models.requests import CalculationMode


@dataclass(frozen=True)
class GrowthPoint:
    month: int
    value: float

    @property
    def is_valid(self) -> bool:
        return self.month >= 0 and math.isfinite(self.value)


@dataclass(frozen=True)
class CalculationResult:
    mode: CalculationMode
    value: float  # Raw decimal rate or monetary amount, never scaled
    growth_points: tuple[GrowthPoint, ...] = field(default_factory=tuple)

    @property
    def final_value(self) -> float:
        """Last point of the trajectory, 0 when there is none."""
        if not self.growth_points:
            return 0.0
        return self.growth_points[-1].value
