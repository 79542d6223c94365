"""Closed-form IRR, future value and present value.

Pure functions. No I/O. Rates are decimal fractions (0.15 = 15%).
Invalid inputs return 0.0 instead of raising.
"""

import logging
import math

logger = logging.getLogger(__name__)


def safe_pow(base: float, exponent: float) -> float | None:
    """base ** exponent, or None when the result is not a finite real number."""
    try:
        result = base ** exponent
    except (OverflowError, ZeroDivisionError):
        return None
    if isinstance(result, complex) or not math.isfinite(result):
        return None
    return result


def growth_factor(rate: float, years: float) -> float | None:
    """(1 + rate) ** years, or None when degenerate."""
    return safe_pow(1.0 + rate, years)


def irr(initial: float, outcome: float, years: float) -> float:
    """IRR = (outcome / initial) ** (1 / years) - 1.

    Requires initial > 0, outcome > 0 and years > 0, otherwise 0.
    """
    if not (initial > 0 and outcome > 0 and years > 0):
        logger.debug("irr: invalid inputs initial=%s outcome=%s years=%s", initial, outcome, years)
        return 0.0
    multiple = safe_pow(outcome / initial, 1.0 / years)
    if multiple is None:
        return 0.0
    return multiple - 1.0


def future_value(initial: float, rate: float, years: float) -> float:
    """Outcome = initial * (1 + rate) ** years. Requires initial > 0, years >= 0."""
    if not (initial > 0 and years >= 0):
        return 0.0
    factor = growth_factor(rate, years)
    if factor is None:
        return 0.0
    value = initial * factor
    return value if math.isfinite(value) else 0.0


def present_value(outcome: float, rate: float, years: float) -> float:
    """Initial = outcome / (1 + rate) ** years. Requires outcome > 0, years >= 0."""
    if not (outcome > 0 and years >= 0):
        return 0.0
    divisor = growth_factor(rate, years)
    if divisor is None or divisor == 0:
        return 0.0
    value = outcome / divisor
    return value if math.isfinite(value) else 0.0
