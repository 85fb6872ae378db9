from __future__ import annotations

from decimal import Decimal

from tickscale.math_utils import division, floor_to_step, multiplication, to_decimal


NICE_STEP_LADDER = (1, 2, 5, 10)


def normalize_step(step: float) -> float:
    """Round ``step`` up to the nearest 1, 2, 5 or 10 times a power of ten.

    Sub-unit steps are handled one decimal order at a time so the result stays
    exact in decimal (0.2, not 0.20000000000000001).
    """
    if step < 0:
        raise ValueError("step must be >= 0")
    if step == 0:
        return 0.0
    if step < 1:
        return division(normalize_step(multiplication(step, 10)), 10)

    exp, frac = _split_magnitude(step)
    for nice in NICE_STEP_LADDER:
        if frac <= nice:
            return float(Decimal(nice).scaleb(exp))
    raise AssertionError("unreachable: mantissa is always < 10")


def next_nice_step(step: float) -> float:
    """Return the ladder rung that follows the nice step covering ``step``."""
    if step <= 0:
        raise ValueError("step must be > 0")
    if step < 1:
        return division(next_nice_step(multiplication(step, 10)), 10)

    exp, frac = _split_magnitude(normalize_step(step))
    for nice in NICE_STEP_LADDER:
        if frac < nice:
            return float(Decimal(nice).scaleb(exp))
    raise AssertionError("unreachable: mantissa is always < 10")


def normalize_min(min_value: float, step: float) -> float:
    """Floor ``min_value`` to a multiple of ``step`` (toward more negative values)."""
    if step == 0:
        return min_value
    return floor_to_step(min_value, step)


def _split_magnitude(value: float) -> tuple[int, Decimal]:
    d = to_decimal(value)
    exp = d.adjusted()
    return exp, d.scaleb(-exp)
