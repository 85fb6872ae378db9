from __future__ import annotations

from decimal import ROUND_CEILING, ROUND_FLOOR, ROUND_HALF_EVEN, Decimal


STEP_TOLERANCE = Decimal("1e-9")


def to_decimal(value: float) -> Decimal:
    # str() keeps the shortest repr, so 0.1 stays 0.1 instead of its binary expansion.
    return Decimal(str(value))


def decimal_places(value: float) -> int:
    d = to_decimal(value)
    if not d.is_finite() or d == 0:
        return 0
    exp = d.normalize().as_tuple().exponent
    return max(0, -int(exp))


def find_multiple_num(*values: float) -> int:
    if not values:
        return 1
    return 10 ** max(decimal_places(v) for v in values)


def _as_float(value: Decimal) -> float:
    # Collapse -0.0 so labels never render as "-0".
    return float(value) + 0.0


def addition(a: float, b: float) -> float:
    return _as_float(to_decimal(a) + to_decimal(b))


def subtraction(a: float, b: float) -> float:
    return _as_float(to_decimal(a) - to_decimal(b))


def multiplication(a: float, b: float) -> float:
    return _as_float(to_decimal(a) * to_decimal(b))


def division(a: float, b: float) -> float:
    if b == 0:
        raise ZeroDivisionError("division by zero")
    return _as_float(to_decimal(a) / to_decimal(b))


def mod(a: float, b: float) -> float:
    """Remainder with the sign of the dividend."""
    if b == 0:
        raise ZeroDivisionError("modulo by zero")
    return _as_float(to_decimal(a) % to_decimal(b))


def floor_to_step(value: float, step: float) -> float:
    if step <= 0:
        raise ValueError("step must be > 0")
    d_step = to_decimal(step)
    units = (to_decimal(value) / d_step).to_integral_value(rounding=ROUND_FLOOR)
    return _as_float(units * d_step)


def ceil_steps(distance: float, step: float) -> int:
    """Whole steps needed to cover ``distance``."""
    if step <= 0:
        raise ValueError("step must be > 0")
    if distance <= 0:
        return 0
    return _whole_steps(to_decimal(distance), step, ROUND_CEILING)


def step_count(start: float, stop: float, step: float) -> int:
    """Number of whole steps from ``start`` that stay at or below ``stop``."""
    if step <= 0:
        raise ValueError("step must be > 0")
    if stop < start:
        return 0
    return _whole_steps(to_decimal(stop) - to_decimal(start), step, ROUND_FLOOR)


def _whole_steps(distance: Decimal, step: float, rounding: str) -> int:
    # Bounds already rounded back to float can sit an ulp off the grid; snap those.
    units = distance / to_decimal(step)
    nearest = units.to_integral_value(rounding=ROUND_HALF_EVEN)
    if abs(units - nearest) <= STEP_TOLERANCE:
        return int(nearest)
    return int(units.to_integral_value(rounding=rounding))
