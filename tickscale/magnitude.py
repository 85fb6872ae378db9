from __future__ import annotations

from dataclasses import dataclass, replace
import logging
import math

from tickscale.math_utils import division, multiplication
from tickscale.types import AxisOptions, Scale, TickInfo


LOGGER = logging.getLogger(__name__)


@dataclass(frozen=True)
class IntegerTypeInfo:
    """Data range and overrides rescaled into the working domain."""

    min: float
    max: float
    options: AxisOptions
    multiplier: int = 1


def find_magnitude_multiplier(min_value: float, max_value: float) -> int:
    if abs(min_value) >= 1 or abs(max_value) >= 1:
        return 1
    nonzero = [abs(v) for v in (min_value, max_value) if v != 0]
    if not nonzero:
        return 1
    smallest = min(nonzero)
    multiplier = 1
    while multiplication(smallest, multiplier) < 1:
        multiplier *= 10
    return multiplier


def make_integer_type_info(min_value: float, max_value: float, options: AxisOptions) -> IntegerTypeInfo:
    multiplier = find_magnitude_multiplier(min_value, max_value)
    if multiplier == 1:
        return IntegerTypeInfo(min=min_value, max=max_value, options=options)

    LOGGER.debug("rescaling sub-unit range [%s, %s] by %d", min_value, max_value, multiplier)
    scaled_options = replace(
        options,
        min=None if options.min is None else multiplication(options.min, multiplier),
        max=None if options.max is None else multiplication(options.max, multiplier),
    )
    return IntegerTypeInfo(
        min=multiplication(min_value, multiplier),
        max=multiplication(max_value, multiplier),
        options=scaled_options,
        multiplier=multiplier,
    )


def apply_magnitude(tick_info: TickInfo, multiplier: int) -> TickInfo:
    if multiplier == 1:
        return tick_info
    return _rescale(tick_info, lambda v: multiplication(v, multiplier))


def restore_magnitude(tick_info: TickInfo, multiplier: int) -> TickInfo:
    if multiplier == 1:
        return tick_info
    return _rescale(tick_info, lambda v: division(v, multiplier))


def _rescale(tick_info: TickInfo, fn) -> TickInfo:
    return TickInfo(
        scale=Scale(min=fn(tick_info.scale.min), max=fn(tick_info.scale.max)),
        step=fn(tick_info.step),
        tick_count=tick_info.tick_count,
        labels=tuple(fn(label) for label in tick_info.labels),
    )


def pin_overrides(tick_info: TickInfo, options: AxisOptions) -> TickInfo:
    """Put the caller's override values back on the bounds they pin.

    Rescaling an override and back can drift it by an ulp; a pinned bound
    must come out exactly as it went in.
    """
    if not (options.has_min or options.has_max):
        return tick_info
    scale = tick_info.scale
    labels = list(tick_info.labels)
    if tick_info.step == 0:
        value = options.min if options.has_min else options.max
        return TickInfo(scale=Scale(min=value, max=value), step=0.0, tick_count=1, labels=(value,))

    new_min = options.min if options.has_min else scale.min
    new_max = options.max if options.has_max else scale.max
    if options.has_min:
        labels[0] = options.min
    if options.has_max and len(labels) > 1 and math.isclose(labels[-1], scale.max, rel_tol=1e-12):
        labels[-1] = options.max
    return TickInfo(scale=Scale(min=new_min, max=new_max), step=tick_info.step,
                    tick_count=tick_info.tick_count, labels=tuple(labels))
