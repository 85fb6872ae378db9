from __future__ import annotations

import logging

from tickscale.config import MAX_STEP_LADDER_RUNGS, SCALE_HEADROOM_DIVISOR, ZERO_ANCHOR_DIVISOR
from tickscale.errors import InvalidInputError
from tickscale.math_utils import addition, ceil_steps, division, multiplication, subtraction
from tickscale.refine import tick_info_from_scale
from tickscale.steps import next_nice_step, normalize_min, normalize_step
from tickscale.types import AxisOptions, Scale, TickInfo


LOGGER = logging.getLogger(__name__)


def calculate_scale(min_value: float, max_value: float) -> Scale:
    """Pad a non-negative-leaning range with 5% headroom.

    Ranges that sit well above zero (``max / 6 > min``) are anchored at zero
    instead of being padded below.
    """
    save_min = 0.0
    if min_value < 0:
        save_min = min_value
        max_value = subtraction(max_value, min_value)
        min_value = 0.0

    headroom = division(subtraction(max_value, min_value), SCALE_HEADROOM_DIVISOR)
    scale_max = addition(addition(max_value, headroom), save_min)
    if division(max_value, ZERO_ANCHOR_DIVISOR) > min_value:
        scale_min = save_min
    else:
        scale_min = addition(subtraction(min_value, headroom), save_min)
    return Scale(min=scale_min, max=scale_max)


def padded_target(user_min: float, user_max: float, options: AxisOptions) -> Scale:
    if user_min < 0 and user_max <= 0:
        # Work on the mirrored range so padding grows away from zero.
        mirrored = calculate_scale(-user_max, -user_min)
        padded = Scale(min=subtraction(0, mirrored.max), max=subtraction(0, mirrored.min))
    else:
        padded = calculate_scale(user_min, user_max)

    target = Scale(
        min=options.min if options.has_min else padded.min,
        max=options.max if options.has_max else padded.max,
    )
    if target.min > target.max:
        raise InvalidInputError(f"axis overrides conflict with the data range: [{target.min}, {target.max}]")
    return target


def degenerate_tick_info(value: float) -> TickInfo:
    return TickInfo(scale=Scale(min=value, max=value), step=0.0, tick_count=1, labels=(value,))


def layout_scale(
    step: float,
    intervals: int,
    target: Scale,
    user_min: float,
    user_max: float,
    options: AxisOptions,
    *,
    connected_line: bool,
) -> Scale:
    scale_min = options.min if options.has_min else normalize_min(target.min, step)
    scale_max = addition(scale_min, multiplication(step, intervals))

    shortfall = subtraction(target.max, scale_max)
    if shortfall > 0:
        scale_max = addition(scale_max, multiplication(step, ceil_steps(shortfall, step)))

    if not options.has_max and scale_max == user_max:
        scale_max = addition(scale_max, step)
    if (connected_line or user_min > 0) and not options.has_min and scale_min == user_min:
        scale_min = subtraction(scale_min, step)

    if options.has_max:
        scale_max = options.max
    return Scale(min=scale_min, max=scale_max)


def make_tick_info(
    tick_count: int,
    user_min: float,
    user_max: float,
    options: AxisOptions,
    *,
    connected_line: bool = False,
) -> TickInfo:
    target = padded_target(user_min, user_max, options)
    if target.min == target.max:
        return degenerate_tick_info(target.min)

    intervals = max(tick_count - 1, 1)
    step = normalize_step(division(subtraction(target.max, target.min), intervals))
    scale = layout_scale(step, intervals, target, user_min, user_max, options, connected_line=connected_line)
    tick_info = tick_info_from_scale(scale, step)
    if options.has_max and tick_info.tick_count < 2:
        # A pinned max narrower than one nice step would leave a lone tick.
        return even_split_tick_info(target, intervals)
    return tick_info


def fit_tick_info(
    tick_count: int,
    user_min: float,
    user_max: float,
    options: AxisOptions,
    *,
    connected_line: bool = False,
    max_rungs: int = MAX_STEP_LADDER_RUNGS,
) -> TickInfo:
    """Build a scale with exactly ``tick_count`` labels.

    Nice steps are tried in ladder order; a rung is taken only when it lands
    on the requested count and its top tick still reaches the data (or the
    pinned max, when that clips the data). When no rung qualifies the padded
    range is split evenly instead.
    """
    target = padded_target(user_min, user_max, options)
    if target.min == target.max:
        return degenerate_tick_info(target.min)
    if tick_count < 2:
        raise InvalidInputError("tick_count=1 cannot span a non-empty range")

    intervals = tick_count - 1
    reach = min(user_max, target.max)
    step = normalize_step(division(subtraction(target.max, target.min), intervals))
    for _ in range(max_rungs):
        scale = layout_scale(step, intervals, target, user_min, user_max, options, connected_line=connected_line)
        tick_info = tick_info_from_scale(scale, step)
        if tick_info.tick_count == tick_count and tick_info.labels[-1] >= reach:
            return tick_info
        step = next_nice_step(step)

    LOGGER.debug("no nice step yields %d ticks over [%s, %s]", tick_count, target.min, target.max)
    return even_split_tick_info(target, intervals)


def even_split_tick_info(target: Scale, intervals: int) -> TickInfo:
    """Split ``target`` into ``intervals`` equal steps, hitting both bounds exactly."""
    span = subtraction(target.max, target.min)
    labels = tuple(addition(target.min, division(multiplication(span, i), intervals)) for i in range(intervals))
    return TickInfo(
        scale=target,
        step=division(span, intervals),
        tick_count=intervals + 1,
        labels=labels + (target.max,),
    )
