from __future__ import annotations

from tickscale.math_utils import (
    STEP_TOLERANCE,
    addition,
    division,
    mod,
    multiplication,
    step_count,
    subtraction,
    to_decimal,
)
from tickscale.types import AxisOptions, Scale, TickInfo


def make_labels_from_scale(scale: Scale, step: float) -> tuple[float, ...]:
    if step == 0:
        return (scale.min,)
    count = step_count(scale.min, scale.max, step) + 1
    d_min = to_decimal(scale.min)
    d_step = to_decimal(step)
    labels = [float(d_min + d_step * i) + 0.0 for i in range(count)]
    # The top tick is scale.max itself whenever max lies on the grid.
    if count > 1 and abs(to_decimal(scale.max) - to_decimal(labels[-1])) <= d_step * STEP_TOLERANCE:
        labels[-1] = scale.max
    return tuple(labels)


def tick_info_from_scale(scale: Scale, step: float) -> TickInfo:
    labels = make_labels_from_scale(scale, step)
    return TickInfo(scale=scale, step=step, tick_count=len(labels), labels=labels)


def tighten_scale(tick_info: TickInfo, user_min: float, user_max: float, options: AxisOptions) -> TickInfo:
    """Pull un-overridden bounds toward the data by whole steps.

    A bound only moves while the data still lies strictly inside it, so no tick
    ends up exactly on the extreme sample. Overridden bounds stay put.
    """
    step = tick_info.step
    if step == 0:
        return tick_info
    scale = tick_info.scale
    new_min, new_max = scale.min, scale.max
    for k in range(1, tick_info.tick_count):
        offset = multiplication(step, k)
        cur_min = addition(scale.min, offset)
        cur_max = subtraction(scale.max, offset)
        min_movable = not options.has_min and user_min > cur_min
        max_movable = not options.has_max and user_max < cur_max
        if not (min_movable or max_movable):
            break
        if min_movable:
            new_min = cur_min
        if max_movable:
            new_max = cur_max
    if (new_min, new_max) == (scale.min, scale.max):
        return tick_info
    return tick_info_from_scale(Scale(min=new_min, max=new_max), step)


def divide_tick_step(
    tick_info: TickInfo,
    requested_tick_count: int,
    user_min: float,
    user_max: float,
    options: AxisOptions,
) -> TickInfo:
    step = tick_info.step
    tick_count = tick_info.tick_count
    if step == 0 or mod(step, 2) != 0 or tick_count % 2 == 0:
        return tick_info
    halved_count = (tick_count - 1) * 2 + 1
    if abs(requested_tick_count - halved_count) >= abs(requested_tick_count - tick_count):
        return tick_info
    halved = tick_info_from_scale(tick_info.scale, division(step, 2))
    return tighten_scale(halved, user_min, user_max, options)


def refine_tick_info(
    tick_info: TickInfo,
    requested_tick_count: int,
    user_min: float,
    user_max: float,
    options: AxisOptions,
) -> TickInfo:
    tightened = tighten_scale(tick_info, user_min, user_max, options)
    return divide_tick_step(tightened, requested_tick_count, user_min, user_max, options)
