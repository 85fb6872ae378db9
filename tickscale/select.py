from __future__ import annotations

from collections.abc import Sequence
import logging

from tickscale.errors import TickScaleError
from tickscale.math_utils import find_multiple_num
from tickscale.types import TickInfo


LOGGER = logging.getLogger(__name__)


def comparing_value(tick_info: TickInfo, min_value: float, max_value: float) -> float:
    """Padding left around the data, weighted by how many decimals the step needs."""
    diff_max = abs(tick_info.scale.max - max_value)
    diff_min = abs(min_value - tick_info.scale.min)
    weight = find_multiple_num(tick_info.step)
    return (diff_max + diff_min) * weight


def select_tick_info(candidates: Sequence[TickInfo], min_value: float, max_value: float) -> TickInfo:
    if not candidates:
        raise TickScaleError("no tick candidates to select from")
    best: TickInfo | None = None
    best_value = 0.0
    for info in candidates:
        value = comparing_value(info, min_value, max_value)
        LOGGER.debug("candidate ticks=%d step=%s score=%s", info.tick_count, info.step, value)
        if best is None or value < best_value:
            best, best_value = info, value
    assert best is not None
    return best
