from __future__ import annotations

import logging

from tickscale.config import DEFAULT_TICK_LAYOUT, TickLayoutConfig
from tickscale.types import ChartDimension


LOGGER = logging.getLogger(__name__)


def candidate_tick_counts(
    dimension: ChartDimension,
    *,
    is_vertical: bool,
    tick_count: int | None = None,
    config: TickLayoutConfig = DEFAULT_TICK_LAYOUT,
) -> list[int]:
    if tick_count is not None:
        return [tick_count]

    base_size = config.usable_length(dimension.width, dimension.height, is_vertical=is_vertical)
    start = int(base_size / config.max_pixel_step)
    end = int(base_size / config.min_pixel_step) + 1
    counts = [n for n in range(start, end) if n >= 1]
    if not counts:
        LOGGER.debug("no tick count fits %.1fpx at %d-%dpx per tick; using a single tick",
                     base_size, config.min_pixel_step, config.max_pixel_step)
        return [1]
    return counts
