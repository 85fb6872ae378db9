from __future__ import annotations

from dataclasses import dataclass, fields
from pathlib import Path
from typing import Any
import tomllib


MIN_PIXEL_STEP_SIZE = 40
MAX_PIXEL_STEP_SIZE = 60
CHART_TITLE_HEIGHT = 80
VERTICAL_AXIS_WIDTH = 90
LEGEND_WIDTH = 90
SCALE_HEADROOM_DIVISOR = 20
ZERO_ANCHOR_DIVISOR = 6
MAX_STEP_LADDER_RUNGS = 12

CONFIG_TABLE = "tick_layout"


@dataclass(frozen=True)
class TickLayoutConfig:
    min_pixel_step: int = MIN_PIXEL_STEP_SIZE
    max_pixel_step: int = MAX_PIXEL_STEP_SIZE
    chart_title_height: int = CHART_TITLE_HEIGHT
    vertical_axis_width: int = VERTICAL_AXIS_WIDTH
    legend_width: int = LEGEND_WIDTH

    def __post_init__(self) -> None:
        if self.min_pixel_step <= 0:
            raise ValueError("min_pixel_step must be > 0")
        if self.max_pixel_step < self.min_pixel_step:
            raise ValueError("max_pixel_step must be >= min_pixel_step")
        for name in ("chart_title_height", "vertical_axis_width", "legend_width"):
            if getattr(self, name) < 0:
                raise ValueError(f"{name} must be >= 0")

    def usable_length(self, width: float, height: float, *, is_vertical: bool) -> float:
        if is_vertical:
            return height - self.chart_title_height
        return width - self.vertical_axis_width - self.legend_width

    @classmethod
    def from_mapping(cls, raw: dict[str, Any]) -> "TickLayoutConfig":
        known = {f.name for f in fields(cls)}
        unknown = sorted(set(raw) - known)
        if unknown:
            raise ValueError(f"unknown tick layout field: {unknown[0]}")
        values = {name: _coerce_int(value, name) for name, value in raw.items()}
        return cls(**values)


DEFAULT_TICK_LAYOUT = TickLayoutConfig()


def load_tick_layout_config(path: str | Path) -> TickLayoutConfig:
    """Read a ``[tick_layout]`` table from a TOML file.

    Missing tables or fields fall back to the defaults.
    """
    with Path(path).open("rb") as f:
        raw = tomllib.load(f)
    table = raw.get(CONFIG_TABLE, {})
    if not isinstance(table, dict):
        raise ValueError(f"{CONFIG_TABLE} must be a table")
    return TickLayoutConfig.from_mapping(table)


def _coerce_int(value: Any, field: str) -> int:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ValueError(f"{field} must be a number")
    if isinstance(value, float) and not value.is_integer():
        raise ValueError(f"{field} must be a whole number of pixels")
    return int(value)
