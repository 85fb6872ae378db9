from __future__ import annotations

from dataclasses import dataclass, field
import math
from typing import Literal

from tickscale.errors import InvalidInputError


ChartType = Literal["bar", "column", "line", "area", "combo", "pie"]
CHART_TYPES: frozenset[str] = frozenset({"bar", "column", "line", "area", "combo", "pie"})
# Series drawn as a connected path; a tick sitting exactly on their lowest point hides it.
CONNECTED_LINE_CHART_TYPES: frozenset[str] = frozenset({"line", "area"})

AxisType = Literal["value", "label"]


@dataclass(frozen=True)
class ChartDimension:
    width: float
    height: float

    def __post_init__(self) -> None:
        if not (math.isfinite(self.width) and math.isfinite(self.height)):
            raise InvalidInputError("chart dimension must be finite")
        if self.width <= 0 or self.height <= 0:
            raise InvalidInputError("chart width/height must be > 0")


@dataclass(frozen=True)
class AxisOptions:
    title: str = ""
    min: float | None = None
    max: float | None = None
    tick_count: int | None = None

    def __post_init__(self) -> None:
        for name in ("min", "max"):
            bound = getattr(self, name)
            if bound is not None and not math.isfinite(bound):
                raise InvalidInputError(f"{name} override must be finite")
        if self.tick_count is not None:
            if isinstance(self.tick_count, bool) or not isinstance(self.tick_count, int):
                raise InvalidInputError("tick_count must be an integer")
            if self.tick_count < 1:
                raise InvalidInputError("tick_count must be >= 1")
        if self.min is not None and self.max is not None:
            if self.min > self.max:
                raise InvalidInputError(f"min override {self.min} is greater than max override {self.max}")
            if self.min == self.max:
                raise InvalidInputError("min and max overrides must differ")

    @property
    def has_min(self) -> bool:
        return self.min is not None

    @property
    def has_max(self) -> bool:
        return self.max is not None


@dataclass(frozen=True)
class AxisSpec:
    options: AxisOptions = field(default_factory=AxisOptions)
    is_vertical: bool = False
    chart_type: ChartType = "column"

    def __post_init__(self) -> None:
        if self.chart_type not in CHART_TYPES:
            raise InvalidInputError(f"unknown chart type: {self.chart_type!r}")

    @property
    def is_connected_line(self) -> bool:
        return self.chart_type in CONNECTED_LINE_CHART_TYPES


@dataclass(frozen=True)
class Scale:
    min: float
    max: float


@dataclass(frozen=True)
class TickInfo:
    scale: Scale
    step: float
    tick_count: int
    labels: tuple[float, ...]

    def __post_init__(self) -> None:
        if len(self.labels) != self.tick_count:
            raise ValueError(f"tick_count {self.tick_count} does not match {len(self.labels)} labels")
        if self.step < 0:
            raise ValueError("step must be >= 0")
