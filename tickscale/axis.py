from __future__ import annotations

from collections.abc import Mapping, Sequence
from dataclasses import dataclass, replace
import logging
from typing import Any

from tickscale.adapters.normalize import flatten_values
from tickscale.candidates import candidate_tick_counts
from tickscale.config import DEFAULT_TICK_LAYOUT, TickLayoutConfig
from tickscale.errors import InvalidInputError
from tickscale.labels import FormatFunction, format_labels, format_ticks_for_axis
from tickscale.magnitude import make_integer_type_info, pin_overrides, restore_magnitude
from tickscale.refine import refine_tick_info
from tickscale.scales import fit_tick_info, make_tick_info
from tickscale.select import select_tick_info
from tickscale.types import AxisOptions, AxisSpec, AxisType, ChartDimension, ChartType, Scale, TickInfo


LOGGER = logging.getLogger(__name__)


@dataclass(frozen=True)
class AxisData:
    axis_type: AxisType
    labels: tuple[Any, ...]
    tick_count: int
    title: str = ""
    scale: Scale | None = None
    step: float | None = None
    is_vertical: bool = False
    chart_type: ChartType = "column"
    tick_info: TickInfo | None = None

    def is_label_axis(self) -> bool:
        return self.axis_type == "label"

    def is_value_axis(self) -> bool:
        return self.axis_type == "value"

    def valid_tick_count(self) -> int:
        return self.tick_count if self.is_value_axis() else 0

    def with_vertical(self, is_vertical: bool) -> "AxisData":
        return replace(self, is_vertical=is_vertical)


def compute_tick_info(
    values: Any,
    dimension: ChartDimension | Mapping[str, float],
    options: AxisOptions | Mapping[str, Any] | None = None,
    *,
    is_vertical: bool = False,
    chart_type: ChartType = "column",
    config: TickLayoutConfig = DEFAULT_TICK_LAYOUT,
) -> TickInfo:
    spec = AxisSpec(options=_coerce_options(options), is_vertical=is_vertical, chart_type=chart_type)
    return _compute(flatten_values(values), _coerce_dimension(dimension), spec, config)


def make_value_axis(
    values: Any,
    dimension: ChartDimension | Mapping[str, float],
    spec: AxisSpec | None = None,
    format_functions: Sequence[FormatFunction] | None = None,
    *,
    format_ticks: bool = False,
    config: TickLayoutConfig = DEFAULT_TICK_LAYOUT,
) -> AxisData:
    """Value axis over the computed ticks.

    With ``format_ticks`` the labels are first rendered as strings sharing the
    step's decimal count; ``format_functions`` then apply on top.
    """
    spec = spec or AxisSpec()
    tick_info = _compute(flatten_values(values), _coerce_dimension(dimension), spec, config)
    labels: Sequence[Any] = tick_info.labels
    if format_ticks:
        labels = format_ticks_for_axis(labels, step=tick_info.step or None)
    return AxisData(
        axis_type="value",
        labels=format_labels(labels, format_functions),
        tick_count=tick_info.tick_count,
        title=spec.options.title,
        scale=tick_info.scale,
        step=tick_info.step,
        is_vertical=spec.is_vertical,
        chart_type=spec.chart_type,
        tick_info=tick_info,
    )


def make_label_axis(labels: Sequence[str], spec: AxisSpec | None = None) -> AxisData:
    """Category axis: one slot per label, so ticks sit between and around them."""
    spec = spec or AxisSpec()
    if isinstance(labels, (str, bytes)) or len(labels) == 0:
        raise InvalidInputError("labels must be a non-empty sequence")
    return AxisData(
        axis_type="label",
        labels=tuple(labels),
        tick_count=len(labels) + 1,
        title=spec.options.title,
        is_vertical=spec.is_vertical,
        chart_type=spec.chart_type,
    )


def _compute(values, dimension: ChartDimension, spec: AxisSpec, config: TickLayoutConfig) -> TickInfo:
    options = spec.options
    user_min = float(values.min())
    user_max = float(values.max())
    _check_partial_overrides(user_min, user_max, options)

    int_info = make_integer_type_info(user_min, user_max, options)
    tick_counts = candidate_tick_counts(
        dimension, is_vertical=spec.is_vertical, tick_count=options.tick_count, config=config
    )
    LOGGER.debug("tick count candidates for [%s, %s]: %s", user_min, user_max, tick_counts)

    if options.tick_count is not None:
        candidates = [
            fit_tick_info(n, int_info.min, int_info.max, int_info.options, connected_line=spec.is_connected_line)
            for n in tick_counts
        ]
    else:
        candidates = [
            refine_tick_info(
                make_tick_info(n, int_info.min, int_info.max, int_info.options, connected_line=spec.is_connected_line),
                n,
                int_info.min,
                int_info.max,
                int_info.options,
            )
            for n in tick_counts
        ]
    selected = select_tick_info(candidates, int_info.min, int_info.max)
    tick_info = pin_overrides(restore_magnitude(selected, int_info.multiplier), options)

    if options.has_min and options.min > user_min:
        LOGGER.warning("min override %s clips data minimum %s", options.min, user_min)
    if options.has_max and options.max < user_max:
        LOGGER.warning("max override %s clips data maximum %s", options.max, user_max)
    LOGGER.debug(
        "selected scale [%s, %s] step=%s ticks=%d",
        tick_info.scale.min,
        tick_info.scale.max,
        tick_info.step,
        tick_info.tick_count,
    )
    return tick_info


def _check_partial_overrides(user_min: float, user_max: float, options: AxisOptions) -> None:
    if options.has_min and not options.has_max and options.min > user_max:
        raise InvalidInputError(f"min override {options.min} is above the data maximum {user_max}")
    if options.has_max and not options.has_min and options.max < user_min:
        raise InvalidInputError(f"max override {options.max} is below the data minimum {user_min}")


def _coerce_options(options: AxisOptions | Mapping[str, Any] | None) -> AxisOptions:
    if options is None:
        return AxisOptions()
    if isinstance(options, AxisOptions):
        return options
    if isinstance(options, Mapping):
        known = {"title", "min", "max", "tick_count"}
        unknown = sorted(set(options) - known)
        if unknown:
            raise InvalidInputError(f"unknown axis option: {unknown[0]}")
        return AxisOptions(**options)
    raise InvalidInputError(f"unsupported options type: {type(options)!r}")


def _coerce_dimension(dimension: ChartDimension | Mapping[str, float]) -> ChartDimension:
    if isinstance(dimension, ChartDimension):
        return dimension
    if isinstance(dimension, Mapping):
        try:
            return ChartDimension(width=float(dimension["width"]), height=float(dimension["height"]))
        except KeyError as exc:
            raise InvalidInputError(f"chart dimension missing field: {exc.args[0]}") from exc
    raise InvalidInputError(f"unsupported chart dimension type: {type(dimension)!r}")
