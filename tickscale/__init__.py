from tickscale.axis import AxisData, compute_tick_info, make_label_axis, make_value_axis
from tickscale.config import DEFAULT_TICK_LAYOUT, TickLayoutConfig, load_tick_layout_config
from tickscale.errors import InvalidInputError, TickScaleError
from tickscale.labels import format_labels, format_ticks_for_axis, make_format_functions
from tickscale.steps import normalize_step
from tickscale.types import AxisOptions, AxisSpec, ChartDimension, Scale, TickInfo

__all__ = [
    "AxisData",
    "AxisOptions",
    "AxisSpec",
    "ChartDimension",
    "DEFAULT_TICK_LAYOUT",
    "InvalidInputError",
    "Scale",
    "TickInfo",
    "TickLayoutConfig",
    "TickScaleError",
    "compute_tick_info",
    "format_labels",
    "format_ticks_for_axis",
    "load_tick_layout_config",
    "make_format_functions",
    "make_label_axis",
    "make_value_axis",
    "normalize_step",
]
