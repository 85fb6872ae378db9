from __future__ import annotations

from collections.abc import Callable, Sequence
import re
from typing import Any

import numpy as np

from tickscale.errors import InvalidInputError
from tickscale.math_utils import decimal_places


FormatFunction = Callable[[Any], Any]

DEFAULT_TICK_DECIMALS = 6
MAX_TICK_DECIMALS = 12
SCI_UPPER = 1e15
SCI_LOWER = 1e-9

_FORMAT_PATTERN = re.compile(r"^\d{1,3}(,\d{3})*(\.\d+)?$|^\d+(\.\d+)?$")


def format_labels(labels: Sequence[float], format_functions: Sequence[FormatFunction] | None = None) -> tuple[Any, ...]:
    if not format_functions:
        return tuple(labels)
    out = []
    for label in labels:
        value: Any = label
        for fn in format_functions:
            value = fn(value)
        out.append(value)
    return tuple(out)


def make_format_functions(fmt: str | None = None, *, prefix: str = "", suffix: str = "") -> tuple[FormatFunction, ...]:
    """Build label transforms from a chart format string such as ``"1,000.00"``.

    A comma in the integer part turns on thousands separators; the digits after
    the point fix the number of decimals. Prefix and suffix wrap the result.
    """
    fns: list[FormatFunction] = []
    if fmt:
        if not _FORMAT_PATTERN.match(fmt):
            raise InvalidInputError(f"unsupported label format: {fmt!r}")
        integer_part, _, fraction = fmt.partition(".")
        spec = f"{',' if ',' in integer_part else ''}.{len(fraction)}f"
        fns.append(lambda value: format(float(value), spec))
    if prefix:
        fns.append(lambda value: f"{prefix}{_plain(value)}")
    if suffix:
        fns.append(lambda value: f"{_plain(value)}{suffix}")
    return tuple(fns)


def format_tick(value: float, *, step: float | None = None) -> str:
    """Render one tick with as many decimals as ``step`` needs.

    Values within a billionth of a step of zero print as ``"0"``; very large or
    very small magnitudes switch to scientific notation.
    """
    if not np.isfinite(value):
        return str(value)
    has_step = step is not None and np.isfinite(step) and step > 0
    if has_step and abs(value) <= step * 1e-9:
        value = 0.0
    magnitude = abs(value)
    if magnitude and (magnitude >= SCI_UPPER or magnitude < SCI_LOWER):
        return f"{value:.4e}"

    places = min(decimal_places(step), MAX_TICK_DECIMALS) if has_step else DEFAULT_TICK_DECIMALS
    text = f"{round(value, places) + 0.0:.{places}f}"
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    return "0" if text == "-0" else text


def format_ticks_for_axis(labels: Sequence[float], *, step: float | None = None) -> list[str]:
    """Format a tick sequence with one shared decimal count.

    Without ``step`` the spacing of the first two labels is used.
    """
    if step is None and len(labels) > 1:
        step = abs(float(labels[1]) - float(labels[0]))
    return [format_tick(float(v), step=step) for v in labels]


def _plain(value: Any) -> str:
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)
