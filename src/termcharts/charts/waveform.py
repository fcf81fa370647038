"""Waveform charts: sparkline, histogram and area chart.

Each renderer resamples the series to one sample per column, normalizes it
against the series bounds and picks glyphs from :data:`SPARK_LEVELS`.
Empty input and non-positive dimensions render as ``""`` / ``[]``.
"""

from __future__ import annotations

import math
from typing import Sequence

from termcharts.core.formatting import format_compact
from termcharts.core.scaling import quantize, resample
from termcharts.defaults import (
    AXIS_LABEL_WIDTH,
    BOX_LIGHT,
    DEFAULT_AREA_HEIGHT,
    DEFAULT_AREA_WIDTH,
    DEFAULT_HISTOGRAM_HEIGHT,
    DEFAULT_HISTOGRAM_WIDTH,
    SPARK_LEVELS,
)
from termcharts.types.series import TimePoint, values_of

_LEVELS = len(SPARK_LEVELS)
_FULL = SPARK_LEVELS[-1]
_AXIS_GAP = " " * (AXIS_LABEL_WIDTH + 1)


def sparkline(
    data: Sequence[float],
    width: int | None = None,
    min_value: float | None = None,
    max_value: float | None = None,
) -> str:
    """Render *data* as a single row of *width* block characters.

    Bounds default to the series min/max; values outside caller-supplied
    bounds are clamped to the lowest/highest glyph.

    >>> sparkline([0, 5, 10], width=5)
    '▁▃▅▇█'
    """
    if not data:
        return ""
    if width is None:
        width = len(data)
    if width <= 0:
        return ""

    lo = min(data) if min_value is None else min_value
    hi = max(data) if max_value is None else max_value
    return "".join(SPARK_LEVELS[quantize(v, lo, hi, _LEVELS)] for v in resample(data, width))


def sparkline_from_points(
    points: Sequence[TimePoint],
    width: int | None = None,
    min_value: float | None = None,
    max_value: float | None = None,
) -> str:
    return sparkline(values_of(list(points)), width, min_value, max_value)


def histogram(
    data: Sequence[float],
    width: int = DEFAULT_HISTOGRAM_WIDTH,
    height: int = DEFAULT_HISTOGRAM_HEIGHT,
    show_axis: bool = True,
    title: str | None = None,
) -> list[str]:
    """Render a vertical column chart *height* rows tall, top row first.

    Row ``r`` (0 = bottom) covers the band ``[r/h, (r+1)/h)`` of the
    normalized range and its threshold sits at ``(r+0.5)/h``. A column that
    reaches the threshold is drawn with an upper-half glyph (a full block once
    it covers the band); a column that only enters the band gets a lower-half
    glyph proportional to the covered part. A value exactly on the threshold
    draws ``▅``. The bottom row is never blank: the series minimum (and every
    column of a flat series) sits on the lowest glyph ``▁``.

    With *show_axis* the rows carry compact max/min labels and a bottom axis
    line is appended. A *title* adds a centered line and a blank line on top;
    it is clipped to *width* first, so the heading is never wider than the
    plot.
    """
    if not data or width <= 0 or height <= 0:
        return []

    lo = min(data)
    hi = max(data)
    span = hi - lo or 1
    normalized = [(v - lo) / span for v in resample(data, width)]

    lines: list[str] = []
    if title:
        clipped = title[:width]
        lines.append(clipped.rjust(width // 2 + len(clipped) // 2))
        lines.append("")

    for row in range(height - 1, -1, -1):
        prefix = ""
        if show_axis:
            if row == height - 1:
                label = format_compact(hi)
            elif row == 0:
                label = format_compact(lo)
            else:
                label = ""
            prefix = f"{label.rjust(AXIS_LABEL_WIDTH)} {BOX_LIGHT['vertical']}"
        lines.append(prefix + "".join(_histogram_cell(v, row, height) for v in normalized))

    if show_axis:
        lines.append(_AXIS_GAP + BOX_LIGHT["bottom_left"] + BOX_LIGHT["horizontal"] * width)

    return lines


def _histogram_cell(value: float, row: int, height: int) -> str:
    fill = value * height - row
    if value >= (row + 0.5) / height:
        if fill >= 1:
            return _FULL
        return SPARK_LEVELS[min(max(math.floor(fill * _LEVELS), _LEVELS // 2), _LEVELS - 1)]
    if fill > 0 or row == 0:
        return SPARK_LEVELS[min(math.floor(fill * _LEVELS), _LEVELS // 2 - 1)]
    return " "


def histogram_from_points(
    points: Sequence[TimePoint],
    width: int = DEFAULT_HISTOGRAM_WIDTH,
    height: int = DEFAULT_HISTOGRAM_HEIGHT,
    show_axis: bool = True,
    title: str | None = None,
) -> list[str]:
    return histogram(values_of(list(points)), width, height, show_axis, title)


def area_chart(
    data: Sequence[float],
    width: int = DEFAULT_AREA_WIDTH,
    height: int = DEFAULT_AREA_HEIGHT,
    show_labels: bool = True,
) -> list[str]:
    """Render a filled silhouette where each column rises ``normalized*height`` rows.

    The row just above a column's integer height shows a partial glyph for
    the fractional part, so the outline is graduated in eighths.
    """
    if not data or width <= 0 or height <= 0:
        return []

    lo = min(data)
    hi = max(data)
    span = hi - lo or 1
    levels = [(v - lo) / span * height for v in resample(data, width)]

    lines: list[str] = []
    for row in range(height, 0, -1):
        prefix = ""
        if show_labels:
            if row == height:
                label = format_compact(hi)
            elif row == 1:
                label = format_compact(lo)
            else:
                label = ""
            prefix = f"{label.rjust(AXIS_LABEL_WIDTH)} {BOX_LIGHT['vertical']} "
        lines.append(prefix + "".join(_area_cell(level, row) for level in levels))

    if show_labels:
        lines.append(_AXIS_GAP + BOX_LIGHT["bottom_left"] + BOX_LIGHT["horizontal"] * (width + 1))

    return lines


def _area_cell(level: float, row: int) -> str:
    if level >= row:
        return _FULL
    if level >= row - 1:
        partial = level - (row - 1)
        return SPARK_LEVELS[min(math.floor(partial * _LEVELS), _LEVELS - 1)]
    return " "


def area_chart_from_points(
    points: Sequence[TimePoint],
    width: int = DEFAULT_AREA_WIDTH,
    height: int = DEFAULT_AREA_HEIGHT,
    show_labels: bool = True,
) -> list[str]:
    return area_chart(values_of(list(points)), width, height, show_labels)
