"""Proportional charts: horizontal bars, progress bar and donut.

These charts show shares of a whole with no time axis. Zero totals render
every category at 0% instead of dividing by zero.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Callable, Sequence

from termcharts.core.scaling import clamp_unit, round_half_up
from termcharts.defaults import (
    BAR_EMPTY,
    BAR_FULL,
    BAR_PARTIALS,
    DEFAULT_BAR_WIDTH,
    DEFAULT_DONUT_SIZE,
    DEFAULT_LABEL_WIDTH,
    DEFAULT_PROGRESS_WIDTH,
    DONUT_GLYPHS,
    DONUT_HOLE_RATIO,
)
from termcharts.types.series import CategoryValue

_EIGHTHS = len(BAR_PARTIALS)


def bar_chart(
    items: Sequence[CategoryValue],
    width: int = DEFAULT_BAR_WIDTH,
    show_value: bool = True,
    max_label_width: int = DEFAULT_LABEL_WIDTH,
    value_formatter: Callable[[float], str] | None = None,
) -> list[str]:
    """Render one labelled horizontal bar per item.

    Bars are scaled against ``max(values, 1)`` and drawn in eighths of a
    cell: whole ``█`` blocks plus one partial block for the remainder::

        Python          ████████████████████████████   45
        Go              ██████▋                        10
    """
    if not items or width <= 0:
        return []

    fmt = value_formatter or format_grouped
    max_value = max(max(item.value for item in items), 1)

    lines: list[str] = []
    for item in items:
        label = item.label[:max_label_width].ljust(max_label_width)
        bar = _eighth_bar(clamp_unit(item.value / max_value) * width, width)
        suffix = f" {fmt(item.value)}" if show_value else ""
        lines.append(f"{label} {bar}{suffix}")
    return lines


def _eighth_bar(length: float, width: int) -> str:
    full, partial = divmod(round_half_up(length * _EIGHTHS), _EIGHTHS)
    bar = BAR_FULL * full
    if partial and full < width:
        bar += BAR_PARTIALS[partial]
    return bar.ljust(width)


def format_grouped(value: float) -> str:
    """Format a value with thousands separators beside a bar."""
    if float(value).is_integer():
        return f"{int(value):,}"
    return f"{value:,.1f}"


def progress_bar(
    value: float,
    maximum: float,
    width: int = DEFAULT_PROGRESS_WIDTH,
    show_percentage: bool = True,
    filled: str = BAR_FULL,
    empty: str = BAR_EMPTY,
) -> str:
    """Render ``value/maximum`` as a single-line bar.

    >>> progress_bar(50, 100, width=10)
    '█████░░░░░ 50%'
    """
    if width <= 0:
        return ""

    fraction = clamp_unit(value / maximum) if maximum > 0 else 0.0
    filled_width = round_half_up(fraction * width)
    bar = filled * filled_width + empty * (width - filled_width)

    if show_percentage:
        bar += f" {round_half_up(fraction * 100)}%"
    return bar


@dataclass(frozen=True, slots=True)
class DonutSegment:
    """A category's glyph and its share of the total (0..1)."""

    glyph: str
    share: float
    label: str


def donut_segments(items: Sequence[CategoryValue]) -> list[DonutSegment]:
    """Convert categories to segments, cycling the default glyphs."""
    total = sum(item.value for item in items)
    return [
        DonutSegment(
            glyph=item.glyph or DONUT_GLYPHS[index % len(DONUT_GLYPHS)],
            share=clamp_unit(item.value / total) if total > 0 else 0.0,
            label=item.label,
        )
        for index, item in enumerate(items)
    ]


def donut_chart(
    items: Sequence[CategoryValue],
    size: int = DEFAULT_DONUT_SIZE,
    show_legend: bool = True,
) -> list[str]:
    """Rasterize a ring chart on a ``size`` x ``2*size`` character grid.

    Columns are half as wide as rows are tall, so ``dx = x/2 - r``. A cell
    belongs to the ring when ``0.4*r < distance < r`` and takes the glyph of
    the first category whose cumulative share exceeds the cell's angle
    (``atan2(dy, dx)`` normalized to [0, 1)). Everything else is blank.
    """
    if not items or size <= 0:
        return []

    segments = donut_segments(items)
    radius = size // 2
    hole = radius * DONUT_HOLE_RATIO

    lines: list[str] = []
    for y in range(size):
        row: list[str] = []
        for x in range(size * 2):
            dx = x / 2 - radius
            dy = y - radius
            distance = math.sqrt(dx * dx + dy * dy)
            if hole < distance < radius:
                angle = math.atan2(dy, dx)
                if angle < 0:
                    angle += 2 * math.pi
                row.append(_segment_glyph(angle / (2 * math.pi), segments))
            else:
                row.append(" ")
        lines.append("".join(row))

    if show_legend:
        lines.append("")
        for segment in segments:
            lines.append(f"  {segment.glyph} {segment.label}: {round_half_up(segment.share * 100)}%")

    return lines


def _segment_glyph(position: float, segments: Sequence[DonutSegment]) -> str:
    cumulative = 0.0
    for segment in segments:
        cumulative += segment.share
        if position < cumulative:
            return segment.glyph

    # Float shares can sum to just under 1; the tail goes to the last
    # non-empty segment. With a zero total nothing owns the ring.
    for segment in reversed(segments):
        if segment.share > 0:
            return segment.glyph
    return " "
