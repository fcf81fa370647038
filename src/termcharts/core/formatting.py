"""Locale-independent number, size, duration and date formatting.

All functions are pure. NaN and infinite inputs are outside their contract:
they do not raise, but the text they produce is unspecified.
"""

from __future__ import annotations

import math
from datetime import datetime
from decimal import ROUND_HALF_UP, Decimal, localcontext
from typing import Literal, Sequence

from termcharts.types.series import TimePoint

_COMPACT_UNITS: tuple[tuple[float, str], ...] = (
    (1e12, "T"),
    (1e9, "B"),
    (1e6, "M"),
    (1e3, "K"),
)

_BYTE_UNITS: tuple[str, ...] = ("B", "KB", "MB", "GB", "TB", "PB")

_MONTHS: tuple[str, ...] = (
    "Jan", "Feb", "Mar", "Apr", "May", "Jun",
    "Jul", "Aug", "Sep", "Oct", "Nov", "Dec",
)

DateStyle = Literal["short", "time", "full"]


def to_fixed(value: float, digits: int) -> str:
    """Render *value* with exactly *digits* decimals, rounding half up.

    Rounding works on the exact binary value of the float, so the result
    does not depend on the process locale or on banker's rounding.
    """
    if not math.isfinite(value):
        return str(value)
    with localcontext() as ctx:
        ctx.prec = 400
        quantum = Decimal(1).scaleb(-digits)
        return format(Decimal(value).quantize(quantum, rounding=ROUND_HALF_UP), "f")


def format_compact(value: float) -> str:
    """Format a number with a K/M/B/T suffix.

    >>> format_compact(1500)
    '1.5K'
    >>> format_compact(999)
    '999'
    >>> format_compact(0.5)
    '0.50'

    Values that round up to the next unit are shown in that unit, so below
    the T unit the mantissa never reads 1000.
    """
    magnitude = abs(value)
    sign = "-" if value < 0 else ""

    for index, (threshold, suffix) in enumerate(_COMPACT_UNITS):
        if magnitude >= threshold:
            text = to_fixed(magnitude / threshold, 1)
            if index > 0 and float(text) >= 1000:
                # Rounded up to the next unit: 999_999 is 1.0M, not 1000.0K.
                threshold, suffix = _COMPACT_UNITS[index - 1]
                text = to_fixed(magnitude / threshold, 1)
            return f"{sign}{text}{suffix}"
    if magnitude >= 1:
        text = to_fixed(magnitude, 0)
        if text == "1000":
            threshold, suffix = _COMPACT_UNITS[-1]
            return f"{sign}{to_fixed(magnitude / threshold, 1)}{suffix}"
        return sign + text
    if magnitude >= 0.01:
        return sign + to_fixed(magnitude, 2)
    if magnitude == 0 or not math.isfinite(magnitude):
        return sign + to_fixed(magnitude, 0)

    # Two significant digits for tiny magnitudes.
    exponent = math.floor(math.log10(magnitude))
    return sign + to_fixed(magnitude, 1 - exponent)


def format_bytes(value: float) -> str:
    """Format a byte count using binary (1024) steps up to PB."""
    size = abs(value)
    unit_index = 0
    while size >= 1024 and unit_index < len(_BYTE_UNITS) - 1:
        size /= 1024
        unit_index += 1

    sign = "-" if value < 0 else ""
    digits = 1 if unit_index > 0 else 0
    return f"{sign}{to_fixed(size, digits)} {_BYTE_UNITS[unit_index]}"


def format_duration(milliseconds: float) -> str:
    """Format a duration given in milliseconds (µs, ms, s or m)."""
    if milliseconds < 1:
        return f"{to_fixed(milliseconds * 1000, 0)}µs"
    if milliseconds < 1000:
        return f"{to_fixed(milliseconds, 0)}ms"
    if milliseconds < 60_000:
        return f"{to_fixed(milliseconds / 1000, 1)}s"
    return f"{to_fixed(milliseconds / 60_000, 1)}m"


def format_percentage(value: float, decimals: int = 1) -> str:
    """Format an already-scaled percentage, e.g. ``42.0 -> '42.0%'``."""
    return f"{to_fixed(value, decimals)}%"


def format_date(moment: datetime, style: DateStyle = "short") -> str:
    """Format a timestamp as ``Jan 5``, ``02:30 PM`` or ``Jan 5, 02:30 PM``.

    Month names are always English so labels are stable across locales.
    """
    day = f"{_MONTHS[moment.month - 1]} {moment.day}"
    hour = moment.hour % 12 or 12
    meridiem = "AM" if moment.hour < 12 else "PM"
    clock = f"{hour:02d}:{moment.minute:02d} {meridiem}"

    if style == "time":
        return clock
    if style == "full":
        return f"{day}, {clock}"
    return day


def timeline_labels(points: Sequence[TimePoint], width: int) -> str:
    """Place the first and last timestamps at both ends of a *width* line."""
    if not points:
        return ""

    first_label = format_date(points[0].timestamp, "full")
    last_label = format_date(points[-1].timestamp, "full")

    padding = width - len(first_label) - len(last_label)
    if padding < 3:
        return first_label.ljust(width)
    return first_label + " " * padding + last_label
