"""Numeric building blocks shared by every renderer."""

from termcharts.core.formatting import (
    format_bytes,
    format_compact,
    format_date,
    format_duration,
    format_percentage,
    timeline_labels,
    to_fixed,
)
from termcharts.core.scaling import clamp_unit, quantize, resample, round_half_up

__all__ = [
    "clamp_unit",
    "format_bytes",
    "format_compact",
    "format_date",
    "format_duration",
    "format_percentage",
    "quantize",
    "resample",
    "round_half_up",
    "timeline_labels",
    "to_fixed",
]
