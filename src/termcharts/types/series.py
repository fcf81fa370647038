"""Chart input types: time series points and categorical values."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from enum import StrEnum
from typing import Iterable


class Alignment(StrEnum):
    """Horizontal alignment of a table cell."""

    LEFT = "left"
    RIGHT = "right"
    CENTER = "center"


@dataclass(frozen=True, slots=True)
class TimePoint:
    """A single timestamped sample of a series.

    A series is a list of points sorted by the caller; the charts never
    sort and accept duplicate timestamps.
    """

    timestamp: datetime
    value: float


@dataclass(frozen=True, slots=True)
class CategoryValue:
    """A labelled value for bar and donut charts."""

    label: str
    value: float
    glyph: str | None = None


@dataclass(frozen=True, slots=True)
class GeoTraffic:
    """Per-country traffic aggregate."""

    country_code: str
    country_name: str
    requests: float
    bandwidth: float
    percentage: float


@dataclass(frozen=True, slots=True)
class WorldMapData:
    """A single country's value on the heat map."""

    country_code: str
    value: float
    label: str | None = None

    @property
    def display_name(self) -> str:
        return self.label or self.country_code


def values_of(points: list[TimePoint]) -> list[float]:
    """Extract the numeric values of a series, oldest first."""
    return [p.value for p in points]


def as_categories(pairs: Iterable[tuple[str, float]]) -> list[CategoryValue]:
    """Build category values from ``(label, value)`` pairs."""
    return [CategoryValue(label=label, value=value) for label, value in pairs]
