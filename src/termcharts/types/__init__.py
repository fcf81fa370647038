"""Data types consumed by the chart renderers."""

from termcharts.types.series import (
    Alignment,
    as_categories,
    CategoryValue,
    GeoTraffic,
    TimePoint,
    WorldMapData,
    values_of,
)

__all__ = [
    "Alignment",
    "as_categories",
    "CategoryValue",
    "GeoTraffic",
    "TimePoint",
    "WorldMapData",
    "values_of",
]
