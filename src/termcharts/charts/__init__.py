"""Chart renderers.

Every renderer is a pure function from data to ``str`` or ``list[str]``;
placement and styling are left to the caller (see ``termcharts.tui``).
"""

from termcharts.charts.geo import (
    GeoHeatReport,
    country_flag,
    generate_world_map_data,
    heat_level,
    render_geo_report,
    render_region_summary,
    render_top_countries_table,
    render_world_map,
)
from termcharts.charts.proportional import bar_chart, donut_chart, progress_bar
from termcharts.charts.table import align_cell, table
from termcharts.charts.waveform import (
    area_chart,
    area_chart_from_points,
    histogram,
    histogram_from_points,
    sparkline,
    sparkline_from_points,
)

__all__ = [
    "GeoHeatReport",
    "align_cell",
    "area_chart",
    "area_chart_from_points",
    "bar_chart",
    "country_flag",
    "donut_chart",
    "generate_world_map_data",
    "heat_level",
    "histogram",
    "histogram_from_points",
    "progress_bar",
    "render_geo_report",
    "render_region_summary",
    "render_top_countries_table",
    "render_world_map",
    "sparkline",
    "sparkline_from_points",
    "table",
]
