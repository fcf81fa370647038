"""Visualization widgets for text dashboards.

Lightweight Textual widgets that place the output of the chart renderers
on screen with Rich styling. The widgets only add color; every glyph comes
from :mod:`termcharts.charts`.
"""

from __future__ import annotations

from termcharts.tui.widgets.viz.ascii_table import ASCIITable
from termcharts.tui.widgets.viz.bar_chart import BarChart
from termcharts.tui.widgets.viz.donut_chart import DonutChart
from termcharts.tui.widgets.viz.geo_map import GeoHeatMap
from termcharts.tui.widgets.viz.percent_bar import PercentBar
from termcharts.tui.widgets.viz.sparkline import SparkLine
from termcharts.tui.widgets.viz.waveform_charts import AreaChart, HistogramChart

__all__ = [
    "ASCIITable",
    "AreaChart",
    "BarChart",
    "DonutChart",
    "GeoHeatMap",
    "HistogramChart",
    "PercentBar",
    "SparkLine",
]
