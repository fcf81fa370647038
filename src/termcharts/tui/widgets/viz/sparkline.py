"""Sparkline widget -- render a data series as a single row of Unicode blocks.

Usage::

    spark = SparkLine(data=[1, 3, 7, 2, 5], max_width=20)
"""

from __future__ import annotations

from textual.reactive import reactive
from textual.widget import Widget

from rich.text import Text

from termcharts.charts.waveform import sparkline
from termcharts.defaults import DEFAULT_SPARKLINE_WIDTH


class SparkLine(Widget):
    """Renders a numeric data series as a compact sparkline.

    Series longer than *max_width* are compressed by bucket averaging rather
    than cut, so the whole history stays visible.
    """

    DEFAULT_CSS = """
    SparkLine {
        height: 1;
    }
    """

    data: reactive[list[float]] = reactive(list, layout=True)
    max_width: reactive[int] = reactive(DEFAULT_SPARKLINE_WIDTH)

    def __init__(
        self,
        data: list[float] | None = None,
        max_width: int = DEFAULT_SPARKLINE_WIDTH,
        *,
        name: str | None = None,
        id: str | None = None,
        classes: str | None = None,
    ) -> None:
        super().__init__(name=name, id=id, classes=classes)
        self.data = list(data) if data else []
        self.max_width = max_width

    def render(self) -> Text:
        if not self.data:
            return Text("")
        width = min(len(self.data), self.max_width)
        return Text(sparkline(self.data, width=width), style="green")
