"""Multi-line waveform widgets: histogram and area chart.

Usage::

    hist = HistogramChart(data=latencies, chart_width=40, chart_height=6)
    area = AreaChart(data=requests, chart_width=60, chart_height=10)
"""

from __future__ import annotations

from textual.reactive import reactive
from textual.widget import Widget

from rich.text import Text

from termcharts.charts.waveform import area_chart, histogram
from termcharts.defaults import (
    AXIS_LABEL_WIDTH,
    DEFAULT_AREA_HEIGHT,
    DEFAULT_AREA_WIDTH,
    DEFAULT_HISTOGRAM_HEIGHT,
    DEFAULT_HISTOGRAM_WIDTH,
)

# Axis prefix is the label plus " │" (histogram) or " │ " (area chart).
_HIST_PREFIX = AXIS_LABEL_WIDTH + 2
_AREA_PREFIX = AXIS_LABEL_WIDTH + 3


def _styled(lines: list[str], prefix: int, style: str) -> Text:
    """Dim the axis columns and color the plot area."""
    text = Text()
    for i, line in enumerate(lines):
        if i:
            text.append("\n")
        text.append(line[:prefix], style="dim")
        text.append(line[prefix:], style=style)
    return text


class HistogramChart(Widget):
    """Vertical column chart with optional min/max axis labels."""

    DEFAULT_CSS = """
    HistogramChart {
        height: auto;
    }
    """

    data: reactive[list[float]] = reactive(list, layout=True)
    chart_width: reactive[int] = reactive(DEFAULT_HISTOGRAM_WIDTH, layout=True)
    chart_height: reactive[int] = reactive(DEFAULT_HISTOGRAM_HEIGHT, layout=True)
    show_axis: reactive[bool] = reactive(True, layout=True)
    chart_title: reactive[str | None] = reactive(None, layout=True)

    def __init__(
        self,
        data: list[float] | None = None,
        chart_width: int = DEFAULT_HISTOGRAM_WIDTH,
        chart_height: int = DEFAULT_HISTOGRAM_HEIGHT,
        show_axis: bool = True,
        title: str | None = None,
        *,
        name: str | None = None,
        id: str | None = None,
        classes: str | None = None,
    ) -> None:
        super().__init__(name=name, id=id, classes=classes)
        self.data = list(data) if data else []
        self.chart_width = chart_width
        self.chart_height = chart_height
        self.show_axis = show_axis
        self.chart_title = title

    def _lines(self) -> list[str]:
        return histogram(
            self.data,
            width=self.chart_width,
            height=self.chart_height,
            show_axis=self.show_axis,
            title=self.chart_title,
        )

    def render(self) -> Text:
        lines = self._lines()
        if not lines:
            return Text("(no data)")
        if self.chart_title:
            heading, body = lines[:2], lines[2:]
            text = Text()
            text.append("\n".join(heading) + "\n", style="bold")
            text.append_text(_styled(body, _HIST_PREFIX if self.show_axis else 0, "cyan"))
            return text
        return _styled(lines, _HIST_PREFIX if self.show_axis else 0, "cyan")

    def get_content_height(self, container, viewport, width: int) -> int:  # noqa: ANN001
        """Report the number of rows needed."""
        return max(len(self._lines()), 1)


class AreaChart(Widget):
    """Filled area chart graduated in eighths of a row."""

    DEFAULT_CSS = """
    AreaChart {
        height: auto;
    }
    """

    data: reactive[list[float]] = reactive(list, layout=True)
    chart_width: reactive[int] = reactive(DEFAULT_AREA_WIDTH, layout=True)
    chart_height: reactive[int] = reactive(DEFAULT_AREA_HEIGHT, layout=True)
    show_labels: reactive[bool] = reactive(True, layout=True)

    def __init__(
        self,
        data: list[float] | None = None,
        chart_width: int = DEFAULT_AREA_WIDTH,
        chart_height: int = DEFAULT_AREA_HEIGHT,
        show_labels: bool = True,
        *,
        name: str | None = None,
        id: str | None = None,
        classes: str | None = None,
    ) -> None:
        super().__init__(name=name, id=id, classes=classes)
        self.data = list(data) if data else []
        self.chart_width = chart_width
        self.chart_height = chart_height
        self.show_labels = show_labels

    def _lines(self) -> list[str]:
        return area_chart(
            self.data,
            width=self.chart_width,
            height=self.chart_height,
            show_labels=self.show_labels,
        )

    def render(self) -> Text:
        lines = self._lines()
        if not lines:
            return Text("(no data)")
        return _styled(lines, _AREA_PREFIX if self.show_labels else 0, "blue")

    def get_content_height(self, container, viewport, width: int) -> int:  # noqa: ANN001
        """Report the number of rows needed."""
        return max(len(self._lines()), 1)
