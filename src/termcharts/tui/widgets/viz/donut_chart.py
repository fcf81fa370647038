"""Donut chart widget.

Usage::

    donut = DonutChart(items=[("2xx", 880), ("3xx", 70), ("4xx", 40), ("5xx", 10)])
"""

from __future__ import annotations

from textual.reactive import reactive
from textual.widget import Widget

from rich.text import Text

from termcharts.charts.proportional import donut_chart, donut_segments
from termcharts.defaults import DEFAULT_DONUT_SIZE
from termcharts.types.series import as_categories

# Segment colors, cycled in category order.
_SEGMENT_STYLES = ("cyan", "magenta", "green", "yellow", "blue", "red", "white", "bright_black")


class DonutChart(Widget):
    """Ring chart with a per-category legend underneath."""

    DEFAULT_CSS = """
    DonutChart {
        height: auto;
    }
    """

    items: reactive[list[tuple[str, float]]] = reactive(list, layout=True)
    ring_size: reactive[int] = reactive(DEFAULT_DONUT_SIZE, layout=True)
    show_legend: reactive[bool] = reactive(True, layout=True)

    def __init__(
        self,
        items: list[tuple[str, float]] | None = None,
        ring_size: int = DEFAULT_DONUT_SIZE,
        show_legend: bool = True,
        *,
        name: str | None = None,
        id: str | None = None,
        classes: str | None = None,
    ) -> None:
        super().__init__(name=name, id=id, classes=classes)
        self.items = list(items) if items else []
        self.ring_size = ring_size
        self.show_legend = show_legend

    def _lines(self) -> list[str]:
        return donut_chart(as_categories(self.items), size=self.ring_size, show_legend=self.show_legend)

    def render(self) -> Text:
        lines = self._lines()
        if not lines:
            return Text("(no data)")

        text = Text("\n".join(lines))
        glyph_styles: dict[str, str] = {}
        for i, segment in enumerate(donut_segments(as_categories(self.items))):
            glyph_styles.setdefault(segment.glyph, _SEGMENT_STYLES[i % len(_SEGMENT_STYLES)])
        offset = 0
        for line in lines:
            for col, ch in enumerate(line):
                style = glyph_styles.get(ch)
                if style:
                    text.stylize(style, offset + col, offset + col + 1)
            offset += len(line) + 1
        return text

    def get_content_height(self, container, viewport, width: int) -> int:  # noqa: ANN001
        """Report the number of rows needed."""
        return max(len(self._lines()), 1)
