"""Horizontal bar chart widget.

Usage::

    chart = BarChart(items=[("Python", 45), ("JS", 30), ("Go", 10)])
"""

from __future__ import annotations

from textual.reactive import reactive
from textual.widget import Widget

from rich.text import Text

from termcharts.charts.proportional import bar_chart
from termcharts.defaults import DEFAULT_BAR_WIDTH
from termcharts.types.series import as_categories


class BarChart(Widget):
    """Horizontal bar chart drawn in eighth-cell steps.

    Each item is rendered as a labelled row::

        Python ████████████████ 45
        JS     █████████▋      30
        Go     ███▍            10

    Bar widths are proportional to the maximum value.
    """

    DEFAULT_CSS = """
    BarChart {
        height: auto;
    }
    """

    items: reactive[list[tuple[str, float]]] = reactive(list, layout=True)
    bar_width: reactive[int] = reactive(DEFAULT_BAR_WIDTH)

    def __init__(
        self,
        items: list[tuple[str, float]] | None = None,
        bar_width: int = DEFAULT_BAR_WIDTH,
        *,
        name: str | None = None,
        id: str | None = None,
        classes: str | None = None,
    ) -> None:
        super().__init__(name=name, id=id, classes=classes)
        self.items = list(items) if items else []
        self.bar_width = bar_width

    def render(self) -> Text:
        if not self.items:
            return Text("(no data)")

        label_width = max(len(label) for label, _ in self.items)
        lines = bar_chart(
            as_categories(self.items),
            width=self.bar_width,
            max_label_width=label_width,
        )
        max_val = max(max(v for _, v in self.items), 1)

        text = Text()
        bar_start = label_width + 1
        bar_end = bar_start + self.bar_width
        for i, ((_, value), line) in enumerate(zip(self.items, lines)):
            text.append(line[:bar_start], style="bold")
            text.append(line[bar_start:bar_end], style=_ratio_style(value / max_val))
            text.append(line[bar_end:], style="dim")
            if i < len(lines) - 1:
                text.append("\n")

        return text

    def get_content_height(self, container, viewport, width: int) -> int:  # noqa: ANN001
        """Report the number of rows needed."""
        return max(len(self.items), 1)


def _ratio_style(ratio: float) -> str:
    """Pick a color based on the relative magnitude."""
    if ratio >= 0.75:
        return "green"
    if ratio >= 0.40:
        return "yellow"
    return "cyan"
