"""Percentage progress bar widget.

Usage::

    bar = PercentBar(value=0.42, label="Budget")
    # Renders:  Budget [████████░░░░░░░░░░░░] 42%
"""

from __future__ import annotations

from textual.reactive import reactive
from textual.widget import Widget

from rich.text import Text

from termcharts.charts.proportional import progress_bar
from termcharts.core.scaling import clamp_unit, round_half_up
from termcharts.defaults import BAR_FULL, DEFAULT_PROGRESS_WIDTH


class PercentBar(Widget):
    """Single-line progress bar with threshold-based coloring.

    *value* is a fraction; anything outside 0..1 is clamped.

    Color thresholds:

    * 0--60 %: green
    * 60--85 %: yellow
    * 85--100 %: red
    """

    DEFAULT_CSS = """
    PercentBar {
        height: 1;
    }
    """

    value: reactive[float] = reactive(0.0)
    label: reactive[str] = reactive("")
    bar_width: reactive[int] = reactive(DEFAULT_PROGRESS_WIDTH)

    def __init__(
        self,
        value: float = 0.0,
        label: str = "",
        bar_width: int = DEFAULT_PROGRESS_WIDTH,
        *,
        name: str | None = None,
        id: str | None = None,
        classes: str | None = None,
    ) -> None:
        super().__init__(name=name, id=id, classes=classes)
        self.value = value
        self.label = label
        self.bar_width = bar_width

    def render(self) -> Text:
        clamped = clamp_unit(self.value)
        bar = progress_bar(clamped, 1.0, width=self.bar_width, show_percentage=False)
        filled = bar.count(BAR_FULL)

        style = _threshold_style(clamped)

        text = Text()
        if self.label:
            text.append(f"{self.label} ", style="bold")
        text.append("[", style="dim")
        text.append(bar[:filled], style=style)
        text.append(bar[filled:], style="dim")
        text.append("]", style="dim")
        text.append(f" {round_half_up(clamped * 100)}%", style=style)

        return text


def _threshold_style(fraction: float) -> str:
    """Return a Rich style string based on the fraction."""
    if fraction >= 0.85:
        return "red bold"
    if fraction >= 0.60:
        return "yellow"
    return "green"
