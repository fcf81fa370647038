"""Bordered table widget.

Usage::

    table = ASCIITable(
        headers=["Metric", "Value"],
        rows=[("Requests", "12.4K"), ("Bandwidth", "1.5 GB")],
        alignments=["left", "right"],
    )
"""

from __future__ import annotations

from textual.reactive import reactive
from textual.widget import Widget

from rich.text import Text

from termcharts.charts.table import table


class ASCIITable(Widget):
    """Renders a box-drawn table with header and separator.

    Output example::

        ┌──────────┬────────┐
        │Metric    │   Value│
        ├──────────┼────────┤
        │Requests  │   12.4K│
        └──────────┴────────┘
    """

    DEFAULT_CSS = """
    ASCIITable {
        height: auto;
    }
    """

    headers: reactive[list[str]] = reactive(list, layout=True)
    rows: reactive[list[tuple[str, ...]]] = reactive(list, layout=True)
    alignments: reactive[list[str]] = reactive(list, layout=True)

    def __init__(
        self,
        headers: list[str] | None = None,
        rows: list[tuple[str, ...]] | None = None,
        alignments: list[str] | None = None,
        *,
        name: str | None = None,
        id: str | None = None,
        classes: str | None = None,
    ) -> None:
        super().__init__(name=name, id=id, classes=classes)
        self.headers = list(headers) if headers else []
        self.rows = list(rows) if rows else []
        self.alignments = list(alignments) if alignments else []

    def render(self) -> Text:
        if not self.headers:
            return Text("(no data)")

        lines = table(self.rows, self.headers, alignments=self.alignments or None)
        text = Text()
        for i, line in enumerate(lines):
            if i:
                text.append("\n")
            # Row 1 is the header; borders are dimmed.
            if i == 1:
                text.append(line, style="bold")
            elif i in (0, 2, len(lines) - 1):
                text.append(line, style="dim")
            else:
                text.append(line)
        return text

    def get_content_height(self, container, viewport, width: int) -> int:  # noqa: ANN001
        """Report the number of rows needed (borders + header + data rows)."""
        if not self.headers:
            return 1
        return 4 + len(self.rows)
