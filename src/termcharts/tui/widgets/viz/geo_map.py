"""Geographic heat map widget.

Usage::

    heat = GeoHeatMap(traffic=[GeoTraffic("US", "United States", 5000, 2e9, 50.0)])
"""

from __future__ import annotations

from textual.reactive import reactive
from textual.widget import Widget

from rich.text import Text

from termcharts.charts.geo import generate_world_map_data, render_region_summary, render_world_map
from termcharts.defaults import DEFAULT_GEO_TOP, HEAT_LEVELS
from termcharts.types.series import GeoTraffic

# Heat glyph colors, coldest first.
_HEAT_STYLES = dict(zip(HEAT_LEVELS, ("blue", "green", "yellow", "red")))


class GeoHeatMap(Widget):
    """Framed world map with heat markers, or a continental roll-up.

    With ``regions=True`` the widget shows the six-region summary instead
    of the per-country map.
    """

    DEFAULT_CSS = """
    GeoHeatMap {
        height: auto;
    }
    """

    traffic: reactive[list[GeoTraffic]] = reactive(list, layout=True)
    show_top: reactive[int] = reactive(DEFAULT_GEO_TOP, layout=True)
    regions: reactive[bool] = reactive(False, layout=True)

    def __init__(
        self,
        traffic: list[GeoTraffic] | None = None,
        show_top: int = DEFAULT_GEO_TOP,
        regions: bool = False,
        *,
        name: str | None = None,
        id: str | None = None,
        classes: str | None = None,
    ) -> None:
        super().__init__(name=name, id=id, classes=classes)
        self.traffic = list(traffic) if traffic else []
        self.show_top = show_top
        self.regions = regions

    def _lines(self) -> list[str]:
        data = generate_world_map_data(self.traffic)
        if self.regions:
            return render_region_summary(data)
        return render_world_map(data, show_top=self.show_top)

    def render(self) -> Text:
        lines = self._lines()
        if not lines:
            return Text("(no data)")

        text = Text("\n".join(lines))
        if self.regions:
            return text
        offset = 0
        for line in lines:
            for col, ch in enumerate(line):
                style = _HEAT_STYLES.get(ch)
                if style:
                    text.stylize(style, offset + col, offset + col + 1)
            offset += len(line) + 1
        return text

    def get_content_height(self, container, viewport, width: int) -> int:  # noqa: ANN001
        """Report the number of rows needed."""
        return max(len(self._lines()), 1)
