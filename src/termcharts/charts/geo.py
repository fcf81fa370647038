"""Geographic heat rendering: framed world map, ranked list and region roll-up.

Countries are ranked by value and bucketed into four heat levels by their
share of the maximum (thresholds at 25/50/75%). The country tables below
are immutable and shared by every call.
"""

from __future__ import annotations

import logging
import math
import re
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Sequence

from termcharts.charts.proportional import format_grouped, progress_bar
from termcharts.charts.table import table
from termcharts.core.formatting import format_bytes, format_compact, to_fixed
from termcharts.core.scaling import clamp_unit, round_half_up
from termcharts.defaults import BOX_LIGHT, DEFAULT_GEO_TOP, HEAT_LEVELS
from termcharts.types.series import Alignment, GeoTraffic, WorldMapData

logger = logging.getLogger(__name__)

MAP_WIDTH = 68
RANK_BAR_WIDTH = 35
REGION_WIDTH = 50
REGION_BAR_WIDTH = 25

DEFAULT_MAP_TITLE = "Geographic Traffic Distribution"
DEFAULT_REGION_TITLE = "Traffic by Region"

# Inner rows of the map frame. Every "◉ XX" is a marker slot for country XX.
MAP_ART: tuple[str, ...] = (
    "                                                                    ",
    "          ╭───────╮                   ╭─────╮                       ",
    "       ╭──┤ NA    │───╮            ╭──┤ EU  │──╮       ╭───╮        ",
    "      ╭┴──┴───────┴───┴╮          ╭┴──┴─────┴──┴╮   ╭──┤ AS│──╮     ",
    "      │                │          │             │   │         │     ",
    "      │    ◉ US        │          │  ◉ DE ◉ GB  │   │  ◉ CN   │     ",
    "      │                │          │  ◉ FR       │   │    ◉ JP │     ",
    "      ╰───┬───────┬────╯          ╰──────┬──────╯   │  ◉ IN   │     ",
    "          │ SA    │                      │          ╰────┬────╯     ",
    "       ╭──┴───────┴──╮               ╭───┴──╮         ╭──┴──╮       ",
    "       │   ◉ BR      │               │ AF   │         │ OC  │       ",
    "       │             │               │◉ ZA  │         │◉ AU │       ",
    "       ╰─────────────╯               ╰──────╯         ╰─────╯       ",
    "                                                                    ",
)

_MARKER = re.compile(r"◉ ([A-Z]{2})")
_ABSENT_MARKER = "·"

REGIONS: tuple[tuple[str, str], ...] = (
    ("NA", "North America"),
    ("SA", "South America"),
    ("EU", "Europe"),
    ("AF", "Africa"),
    ("AS", "Asia"),
    ("OC", "Oceania"),
)

COUNTRY_REGIONS = MappingProxyType({
    "US": "NA", "CA": "NA", "MX": "NA",
    "BR": "SA", "AR": "SA", "CL": "SA", "CO": "SA",
    "GB": "EU", "DE": "EU", "FR": "EU", "IT": "EU", "ES": "EU", "NL": "EU",
    "SE": "EU", "PL": "EU", "CH": "EU", "AT": "EU", "BE": "EU", "IE": "EU",
    "DK": "EU", "NO": "EU", "FI": "EU", "PT": "EU", "CZ": "EU", "RO": "EU",
    "HU": "EU", "GR": "EU", "RU": "EU", "UA": "EU", "TR": "EU",
    "ZA": "AF", "NG": "AF", "EG": "AF",
    "CN": "AS", "JP": "AS", "KR": "AS", "IN": "AS", "SG": "AS", "HK": "AS",
    "TW": "AS", "ID": "AS", "TH": "AS", "VN": "AS", "MY": "AS", "PH": "AS",
    "SA": "AS", "AE": "AS", "IL": "AS",
    "AU": "OC", "NZ": "OC",
})

COUNTRY_FLAGS = MappingProxyType({
    "US": "🇺🇸", "GB": "🇬🇧", "DE": "🇩🇪", "FR": "🇫🇷", "CN": "🇨🇳", "JP": "🇯🇵",
    "IN": "🇮🇳", "BR": "🇧🇷", "CA": "🇨🇦", "AU": "🇦🇺", "KR": "🇰🇷", "RU": "🇷🇺",
    "IT": "🇮🇹", "ES": "🇪🇸", "MX": "🇲🇽", "NL": "🇳🇱", "SG": "🇸🇬", "HK": "🇭🇰",
    "TW": "🇹🇼", "ID": "🇮🇩", "TR": "🇹🇷", "CH": "🇨🇭", "PL": "🇵🇱", "SE": "🇸🇪",
})
UNKNOWN_FLAG = "🏳️"

# (header, width, alignment) for the ranked country table.
_TOP_TABLE_COLUMNS: tuple[tuple[str, int, Alignment], ...] = (
    ("#", 4, Alignment.RIGHT),
    ("Country", 20, Alignment.LEFT),
    ("Requests", 14, Alignment.RIGHT),
    ("Bandwidth", 13, Alignment.RIGHT),
    ("Share", 9, Alignment.RIGHT),
)


@dataclass(frozen=True, slots=True)
class GeoHeatReport:
    """The two views of one geographic data set."""

    map_lines: list[str] = field(default_factory=list)
    table_lines: list[str] = field(default_factory=list)


def country_flag(country_code: str) -> str:
    return COUNTRY_FLAGS.get(country_code, UNKNOWN_FLAG)


def generate_world_map_data(geo_traffic: Sequence[GeoTraffic]) -> list[WorldMapData]:
    """Project traffic aggregates onto map values (requests per country)."""
    return [
        WorldMapData(country_code=g.country_code, value=g.requests, label=g.country_name)
        for g in geo_traffic
    ]


def heat_level(value: float, max_value: float) -> int:
    """Bucket *value* into 0..3 by its share of *max_value* (25/50/75%)."""
    if not max_value > 0:
        return 0
    fraction = clamp_unit(value / max_value)
    return min(math.floor(fraction * len(HEAT_LEVELS)), len(HEAT_LEVELS) - 1)


def rank_countries(data: Sequence[WorldMapData]) -> list[WorldMapData]:
    """Sort by value, highest first; ties keep their input order."""
    return sorted(data, key=lambda d: d.value, reverse=True)


def render_world_map(
    data: Sequence[WorldMapData],
    show_legend: bool = True,
    show_top: int = DEFAULT_GEO_TOP,
    title: str = DEFAULT_MAP_TITLE,
) -> list[str]:
    """Render the framed map with heat markers and the ranked top-N list.

    A marker slot shows the heat glyph of its country when that country is
    in the top *show_top*, and ``·`` otherwise.
    """
    if not data:
        return []

    ranked = rank_countries(data)[: max(show_top, 0)]
    max_value = max(max(d.value for d in data), 1)
    markers = {d.country_code: HEAT_LEVELS[heat_level(d.value, max_value)] for d in ranked}

    def mark(match: re.Match[str]) -> str:
        code = match.group(1)
        return f"{markers.get(code, _ABSENT_MARKER)} {code}"

    lines = [
        _rule(BOX_LIGHT["top_left"], BOX_LIGHT["top_right"]),
        _frame(title.rjust(MAP_WIDTH // 2 + len(title) // 2)),
        _rule(BOX_LIGHT["t_left"], BOX_LIGHT["t_right"]),
    ]
    lines.extend(_frame(_MARKER.sub(mark, art)) for art in MAP_ART)
    lines.append(_rule(BOX_LIGHT["t_left"], BOX_LIGHT["t_right"]))

    if show_legend and ranked:
        lines.append(_frame("  TOP COUNTRIES BY TRAFFIC:"))
        lines.append(_frame(""))
        for item in ranked:
            fraction = clamp_unit(item.value / max_value)
            glyph = HEAT_LEVELS[heat_level(item.value, max_value)]
            bar = glyph * round_half_up(fraction * RANK_BAR_WIDTH)
            name = item.display_name[:18].ljust(18)
            percent = to_fixed(fraction * 100, 1).rjust(5) + "%"
            lines.append(_frame(f"  {item.country_code} {name} {bar.ljust(RANK_BAR_WIDTH)} {percent}"))
        lines.append(_frame(""))
        h = HEAT_LEVELS
        lines.append(_frame(f"  Heat: {h[0]} <25% {h[1]} 25-50% {h[2]} 50-75% {h[3]} >75%"))

    lines.append(_rule(BOX_LIGHT["bottom_left"], BOX_LIGHT["bottom_right"]))
    return lines


def render_top_countries_table(
    geo_traffic: Sequence[GeoTraffic],
    limit: int = DEFAULT_GEO_TOP,
) -> list[str]:
    """Ranked table of countries: rank, name, requests, bandwidth, share."""
    if not geo_traffic:
        return []

    ranked = sorted(geo_traffic, key=lambda g: g.requests, reverse=True)[: max(limit, 0)]
    rows = [
        [
            _cell(str(index)),
            _cell(g.country_name[:18]),
            _cell(format_compact(g.requests)),
            _cell(format_bytes(g.bandwidth)),
            _cell(f"{to_fixed(g.percentage, 1)}%"),
        ]
        for index, g in enumerate(ranked, start=1)
    ]
    return table(
        rows,
        headers=[_cell(header) for header, _, _ in _TOP_TABLE_COLUMNS],
        column_widths=[width for _, width, _ in _TOP_TABLE_COLUMNS],
        alignments=[align for _, _, align in _TOP_TABLE_COLUMNS],
    )


def render_geo_report(
    geo_traffic: Sequence[GeoTraffic],
    show_top: int = DEFAULT_GEO_TOP,
    title: str = DEFAULT_MAP_TITLE,
) -> GeoHeatReport:
    """Render the heat map and the ranked table for the same data."""
    return GeoHeatReport(
        map_lines=render_world_map(
            generate_world_map_data(geo_traffic), show_top=show_top, title=title
        ),
        table_lines=render_top_countries_table(geo_traffic, limit=show_top),
    )


def region_totals(data: Sequence[WorldMapData]) -> dict[str, float]:
    """Sum country values into the six continental buckets."""
    totals = {code: 0.0 for code, _ in REGIONS}
    for item in data:
        region = COUNTRY_REGIONS.get(item.country_code)
        if region is None:
            logger.debug("No region for country code %r, skipping", item.country_code)
            continue
        totals[region] += item.value
    return totals


def render_region_summary(
    data: Sequence[WorldMapData],
    title: str = DEFAULT_REGION_TITLE,
) -> list[str]:
    """Roll countries up into continents and draw one proportional bar each."""
    if not data:
        return []

    totals = region_totals(data)
    total = sum(totals.values())

    lines = [
        _rule(BOX_LIGHT["top_left"], BOX_LIGHT["top_right"], REGION_WIDTH),
        _frame(title.rjust(REGION_WIDTH // 2 + len(title) // 2), REGION_WIDTH),
        _rule(BOX_LIGHT["t_left"], BOX_LIGHT["t_right"], REGION_WIDTH),
    ]
    for code, name in REGIONS:
        value = totals[code]
        percentage = value / total * 100 if total > 0 else 0.0
        bar = progress_bar(value, total, width=REGION_BAR_WIDTH, show_percentage=False)
        lines.append(_frame(f"  {name.ljust(14)} {bar} {to_fixed(percentage, 1).rjust(5)}%", REGION_WIDTH))

    lines.append(_rule(BOX_LIGHT["t_left"], BOX_LIGHT["t_right"], REGION_WIDTH))
    lines.append(_frame(f"  Total Requests: {format_grouped(total).rjust(30)}", REGION_WIDTH))
    lines.append(_rule(BOX_LIGHT["bottom_left"], BOX_LIGHT["bottom_right"], REGION_WIDTH))
    return lines


def _cell(text: str) -> str:
    return f" {text} "


def _frame(content: str, width: int = MAP_WIDTH) -> str:
    v = BOX_LIGHT["vertical"]
    return v + content[:width].ljust(width) + v


def _rule(left: str, right: str, width: int = MAP_WIDTH) -> str:
    return left + BOX_LIGHT["horizontal"] * width + right
