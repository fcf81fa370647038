"""Glyph sets, box-drawing segments and rendering defaults."""

from __future__ import annotations

from types import MappingProxyType

# =============================================================================
# GLYPH LEVEL SETS (emptiest -> fullest)
# =============================================================================

# Eight Unicode block-element characters ordered by ascending height.
SPARK_LEVELS: tuple[str, ...] = ("▁", "▂", "▃", "▄", "▅", "▆", "▇", "█")

# Four shading levels for geographic heat.
HEAT_LEVELS: tuple[str, ...] = ("░", "▒", "▓", "█")

# Eighth-width partial blocks; index 0 means "no partial block".
BAR_PARTIALS: tuple[str, ...] = ("", "▏", "▎", "▍", "▌", "▋", "▊", "▉")
BAR_FULL = "█"
BAR_EMPTY = "░"

DONUT_GLYPHS: tuple[str, ...] = ("█", "▓", "▒", "░", "▪", "▫", "◆", "◇")

# =============================================================================
# BOX DRAWING (single line)
# =============================================================================

BOX_LIGHT = MappingProxyType({
    "top_left": "┌",
    "top_right": "┐",
    "bottom_left": "└",
    "bottom_right": "┘",
    "horizontal": "─",
    "vertical": "│",
    "cross": "┼",
    "t_left": "├",
    "t_right": "┤",
    "t_top": "┬",
    "t_bottom": "┴",
})

# =============================================================================
# RENDERING DEFAULTS
# =============================================================================

DEFAULT_SPARKLINE_WIDTH = 40
DEFAULT_HISTOGRAM_WIDTH = 50
DEFAULT_HISTOGRAM_HEIGHT = 8
DEFAULT_AREA_WIDTH = 60
DEFAULT_AREA_HEIGHT = 10
DEFAULT_BAR_WIDTH = 30
DEFAULT_LABEL_WIDTH = 15
DEFAULT_PROGRESS_WIDTH = 20
DEFAULT_DONUT_SIZE = 7
DEFAULT_GEO_TOP = 10

# Width reserved for compact axis labels on waveform charts.
AXIS_LABEL_WIDTH = 6

# Inner radius of the donut ring as a fraction of the outer radius.
DONUT_HOLE_RATIO = 0.4
