"""Bordered, column-aligned table rendered with box-drawing characters.

Usage::

    lines = table([["a", "1"], ["bb", "22"]], headers=["X", "Y"])
    # ┌────┬────┐
    # │X   │Y   │
    # ├────┼────┤
    # │a   │1   │
    # │bb  │22  │
    # └────┴────┘
"""

from __future__ import annotations

from typing import Sequence

from termcharts.defaults import BOX_LIGHT
from termcharts.types.series import Alignment

_H = BOX_LIGHT["horizontal"]
_V = BOX_LIGHT["vertical"]


def align_cell(text: str, width: int, alignment: str = Alignment.LEFT) -> str:
    """Pad *text* to *width* or truncate it; cells never wrap."""
    pad = width - len(text)
    if pad <= 0:
        return text[:width]
    if alignment == Alignment.RIGHT:
        return " " * pad + text
    if alignment == Alignment.CENTER:
        return " " * (pad // 2) + text + " " * (pad - pad // 2)
    return text + " " * pad


def infer_column_widths(rows: Sequence[Sequence[str]], headers: Sequence[str]) -> list[int]:
    """Each column is as wide as its longest header or cell, plus 2."""
    widths: list[int] = []
    for i, header in enumerate(headers):
        longest = max((len(row[i]) for row in rows if i < len(row)), default=0)
        widths.append(max(len(header), longest) + 2)
    return widths


def table(
    rows: Sequence[Sequence[str]],
    headers: Sequence[str],
    column_widths: Sequence[int] | None = None,
    alignments: Sequence[str] | None = None,
) -> list[str]:
    """Render *rows* under *headers* as a bordered grid.

    Missing cells render empty and cells beyond the header count are
    dropped, so every line has the same width. Unknown alignments fall back
    to left.
    """
    if not headers:
        return []

    inferred = infer_column_widths(rows, headers)
    widths = [
        column_widths[i] if column_widths is not None and i < len(column_widths) else inferred[i]
        for i in range(len(headers))
    ]
    aligns = [
        alignments[i] if alignments is not None and i < len(alignments) else Alignment.LEFT
        for i in range(len(headers))
    ]

    def border(left: str, join: str, right: str) -> str:
        return left + join.join(_H * w for w in widths) + right

    def line(cells: Sequence[str]) -> str:
        padded = [
            align_cell(cells[i] if i < len(cells) else "", widths[i], aligns[i])
            for i in range(len(widths))
        ]
        return _V + _V.join(padded) + _V

    lines = [
        border(BOX_LIGHT["top_left"], BOX_LIGHT["t_top"], BOX_LIGHT["top_right"]),
        line(headers),
        border(BOX_LIGHT["t_left"], BOX_LIGHT["cross"], BOX_LIGHT["t_right"]),
    ]
    lines.extend(line(row) for row in rows)
    lines.append(border(BOX_LIGHT["bottom_left"], BOX_LIGHT["t_bottom"], BOX_LIGHT["bottom_right"]))
    return lines
