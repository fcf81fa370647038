"""Tests for sparkline, histogram and area chart rendering."""

from __future__ import annotations

from datetime import datetime, timedelta

import pytest

from termcharts.charts.waveform import (
    area_chart,
    area_chart_from_points,
    histogram,
    histogram_from_points,
    sparkline,
    sparkline_from_points,
)
from termcharts.defaults import SPARK_LEVELS
from termcharts.types.series import TimePoint


def _points(values: list[float]) -> list[TimePoint]:
    start = datetime(2024, 1, 1)
    return [TimePoint(start + timedelta(minutes=i), v) for i, v in enumerate(values)]


# ---------------------------------------------------------------------------
# Sparkline
# ---------------------------------------------------------------------------


class TestSparkline:
    def test_upsampled_ramp(self) -> None:
        assert sparkline([0, 5, 10], width=5) == "▁▃▅▇█"

    def test_extremes_use_lowest_and_highest_glyph(self) -> None:
        line = sparkline([3.0, 9.0, 1.0, 4.0])
        assert line[1] == "█"
        assert line[2] == "▁"

    def test_default_width_is_series_length(self) -> None:
        assert len(sparkline([1, 2, 3, 4, 5, 6, 7])) == 7

    def test_compresses_long_series(self) -> None:
        assert len(sparkline(list(range(100)), width=20)) == 20

    def test_flat_series(self) -> None:
        assert sparkline([3, 3, 3]) == "▁▁▁"

    def test_empty(self) -> None:
        assert sparkline([]) == ""

    @pytest.mark.parametrize("width", [0, -1])
    def test_non_positive_width(self, width: int) -> None:
        assert sparkline([1, 2, 3], width=width) == ""

    def test_explicit_bounds(self) -> None:
        assert sparkline([5], min_value=0, max_value=10) == "▅"

    def test_values_outside_bounds_are_clamped(self) -> None:
        assert sparkline([20, -5], min_value=0, max_value=10) == "█▁"

    def test_only_spark_glyphs(self) -> None:
        assert set(sparkline([1.0, 7.0, 3.0, 9.0, 2.0], width=30)) <= set(SPARK_LEVELS)

    def test_deterministic(self) -> None:
        data = [1.0, 7.0, 3.0, 9.0, 2.0]
        assert sparkline(data, width=13) == sparkline(data, width=13)

    def test_from_points(self) -> None:
        values = [0.0, 5.0, 10.0]
        assert sparkline_from_points(_points(values), width=5) == sparkline(values, width=5)


# ---------------------------------------------------------------------------
# Histogram
# ---------------------------------------------------------------------------


class TestHistogram:
    def test_columns_without_axis(self) -> None:
        assert histogram([0, 10], width=4, height=2, show_axis=False) == [
            "  ▃█",
            "▁▆██",
        ]

    def test_axis_labels_and_line(self) -> None:
        assert histogram([0, 10], width=4, height=2) == [
            "    10 │  ▃█",
            "     0 │▁▆██",
            "       └────",
        ]

    def test_value_on_threshold_draws_upper_half(self) -> None:
        assert histogram([0, 1, 0.5], width=3, height=1, show_axis=False) == ["▁█▅"]

    def test_title_is_centered_with_blank_line(self) -> None:
        lines = histogram([1, 2], width=10, height=2, show_axis=False, title="Hi")
        assert lines[0] == "    Hi"
        assert lines[1] == ""
        assert len(lines) == 4

    def test_long_title_stays_within_width(self) -> None:
        lines = histogram([1, 2], width=10, height=2, show_axis=False, title="x" * 25)
        assert lines[0] == "x" * 10
        assert all(len(line) <= 10 for line in lines)

    def test_row_count(self) -> None:
        lines = histogram(list(range(30)), width=20, height=5)
        assert len(lines) == 6
        assert all(len(line) == 8 + 20 for line in lines)

    def test_flat_series_sits_on_lowest_level(self) -> None:
        assert histogram([5, 5, 5], width=3, height=2, show_axis=False) == ["   ", "▁▁▁"]

    def test_minimum_column_is_drawn(self) -> None:
        bottom = histogram([3, 9, 6], width=3, height=4, show_axis=False)[-1]
        assert bottom[0] == "▁"

    @pytest.mark.parametrize(
        ("width", "height"),
        [(0, 5), (5, 0), (-1, 5)],
    )
    def test_non_positive_dimensions(self, width: int, height: int) -> None:
        assert histogram([1, 2, 3], width=width, height=height) == []

    def test_empty(self) -> None:
        assert histogram([]) == []

    def test_from_points(self) -> None:
        values = [4.0, 1.0, 8.0, 3.0]
        assert histogram_from_points(_points(values), width=8, height=3) == histogram(
            values, width=8, height=3
        )


# ---------------------------------------------------------------------------
# Area chart
# ---------------------------------------------------------------------------


class TestAreaChart:
    def test_silhouette_without_labels(self) -> None:
        assert area_chart([0, 10], width=2, height=2, show_labels=False) == [" █", "▁█"]

    def test_partial_row(self) -> None:
        assert area_chart([0, 5, 10], width=3, height=2, show_labels=False) == [" ▁█", "▁██"]

    def test_labels_and_axis(self) -> None:
        assert area_chart([0, 10], width=2, height=2) == [
            "    10 │  █",
            "     0 │ ▁█",
            "       └───",
        ]

    def test_row_count(self) -> None:
        assert len(area_chart(list(range(10)), width=15, height=4)) == 5
        assert len(area_chart(list(range(10)), width=15, height=4, show_labels=False)) == 4

    def test_empty(self) -> None:
        assert area_chart([]) == []
        assert area_chart([1, 2], height=0) == []

    def test_from_points(self) -> None:
        values = [2.0, 6.0, 4.0]
        assert area_chart_from_points(_points(values), width=6, height=3) == area_chart(
            values, width=6, height=3
        )
