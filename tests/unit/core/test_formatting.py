"""Tests for number, size, duration and date formatting."""

from __future__ import annotations

from datetime import datetime

import pytest

from termcharts.core.formatting import (
    format_bytes,
    format_compact,
    format_date,
    format_duration,
    format_percentage,
    timeline_labels,
    to_fixed,
)
from termcharts.types.series import TimePoint


class TestToFixed:
    def test_rounds_half_up(self) -> None:
        assert to_fixed(2.5, 0) == "3"
        assert to_fixed(1.25, 1) == "1.3"

    def test_pads_decimals(self) -> None:
        assert to_fixed(3, 2) == "3.00"

    def test_non_finite_does_not_raise(self) -> None:
        assert isinstance(to_fixed(float("nan"), 1), str)
        assert isinstance(to_fixed(float("inf"), 1), str)


class TestFormatCompact:
    @pytest.mark.parametrize(
        ("value", "expected"),
        [
            (1500, "1.5K"),
            (999, "999"),
            (1_000_000, "1.0M"),
            (2.5e9, "2.5B"),
            (3e12, "3.0T"),
            (12.7, "13"),
            (0.5, "0.50"),
            (0.001234, "0.0012"),
            (0, "0"),
        ],
    )
    def test_values(self, value: float, expected: str) -> None:
        assert format_compact(value) == expected

    @pytest.mark.parametrize(
        ("value", "expected"),
        [
            (999.4, "999"),
            (999.6, "1.0K"),
            (999_949, "999.9K"),
            (999_999, "1.0M"),
            (999_999_999, "1.0B"),
            (999_960_000_000, "1.0T"),
        ],
    )
    def test_rounding_carries_into_next_unit(self, value: float, expected: str) -> None:
        assert format_compact(value) == expected

    def test_carry_keeps_sign(self) -> None:
        assert format_compact(-999_999) == "-1.0M"

    def test_negative_keeps_sign(self) -> None:
        assert format_compact(-2500) == "-2.5K"
        assert format_compact(-0.5) == "-0.50"


class TestFormatBytes:
    @pytest.mark.parametrize(
        ("value", "expected"),
        [
            (0, "0 B"),
            (512, "512 B"),
            (1536, "1.5 KB"),
            (1024**2, "1.0 MB"),
            (1024**3, "1.0 GB"),
        ],
    )
    def test_values(self, value: float, expected: str) -> None:
        assert format_bytes(value) == expected

    def test_caps_at_petabytes(self) -> None:
        assert format_bytes(1024**6) == "1024.0 PB"

    def test_negative(self) -> None:
        assert format_bytes(-2048) == "-2.0 KB"


class TestFormatDuration:
    @pytest.mark.parametrize(
        ("value", "expected"),
        [
            (0.5, "500µs"),
            (750, "750ms"),
            (1500, "1.5s"),
            (65_000, "1.1m"),
        ],
    )
    def test_values(self, value: float, expected: str) -> None:
        assert format_duration(value) == expected


class TestFormatPercentage:
    def test_default_one_decimal(self) -> None:
        assert format_percentage(42) == "42.0%"
        assert format_percentage(33.333) == "33.3%"

    def test_custom_decimals(self) -> None:
        assert format_percentage(12.5, 0) == "13%"


class TestFormatDate:
    moment = datetime(2024, 1, 5, 14, 30)

    def test_short(self) -> None:
        assert format_date(self.moment) == "Jan 5"

    def test_time(self) -> None:
        assert format_date(self.moment, "time") == "02:30 PM"

    def test_full(self) -> None:
        assert format_date(self.moment, "full") == "Jan 5, 02:30 PM"

    def test_midnight_is_twelve_am(self) -> None:
        assert format_date(datetime(2024, 3, 1, 0, 5), "time") == "12:05 AM"

    def test_noon_is_twelve_pm(self) -> None:
        assert format_date(datetime(2024, 3, 1, 12, 0), "time") == "12:00 PM"


class TestTimelineLabels:
    points = [
        TimePoint(datetime(2024, 1, 5, 14, 30), 1.0),
        TimePoint(datetime(2024, 1, 6, 9, 0), 2.0),
    ]

    def test_labels_at_both_ends(self) -> None:
        line = timeline_labels(self.points, 40)
        assert len(line) == 40
        assert line.startswith("Jan 5, 02:30 PM")
        assert line.endswith("Jan 6, 09:00 AM")

    def test_narrow_width_keeps_first_label(self) -> None:
        line = timeline_labels(self.points, 20)
        assert line == "Jan 5, 02:30 PM".ljust(20)

    def test_empty(self) -> None:
        assert timeline_labels([], 40) == ""
