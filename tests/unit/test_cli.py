"""Tests for the termcharts command line."""

from __future__ import annotations

import json
from pathlib import Path

import pytest
from click.testing import CliRunner

from termcharts import __version__
from termcharts.charts import table
from termcharts.cli import main


@pytest.fixture(autouse=True)
def _isolated(isolated_home: Path, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.chdir(tmp_path)


@pytest.fixture
def runner() -> CliRunner:
    return CliRunner()


@pytest.fixture
def geo_file(tmp_path: Path) -> Path:
    path = tmp_path / "geo.json"
    path.write_text(json.dumps([
        {"countryCode": "US", "countryName": "United States", "requests": 6000, "bandwidth": 1536, "percentage": 60},
        {"countryCode": "DE", "countryName": "Germany", "requests": 4000, "bandwidth": 2048, "percentage": 40},
    ]))
    return path


class TestMain:
    def test_version(self, runner: CliRunner) -> None:
        result = runner.invoke(main, ["--version"])
        assert result.exit_code == 0
        assert f"termcharts {__version__}" in result.output

    def test_version_skips_config(self, runner: CliRunner, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("TERMCHARTS_BAR_WIDTH", "wide")
        result = runner.invoke(main, ["--version"])
        assert result.exit_code == 0
        assert result.output == f"termcharts {__version__}\n"

    def test_help_without_command(self, runner: CliRunner) -> None:
        result = runner.invoke(main, [])
        assert result.exit_code == 0
        assert "sparkline" in result.output

    def test_bad_config_is_reported(self, runner: CliRunner, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("TERMCHARTS_BAR_WIDTH", "wide")
        result = runner.invoke(main, ["bars", "a=1"])
        assert result.exit_code == 1
        assert "Expected an integer" in result.output


class TestWaveformCommands:
    def test_sparkline(self, runner: CliRunner) -> None:
        result = runner.invoke(main, ["sparkline", "0", "5", "10", "--width", "5"])
        assert result.exit_code == 0
        assert result.output == "▁▃▅▇█\n"

    def test_sparkline_width_from_config(self, runner: CliRunner, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("TERMCHARTS_SPARKLINE_WIDTH", "3")
        result = runner.invoke(main, ["sparkline", "1", "2", "3", "4", "5", "6"])
        assert result.exit_code == 0
        assert len(result.output.rstrip("\n")) == 3

    def test_sparkline_short_series_is_not_stretched(self, runner: CliRunner) -> None:
        result = runner.invoke(main, ["sparkline", "1", "2", "3", "4", "5", "6"])
        assert result.output == "▁▂▄▅▇█\n"

    def test_sparkline_long_series_is_capped(self, runner: CliRunner) -> None:
        result = runner.invoke(main, ["sparkline", *(str(i) for i in range(100))])
        assert len(result.output.rstrip("\n")) == 40

    def test_sparkline_explicit_width_wins(self, runner: CliRunner, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("TERMCHARTS_SPARKLINE_WIDTH", "3")
        result = runner.invoke(main, ["sparkline", "1", "2", "3", "4", "5", "6", "-w", "6"])
        assert len(result.output.rstrip("\n")) == 6

    def test_sparkline_bad_number(self, runner: CliRunner) -> None:
        result = runner.invoke(main, ["sparkline", "1", "abc"])
        assert result.exit_code == 1
        assert "argument 2" in result.output

    def test_histogram_from_file(self, runner: CliRunner, tmp_path: Path) -> None:
        data = tmp_path / "series.json"
        data.write_text(json.dumps({"values": [0, 10]}))
        result = runner.invoke(main, ["histogram", "-f", str(data), "-w", "4", "-h", "2"])
        assert result.exit_code == 0
        assert result.output.splitlines() == ["    10 │  ▃█", "     0 │▁▆██", "       └────"]

    def test_histogram_bad_file(self, runner: CliRunner, tmp_path: Path) -> None:
        data = tmp_path / "series.json"
        data.write_text("[1, 2")
        result = runner.invoke(main, ["histogram", "-f", str(data)])
        assert result.exit_code == 1
        assert "Cannot parse" in result.output

    def test_area_without_labels(self, runner: CliRunner) -> None:
        result = runner.invoke(main, ["area", "0", "10", "-w", "2", "-h", "2", "--no-labels"])
        assert result.exit_code == 0
        assert result.output.splitlines() == [" █", "▁█"]


class TestProportionalCommands:
    def test_progress(self, runner: CliRunner) -> None:
        result = runner.invoke(main, ["progress", "50", "100", "--width", "10"])
        assert result.exit_code == 0
        assert result.output == "█████░░░░░ 50%\n"

    def test_bars_use_config_width(self, runner: CliRunner, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("TERMCHARTS_BAR_WIDTH", "4")
        result = runner.invoke(main, ["bars", "a=1"])
        assert result.exit_code == 0
        assert result.output.splitlines()[0] == "a".ljust(15) + " ████ 1"

    def test_bars_bad_pair(self, runner: CliRunner) -> None:
        result = runner.invoke(main, ["bars", "python"])
        assert result.exit_code == 1
        assert "Expected LABEL=VALUE" in result.output

    def test_donut(self, runner: CliRunner) -> None:
        result = runner.invoke(main, ["donut", "a=1", "b=3", "--size", "5"])
        assert result.exit_code == 0
        assert result.output.splitlines()[-2:] == ["  █ a: 25%", "  ▓ b: 75%"]


class TestTableCommands:
    def test_table(self, runner: CliRunner, tmp_path: Path) -> None:
        data = tmp_path / "table.yaml"
        data.write_text("headers: [X, Y]\nrows:\n  - [a, 1]\n  - [bb, 22]\n")
        result = runner.invoke(main, ["table", str(data)])
        assert result.exit_code == 0
        assert result.output.splitlines() == table([["a", "1"], ["bb", "22"]], headers=["X", "Y"])


class TestGeoCommands:
    def test_geo(self, runner: CliRunner, geo_file: Path) -> None:
        result = runner.invoke(main, ["geo", str(geo_file)])
        assert result.exit_code == 0
        assert "█ US" in result.output
        assert "United States" in result.output
        assert " 6.0K " in result.output

    def test_geo_table_only(self, runner: CliRunner, geo_file: Path) -> None:
        result = runner.invoke(main, ["geo", str(geo_file), "--no-map"])
        assert result.exit_code == 0
        assert "TOP COUNTRIES" not in result.output
        assert len(result.output.splitlines()) == 6

    def test_regions(self, runner: CliRunner, geo_file: Path) -> None:
        result = runner.invoke(main, ["regions", str(geo_file), "--title", "By Continent"])
        assert result.exit_code == 0
        assert "By Continent" in result.output
        assert "60.0%" in result.output
        assert "10,000" in result.output


class TestLogging:
    def test_debug_flag(self, runner: CliRunner) -> None:
        result = runner.invoke(main, ["--debug", "progress", "1", "2", "-w", "4"])
        assert result.exit_code == 0
        assert "██░░ 50%" in result.output

    def test_json_logs_flag(self, runner: CliRunner) -> None:
        result = runner.invoke(main, ["--json-logs", "progress", "1", "4", "-w", "4"])
        assert result.exit_code == 0
        assert result.output.splitlines()[-1] == "█░░░ 25%"
