"""Global test fixtures for termcharts."""

from __future__ import annotations

import os
from pathlib import Path

import pytest

from termcharts.types.series import GeoTraffic


@pytest.fixture
def isolated_home(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Point HOME at an empty directory and drop TERMCHARTS_* env vars."""
    home = tmp_path / "home"
    home.mkdir()
    monkeypatch.setenv("HOME", str(home))
    for name in list(os.environ):
        if name.startswith("TERMCHARTS_"):
            monkeypatch.delenv(name)
    return home


@pytest.fixture
def geo_traffic() -> list[GeoTraffic]:
    """A small per-country traffic sample, deliberately unsorted."""
    return [
        GeoTraffic("DE", "Germany", 500, 2048, 25.0),
        GeoTraffic("US", "United States", 1000, 1536, 50.0),
        GeoTraffic("JP", "Japan", 100, 1024**3, 5.0),
        GeoTraffic("XX", "Nowhere", 400, 0, 20.0),
    ]
