"""Configuration loading and management."""

from __future__ import annotations

import json
import logging
import os
from dataclasses import dataclass, fields
from pathlib import Path
from typing import Any

import yaml
from dotenv import load_dotenv

from termcharts import defaults
from termcharts.errors import ConfigurationError

logger = logging.getLogger(__name__)

# Load .env files
load_dotenv()

# Config directory names
PROJECT_DIR = ".termcharts"
USER_DIR_NAME = ".termcharts"
ENV_PREFIX = "TERMCHARTS_"

CONFIG_FILE_NAMES = ("config.yaml", "config.yml", "config.json")


@dataclass(slots=True)
class ChartConfig:
    """Rendering defaults merged from all sources.

    Priority: CLI args > env vars > project config > user config > defaults
    """
    # Waveforms
    sparkline_width: int = defaults.DEFAULT_SPARKLINE_WIDTH
    histogram_width: int = defaults.DEFAULT_HISTOGRAM_WIDTH
    histogram_height: int = defaults.DEFAULT_HISTOGRAM_HEIGHT
    area_width: int = defaults.DEFAULT_AREA_WIDTH
    area_height: int = defaults.DEFAULT_AREA_HEIGHT
    show_axis: bool = True

    # Proportional
    bar_width: int = defaults.DEFAULT_BAR_WIDTH
    label_width: int = defaults.DEFAULT_LABEL_WIDTH
    progress_width: int = defaults.DEFAULT_PROGRESS_WIDTH
    donut_size: int = defaults.DEFAULT_DONUT_SIZE
    show_legend: bool = True

    # Geo
    geo_top: int = defaults.DEFAULT_GEO_TOP

    # Logging
    debug: bool = False
    json_logs: bool = False


def find_project_root(start: Path | None = None) -> Path | None:
    """Find the project root by looking for .termcharts/ or .git/."""
    current = start or Path.cwd()
    for parent in [current, *current.parents]:
        if (parent / PROJECT_DIR).exists():
            return parent
        if (parent / ".git").exists():
            return parent
    return None


def get_user_config_dir() -> Path:
    """Get the user-level config directory (~/.termcharts/)."""
    return Path.home() / USER_DIR_NAME


def load_json_config(path: Path) -> dict[str, Any]:
    """Load a JSON config file, returning empty dict if not found."""
    if not path.exists():
        return {}
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
        return data if isinstance(data, dict) else {}
    except (json.JSONDecodeError, OSError):
        logger.debug("Ignoring unreadable config file %s", path)
        return {}


def load_yaml_config(path: Path) -> dict[str, Any]:
    """Load a YAML config file, returning empty dict if not found."""
    if not path.exists():
        return {}
    try:
        data = yaml.safe_load(path.read_text(encoding="utf-8"))
        return data if isinstance(data, dict) else {}
    except (yaml.YAMLError, OSError):
        logger.debug("Ignoring unreadable config file %s", path)
        return {}


def load_config_dir(directory: Path) -> dict[str, Any]:
    """Load the first config file present in *directory*."""
    for name in CONFIG_FILE_NAMES:
        path = directory / name
        if path.exists():
            logger.debug("Loading config from %s", path)
            if path.suffix == ".json":
                return load_json_config(path)
            return load_yaml_config(path)
    return {}


def load_config(
    *,
    cli_args: dict[str, Any] | None = None,
    working_dir: str | None = None,
) -> ChartConfig:
    """Load configuration from all sources with proper priority.

    Priority: CLI args > env vars > project config > user config > defaults
    """
    config = ChartConfig()
    cli_args = cli_args or {}

    # 1. User-level config (~/.termcharts/config.yaml)
    _apply_dict(config, load_config_dir(get_user_config_dir()))

    # 2. Project-level config (.termcharts/config.yaml)
    project_root = find_project_root(Path(working_dir) if working_dir else None)
    if project_root:
        _apply_dict(config, load_config_dir(project_root / PROJECT_DIR))

    # 3. Environment variables (TERMCHARTS_BAR_WIDTH=40, ...)
    env_values = {
        f.name: value
        for f in fields(ChartConfig)
        if (value := os.environ.get(ENV_PREFIX + f.name.upper())) is not None
    }
    _apply_dict(config, env_values)

    # 4. CLI args (highest priority)
    _apply_dict(config, cli_args)

    return config


def _apply_dict(config: ChartConfig, data: dict[str, Any]) -> None:
    """Apply dictionary values to config, only for known fields.

    Values are coerced to the field's type; strings such as ``"40"`` or
    ``"yes"`` come from env vars. Unusable values raise ConfigurationError.
    """
    aliases = {
        "sparklineWidth": "sparkline_width",
        "histogramWidth": "histogram_width",
        "histogramHeight": "histogram_height",
        "areaWidth": "area_width",
        "areaHeight": "area_height",
        "showAxis": "show_axis",
        "barWidth": "bar_width",
        "labelWidth": "label_width",
        "progressWidth": "progress_width",
        "donutSize": "donut_size",
        "showLegend": "show_legend",
        "geoTop": "geo_top",
        "jsonLogs": "json_logs",
    }
    known = {f.name: f for f in fields(ChartConfig)}
    for key, value in data.items():
        attr = aliases.get(key, key)
        if attr not in known or value is None:
            continue
        setattr(config, attr, _coerce(attr, value, type(known[attr].default)))


def _coerce(key: str, value: Any, kind: type) -> Any:
    if kind is bool:
        if isinstance(value, bool):
            return value
        if isinstance(value, str) and value.lower() in ("1", "true", "yes", "on"):
            return True
        if isinstance(value, str) and value.lower() in ("0", "false", "no", "off"):
            return False
        raise ConfigurationError(f"Expected a boolean for {key!r}, got {value!r}", key=key)
    try:
        number = int(value)
    except (TypeError, ValueError) as exc:
        raise ConfigurationError(f"Expected an integer for {key!r}, got {value!r}", key=key) from exc
    if number < 0:
        raise ConfigurationError(f"{key!r} must not be negative, got {number}", key=key)
    return number
