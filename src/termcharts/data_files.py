"""Loading chart data for the command line.

Data files are JSON or YAML (chosen by suffix). The renderers never touch
files; everything here converts raw documents into the chart input types
and raises :class:`DataFormatError` when the shape is wrong.
"""

from __future__ import annotations

import json
from datetime import datetime
from pathlib import Path
from typing import Any

import yaml

from termcharts.errors import DataFormatError
from termcharts.types.series import CategoryValue, GeoTraffic, TimePoint


def load_data_file(path: Path) -> Any:
    """Read a JSON or YAML document."""
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as exc:
        raise DataFormatError(f"Cannot read {path}: {exc}", source=str(path)) from exc

    try:
        if path.suffix.lower() == ".json":
            return json.loads(text)
        return yaml.safe_load(text)
    except (json.JSONDecodeError, yaml.YAMLError) as exc:
        raise DataFormatError(f"Cannot parse {path}: {exc}", source=str(path)) from exc


def parse_number(raw: Any, *, where: str = "value") -> float:
    if isinstance(raw, bool):
        raise DataFormatError(f"Expected a number for {where}, got {raw!r}")
    try:
        return float(raw)
    except (TypeError, ValueError) as exc:
        raise DataFormatError(f"Expected a number for {where}, got {raw!r}") from exc


def parse_points(raw: Any) -> list[TimePoint]:
    """Parse ``[{"timestamp": "...", "value": 1.0}, ...]`` into a series."""
    if not isinstance(raw, list):
        raise DataFormatError("Expected a list of points")
    points: list[TimePoint] = []
    for i, entry in enumerate(raw):
        if not isinstance(entry, dict) or "timestamp" not in entry or "value" not in entry:
            raise DataFormatError(f"Point {i} needs 'timestamp' and 'value'")
        stamp = entry["timestamp"]
        if not isinstance(stamp, datetime):
            try:
                stamp = datetime.fromisoformat(str(stamp))
            except ValueError as exc:
                raise DataFormatError(f"Point {i} has a bad timestamp {stamp!r}") from exc
        points.append(TimePoint(timestamp=stamp, value=parse_number(entry["value"], where=f"point {i}")))
    return points


def parse_series(raw: Any) -> list[float]:
    """Accept a plain list of numbers or a list of points."""
    if isinstance(raw, dict) and "values" in raw:
        raw = raw["values"]
    if not isinstance(raw, list):
        raise DataFormatError("Expected a list of numbers")
    if raw and isinstance(raw[0], dict):
        return [p.value for p in parse_points(raw)]
    return [parse_number(v, where=f"item {i}") for i, v in enumerate(raw)]


def parse_pair(text: str) -> CategoryValue:
    """Parse ``label=value`` as given on the command line."""
    label, sep, value = text.rpartition("=")
    if not sep or not label:
        raise DataFormatError(f"Expected LABEL=VALUE, got {text!r}")
    return CategoryValue(label=label, value=parse_number(value, where=label))


def parse_categories(raw: Any) -> list[CategoryValue]:
    """Accept ``{"label": value}`` or ``[{"label": ..., "value": ...}]``."""
    if isinstance(raw, dict):
        return [CategoryValue(label=str(k), value=parse_number(v, where=str(k))) for k, v in raw.items()]
    if not isinstance(raw, list):
        raise DataFormatError("Expected a mapping or a list of categories")
    items: list[CategoryValue] = []
    for i, entry in enumerate(raw):
        if not isinstance(entry, dict) or "label" not in entry or "value" not in entry:
            raise DataFormatError(f"Category {i} needs 'label' and 'value'")
        items.append(
            CategoryValue(
                label=str(entry["label"]),
                value=parse_number(entry["value"], where=str(entry["label"])),
                glyph=entry.get("glyph"),
            )
        )
    return items


def parse_geo(raw: Any) -> list[GeoTraffic]:
    """Parse a list of per-country records (camelCase keys accepted)."""
    if not isinstance(raw, list):
        raise DataFormatError("Expected a list of countries")

    def pick(entry: dict[str, Any], snake: str, camel: str, default: Any = None) -> Any:
        if snake in entry:
            return entry[snake]
        return entry.get(camel, default)

    records: list[GeoTraffic] = []
    for i, entry in enumerate(raw):
        if not isinstance(entry, dict):
            raise DataFormatError(f"Country {i} must be a mapping")
        code = pick(entry, "country_code", "countryCode")
        if not code:
            raise DataFormatError(f"Country {i} needs a country code")
        records.append(
            GeoTraffic(
                country_code=str(code).upper(),
                country_name=str(pick(entry, "country_name", "countryName", code)),
                requests=parse_number(entry.get("requests", 0), where=f"{code} requests"),
                bandwidth=parse_number(entry.get("bandwidth", 0), where=f"{code} bandwidth"),
                percentage=parse_number(entry.get("percentage", 0), where=f"{code} percentage"),
            )
        )
    return records


def parse_table(raw: Any) -> tuple[list[str], list[list[str]], list[str] | None]:
    """Parse ``{"headers": [...], "rows": [[...]], "alignments": [...]}``."""
    if not isinstance(raw, dict) or not isinstance(raw.get("headers"), list):
        raise DataFormatError("Expected a mapping with a 'headers' list")
    rows = raw.get("rows", [])
    if not isinstance(rows, list) or not all(isinstance(r, list) for r in rows):
        raise DataFormatError("'rows' must be a list of lists")
    alignments = raw.get("alignments")
    if alignments is not None and not isinstance(alignments, list):
        raise DataFormatError("'alignments' must be a list")
    return (
        [str(h) for h in raw["headers"]],
        [["" if c is None else str(c) for c in row] for row in rows],
        [str(a) for a in alignments] if alignments is not None else None,
    )
