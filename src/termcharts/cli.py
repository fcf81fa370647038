"""CLI entry point using Click.

Every command renders one chart to stdout. Numbers come from positional
arguments or from a JSON/YAML file given with ``--file``.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Callable, TypeVar

import click

from termcharts import __version__
from termcharts.charts import (
    area_chart,
    bar_chart,
    donut_chart,
    histogram,
    progress_bar,
    render_geo_report,
    render_region_summary,
    sparkline,
    table,
)
from termcharts.charts.geo import generate_world_map_data
from termcharts.config import ChartConfig, load_config
from termcharts.data_files import (
    load_data_file,
    parse_categories,
    parse_geo,
    parse_number,
    parse_pair,
    parse_series,
    parse_table,
)
from termcharts.errors import ChartError
from termcharts.types.series import CategoryValue
from termcharts.utils.logger import get_logger, setup_logging

T = TypeVar("T")

_FILE_OPTION = click.option(
    "--file", "-f", "data_file",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    default=None,
    help="Read data from a JSON or YAML file",
)


@click.group(invoke_without_command=True)
@click.option("--debug", is_flag=True, help="Enable debug logging")
@click.option("--json-logs", is_flag=True, help="Emit logs as JSON")
@click.version_option(__version__, prog_name="termcharts", message="%(prog)s %(version)s")
@click.pass_context
def main(ctx: click.Context, debug: bool, json_logs: bool) -> None:
    """Termcharts - character-grid charts for text dashboards."""
    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())
        ctx.exit(0)

    cli_args: dict[str, Any] = {}
    if debug:
        cli_args["debug"] = True
    if json_logs:
        cli_args["json_logs"] = True

    try:
        config = load_config(cli_args=cli_args)
    except ChartError as exc:
        raise click.ClickException(str(exc)) from exc

    setup_logging(debug=config.debug, json_output=config.json_logs)
    get_logger("termcharts.cli").debug("config_loaded", command=ctx.invoked_subcommand)
    ctx.obj = config


def _load(data_file: Path | None, parse: Callable[[Any], T]) -> T | None:
    if data_file is None:
        return None
    try:
        return parse(load_data_file(data_file))
    except ChartError as exc:
        raise click.ClickException(str(exc)) from exc


def _series(values: tuple[str, ...], data_file: Path | None) -> list[float]:
    loaded = _load(data_file, parse_series)
    if loaded is not None:
        return loaded
    try:
        return [parse_number(v, where=f"argument {i + 1}") for i, v in enumerate(values)]
    except ChartError as exc:
        raise click.ClickException(str(exc)) from exc


def _categories(pairs: tuple[str, ...], data_file: Path | None) -> list[CategoryValue]:
    loaded = _load(data_file, parse_categories)
    if loaded is not None:
        return loaded
    try:
        return [parse_pair(p) for p in pairs]
    except ChartError as exc:
        raise click.ClickException(str(exc)) from exc


def _echo_lines(lines: list[str]) -> None:
    for line in lines:
        click.echo(line)


@main.command("sparkline")
@click.argument("values", nargs=-1)
@_FILE_OPTION
@click.option("--width", "-w", type=int, default=None, help="Columns (default: one per value, up to sparkline_width)")
@click.option("--min", "min_value", type=float, default=None, help="Lower bound")
@click.option("--max", "max_value", type=float, default=None, help="Upper bound")
@click.pass_obj
def sparkline_command(
    config: ChartConfig,
    values: tuple[str, ...],
    data_file: Path | None,
    width: int | None,
    min_value: float | None,
    max_value: float | None,
) -> None:
    """Render VALUES as a one-line sparkline."""
    data = _series(values, data_file)
    if width is None:
        width = min(len(data), config.sparkline_width)
    click.echo(sparkline(data, width=width, min_value=min_value, max_value=max_value))


@main.command("histogram")
@click.argument("values", nargs=-1)
@_FILE_OPTION
@click.option("--width", "-w", type=int, default=None, help="Columns")
@click.option("--height", "-h", type=int, default=None, help="Rows")
@click.option("--axis/--no-axis", default=None, help="Show min/max labels and axis")
@click.option("--title", default=None, help="Centered title line")
@click.pass_obj
def histogram_command(
    config: ChartConfig,
    values: tuple[str, ...],
    data_file: Path | None,
    width: int | None,
    height: int | None,
    axis: bool | None,
    title: str | None,
) -> None:
    """Render VALUES as a vertical column chart."""
    data = _series(values, data_file)
    _echo_lines(
        histogram(
            data,
            width=config.histogram_width if width is None else width,
            height=config.histogram_height if height is None else height,
            show_axis=config.show_axis if axis is None else axis,
            title=title,
        )
    )


@main.command("area")
@click.argument("values", nargs=-1)
@_FILE_OPTION
@click.option("--width", "-w", type=int, default=None, help="Columns")
@click.option("--height", "-h", type=int, default=None, help="Rows")
@click.option("--labels/--no-labels", default=None, help="Show min/max labels and axis")
@click.pass_obj
def area_command(
    config: ChartConfig,
    values: tuple[str, ...],
    data_file: Path | None,
    width: int | None,
    height: int | None,
    labels: bool | None,
) -> None:
    """Render VALUES as a filled area chart."""
    data = _series(values, data_file)
    _echo_lines(
        area_chart(
            data,
            width=config.area_width if width is None else width,
            height=config.area_height if height is None else height,
            show_labels=config.show_axis if labels is None else labels,
        )
    )


@main.command("bars")
@click.argument("pairs", nargs=-1)
@_FILE_OPTION
@click.option("--width", "-w", type=int, default=None, help="Bar columns")
@click.option("--label-width", type=int, default=None, help="Label columns")
@click.option("--values/--no-values", "show_value", default=True, help="Print values after bars")
@click.pass_obj
def bars_command(
    config: ChartConfig,
    pairs: tuple[str, ...],
    data_file: Path | None,
    width: int | None,
    label_width: int | None,
    show_value: bool,
) -> None:
    """Render LABEL=VALUE pairs as horizontal bars."""
    items = _categories(pairs, data_file)
    _echo_lines(
        bar_chart(
            items,
            width=config.bar_width if width is None else width,
            show_value=show_value,
            max_label_width=config.label_width if label_width is None else label_width,
        )
    )


@main.command("progress")
@click.argument("value", type=float)
@click.argument("maximum", type=float)
@click.option("--width", "-w", type=int, default=None, help="Bar columns")
@click.option("--percentage/--no-percentage", default=True, help="Append the percentage")
@click.pass_obj
def progress_command(
    config: ChartConfig,
    value: float,
    maximum: float,
    width: int | None,
    percentage: bool,
) -> None:
    """Render VALUE out of MAXIMUM as a progress bar."""
    click.echo(
        progress_bar(
            value,
            maximum,
            width=config.progress_width if width is None else width,
            show_percentage=percentage,
        )
    )


@main.command("donut")
@click.argument("pairs", nargs=-1)
@_FILE_OPTION
@click.option("--size", "-s", type=int, default=None, help="Rows (columns are twice that)")
@click.option("--legend/--no-legend", default=None, help="Append a legend")
@click.pass_obj
def donut_command(
    config: ChartConfig,
    pairs: tuple[str, ...],
    data_file: Path | None,
    size: int | None,
    legend: bool | None,
) -> None:
    """Render LABEL=VALUE pairs as a donut chart."""
    items = _categories(pairs, data_file)
    _echo_lines(
        donut_chart(
            items,
            size=config.donut_size if size is None else size,
            show_legend=config.show_legend if legend is None else legend,
        )
    )


@main.command("table")
@click.argument("data_file", type=click.Path(exists=True, dir_okay=False, path_type=Path))
def table_command(data_file: Path) -> None:
    """Render a table file with 'headers', 'rows' and optional 'alignments'."""
    headers, rows, alignments = _load(data_file, parse_table)
    _echo_lines(table(rows, headers=headers, alignments=alignments))


@main.command("geo")
@click.argument("data_file", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option("--top", "-n", type=int, default=None, help="How many countries to rank")
@click.option("--map/--no-map", "show_map", default=True, help="Print the heat map")
@click.option("--table/--no-table", "show_table", default=True, help="Print the ranked table")
@click.pass_obj
def geo_command(
    config: ChartConfig,
    data_file: Path,
    top: int | None,
    show_map: bool,
    show_table: bool,
) -> None:
    """Render per-country traffic as a heat map and a ranked table."""
    geo = _load(data_file, parse_geo)
    report = render_geo_report(geo, show_top=config.geo_top if top is None else top)
    if show_map:
        _echo_lines(report.map_lines)
    if show_table:
        _echo_lines(report.table_lines)


@main.command("regions")
@click.argument("data_file", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option("--title", default=None, help="Header title")
def regions_command(data_file: Path, title: str | None) -> None:
    """Roll per-country traffic up into continents."""
    geo = _load(data_file, parse_geo)
    data = generate_world_map_data(geo)
    if title:
        _echo_lines(render_region_summary(data, title=title))
    else:
        _echo_lines(render_region_summary(data))
