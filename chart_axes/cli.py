"""Command-line interface for chart-axes.

This module provides the Click-based CLI for previewing computed axes.
"""

import logging

import click
import pandas as pd

from chart_axes.assembler import AxisAssembler
from chart_axes.core.config import NUMERIC_FORMATS, x_axis_spec, y_axis_spec
from chart_axes.core.errors import AxisError
from chart_axes.core.logging_config import setup_logging
from chart_axes.rendering.axis_renderer import AxisRenderer


def _parse_ticks(value: str):
    """``auto`` or a positive integer."""
    if value == "auto":
        return value
    try:
        count = int(value)
    except ValueError:
        raise click.BadParameter(f"expected 'auto' or an integer, got {value!r}") from None
    if count < 1:
        raise click.BadParameter("tick count must be positive")
    return count


def _echo_ticks(ticks, show_all: bool) -> None:
    for tick in ticks:
        if not tick.visible and not show_all:
            continue
        fields = [str(tick.value), tick.label.replace("\n", " / ")]
        if tick.secondary_label:
            fields.append(f"[{tick.secondary_label}]")
        if tick.is_major:
            fields.append("major")
        if not tick.visible:
            fields.append("hidden")
        click.echo("\t".join(fields))


@click.group()
@click.option("--verbose", "-v", is_flag=True, help="Log tick search and collision decisions")
@click.option("--log-file", type=click.Path(), default=None, help="Also write logs to this file")
def main(verbose, log_file):
    """chart-axes - Compute chart axis ticks and labels.

    \b
    Examples:
        chart-axes x 2020-01-01 2020-12-31 --width 600
        chart-axes x 2020-03-01 2020-04-15 --kind ordinal-time --freq D
        chart-axes y -- -50 100 --format si --png axis.png
    """
    setup_logging(logging.DEBUG if verbose else logging.WARNING, log_file)


@main.command("x")
@click.argument("start")
@click.argument("end")
@click.option("--width", "-w", default=600, type=int, help="Available axis width in pixels")
@click.option(
    "--kind",
    type=click.Choice(["time", "ordinal-time"]),
    default="time",
    help="Continuous time scale, or one band per date",
)
@click.option("--freq", default="D", help="Date spacing for ordinal-time axes (pandas frequency)")
@click.option("--ticks", "ticks", default="auto", help="'auto' or an explicit tick goal")
@click.option("--all", "show_all", is_flag=True, help="Also list hidden ticks")
@click.option("--png", type=click.Path(), default=None, help="Render a preview image")
def x_axis(start, end, width, kind, freq, ticks, show_all, png):
    """Ticks of a time axis between START and END."""
    spec = x_axis_spec(kind, ticks=_parse_ticks(ticks))
    if kind == "ordinal-time":
        domain = list(pd.date_range(start=start, end=end, freq=freq))
    else:
        domain = (pd.Timestamp(start), pd.Timestamp(end))

    assembler = AxisAssembler()
    try:
        layout = assembler.x_axis_layout(domain, spec, width)
    except AxisError as e:
        raise click.ClickException(str(e)) from e

    _echo_ticks(layout.ticks, show_all)
    if png:
        renderer = AxisRenderer(plot_width=width, plot_height=40, margin_left=20, margin_top=10)
        canvas = renderer.draw(renderer.new_canvas(), x_layout=layout, x_spec=spec)
        canvas.save(png)
        click.echo(f"Wrote {png}", err=True)


@main.command("y")
@click.argument("minimum", type=float)
@click.argument("maximum", type=float)
@click.option("--height", "-h", default=300, type=int, help="Axis height in pixels")
@click.option("--format", "fmt", type=click.Choice(NUMERIC_FORMATS), default="comma", help="Label format")
@click.option("--prefix", default="", help="Prepended to the top label")
@click.option("--suffix", default="", help="Appended to the top label")
@click.option("--ticks", "ticks", default="auto", help="'auto' or an explicit tick count")
@click.option("--png", type=click.Path(), default=None, help="Render a preview image")
def y_axis(minimum, maximum, height, fmt, prefix, suffix, ticks, png):
    """Ticks of a value axis between MINIMUM and MAXIMUM."""
    spec = y_axis_spec(format=fmt, prefix=prefix, suffix=suffix, ticks=_parse_ticks(ticks))

    assembler = AxisAssembler()
    try:
        layout = assembler.y_axis_layout((minimum, maximum), spec, height)
    except AxisError as e:
        raise click.ClickException(str(e)) from e

    _echo_ticks(layout.ticks, show_all=True)
    if png:
        renderer = AxisRenderer(plot_width=400, plot_height=height, margin_left=10, margin_top=20)
        canvas = renderer.draw(renderer.new_canvas(margin_bottom=20), y_layout=layout, y_spec=spec)
        canvas.save(png)
        click.echo(f"Wrote {png}", err=True)


if __name__ == "__main__":
    main()
