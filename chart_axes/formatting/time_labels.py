"""Contextual labels for time axes.

Labels only repeat a coarser date component when it changes: a months axis
prints the year under the first month of each year, a days axis prefixes the
month name when the month turns over, an hours axis prints the date under
the first hour of each day. The running state is a FormatContext folded
left to right across the ticks.
"""

from dataclasses import replace
from typing import Optional, Sequence

import pandas as pd

from chart_axes.core.config import MONTHS_ABBR, AxisSpec
from chart_axes.core.models import FormatContext, Granularity, TickLabel


def format_hour(hour: int, minute: int) -> str:
    """12-hour clock label, e.g. ``12 a.m.``, ``3:05 p.m.``."""
    suffix = "p.m." if hour >= 12 else "a.m."
    if hour == 0:
        display_hour = 12
    elif hour > 12:
        display_hour = hour - 12
    else:
        display_hour = hour
    minutes = f":{minute:02d}" if minute else ""
    return f"{display_hour}{minutes} {suffix}"


def _advance(context: FormatContext, ts: pd.Timestamp) -> FormatContext:
    return replace(
        context,
        previous_year=ts.year,
        previous_month=ts.month,
        previous_date=ts.day,
        previous_hour=ts.hour,
        previous_minute=ts.minute,
    )


def format_time_label(
    value,
    granularity: Granularity,
    context: Optional[FormatContext] = None,
    months_abbr: Sequence[str] = MONTHS_ABBR,
) -> tuple[TickLabel, FormatContext]:
    """Format one tick given the components of the tick before it.

    Args:
        value: Tick instant
        granularity: Axis granularity
        context: Components of the previous tick (None for the first tick)
        months_abbr: Twelve month abbreviations, January first

    Returns:
        Tuple of (label, context for the next tick)
    """
    granularity = Granularity.parse(granularity)
    context = context or FormatContext()

    if granularity is Granularity.MINUTES:
        return TickLabel(str(value)), context

    ts = pd.Timestamp(value)
    month = months_abbr[ts.month - 1]
    year_changed = ts.year != context.previous_year
    secondary = None

    if granularity is Granularity.YEARS:
        text = str(ts.year)
    elif granularity is Granularity.MONTHS:
        text = month
        if year_changed:
            secondary = str(ts.year)
    elif granularity in (Granularity.WEEKS, Granularity.DAYS):
        month_changed = ts.month != context.previous_month or year_changed
        text = f"{month} {ts.day}" if month_changed else str(ts.day)
        if year_changed:
            secondary = str(ts.year)
    else:
        date_changed = (ts.year, ts.month, ts.day) != (
            context.previous_year,
            context.previous_month,
            context.previous_date,
        )
        text = format_hour(ts.hour, ts.minute)
        if date_changed:
            secondary = f"{month} {ts.day}"

    return TickLabel(text, secondary), _advance(context, ts)


def format_time_labels(
    values,
    granularity: Granularity,
    months_abbr: Sequence[str] = MONTHS_ABBR,
) -> list[TickLabel]:
    """Format a whole tick sequence, starting from an empty context."""
    labels = []
    context = FormatContext()
    for value in values:
        label, context = format_time_label(value, granularity, context, months_abbr)
        labels.append(label)
    return labels


def secondary_dy(spec: AxisSpec) -> float:
    """Vertical offset of a secondary label line, in ems."""
    return spec.ems + spec.dy
