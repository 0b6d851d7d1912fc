"""Calendar-aware tick generation.

Ticks fall on interval boundaries (top of the minute/hour, midnight, Sunday,
first of the month, first of the year). A sequence at step ``n`` starts at
the first boundary on or after ``start`` and keeps every ``n``-th boundary
strictly before ``end``.
"""

from typing import Callable

import pandas as pd

from chart_axes.core.models import Granularity


def _ceil(freq: str) -> Callable[[pd.Timestamp], pd.Timestamp]:
    return lambda ts: ts.ceil(freq)


def _rollforward(offset: pd.DateOffset) -> Callable[[pd.Timestamp], pd.Timestamp]:
    return lambda ts: offset.rollforward(ts.ceil("D"))


# granularity -> (first boundary on or after a timestamp, offset for a step)
INTERVALS = {
    Granularity.MINUTES: (_ceil("min"), lambda n: pd.offsets.Minute(n)),
    Granularity.HOURS: (_ceil("h"), lambda n: pd.offsets.Hour(n)),
    Granularity.DAYS: (_ceil("D"), lambda n: pd.offsets.Day(n)),
    Granularity.WEEKS: (
        _rollforward(pd.offsets.Week(weekday=6)),
        lambda n: pd.offsets.Week(n, weekday=6),
    ),
    Granularity.MONTHS: (_rollforward(pd.offsets.MonthBegin()), lambda n: pd.offsets.MonthBegin(n)),
    Granularity.YEARS: (_rollforward(pd.offsets.YearBegin()), lambda n: pd.offsets.YearBegin(n)),
}


def generate_ticks(granularity: Granularity, start, end, step: int = 1) -> list[pd.Timestamp]:
    """Generate every ``step``-th interval boundary in ``[start, end)``.

    Args:
        granularity: Interval unit (years down to minutes)
        start: First instant of the domain (inclusive)
        end: Last instant of the domain (exclusive)
        step: Number of intervals between consecutive ticks

    Returns:
        List of timestamps, possibly empty
    """
    if step < 1:
        raise ValueError(f"step must be >= 1, got {step}")
    first_boundary, offset = INTERVALS[Granularity.parse(granularity)]
    start = pd.Timestamp(start)
    end = pd.Timestamp(end)
    if not start < end:
        return []

    first = first_boundary(start)
    if not first < end:
        return []

    stamps = pd.date_range(start=first, end=end, freq=offset(int(step)))
    return [ts for ts in stamps if ts < end]


def to_timestamps(values) -> list[pd.Timestamp]:
    """Coerce datetimes, strings, or numpy datetime64 values to timestamps."""
    return [pd.Timestamp(v) for v in values]
