"""Tick generation: calendar intervals, context classification, and tick count search."""

from chart_axes.ticks.context import classify, resolve_granularity
from chart_axes.ticks.intervals import generate_ticks, to_timestamps
from chart_axes.ticks.search import find_x_ticks, find_y_ticks, select_step, select_tick_count

__all__ = [
    "classify",
    "resolve_granularity",
    "generate_ticks",
    "to_timestamps",
    "select_step",
    "find_x_ticks",
    "select_tick_count",
    "find_y_ticks",
]
