"""Scales mapping numeric, temporal, and categorical domains onto pixels."""

from chart_axes.scales.band import BandScale
from chart_axes.scales.linear import LinearScale, nice_ticks, tick_increment
from chart_axes.scales.time import TimeScale

__all__ = [
    "BandScale",
    "LinearScale",
    "TimeScale",
    "nice_ticks",
    "tick_increment",
]
