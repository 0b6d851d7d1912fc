"""
chart-axes: tick selection, contextual labels, and label collision resolution
for chart axes.

Picks "nice" tick positions for time, ordinal, and value axes, formats labels
so coarser date parts only print when they change, and hides ticks whose
measured labels would overlap.
"""

__version__ = "0.1.0"

from chart_axes.assembler import AxisAssembler, has_zero_line
from chart_axes.collision.resolver import resolve_collisions, resolve_hierarchical
from chart_axes.core.config import DEFAULTS, AxisSpec, x_axis_spec, y_axis_spec
from chart_axes.core.errors import (
    AxisError,
    DegenerateDomainError,
    NoQualifyingTickSetError,
    UnknownGranularityError,
)
from chart_axes.core.models import AxisLayout, Granularity, Tick

__all__ = [
    "AxisAssembler",
    "AxisLayout",
    "AxisSpec",
    "DEFAULTS",
    "Granularity",
    "Tick",
    "has_zero_line",
    "resolve_collisions",
    "resolve_hierarchical",
    "x_axis_spec",
    "y_axis_spec",
    "AxisError",
    "DegenerateDomainError",
    "NoQualifyingTickSetError",
    "UnknownGranularityError",
    "__version__",
]
