"""Core modules for chart_axes: data model, configuration, errors, and logging."""

from chart_axes.core.config import DEFAULTS, MONTHS_ABBR, AxisSpec, x_axis_spec, y_axis_spec
from chart_axes.core.errors import (
    AxisError,
    DegenerateDomainError,
    NoQualifyingTickSetError,
    UnknownGranularityError,
    UnmeasurableLabelWarning,
)
from chart_axes.core.models import (
    AxisLayout,
    BoundingBox,
    CandidateStep,
    Domain,
    FormatContext,
    Granularity,
    Tick,
    TickLabel,
)

__all__ = [
    "AxisSpec",
    "AxisLayout",
    "BoundingBox",
    "CandidateStep",
    "Domain",
    "FormatContext",
    "Granularity",
    "Tick",
    "TickLabel",
    "DEFAULTS",
    "MONTHS_ABBR",
    "x_axis_spec",
    "y_axis_spec",
    "AxisError",
    "DegenerateDomainError",
    "NoQualifyingTickSetError",
    "UnknownGranularityError",
    "UnmeasurableLabelWarning",
]
