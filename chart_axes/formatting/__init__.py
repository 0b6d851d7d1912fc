"""Label formatting for time and value axes."""

from chart_axes.formatting.numeric import format_numeric, format_numeric_labels, si_prefix
from chart_axes.formatting.time_labels import (
    format_hour,
    format_time_label,
    format_time_labels,
    secondary_dy,
)

__all__ = [
    "format_numeric",
    "format_numeric_labels",
    "si_prefix",
    "format_hour",
    "format_time_label",
    "format_time_labels",
    "secondary_dy",
]
