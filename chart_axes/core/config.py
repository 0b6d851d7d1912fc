"""Configuration constants, axis presets, and default settings."""

import os
from dataclasses import dataclass, replace
from typing import Optional, Union

# Abbreviated month names used by the time label formatter
MONTHS_ABBR = [
    "Jan",
    "Feb",
    "Mar",
    "Apr",
    "May",
    "Jun",
    "Jul",
    "Aug",
    "Sep",
    "Oct",
    "Nov",
    "Dec",
]

# Axis orientations and scale kinds understood by the assembler
ORIENTS = ("left", "right", "bottom")
SCALE_KINDS = ("time", "ordinal", "ordinal-time", "numeric")

# Numeric label formats for value axes
NUMERIC_FORMATS = (
    "general",
    "si",
    "comma",
    "round1",
    "round2",
    "round3",
    "round4",
)

# Seconds per granularity unit, coarsest first. A span classifies as the first
# unit it covers at least CONTEXT_TOLERANCE times.
GRANULARITY_SPANS = {
    "years": 365 * 24 * 3600,
    "months": 30 * 24 * 3600,
    "weeks": 7 * 24 * 3600,
    "days": 24 * 3600,
    "hours": 3600,
}


# Default axis settings
class DEFAULTS:
    """Default configuration values."""

    # Tick counts
    TICKS = "auto"
    TICK_TARGET = 6  # x axis goal when the plot is wide
    TICKS_SMALL = 4  # x axis goal below WIDTH_THRESHOLD
    TICK_LOWER_BOUND = 3  # y axis search bounds
    TICK_UPPER_BOUND = 8
    TICK_GOAL = 5

    # Step search bounds for calendar intervals
    STEP_LOWER_BOUND = 1
    STEP_UPPER_BOUND = 12

    # Widths (pixels)
    WIDTH_THRESHOLD = 420
    PADDING_RIGHT = 9

    # Text placement
    DY = 0.7  # ems
    EMS = 1.6  # line height of secondary labels, in ems
    TEXT_X = 0
    TEXT_Y = 2
    TICK_HEIGHT = 10
    FONT_SIZE = 12

    # Value axis format
    Y_FORMAT = "comma"

    # Context classification
    CONTEXT_TOLERANCE = 3

    # Collision tolerances for ordinal-time axes (pixels)
    ORDINAL_TOLERANCE_WIDE = 7
    ORDINAL_TOLERANCE_NARROW = 4

    # Band scale padding for ordinal axes
    BAND_PADDING = 0.2
    BAND_OUTER_PADDING = 0.1

    # Raise on unknown granularities instead of falling back to minutes
    STRICT = os.environ.get("CHART_AXES_STRICT", "0") == "1"

    # Colors (RGBA tuples)
    AXIS_COLOR = (136, 136, 136, 255)
    TICK_COLOR = (136, 136, 136, 255)
    LABEL_COLOR = (51, 51, 51, 255)
    BACKGROUND_COLOR = (255, 255, 255, 255)


@dataclass(frozen=True)
class AxisSpec:
    """Per-render axis configuration supplied by the chart.

    ``ticks`` is either ``"auto"`` (search for a tick count) or an explicit
    integer. ``tick_target``/``ticks_small`` drive the x axis search,
    ``tick_lower_bound``/``tick_upper_bound``/``tick_goal`` the y axis one.
    """

    orient: str = "bottom"
    scale_kind: str = "time"
    ticks: Union[int, str] = DEFAULTS.TICKS
    tick_target: int = DEFAULTS.TICK_TARGET
    ticks_small: int = DEFAULTS.TICKS_SMALL
    tick_lower_bound: int = DEFAULTS.TICK_LOWER_BOUND
    tick_upper_bound: int = DEFAULTS.TICK_UPPER_BOUND
    tick_goal: int = DEFAULTS.TICK_GOAL
    width_threshold: float = DEFAULTS.WIDTH_THRESHOLD
    format: Optional[str] = None
    prefix: str = ""
    suffix: str = ""
    dy: float = DEFAULTS.DY
    text_x: float = DEFAULTS.TEXT_X
    text_y: float = DEFAULTS.TEXT_Y
    ems: float = DEFAULTS.EMS
    tick_height: float = DEFAULTS.TICK_HEIGHT
    padding_right: float = DEFAULTS.PADDING_RIGHT

    def __post_init__(self):
        if self.orient not in ORIENTS:
            raise ValueError(f"orient must be one of {ORIENTS}, got {self.orient!r}")
        if self.scale_kind not in SCALE_KINDS:
            raise ValueError(f"scale_kind must be one of {SCALE_KINDS}, got {self.scale_kind!r}")
        if self.ticks != "auto" and (not isinstance(self.ticks, int) or self.ticks < 1):
            raise ValueError(f"ticks must be 'auto' or a positive integer, got {self.ticks!r}")
        if self.tick_lower_bound > self.tick_upper_bound:
            raise ValueError("tick_lower_bound must not exceed tick_upper_bound")

    @property
    def is_auto(self) -> bool:
        return self.ticks == "auto"

    def with_overrides(self, **overrides) -> "AxisSpec":
        """Return a copy with the given fields replaced (export presets, etc.)."""
        return replace(self, **overrides)


def x_axis_spec(scale_kind: str = "time", **overrides) -> AxisSpec:
    """Bottom axis preset."""
    return AxisSpec(orient="bottom", scale_kind=scale_kind, **overrides)


def y_axis_spec(**overrides) -> AxisSpec:
    """Value axis preset: numeric scale, comma format, text nudged above the grid line."""
    settings = {
        "orient": "right",
        "scale_kind": "numeric",
        "format": DEFAULTS.Y_FORMAT,
        "dy": -0.3,
        "text_x": 0,
        "text_y": 0,
    }
    settings.update(overrides)
    return AxisSpec(**settings)
