"""Axis assembly: tick search, label formatting, measurement, and collision
resolution wired together for each kind of axis.

The assembler owns no algorithm of its own. Each call is one synchronous
pass over fresh tick objects; nothing is carried between renders, so a
resize is simply another call with a new width.
"""

import logging
from typing import Callable, Optional, Sequence

import pandas as pd

from chart_axes.collision.resolver import (
    drop_overset_ticks,
    drop_ticks,
    find_major_ticks,
    resolve_hierarchical,
)
from chart_axes.core.config import DEFAULTS, MONTHS_ABBR, AxisSpec
from chart_axes.core.errors import DegenerateDomainError
from chart_axes.core.models import AxisLayout, Granularity, Tick
from chart_axes.formatting.numeric import format_numeric_labels
from chart_axes.formatting.time_labels import format_time_labels
from chart_axes.rendering.measure import TextMeasurer, measure_ticks, wrap_text
from chart_axes.scales import BandScale, LinearScale, TimeScale
from chart_axes.ticks.context import classify
from chart_axes.ticks.intervals import generate_ticks, to_timestamps
from chart_axes.ticks.search import find_x_ticks, find_y_ticks

logger = logging.getLogger(__name__)


def has_zero_line(values: Sequence[float]) -> bool:
    """True if the tick range spans zero, so a baseline should be drawn."""
    if not len(values):
        return False
    return min(values) <= 0 <= max(values)


class AxisAssembler:
    """Computes the visible ticks of x and y axes.

    Supported x axes:
    - ``time``: continuous time scale; ticks from the calendar step search
    - ``ordinal``: categories laid out in bands; labels word-wrapped
    - ``ordinal-time``: one band per date; hierarchical collision resolution
    - ``numeric``: linear scale with numeric labels

    Example:
        assembler = AxisAssembler()
        ticks = assembler.compute_x_axis_ticks(("2020-01-01", "2020-12-31"), x_axis_spec(), 600)
        visible = [t.label for t in ticks if t.visible]
    """

    def __init__(
        self,
        measure: Optional[Callable[[str], float]] = None,
        months_abbr: Sequence[str] = MONTHS_ABBR,
        generator: Callable = generate_ticks,
        band_padding: float = DEFAULTS.BAND_PADDING,
        band_outer_padding: float = DEFAULTS.BAND_OUTER_PADDING,
    ):
        """Initialize assembler.

        Args:
            measure: ``measure(text) -> width`` in pixels; Pillow-based by default
            months_abbr: Month abbreviations for time labels
            generator: Calendar tick generator used by the step search
            band_padding: Inner padding of ordinal bands
            band_outer_padding: Outer padding of ordinal bands
        """
        self.measure = measure or TextMeasurer()
        self.months_abbr = list(months_abbr)
        self.generator = generator
        self.band_padding = band_padding
        self.band_outer_padding = band_outer_padding

    # ========== X AXIS ==========

    def compute_x_axis_ticks(self, domain, spec: AxisSpec, available_width: float) -> list[Tick]:
        """Ticks of a horizontal axis, with visibility resolved.

        ``domain`` is a (start, end) pair for ``time`` and ``numeric`` axes and
        the full ordered list of categories or dates for ordinal axes.

        Raises:
            DegenerateDomainError: if the domain has no extent
        """
        return self.x_axis_layout(domain, spec, available_width).ticks

    def x_axis_layout(self, domain, spec: AxisSpec, available_width: float) -> AxisLayout:
        """Like :meth:`compute_x_axis_ticks`, with the measured layout."""
        builders = {
            "time": self._time_axis,
            "ordinal": self._discrete_axis,
            "ordinal-time": self._ordinal_time_axis,
            "numeric": self._numeric_axis,
        }
        layout = builders[spec.scale_kind](domain, spec, float(available_width))
        logger.debug(
            "%s x axis: %d ticks, %d visible",
            spec.scale_kind,
            len(layout.ticks),
            len(layout.visible_ticks),
        )
        return layout

    def _tick_goal(self, spec: AxisSpec, available_width: float) -> int:
        if available_width > spec.width_threshold:
            return spec.tick_target if spec.is_auto else int(spec.ticks)
        return spec.ticks_small

    def _time_ticks(self, values, granularity: Granularity, scale) -> list[Tick]:
        labels = format_time_labels(values, granularity, self.months_abbr)
        ticks = [
            Tick(value=value, label=label.text, secondary_label=label.secondary, position=scale(value))
            for value, label in zip(values, labels)
        ]
        for index in find_major_ticks(ticks, granularity):
            ticks[index].is_major = True
        return ticks

    def _time_axis(self, domain, spec: AxisSpec, available_width: float) -> AxisLayout:
        start, end = pd.Timestamp(domain[0]), pd.Timestamp(domain[-1])
        granularity = classify(start, end)
        goal = self._tick_goal(spec, available_width)

        values = find_x_ticks((start, end), granularity, goal, generator=self.generator)
        scale = TimeScale((start, end), (0, available_width))
        ticks = self._time_ticks(values, granularity, scale)

        measure_ticks(ticks, self.measure, anchor="start", offset=spec.text_x)
        drop_ticks(ticks)
        drop_overset_ticks(ticks, available_width)
        return AxisLayout(ticks=ticks, granularity=granularity)

    def _ordinal_time_axis(self, domain, spec: AxisSpec, available_width: float) -> AxisLayout:
        values = to_timestamps(domain)
        if len(values) < 2:
            raise DegenerateDomainError(values[0] if values else None, values[-1] if values else None)
        granularity = classify(values[0], values[-1])

        scale = BandScale(values).range_round_bands(
            (0, available_width), self.band_padding, self.band_outer_padding
        )
        ticks = self._time_ticks(values, granularity, scale.center)
        measure_ticks(ticks, self.measure, anchor="start", offset=spec.text_x)

        if available_width > spec.width_threshold:
            tolerance = DEFAULTS.ORDINAL_TOLERANCE_WIDE
        else:
            tolerance = DEFAULTS.ORDINAL_TOLERANCE_NARROW
        resolve_hierarchical(ticks, granularity, tolerance)
        drop_overset_ticks(ticks, available_width)
        return AxisLayout(
            ticks=ticks,
            granularity=granularity,
            tolerance=tolerance,
            band_width=scale.range_band,
        )

    def _discrete_axis(self, domain, spec: AxisSpec, available_width: float) -> AxisLayout:
        categories = list(domain)
        if not categories:
            raise DegenerateDomainError(None, None, "no categories")

        scale = BandScale(categories).range_round_bands(
            (0, available_width), self.band_padding, self.band_outer_padding
        )
        band = scale.range_band
        ticks = [
            Tick(value=category, label=wrap_text(str(category), band, self.measure), position=scale.center(category))
            for category in categories
        ]
        measure_ticks(ticks, self.measure, anchor="middle")

        # Separators sit between bands; the first and last close the axis.
        offset = band / 2 + band * self.band_outer_padding
        gridlines = [0.0] + [t.position - offset for t in ticks[1:]] + [available_width]
        return AxisLayout(ticks=ticks, band_width=band, gridlines=gridlines)

    def _numeric_axis(self, domain, spec: AxisSpec, available_width: float) -> AxisLayout:
        scale = LinearScale((domain[0], domain[-1]), (0, available_width))
        if not scale.domain()[0] < scale.domain()[1]:
            raise DegenerateDomainError(domain[0], domain[-1])

        values = scale.ticks(self._tick_goal(spec, available_width))
        labels = format_numeric_labels(values, spec.format, spec.prefix, spec.suffix)
        ticks = [
            Tick(value=value, label=label, position=scale(value), is_major=value == 0)
            for value, label in zip(values, labels)
        ]
        measure_ticks(ticks, self.measure, anchor="middle", offset=spec.text_x)
        drop_ticks(ticks)
        return AxisLayout(ticks=ticks)

    # ========== Y AXIS ==========

    def compute_y_axis_ticks(self, domain, spec: AxisSpec, available_height: float = 1.0) -> list[Tick]:
        """Ticks of a value axis: nice numbers aligned with the domain endpoints.

        Raises:
            DegenerateDomainError: if the domain has no extent
        """
        return self.y_axis_layout(domain, spec, available_height).ticks

    def y_axis_layout(self, domain, spec: AxisSpec, available_height: float = 1.0) -> AxisLayout:
        """Value axis ticks plus the widest label, which sets the grid's left edge."""
        scale = LinearScale((domain[0], domain[-1]), (available_height, 0))
        values = find_y_ticks(scale, spec.ticks, spec)
        labels = format_numeric_labels(values, spec.format, spec.prefix, spec.suffix)

        ticks = [
            Tick(value=value, label=label, position=scale(value), is_major=value == 0)
            for value, label in zip(values, labels)
        ]
        label_width = max((self.measure(t.label) for t in ticks), default=0.0)
        return AxisLayout(ticks=ticks, label_width=label_width)
