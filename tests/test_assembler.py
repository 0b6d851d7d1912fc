"""Tests for axis assembly across time, ordinal, numeric, and value axes."""

import pandas as pd
import pytest

from chart_axes.assembler import AxisAssembler, has_zero_line
from chart_axes.core.config import DEFAULTS, x_axis_spec, y_axis_spec
from chart_axes.core.errors import DegenerateDomainError
from chart_axes.core.models import Granularity
from chart_axes.scales import LinearScale

T = pd.Timestamp


def fixed_width(text):
    """Seven pixels per character."""
    return 7.0 * len(text)


@pytest.fixture
def assembler():
    """Assembler measuring text at a fixed width per character."""
    return AxisAssembler(measure=fixed_width)


class TestTimeAxis:
    """Tests for continuous time axes."""

    def test_year_of_months(self, assembler):
        """A wide axis over 2020 shows every second month, the year under January."""
        layout = assembler.x_axis_layout(("2020-01-01", "2020-12-31"), x_axis_spec(), 600)

        assert layout.granularity is Granularity.MONTHS
        assert [t.label for t in layout.visible_ticks] == ["Jan", "Mar", "May", "Jul", "Sep", "Nov"]
        assert layout.ticks[0].secondary_label == "2020"
        assert all(t.secondary_label is None for t in layout.ticks[1:])
        assert layout.ticks[0].is_major

    def test_narrow_axis_uses_small_goal(self, assembler):
        """Below the width threshold the smaller tick goal applies."""
        ticks = assembler.compute_x_axis_ticks(("2020-01-01", "2020-12-31"), x_axis_spec(), 300)
        assert [t.label for t in ticks] == ["Jan", "Apr", "Jul", "Oct"]

    def test_explicit_tick_goal(self, assembler):
        """An explicit tick count replaces the target on wide axes."""
        spec = x_axis_spec(ticks=12)
        ticks = assembler.compute_x_axis_ticks(("2020-01-01", "2020-12-31"), spec, 1200)
        assert len(ticks) == 12

    def test_positions_increase(self, assembler):
        """Tick positions follow the time scale."""
        ticks = assembler.compute_x_axis_ticks(("2020-01-01", "2020-12-31"), x_axis_spec(), 600)
        positions = [t.position for t in ticks]
        assert positions == sorted(positions)
        assert positions[0] == 0

    def test_overlapping_labels_hidden(self):
        """Wide labels on a narrow axis are thinned out."""
        assembler = AxisAssembler(measure=lambda text: 60.0 * len(text))
        ticks = assembler.compute_x_axis_ticks(("2020-01-01", "2020-12-31"), x_axis_spec(), 400)
        assert 0 < sum(t.visible for t in ticks) < len(ticks)

    def test_degenerate(self, assembler):
        """An empty time domain raises."""
        with pytest.raises(DegenerateDomainError):
            assembler.compute_x_axis_ticks(("2020-01-01", "2020-01-01"), x_axis_spec(), 600)

    def test_rerun_is_idempotent(self, assembler):
        """Recomputing with the same inputs gives the same ticks."""
        domain = ("2020-03-01", "2020-03-20")
        first = assembler.compute_x_axis_ticks(domain, x_axis_spec(), 500)
        second = assembler.compute_x_axis_ticks(domain, x_axis_spec(), 500)
        assert [(t.label, t.visible) for t in first] == [(t.label, t.visible) for t in second]


class TestOrdinalTimeAxis:
    """Tests for ordinal axes with one band per date."""

    def test_month_start_kept(self, assembler):
        """The first of the month survives while crowded days are dropped."""
        dates = list(pd.date_range("2020-01-25", "2020-02-05", freq="D"))
        layout = assembler.x_axis_layout(dates, x_axis_spec("ordinal-time"), 300)

        assert layout.granularity is Granularity.DAYS
        assert layout.tolerance == DEFAULTS.ORDINAL_TOLERANCE_NARROW
        assert layout.band_width == 20

        by_value = {t.value: t for t in layout.ticks}
        assert by_value[T("2020-01-25")].label == "Jan 25"
        assert not by_value[T("2020-01-26")].visible
        feb_1 = by_value[T("2020-02-01")]
        assert feb_1.label == "Feb 1"
        assert feb_1.visible
        assert feb_1.is_major

    def test_wide_tolerance(self, assembler):
        """Wide axes use the larger tolerance."""
        dates = list(pd.date_range("2020-01-01", "2020-01-10", freq="D"))
        layout = assembler.x_axis_layout(dates, x_axis_spec("ordinal-time"), 800)
        assert layout.tolerance == DEFAULTS.ORDINAL_TOLERANCE_WIDE

    def test_last_label_past_width_hidden(self):
        """A final label running past the axis end is trimmed."""
        dates = list(pd.date_range("2020-01-01", "2020-01-04", freq="D"))
        assembler = AxisAssembler(measure=lambda text: 40.0 if text == "4" else 5.0)
        ticks = assembler.compute_x_axis_ticks(dates, x_axis_spec("ordinal-time"), 100)

        assert [t.label for t in ticks] == ["Jan 1", "2", "3", "4"]
        assert [t.visible for t in ticks] == [True, True, True, False]

    def test_too_few_dates(self, assembler):
        """A single date cannot form an axis."""
        with pytest.raises(DegenerateDomainError):
            assembler.compute_x_axis_ticks([T("2020-01-01")], x_axis_spec("ordinal-time"), 300)


class TestOrdinalAxis:
    """Tests for categorical axes."""

    def test_labels_wrap_to_band(self, assembler):
        """Labels wider than their band wrap onto several lines."""
        layout = assembler.x_axis_layout(["North America", "Europe", "Asia"], x_axis_spec("ordinal"), 300)

        assert layout.band_width == 80
        assert [t.label for t in layout.ticks] == ["North\nAmerica", "Europe", "Asia"]
        assert [t.position for t in layout.ticks] == [50, 150, 250]

    def test_gridlines_close_axis(self, assembler):
        """Separators start at zero and end at the axis width."""
        layout = assembler.x_axis_layout(["a", "b", "c"], x_axis_spec("ordinal"), 300)
        assert len(layout.gridlines) == 4
        assert layout.gridlines[0] == 0
        assert layout.gridlines[-1] == 300

    def test_empty(self, assembler):
        """No categories, no axis."""
        with pytest.raises(DegenerateDomainError):
            assembler.compute_x_axis_ticks([], x_axis_spec("ordinal"), 300)


class TestNumericXAxis:
    """Tests for numeric horizontal axes."""

    def test_numeric_ticks(self, assembler):
        """Nice numbers across the width, labels centered on the ticks."""
        layout = assembler.x_axis_layout((0, 100), x_axis_spec("numeric"), 600)

        assert [t.label for t in layout.ticks] == ["0", "20", "40", "60", "80", "100"]
        assert all(t.visible for t in layout.ticks)
        assert layout.ticks[0].is_major
        assert layout.ticks[1].bbox.left == pytest.approx(120 - 7)

    def test_degenerate(self, assembler):
        """Equal endpoints raise."""
        with pytest.raises(DegenerateDomainError):
            assembler.compute_x_axis_ticks((3, 3), x_axis_spec("numeric"), 600)


class TestYAxis:
    """Tests for value axes."""

    def test_endpoint_aligned_si(self, assembler):
        """The negative minimum and the maximum both become ticks."""
        spec = y_axis_spec(format="si", tick_lower_bound=4, tick_upper_bound=8, tick_goal=6)
        layout = assembler.y_axis_layout((-50, 100), spec, 300)

        assert [t.value for t in layout.ticks] == [-50.0, 0.0, 50.0, 100.0]
        assert [t.label for t in layout.ticks] == ["-50", "0", "50", "100"]
        assert [t.is_major for t in layout.ticks] == [False, True, False, False]
        assert layout.ticks[0].position == 300
        assert layout.ticks[-1].position == 0
        assert layout.label_width == 21

    def test_explicit_count(self, assembler):
        """An explicit count is passed to the scale as is."""
        ticks = assembler.compute_y_axis_ticks((0, 100), y_axis_spec(ticks=4))
        assert [t.value for t in ticks] == LinearScale((0, 100)).ticks(4)

    def test_suffix_widens_labels(self, assembler):
        """The suffix on the top label counts toward the label width."""
        layout = assembler.y_axis_layout((0, 100), y_axis_spec(suffix="%"), 300)
        assert layout.ticks[-1].label == "100%"
        assert layout.label_width == 28

    def test_degenerate(self, assembler):
        """Equal endpoints raise."""
        with pytest.raises(DegenerateDomainError):
            assembler.compute_y_axis_ticks((7, 7), y_axis_spec())


class TestHasZeroLine:
    """Tests for zero baseline detection."""

    def test_spans_zero(self):
        assert has_zero_line([-50, 0, 50])
        assert has_zero_line([0, 20, 40])

    def test_all_positive(self):
        assert not has_zero_line([20, 40])
        assert not has_zero_line([])
