"""Tests for linear, time, and band scales."""

import pandas as pd
import pytest

from chart_axes.scales import BandScale, LinearScale, TimeScale, nice_ticks, tick_increment


class TestNiceTicks:
    """Tests for nice-number tick generation."""

    def test_tick_increment(self):
        """Steps round to 1, 2 or 5 times a power of ten."""
        assert tick_increment(0, 100, 10) == 10
        assert tick_increment(0, 100, 4) == 20
        assert tick_increment(-50, 100, 4) == 50
        # Steps below one are encoded as negative inverses
        assert tick_increment(0, 1, 10) == -10

    def test_integer_steps(self):
        """Ticks land on multiples of the step inside the domain."""
        assert nice_ticks(-50, 100, 4) == [-50.0, 0.0, 50.0, 100.0]
        assert nice_ticks(3, 97, 5) == [20.0, 40.0, 60.0, 80.0]

    def test_fractional_steps_are_exact(self):
        """Fractional ticks come out without accumulated error."""
        assert nice_ticks(0, 1, 5) == [0.0, 0.2, 0.4, 0.6, 0.8, 1.0]

    def test_reversed_domain(self):
        """Reversed domains give descending ticks."""
        assert nice_ticks(100, 0, 2) == [100.0, 50.0, 0.0]

    def test_edge_cases(self):
        """Zero count and single-point domains."""
        assert nice_ticks(0, 10, 0) == []
        assert nice_ticks(5, 5, 4) == [5.0]


class TestLinearScale:
    """Tests for the linear scale."""

    @pytest.fixture
    def scale(self):
        """Value axis scale with the pixel range flipped, as drawn on screen."""
        return LinearScale((-50, 100), (300, 0))

    def test_maps_domain_to_range(self, scale):
        """Domain endpoints map to range endpoints."""
        assert scale(-50) == 300
        assert scale(100) == 0
        assert scale(0) == pytest.approx(200)

    def test_invert(self, scale):
        """Pixels map back to values."""
        assert scale.invert(200) == pytest.approx(0)

    def test_range(self, scale):
        """The pixel range is kept as given, flipped for value axes."""
        assert scale.range() == (300.0, 0.0)
        assert scale.invert(300) == pytest.approx(-50)

    def test_ticks(self, scale):
        """Ticks come from the domain."""
        assert scale.ticks(4) == [-50.0, 0.0, 50.0, 100.0]
        assert scale.domain() == (-50.0, 100.0)


class TestTimeScale:
    """Tests for the time scale."""

    def test_maps_timestamps(self):
        """Instants map linearly onto pixels."""
        scale = TimeScale(("2020-01-01", "2020-01-11"), (0, 100))
        assert scale(pd.Timestamp("2020-01-06")) == pytest.approx(50)
        assert scale("2020-01-01") == 0
        assert scale.domain() == (pd.Timestamp("2020-01-01"), pd.Timestamp("2020-01-11"))

    def test_zero_span(self):
        """A zero-length domain maps everything to the range start."""
        scale = TimeScale(("2020-01-01", "2020-01-01"), (10, 100))
        assert scale("2020-01-01") == 10


class TestBandScale:
    """Tests for the band scale."""

    def test_round_bands(self):
        """Bands get whole-pixel steps, centered in the range."""
        scale = BandScale(["a", "b", "c"]).range_round_bands((0, 300), 0.2, 0.1)
        assert scale.step == 100
        assert scale.range_band == 80
        assert [scale(v) for v in "abc"] == [10, 110, 210]
        assert scale.center("b") == 150

    def test_no_padding(self):
        """Without padding bands fill their steps."""
        scale = BandScale(range(4)).range_round_bands((0, 400))
        assert scale.range_band == 100
        assert scale(0) == 0
        assert scale(3) == 300

    def test_empty(self):
        """An empty domain has no bands."""
        scale = BandScale([]).range_round_bands((0, 300), 0.2, 0.1)
        assert scale.range_band == 0
        assert scale.domain() == []

    def test_unknown_value(self):
        """Values outside the domain raise KeyError."""
        scale = BandScale(["a"]).range_round_bands((0, 100))
        with pytest.raises(KeyError):
            scale("z")
