"""Ordinal band scale for categorical and ordinal-time axes."""

import math

import numpy as np


class BandScale:
    """Divides a pixel range into evenly spaced, rounded bands.

    Example:
        scale = BandScale(["a", "b", "c"]).range_round_bands((0, 300), 0.2, 0.1)
        scale("b")          # left edge of band "b"
        scale.center("b")   # tick position for "b"
        scale.range_band    # band width
    """

    def __init__(self, domain):
        self._domain = list(domain)
        self._index = {v: i for i, v in enumerate(self._domain)}
        self._positions = np.zeros(len(self._domain))
        self._band = 0.0
        self._step = 0.0
        self._range = (0.0, 0.0)

    def domain(self) -> list:
        return list(self._domain)

    def range(self) -> tuple[float, float]:
        return self._range

    def range_round_bands(self, range_, padding: float = 0.0, outer_padding: float = 0.0) -> "BandScale":
        """Lay out bands over ``range_`` with whole-pixel steps.

        Args:
            range_: (start, stop) pixel extent
            padding: Fraction of each step left empty between bands
            outer_padding: Padding before the first and after the last band, in steps
        """
        start, stop = float(range_[0]), float(range_[1])
        self._range = (start, stop)
        n = len(self._domain)
        if n == 0:
            self._positions = np.zeros(0)
            self._band = 0.0
            self._step = 0.0
            return self

        step = math.floor((stop - start) / (n - padding + 2 * outer_padding))
        offset = start + round((stop - start - (n - padding) * step) / 2)
        self._positions = offset + step * np.arange(n, dtype=np.float64)
        self._step = float(step)
        self._band = float(round(step * (1 - padding)))
        return self

    @property
    def range_band(self) -> float:
        return self._band

    @property
    def step(self) -> float:
        return self._step

    def __call__(self, value) -> float:
        return float(self._positions[self._index[value]])

    def center(self, value) -> float:
        return self(value) + self._band / 2
