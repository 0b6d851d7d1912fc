"""Linear scale with nice-number tick generation for value axes."""

import math

import numpy as np

# Thresholds for rounding a raw step to 1, 2, 5 or 10 times a power of ten
_E10 = math.sqrt(50)
_E5 = math.sqrt(10)
_E2 = math.sqrt(2)


def tick_increment(start: float, stop: float, count: int) -> float:
    """Nice step for roughly ``count`` ticks across ``[start, stop]``.

    Positive results are the step itself. Negative results encode steps below
    one as ``-1 / step`` so that ticks can be computed by division, which
    keeps values like 0.3 exact.
    """
    step = (stop - start) / max(0, count)
    if step <= 0 or not math.isfinite(step):
        return 0.0
    power = math.floor(math.log10(step))
    error = step / 10**power
    if error >= _E10:
        factor = 10
    elif error >= _E5:
        factor = 5
    elif error >= _E2:
        factor = 2
    else:
        factor = 1
    if power >= 0:
        return factor * 10**power
    return -(10 ** (-power)) / factor


def nice_ticks(start: float, stop: float, count: int) -> list[float]:
    """Round-number ticks inside ``[start, stop]``, about ``count`` of them."""
    if count <= 0:
        return []
    if start == stop:
        return [float(start)]
    reverse = stop < start
    if reverse:
        start, stop = stop, start

    increment = tick_increment(start, stop, count)
    if increment == 0:
        return []

    if increment > 0:
        lo = math.ceil(start / increment)
        hi = math.floor(stop / increment)
        ticks = np.arange(lo, hi + 1, dtype=np.float64) * increment
    else:
        inverse = -increment
        lo = math.ceil(start * inverse)
        hi = math.floor(stop * inverse)
        ticks = np.arange(lo, hi + 1, dtype=np.float64) / inverse

    values = [float(v) for v in ticks]
    return values[::-1] if reverse else values


class LinearScale:
    """Maps a numeric domain onto a pixel range.

    Example:
        scale = LinearScale((-50, 100), (300, 0))
        scale(0)        # -> 200.0
        scale.ticks(4)  # -> [-50.0, 0.0, 50.0, 100.0]
    """

    def __init__(self, domain=(0.0, 1.0), range_=(0.0, 1.0)):
        """Initialize scale.

        Args:
            domain: (min, max) data extent
            range_: (start, stop) pixel extent
        """
        self._domain = (float(domain[0]), float(domain[1]))
        self._range = (float(range_[0]), float(range_[1]))

    def domain(self) -> tuple[float, float]:
        return self._domain

    def range(self) -> tuple[float, float]:
        return self._range

    def __call__(self, value: float) -> float:
        d0, d1 = self._domain
        r0, r1 = self._range
        if d1 == d0:
            return (r0 + r1) / 2
        return r0 + (float(value) - d0) / (d1 - d0) * (r1 - r0)

    def invert(self, pixel: float) -> float:
        d0, d1 = self._domain
        r0, r1 = self._range
        if r1 == r0:
            return d0
        return d0 + (float(pixel) - r0) / (r1 - r0) * (d1 - d0)

    def ticks(self, count: int = 10) -> list[float]:
        """Nice ticks across the domain, about ``count`` of them."""
        return nice_ticks(self._domain[0], self._domain[1], count)
