"""Time scale mapping timestamps onto a pixel range."""

import pandas as pd


class TimeScale:
    """Linear mapping from a timestamp domain to pixels."""

    def __init__(self, domain, range_=(0.0, 1.0)):
        """Initialize scale.

        Args:
            domain: (start, end) instants; anything ``pd.Timestamp`` accepts
            range_: (start, stop) pixel extent
        """
        self._domain = (pd.Timestamp(domain[0]), pd.Timestamp(domain[-1]))
        self._range = (float(range_[0]), float(range_[1]))

    def domain(self) -> tuple[pd.Timestamp, pd.Timestamp]:
        return self._domain

    def range(self) -> tuple[float, float]:
        return self._range

    def __call__(self, value) -> float:
        start, end = self._domain
        r0, r1 = self._range
        total = (end - start).total_seconds()
        if total == 0:
            return r0
        elapsed = (pd.Timestamp(value) - start).total_seconds()
        return r0 + elapsed / total * (r1 - r0)
