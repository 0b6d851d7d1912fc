"""Number formats for value axis labels."""

import math
from typing import Optional, Sequence

SI_SYMBOLS = {
    -24: "y",
    -21: "z",
    -18: "a",
    -15: "f",
    -12: "p",
    -9: "n",
    -6: "µ",
    -3: "m",
    0: "",
    3: "k",
    6: "M",
    9: "G",
    12: "T",
    15: "P",
    18: "E",
    21: "Z",
    24: "Y",
}


def si_prefix(value: float) -> tuple[int, str]:
    """SI exponent (a multiple of 3 within +-24) and symbol for ``value``."""
    if not value or not math.isfinite(value):
        return 0, ""
    exponent = (math.floor(math.log10(abs(value)) + 1e-12) // 3) * 3
    exponent = max(-24, min(24, exponent))
    return exponent, SI_SYMBOLS[exponent]


def is_fractional(value: float) -> bool:
    return math.isfinite(value) and value % 1 != 0


def _grouped(value: float) -> str:
    if math.isfinite(value) and not is_fractional(value):
        return f"{int(value):,}"
    return f"{value:,g}"


def format_numeric(value: float, fmt: Optional[str], last_tick: Optional[float] = None) -> str:
    """Format a value axis tick.

    Args:
        value: Tick value
        fmt: One of general, si, comma, round1..round4; anything else groups
            thousands without forcing decimals
        last_tick: Last tick of the axis; ``si`` takes its prefix from it so
            every label shares one magnitude

    Returns:
        Formatted label
    """
    value = float(value)
    if fmt == "general":
        return f"{value:g}"
    if fmt == "si":
        exponent, symbol = si_prefix(float(last_tick if last_tick is not None else value))
        return f"{value / 10**exponent:g}{symbol}"
    if fmt == "comma":
        if is_fractional(value):
            return f"{value:,.2f}"
        return _grouped(value)
    if fmt in ("round1", "round2", "round3", "round4"):
        return f"{value:,.{fmt[-1]}f}"
    return _grouped(value)


def format_numeric_labels(
    values: Sequence[float],
    fmt: Optional[str],
    prefix: str = "",
    suffix: str = "",
) -> list[str]:
    """Format every tick; prefix and suffix go on the last label only."""
    if not len(values):
        return []
    last_tick = values[-1]
    labels = [format_numeric(v, fmt, last_tick) for v in values]
    labels[-1] = f"{prefix or ''}{labels[-1]}{suffix or ''}"
    return labels
