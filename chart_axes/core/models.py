"""Data model shared by tick search, label formatting, and collision resolution."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Iterator, Optional

from chart_axes.core.errors import UnknownGranularityError


class Granularity(Enum):
    """Time granularity of an axis, declared coarsest first."""

    YEARS = "years"
    MONTHS = "months"
    WEEKS = "weeks"
    DAYS = "days"
    HOURS = "hours"
    MINUTES = "minutes"

    @classmethod
    def parse(cls, name) -> "Granularity":
        """Look up a granularity by name (case-insensitive).

        Raises:
            UnknownGranularityError: if ``name`` is not a known granularity
        """
        if isinstance(name, cls):
            return name
        try:
            return cls(str(name).lower())
        except ValueError:
            raise UnknownGranularityError(name) from None


@dataclass(frozen=True)
class Domain:
    """Ordered (min, max) pair of numbers or timestamps."""

    start: Any
    end: Any

    def __iter__(self) -> Iterator[Any]:
        yield self.start
        yield self.end

    @property
    def is_degenerate(self) -> bool:
        return not self.start < self.end


@dataclass(frozen=True)
class CandidateStep:
    """Tick sequence produced by the interval generator at one step size."""

    step: int
    ticks: list

    @property
    def count(self) -> int:
        return len(self.ticks)


@dataclass(frozen=True)
class BoundingBox:
    """Horizontal extent of a rendered label, in pixels."""

    left: float
    right: float

    @property
    def width(self) -> float:
        return self.right - self.left

    def overlaps(self, other: "BoundingBox", tolerance: float = 0) -> bool:
        """True if ``other`` starts before this box ends (plus tolerance)."""
        return self.right + tolerance > other.left


@dataclass(frozen=True)
class TickLabel:
    """Formatted label for one tick: main text plus an optional second line."""

    text: str
    secondary: Optional[str] = None


@dataclass(frozen=True)
class FormatContext:
    """Date components of the previously formatted tick.

    Threaded through the formatter as an immutable value; every field starts
    as None so the first tick always registers a change.
    """

    previous_year: Optional[int] = None
    previous_month: Optional[int] = None
    previous_date: Optional[int] = None
    previous_hour: Optional[int] = None
    previous_minute: Optional[int] = None


@dataclass
class Tick:
    """One axis tick.

    Ticks are never removed from their sequence; collision resolution flips
    ``visible`` so callers can still address ticks by their original index.
    """

    value: Any
    label: str = ""
    secondary_label: Optional[str] = None
    is_major: bool = False
    position: float = 0.0
    bbox: Optional[BoundingBox] = None
    visible: bool = True

    @property
    def lines(self) -> list[str]:
        """Rendered text lines: the wrapped label followed by the secondary line."""
        lines = self.label.split("\n") if self.label else []
        if self.secondary_label:
            lines.append(self.secondary_label)
        return lines

    def hide(self) -> None:
        self.visible = False


@dataclass
class AxisLayout:
    """Layout contribution of one computed axis.

    Replaces the shared dimensions object: each axis computation returns the
    sizes it measured instead of writing them into chart-wide state.
    """

    ticks: list[Tick] = field(default_factory=list)
    granularity: Optional[Granularity] = None
    label_width: float = 0.0
    tolerance: float = 0.0
    band_width: Optional[float] = None
    gridlines: Optional[list[float]] = None

    @property
    def visible_ticks(self) -> list[Tick]:
        return [t for t in self.ticks if t.visible]
