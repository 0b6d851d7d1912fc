"""Exceptions raised by tick selection, formatting, and collision resolution."""


class AxisError(Exception):
    """Base class for axis computation errors."""


class DegenerateDomainError(AxisError, ValueError):
    """The domain has no extent (min >= max or zero elapsed time).

    The axis cannot be rendered with these inputs; callers fall back to an
    empty or single-tick axis.
    """

    def __init__(self, start, end, reason: str = "domain min must be less than max"):
        self.start = start
        self.end = end
        super().__init__(f"Degenerate domain [{start}, {end}]: {reason}")


class NoQualifyingTickSetError(AxisError):
    """No candidate tick set lands on the domain endpoints."""

    def __init__(self, domain, lower: int, upper: int):
        self.domain = domain
        self.lower = lower
        self.upper = upper
        super().__init__(
            f"No tick count in [{lower}, {upper}] aligns with domain {tuple(domain)}"
        )


class UnknownGranularityError(AxisError, KeyError):
    """A granularity name outside years/months/weeks/days/hours/minutes."""

    def __init__(self, name):
        self.name = name
        super().__init__(f"Unknown granularity: {name!r}")

    def __str__(self):
        return self.args[0]


class UnmeasurableLabelWarning(UserWarning):
    """A tick had no measured bounding box when collisions were resolved."""
