"""Classify a time span into the granularity used for ticks and labels."""

import logging

import pandas as pd

from chart_axes.core.config import DEFAULTS, GRANULARITY_SPANS
from chart_axes.core.errors import DegenerateDomainError, UnknownGranularityError
from chart_axes.core.models import Granularity

logger = logging.getLogger(__name__)


def classify(start, end, tolerance: float = DEFAULTS.CONTEXT_TOLERANCE) -> Granularity:
    """Map the time elapsed between ``start`` and ``end`` to a granularity.

    Units are tried coarsest first; the first unit the span covers at least
    ``tolerance`` times wins. Spans shorter than ``tolerance`` hours are
    minutes.

    Args:
        start: First instant of the domain
        end: Last instant of the domain
        tolerance: Minimum number of whole units the span must cover

    Returns:
        Granularity of the span

    Raises:
        DegenerateDomainError: if no time elapses between start and end
    """
    elapsed = (pd.Timestamp(end) - pd.Timestamp(start)).total_seconds()
    if elapsed <= 0:
        raise DegenerateDomainError(start, end, "no time elapses across the domain")

    for name, seconds in GRANULARITY_SPANS.items():
        if elapsed / seconds >= tolerance:
            return Granularity(name)
    return Granularity.MINUTES


def resolve_granularity(name, strict: bool = DEFAULTS.STRICT) -> Granularity:
    """Parse a granularity name coming from configuration.

    Args:
        name: Granularity name or member
        strict: Raise on unknown names instead of falling back to minutes

    Returns:
        The parsed granularity, or MINUTES for unknown names when not strict
    """
    try:
        return Granularity.parse(name)
    except UnknownGranularityError:
        if strict:
            raise
        logger.warning("Unknown granularity %r, falling back to minutes", name)
        return Granularity.MINUTES
