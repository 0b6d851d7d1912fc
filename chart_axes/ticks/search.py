"""Tick count search for time and value axes.

Time axes search over step sizes of a calendar interval for the tick count
closest to a goal. Value axes search over requested tick counts of the
scale's nice-number generator, keeping only sets that land on the domain
endpoints.
"""

import logging
from typing import Callable, Optional

import numpy as np
import pandas as pd

from chart_axes.core.config import DEFAULTS, AxisSpec
from chart_axes.core.errors import DegenerateDomainError, NoQualifyingTickSetError
from chart_axes.core.models import CandidateStep, Domain, Granularity
from chart_axes.ticks.intervals import generate_ticks

logger = logging.getLogger(__name__)


def _closest_index(counts, goal: float) -> int:
    """Index of the count nearest ``goal``; the earliest wins ties."""
    distances = np.abs(np.asarray(counts, dtype=np.float64) - goal)
    return int(np.argmin(distances))


def select_step(
    domain,
    granularity: Granularity,
    tick_goal: int,
    generator: Callable = generate_ticks,
    step_bounds: tuple[int, int] = (DEFAULTS.STEP_LOWER_BOUND, DEFAULTS.STEP_UPPER_BOUND),
) -> CandidateStep:
    """Pick the interval step whose tick count is closest to ``tick_goal``.

    Every step in ``step_bounds`` (inclusive) is tried; on equal distance the
    smaller step wins.

    Args:
        domain: (start, end) of the axis
        granularity: Calendar interval to step through
        tick_goal: Desired number of ticks
        generator: ``generator(granularity, start, end, step)`` tick source
        step_bounds: Smallest and largest step to try

    Returns:
        The winning CandidateStep

    Raises:
        DegenerateDomainError: if the domain is empty or no step yields a tick
    """
    start, end = domain
    if not start < end:
        raise DegenerateDomainError(start, end)

    lower, upper = step_bounds
    candidates = [
        CandidateStep(step=step, ticks=list(generator(granularity, start, end, step)))
        for step in range(lower, upper + 1)
    ]
    if not candidates:
        raise DegenerateDomainError(start, end, f"no candidate steps in [{lower}, {upper}]")

    best = candidates[_closest_index([c.count for c in candidates], tick_goal)]
    if best.count == 0:
        raise DegenerateDomainError(start, end, f"no {Granularity.parse(granularity).value} boundary inside the domain")

    logger.debug(
        "Selected step %d (%d ticks, goal %d) for %s axis",
        best.step,
        best.count,
        tick_goal,
        Granularity.parse(granularity).value,
    )
    return best


def find_x_ticks(
    domain,
    granularity: Granularity,
    tick_goal: int,
    generator: Callable = generate_ticks,
) -> list:
    """Ticks for a continuous time axis.

    Runs :func:`select_step`, then anchors the axis start: when the first
    tick sits more than half a step after the domain start, the start itself
    becomes the first tick.
    """
    start = pd.Timestamp(domain[0])
    end = pd.Timestamp(domain[1])
    ticks = list(select_step((start, end), granularity, tick_goal, generator=generator).ticks)

    if len(ticks) >= 2:
        start_diff = ticks[0] - start
        tick_diff = ticks[1] - ticks[0]
        if start_diff > tick_diff / 2:
            ticks.insert(0, start)
    return ticks


def select_tick_count(scale, tick_lower_bound: int, tick_upper_bound: int, tick_goal: int) -> list[float]:
    """Nice tick set that ends on the domain max (and starts on a negative min).

    Args:
        scale: Object with ``domain()`` and ``ticks(n)``
        tick_lower_bound: Smallest tick count to request
        tick_upper_bound: Largest tick count to request
        tick_goal: Preferred number of ticks

    Returns:
        The qualifying tick set whose length is closest to ``tick_goal``

    Raises:
        NoQualifyingTickSetError: if no requested count lands on the endpoints
    """
    domain_min, domain_max = scale.domain()
    qualifying = []
    for count in range(tick_lower_bound, tick_upper_bound + 1):
        candidate = list(scale.ticks(count))
        if not candidate or candidate[-1] != domain_max:
            continue
        if domain_min < 0 and candidate[0] != domain_min:
            continue
        qualifying.append(candidate)

    if not qualifying:
        raise NoQualifyingTickSetError((domain_min, domain_max), tick_lower_bound, tick_upper_bound)

    return qualifying[_closest_index([len(c) for c in qualifying], tick_goal)]


def find_y_ticks(scale, tick_count=None, spec: Optional[AxisSpec] = None) -> list[float]:
    """Ticks for a value axis.

    An explicit integer ``tick_count`` is passed straight to the scale.
    ``"auto"`` searches for an endpoint-aligned set and falls back to the
    scale's default ticks when none exists.

    Raises:
        DegenerateDomainError: if the scale's domain min is not below its max
    """
    spec = spec or AxisSpec(scale_kind="numeric", orient="right")
    if tick_count is None:
        tick_count = spec.ticks

    domain = Domain(*scale.domain())
    if domain.is_degenerate:
        raise DegenerateDomainError(domain.start, domain.end)

    if tick_count != "auto":
        return list(scale.ticks(int(tick_count)))

    try:
        return select_tick_count(scale, spec.tick_lower_bound, spec.tick_upper_bound, spec.tick_goal)
    except NoQualifyingTickSetError as e:
        logger.warning("%s; using default ticks", e)
        return list(scale.ticks())
