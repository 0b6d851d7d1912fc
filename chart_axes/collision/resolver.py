"""Label collision resolution.

Ticks carry the measured pixel extent of their labels. Resolution walks the
ticks left to right and hides neighbors whose labels would overlap; nothing
is ever removed from the sequence, so callers can still address ticks by
index after resolution.
"""

import logging
from typing import Optional

from chart_axes.core.errors import UnmeasurableLabelWarning
from chart_axes.core.models import Granularity, Tick

logger = logging.getLogger(__name__)

# Date components that identify a tick at each granularity
_IDENTITY = {
    Granularity.YEARS: lambda ts: (ts.year,),
    Granularity.MONTHS: lambda ts: (ts.year, ts.month),
    Granularity.WEEKS: lambda ts: (ts.year, ts.month, ts.day),
    Granularity.DAYS: lambda ts: (ts.year, ts.month, ts.day),
    Granularity.HOURS: lambda ts: (ts.year, ts.month, ts.day, ts.hour, ts.minute),
    Granularity.MINUTES: lambda ts: (ts.year, ts.month, ts.day, ts.hour, ts.minute),
}

# Components whose change makes a tick major, one level coarser than the axis
_MAJOR_KEY = {
    Granularity.MONTHS: lambda ts: (ts.year,),
    Granularity.WEEKS: lambda ts: (ts.year, ts.month),
    Granularity.DAYS: lambda ts: (ts.year, ts.month),
    Granularity.HOURS: lambda ts: (ts.year, ts.month, ts.day),
}


def _unmeasurable(index: int, tick: Tick) -> None:
    warning = UnmeasurableLabelWarning(f"tick {index} ({tick.value!r}) has no bounding box, skipped")
    logger.debug("%s", warning)


def _previous_measurable(ticks: list[Tick], index: int, start: int) -> Optional[int]:
    for candidate in range(index - 1, start - 1, -1):
        tick = ticks[candidate]
        if tick.visible and tick.bbox is not None:
            return candidate
    return None


def drop_ticks(
    ticks: list[Tick],
    tolerance: float = 0,
    start: int = 0,
    end: Optional[int] = None,
    protect_major: bool = False,
) -> list[Tick]:
    """Hide ticks whose labels overlap their right-hand neighbor.

    Scans ``ticks[start:end + 1]``, or to the end of the sequence. For each
    visible tick, while its label reaches past the next visible label's left
    edge (plus ``tolerance``), the next tick is hidden. An explicit ``end``
    is the range's anchor: when it is the colliding neighbor the current
    tick is hidden instead, and the scan steps back to recheck the anchor
    against the tick before.

    Args:
        ticks: Ticks with measured ``bbox`` values, in axis order
        tolerance: Extra pixels of clearance required between labels
        start: First index of the range
        end: Anchor index; without one the whole sequence is scanned and
            the right-hand tick of every colliding pair is hidden
        protect_major: Hide a non-major anchor rather than a major tick
            colliding with it

    Returns:
        The same list, with ``visible`` updated
    """
    anchor = end
    last = len(ticks) - 1 if end is None else min(end, len(ticks) - 1)

    current = start
    while current < last:
        tick = ticks[current]
        if not tick.visible:
            current += 1
            continue
        if tick.bbox is None:
            _unmeasurable(current, tick)
            current += 1
            continue

        neighbor = current + 1
        while neighbor <= last:
            other = ticks[neighbor]
            if not other.visible:
                neighbor += 1
                continue
            if other.bbox is None:
                _unmeasurable(neighbor, other)
                neighbor += 1
                continue
            if not tick.bbox.overlaps(other.bbox, tolerance):
                break

            if neighbor == anchor:
                if protect_major and tick.is_major and not other.is_major:
                    other.hide()
                    neighbor += 1
                    break
                tick.hide()
                previous = _previous_measurable(ticks, current, start)
                if previous is None:
                    break
                current = previous
                tick = ticks[current]
                continue

            other.hide()
            neighbor += 1

        current = neighbor

    return ticks


def resolve_collisions(ticks: list[Tick], tolerance: float = 0) -> list[Tick]:
    """Resolve collisions across the whole sequence; the later tick of each colliding pair is hidden."""
    return drop_ticks(ticks, tolerance=tolerance)


def drop_redundant_ticks(ticks: list[Tick], granularity: Granularity) -> list[Tick]:
    """Hide ticks that repeat the previous visible tick at this granularity.

    A days axis fed two instants on the same date keeps only the first, a
    months axis keeps one tick per month, and so on.
    """
    identity = _IDENTITY[Granularity.parse(granularity)]
    previous = None
    for tick in ticks:
        if not tick.visible:
            continue
        key = identity(tick.value)
        if key == previous:
            tick.hide()
        previous = key
    return ticks


def find_major_ticks(ticks: list[Tick], granularity: Granularity) -> list[int]:
    """Indices of visible ticks where the next coarser component changes.

    Every tick is major on a years axis; minutes axes have no major ticks.
    """
    granularity = Granularity.parse(granularity)
    visible = [i for i, tick in enumerate(ticks) if tick.visible]
    if granularity is Granularity.YEARS:
        return visible

    key = _MAJOR_KEY.get(granularity)
    if key is None:
        return []
    majors = []
    previous = None
    for index in visible:
        current = key(ticks[index].value)
        if current != previous:
            majors.append(index)
        previous = current
    return majors


def resolve_hierarchical(ticks: list[Tick], granularity: Granularity, tolerance: float = 0) -> list[Tick]:
    """Collision resolution that never merges across a major tick.

    Redundant ticks are hidden first. The remaining ticks are split at the
    major ticks (year changes on a months axis, month changes on a days
    axis, date changes on an hours axis) and each range is resolved on its
    own with its closing tick as anchor, so the first label of a new month
    survives collisions with the days around it.

    Years axes, minutes axes and sequences with fewer than two major ticks
    are resolved in one pass without an anchor.

    Args:
        ticks: Ticks with timestamp values and measured bounding boxes
        granularity: Granularity the labels were formatted at
        tolerance: Extra pixels of clearance required between labels

    Returns:
        The same list, with ``visible`` and ``is_major`` updated
    """
    granularity = Granularity.parse(granularity)
    drop_redundant_ticks(ticks, granularity)

    majors = find_major_ticks(ticks, granularity)
    for index in majors:
        ticks[index].is_major = True

    if granularity is Granularity.YEARS or len(majors) < 2:
        return drop_ticks(ticks, tolerance=tolerance)

    visible = [i for i, tick in enumerate(ticks) if tick.visible]
    bounds = [visible[0]] + majors + [visible[-1]]
    for start, end in zip(bounds, bounds[1:]):
        if end - start:
            drop_ticks(ticks, tolerance=tolerance, start=start, end=end, protect_major=True)

    logger.debug(
        "Resolved %d %s ticks over %d segments, %d visible",
        len(ticks),
        granularity.value,
        len(majors) + 1,
        sum(t.visible for t in ticks),
    )
    return ticks


def drop_overset_ticks(ticks: list[Tick], available_width: float) -> list[Tick]:
    """Hide the last visible tick when the labels run past the axis width."""
    measured = [t for t in ticks if t.visible and t.bbox is not None]
    if not measured:
        return ticks
    if max(t.bbox.right for t in measured) >= available_width:
        measured[-1].hide()
        logger.debug("Hid overset last tick %r", measured[-1].value)
    return ticks
