"""Queries over collections of intervals on a single axis.

This module provides:
- Overlap grouping via an endpoint sweep
- Length-weighted center of mass

Both functions work on plain sequences and refer to intervals by their index
in the input, so callers can map results back onto boxes or other owners.
"""

import logging
from collections.abc import Sequence

from gridmath.domain import GridInterval
from gridmath.exceptions import InvalidArgumentError

logger = logging.getLogger(__name__)

# Ends sort before starts so that touching intervals never share a group
_END = 0
_START = 1


def find_overlapping_intervals(intervals: Sequence[GridInterval]) -> list[list[int]]:
    """Find the maximal groups of mutually overlapping intervals.

    Endpoints are swept in ascending order. Every interval open at a given
    coordinate overlaps every other open one, so the open set right before
    the first end that follows a start is a maximal group.

    Args:
        intervals: Intervals to group

    Returns:
        Groups of two or more indices into ``intervals``. Indices within a
        group are ascending, groups are ordered by sweep position.

    Examples:
        >>> find_overlapping_intervals([
        ...     GridInterval(0, 2), GridInterval(2, 4), GridInterval(4, 6)
        ... ])
        [[0, 1], [1, 2]]
    """
    events: list[tuple[int, int, int]] = []
    for index, interval in enumerate(intervals):
        events.append((interval.min, _START, index))
        events.append((interval.max_excl, _END, index))
    events.sort()

    groups: list[list[int]] = []
    open_indices: set[int] = set()
    last_was_start = False

    for _, kind, index in events:
        if kind == _START:
            open_indices.add(index)
            last_was_start = True
            continue

        if last_was_start and len(open_indices) > 1:
            groups.append(sorted(open_indices))
        open_indices.discard(index)
        last_was_start = False

    logger.debug(
        "Interval overlap groups: %d intervals, %d groups", len(intervals), len(groups)
    )
    return groups


def find_center_of_mass(intervals: Sequence[GridInterval]) -> int:
    """Length-weighted center of a set of intervals.

    Each interval contributes its midpoint ``(min + max) / 2`` weighted by
    its length. The weighted mean is floored in integer arithmetic, so a
    single interval yields its own ``center`` at any magnitude.

    Args:
        intervals: Intervals to average

    Returns:
        Grid coordinate of the center of mass

    Raises:
        InvalidArgumentError: If ``intervals`` is empty
    """
    if not intervals:
        raise InvalidArgumentError("intervals", "cannot compute center of mass of nothing")

    total_length = 0
    doubled_sum = 0
    for interval in intervals:
        total_length += interval.length
        doubled_sum += (interval.min + interval.max) * interval.length

    return doubled_sum // (2 * total_length)
