"""Closed integer intervals.

A GridInterval is a closed, finite interval of integers. It can be degenerate
(a single element) but never empty. Besides the ``min``/``max`` pair it
exposes two alternative representations used throughout the computations:

- ``length``: number of elements in the interval
- ``max_excl``: open (exclusive) end of the interval, ``max + 1``

Every transform returns a new interval; instances are immutable and hashable.
"""

from dataclasses import dataclass
from enum import Enum

from gridmath.domain.quantize import to_grid
from gridmath.exceptions import InvalidArgumentError, InvalidOperationError, InvalidRangeError


class IntervalAnchor(Enum):
    """Reference point of an interval used when repositioning it."""

    START = "start"
    CENTER = "center"
    END = "end"


@dataclass(frozen=True, slots=True)
class Relation:
    """Pairing of anchors used by :meth:`GridInterval.relate`.

    Attributes:
        first: Anchor of the interval being moved
        second: Anchor of the reference interval
    """

    first: IntervalAnchor
    second: IntervalAnchor


@dataclass(frozen=True, slots=True)
class GridInterval:
    """A closed, non-empty interval ``[min, max]`` of grid coordinates.

    Attributes:
        min: Smallest element
        max: Largest element

    Raises:
        InvalidRangeError: If ``min > max``
    """

    min: int
    max: int

    def __post_init__(self) -> None:
        if self.min > self.max:
            raise InvalidRangeError(f"min ({self.min}) cannot be greater than max ({self.max})")

    @classmethod
    def from_exclusive_max(cls, min: int, max_excl: int) -> "GridInterval":
        """Create an interval from its minimum and exclusive end.

        Raises:
            InvalidRangeError: If ``max_excl <= min``
        """
        if max_excl <= min:
            raise InvalidRangeError(
                f"max_excl ({max_excl}) is exclusive and must be greater than min ({min})"
            )
        return cls(min, max_excl - 1)

    @classmethod
    def from_length(cls, min: int, length: int) -> "GridInterval":
        """Create an interval from its minimum and number of elements.

        Raises:
            InvalidRangeError: If ``length < 1``
        """
        if length < 1:
            raise InvalidRangeError(f"interval cannot be empty, got length {length}")
        return cls.from_exclusive_max(min, min + length)

    @classmethod
    def from_real(cls, min: float, max_excl: float) -> "GridInterval":
        """Create an interval covering the real span ``[min, max_excl)``.

        Both bounds are quantized with :func:`to_grid` before construction.
        """
        return cls.from_exclusive_max(to_grid(min), to_grid(max_excl))

    @classmethod
    def from_real_length(cls, min: int, length: float) -> "GridInterval":
        """Create an interval from an integer start and a real length."""
        return cls.from_length(min, to_grid(length))

    @property
    def max_excl(self) -> int:
        return self.max + 1

    @property
    def length(self) -> int:
        return self.max_excl - self.min

    @property
    def center(self) -> int:
        return (self.min + self.max) // 2

    def contains(self, value: "int | GridInterval") -> bool:
        """Check whether a coordinate or a whole interval lies inside.

        Args:
            value: Coordinate or interval to test

        Returns:
            True if ``value`` is within ``[min, max_excl)``
        """
        if isinstance(value, GridInterval):
            return self.min <= value.min and self.max_excl >= value.max_excl
        return self.min <= value < self.max_excl

    def __contains__(self, value: "int | GridInterval") -> bool:
        return self.contains(value)

    def overlaps(self, other: "GridInterval") -> bool:
        """Check whether the intervals share at least one element."""
        if self.max_excl <= other.min:
            return False
        return self.min < other.max_excl

    def touches(self, value: "int | GridInterval") -> bool:
        """Check whether a coordinate or interval is adjacent without overlap.

        Args:
            value: Coordinate or interval to test

        Returns:
            True if ``value`` sits directly before ``min`` or at ``max_excl``
        """
        if isinstance(value, GridInterval):
            return self.min == value.max_excl or self.max_excl == value.min
        return value == self.min - 1 or value == self.max_excl

    def is_even(self) -> bool:
        return self.length % 2 == 0

    def split_even(self) -> tuple["GridInterval", "GridInterval"]:
        """Split an even-length interval into two contiguous halves.

        Returns:
            Lower and upper half, each of ``length / 2`` elements

        Raises:
            InvalidOperationError: If the length is odd
        """
        if not self.is_even():
            raise InvalidOperationError(
                "split interval evenly", f"length {self.length} is odd"
            )
        half = self.length // 2
        return (
            GridInterval.from_exclusive_max(self.min, self.min + half),
            GridInterval.from_exclusive_max(self.min + half, self.max_excl),
        )

    def translate(self, delta: int) -> "GridInterval":
        return GridInterval(self.min + delta, self.max + delta)

    def anchor_value(self, anchor: IntervalAnchor) -> int:
        """Coordinate of the given anchor point.

        Raises:
            InvalidArgumentError: If ``anchor`` is not an IntervalAnchor
        """
        if anchor is IntervalAnchor.START:
            return self.min
        if anchor is IntervalAnchor.CENTER:
            return self.center
        if anchor is IntervalAnchor.END:
            return self.max
        raise InvalidArgumentError("anchor", f"unknown anchor {anchor!r}")

    def set_position(
        self, position: int, anchor: IntervalAnchor, offset: int = 0
    ) -> "GridInterval":
        """Move the interval so that its anchor lands at ``position + offset``.

        Length is preserved.

        Args:
            position: Target coordinate for the anchor
            anchor: Which point of the interval to place
            offset: Extra shift added to ``position``

        Returns:
            Repositioned interval

        Raises:
            InvalidArgumentError: If ``anchor`` is not an IntervalAnchor
        """
        if anchor is IntervalAnchor.START:
            start = position + offset
        elif anchor is IntervalAnchor.CENTER:
            start = position - (self.center - self.min) + offset
        elif anchor is IntervalAnchor.END:
            start = position - (self.max - self.min) + offset
        else:
            raise InvalidArgumentError("anchor", f"unknown anchor {anchor!r}")
        return GridInterval.from_length(start, self.length)

    def set_min(self, min: int) -> "GridInterval":
        return GridInterval.from_length(min, self.length)

    def set_max(self, max: int) -> "GridInterval":
        return GridInterval(max - self.length + 1, max)

    def set_max_excl(self, max_excl: int) -> "GridInterval":
        return GridInterval(max_excl - self.length, max_excl - 1)

    def relate(
        self, second: "GridInterval", relation: Relation, offset: int = 0
    ) -> "GridInterval":
        """Place this interval relative to another one.

        The ``relation.first`` anchor of this interval is moved onto the
        ``relation.second`` anchor of ``second``, shifted by ``offset``.

        Example:
            Putting an interval directly after ``second``:

            >>> second = GridInterval(0, 4)
            >>> GridInterval(0, 1).relate(
            ...     second, Relation(IntervalAnchor.START, IntervalAnchor.END), 1
            ... )
            GridInterval(min=5, max=6)
        """
        return self.set_position(second.anchor_value(relation.second), relation.first, offset)

    def multiply(self, factor: float) -> "GridInterval | None":
        """Scale the length, keeping ``min`` in place.

        Args:
            factor: Multiplier of the length

        Returns:
            Interval with the scaled length mapped to the grid, or None if the
            scaled length is below one element
        """
        real_length = factor * self.length
        if real_length < 1.0:
            return None
        return GridInterval.from_real_length(self.min, real_length)

    def distance_to(self, value: "int | GridInterval") -> int:
        """Signed gap between this interval and a coordinate or interval.

        Args:
            value: Coordinate or interval to measure to

        Returns:
            0 if ``value`` is contained, overlapping or touching.
            Positive if ``value`` lies to the right, negative if to the left.
        """
        if isinstance(value, GridInterval):
            if self.overlaps(value) or self.touches(value):
                return 0
            return self.distance_to(value.min if value.min > self.max else value.max)

        if self.contains(value) or self.touches(value):
            return 0
        if value > self.max_excl:
            return value - self.max_excl
        return value - (self.min - 1)

    def depth_at(self, coordinate: int) -> int:
        """Signed shortest push that moves ``coordinate`` out of the interval.

        Returns:
            0 if the coordinate is outside. Otherwise positive when the
            shortest way out is to the right, negative when to the left.
        """
        if not self.contains(coordinate):
            return 0
        to_right = coordinate - (self.min - 1)
        to_left = coordinate - self.max_excl
        return to_right if abs(to_right) <= abs(to_left) else to_left

    def depth_with(self, other: "GridInterval") -> int:
        """Signed shortest translation separating two overlapping intervals.

        Returns:
            0 if the intervals do not overlap. Otherwise positive when the
            shortest separation is to the right, negative when to the left.
        """
        if not self.overlaps(other):
            return 0
        to_right = other.max - (self.min - 1)
        to_left = other.min - self.max_excl
        return to_right if abs(to_right) <= abs(to_left) else to_left
