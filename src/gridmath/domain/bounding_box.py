"""Axis-aligned bounding boxes on the grid.

A GridBoundingBox is a pair of independent GridIntervals, one per axis.
Degenerate 1x1 boxes are allowed, empty boxes are not.
"""

from collections.abc import Iterator
from dataclasses import dataclass

from gridmath.domain.directions import Grid4Direction, GridCoordinatePair
from gridmath.domain.interval import GridInterval, IntervalAnchor, Relation
from gridmath.exceptions import InvalidArgumentError

_CENTERED = Relation(IntervalAnchor.CENTER, IntervalAnchor.CENTER)
_END_TO_START = Relation(IntervalAnchor.END, IntervalAnchor.START)
_START_TO_END = Relation(IntervalAnchor.START, IntervalAnchor.END)


def _check_size(width: int, height: int) -> None:
    if width < 1:
        raise InvalidArgumentError("width", f"must be at least 1, got {width}")
    if height < 1:
        raise InvalidArgumentError("height", f"must be at least 1, got {height}")


@dataclass(frozen=True, slots=True)
class GridBoundingBox:
    """A rectangle of grid cells.

    Attributes:
        x_interval: Covered columns
        y_interval: Covered rows
    """

    x_interval: GridInterval
    y_interval: GridInterval

    @classmethod
    def from_min_max(cls, min_x: int, min_y: int, max_x: int, max_y: int) -> "GridBoundingBox":
        """Create a box from inclusive bounds on both axes.

        Raises:
            InvalidArgumentError: If width or height is below 1
        """
        _check_size(max_x - min_x + 1, max_y - min_y + 1)
        return cls(GridInterval(min_x, max_x), GridInterval(min_y, max_y))

    @classmethod
    def from_size(cls, min_x: int, min_y: int, width: int, height: int) -> "GridBoundingBox":
        """Create a box from its top-left cell and size.

        Raises:
            InvalidArgumentError: If width or height is below 1
        """
        _check_size(width, height)
        return cls(GridInterval.from_length(min_x, width), GridInterval.from_length(min_y, height))

    @classmethod
    def from_min_max_excl(
        cls, min_x: int, min_y: int, max_x_excl: int, max_y_excl: int
    ) -> "GridBoundingBox":
        """Create a box from inclusive minimums and exclusive maximums.

        Raises:
            InvalidArgumentError: If width or height is below 1
        """
        _check_size(max_x_excl - min_x, max_y_excl - min_y)
        return cls(
            GridInterval.from_exclusive_max(min_x, max_x_excl),
            GridInterval.from_exclusive_max(min_y, max_y_excl),
        )

    @property
    def min_x(self) -> int:
        return self.x_interval.min

    @property
    def min_y(self) -> int:
        return self.y_interval.min

    @property
    def max_x(self) -> int:
        return self.x_interval.max

    @property
    def max_y(self) -> int:
        return self.y_interval.max

    @property
    def max_x_excl(self) -> int:
        return self.x_interval.max_excl

    @property
    def max_y_excl(self) -> int:
        return self.y_interval.max_excl

    @property
    def width(self) -> int:
        return self.x_interval.length

    @property
    def height(self) -> int:
        return self.y_interval.length

    def contains(self, x: int, y: int) -> bool:
        """Check whether cell ``(x, y)`` lies inside the box."""
        return self.x_interval.contains(x) and self.y_interval.contains(y)

    def overlaps(self, other: "GridBoundingBox") -> bool:
        """Check whether two boxes share at least one cell."""
        return self.x_interval.overlaps(other.x_interval) and self.y_interval.overlaps(
            other.y_interval
        )

    def translate(self, x: int, y: int) -> "GridBoundingBox":
        return GridBoundingBox(self.x_interval.translate(x), self.y_interval.translate(y))

    def iter_coordinates(self) -> Iterator[GridCoordinatePair]:
        """Yield every cell of the box row by row."""
        for y in range(self.min_y, self.max_y_excl):
            for x in range(self.min_x, self.max_x_excl):
                yield GridCoordinatePair(x, y)

    def place_beside(self, other: "GridBoundingBox", side: Grid4Direction) -> "GridBoundingBox":
        """Move this box flush against one side of ``other``.

        The box keeps its size. On the placement axis it touches ``other``
        without a gap; on the cross axis it is centered on ``other``.
        TOP is the side of smaller Y values.

        Args:
            other: Box to place against
            side: Side of ``other`` to place this box on

        Returns:
            Repositioned box

        Raises:
            InvalidArgumentError: If ``side`` is not a Grid4Direction
        """
        if side is Grid4Direction.TOP:
            x = self.x_interval.relate(other.x_interval, _CENTERED)
            y = self.y_interval.relate(other.y_interval, _END_TO_START, -1)
        elif side is Grid4Direction.BOTTOM:
            x = self.x_interval.relate(other.x_interval, _CENTERED)
            y = self.y_interval.relate(other.y_interval, _START_TO_END, 1)
        elif side is Grid4Direction.RIGHT:
            x = self.x_interval.relate(other.x_interval, _START_TO_END, 1)
            y = self.y_interval.relate(other.y_interval, _CENTERED)
        elif side is Grid4Direction.LEFT:
            x = self.x_interval.relate(other.x_interval, _END_TO_START, -1)
            y = self.y_interval.relate(other.y_interval, _CENTERED)
        else:
            raise InvalidArgumentError("side", f"unknown side {side!r}")
        return GridBoundingBox(x, y)
