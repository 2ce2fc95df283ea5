"""Grid coordinates, compass directions and rotation tables.

This module defines the small value types shared by boxes and shapes:
- GridCoordinatePair: An integer cell position
- Grid4Direction: The four sides of a box
- Grid8Direction: The eight compass directions of a wedge
- Grid4Rotation: Quarter-turn rotations
- GridAxis: Axis selector for flips

Y grows downwards, so TOP is the side of smaller Y values and clockwise
order is TOP, RIGHT, BOTTOM, LEFT.
"""

import math
from dataclasses import dataclass
from enum import Enum

from gridmath.exceptions import InvalidArgumentError


@dataclass(frozen=True, slots=True)
class GridCoordinatePair:
    """An integer position on the grid.

    Attributes:
        x: Column coordinate
        y: Row coordinate
    """

    x: int
    y: int

    def translation(self, x: int, y: int) -> "GridCoordinatePair":
        """Return the coordinate shifted by ``(x, y)``."""
        return GridCoordinatePair(self.x + x, self.y + y)

    def euclidean_distance(self, x: int, y: int) -> float:
        """Euclidean distance from this coordinate to ``(x, y)``."""
        return math.hypot(x - self.x, y - self.y)

    def to_tuple(self) -> tuple[int, int]:
        """Convert to simple (x, y) tuple."""
        return (self.x, self.y)


class Grid4Direction(Enum):
    """Side of a bounding box."""

    TOP = "top"
    RIGHT = "right"
    BOTTOM = "bottom"
    LEFT = "left"


class Grid8Direction(Enum):
    """Compass direction of a wedge."""

    TOP = "top"
    TOP_RIGHT = "top_right"
    RIGHT = "right"
    BOTTOM_RIGHT = "bottom_right"
    BOTTOM = "bottom"
    BOTTOM_LEFT = "bottom_left"
    LEFT = "left"
    TOP_LEFT = "top_left"


class Grid4Rotation(Enum):
    """Clockwise rotation in quarter turns."""

    NONE = 0
    CLOCKWISE_90 = 1
    CLOCKWISE_180 = 2
    CLOCKWISE_270 = 3


class GridAxis(Enum):
    """Axis of a flip."""

    X = "x"
    Y = "y"


_CLOCKWISE_4 = (
    Grid4Direction.TOP,
    Grid4Direction.RIGHT,
    Grid4Direction.BOTTOM,
    Grid4Direction.LEFT,
)

_CLOCKWISE_8 = (
    Grid8Direction.TOP,
    Grid8Direction.TOP_RIGHT,
    Grid8Direction.RIGHT,
    Grid8Direction.BOTTOM_RIGHT,
    Grid8Direction.BOTTOM,
    Grid8Direction.BOTTOM_LEFT,
    Grid8Direction.LEFT,
    Grid8Direction.TOP_LEFT,
)


def rotate_direction(
    direction: Grid4Direction | Grid8Direction, rotation: Grid4Rotation
) -> Grid4Direction | Grid8Direction:
    """Rotate a direction clockwise by a number of quarter turns.

    A quarter turn moves a 4-way direction by one step and an 8-way
    direction by two compass steps.

    Args:
        direction: Direction to rotate
        rotation: Quarter-turn rotation to apply

    Returns:
        Rotated direction of the same kind as ``direction``

    Raises:
        InvalidArgumentError: If either argument is not a known variant
    """
    if not isinstance(rotation, Grid4Rotation):
        raise InvalidArgumentError("rotation", f"unknown rotation {rotation!r}")

    if isinstance(direction, Grid4Direction):
        table: tuple[Grid4Direction, ...] | tuple[Grid8Direction, ...] = _CLOCKWISE_4
        step = 1
    elif isinstance(direction, Grid8Direction):
        table = _CLOCKWISE_8
        step = 2
    else:
        raise InvalidArgumentError("direction", f"unknown direction {direction!r}")

    index = table.index(direction)  # type: ignore[arg-type]
    return table[(index + step * rotation.value) % len(table)]
