"""Quadrant-shaped wedges rasterized onto the grid.

A quadrant is the 90-degree sector of a disc around an origin cell, opening
toward one of the eight compass directions. Angles follow the polar
convention of :mod:`gridmath.domain.polar`, measured from +X toward +Y.

Quadrants are immutable. The bounding box and the contained cells are
computed once at construction; translating or rotating builds a new quadrant
and rasterizes it again in ``O(radius**2)``.
"""

import logging
import math
from dataclasses import dataclass, field

from gridmath.domain import (
    Grid4Rotation,
    Grid8Direction,
    GridAxis,
    GridBoundingBox,
    GridCoordinatePair,
    GridPolarCoordinates,
    rotate_direction,
)
from gridmath.exceptions import InvalidArgumentError, UnsupportedOperationError

logger = logging.getLogger(__name__)

# Start and end angle of each sector; RIGHT wraps across zero
SECTORS: dict[Grid8Direction, tuple[float, float]] = {
    Grid8Direction.TOP_RIGHT: (0.0, math.pi * 0.5),
    Grid8Direction.TOP: (math.pi * 0.25, math.pi * 0.75),
    Grid8Direction.TOP_LEFT: (math.pi * 0.5, math.pi),
    Grid8Direction.LEFT: (math.pi * 0.75, math.pi * 1.25),
    Grid8Direction.BOTTOM_LEFT: (math.pi, math.pi * 1.5),
    Grid8Direction.BOTTOM: (math.pi * 1.25, math.pi * 1.75),
    Grid8Direction.BOTTOM_RIGHT: (math.pi * 1.5, math.pi * 2),
    Grid8Direction.RIGHT: (math.pi * 1.75, math.pi * 0.25),
}


def sector_bounds(
    direction: Grid8Direction, radius: int
) -> tuple[GridPolarCoordinates, GridPolarCoordinates]:
    """Boundary rays of the sector opening toward ``direction``.

    Args:
        direction: Compass direction of the wedge
        radius: Length of the boundary rays

    Returns:
        Start and end boundary as polar coordinates

    Raises:
        InvalidArgumentError: If ``direction`` is not a Grid8Direction
    """
    if direction not in SECTORS:
        raise InvalidArgumentError("direction", f"unknown direction {direction!r}")
    start, end = SECTORS[direction]
    return GridPolarCoordinates(start, radius), GridPolarCoordinates(end, radius)


def _in_sector(theta: float, start: float, end: float) -> bool:
    if end > start:
        return not (theta < start or theta > end)
    # Wrapping sector: only the gap between end and start is outside
    return not (theta < start and theta > end)


def rasterize_quadrant(
    origin: GridCoordinatePair, radius: int, direction: Grid8Direction
) -> tuple[GridBoundingBox, tuple[GridCoordinatePair, ...]]:
    """Compute the bounding box and cells of a quadrant.

    A cell of the bounding box belongs to the quadrant when its Euclidean
    distance from ``origin`` is at most ``radius`` and its angle around
    ``origin`` lies within the sector bounds.

    Args:
        origin: Center cell of the disc
        radius: Disc radius in cells
        direction: Compass direction of the wedge

    Returns:
        Tuple of (bounding box, contained cells in row-major order)
    """
    bounding_box = GridBoundingBox.from_min_max(
        origin.x - radius, origin.y - radius, origin.x + radius, origin.y + radius
    )
    start, end = sector_bounds(direction, radius)

    cells: list[GridCoordinatePair] = []
    for cell in bounding_box.iter_coordinates():
        if origin.euclidean_distance(cell.x, cell.y) > radius:
            continue
        polar = GridPolarCoordinates.from_grid_cartesian(cell.x - origin.x, cell.y - origin.y)
        if _in_sector(polar.theta, start.theta, end.theta):
            cells.append(cell)

    logger.debug(
        "Quadrant rasterized: origin=%s radius=%d direction=%s cells=%d",
        origin.to_tuple(), radius, direction.value, len(cells)
    )
    return bounding_box, tuple(cells)


@dataclass(frozen=True, slots=True)
class GridQuadrant:
    """A wedge of cells around an origin.

    Attributes:
        origin: Center cell of the disc
        radius: Disc radius in cells, at least 0
        direction: Compass direction the wedge opens toward
        bounding_box: Square of side ``2 * radius + 1`` centered on origin
        coordinates: Contained cells, row by row
    """

    origin: GridCoordinatePair
    radius: int
    direction: Grid8Direction
    bounding_box: GridBoundingBox = field(init=False, compare=False)
    coordinates: tuple[GridCoordinatePair, ...] = field(init=False, compare=False, repr=False)

    def __post_init__(self) -> None:
        if self.radius < 0:
            raise InvalidArgumentError("radius", f"must not be negative, got {self.radius}")
        bounding_box, coordinates = rasterize_quadrant(self.origin, self.radius, self.direction)
        object.__setattr__(self, "bounding_box", bounding_box)
        object.__setattr__(self, "coordinates", coordinates)

    def contains(self, x: int, y: int) -> bool:
        """Check whether cell ``(x, y)`` belongs to the quadrant."""
        return GridCoordinatePair(x, y) in self.coordinates

    def translate(self, x: int, y: int) -> "GridQuadrant":
        return GridQuadrant(self.origin.translation(x, y), self.radius, self.direction)

    def rotate(self, rotation: Grid4Rotation) -> "GridQuadrant":
        """Return the quadrant turned clockwise by ``rotation`` around its origin."""
        direction = rotate_direction(self.direction, rotation)
        return GridQuadrant(self.origin, self.radius, direction)  # type: ignore[arg-type]

    def flip(self, axis: GridAxis) -> "GridQuadrant":
        raise UnsupportedOperationError("GridQuadrant", f"flip along {axis.name}")


def make_quadrant(
    origin: GridCoordinatePair, radius: int, direction: Grid8Direction
) -> GridQuadrant:
    """Create a quadrant with its cells already rasterized.

    Raises:
        InvalidArgumentError: If ``radius`` is negative or ``direction`` unknown
    """
    return GridQuadrant(origin, radius, direction)
