"""Polar coordinates for integer grid offsets.

Angles are measured in radians from the +X axis toward the +Y axis and are
normalized to ``[0, 2π)`` when derived from cartesian offsets.
"""

import math
from dataclasses import dataclass

from gridmath.domain.directions import GridCoordinatePair
from gridmath.domain.quantize import to_grid
from gridmath.exceptions import InvalidArgumentError

TWO_PI = 2.0 * math.pi


@dataclass(frozen=True, slots=True)
class GridPolarCoordinates:
    """An angle and distance relative to some origin cell.

    Attributes:
        theta: Angle in radians
        radius: Distance from the origin, never negative
    """

    theta: float
    radius: float

    def __post_init__(self) -> None:
        if self.radius < 0:
            raise InvalidArgumentError("radius", f"must not be negative, got {self.radius}")

    @classmethod
    def from_grid_cartesian(cls, x: int, y: int) -> "GridPolarCoordinates":
        """Convert an integer offset ``(x, y)`` to polar form.

        Args:
            x: Horizontal offset from the origin
            y: Vertical offset from the origin

        Returns:
            Polar coordinates with ``theta`` in ``[0, 2π)``. The zero offset
            maps to ``theta = 0``.
        """
        theta = math.atan2(y, x)
        if theta < 0:
            theta += TWO_PI
        return cls(theta, math.hypot(x, y))

    def to_cartesian(self) -> tuple[float, float]:
        """Convert back to a real ``(x, y)`` offset."""
        return (self.radius * math.cos(self.theta), self.radius * math.sin(self.theta))

    def to_grid(self) -> GridCoordinatePair:
        """Grid cell containing the cartesian offset."""
        x, y = self.to_cartesian()
        return GridCoordinatePair(to_grid(x), to_grid(y))
