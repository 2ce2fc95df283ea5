"""Domain models for gridmath.

This module contains the value types of the library. All models are:

- Immutable (frozen dataclasses with slots)
- Compared structurally, so equal bounds mean equal values
- Free of any rendering or logging concerns

Key classes:
- GridInterval: A closed, non-empty integer interval
- GridBoundingBox: A pair of intervals forming a rectangle
- GridCoordinatePair: An integer cell position
- GridPolarCoordinates: Angle and radius of an offset
"""

from gridmath.domain.bounding_box import GridBoundingBox
from gridmath.domain.directions import (
    Grid4Direction,
    Grid4Rotation,
    Grid8Direction,
    GridAxis,
    GridCoordinatePair,
    rotate_direction,
)
from gridmath.domain.interval import GridInterval, IntervalAnchor, Relation
from gridmath.domain.polar import GridPolarCoordinates
from gridmath.domain.quantize import to_grid

__all__: list[str] = [
    # Enums
    "Grid4Direction",
    "Grid4Rotation",
    "Grid8Direction",
    "GridAxis",
    "IntervalAnchor",
    # Core types
    "GridBoundingBox",
    "GridCoordinatePair",
    "GridInterval",
    "GridPolarCoordinates",
    "Relation",
    # Functions
    "rotate_direction",
    "to_grid",
]
