"""Gridmath - Exact integer geometry for discrete 2D lattices.

Gridmath provides closed integer intervals, axis-aligned bounding boxes built
from them, overlap and center-of-mass queries over collections of boxes, and
rasterization of quadrant-shaped wedges into grid cells.

Example:
    >>> from gridmath import GridInterval
    >>> interval = GridInterval(2, 5)
    >>> interval.length, interval.max_excl, interval.center
    (4, 6, 3)
"""

from gridmath.core import find_center_of_mass, find_overlapping_boxes
from gridmath.domain import (
    Grid4Direction,
    Grid4Rotation,
    Grid8Direction,
    GridAxis,
    GridBoundingBox,
    GridCoordinatePair,
    GridInterval,
    GridPolarCoordinates,
    IntervalAnchor,
    Relation,
    to_grid,
)
from gridmath.shapes import GridQuadrant, GridShape, make_quadrant

__version__ = "0.1.0"
__author__ = "Dimosthenis Kaponis"

__all__ = [
    "Grid4Direction",
    "Grid4Rotation",
    "Grid8Direction",
    "GridAxis",
    "GridBoundingBox",
    "GridCoordinatePair",
    "GridInterval",
    "GridPolarCoordinates",
    "GridQuadrant",
    "GridShape",
    "IntervalAnchor",
    "Relation",
    "__author__",
    "__version__",
    "find_center_of_mass",
    "find_overlapping_boxes",
    "make_quadrant",
    "to_grid",
]
