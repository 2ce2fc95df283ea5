"""Capability contract shared by grid shapes."""

from typing import Protocol, runtime_checkable

from gridmath.domain import Grid4Rotation, GridAxis, GridBoundingBox, GridCoordinatePair


@runtime_checkable
class GridShape(Protocol):
    """A set of grid cells with a bounding box.

    Shapes are immutable: every transform returns a new shape whose bounding
    box and cells are already materialized.
    """

    @property
    def bounding_box(self) -> GridBoundingBox: ...

    @property
    def coordinates(self) -> tuple[GridCoordinatePair, ...]: ...

    def translate(self, x: int, y: int) -> "GridShape": ...

    def rotate(self, rotation: Grid4Rotation) -> "GridShape": ...

    def flip(self, axis: GridAxis) -> "GridShape": ...
