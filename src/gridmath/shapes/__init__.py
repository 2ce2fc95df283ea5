"""Grid shapes built on top of the domain types.

Key classes:
- GridShape: Capability protocol every shape implements
- GridQuadrant: 90-degree wedge rasterized into cells
"""

from gridmath.shapes.base import GridShape
from gridmath.shapes.quadrant import GridQuadrant, make_quadrant, rasterize_quadrant

__all__ = [
    "GridQuadrant",
    "GridShape",
    "make_quadrant",
    "rasterize_quadrant",
]
