"""Collection algorithms for gridmath.

This module contains the queries that work on whole sets of values:

- Overlap grouping of intervals on one axis
- Overlap clustering of bounding boxes on both axes
- Length-weighted centers of mass

All functions are stateless and pure; results refer to inputs by index.

Key functions:
- find_overlapping_intervals: Maximal groups of overlapping intervals
- find_overlapping_boxes: Clusters of boxes overlapping on both axes
- find_center_of_mass: Center of mass of a set of boxes
"""

from gridmath.core.boxes import find_center_of_mass, find_overlapping_boxes
from gridmath.core.intervals import find_center_of_mass as find_interval_center_of_mass
from gridmath.core.intervals import find_overlapping_intervals

__all__ = [
    "find_center_of_mass",
    "find_interval_center_of_mass",
    "find_overlapping_boxes",
    "find_overlapping_intervals",
]
