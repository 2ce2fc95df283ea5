"""Queries over collections of bounding boxes.

Both axes of a box are independent intervals, so the box queries are built
by running the single-axis queries on the X and Y projections and combining
the results.
"""

import logging
from collections.abc import Sequence

from gridmath.core import intervals as axis
from gridmath.domain import GridBoundingBox, GridCoordinatePair

logger = logging.getLogger(__name__)


def find_overlapping_boxes(boxes: Sequence[GridBoundingBox]) -> list[list[int]]:
    """Find clusters of boxes that overlap on both axes.

    Overlap groups are computed separately for the X and Y projections.
    Every pair of (X group, Y group) is intersected, and intersections with
    more than one member are emitted. This is not a transitive clustering:
    the same indices may appear in several clusters, and identical clusters
    are emitted once per matching pair of axis groups.

    Args:
        boxes: Boxes to analyze

    Returns:
        Clusters of indices into ``boxes``, each ordered as in its X group.
        X groups form the outer loop, Y groups the inner loop.
    """
    x_groups = axis.find_overlapping_intervals([box.x_interval for box in boxes])
    y_groups = axis.find_overlapping_intervals([box.y_interval for box in boxes])

    clusters: list[list[int]] = []
    for x_group in x_groups:
        for y_group in y_groups:
            common = [index for index in x_group if index in y_group]
            if len(common) > 1:
                clusters.append(common)

    logger.debug(
        "Box overlap clusters: %d boxes, %d x groups, %d y groups, %d clusters",
        len(boxes), len(x_groups), len(y_groups), len(clusters)
    )
    return clusters


def find_center_of_mass(boxes: Sequence[GridBoundingBox]) -> GridCoordinatePair:
    """Center of mass of a set of boxes.

    The X and Y coordinates are the length-weighted centers of the X and Y
    projections, computed independently.

    Raises:
        InvalidArgumentError: If ``boxes`` is empty
    """
    x_center = axis.find_center_of_mass([box.x_interval for box in boxes])
    y_center = axis.find_center_of_mass([box.y_interval for box in boxes])
    return GridCoordinatePair(x_center, y_center)
