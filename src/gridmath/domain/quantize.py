"""Mapping of real numbers onto grid coordinates.

A real value ``v`` belongs to the grid cell ``floor(v)``. Plain ``int()``
truncates toward zero and gives the wrong cell for negative values, so every
conversion in the package goes through :func:`to_grid`.
"""

import math


def to_grid(value: float) -> int:
    """Quantize a real number to the grid coordinate containing it.

    Args:
        value: Real coordinate or length

    Returns:
        Largest integer not greater than ``value``

    Examples:
        >>> to_grid(2.7)
        2
        >>> to_grid(-0.5)
        -1
    """
    return math.floor(value)
