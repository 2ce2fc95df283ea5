"""Tests for domain models to verify they work correctly."""

import math
from dataclasses import FrozenInstanceError

import pytest

from gridmath.domain import (
    GridBoundingBox,
    GridCoordinatePair,
    GridInterval,
    GridPolarCoordinates,
    IntervalAnchor,
    Relation,
    to_grid,
)
from gridmath.exceptions import GridMathError, InvalidArgumentError, InvalidRangeError


class TestQuantize:
    """Tests for the real-to-grid mapping."""

    @pytest.mark.parametrize(
        ("value", "expected"),
        [
            (0.0, 0),
            (2.7, 2),
            (3.0, 3),
            (-0.5, -1),
            (-0.0001, -1),
            (-2.0, -2),
            (-2.7, -3),
        ],
    )
    def test_to_grid_floors(self, value: float, expected: int) -> None:
        """Values map to the cell containing them, including negatives."""
        assert to_grid(value) == expected

    def test_to_grid_differs_from_truncation(self) -> None:
        """Negative fractions must not be truncated toward zero."""
        assert int(-0.5) == 0
        assert to_grid(-0.5) == -1


class TestGridCoordinatePair:
    """Tests for GridCoordinatePair class."""

    def test_creation(self) -> None:
        """Test basic coordinate creation."""
        c = GridCoordinatePair(3, -4)
        assert c.x == 3
        assert c.y == -4
        assert c.to_tuple() == (3, -4)

    def test_translation(self) -> None:
        """Translation returns a shifted copy."""
        c = GridCoordinatePair(1, 1)
        assert c.translation(2, -3) == GridCoordinatePair(3, -2)
        assert c == GridCoordinatePair(1, 1)

    def test_euclidean_distance(self) -> None:
        """Distance uses the Euclidean norm."""
        assert GridCoordinatePair(0, 0).euclidean_distance(3, 4) == 5.0
        assert GridCoordinatePair(1, 1).euclidean_distance(1, 1) == 0.0

    def test_immutable(self) -> None:
        """Test that coordinates are immutable."""
        c = GridCoordinatePair(0, 0)
        with pytest.raises(FrozenInstanceError):
            c.x = 3  # type: ignore


class TestGridIntervalValue:
    """Value semantics of GridInterval."""

    def test_example_derived_values(self) -> None:
        """Interval(2, 5) has length 4, exclusive max 6 and center 3."""
        interval = GridInterval(2, 5)
        assert interval.length == 4
        assert interval.max_excl == 6
        assert interval.center == 3

    def test_degenerate_interval(self) -> None:
        """A single element interval is valid."""
        interval = GridInterval(7, 7)
        assert interval.length == 1
        assert interval.center == 7

    def test_negative_center_floors(self) -> None:
        """Center of [-4, -3] is floor(-3.5)."""
        assert GridInterval(-4, -3).center == -4

    def test_empty_interval_rejected(self) -> None:
        """min greater than max raises InvalidRangeError."""
        with pytest.raises(InvalidRangeError):
            GridInterval(5, 4)

    def test_errors_share_base_classes(self) -> None:
        """Range errors are both library errors and ValueErrors."""
        with pytest.raises(GridMathError):
            GridInterval(1, 0)
        with pytest.raises(ValueError):
            GridInterval(1, 0)

    @pytest.mark.parametrize(("lo", "hi"), [(0, 0), (-3, 2), (10, 25), (-9, -9)])
    def test_length_formula(self, lo: int, hi: int) -> None:
        """Length is max - min + 1 and at least 1."""
        interval = GridInterval(lo, hi)
        assert interval.length == hi - lo + 1
        assert interval.length >= 1

    def test_structural_equality_and_hash(self) -> None:
        """Equal bounds mean equal, interchangeable values."""
        assert GridInterval(1, 3) == GridInterval.from_length(1, 3)
        assert len({GridInterval(1, 3), GridInterval.from_exclusive_max(1, 4)}) == 1

    def test_immutable(self) -> None:
        """Intervals cannot be modified in place."""
        interval = GridInterval(0, 1)
        with pytest.raises(FrozenInstanceError):
            interval.min = 5  # type: ignore

    def test_relation_holds_anchors(self) -> None:
        """Relation pairs the moved anchor with the reference anchor."""
        relation = Relation(IntervalAnchor.END, IntervalAnchor.START)
        assert relation.first is IntervalAnchor.END
        assert relation.second is IntervalAnchor.START


class TestGridBoundingBoxValue:
    """Value semantics of GridBoundingBox."""

    def test_factories_agree(self) -> None:
        """All factories describe the same box for equivalent input."""
        by_size = GridBoundingBox.from_size(1, 2, 3, 4)
        by_max = GridBoundingBox.from_min_max(1, 2, 3, 5)
        by_excl = GridBoundingBox.from_min_max_excl(1, 2, 4, 6)
        assert by_size == by_max == by_excl

    def test_degenerate_box(self) -> None:
        """A 1x1 box is valid."""
        box = GridBoundingBox.from_size(0, 0, 1, 1)
        assert box.width == 1
        assert box.height == 1


class TestGridPolarCoordinates:
    """Tests for GridPolarCoordinates class."""

    @pytest.mark.parametrize(
        ("x", "y", "theta"),
        [
            (1, 0, 0.0),
            (0, 1, math.pi / 2),
            (-1, 0, math.pi),
            (0, -1, 3 * math.pi / 2),
            (1, -1, 7 * math.pi / 4),
        ],
    )
    def test_from_grid_cartesian_angle(self, x: int, y: int, theta: float) -> None:
        """Angles are normalized into [0, 2π)."""
        polar = GridPolarCoordinates.from_grid_cartesian(x, y)
        assert polar.theta == pytest.approx(theta)
        assert 0.0 <= polar.theta < 2 * math.pi

    def test_from_grid_cartesian_radius(self) -> None:
        """Radius is the Euclidean length of the offset."""
        assert GridPolarCoordinates.from_grid_cartesian(3, 4).radius == 5.0

    def test_zero_offset(self) -> None:
        """The zero offset has angle 0 and radius 0."""
        polar = GridPolarCoordinates.from_grid_cartesian(0, 0)
        assert polar.theta == 0.0
        assert polar.radius == 0.0

    def test_direct_constructor_accepts_full_turn(self) -> None:
        """Sector boundaries may use exactly 2π."""
        polar = GridPolarCoordinates(2 * math.pi, 3)
        assert polar.theta == 2 * math.pi

    def test_negative_radius_rejected(self) -> None:
        """Radius must not be negative."""
        with pytest.raises(InvalidArgumentError):
            GridPolarCoordinates(0.0, -1)

    def test_to_cartesian_and_grid(self) -> None:
        """Polar values convert back to real and grid offsets."""
        polar = GridPolarCoordinates(0.0, 2)
        assert polar.to_cartesian() == (2.0, 0.0)
        assert polar.to_grid() == GridCoordinatePair(2, 0)
        assert GridPolarCoordinates(math.pi, 2).to_grid() == GridCoordinatePair(-2, 0)
