"""Tests for domain models to verify they work correctly."""

import math

import pytest

from galvopath.domain import WHITE, Frame, Graphic, LaserPoint, Shape
from galvopath.exceptions import InterpolationError


class TestLaserPoint:
    """Tests for LaserPoint class."""

    def test_point_creation(self) -> None:
        """Test basic point creation with defaults."""
        p = LaserPoint(10.0, 20.0)
        assert p.x == 10.0
        assert p.y == 20.0
        assert p.z == 0.0
        assert p.color == WHITE
        assert not p.is_blanked
        assert not p.is_corner
        assert p.turning_angle == 0.0

    def test_point_immutable(self) -> None:
        """Test that point is immutable."""
        p = LaserPoint(1.0, 2.0)
        with pytest.raises(AttributeError):
            p.x = 3.0  # type: ignore

    def test_distance(self) -> None:
        """Test Euclidean distance."""
        assert LaserPoint(0, 0).distance(LaserPoint(3, 4)) == 5.0
        assert LaserPoint(0, 0, z=0).distance(LaserPoint(0, 0, z=2)) == 2.0

    def test_is_coincident_exact(self) -> None:
        """Test exact coincidence ignores color and flags."""
        a = LaserPoint(1.0, 1.0)
        b = LaserPoint(1.0, 1.0, color=(1.0, 0.0, 0.0), is_blanked=True)
        assert a.is_coincident(b)
        assert not a.is_coincident(LaserPoint(1.0, 1.0 + 1e-9))

    def test_is_coincident_tolerance(self) -> None:
        """Test coincidence within a tolerance."""
        a = LaserPoint(0.0, 0.0)
        assert a.is_coincident(LaserPoint(0.5, 0.0), tolerance=0.5)
        assert not a.is_coincident(LaserPoint(0.6, 0.0), tolerance=0.5)

    def test_point_between(self) -> None:
        """Test interpolation of position and color."""
        a = LaserPoint(0.0, 0.0, color=(0.0, 0.0, 0.0), is_corner=True)
        b = LaserPoint(10.0, 20.0, color=(1.0, 0.5, 0.0), is_corner=True, is_blanked=True)

        mid = a.point_between(b, 0.5)

        assert mid.x == 5.0
        assert mid.y == 10.0
        assert mid.color == (0.5, 0.25, 0.0)
        assert not mid.is_corner
        assert not mid.is_blanked
        assert mid.turning_angle == 0.0

    def test_point_between_out_of_range(self) -> None:
        """Test interpolation parameter is validated."""
        with pytest.raises(InterpolationError):
            LaserPoint(0, 0).point_between(LaserPoint(1, 1), 1.5)

    def test_blanked_copy(self) -> None:
        """Test blanked() returns a copy and leaves the original alone."""
        p = LaserPoint(1.0, 2.0, is_corner=True)
        blank = p.blanked()
        assert blank.is_blanked
        assert blank.is_corner
        assert blank.to_tuple() == p.to_tuple()
        assert not p.is_blanked

    def test_with_turning_angle(self) -> None:
        """Test angle annotation copy."""
        p = LaserPoint(1.0, 2.0)
        q = p.with_turning_angle(math.pi / 2)
        assert q.turning_angle == math.pi / 2
        assert p.turning_angle == 0.0

    def test_to_dict(self) -> None:
        """Test conversion to a plain dictionary."""
        p = LaserPoint(1.0, 2.0, 3.0, (0.1, 0.2, 0.3), True, False, 1.0)
        assert p.to_dict() == {
            "x": 1.0,
            "y": 2.0,
            "z": 3.0,
            "color": [0.1, 0.2, 0.3],
            "blanked": True,
            "corner": False,
            "turning_angle": 1.0,
        }


class TestCollections:
    """Tests for Shape, Graphic and Frame."""

    def test_shape_from_list(self) -> None:
        """Test shape stores points as a tuple."""
        shape = Shape([LaserPoint(0, 0), LaserPoint(1, 0)])
        assert isinstance(shape.points, tuple)
        assert len(shape) == 2
        assert shape.first == LaserPoint(0, 0)
        assert shape.last == LaserPoint(1, 0)

    def test_empty_shape(self) -> None:
        """Test empty shape helpers."""
        shape = Shape()
        assert shape.is_empty()
        assert shape.first is None
        assert shape.last is None

    def test_graphic_accepts_point_lists(self) -> None:
        """Test graphic wraps plain point lists into shapes."""
        graphic = Graphic([[LaserPoint(0, 0)], Shape([LaserPoint(1, 1), LaserPoint(2, 2)])])
        assert len(graphic) == 2
        assert all(isinstance(s, Shape) for s in graphic.shapes)
        assert graphic.point_count == 3
        assert not graphic.is_empty()

    def test_graphic_of_empty_shapes_is_empty(self) -> None:
        """Test a graphic with only empty shapes counts as empty."""
        assert Graphic([Shape(), Shape()]).is_empty()
        assert Graphic().is_empty()

    def test_graphic_equality(self) -> None:
        """Test graphics compare by value."""
        a = Graphic([[LaserPoint(0, 0), LaserPoint(1, 1)]])
        b = Graphic([Shape([LaserPoint(0, 0), LaserPoint(1, 1)])])
        assert a == b

    def test_frame_access(self) -> None:
        """Test frame indexing and counters."""
        frame = Frame([
            LaserPoint(0, 0, is_blanked=True),
            LaserPoint(0, 0, is_corner=True),
            LaserPoint(1, 0),
        ])
        assert len(frame) == 3
        assert frame[1].is_corner
        assert len(frame[1:]) == 2
        assert frame.blank_count == 1
        assert frame.corner_count == 1

    def test_empty_frame(self) -> None:
        """Test default frame is empty."""
        assert len(Frame()) == 0
        assert list(Frame()) == []
