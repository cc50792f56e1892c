"""Laser point type.

This module defines the sample type shared by every pipeline stage:
- LaserPoint: A 2D/3D point with color and scanner annotations
"""

import math
from dataclasses import dataclass, replace
from typing import Any

from galvopath.exceptions import InterpolationError

Color = tuple[float, float, float]

WHITE: Color = (1.0, 1.0, 1.0)


@dataclass(frozen=True, slots=True)
class LaserPoint:
    """A single scanner sample.

    Immutable; stages build annotated copies instead of changing points
    they received.

    Attributes:
        x: X coordinate in drawing units
        y: Y coordinate in drawing units
        z: Optional depth coordinate
        color: RGB intensities in [0, 1]
        is_blanked: Beam is off while this sample is output
        is_corner: Sharp direction change that needs galvo settling
        turning_angle: Angle between incoming and outgoing direction, in
            radians. 0 means straight through, pi a full reversal.
    """

    x: float
    y: float
    z: float = 0.0
    color: Color = WHITE
    is_blanked: bool = False
    is_corner: bool = False
    turning_angle: float = 0.0

    def to_tuple(self) -> tuple[float, float]:
        """Convert to simple (x, y) tuple."""
        return (self.x, self.y)

    def distance(self, other: "LaserPoint") -> float:
        """Euclidean distance to another point.

        Args:
            other: Point to measure to

        Returns:
            Distance over x, y and z
        """
        return math.sqrt(
            (other.x - self.x) ** 2 + (other.y - self.y) ** 2 + (other.z - self.z) ** 2
        )

    def is_coincident(self, other: "LaserPoint", tolerance: float = 0.0) -> bool:
        """Check whether two points share a position.

        Only position is compared; color and annotations are ignored.

        Args:
            other: Point to compare with
            tolerance: Maximum distance still considered coincident

        Returns:
            True if the points are at most ``tolerance`` apart
        """
        if tolerance <= 0.0:
            return self.x == other.x and self.y == other.y and self.z == other.z
        return self.distance(other) <= tolerance

    def point_between(self, other: "LaserPoint", t: float) -> "LaserPoint":
        """Interpolate linearly towards another point.

        Position and color are interpolated. The result is a plain drawn
        point: not blanked, not a corner, turning angle 0.

        Args:
            other: Target point (reached at t = 1)
            t: Parametric position in [0, 1]

        Returns:
            New interpolated point

        Raises:
            InterpolationError: If t is outside [0, 1]
        """
        if not 0.0 <= t <= 1.0:
            raise InterpolationError(f"Interpolation parameter must be in [0, 1], got {t}")

        color = tuple(a + (b - a) * t for a, b in zip(self.color, other.color))
        return LaserPoint(
            x=self.x + (other.x - self.x) * t,
            y=self.y + (other.y - self.y) * t,
            z=self.z + (other.z - self.z) * t,
            color=color,  # type: ignore[arg-type]
        )

    def blanked(self) -> "LaserPoint":
        """Copy of this point with the beam switched off."""
        return replace(self, is_blanked=True)

    def with_turning_angle(self, angle: float) -> "LaserPoint":
        """Copy of this point annotated with a turning angle."""
        return replace(self, turning_angle=angle)

    def to_dict(self) -> dict[str, Any]:
        """Convert to a plain dictionary.

        Returns:
            Dictionary with position, color and annotation fields
        """
        return {
            "x": self.x,
            "y": self.y,
            "z": self.z,
            "color": list(self.color),
            "blanked": self.is_blanked,
            "corner": self.is_corner,
            "turning_angle": self.turning_angle,
        }

