"""Subdivision of long corner-to-corner jumps.

A galvo can only follow so much displacement per sample. Straight runs
between two corners that are longer than ``max_travel`` get evenly spaced
intermediate samples so the beam does not round them off.
"""

import math

from galvopath.config import OptimizerSettings
from galvopath.domain import Frame, LaserPoint
from galvopath.exceptions import InvalidTravelError


class TravelInterpolator:
    """Inserts intermediate points between distant corner pairs.

    A pair (current, next) qualifies when next is drawn (not blanked), both
    are corners and their distance exceeds ``max_travel``. Such a pair gets
    ``int(distance / max_travel)`` points at ``k / (steps + 1)``.
    """

    def __init__(self, settings: OptimizerSettings) -> None:
        """Initialize interpolator.

        Args:
            settings: Optimizer settings providing ``max_travel``
        """
        self.settings = settings

    def interpolate(self, frame: Frame) -> Frame:
        """Build a frame with long jumps subdivided.

        Args:
            frame: Frame to subdivide (not modified)

        Returns:
            New frame containing every input point in order

        Raises:
            InvalidTravelError: If ``max_travel`` is not positive
        """
        max_travel = self.settings.max_travel
        if math.isnan(max_travel) or max_travel <= 0.0:
            raise InvalidTravelError(max_travel)

        src = frame.points
        points: list[LaserPoint] = []

        for i, point in enumerate(src):
            points.append(point)
            if i + 1 < len(src):
                points.extend(self.between(point, src[i + 1], max_travel))

        return Frame(points)

    def between(
        self,
        current: LaserPoint,
        following: LaserPoint,
        max_travel: float,
    ) -> list[LaserPoint]:
        """Points to insert between two consecutive samples.

        Args:
            current: Sample the scanner leaves
            following: Sample the scanner goes to
            max_travel: Maximum travel per sample

        Returns:
            Evenly spaced intermediate points, empty if the pair does not
            qualify
        """
        if following.is_blanked or not (current.is_corner and following.is_corner):
            return []

        distance = current.distance(following)
        if distance <= max_travel:
            return []

        steps = int(distance / max_travel)
        return [current.point_between(following, k / (steps + 1)) for k in range(1, steps + 1)]
