"""Dwell point insertion at blanks and corners.

Every frame sample lasts the same time, so the scanner can only be made to
wait by repeating a sample. Blanks need repeats while the beam driver
switches, and corners need them while the galvos stop and turn.

Rules per point, evaluated in order (``prev``/``next`` are the neighbors in
the input frame; a missing neighbor counts as blanked):

1. Blanked point: ``extra_blank_points_start`` when prev is blanked,
   replaced by ``extra_blank_points_end`` when next is blanked.
2. Corner, angles off: ``extra_corner_points``, replaced by the start count
   when prev is blanked, then by the end count when next is blanked.
3. Corner, angles on: as 2, plus the angle term.
4. Not a corner: the start or end count (end wins) plus the angle term,
   only when a neighbor is blanked; otherwise nothing.

The blank rule and the corner/smooth rules add up. The angle term is
``int((1 - turning_angle / pi) * extra_corner_points_angle_dependent)``.
"""

import math

from galvopath.config import OptimizerSettings
from galvopath.domain import Frame, LaserPoint


class AngleEnhancer:
    """Repeats samples so the scanner dwells at blanks and corners."""

    def __init__(self, settings: OptimizerSettings) -> None:
        """Initialize enhancer.

        Args:
            settings: Optimizer settings providing the ``extra_*`` counts
        """
        self.settings = settings

    def enhance(self, frame: Frame) -> Frame:
        """Insert dwell copies in front of each point.

        Args:
            frame: Flattened frame (not modified)

        Returns:
            New frame at least as long as the input
        """
        counts = self.plan(frame)
        points: list[LaserPoint] = []

        for point, extra in zip(frame.points, counts):
            points.extend([point] * extra)
            points.append(point)

        return Frame(points)

    def plan(self, frame: Frame) -> list[int]:
        """Compute the number of copies inserted before every point.

        Args:
            frame: Flattened frame

        Returns:
            One count per input point
        """
        src = frame.points
        n = len(src)
        counts: list[int] = []

        for i, point in enumerate(src):
            prev_open = i == 0 or src[i - 1].is_blanked
            next_open = i == n - 1 or src[i + 1].is_blanked
            counts.append(
                self._blank_count(point, prev_open, next_open)
                + self._corner_count(point, prev_open, next_open)
            )

        return counts

    def angle_term(self, point: LaserPoint) -> int:
        """Angle dependent extra count for a point.

        Args:
            point: Annotated point

        Returns:
            Non-negative number of extra copies
        """
        factor = 1.0 - point.turning_angle / math.pi
        return max(0, int(factor * self.settings.extra_corner_points_angle_dependent))

    def _blank_count(self, point: LaserPoint, prev_open: bool, next_open: bool) -> int:
        if not point.is_blanked:
            return 0

        count = 0
        if prev_open:
            count = self.settings.extra_blank_points_start
        if next_open:
            count = self.settings.extra_blank_points_end
        return count

    def _corner_count(self, point: LaserPoint, prev_open: bool, next_open: bool) -> int:
        s = self.settings

        if point.is_corner:
            count = s.extra_corner_points
            if prev_open:
                count = s.extra_corner_points_start
            if next_open:
                count = s.extra_corner_points_end
            if s.analyze_corner_angles:
                count += self.angle_term(point)
            return count

        # Smooth point: only stroke ends next to a blank dwell
        if not (prev_open or next_open):
            return 0
        count = s.extra_corner_points_end if next_open else s.extra_corner_points_start
        return count + self.angle_term(point)
