"""Removal of consecutive coincident points.

Drawing code often emits the same vertex twice (closing a path, joining
segments). A repeated sample would make the scanner dwell on that spot
and burn a bright dot, so duplicates are dropped before flattening.
"""

from galvopath.config import OptimizerSettings
from galvopath.domain import Graphic, LaserPoint, Shape


class Deduplicator:
    """Drops points coincident with the previous retained point of a shape.

    Shape order and count are preserved, empty shapes pass through and no
    point is compared across shapes. Running the deduplicator twice gives
    the same result as running it once.
    """

    def __init__(self, settings: OptimizerSettings) -> None:
        """Initialize deduplicator.

        Args:
            settings: Optimizer settings providing ``coincidence_tolerance``
        """
        self.settings = settings

    def deduplicate(self, graphic: Graphic) -> Graphic:
        """Build a new graphic without consecutive duplicates.

        Args:
            graphic: Input drawing (not modified)

        Returns:
            New graphic with the same number of shapes
        """
        return Graphic(self.deduplicate_shape(shape) for shape in graphic.shapes)

    def deduplicate_shape(self, shape: Shape) -> Shape:
        """Deduplicate a single shape.

        Args:
            shape: Shape to clean

        Returns:
            New shape; the first point is always kept
        """
        tolerance = self.settings.coincidence_tolerance
        kept: list[LaserPoint] = []

        for point in shape.points:
            if kept and point.is_coincident(kept[-1], tolerance):
                continue
            kept.append(point)

        return Shape(kept)
