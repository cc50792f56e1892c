"""Flattening of a graphic into a single frame.

The flattener concatenates all shapes, brackets every non-empty shape with
a blanked entry and exit point, and annotates each drawn point with its
turning angle. The blanks let the scanner jump between shapes with the
beam off.
"""

from galvopath.core.geometry import turning_angle
from galvopath.domain import Frame, Graphic, LaserPoint


class Flattener:
    """Turns a graphic into one blanked, angle-annotated frame.

    Neighbor rules for the turning angle:
    - The next point of a shape's last point is the first point of the
      following shape, if that shape has points.
    - The previous point carries over from the previous shape, since the
      scanner arrives from there. Blank copies are never used as neighbors.
    - A point missing either neighbor gets a turning angle of 0.

    The entry blank copies the first point as received; the exit blank
    copies the annotated last point, so it keeps that turning angle.
    """

    def flatten(self, graphic: Graphic) -> Frame:
        """Flatten a graphic.

        Args:
            graphic: Input drawing (not modified)

        Returns:
            Frame holding every point plus two blanks per non-empty shape
        """
        shapes = graphic.shapes
        points: list[LaserPoint] = []

        previous: LaserPoint | None = None

        for shape_idx, shape in enumerate(shapes):
            if not shape.points:
                continue

            next_shape = shapes[shape_idx + 1] if shape_idx + 1 < len(shapes) else None

            points.append(shape.points[0].blanked())

            last_idx = len(shape.points) - 1
            for point_idx, point in enumerate(shape.points):
                following: LaserPoint | None
                if point_idx < last_idx:
                    following = shape.points[point_idx + 1]
                elif next_shape is not None and next_shape.points:
                    following = next_shape.points[0]
                else:
                    following = None

                angle = 0.0
                if previous is not None and following is not None:
                    angle = turning_angle(previous, point, following)

                points.append(point.with_turning_angle(angle))
                previous = point

            points.append(points[-1].blanked())

        return Frame(points)
