"""Geometric operations on laser points.

This module provides the math shared by the pipeline stages:
- Turning angle at a vertex
- Corner classification for upstream drawing code

All functions are pure and stateless.
"""

import math
from collections.abc import Sequence
from dataclasses import replace

from galvopath.domain import LaserPoint


def turning_angle(previous: LaserPoint, current: LaserPoint, following: LaserPoint) -> float:
    """Calculate the turning angle at a vertex.

    The angle between the incoming direction (previous -> current) and the
    outgoing direction (current -> following), measured in 3D so strokes
    that bend only in z turn as well.

    Args:
        previous: Point before the vertex
        current: The vertex
        following: Point after the vertex

    Returns:
        Angle in radians in [0, pi]. 0 means the path continues straight,
        pi means it reverses. Returns 0.0 when either direction has zero
        length.

    Examples:
        >>> turning_angle(LaserPoint(0, 0), LaserPoint(1, 0), LaserPoint(2, 0))
        0.0
        >>> round(turning_angle(LaserPoint(0, 0), LaserPoint(1, 0), LaserPoint(1, 1)), 4)
        1.5708
    """
    ax = current.x - previous.x
    ay = current.y - previous.y
    az = current.z - previous.z
    bx = following.x - current.x
    by = following.y - current.y
    bz = following.z - current.z

    if (ax == 0.0 and ay == 0.0 and az == 0.0) or (bx == 0.0 and by == 0.0 and bz == 0.0):
        return 0.0

    # atan2 of |a x b| and a . b stays exact at 0 and pi, unlike acos
    cross = math.sqrt(
        (ay * bz - az * by) ** 2 + (az * bx - ax * bz) ** 2 + (ax * by - ay * bx) ** 2
    )
    dot = ax * bx + ay * by + az * bz
    return math.atan2(cross, dot)


def classify_corners(
    points: Sequence[LaserPoint],
    threshold: float,
    closed: bool = False,
) -> list[LaserPoint]:
    """Mark points whose turning angle reaches a threshold as corners.

    Helper for code that builds graphics. The optimizer itself never calls
    this; it consumes ``is_corner`` as given.

    Args:
        points: Points of one stroke in draw order
        threshold: Minimum turning angle (radians) for a corner
        closed: Treat the stroke as a loop, so the first and last points
            get real neighbors instead of being endpoints

    Returns:
        New list of points with ``is_corner`` set. Endpoints of an open
        stroke are always corners.
    """
    n = len(points)
    result: list[LaserPoint] = []

    for i, point in enumerate(points):
        if closed and n >= 3:
            angle = turning_angle(points[i - 1], point, points[(i + 1) % n])
            is_corner = angle >= threshold
        elif 0 < i < n - 1:
            angle = turning_angle(points[i - 1], point, points[i + 1])
            is_corner = angle >= threshold
        else:
            is_corner = True

        result.append(replace(point, is_corner=is_corner))

    return result
