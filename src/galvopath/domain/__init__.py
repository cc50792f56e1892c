"""Domain models for galvopath.

This module contains the value types passed between pipeline stages.
All models are designed to be:

- Immutable (frozen dataclasses holding tuples)
- Plain values with no lifecycle beyond normal scope exit

Key classes:
- LaserPoint: A scanner sample with blanking and corner annotations
- Shape: One continuous stroke
- Graphic: The input drawing
- Frame: The optimized output sequence
"""

from galvopath.domain.graphic import Frame, Graphic, Shape
from galvopath.domain.point import WHITE, Color, LaserPoint

__all__: list[str] = [
    "WHITE",
    "Color",
    # Core types
    "LaserPoint",
    "Shape",
    "Graphic",
    "Frame",
]
