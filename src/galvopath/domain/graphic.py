"""Collections of laser points.

- Shape: One continuous pen stroke
- Graphic: The input drawing, an ordered collection of shapes
- Frame: The flat, device-ready output sequence
"""

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import overload

from galvopath.domain.point import LaserPoint


@dataclass(frozen=True)
class Shape:
    """An ordered sequence of points drawn as one stroke.

    Draw order is significant. A shape may be empty.

    Attributes:
        points: Points in draw order
    """

    points: tuple[LaserPoint, ...] = ()

    def __init__(self, points: Iterable[LaserPoint] = ()) -> None:
        object.__setattr__(self, "points", tuple(points))

    def __len__(self) -> int:
        return len(self.points)

    def __iter__(self) -> Iterator[LaserPoint]:
        return iter(self.points)

    def is_empty(self) -> bool:
        """Check if the shape has no points."""
        return not self.points

    @property
    def first(self) -> LaserPoint | None:
        """First point, or None for an empty shape."""
        return self.points[0] if self.points else None

    @property
    def last(self) -> LaserPoint | None:
        """Last point, or None for an empty shape."""
        return self.points[-1] if self.points else None


@dataclass(frozen=True)
class Graphic:
    """One drawing: shapes in draw order.

    Built by the caller and never mutated by the optimizer; every stage
    returns a new Graphic or Frame.

    Attributes:
        shapes: Shapes in draw order
    """

    shapes: tuple[Shape, ...] = ()

    def __init__(self, shapes: Iterable[Shape | Iterable[LaserPoint]] = ()) -> None:
        object.__setattr__(
            self,
            "shapes",
            tuple(s if isinstance(s, Shape) else Shape(s) for s in shapes),
        )

    def __len__(self) -> int:
        return len(self.shapes)

    def __iter__(self) -> Iterator[Shape]:
        return iter(self.shapes)

    @property
    def point_count(self) -> int:
        """Total number of points over all shapes."""
        return sum(len(shape) for shape in self.shapes)

    def is_empty(self) -> bool:
        """Check if the graphic has no points at all.

        A graphic made only of empty shapes counts as empty.
        """
        return self.point_count == 0


@dataclass(frozen=True)
class Frame:
    """Flat ordered point sequence sent to the scanner.

    Attributes:
        points: Samples in output order
    """

    points: tuple[LaserPoint, ...] = ()

    def __init__(self, points: Iterable[LaserPoint] = ()) -> None:
        object.__setattr__(self, "points", tuple(points))

    def __len__(self) -> int:
        return len(self.points)

    def __iter__(self) -> Iterator[LaserPoint]:
        return iter(self.points)

    @overload
    def __getitem__(self, index: int) -> LaserPoint: ...

    @overload
    def __getitem__(self, index: slice) -> tuple[LaserPoint, ...]: ...

    def __getitem__(self, index: int | slice) -> LaserPoint | tuple[LaserPoint, ...]:
        return self.points[index]

    @property
    def blank_count(self) -> int:
        """Number of blanked samples."""
        return sum(1 for p in self.points if p.is_blanked)

    @property
    def corner_count(self) -> int:
        """Number of samples marked as corners."""
        return sum(1 for p in self.points if p.is_corner)
