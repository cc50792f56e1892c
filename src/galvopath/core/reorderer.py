"""Shape reordering strategies.

Reordering changes the order in which shapes are drawn to cut down blank
travel between them. Strategies may only permute shapes: the point order
inside a shape and the points themselves stay untouched.
"""

from typing import Protocol, runtime_checkable

from galvopath.domain import Graphic


@runtime_checkable
class ShapeReorderer(Protocol):
    """Strategy interface for the reordering stage."""

    def reorder(self, graphic: Graphic) -> Graphic:
        """Return the graphic with its shapes in drawing order."""
        ...


class IdentityReorderer:
    """Keeps the caller's shape order.

    Default strategy until a travel-minimizing one (nearest neighbor or a
    TSP heuristic over shape endpoints) is plugged in.
    """

    def reorder(self, graphic: Graphic) -> Graphic:
        """Return the graphic unchanged.

        Args:
            graphic: Input drawing

        Returns:
            The same graphic
        """
        return graphic
