"""Core optimization pipeline for galvopath.

This module contains the pipeline stages and their orchestration:

- Deduplication of consecutive coincident points
- Pluggable shape reordering (identity by default)
- Flattening with entry/exit blanks and turning angles
- Dwell point insertion at blanks and corners
- Interpolation of long corner-to-corner jumps

All stages are:
- Pure (they return new collections and never modify their input)
- Synchronous and single threaded

Key functions:
- turning_angle: Angle between incoming and outgoing direction at a vertex
- classify_corners: Mark corners on a stroke for upstream drawing code

Key classes:
- Optimizer: Runs the full pipeline
- Deduplicator, Flattener, AngleEnhancer, TravelInterpolator: The stages
- ShapeReorderer, IdentityReorderer: Reordering strategy and its default
"""

from galvopath.core.deduplicator import Deduplicator
from galvopath.core.enhancer import AngleEnhancer
from galvopath.core.flattener import Flattener
from galvopath.core.geometry import classify_corners, turning_angle
from galvopath.core.interpolator import TravelInterpolator
from galvopath.core.optimizer import Optimizer
from galvopath.core.reorderer import IdentityReorderer, ShapeReorderer

__all__ = [
    # Stages
    "AngleEnhancer",
    "Deduplicator",
    "Flattener",
    "IdentityReorderer",
    # Orchestration
    "Optimizer",
    "ShapeReorderer",
    "TravelInterpolator",
    # Geometry functions
    "classify_corners",
    "turning_angle",
]
