"""Pipeline orchestration for frame optimization.

This module runs the five optimization stages in order, each consuming the
complete output of the previous one:

1. Deduplicate consecutive coincident points
2. Reorder shapes (only when ``reorder_frame`` is set)
3. Flatten shapes into one frame with entry/exit blanks
4. Insert dwell points at blanks and corners
5. Subdivide long corner-to-corner jumps
"""

import time
from collections.abc import Callable
from typing import TypeVar

import structlog

from galvopath.config import OptimizerSettings
from galvopath.core.deduplicator import Deduplicator
from galvopath.core.enhancer import AngleEnhancer
from galvopath.core.flattener import Flattener
from galvopath.core.interpolator import TravelInterpolator
from galvopath.core.reorderer import IdentityReorderer, ShapeReorderer
from galvopath.domain import Frame, Graphic
from galvopath.exceptions import GalvopathError, PipelineError
from galvopath.utils import OptimizationLogger, OptimizationStats

_T = TypeVar("_T")
_R = TypeVar("_R", Graphic, Frame)


class Optimizer:
    """Converts a graphic into a frame suited for a laser scanner.

    Each frame sample is one fixed time slice. The optimizer keeps the
    latest result until the next ``optimize`` call.

    Not thread safe: concurrent ``optimize`` calls on one instance must be
    serialized by the caller. Settings may be changed or replaced between
    runs, never during one.

    Example:
        optimizer = Optimizer()
        optimizer.settings().max_travel = 30.0
        optimizer.optimize(graphic)
        frame = optimizer.optimized_frame()
    """

    def __init__(
        self,
        settings: OptimizerSettings | None = None,
        reorderer: ShapeReorderer | None = None,
    ) -> None:
        """Initialize optimizer.

        Args:
            settings: Settings to use (defaults if None)
            reorderer: Shape ordering strategy (identity if None)
        """
        self._settings = settings if settings is not None else OptimizerSettings()
        self.reorderer: ShapeReorderer = reorderer if reorderer is not None else IdentityReorderer()
        self._optimized_frame = Frame()
        self._graphic: Graphic | None = None
        self.logger = structlog.get_logger("galvopath")
        self.optimization_logger = OptimizationLogger(self.logger)

    def optimize(self, graphic: Graphic) -> None:
        """Run the full pipeline on a graphic.

        The result replaces any previous one and is available through
        ``optimized_frame``. The graphic itself is not modified.

        Args:
            graphic: Drawing to optimize

        Raises:
            ConfigurationError: If the settings cannot be applied
            PipelineError: If a stage fails unexpectedly
        """
        start_time = time.time()
        self._optimized_frame = Frame()
        self._graphic = None

        settings = self._settings
        tracker = self.optimization_logger
        tracker.log_run_start(len(graphic), graphic.point_count)
        tracker.stats.start_time = start_time

        deduplicator = Deduplicator(settings)
        flattener = Flattener()
        enhancer = AngleEnhancer(settings)
        interpolator = TravelInterpolator(settings)

        cleaned = self._run_stage("deduplicate", deduplicator.deduplicate, graphic)
        if settings.reorder_frame:
            cleaned = self._run_stage("reorder", self.reorderer.reorder, cleaned)
        self._graphic = cleaned

        flat = self._run_stage("flatten", flattener.flatten, cleaned)
        enhanced = self._run_stage("enhance", enhancer.enhance, flat)
        tracker.log_dwell_points(len(enhanced) - len(flat))
        final = self._run_stage("interpolate", interpolator.interpolate, enhanced)
        tracker.log_travel_points(len(final) - len(enhanced))

        self._optimized_frame = final

        tracker.stats.end_time = time.time()
        tracker.log_run_complete((tracker.stats.end_time - start_time) * 1000)

    def _run_stage(self, name: str, stage: Callable[[_T], _R], value: _T) -> _R:
        """Run one stage, logging its output size.

        Galvopath errors (configuration included) propagate unchanged; anything else
        is wrapped in a PipelineError naming the stage.
        """
        try:
            result = stage(value)
        except GalvopathError as e:
            self.optimization_logger.log_run_error(name, e)
            raise
        except Exception as e:
            self.optimization_logger.log_run_error(name, e)
            raise PipelineError(name, str(e)) from e

        size = result.point_count if isinstance(result, Graphic) else len(result)
        self.optimization_logger.log_stage(name, size)
        return result

    def optimized_frame(self) -> Frame:
        """Return the frame suited for display on a laser system.

        Returns:
            Result of the latest ``optimize`` call, empty before the first
        """
        return self._optimized_frame

    def settings(self) -> OptimizerSettings:
        """Return the live settings object used by ``optimize``."""
        return self._settings

    def set_settings_ref(self, settings: OptimizerSettings) -> None:
        """Replace the settings used by subsequent runs.

        Args:
            settings: New settings object (kept by reference)
        """
        self._settings = settings

    @property
    def last_graphic(self) -> Graphic | None:
        """Deduplicated (and reordered) graphic of the latest run."""
        return self._graphic

    @property
    def last_stats(self) -> OptimizationStats:
        """Statistics of the latest run."""
        return self.optimization_logger.stats
