"""Logging utilities for Galvopath."""

import logging
from dataclasses import dataclass, field
from pathlib import Path

import structlog

# Handlers installed by the latest configure_logging call
_installed_handlers: list[logging.Handler] = []


@dataclass
class OptimizationStats:
    """Statistics from one optimization run."""

    input_shapes: int = 0
    input_points: int = 0
    stage_points: dict[str, int] = field(default_factory=dict)
    dwell_points_added: int = 0
    travel_points_added: int = 0
    start_time: float | None = None
    end_time: float | None = None

    @property
    def output_points(self) -> int:
        """Number of points in the final frame."""
        if not self.stage_points:
            return 0
        return list(self.stage_points.values())[-1]

    @property
    def duration_seconds(self) -> float:
        """Calculate optimization duration."""
        if self.start_time and self.end_time:
            return self.end_time - self.start_time
        return 0.0


def configure_logging(
    log_file: Path | None = None,
    console_level: str = "INFO",
    file_level: str = "DEBUG",
    quiet: bool = False,
) -> structlog.stdlib.BoundLogger:
    """Configure dual-output structured logging.

    Calling it again replaces the handlers installed by the previous call.

    Args:
        log_file: Path to log file (console only if None)
        console_level: Logging level for console output
        file_level: Logging level for file output
        quiet: If True, suppress console output except errors

    Returns:
        Configured structlog logger
    """
    root_logger = logging.getLogger()
    root_logger.setLevel(logging.DEBUG)

    for handler in _installed_handlers:
        root_logger.removeHandler(handler)
        handler.close()
    _installed_handlers.clear()

    if log_file is not None:
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setLevel(getattr(logging, file_level.upper()))
        file_handler.setFormatter(
            logging.Formatter("%(asctime)s | %(levelname)-8s | %(name)s | %(message)s")
        )
        root_logger.addHandler(file_handler)
        _installed_handlers.append(file_handler)

    console_handler = logging.StreamHandler()
    console_handler.setLevel(logging.ERROR if quiet else getattr(logging, console_level.upper()))
    console_handler.setFormatter(logging.Formatter("%(message)s"))
    root_logger.addHandler(console_handler)
    _installed_handlers.append(console_handler)

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.UnicodeDecoder(),
            structlog.processors.JSONRenderer(),
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    logger = structlog.get_logger("galvopath")
    logger.info(
        "Logging initialized",
        log_file=str(log_file) if log_file else None,
        level=console_level,
    )

    return logger


class OptimizationLogger:
    """Logger for tracking pipeline stages and statistics."""

    def __init__(self, logger: structlog.stdlib.BoundLogger) -> None:
        self._logger = logger
        self._stats = OptimizationStats()

    def log_run_start(self, shape_count: int, point_count: int) -> None:
        """Log start of an optimization run and reset statistics."""
        self._stats = OptimizationStats(input_shapes=shape_count, input_points=point_count)
        self._logger.debug("Optimizing graphic", shapes=shape_count, points=point_count)

    def log_stage(self, stage: str, point_count: int) -> None:
        """Log a completed stage with its output size."""
        self._logger.debug("Stage complete", stage=stage, points=point_count)
        self._stats.stage_points[stage] = point_count

    def log_dwell_points(self, added: int) -> None:
        """Log dwell copies inserted at blanks and corners."""
        self._logger.debug("Dwell points inserted", added=added)
        self._stats.dwell_points_added = added

    def log_travel_points(self, added: int) -> None:
        """Log intermediate points inserted on long jumps."""
        self._logger.debug("Travel points inserted", added=added)
        self._stats.travel_points_added = added

    def log_run_complete(self, duration_ms: float) -> None:
        """Log successful optimization run."""
        self._logger.info(
            "Graphic optimized",
            shapes=self._stats.input_shapes,
            input_points=self._stats.input_points,
            output_points=self._stats.output_points,
            duration_ms=round(duration_ms, 2),
        )

    def log_run_error(self, stage: str, error: Exception) -> None:
        """Log a failed optimization run."""
        self._logger.error(
            "Optimization failed",
            stage=stage,
            error=str(error),
            error_type=type(error).__name__,
        )

    @property
    def stats(self) -> OptimizationStats:
        """Get statistics of the current or latest run."""
        return self._stats
