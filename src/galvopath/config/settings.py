"""Configuration settings for Galvopath."""

from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field, field_validator

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class OptimizerSettings(BaseModel):
    """Settings consulted by every stage of one optimization run.

    The optimizer holds a reference to a single instance and reads it during
    ``optimize``. Fields are validated on construction and on assignment, so
    a live instance can be tuned between runs without losing the checks.

    Distances are in drawing units. ``max_travel`` may be ``math.inf`` to
    disable travel interpolation.
    """

    model_config = ConfigDict(validate_assignment=True)

    reorder_frame: bool = Field(
        default=False,
        description="Run the shape reordering stage",
    )
    analyze_corner_angles: bool = Field(
        default=True,
        description="Scale corner dwell points by the turning angle",
    )
    extra_blank_points_start: int = Field(
        default=3,
        ge=0,
        description="Extra samples at the start of a blank run",
    )
    extra_blank_points_end: int = Field(
        default=3,
        ge=0,
        description="Extra samples at the end of a blank run",
    )
    extra_corner_points: int = Field(
        default=2,
        ge=0,
        description="Extra samples at a corner inside a stroke",
    )
    extra_corner_points_start: int = Field(
        default=3,
        ge=0,
        description="Extra samples at the first drawn point after a blank",
    )
    extra_corner_points_end: int = Field(
        default=3,
        ge=0,
        description="Extra samples at the last drawn point before a blank",
    )
    extra_corner_points_angle_dependent: int = Field(
        default=4,
        ge=0,
        description="Scale of the angle dependent extra samples",
    )
    max_travel: float = Field(
        default=10.0,
        gt=0.0,
        description="Maximum distance between two samples on a corner-to-corner jump",
    )
    coincidence_tolerance: float = Field(
        default=1e-6,
        ge=0.0,
        description="Distance under which consecutive points count as duplicates",
    )


class LoggingConfig(BaseModel):
    """Logging configuration."""

    log_file: Path | None = Field(
        default=None,
        description="Path to log file (no file logging when unset)",
    )
    log_level: str = Field(
        default="WARNING",
        description="Console log level",
    )
    file_log_level: str = Field(
        default="DEBUG",
        description="File log level (more verbose)",
    )

    @field_validator("log_level", "file_log_level")
    @classmethod
    def check_level(cls, value: str) -> str:
        """Normalize a level name and reject unknown ones."""
        level = value.upper()
        if level not in LOG_LEVELS:
            expected = ", ".join(LOG_LEVELS)
            raise ValueError(f"unknown log level '{value}', expected one of {expected}")
        return level


class GalvopathSettings(BaseModel):
    """Main application settings."""

    optimizer: OptimizerSettings = Field(default_factory=OptimizerSettings)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)


def get_default_settings() -> GalvopathSettings:
    """Get default application settings."""
    return GalvopathSettings()
