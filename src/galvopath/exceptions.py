"""Exception hierarchy for Galvopath."""


class GalvopathError(Exception):
    """Base exception for all Galvopath errors."""

    pass


class ConfigurationError(GalvopathError):
    """Errors related to optimizer settings."""

    pass


class InvalidTravelError(ConfigurationError):
    """Maximum travel distance is not a positive distance."""

    def __init__(self, max_travel: float) -> None:
        self.max_travel = max_travel
        super().__init__(f"max_travel must be a positive distance, got {max_travel!r}")


class GeometryError(GalvopathError):
    """Errors in geometric calculations."""

    pass


class InterpolationError(GeometryError):
    """Error interpolating between two points."""

    def __init__(self, message: str) -> None:
        super().__init__(message)


class PipelineError(GalvopathError):
    """Unexpected failure inside an optimization stage."""

    def __init__(self, stage: str, reason: str) -> None:
        self.stage = stage
        self.reason = reason
        super().__init__(f"Optimization stage '{stage}' failed: {reason}")
