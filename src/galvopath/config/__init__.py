"""Configuration management for galvopath.

This module provides configuration management using Pydantic models.
Configuration can be provided via CLI arguments or defaults.

Key classes:
- OptimizerSettings: Blanking, corner dwell and travel settings
- LoggingConfig: Logging settings
- GalvopathSettings: Main application settings
"""

from galvopath.config.settings import (
    GalvopathSettings,
    LoggingConfig,
    OptimizerSettings,
    get_default_settings,
)

__all__ = [
    "GalvopathSettings",
    "LoggingConfig",
    "OptimizerSettings",
    "get_default_settings",
]
