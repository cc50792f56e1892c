"""Utility functions for galvopath.

This module provides utility functions including:

- Logging setup and configuration
- Optimization statistics tracking
"""

from galvopath.utils.logging import (
    OptimizationLogger,
    OptimizationStats,
    configure_logging,
)

__all__ = [
    "OptimizationLogger",
    "OptimizationStats",
    "configure_logging",
]
