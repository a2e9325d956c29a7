"""Utility functions for textstencil.

This module provides logging setup and generation statistics.
"""

from textstencil.utils.logging import (
    GenerationLogger,
    GenerationStats,
    configure_logging,
    get_logger,
)

__all__ = [
    "GenerationLogger",
    "GenerationStats",
    "configure_logging",
    "get_logger",
]
