"""Utility functions for fntxml.

This module provides utility functions including:

- Logging setup and configuration
- Per-file results and run statistics
"""

from fntxml.utils.logging import (
    ConversionLogger,
    ConversionStats,
    FileResult,
    configure_logging,
)

__all__ = [
    "ConversionLogger",
    "ConversionStats",
    "FileResult",
    "configure_logging",
]
