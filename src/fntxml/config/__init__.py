"""Configuration management for fntxml.

This module provides configuration management using Pydantic models.
Configuration can be provided via CLI arguments or defaults.

Key classes:
- FontFormat: Supported file formats
- FormatConfig: Extensions, output naming and XML layout
- ProcessingConfig: Batch processing settings
- LoggingConfig: Logging settings
- FntXmlSettings: Main application settings
"""

from fntxml.config.settings import (
    FntXmlSettings,
    FontFormat,
    FormatConfig,
    LoggingConfig,
    ProcessingConfig,
    get_default_settings,
)

__all__ = [
    "FntXmlSettings",
    "FontFormat",
    "FormatConfig",
    "LoggingConfig",
    "ProcessingConfig",
    "get_default_settings",
]
