"""Configuration management for gridmath.

This module provides configuration management using Pydantic models.
Configuration can be provided via CLI arguments or defaults.

Key classes:
- RenderConfig: Text rendering settings
- LogLevel: Accepted logging level names
- LoggingConfig: Logging settings
- GridMathSettings: Main application settings
"""

from gridmath.config.settings import (
    GridMathSettings,
    LoggingConfig,
    LogLevel,
    RenderConfig,
    get_default_settings,
)

__all__ = [
    "GridMathSettings",
    "LoggingConfig",
    "LogLevel",
    "RenderConfig",
    "get_default_settings",
]
