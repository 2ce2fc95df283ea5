"""Configuration settings for Gridmath."""

from enum import Enum
from pathlib import Path

from pydantic import BaseModel, Field


class LogLevel(str, Enum):
    """Standard logging level names accepted by the handlers."""

    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"


class RenderConfig(BaseModel):
    """Characters used when drawing cell sets as text."""

    filled_char: str = Field(
        default="#",
        min_length=1,
        max_length=1,
        description="Character for cells that belong to the shape",
    )
    empty_char: str = Field(
        default=".",
        min_length=1,
        max_length=1,
        description="Character for cells outside the shape",
    )
    origin_char: str = Field(
        default="@",
        min_length=1,
        max_length=1,
        description="Character marking the shape origin",
    )


class LoggingConfig(BaseModel):
    """Logging configuration."""

    log_file: Path | None = Field(
        default=None,
        description="Path to log file",
    )
    log_level: LogLevel = Field(
        default=LogLevel.WARNING,
        description="Console log level",
    )
    file_log_level: LogLevel = Field(
        default=LogLevel.DEBUG,
        description="File log level (more verbose)",
    )


class GridMathSettings(BaseModel):
    """Main application settings."""

    render: RenderConfig = Field(default_factory=RenderConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)


def get_default_settings() -> GridMathSettings:
    """Get default application settings."""
    return GridMathSettings()
