"""Utility functions for gridmath.

This module provides utility functions including:

- Logging setup and configuration
"""

from gridmath.utils.logging import configure_logging

__all__ = [
    "configure_logging",
]
