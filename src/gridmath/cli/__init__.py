"""Command-line interface for gridmath.

This module provides the CLI using Typer with rich output for
quick inspection of the library's geometry.

Key features:
- Derived values of an interval
- Text rendering of quadrant wedges
- Overlap clusters and center of mass of boxes
"""

from gridmath.cli.app import cli, main

__all__ = ["cli", "main"]
