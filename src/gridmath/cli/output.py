"""Rich console output helpers for the CLI.

This module provides user-friendly console output using Rich library
with tables, text grids, and formatted messages.
"""

from collections.abc import Iterable

from rich.console import Console
from rich.table import Table
from rich.text import Text

from gridmath.config import RenderConfig
from gridmath.domain import GridBoundingBox, GridCoordinatePair, GridInterval

console = Console()

# Unicode symbols for consistent visual language
SYM_STEP = "▸"  # Step indicator
SYM_ERR = "✗"  # Error
SYM_DOT = "·"  # Separator/secondary info


def print_header(version: str) -> None:
    """Print application header.

    Args:
        version: Application version string
    """
    console.print(f"\n[bold]Gridmath[/bold] v{version}")
    console.print("─" * 44)


def print_step(message: str) -> None:
    """Print a processing step indicator."""
    console.print(f"\n{SYM_STEP} {message}")


def print_interval_info(interval: GridInterval) -> None:
    """Print the derived values of an interval as a table.

    Args:
        interval: Interval to describe
    """
    table = Table(show_header=False, box=None, padding=(0, 2))
    table.add_column("property", style="bold")
    table.add_column("value", justify="right")
    table.add_row("min", str(interval.min))
    table.add_row("max", str(interval.max))
    table.add_row("max_excl", str(interval.max_excl))
    table.add_row("length", str(interval.length))
    table.add_row("center", str(interval.center))
    table.add_row("even", "yes" if interval.is_even() else "no")
    console.print(table)


def render_cells(
    bounding_box: GridBoundingBox,
    cells: Iterable[GridCoordinatePair],
    origin: GridCoordinatePair | None = None,
    config: RenderConfig | None = None,
) -> list[str]:
    """Draw a set of cells inside a bounding box as lines of text.

    Rows run from ``min_y`` to ``max_y``, one character per cell.

    Args:
        bounding_box: Area to draw
        cells: Cells to mark as filled
        origin: Optional cell to mark with the origin character
        config: Characters to use (defaults if None)

    Returns:
        One string per row
    """
    config = config or RenderConfig()
    filled = set(cells)
    lines = []
    for y in range(bounding_box.min_y, bounding_box.max_y_excl):
        row = []
        for x in range(bounding_box.min_x, bounding_box.max_x_excl):
            cell = GridCoordinatePair(x, y)
            if origin is not None and cell == origin:
                row.append(config.origin_char)
            elif cell in filled:
                row.append(config.filled_char)
            else:
                row.append(config.empty_char)
        lines.append("".join(row))
    return lines


def print_cells(lines: list[str], cell_count: int) -> None:
    """Print a rendered cell grid with its cell count."""
    for line in lines:
        console.print(Text(f"  {line}"))
    console.print(f"\n  [green]{cell_count}[/green] cells")


def print_overlap_groups(groups: list[list[int]], center: GridCoordinatePair) -> None:
    """Print overlap clusters and the center of mass.

    Args:
        groups: Clusters of box indices
        center: Center of mass of all boxes
    """
    if not groups:
        console.print("  No overlapping boxes")
    for number, group in enumerate(groups, start=1):
        members = ", ".join(str(index) for index in group)
        console.print(f"  cluster {number} {SYM_DOT} boxes {members}")
    console.print(f"\n  center of mass {SYM_DOT} ({center.x}, {center.y})")


def print_error(message: str, details: str | None = None) -> None:
    """Print error message.

    Args:
        message: Main error message
        details: Optional detailed error information
    """
    console.print(f"\n[bold red]{SYM_ERR} Error:[/bold red] {message}")
    if details:
        console.print(f"  {details}")
