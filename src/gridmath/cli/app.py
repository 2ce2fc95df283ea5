"""CLI application entry point for gridmath.

This module provides the inspection CLI using Typer.
"""

from pathlib import Path
from typing import Annotated

import typer

from gridmath import __version__
from gridmath.cli.output import (
    console,
    print_cells,
    print_error,
    print_header,
    print_interval_info,
    print_overlap_groups,
    print_step,
    render_cells,
)
from gridmath.config import GridMathSettings, LoggingConfig, LogLevel
from gridmath.core import find_center_of_mass, find_overlapping_boxes
from gridmath.domain import Grid8Direction, GridBoundingBox, GridCoordinatePair, GridInterval
from gridmath.exceptions import GridMathError, InvalidArgumentError
from gridmath.shapes import make_quadrant
from gridmath.utils import configure_logging

# Create the Typer app
app = typer.Typer(
    name="gridmath",
    help="Inspect integer grid geometry: intervals, box overlaps and quadrant wedges.",
    add_completion=False,
    no_args_is_help=True,
)


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        console.print(f"[bold blue]Gridmath[/bold blue] v{__version__}")
        raise typer.Exit()


@app.callback()
def main_options(
    ctx: typer.Context,
    log_file: Annotated[
        Path | None,
        typer.Option(
            "--log-file",
            help="Write detailed logs to file",
        ),
    ] = None,
    log_level: Annotated[
        LogLevel,
        typer.Option(
            "--log-level",
            help="Console logging level",
            case_sensitive=False,
        ),
    ] = LogLevel.WARNING,
    _version: Annotated[  # noqa: ARG001
        bool | None,
        typer.Option(
            "--version",
            "-V",
            help="Show version and exit",
            callback=version_callback,
            is_eager=True,
        ),
    ] = None,
) -> None:
    """Configure logging shared by all commands."""
    settings = GridMathSettings(logging=LoggingConfig(log_file=log_file, log_level=log_level))
    configure_logging(
        log_file=settings.logging.log_file,
        console_level=settings.logging.log_level.value,
        file_level=settings.logging.file_log_level.value,
    )
    ctx.obj = settings


@app.command()
def interval(
    minimum: Annotated[int, typer.Argument(help="Smallest element")],
    maximum: Annotated[int, typer.Argument(help="Largest element")],
) -> None:
    """Show the derived values of the interval [MINIMUM, MAXIMUM]."""
    try:
        value = GridInterval(minimum, maximum)
    except GridMathError as e:
        print_error(str(e))
        raise typer.Exit(code=1)

    print_header(__version__)
    print_step(f"Interval [{value.min}, {value.max}]")
    print_interval_info(value)


@app.command()
def quadrant(
    ctx: typer.Context,
    radius: Annotated[
        int,
        typer.Option("--radius", "-r", help="Wedge radius in cells", min=0),
    ] = 3,
    direction: Annotated[
        str,
        typer.Option(
            "--direction",
            "-d",
            help="Compass direction (top|top_right|right|bottom_right|bottom|bottom_left|left|top_left)",
        ),
    ] = "top",
    x: Annotated[int, typer.Option("--x", help="Origin column")] = 0,
    y: Annotated[int, typer.Option("--y", help="Origin row")] = 0,
) -> None:
    """Rasterize a quadrant wedge and draw its cells."""
    try:
        compass = Grid8Direction(direction.lower())
    except ValueError:
        print_error(
            f"Invalid direction: {direction}",
            details="Valid values: " + ", ".join(d.value for d in Grid8Direction),
        )
        raise typer.Exit(code=1)

    origin = GridCoordinatePair(x, y)
    try:
        shape = make_quadrant(origin, radius, compass)
    except GridMathError as e:
        print_error(str(e))
        raise typer.Exit(code=1)

    print_header(__version__)
    print_step(f"Quadrant {compass.value} at ({x}, {y}), radius {radius}")
    lines = render_cells(shape.bounding_box, shape.coordinates, origin, ctx.obj.render)
    print_cells(lines, len(shape.coordinates))


@app.command()
def overlaps(
    boxes: Annotated[
        list[str],
        typer.Argument(
            help="Boxes as min_x,min_y,max_x_excl,max_y_excl",
            show_default=False,
        ),
    ],
) -> None:
    """Find clusters of overlapping boxes and their center of mass."""
    try:
        parsed = [parse_box(text) for text in boxes]
        groups = find_overlapping_boxes(parsed)
        center = find_center_of_mass(parsed)
    except GridMathError as e:
        print_error(str(e))
        raise typer.Exit(code=1)

    print_header(__version__)
    print_step(f"{len(parsed)} boxes")
    print_overlap_groups(groups, center)


def parse_box(text: str) -> GridBoundingBox:
    """Parse ``min_x,min_y,max_x_excl,max_y_excl`` into a box.

    Raises:
        InvalidArgumentError: If the text is not four comma-separated integers
            or describes an empty box
    """
    parts = text.split(",")
    if len(parts) != 4:
        raise InvalidArgumentError("box", f"expected 4 comma-separated integers, got '{text}'")
    try:
        min_x, min_y, max_x_excl, max_y_excl = (int(part.strip()) for part in parts)
    except ValueError as e:
        raise InvalidArgumentError("box", f"'{text}' contains a non-integer value") from e
    return GridBoundingBox.from_min_max_excl(min_x, min_y, max_x_excl, max_y_excl)


def cli() -> None:
    """Entry point for the CLI application."""
    app()


def main() -> None:
    """Entry point for the CLI application (alias for cli)."""
    cli()


if __name__ == "__main__":
    cli()
