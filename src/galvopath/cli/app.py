"""CLI application entry point for galvopath.

This module provides the main CLI interface using Typer. The ``preview``
command optimizes a generated test pattern and reports what each pipeline
stage did, which is handy when tuning settings for a projector.
"""

import math
from pathlib import Path
from typing import Annotated

import typer
from pydantic import ValidationError

from galvopath import __version__
from galvopath.cli.output import (
    console,
    print_error,
    print_frame,
    print_header,
    print_pattern_info,
    print_step,
    print_summary,
)
from galvopath.config import GalvopathSettings, LoggingConfig, OptimizerSettings
from galvopath.core import Optimizer, classify_corners
from galvopath.domain import Graphic, LaserPoint, Shape
from galvopath.exceptions import GalvopathError
from galvopath.utils import configure_logging

# Create the Typer app
app = typer.Typer(
    name="galvopath",
    help="Optimize vector drawings for galvo laser scanners.",
    add_completion=False,
    no_args_is_help=True,
)


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        console.print(f"[bold blue]Galvopath[/bold blue] v{__version__}")
        raise typer.Exit()


@app.callback()
def main_callback(
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
    """Optimize vector drawings for galvo laser scanners."""


def build_polygon_graphic(
    shapes: int,
    sides: int,
    radius: float,
    corner_threshold: float = math.radians(30.0),
) -> Graphic:
    """Build a row of closed regular polygons.

    Polygons are laid out along the x axis, three radii apart. Each polygon
    is closed by repeating its first vertex, and corners are classified from
    the vertex turning angles.

    Args:
        shapes: Number of polygons
        sides: Number of sides per polygon
        radius: Circumradius of each polygon
        corner_threshold: Minimum turning angle for a corner, in radians

    Returns:
        Graphic with one shape per polygon
    """
    result: list[Shape] = []
    for shape_idx in range(shapes):
        cx = shape_idx * radius * 3.0
        vertices = [
            LaserPoint(
                x=cx + radius * math.cos(2.0 * math.pi * k / sides),
                y=radius * math.sin(2.0 * math.pi * k / sides),
            )
            for k in range(sides)
        ]
        vertices.append(vertices[0])
        result.append(Shape(classify_corners(vertices, corner_threshold)))
    return Graphic(result)


@app.command()
def preview(
    shapes: Annotated[
        int,
        typer.Option("--shapes", "-s", help="Number of polygons in the pattern", min=0),
    ] = 2,
    sides: Annotated[
        int,
        typer.Option("--sides", help="Sides per polygon", min=3),
    ] = 4,
    radius: Annotated[
        float,
        typer.Option("--radius", "-r", help="Polygon circumradius in drawing units"),
    ] = 50.0,
    max_travel: Annotated[
        float,
        typer.Option("--max-travel", "-t", help="Maximum travel per sample (inf disables)"),
    ] = 10.0,
    extra_blank: Annotated[
        int,
        typer.Option("--extra-blank", help="Extra samples at blank run start and end"),
    ] = 3,
    extra_corner: Annotated[
        int,
        typer.Option("--extra-corner", help="Extra samples at corners"),
    ] = 2,
    angle_dependent: Annotated[
        int,
        typer.Option("--angle-dependent", help="Scale of angle dependent extra samples"),
    ] = 4,
    no_angles: Annotated[
        bool,
        typer.Option("--no-angles", help="Ignore turning angles at corners"),
    ] = False,
    show_points: Annotated[
        bool,
        typer.Option("--show-points", "-p", help="Print every output sample"),
    ] = False,
    log_file: Annotated[
        Path | None,
        typer.Option("--log-file", help="Write detailed logs to file"),
    ] = None,
    log_level: Annotated[
        str,
        typer.Option("--log-level", help="Logging level (DEBUG|INFO|WARNING|ERROR|CRITICAL)"),
    ] = "WARNING",
    quiet: Annotated[
        bool,
        typer.Option("--quiet", "-q", help="Minimal console output"),
    ] = False,
) -> None:
    """Optimize a generated polygon pattern and report the result.

    Example:
        galvopath preview --shapes 3 --sides 5 --max-travel 20 --show-points
    """
    try:
        settings = GalvopathSettings(
            optimizer=OptimizerSettings(
                analyze_corner_angles=not no_angles,
                extra_blank_points_start=extra_blank,
                extra_blank_points_end=extra_blank,
                extra_corner_points=extra_corner,
                extra_corner_points_start=extra_corner,
                extra_corner_points_end=extra_corner,
                extra_corner_points_angle_dependent=angle_dependent,
                max_travel=max_travel,
            ),
            logging=LoggingConfig(log_file=log_file, log_level=log_level),
        )
    except ValidationError as e:
        details = "; ".join(
            f"{'.'.join(str(p) for p in err['loc'])}: {err['msg']}" for err in e.errors()
        )
        print_error("Invalid settings", details=details)
        raise typer.Exit(code=1)

    configure_logging(
        log_file=settings.logging.log_file,
        console_level=settings.logging.log_level,
        file_level=settings.logging.file_log_level,
        quiet=quiet,
    )

    if not quiet:
        print_header(__version__)
        print_step("Building pattern")

    graphic = build_polygon_graphic(shapes, sides, radius)

    if not quiet:
        print_pattern_info(shapes, sides, radius, graphic.point_count)
        print_step("Optimizing")

    optimizer = Optimizer(settings.optimizer)
    try:
        optimizer.optimize(graphic)
    except GalvopathError as e:
        print_error(str(e))
        raise typer.Exit(code=1)

    if show_points:
        print_frame(optimizer.optimized_frame())

    if not quiet:
        print_summary(optimizer.last_stats, settings.optimizer.max_travel)
    else:
        console.print(str(len(optimizer.optimized_frame())))


def cli() -> None:
    """Entry point for the CLI application."""
    app()


def main() -> None:
    """Entry point for the CLI application (alias for cli)."""
    cli()


if __name__ == "__main__":
    cli()
