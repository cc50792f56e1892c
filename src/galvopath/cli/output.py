"""Rich console output helpers for the CLI.

This module provides user-friendly console output using Rich library
with tables and formatted messages.
"""

import math

from rich.console import Console
from rich.table import Table

from galvopath.domain import Frame
from galvopath.utils import OptimizationStats

console = Console()

# Unicode symbols for consistent visual language
SYM_STEP = "▸"  # Step indicator
SYM_OK = "✓"  # Success
SYM_ERR = "✗"  # Error
SYM_DOT = "·"  # Separator/secondary info


def print_header(version: str) -> None:
    """Print application header.

    Args:
        version: Application version string
    """
    console.print(f"\n[bold]Galvopath[/bold] v{version}")
    console.print("─" * 44)


def print_step(message: str) -> None:
    """Print a processing step indicator.

    Args:
        message: Step description message
    """
    console.print(f"\n{SYM_STEP} {message}")


def print_pattern_info(shapes: int, sides: int, radius: float, points: int) -> None:
    """Print information about the generated test pattern.

    Args:
        shapes: Number of polygons
        sides: Sides per polygon
        radius: Circumradius of each polygon
        points: Total number of input points
    """
    console.print(f"  {shapes} shapes {SYM_DOT} {sides} sides {SYM_DOT} radius {radius:g}")
    console.print(f"  {points:,} input points")


def _format_travel(max_travel: float) -> str:
    """Format the travel limit, spelling out the unlimited case."""
    if math.isinf(max_travel):
        return "unlimited"
    return f"{max_travel:g}"


def print_summary(stats: OptimizationStats, max_travel: float) -> None:
    """Print per-stage point counts and totals.

    Args:
        stats: Statistics of the optimization run
        max_travel: Travel limit used for the run
    """
    table = Table(show_header=True, header_style="bold", box=None, padding=(0, 2))
    table.add_column("Stage")
    table.add_column("Points", justify="right")
    for stage, count in stats.stage_points.items():
        table.add_row(stage, f"{count:,}")
    console.print(table)

    console.print(
        f"  {stats.dwell_points_added} dwell {SYM_DOT} "
        f"{stats.travel_points_added} travel {SYM_DOT} "
        f"max travel {_format_travel(max_travel)}"
    )
    console.print(
        f"\n[bold green]{SYM_OK} Complete[/bold green] "
        f"{stats.input_points} {SYM_STEP} {stats.output_points} points "
        f"in {stats.duration_seconds * 1000:.1f}ms"
    )


def print_frame(frame: Frame) -> None:
    """Print every sample of a frame.

    Args:
        frame: Optimized frame
    """
    table = Table(show_header=True, header_style="bold")
    table.add_column("#", justify="right")
    table.add_column("x", justify="right")
    table.add_column("y", justify="right")
    table.add_column("blank", justify="center")
    table.add_column("corner", justify="center")
    table.add_column("angle", justify="right")

    for idx, point in enumerate(frame):
        row = point.to_dict()
        table.add_row(
            str(idx),
            f"{row['x']:.2f}",
            f"{row['y']:.2f}",
            SYM_OK if row["blanked"] else "",
            SYM_OK if row["corner"] else "",
            f"{math.degrees(row['turning_angle']):.1f}°",
        )

    console.print(table)


def print_error(message: str, details: str | None = None) -> None:
    """Print error message.

    Args:
        message: Main error message
        details: Optional detailed error information
    """
    console.print(f"\n[bold red]{SYM_ERR} Error:[/bold red] {message}")
    if details:
        console.print(f"  {details}")
