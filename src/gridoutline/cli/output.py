"""Rich console output helpers for the CLI.

This module provides user-friendly console output using Rich library
with tables and formatted messages.
"""

from rich.console import Console
from rich.table import Table
from rich.text import Text

from gridoutline.domain import FilledBounds
from gridoutline.utils import RenderStats

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
    console.print(f"\n[bold]gridoutline[/bold] v{version}")
    console.print("─" * 44)


def print_step(message: str) -> None:
    """Print a processing step indicator.

    Args:
        message: Step description message
    """
    console.print(f"\n{SYM_STEP} {message}")


def print_grid_info(grid_path: str, grid_format: str, rows: int, cols: int, filled: int) -> None:
    """Print grid information.

    Args:
        grid_path: Path to the grid document
        grid_format: Document format ("Text" or "JSON")
        rows: Number of grid rows
        cols: Number of grid columns
        filled: Number of filled cells
    """
    # Use Text to safely handle paths with special characters
    line1 = Text("  ")
    line1.append(grid_path)
    line1.append(f" ({grid_format})")
    console.print(line1)
    console.print(f"  {rows}×{cols} cells {SYM_DOT} {filled:,} filled")


def print_render_summary(stats: RenderStats, bounds: FilledBounds | None, verbose: bool) -> None:
    """Print what the renderer produced.

    Args:
        stats: Render statistics
        bounds: Filled-cell bounds (None for an empty grid)
        verbose: Whether to show the detailed table
    """
    console.print(
        f"  [green]{stats.island_count}[/green] shapes {SYM_DOT} "
        f"{stats.hole_count} holes {SYM_DOT} {stats.bridges_rendered} bridges"
    )
    if not verbose:
        return

    table = Table(show_header=False, box=None, padding=(0, 2))
    table.add_row("Corners", str(stats.corner_count))
    table.add_row("Rounded corners", str(stats.arc_count))
    table.add_row("Stale bridges", str(stats.stale_bridges))
    table.add_row("Bounds", bounds.to_view_box() if bounds else "none")
    table.add_row("Render time", f"{stats.duration_ms:.2f}ms")
    console.print(table)


def print_success(output_path: str, file_size: str) -> None:
    """Print success message.

    Args:
        output_path: Path to output file
        file_size: Human-readable file size string
    """
    console.print(f"\n[bold green]{SYM_OK} Complete[/bold green]")

    line = Text("  ")
    line.append(output_path, style="bold")
    line.append(f" ({file_size})")
    console.print(line)


def print_nothing_to_render() -> None:
    console.print(f"\n{SYM_DOT} Grid has no filled cells. Nothing to render.")


def print_error(message: str, details: str | None = None) -> None:
    """Print error message.

    Args:
        message: Main error message
        details: Optional detailed error information
    """
    console.print(f"\n[bold red]{SYM_ERR} Error:[/bold red] {message}")
    if details:
        console.print(f"  {details}")
