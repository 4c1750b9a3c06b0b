"""CLI application entry point for gridoutline.

This module provides the main CLI interface using Typer.
"""

from pathlib import Path
from typing import Annotated

import typer
from pydantic import ValidationError

from gridoutline import __version__
from gridoutline.cli.output import (
    console,
    print_error,
    print_grid_info,
    print_header,
    print_nothing_to_render,
    print_render_summary,
    print_step,
    print_success,
)
from gridoutline.config import (
    BridgeConfig,
    ExportConfig,
    LoggingConfig,
    OutlineSettings,
    RadiusConfig,
    ScaleConfig,
)
from gridoutline.core import OutlineRenderer, get_filled_bounds
from gridoutline.exceptions import GridLoadError, GridOutlineError, SvgSaveError
from gridoutline.io import PIXEL_SCALES, GridDocument, GridReader, SvgWriter, export_size
from gridoutline.utils import configure_logging

# Create the Typer app
app = typer.Typer(
    name="gridoutline",
    help="Convert cell grids into rounded vector outlines.",
    add_completion=False,
    no_args_is_help=True,
)


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        console.print(f"[bold blue]gridoutline[/bold blue] v{__version__}")
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
    """Convert cell grids into rounded vector outlines."""


def build_settings(
    base: OutlineSettings | None,
    radius: float | None = None,
    inner_radius: float | None = None,
    bridge: bool | None = None,
    bridge_radius: float | None = None,
    scale_x: float | None = None,
    scale_y: float | None = None,
    log_file: Path | None = None,
    log_level: str = "WARNING",
) -> OutlineSettings:
    """Merge CLI options over the settings stored in a grid document.

    Options left as None keep the document value (or the default).
    Nested models are rebuilt rather than copied so radius clamping runs.
    """
    base = base or OutlineSettings()
    return OutlineSettings(
        radius=RadiusConfig(
            corner_radius=base.radius.corner_radius if radius is None else radius,
            inner_radius=base.radius.inner_radius if inner_radius is None else inner_radius,
        ),
        bridge=BridgeConfig(
            enabled=base.bridge.enabled if bridge is None else bridge,
            radius=base.bridge.radius if bridge_radius is None else bridge_radius,
        ),
        scale=ScaleConfig(
            scale_x=base.scale.scale_x if scale_x is None else scale_x,
            scale_y=base.scale.scale_y if scale_y is None else scale_y,
        ),
        export=ExportConfig(**base.export.model_dump()),
        logging=LoggingConfig(log_file=log_file, log_level=log_level),
    )


def _load_document(grid_file: Path) -> tuple[GridReader, GridDocument]:
    if not grid_file.exists():
        print_error(
            f"Input file not found: {grid_file}",
            details=f"The file '{grid_file}' does not exist or is not accessible.",
        )
        raise typer.Exit(code=1)

    if not grid_file.is_file():
        print_error(
            f"Input path is not a file: {grid_file}",
            details="Please provide a path to a text or JSON grid file.",
        )
        raise typer.Exit(code=1)

    reader = GridReader(grid_file)
    return reader, reader.load()


@app.command()
def render(
    grid_file: Annotated[
        Path,
        typer.Argument(
            help="Path to a text or JSON grid file",
            show_default=False,
        ),
    ],
    output: Annotated[
        Path | None,
        typer.Option(
            "--output",
            "-o",
            help="Output SVG path (default: {name}-outline.svg)",
        ),
    ] = None,
    radius: Annotated[
        float | None,
        typer.Option(
            "--radius",
            "-r",
            help="Convex corner radius in cells (0-0.5, clamped)",
        ),
    ] = None,
    inner_radius: Annotated[
        float | None,
        typer.Option(
            "--inner-radius",
            "-i",
            help="Concave corner radius in cells (0-0.5, clamped)",
        ),
    ] = None,
    bridge: Annotated[
        bool | None,
        typer.Option(
            "--bridge/--no-bridge",
            help="Add fillets where cells touch only diagonally",
        ),
    ] = None,
    bridge_radius: Annotated[
        float | None,
        typer.Option(
            "--bridge-radius",
            "-b",
            help="Diagonal fillet radius in cells (0-0.5, clamped)",
        ),
    ] = None,
    scale_x: Annotated[
        float | None,
        typer.Option(
            "--scale-x",
            help="Horizontal scale factor",
        ),
    ] = None,
    scale_y: Annotated[
        float | None,
        typer.Option(
            "--scale-y",
            help="Vertical scale factor",
        ),
    ] = None,
    path_only: Annotated[
        bool,
        typer.Option(
            "--path-only",
            help="Print the path data instead of writing an SVG",
        ),
    ] = False,
    show_bounds: Annotated[
        bool,
        typer.Option(
            "--bounds",
            help="Print the filled-cell viewBox instead of writing an SVG",
        ),
    ] = False,
    log_file: Annotated[
        Path | None,
        typer.Option(
            "--log-file",
            help="Write detailed logs to file",
        ),
    ] = None,
    log_level: Annotated[
        str,
        typer.Option(
            "--log-level",
            help="Logging level (DEBUG|INFO|WARNING|ERROR)",
        ),
    ] = "WARNING",
    verbose: Annotated[
        bool,
        typer.Option(
            "--verbose",
            "-v",
            help="Verbose console output",
        ),
    ] = False,
    quiet: Annotated[
        bool,
        typer.Option(
            "--quiet",
            "-q",
            help="Minimal console output",
        ),
    ] = False,
) -> None:
    """Render a grid file into a rounded SVG outline.

    Example:
        gridoutline render heart.txt --radius 0.3 --inner-radius 0.2

    This will create heart-outline.svg next to heart.txt.
    """
    # Validate mutually exclusive options
    if verbose and quiet:
        print_error("Cannot use --verbose and --quiet together")
        raise typer.Exit(code=1)

    # Raw output goes to stdout untouched, so keep the console silent
    raw_output = path_only or show_bounds
    silent = quiet or raw_output

    try:
        reader, document = _load_document(grid_file)

        settings = build_settings(
            document.settings,
            radius=radius,
            inner_radius=inner_radius,
            bridge=bridge,
            bridge_radius=bridge_radius,
            scale_x=scale_x,
            scale_y=scale_y,
            log_file=log_file,
            log_level=log_level,
        )
        logger = configure_logging(
            log_file=settings.logging.log_file,
            console_level=settings.logging.log_level,
            file_level=settings.logging.file_log_level,
            quiet=silent,
        )

        grid = document.grid
        if not silent:
            print_header(__version__)
            print_step("Loading grid")
            print_grid_info(
                grid_path=str(grid_file),
                grid_format=reader.format,
                rows=grid.rows,
                cols=grid.cols,
                filled=sum(1 for _ in grid.filled_cells()),
            )

        renderer = OutlineRenderer(settings, logger=logger)
        result = renderer.render(grid, document.overrides, document.bridges)

        if raw_output:
            if show_bounds:
                typer.echo(result.bounds.to_view_box() if result.bounds else "none")
            if path_only:
                typer.echo(result.path_data)
            raise typer.Exit(code=0)

        if not quiet:
            print_step("Rendering")
            print_render_summary(result.stats, result.bounds, verbose)

        if result.is_empty():
            if not quiet:
                print_nothing_to_render()
            raise typer.Exit(code=0)

        output_path = output or SvgWriter.get_output_path(grid_file)
        writer = SvgWriter(settings.export, settings.scale)
        writer.save(writer.build_markup(result.path_data, result.bounds), output_path)
        logger.info("SVG saved", output=str(output_path))

        if not quiet:
            print_success(output_path=str(output_path), file_size=_format_file_size(output_path))

    except GridLoadError as e:
        print_error(f"Could not load grid: {e.reason}")
        raise typer.Exit(code=1)
    except SvgSaveError as e:
        print_error(f"Could not save SVG: {e.reason}")
        raise typer.Exit(code=1)
    except GridOutlineError as e:
        print_error(str(e))
        raise typer.Exit(code=1)
    except ValidationError as e:
        print_error("Invalid settings", details=f"{e.error_count()} validation error(s)")
        raise typer.Exit(code=1)
    except typer.Exit:
        # Re-raise typer.Exit to allow clean exits
        raise
    except Exception as e:
        print_error(f"Unexpected error: {e}")
        raise typer.Exit(code=1)


@app.command("export-size")
def export_size_command(
    grid_file: Annotated[
        Path,
        typer.Argument(
            help="Path to a text or JSON grid file",
            show_default=False,
        ),
    ],
    scale: Annotated[
        int | None,
        typer.Option(
            "--scale",
            "-s",
            help="Bitmap export multiplier (1, 2 or 4; default: document setting or 1)",
        ),
    ] = None,
    base_size: Annotated[
        int | None,
        typer.Option(
            "--base-size",
            help="Long side in pixels at 1x (default: document setting or 512)",
            min=16,
        ),
    ] = None,
) -> None:
    """Print the pixel size of a bitmap export of a grid file."""
    try:
        _, document = _load_document(grid_file)
        bounds = get_filled_bounds(document.grid)
        if bounds is None:
            print_nothing_to_render()
            raise typer.Exit(code=1)

        export = (document.settings or OutlineSettings()).export
        width, height = export_size(
            bounds,
            pixel_scale=export.pixel_scale if scale is None else scale,
            base_size=export.base_size if base_size is None else base_size,
        )
        typer.echo(f"{width}x{height}")

    except GridOutlineError as e:
        details = None
        if not isinstance(e, GridLoadError):
            details = f"Valid scales: {', '.join(map(str, PIXEL_SCALES))}"
        print_error(str(e), details=details)
        raise typer.Exit(code=1)


def _format_file_size(path: Path) -> str:
    """Format file size in human-readable form.

    Args:
        path: Path to file

    Returns:
        Human-readable file size (e.g., "2 KB")
    """
    try:
        size_bytes = path.stat().st_size
    except OSError:
        return "unknown"
    if size_bytes < 1024:
        return f"{size_bytes} B"
    elif size_bytes < 1024 * 1024:
        return f"{size_bytes / 1024:.0f} KB"
    else:
        return f"{size_bytes / (1024 * 1024):.1f} MB"


def cli() -> None:
    """Entry point for the CLI application."""
    app()


def main() -> None:
    """Entry point for the CLI application (alias for cli)."""
    cli()


if __name__ == "__main__":
    cli()
