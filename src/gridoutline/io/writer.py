"""SVG writer for saving rendered outlines.

This module wraps path data in a standalone SVG document cropped to the
filled-cell bounds and computes pixel sizes for bitmap exports.
"""

import math
from pathlib import Path

from gridoutline.config import ExportConfig, ScaleConfig
from gridoutline.core.emitter import format_number
from gridoutline.domain import FilledBounds
from gridoutline.exceptions import InvalidScaleError, SvgSaveError

SVG_NS = "http://www.w3.org/2000/svg"

# Bitmap export multipliers offered to users
PIXEL_SCALES: tuple[int, ...] = (1, 2, 4)

# Document written when there is nothing to draw
EMPTY_SVG = f'<svg xmlns="{SVG_NS}" viewBox="0 0 1 1" width="20" height="20"></svg>'


def export_size(
    bounds: FilledBounds, pixel_scale: int = 1, base_size: int = 512
) -> tuple[int, int]:
    """Calculate bitmap pixel dimensions for a bounded outline.

    The longer side of the bounds maps to ``base_size * pixel_scale``
    pixels; the other side keeps the aspect ratio.

    Args:
        bounds: Filled-cell bounds of the outline
        pixel_scale: Export multiplier, one of PIXEL_SCALES
        base_size: Long side in pixels at 1x

    Returns:
        Tuple of (width, height) in pixels

    Raises:
        InvalidScaleError: If pixel_scale is not supported

    Examples:
        >>> export_size(FilledBounds(0, 1, 0, 2), pixel_scale=2)
        (1024, 512)
    """
    if pixel_scale not in PIXEL_SCALES:
        raise InvalidScaleError(pixel_scale, PIXEL_SCALES)

    aspect = bounds.width / bounds.height
    long_side = base_size * pixel_scale
    if aspect >= 1:
        return long_side, math.floor(long_side / aspect + 0.5)
    return math.floor(long_side * aspect + 0.5), long_side


class SvgWriter:
    """Writes outline path data as SVG documents.

    Every document uses the fill rule from the export configuration, so
    holes and bridge fillets render the same way in every output. The
    viewBox and pixel size follow the scale the path data was emitted at.

    Example:
        writer = SvgWriter(settings.export, settings.scale)
        markup = writer.build_markup(result.path_data, result.bounds)
        writer.save(markup, Path("shape.svg"))
    """

    def __init__(self, config: ExportConfig | None = None, scale: ScaleConfig | None = None) -> None:
        """Initialize the SVG writer.

        Args:
            config: Export settings (cell size, fill and fill rule)
            scale: Scale the path data was emitted at (unit scale if None)
        """
        self.config = config or ExportConfig()
        self.scale = scale or ScaleConfig()

    def view_box(self, bounds: FilledBounds) -> str:
        """Format the scaled bounds as an SVG viewBox value."""
        sx, sy = self.scale.scale_x, self.scale.scale_y
        return " ".join(
            format_number(v)
            for v in (bounds.min_col * sx, bounds.min_row * sy, bounds.width * sx, bounds.height * sy)
        )

    def build_markup(self, path_data: str, bounds: FilledBounds | None) -> str:
        """Build an SVG document cropped to the filled bounds.

        Args:
            path_data: Path data from the renderer
            bounds: Filled-cell bounds, None for an empty grid

        Returns:
            SVG markup; the fixed placeholder document when there is
            nothing to draw
        """
        if bounds is None or not path_data:
            return EMPTY_SVG

        cell_px = self.config.cell_px
        width = bounds.width * cell_px * self.scale.scale_x
        height = bounds.height * cell_px * self.scale.scale_y

        return (
            f'<svg xmlns="{SVG_NS}" viewBox="{self.view_box(bounds)}" '
            f'width="{format_number(width)}" height="{format_number(height)}">\n'
            f'  <path d="{path_data}" fill="{self.config.fill}" '
            f'fill-rule="{self.config.fill_rule.value}"/>\n'
            f"</svg>"
        )

    def save(self, markup: str, output_path: Path) -> None:
        """Save SVG markup to a file.

        Args:
            markup: SVG document text
            output_path: Destination path

        Raises:
            SvgSaveError: If the file cannot be written
        """
        try:
            output_path.write_text(markup + "\n", encoding="utf-8")
        except OSError as e:
            raise SvgSaveError(str(output_path), str(e)) from e

    @staticmethod
    def get_output_path(input_path: Path) -> Path:
        """Generate the default output path for a grid document.

        Converts: heart.txt -> heart-outline.svg

        Args:
            input_path: Grid document path

        Returns:
            Path with -outline suffix and .svg extension
        """
        return input_path.parent / f"{input_path.stem}-outline.svg"
