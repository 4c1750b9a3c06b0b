"""Grid and SVG I/O layer for gridoutline.

This module handles reading grid documents and writing SVG output. It
keeps file formats out of the core pipeline.

Key responsibilities:
- Load text and JSON grid documents
- Wrap path data in cropped SVG documents
- Compute bitmap export sizes

Key classes:
- GridReader: Load grid documents
- GridDocument: Grid plus overrides, bridges and settings
- SvgWriter: Build and save SVG documents
"""

from gridoutline.io.reader import GridDocument, GridReader
from gridoutline.io.writer import PIXEL_SCALES, SvgWriter, export_size

__all__ = [
    "PIXEL_SCALES",
    "GridDocument",
    "GridReader",
    "SvgWriter",
    "export_size",
]
