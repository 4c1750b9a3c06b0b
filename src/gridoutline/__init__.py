"""gridoutline - Turn pixel grids into rounded vector outlines.

gridoutline converts a rectangular grid of filled/empty cells into closed SVG
path outlines. Convex corners and concave notches are rounded independently,
which gives the "metaball" look where neighbouring cells blend together, and
cells that touch only diagonally can be joined with small fillets.

Example:
    $ gridoutline render heart.txt --radius 0.3 --inner-radius 0.2

This will create heart-outline.svg next to the input grid.
"""

__version__ = "0.1.0"
__author__ = "Dimosthenis Kaponis"

__all__ = ["__author__", "__version__"]
