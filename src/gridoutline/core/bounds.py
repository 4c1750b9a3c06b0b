"""Bounding box of filled cells."""

from gridoutline.domain import FilledBounds, Grid


def get_filled_bounds(grid: Grid) -> FilledBounds | None:
    """Compute the tight bounding box of filled cells.

    Args:
        grid: Occupancy grid

    Returns:
        Bounds with exclusive maxima, or None when no cell is filled.
        None means "nothing to render", never a zero-sized box.
    """
    min_r, max_r = grid.rows, -1
    min_c, max_c = grid.cols, -1

    for r, c in grid.filled_cells():
        min_r = min(min_r, r)
        max_r = max(max_r, r)
        min_c = min(min_c, c)
        max_c = max(max_c, c)

    if max_r == -1:
        return None
    return FilledBounds(min_row=min_r, max_row=max_r + 1, min_col=min_c, max_col=max_c + 1)
