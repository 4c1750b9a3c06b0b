"""Boundary edge extraction.

Every filled cell contributes one unit edge for each side that faces an
empty or out-of-grid neighbour. Edges are oriented clockwise around their
cell on screen (top left->right, right top->bottom, bottom right->left,
left bottom->top), which keeps filled area on the right of travel.
"""

from gridoutline.domain import CellCoord, Direction, Edge, Grid, Point


def find_boundary_edges(grid: Grid) -> list[Edge]:
    """Extract the oriented boundary edges of all filled cells.

    Shared sides between two filled cells produce no edge.

    Args:
        grid: Occupancy grid

    Returns:
        Edges in row-major cell order, each cell's sides in
        top, right, bottom, left order

    Examples:
        >>> edges = find_boundary_edges(Grid([[True]]))
        >>> [e.direction.name for e in edges]
        ['RIGHT', 'DOWN', 'LEFT', 'UP']
    """
    edges: list[Edge] = []

    for cell in grid.filled_cells():
        r, c = cell
        if not grid.is_filled(r - 1, c):
            edges.append(_edge(Point(c, r), Point(c + 1, r), Direction.RIGHT, cell))
        if not grid.is_filled(r, c + 1):
            edges.append(_edge(Point(c + 1, r), Point(c + 1, r + 1), Direction.DOWN, cell))
        if not grid.is_filled(r + 1, c):
            edges.append(_edge(Point(c + 1, r + 1), Point(c, r + 1), Direction.LEFT, cell))
        if not grid.is_filled(r, c - 1):
            edges.append(_edge(Point(c, r + 1), Point(c, r), Direction.UP, cell))

    return edges


def _edge(start: Point, end: Point, direction: Direction, cell: CellCoord) -> Edge:
    return Edge(start=start, end=end, direction=direction, cell=cell)
