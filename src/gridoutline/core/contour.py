"""Contour assembly from boundary edges.

Edges are linked end-to-start into closed cycles. Where several boundary
edges leave the same vertex (two cells touching diagonally, or a hole
pinching an outer boundary) the walk always prefers the tightest right
turn, which keeps each contour wrapped around a single filled region and
separates outer boundaries from holes.
"""

from collections import defaultdict

import structlog

from gridoutline.domain import Contour, Direction, Edge, Point

logger = structlog.get_logger(__name__)

# A single cell is bounded by four edges; anything shorter cannot close
MIN_CONTOUR_EDGES = 4


def turn_priority(incoming: Direction, outgoing: Direction) -> int:
    """Rank a turn from one direction into another.

    Args:
        incoming: Direction of the current edge
        outgoing: Direction of a candidate next edge

    Returns:
        0 for a right turn, 1 for straight on, 2 for a left turn,
        3 for a reversal

    Examples:
        >>> turn_priority(Direction.RIGHT, Direction.DOWN)
        0
        >>> turn_priority(Direction.RIGHT, Direction.UP)
        2
    """
    if outgoing is incoming.turned_right():
        return 0
    if outgoing is incoming:
        return 1
    if outgoing is incoming.reversed():
        return 3
    return 2


def trace_contours(edges: list[Edge]) -> list[Contour]:
    """Link boundary edges into closed contours.

    Seeds are taken in input order. From each seed the walk repeatedly
    follows the unused edge starting at the current end point with the
    lowest turn priority (first in input order on ties) until the loop
    returns to the seed's start point or no unused edge continues the
    path. Every edge ends up in at most one contour; contours shorter than
    four edges are discarded.

    Args:
        edges: Boundary edges, e.g. from find_boundary_edges()

    Returns:
        Closed contours, outer boundaries and holes alike
    """
    edges_by_start: dict[Point, list[int]] = defaultdict(list)
    for idx, edge in enumerate(edges):
        edges_by_start[edge.start].append(idx)

    used = [False] * len(edges)
    contours: list[Contour] = []
    dropped = 0

    for seed in range(len(edges)):
        if used[seed]:
            continue

        path: list[Edge] = []
        current = seed

        while True:
            used[current] = True
            edge = edges[current]
            path.append(edge)
            if edge.end == path[0].start:
                break

            candidates = [i for i in edges_by_start.get(edge.end, []) if not used[i]]
            if not candidates:
                break

            current = min(
                candidates,
                key=lambda i: turn_priority(edge.direction, edges[i].direction),
            )

        if len(path) >= MIN_CONTOUR_EDGES:
            contours.append(Contour(edges=path))
        else:
            dropped += 1

    if dropped:
        logger.debug("Discarded degenerate contours", dropped=dropped)

    return contours
