"""Corner detection and radius resolution.

A corner is any vertex where a contour changes direction. Right turns
wrap filled area and are convex; left turns cut into it and are concave.
Convex corners take their radius from the single cell that owns them.
Concave corners take the strongest inner radius of all filled cells
meeting at the vertex, so one cell asking for a metaball blend is never
overruled by a neutral neighbour.
"""

from gridoutline.config import RadiusConfig, clamp_radius
from gridoutline.core.contour import turn_priority
from gridoutline.domain import (
    CellCoord,
    CellOverride,
    Contour,
    Corner,
    Grid,
    OverrideSource,
    Point,
    as_override_lookup,
)

# A closed rectilinear outline needs at least this many turns
MIN_CORNERS = 3


class CornerResolver:
    """Finds the corners of a contour and resolves their radii.

    The resolver reads the grid and overrides but never modifies them and
    keeps no state between calls.
    """

    def __init__(
        self,
        grid: Grid,
        config: RadiusConfig | None = None,
        overrides: OverrideSource = None,
    ) -> None:
        """Initialize corner resolver.

        Args:
            grid: Grid the contours were traced from
            config: Global corner/inner radius defaults
            overrides: Per-cell overrides as a mapping keyed by (row, col)
                or a lookup callable; unknown keys read as "no override"
        """
        self.grid = grid
        self.config = config or RadiusConfig()
        self._lookup = as_override_lookup(overrides)

    def resolve(self, contour: Contour) -> list[Corner]:
        """Detect the corners of a contour, in traversal order.

        Args:
            contour: Closed contour

        Returns:
            Corners with resolved radii, or an empty list when the contour
            has fewer than three corners
        """
        edges = contour.edges
        n = len(edges)
        corners: list[Corner] = []

        for i in range(n):
            prev_edge = edges[i - 1]
            edge = edges[i]
            if prev_edge.direction is edge.direction:
                continue

            convex = turn_priority(prev_edge.direction, edge.direction) == 0
            vertex = edge.start
            radius = (
                self.convex_radius(prev_edge.cell)
                if convex
                else self.concave_radius(vertex)
            )
            corners.append(
                Corner(
                    vertex=vertex,
                    incoming=prev_edge.direction,
                    outgoing=edge.direction,
                    convex=convex,
                    cell=prev_edge.cell,
                    radius=radius,
                )
            )

        if len(corners) < MIN_CORNERS:
            return []
        return corners

    def convex_radius(self, cell: CellCoord) -> float:
        """Radius of a convex corner owned by a cell."""
        override = self._override(cell.row, cell.col)
        if override is not None:
            return clamp_radius(override.corner_radius)
        return clamp_radius(self.config.corner_radius)

    def concave_radius(self, vertex: Point) -> float:
        """Radius of a concave corner at a lattice vertex.

        Takes the maximum over the filled in-bounds cells sharing the vertex.
        """
        vx, vy = int(vertex.x), int(vertex.y)
        radius = 0.0
        for r, c in ((vy - 1, vx - 1), (vy - 1, vx), (vy, vx - 1), (vy, vx)):
            if not self.grid.is_filled(r, c):
                continue
            override = self._override(r, c)
            inner = override.inner_radius if override is not None else self.config.inner_radius
            radius = max(radius, clamp_radius(inner))
        return radius

    def _override(self, row: int, col: int) -> CellOverride | None:
        if not self.grid.in_bounds(row, col):
            return None
        return self._lookup(row, col)
