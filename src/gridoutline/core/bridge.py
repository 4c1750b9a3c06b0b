"""Diagonal bridge fillets.

Where two filled cells touch only at a corner, the outline pinches to a
single point. A bridge adds two small concave fillet fragments in the two
empty quadrants around that vertex so the shapes read as connected.

Key functions/classes:
- find_bridge_candidates: Locate every diagonal point-touch in a grid
- BridgeFilleter: Emit fragments for the active candidates
"""

import structlog

from gridoutline.config import BridgeConfig
from gridoutline.core.emitter import PathEmitter
from gridoutline.domain import (
    BridgeCandidate,
    BridgeSet,
    DiagonalOrientation,
    Grid,
    Point,
)

logger = structlog.get_logger(__name__)


def find_bridge_candidates(grid: Grid) -> list[BridgeCandidate]:
    """Find interior vertices where exactly one diagonal pair is filled.

    A vertex qualifies when both cells of one diagonal are filled and both
    cells of the other diagonal are empty.

    Args:
        grid: Occupancy grid

    Returns:
        Candidates in row-major vertex order
    """
    candidates: list[BridgeCandidate] = []

    for vy in range(1, grid.rows):
        for vx in range(1, grid.cols):
            tl = grid.is_filled(vy - 1, vx - 1)
            tr = grid.is_filled(vy - 1, vx)
            bl = grid.is_filled(vy, vx - 1)
            br = grid.is_filled(vy, vx)

            if tl and br and not tr and not bl:
                candidates.append(BridgeCandidate(Point(vx, vy), DiagonalOrientation.NW_SE))
            elif tr and bl and not tl and not br:
                candidates.append(BridgeCandidate(Point(vx, vy), DiagonalOrientation.NE_SW))

    return candidates


class BridgeFilleter:
    """Generates fillet fragments at diagonal point-touches.

    Example:
        filleter = BridgeFilleter(BridgeConfig(enabled=True, radius=0.3))
        path = filleter.emit(grid)
    """

    def __init__(self, config: BridgeConfig, emitter: PathEmitter | None = None) -> None:
        """Initialize bridge filleter.

        Args:
            config: Bridge settings (enabled flag and radius)
            emitter: Path emitter carrying the output scale
        """
        self.config = config
        self.emitter = emitter or PathEmitter()

    def active_candidates(
        self, grid: Grid, bridges: BridgeSet | None = None
    ) -> tuple[list[BridgeCandidate], int]:
        """Select the candidates to render.

        Args:
            grid: Occupancy grid
            bridges: User-activated bridges, or None to activate every
                candidate

        Returns:
            Tuple of (active candidates, number of stale bridge entries)
        """
        candidates = find_bridge_candidates(grid)
        if bridges is None:
            return candidates, 0

        active = [c for c in candidates if c.as_bridge() in bridges]
        stale = len(bridges) - len(active)
        if stale:
            logger.debug("Ignoring stale bridges", stale=stale, active=len(active))
        return active, stale

    def fragments(self, candidate: BridgeCandidate) -> list[str]:
        """Emit the two fragments for one candidate.

        Each fragment leaves the vertex along a boundary direction, arcs
        around the centre ``vertex + r * lead + r * right`` to the point
        ``r`` to the right of the vertex and closes. The arc is concave, so
        the fragment fills the corner between the two cells' edges. The
        straight sides run clockwise like outer contours.
        """
        radius = self.config.radius
        vertex = candidate.vertex
        parts = []
        for lead in candidate.empty_quadrants():
            leg = vertex.moved(lead, radius)
            end = vertex.moved(lead.turned_right(), radius)
            parts.append(self.emitter.emit_fragment(vertex, leg, radius, end))
        return parts

    def emit(self, grid: Grid, bridges: BridgeSet | None = None) -> str:
        """Emit fillet path data for the active bridges.

        Args:
            grid: Occupancy grid
            bridges: User-activated bridges, or None to activate every
                candidate

        Returns:
            Space separated fragments, or "" when bridging is disabled,
            the radius is zero or nothing qualifies
        """
        if not self.config.enabled or self.config.radius <= 0:
            return ""

        active, _ = self.active_candidates(grid, bridges)
        return self.emit_candidates(active)

    def emit_candidates(self, candidates: list[BridgeCandidate]) -> str:
        """Emit fragments for already selected candidates."""
        parts: list[str] = []
        for candidate in candidates:
            parts.extend(self.fragments(candidate))
        return " ".join(parts)
