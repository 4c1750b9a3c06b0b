"""Rendering orchestration for the grid-to-outline pipeline.

This module wires the pipeline stages together:
grid -> boundary edges -> contours -> corners -> path data, with bridge
fillets appended and the filled bounds computed alongside.

Key components:
- generate_path_data: One-call functional entry point
- OutlineRenderer: Settings-bound renderer that also reports statistics
- RenderResult: Path data, bounds and statistics of one render
"""

import time
from dataclasses import dataclass, field

import structlog

from gridoutline.config import OutlineSettings
from gridoutline.core.boundary import find_boundary_edges
from gridoutline.core.bounds import get_filled_bounds
from gridoutline.core.bridge import BridgeFilleter
from gridoutline.core.contour import trace_contours
from gridoutline.core.corners import CornerResolver
from gridoutline.core.emitter import PathEmitter
from gridoutline.domain import BridgeSet, Contour, FilledBounds, Grid, OverrideSource
from gridoutline.utils import RenderLogger, RenderStats


@dataclass
class RenderResult:
    """Outcome of rendering one grid.

    Attributes:
        path_data: SVG path data ("" when there is nothing to draw)
        bounds: Tight filled-cell bounds, None for an empty grid
        contours: Contours that produced geometry
        stats: Counters and timing for the render
    """

    path_data: str
    bounds: FilledBounds | None
    contours: list[Contour] = field(default_factory=list)
    stats: RenderStats = field(default_factory=RenderStats)

    def is_empty(self) -> bool:
        """Check if there is nothing to draw."""
        return not self.path_data or self.bounds is None


class OutlineRenderer:
    """Renders grids into outline path data.

    Every call recomputes from scratch and reads only its arguments, so one
    renderer can serve concurrent callers.

    Example:
        renderer = OutlineRenderer(OutlineSettings())
        result = renderer.render(Grid.from_strings(["##", "#."]))
        print(result.path_data)
    """

    def __init__(
        self,
        settings: OutlineSettings | None = None,
        logger: structlog.stdlib.BoundLogger | None = None,
    ) -> None:
        """Initialize renderer with configuration.

        Args:
            settings: Radius, bridge and scale settings
            logger: Structured logger (module logger if None)
        """
        self.settings = settings or OutlineSettings()
        self.logger = logger or structlog.get_logger("gridoutline")

    def render(
        self,
        grid: Grid,
        overrides: OverrideSource = None,
        bridges: BridgeSet | None = None,
    ) -> RenderResult:
        """Render a grid.

        Args:
            grid: Occupancy grid
            overrides: Per-cell radius overrides (mapping or lookup callable)
            bridges: User-activated bridges; None activates every diagonal
                touch when bridging is enabled

        Returns:
            RenderResult with path data, bounds and statistics
        """
        render_logger = RenderLogger(self.logger)
        stats = render_logger.stats
        stats.start_time = time.perf_counter()

        render_logger.log_render_start(grid.rows, grid.cols, sum(1 for _ in grid.filled_cells()))

        bounds = get_filled_bounds(grid)
        edges = find_boundary_edges(grid)
        if not edges:
            stats.end_time = time.perf_counter()
            render_logger.log_render_empty()
            return RenderResult(path_data="", bounds=bounds, stats=stats)

        scale = self.settings.scale
        emitter = PathEmitter(scale.scale_x, scale.scale_y)
        resolver = CornerResolver(grid, self.settings.radius, overrides)

        contours = trace_contours(edges)
        kept: list[Contour] = []
        parts: list[str] = []

        for contour in contours:
            corners = resolver.resolve(contour)
            if not corners:
                continue
            kept.append(contour)
            render_logger.log_corners(
                len(kept) - 1,
                corners=len(corners),
                arcs=sum(1 for c in corners if c.radius > 0),
            )
            parts.append(emitter.emit(corners))

        render_logger.log_contours(
            total=len(kept),
            holes=sum(1 for c in kept if c.is_hole),
            dropped=len(contours) - len(kept),
        )

        path_data = " ".join(parts)

        bridge_config = self.settings.bridge
        if bridge_config.enabled and bridge_config.radius > 0:
            filleter = BridgeFilleter(bridge_config, emitter)
            active, stale = filleter.active_candidates(grid, bridges)
            render_logger.log_bridges(rendered=len(active), stale=stale)
            bridge_data = filleter.emit_candidates(active)
            if bridge_data:
                path_data = f"{path_data} {bridge_data}"

        stats.end_time = time.perf_counter()
        render_logger.log_render_complete(len(path_data), stats.duration_ms)

        return RenderResult(path_data=path_data, bounds=bounds, contours=kept, stats=stats)


def generate_path_data(
    grid: Grid,
    settings: OutlineSettings | None = None,
    overrides: OverrideSource = None,
    bridges: BridgeSet | None = None,
) -> str:
    """Convert a grid into SVG path data.

    Args:
        grid: Occupancy grid
        settings: Radius, bridge and scale settings (defaults if None)
        overrides: Per-cell radius overrides
        bridges: User-activated bridges (None activates all when enabled)

    Returns:
        Path data string; "" when the grid has nothing to draw

    Examples:
        >>> from gridoutline.config import OutlineSettings, RadiusConfig
        >>> settings = OutlineSettings(radius=RadiusConfig(corner_radius=0))
        >>> generate_path_data(Grid([[True]]), settings)
        'M0 0 L1 0 L1 1 L0 1 L0 0 Z'
    """
    return OutlineRenderer(settings).render(grid, overrides, bridges).path_data
