"""Core processing algorithms for gridoutline.

This module contains the core algorithms for:

- Boundary extraction (unit edges around filled cells)
- Contour assembly (turn-priority walk into closed loops)
- Corner resolution (convex/concave detection, radius lookup)
- Path emission (stable SVG path data)
- Bridge fillets (diagonal point-touch detection)
- Bounds calculation (tight filled-cell box)

All services are designed to be:
- Stateless (safe for concurrent callers)
- Pure (no side effects, inputs are never mutated)

Key functions:
- find_boundary_edges: Oriented boundary edges of a grid
- trace_contours: Link edges into closed contours
- turn_priority: Rank a turn between two directions
- find_bridge_candidates: Locate diagonal point-touches
- get_filled_bounds: Tight bounding box of filled cells
- format_number: Fixed-precision minimal-digit formatting
- generate_path_data: Full pipeline in one call

Key classes:
- CornerResolver: Finds corners and resolves their radii
- PathEmitter: Writes M/L/A/Z path data
- BridgeFilleter: Emits fillet fragments for active bridges
- OutlineRenderer: Settings-bound renderer reporting statistics
"""

from gridoutline.core.boundary import find_boundary_edges
from gridoutline.core.bounds import get_filled_bounds
from gridoutline.core.bridge import BridgeFilleter, find_bridge_candidates
from gridoutline.core.contour import trace_contours, turn_priority
from gridoutline.core.corners import CornerResolver
from gridoutline.core.emitter import PathEmitter, format_number
from gridoutline.core.processor import OutlineRenderer, RenderResult, generate_path_data

__all__ = [
    # Bridge classes
    "BridgeFilleter",
    # Corner classes
    "CornerResolver",
    # Renderer classes
    "OutlineRenderer",
    # Emitter classes
    "PathEmitter",
    "RenderResult",
    # Pipeline functions
    "find_boundary_edges",
    "find_bridge_candidates",
    "format_number",
    "generate_path_data",
    "get_filled_bounds",
    "trace_contours",
    "turn_priority",
]
