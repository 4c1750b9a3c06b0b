"""Domain models for gridoutline.

This module contains the core domain models representing grids, per-cell
settings, contours and bridges. All models are designed to be:

- Immutable where possible (using frozen dataclasses)
- Hashable value types, so they work as mapping keys
- Independent of any rendering or file format details

Key classes:
- Grid: Rectangular boolean occupancy matrix
- CellCoord: (row, col) coordinate used as a structural mapping key
- CellOverride: Per-cell corner/inner radius customisation
- Direction: Cardinal direction enum with exact integer turns
- Edge, Contour, Corner: Transient boundary geometry
- Bridge, BridgeSet, BridgeCandidate: Diagonal point-touch fillets
"""

from gridoutline.domain.bridge import Bridge, BridgeCandidate, BridgeSet, DiagonalOrientation
from gridoutline.domain.contour import Contour, Corner, Direction, Edge, Point
from gridoutline.domain.grid import (
    CellCoord,
    CellOverride,
    FilledBounds,
    Grid,
    OverrideLookup,
    OverrideSource,
    as_override_lookup,
)

__all__: list[str] = [
    # Enums
    "Direction",
    "DiagonalOrientation",
    # Inputs
    "CellCoord",
    "CellOverride",
    "Grid",
    "OverrideLookup",
    "OverrideSource",
    "as_override_lookup",
    # Geometry
    "Point",
    "Edge",
    "Contour",
    "Corner",
    "FilledBounds",
    # Bridges
    "Bridge",
    "BridgeSet",
    "BridgeCandidate",
]
