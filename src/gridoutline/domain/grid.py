"""Occupancy grid and per-cell settings.

This module defines the long-lived inputs of the outline pipeline:
- CellCoord: A (row, col) coordinate usable as a mapping key
- CellOverride: Per-cell radius customisation
- Grid: A rectangular boolean occupancy matrix
- FilledBounds: Tight bounding box of the filled cells
"""

from collections.abc import Callable, Iterable, Iterator, Mapping
from dataclasses import dataclass
from typing import Any, NamedTuple, Union

from gridoutline.exceptions import GridShapeError

# Characters that mark a filled cell in text rows
FILLED_CHARS = "#1Xx"


class CellCoord(NamedTuple):
    """Zero-based (row, col) cell coordinate.

    Compares equal to a plain ``(row, col)`` tuple, so mappings keyed by
    CellCoord can be queried with either.
    """

    row: int
    col: int


@dataclass(frozen=True, slots=True)
class CellOverride:
    """Radius settings a user has customised for a single cell.

    Attributes:
        corner_radius: Radius for convex corners owned by this cell
        inner_radius: Radius this cell contributes to concave joints
    """

    corner_radius: float
    inner_radius: float

    def to_dict(self) -> dict[str, Any]:
        """Serialize to dictionary.

        Returns:
            Dictionary with corner_radius and inner_radius fields
        """
        return {"corner_radius": self.corner_radius, "inner_radius": self.inner_radius}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "CellOverride":
        """Deserialize from dictionary.

        Args:
            data: Dictionary with corner_radius and inner_radius fields

        Returns:
            CellOverride instance
        """
        return cls(
            corner_radius=float(data["corner_radius"]),
            inner_radius=float(data["inner_radius"]),
        )


OverrideLookup = Callable[[int, int], Union[CellOverride, None]]
OverrideSource = Union[Mapping[CellCoord, CellOverride], OverrideLookup, None]


def as_override_lookup(overrides: OverrideSource) -> OverrideLookup:
    """Normalize a mapping or callable of overrides into a lookup function.

    Args:
        overrides: Mapping keyed by (row, col), a callable, or None

    Returns:
        Callable returning the override for a cell, or None when absent
    """
    if overrides is None:
        return lambda row, col: None
    if callable(overrides):
        return overrides
    return lambda row, col: overrides.get(CellCoord(row, col))


class Grid:
    """Rectangular boolean occupancy matrix.

    Rows are stored as immutable tuples; every row has the same length.
    Coordinates outside the grid read as unfilled.

    Example:
        grid = Grid.from_strings(["##.", ".##"])
        grid.is_filled(0, 1)  # True
    """

    __slots__ = ("_cells", "_rows", "_cols")

    def __init__(self, cells: Iterable[Iterable[bool]]) -> None:
        """Initialize the grid.

        Args:
            cells: Row-major iterable of rows of booleans

        Raises:
            GridShapeError: If rows do not all share one length
        """
        rows = tuple(tuple(bool(v) for v in row) for row in cells)
        widths = {len(row) for row in rows}
        if len(widths) > 1:
            raise GridShapeError(sorted(widths))

        self._cells = rows
        self._rows = len(rows)
        self._cols = len(rows[0]) if rows else 0

    @classmethod
    def empty(cls, rows: int, cols: int) -> "Grid":
        """Create a grid with no filled cells."""
        return cls([[False] * cols for _ in range(rows)])

    @classmethod
    def from_strings(cls, lines: Iterable[str], filled: str = FILLED_CHARS) -> "Grid":
        """Create a grid from text rows.

        Args:
            lines: One string per row
            filled: Characters that mark a filled cell

        Returns:
            Grid instance
        """
        return cls([[ch in filled for ch in line] for line in lines])

    @property
    def rows(self) -> int:
        return self._rows

    @property
    def cols(self) -> int:
        return self._cols

    @property
    def cells(self) -> tuple[tuple[bool, ...], ...]:
        return self._cells

    def in_bounds(self, row: int, col: int) -> bool:
        return 0 <= row < self._rows and 0 <= col < self._cols

    def is_filled(self, row: int, col: int) -> bool:
        """Check whether a cell is filled.

        Out-of-bounds coordinates are treated as unfilled.
        """
        return self.in_bounds(row, col) and self._cells[row][col]

    def filled_cells(self) -> Iterator[CellCoord]:
        """Iterate over filled cells in row-major order."""
        for r, row in enumerate(self._cells):
            for c, value in enumerate(row):
                if value:
                    yield CellCoord(r, c)

    def is_empty(self) -> bool:
        """Check if no cell is filled."""
        return not any(any(row) for row in self._cells)

    def to_strings(self, filled: str = "#", empty: str = ".") -> list[str]:
        return ["".join(filled if v else empty for v in row) for row in self._cells]

    def to_dict(self) -> dict[str, Any]:
        """Serialize to dictionary.

        Returns:
            Dictionary with the row strings under "grid"
        """
        return {"grid": self.to_strings()}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Grid":
        """Deserialize from dictionary.

        Rows may be strings or lists of booleans/integers.
        """
        rows = []
        for row in data["grid"]:
            if isinstance(row, str):
                rows.append([ch in FILLED_CHARS for ch in row])
            else:
                rows.append([bool(v) for v in row])
        return cls(rows)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Grid):
            return NotImplemented
        return self._cells == other._cells

    def __hash__(self) -> int:
        return hash(self._cells)

    def __repr__(self) -> str:
        return f"Grid(rows={self._rows}, cols={self._cols})"


@dataclass(frozen=True, slots=True)
class FilledBounds:
    """Tight bounding box of filled cells in cell units.

    Row and column maxima are exclusive, so a single cell at (r, c) has
    bounds (r, r + 1, c, c + 1).
    """

    min_row: int
    max_row: int
    min_col: int
    max_col: int

    @property
    def width(self) -> int:
        return self.max_col - self.min_col

    @property
    def height(self) -> int:
        return self.max_row - self.min_row

    def to_view_box(self) -> str:
        """Format as an SVG viewBox attribute value."""
        return f"{self.min_col} {self.min_row} {self.width} {self.height}"
