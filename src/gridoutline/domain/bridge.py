"""Bridge types for diagonal point-touch fillets.

This module defines the bridge domain models used for joining two filled
cells that touch only at a single grid vertex.
"""

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from enum import Enum, auto
from typing import Any

from gridoutline.domain.contour import Direction, Point
from gridoutline.domain.grid import CellCoord


class DiagonalOrientation(Enum):
    """Which diagonal pair of cells around a vertex is filled.

    - NW_SE: top-left and bottom-right cells filled
    - NE_SW: top-right and bottom-left cells filled
    """

    NW_SE = auto()
    NE_SW = auto()


@dataclass(frozen=True, slots=True)
class Bridge:
    """A user-activated fillet between two diagonally adjacent cells.

    The pair is unordered: cells are normalised so that ``Bridge(a, b)``
    equals ``Bridge(b, a)``.

    Attributes:
        first: Cell with the smaller (row, col)
        second: Cell with the larger (row, col)

    Raises:
        ValueError: If the cells are not diagonal neighbours
    """

    first: CellCoord
    second: CellCoord

    def __post_init__(self) -> None:
        a = CellCoord(*self.first)
        b = CellCoord(*self.second)
        if abs(a.row - b.row) != 1 or abs(a.col - b.col) != 1:
            raise ValueError(f"Cells {tuple(a)} and {tuple(b)} are not diagonal neighbours")
        if b < a:
            a, b = b, a
        object.__setattr__(self, "first", a)
        object.__setattr__(self, "second", b)

    @property
    def vertex(self) -> Point:
        """Grid vertex shared by both cells."""
        return Point(max(self.first.col, self.second.col), max(self.first.row, self.second.row))

    def to_list(self) -> list[list[int]]:
        return [list(self.first), list(self.second)]

    @classmethod
    def from_list(cls, data: list[list[int]]) -> "Bridge":
        """Deserialize from a ``[[row, col], [row, col]]`` pair."""
        first, second = data
        return cls(CellCoord(int(first[0]), int(first[1])), CellCoord(int(second[0]), int(second[1])))


class BridgeSet:
    """Set of user-activated bridges.

    Owned by the caller. Entries may go stale after the grid changes; the
    renderer ignores them rather than pruning the set.
    """

    def __init__(self, bridges: Iterable[Bridge] = ()) -> None:
        self._bridges = frozenset(bridges)

    def __contains__(self, item: object) -> bool:
        return item in self._bridges

    def __iter__(self) -> Iterator[Bridge]:
        return iter(sorted(self._bridges, key=lambda b: (b.first, b.second)))

    def __len__(self) -> int:
        return len(self._bridges)

    def to_list(self) -> list[list[list[int]]]:
        return [b.to_list() for b in self]

    @classmethod
    def from_list(cls, data: Iterable[Any]) -> "BridgeSet":
        return cls(Bridge.from_list(item) for item in data)


@dataclass(frozen=True, slots=True)
class BridgeCandidate:
    """A vertex where two filled cells touch only diagonally.

    Attributes:
        vertex: Shared grid vertex (x = column, y = row)
        orientation: Which diagonal pair is filled
    """

    vertex: Point
    orientation: DiagonalOrientation

    @property
    def cells(self) -> tuple[CellCoord, CellCoord]:
        """The two filled cells meeting at the vertex."""
        vx, vy = int(self.vertex.x), int(self.vertex.y)
        if self.orientation is DiagonalOrientation.NW_SE:
            return CellCoord(vy - 1, vx - 1), CellCoord(vy, vx)
        return CellCoord(vy - 1, vx), CellCoord(vy, vx - 1)

    def as_bridge(self) -> Bridge:
        return Bridge(*self.cells)

    def empty_quadrants(self) -> tuple[Direction, Direction]:
        """Leading direction of each fillet fragment, one per empty quadrant.

        Each fragment runs along its leading direction, then turns right;
        NW/SE touches leave the north-east and south-west quadrants empty.
        """
        if self.orientation is DiagonalOrientation.NW_SE:
            return Direction.UP, Direction.DOWN
        return Direction.LEFT, Direction.RIGHT
