"""Core geometric types for contour representation.

This module defines the transient geometric types produced by the pipeline:
- Direction: Enum for the four cardinal directions on the grid
- Point: A 2D point on the grid lattice (x = column, y = row)
- Edge: A unit boundary segment owned by a filled cell
- Contour: A closed cycle of edges bounding a shape or a hole
- Corner: A direction change along a contour with its resolved radius

Coordinates follow the screen convention: y grows downwards.
"""

from dataclasses import dataclass, field
from enum import Enum

from gridoutline.domain.grid import CellCoord


class Direction(Enum):
    """Cardinal direction as an integer (dx, dy) step.

    Turns are computed with integer arithmetic, so comparisons are exact.
    In screen coordinates a right turn is a clockwise rotation.
    """

    RIGHT = (1, 0)
    DOWN = (0, 1)
    LEFT = (-1, 0)
    UP = (0, -1)

    @property
    def dx(self) -> int:
        return self.value[0]

    @property
    def dy(self) -> int:
        return self.value[1]

    def turned_right(self) -> "Direction":
        return Direction((-self.dy, self.dx))

    def turned_left(self) -> "Direction":
        return Direction((self.dy, -self.dx))

    def reversed(self) -> "Direction":
        return Direction((-self.dx, -self.dy))


@dataclass(frozen=True, slots=True)
class Point:
    """A point in grid space.

    Attributes:
        x: Horizontal coordinate (column axis)
        y: Vertical coordinate (row axis, growing downwards)
    """

    x: float
    y: float

    def moved(self, direction: Direction, distance: float) -> "Point":
        """Return this point offset along a direction.

        Args:
            direction: Direction to move in
            distance: Distance in grid units (may be negative)

        Returns:
            Offset point
        """
        return Point(self.x + direction.dx * distance, self.y + direction.dy * distance)

    def scaled(self, scale_x: float, scale_y: float) -> "Point":
        return Point(self.x * scale_x, self.y * scale_y)

    def to_tuple(self) -> tuple[float, float]:
        return (self.x, self.y)


@dataclass(frozen=True, slots=True)
class Edge:
    """Unit boundary segment between two lattice points.

    Edges are oriented so the owning filled cell lies on the right-hand
    side of travel in screen coordinates.

    Attributes:
        start: Start lattice point
        end: End lattice point
        direction: Direction of travel from start to end
        cell: Filled cell this edge bounds
    """

    start: Point
    end: Point
    direction: Direction
    cell: CellCoord


@dataclass
class Contour:
    """A closed, directed cycle of unit boundary edges.

    Outer boundaries wind clockwise on screen (positive signed area in
    y-down coordinates); hole boundaries wind the opposite way.

    Attributes:
        edges: Edges in traversal order; each edge ends where the next starts
    """

    edges: list[Edge]
    _cached_area: float | None = field(default=None, repr=False, init=False)

    def __len__(self) -> int:
        return len(self.edges)

    @property
    def points(self) -> list[Point]:
        """Start points of every edge, in order."""
        return [edge.start for edge in self.edges]

    def is_closed(self) -> bool:
        """Check that the last edge ends where the first one starts."""
        return bool(self.edges) and self.edges[-1].end == self.edges[0].start

    def signed_area(self) -> float:
        """Calculate signed area using shoelace formula.

        Result is cached for efficiency.

        Returns:
            Signed area in cell units; positive for outer boundaries
        """
        if self._cached_area is not None:
            return self._cached_area

        points = self.points
        n = len(points)
        area = 0.0
        for i in range(n):
            j = (i + 1) % n
            area += points[i].x * points[j].y
            area -= points[j].x * points[i].y

        self._cached_area = area / 2.0
        return self._cached_area

    @property
    def is_hole(self) -> bool:
        return self.signed_area() < 0


@dataclass(frozen=True, slots=True)
class Corner:
    """A vertex where a contour changes direction.

    Attributes:
        vertex: Lattice point of the turn
        incoming: Direction of the edge arriving at the vertex
        outgoing: Direction of the edge leaving the vertex
        convex: True for a right turn around filled area, False for a notch
        cell: Cell owning the incoming edge
        radius: Resolved rounding radius in grid units
    """

    vertex: Point
    incoming: Direction
    outgoing: Direction
    convex: bool
    cell: CellCoord
    radius: float = 0.0

    @property
    def arrival(self) -> Point:
        """Point where the rounded corner begins on the incoming edge."""
        return self.vertex.moved(self.incoming, -self.radius)

    @property
    def departure(self) -> Point:
        """Point where the rounded corner ends on the outgoing edge."""
        return self.vertex.moved(self.outgoing, self.radius)
