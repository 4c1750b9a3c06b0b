"""Tests for domain models to verify they work correctly."""

import pytest

from gridoutline.domain import (
    Bridge,
    BridgeCandidate,
    BridgeSet,
    CellCoord,
    CellOverride,
    Contour,
    Corner,
    DiagonalOrientation,
    Direction,
    Edge,
    FilledBounds,
    Grid,
    Point,
    as_override_lookup,
)
from gridoutline.exceptions import GridShapeError


class TestDirection:
    """Tests for Direction enum."""

    def test_right_turns_cycle_clockwise(self) -> None:
        """Test that four right turns visit every direction and return."""
        d = Direction.RIGHT
        seen = []
        for _ in range(4):
            seen.append(d)
            d = d.turned_right()
        assert seen == [Direction.RIGHT, Direction.DOWN, Direction.LEFT, Direction.UP]
        assert d is Direction.RIGHT

    def test_left_turn_inverts_right_turn(self) -> None:
        """Test that a left turn undoes a right turn."""
        for d in Direction:
            assert d.turned_right().turned_left() is d

    def test_reversed(self) -> None:
        """Test direction reversal."""
        assert Direction.UP.reversed() is Direction.DOWN
        assert Direction.LEFT.reversed() is Direction.RIGHT

    def test_components_are_integers(self) -> None:
        """Test that direction components are exact integers."""
        assert (Direction.DOWN.dx, Direction.DOWN.dy) == (0, 1)
        assert isinstance(Direction.UP.dy, int)


class TestPoint:
    """Tests for Point class."""

    def test_point_moved(self) -> None:
        """Test moving a point along a direction."""
        p = Point(1, 1).moved(Direction.UP, 0.25)
        assert p == Point(1, 0.75)

    def test_point_scaled(self) -> None:
        """Test per-axis scaling."""
        assert Point(1, 2).scaled(2.0, 0.5) == Point(2.0, 1.0)

    def test_point_hashable(self) -> None:
        """Test that integer and float points with equal values collide."""
        assert {Point(1, 0): "a"}[Point(1.0, 0.0)] == "a"

    def test_point_immutable(self) -> None:
        """Test that point is immutable."""
        p = Point(1, 2)
        with pytest.raises(AttributeError):
            p.x = 3  # type: ignore


class TestGrid:
    """Tests for Grid class."""

    def test_grid_from_strings(self) -> None:
        """Test creating a grid from text rows."""
        grid = Grid.from_strings(["#.", ".#"])
        assert grid.rows == 2
        assert grid.cols == 2
        assert grid.is_filled(0, 0)
        assert not grid.is_filled(0, 1)

    def test_ragged_rows_rejected(self) -> None:
        """Test that rows of different lengths raise GridShapeError."""
        with pytest.raises(GridShapeError) as exc_info:
            Grid([[True, False], [True]])
        assert exc_info.value.widths == [1, 2]

    def test_out_of_bounds_reads_as_empty(self) -> None:
        """Test that coordinates outside the grid are unfilled."""
        grid = Grid([[True]])
        assert not grid.is_filled(-1, 0)
        assert not grid.is_filled(0, 1)
        assert not grid.is_filled(5, 5)

    def test_empty_grid_shapes(self) -> None:
        """Test grids without rows or columns."""
        assert Grid([]).rows == 0
        assert Grid([]).cols == 0
        assert Grid.empty(3, 4).is_empty()

    def test_filled_cells_row_major(self) -> None:
        """Test filled cell iteration order."""
        grid = Grid.from_strings([".#", "#."])
        assert list(grid.filled_cells()) == [CellCoord(0, 1), CellCoord(1, 0)]

    def test_grid_serialization(self) -> None:
        """Test grid serialization and deserialization."""
        grid = Grid.from_strings(["#..", ".##"])
        assert Grid.from_dict(grid.to_dict()) == grid

    def test_from_dict_accepts_integer_rows(self) -> None:
        """Test deserializing rows given as lists of integers."""
        grid = Grid.from_dict({"grid": [[1, 0], [0, 1]]})
        assert grid == Grid.from_strings(["#.", ".#"])


class TestCellOverride:
    """Tests for per-cell overrides."""

    def test_coord_matches_plain_tuple(self) -> None:
        """Test that CellCoord keys can be queried with plain tuples."""
        overrides = {CellCoord(1, 2): CellOverride(0.1, 0.2)}
        assert overrides[(1, 2)] == CellOverride(0.1, 0.2)

    def test_lookup_from_mapping(self) -> None:
        """Test mapping normalisation into a lookup callable."""
        lookup = as_override_lookup({CellCoord(0, 0): CellOverride(0.3, 0.0)})
        assert lookup(0, 0) == CellOverride(0.3, 0.0)
        assert lookup(4, 4) is None

    def test_lookup_from_none(self) -> None:
        """Test that no overrides always reads as absent."""
        assert as_override_lookup(None)(0, 0) is None

    def test_override_serialization(self) -> None:
        """Test override serialization and deserialization."""
        override = CellOverride(corner_radius=0.1, inner_radius=0.4)
        assert CellOverride.from_dict(override.to_dict()) == override


class TestContour:
    """Tests for Contour class."""

    @pytest.fixture
    def unit_square(self) -> Contour:
        """Clockwise unit square around cell (0, 0)."""
        cell = CellCoord(0, 0)
        return Contour(
            edges=[
                Edge(Point(0, 0), Point(1, 0), Direction.RIGHT, cell),
                Edge(Point(1, 0), Point(1, 1), Direction.DOWN, cell),
                Edge(Point(1, 1), Point(0, 1), Direction.LEFT, cell),
                Edge(Point(0, 1), Point(0, 0), Direction.UP, cell),
            ]
        )

    def test_signed_area_outer(self, unit_square: Contour) -> None:
        """Test that an outer boundary has positive area."""
        assert unit_square.signed_area() == 1.0
        assert not unit_square.is_hole

    def test_signed_area_hole(self, unit_square: Contour) -> None:
        """Test that reversing the loop flips the sign."""
        reversed_edges = [
            Edge(e.end, e.start, e.direction.reversed(), e.cell)
            for e in reversed(unit_square.edges)
        ]
        hole = Contour(edges=reversed_edges)
        assert hole.signed_area() == -1.0
        assert hole.is_hole

    def test_is_closed(self, unit_square: Contour) -> None:
        """Test the closure check."""
        assert unit_square.is_closed()
        assert not Contour(edges=unit_square.edges[:3]).is_closed()


class TestCorner:
    """Tests for Corner class."""

    def test_arrival_and_departure(self) -> None:
        """Test the rounded corner tangent points."""
        corner = Corner(
            vertex=Point(1, 0),
            incoming=Direction.RIGHT,
            outgoing=Direction.DOWN,
            convex=True,
            cell=CellCoord(0, 0),
            radius=0.25,
        )
        assert corner.arrival == Point(0.75, 0)
        assert corner.departure == Point(1, 0.25)

    def test_zero_radius_collapses_to_vertex(self) -> None:
        """Test that a sharp corner has both tangent points at the vertex."""
        corner = Corner(Point(2, 3), Direction.UP, Direction.RIGHT, True, CellCoord(2, 2))
        assert corner.arrival == corner.vertex
        assert corner.departure == corner.vertex


class TestBridge:
    """Tests for bridge domain models."""

    def test_bridge_is_unordered(self) -> None:
        """Test that cell order does not matter."""
        assert Bridge(CellCoord(1, 1), CellCoord(0, 0)) == Bridge(CellCoord(0, 0), CellCoord(1, 1))

    def test_bridge_accepts_plain_tuples(self) -> None:
        """Test that plain tuples are normalised to CellCoord."""
        bridge = Bridge((1, 0), (0, 1))  # type: ignore[arg-type]
        assert bridge.first == CellCoord(0, 1)
        assert isinstance(bridge.first, CellCoord)

    def test_non_diagonal_bridge_rejected(self) -> None:
        """Test that orthogonal neighbours cannot be bridged."""
        with pytest.raises(ValueError):
            Bridge(CellCoord(0, 0), CellCoord(0, 1))

    def test_bridge_vertex(self) -> None:
        """Test the shared vertex of both diagonal orientations."""
        assert Bridge(CellCoord(2, 3), CellCoord(3, 4)).vertex == Point(4, 3)
        assert Bridge(CellCoord(2, 4), CellCoord(3, 3)).vertex == Point(4, 3)

    def test_bridge_set_membership(self) -> None:
        """Test membership with equal but differently ordered bridges."""
        bridges = BridgeSet([Bridge(CellCoord(1, 1), CellCoord(0, 0))])
        assert Bridge(CellCoord(0, 0), CellCoord(1, 1)) in bridges
        assert len(bridges) == 1

    def test_bridge_set_serialization(self) -> None:
        """Test bridge set round trip through lists."""
        bridges = BridgeSet([Bridge(CellCoord(0, 1), CellCoord(1, 0))])
        assert bridges.to_list() == [[[0, 1], [1, 0]]]
        assert Bridge(CellCoord(1, 0), CellCoord(0, 1)) in BridgeSet.from_list(bridges.to_list())

    def test_candidate_cells(self) -> None:
        """Test the filled cells named by a candidate."""
        nw_se = BridgeCandidate(Point(1, 1), DiagonalOrientation.NW_SE)
        ne_sw = BridgeCandidate(Point(1, 1), DiagonalOrientation.NE_SW)
        assert nw_se.cells == (CellCoord(0, 0), CellCoord(1, 1))
        assert ne_sw.as_bridge() == Bridge(CellCoord(0, 1), CellCoord(1, 0))


class TestFilledBounds:
    """Tests for FilledBounds class."""

    def test_dimensions(self) -> None:
        """Test width, height and viewBox formatting."""
        bounds = FilledBounds(min_row=1, max_row=3, min_col=2, max_col=5)
        assert bounds.width == 3
        assert bounds.height == 2
        assert bounds.to_view_box() == "2 1 3 2"
