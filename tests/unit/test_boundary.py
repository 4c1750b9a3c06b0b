"""Unit tests for boundary edge extraction."""

from gridoutline.core.boundary import find_boundary_edges
from gridoutline.domain import CellCoord, Direction, Grid, Point


class TestFindBoundaryEdges:
    """Tests for find_boundary_edges."""

    def test_single_cell_has_four_clockwise_edges(self) -> None:
        """Test edge order and orientation around one cell."""
        edges = find_boundary_edges(Grid([[True]]))

        assert [(e.start, e.end) for e in edges] == [
            (Point(0, 0), Point(1, 0)),
            (Point(1, 0), Point(1, 1)),
            (Point(1, 1), Point(0, 1)),
            (Point(0, 1), Point(0, 0)),
        ]
        assert [e.direction for e in edges] == [
            Direction.RIGHT,
            Direction.DOWN,
            Direction.LEFT,
            Direction.UP,
        ]

    def test_edges_record_owning_cell(self) -> None:
        """Test that each edge remembers the cell it bounds."""
        edges = find_boundary_edges(Grid.from_strings(["..", ".#"]))
        assert {e.cell for e in edges} == {CellCoord(1, 1)}
        assert edges[0].start == Point(1, 1)

    def test_shared_side_produces_no_edge(self) -> None:
        """Test that two adjacent filled cells share no boundary."""
        edges = find_boundary_edges(Grid.from_strings(["##"]))

        assert len(edges) == 6
        assert all(not (e.start == Point(1, 0) and e.end == Point(1, 1)) for e in edges)
        assert all(not (e.start == Point(1, 1) and e.end == Point(1, 0)) for e in edges)

    def test_solid_block_perimeter(self) -> None:
        """Test that a solid block emits only its perimeter."""
        edges = find_boundary_edges(Grid.from_strings(["###", "###"]))
        assert len(edges) == 2 * (3 + 2)

    def test_hole_sides_are_boundaries(self) -> None:
        """Test that cells around an empty centre bound it."""
        edges = find_boundary_edges(Grid.from_strings(["###", "#.#", "###"]))

        # 12 outer edges plus 4 around the hole
        assert len(edges) == 16
        hole_edges = [e for e in edges if 1 <= e.start.x <= 2 and 1 <= e.start.y <= 2
                      and 1 <= e.end.x <= 2 and 1 <= e.end.y <= 2]
        assert len(hole_edges) == 4

    def test_grid_border_counts_as_empty(self) -> None:
        """Test that cells on the grid border get edges along it."""
        edges = find_boundary_edges(Grid.from_strings(["#"]))
        assert len(edges) == 4

    def test_empty_grid(self) -> None:
        """Test that an empty grid has no edges."""
        assert find_boundary_edges(Grid.empty(3, 3)) == []
        assert find_boundary_edges(Grid([])) == []

    def test_each_edge_unique(self) -> None:
        """Test that no edge is emitted twice."""
        grid = Grid.from_strings(["#.#", ".#.", "#.#"])
        edges = find_boundary_edges(grid)
        assert len({(e.start, e.end) for e in edges}) == len(edges)
        assert len(edges) == 5 * 4
