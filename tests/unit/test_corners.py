"""Unit tests for corner detection and radius resolution."""

import pytest

from gridoutline.config import RadiusConfig
from gridoutline.core.boundary import find_boundary_edges
from gridoutline.core.contour import trace_contours
from gridoutline.core.corners import CornerResolver
from gridoutline.domain import CellCoord, CellOverride, Contour, Direction, Edge, Grid, Point


def trace(grid: Grid) -> list[Contour]:
    return trace_contours(find_boundary_edges(grid))


class TestCornerDetection:
    """Tests for corner detection and classification."""

    def test_single_cell_has_four_convex_corners(self) -> None:
        """Test a unit square."""
        grid = Grid([[True]])
        corners = CornerResolver(grid).resolve(trace(grid)[0])

        assert len(corners) == 4
        assert all(c.convex for c in corners)
        assert [c.vertex for c in corners] == [Point(0, 0), Point(1, 0), Point(1, 1), Point(0, 1)]

    def test_collinear_runs_add_no_corner(self) -> None:
        """Test that a 2x2 block only turns at its extremities."""
        grid = Grid.from_strings(["##", "##"])
        corners = CornerResolver(grid).resolve(trace(grid)[0])

        assert [c.vertex for c in corners] == [Point(0, 0), Point(2, 0), Point(2, 2), Point(0, 2)]
        assert Point(1, 1) not in [c.vertex for c in corners]

    def test_l_shape_has_one_concave_corner(self) -> None:
        """Test classification of a notch."""
        grid = Grid.from_strings(["##", "#."])
        corners = CornerResolver(grid).resolve(trace(grid)[0])

        assert len(corners) == 6
        concave = [c for c in corners if not c.convex]
        assert len(concave) == 1
        assert concave[0].vertex == Point(1, 1)
        assert concave[0].incoming is Direction.LEFT
        assert concave[0].outgoing is Direction.DOWN

    def test_hole_corners_are_concave(self) -> None:
        """Test that every corner of a hole cuts into the fill."""
        grid = Grid.from_strings(["###", "#.#", "###"])
        hole = next(c for c in trace(grid) if c.is_hole)
        corners = CornerResolver(grid).resolve(hole)

        assert len(corners) == 4
        assert not any(c.convex for c in corners)

    def test_degenerate_contour_dropped(self) -> None:
        """Test that fewer than three corners yields no corners."""
        cell = CellCoord(0, 0)
        straight = Contour(
            edges=[Edge(Point(i, 0), Point(i + 1, 0), Direction.RIGHT, cell) for i in range(4)]
        )
        assert CornerResolver(Grid([[True]])).resolve(straight) == []


class TestConvexRadius:
    """Tests for convex radius resolution."""

    def test_global_default(self) -> None:
        """Test that convex corners inherit the global radius."""
        grid = Grid([[True]])
        resolver = CornerResolver(grid, RadiusConfig(corner_radius=0.3))
        assert {c.radius for c in resolver.resolve(trace(grid)[0])} == {0.3}

    def test_override_for_owning_cell(self) -> None:
        """Test that an override changes only its own cell's corners."""
        grid = Grid.from_strings(["#.#"])
        overrides = {CellCoord(0, 2): CellOverride(corner_radius=0.1, inner_radius=0.0)}
        resolver = CornerResolver(grid, RadiusConfig(corner_radius=0.4), overrides)
        left, right = trace(grid)

        assert {c.radius for c in resolver.resolve(left)} == {0.4}
        assert {c.radius for c in resolver.resolve(right)} == {0.1}

    def test_override_clamped(self) -> None:
        """Test that override radii are clamped to [0, 0.5]."""
        grid = Grid([[True, True]])
        overrides = {
            CellCoord(0, 0): CellOverride(corner_radius=2.0, inner_radius=0.0),
            CellCoord(0, 1): CellOverride(corner_radius=-1.0, inner_radius=0.0),
        }
        resolver = CornerResolver(grid, overrides=overrides)

        assert resolver.convex_radius(CellCoord(0, 0)) == 0.5
        assert resolver.convex_radius(CellCoord(0, 1)) == 0.0

    def test_out_of_bounds_override_ignored(self) -> None:
        """Test that stale keys outside the grid read as absent."""
        grid = Grid([[True]])
        overrides = {CellCoord(5, 5): CellOverride(corner_radius=0.0, inner_radius=0.5)}
        resolver = CornerResolver(grid, RadiusConfig(corner_radius=0.2), overrides)

        assert {c.radius for c in resolver.resolve(trace(grid)[0])} == {0.2}
        assert resolver.concave_radius(Point(6, 6)) == 0.0

    def test_lookup_callable(self) -> None:
        """Test overrides supplied as a lookup function."""
        grid = Grid([[True]])

        def lookup(row: int, col: int) -> CellOverride | None:
            return CellOverride(corner_radius=0.45, inner_radius=0.0)

        resolver = CornerResolver(grid, RadiusConfig(corner_radius=0.1), lookup)
        assert {c.radius for c in resolver.resolve(trace(grid)[0])} == {0.45}


class TestConcaveRadius:
    """Tests for concave radius resolution."""

    @pytest.fixture
    def l_grid(self) -> Grid:
        """L-shaped grid with a notch at vertex (1, 1)."""
        return Grid.from_strings(["##", "#."])

    def test_global_inner_default(self, l_grid: Grid) -> None:
        """Test that the notch uses the global inner radius."""
        resolver = CornerResolver(l_grid, RadiusConfig(corner_radius=0.0, inner_radius=0.2))
        assert resolver.concave_radius(Point(1, 1)) == 0.2

    def test_strongest_neighbour_wins(self, l_grid: Grid) -> None:
        """Test that one strong override dominates the joint."""
        overrides = {CellCoord(0, 1): CellOverride(corner_radius=0.0, inner_radius=0.4)}
        resolver = CornerResolver(l_grid, RadiusConfig(inner_radius=0.1), overrides)
        assert resolver.concave_radius(Point(1, 1)) == 0.4

    def test_neutral_override_does_not_suppress(self, l_grid: Grid) -> None:
        """Test that a zero override cannot cancel its neighbours' blend."""
        overrides = {CellCoord(0, 1): CellOverride(corner_radius=0.0, inner_radius=0.0)}
        resolver = CornerResolver(l_grid, RadiusConfig(inner_radius=0.3), overrides)
        assert resolver.concave_radius(Point(1, 1)) == 0.3

    def test_empty_cell_override_ignored(self, l_grid: Grid) -> None:
        """Test that overrides on unfilled cells are not consulted."""
        overrides = {CellCoord(1, 1): CellOverride(corner_radius=0.0, inner_radius=0.5)}
        resolver = CornerResolver(l_grid, RadiusConfig(inner_radius=0.1), overrides)
        assert resolver.concave_radius(Point(1, 1)) == 0.1

    def test_resolved_on_corner(self, l_grid: Grid) -> None:
        """Test that the notch corner carries the resolved radius."""
        resolver = CornerResolver(l_grid, RadiusConfig(corner_radius=0.25, inner_radius=0.15))
        corners = resolver.resolve(trace(l_grid)[0])

        notch = next(c for c in corners if not c.convex)
        assert notch.radius == 0.15
        assert all(c.radius == 0.25 for c in corners if c.convex)
