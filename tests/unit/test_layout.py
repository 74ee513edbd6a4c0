"""
Unit tests for BoardLayout.

Tests the placement formula, hit testing and window un-projection.
"""
import pytest
from minefield import BoardLayout, InvalidConfiguration


# ============================================================================
# Construction Tests
# ============================================================================

class TestLayoutConstruction:
    """Test layout validation and sizing."""

    @pytest.mark.parametrize(
        "kwargs",
        [
            {"rows": 0, "columns": 3},
            {"rows": 3, "columns": 3, "cell_size": 0.0},
            {"rows": 3, "columns": 3, "gap": -1.0},
        ],
    )
    def test_invalid_layout_raises(self, kwargs: dict) -> None:
        with pytest.raises(InvalidConfiguration):
            BoardLayout(**kwargs)

    def test_from_window_fills_square_window(self) -> None:
        """A 20x20 grid in a 400 unit window gets 18 unit cells."""
        layout = BoardLayout.from_window(20, 20, 400.0, 400.0, gap=2.0)
        assert layout.cell_size == pytest.approx(18.0)
        assert layout.width == pytest.approx(398.0)

    def test_from_window_uses_tighter_axis(self) -> None:
        layout = BoardLayout.from_window(10, 20, 400.0, 400.0, gap=0.0)
        assert layout.cell_size == pytest.approx(20.0)

    @pytest.mark.parametrize("rows, columns", [(0, 5), (5, 0), (-2, 3)])
    def test_from_window_rejects_empty_grid(self, rows: int, columns: int) -> None:
        with pytest.raises(InvalidConfiguration, match="dimensions must be positive"):
            BoardLayout.from_window(rows, columns, 400.0, 400.0)

    def test_from_window_too_small_raises(self) -> None:
        with pytest.raises(InvalidConfiguration):
            BoardLayout.from_window(10, 10, 10.0, 10.0, gap=2.0)


# ============================================================================
# Placement Tests
# ============================================================================

class TestPlacement:
    """Test world positions of cells."""

    def test_cell_origin(self, layout: BoardLayout) -> None:
        assert layout.cell_origin(0, 0) == (0.0, 0.0)
        assert layout.cell_origin(2, 3) == (36.0, 24.0)

    def test_cell_center(self, layout: BoardLayout) -> None:
        assert layout.cell_center(1, 2) == (29.0, 17.0)

    def test_origin_offset_shifts_every_cell(self) -> None:
        layout = BoardLayout(2, 2, cell_size=10.0, gap=2.0, origin_x=-5.0, origin_y=7.0)
        assert layout.cell_origin(1, 1) == (7.0, 19.0)

    def test_center_is_middle_of_grid(self, layout: BoardLayout) -> None:
        """4 columns and 3 rows span 46 x 34 units."""
        assert layout.center == (23.0, 17.0)


# ============================================================================
# Hit Testing Tests
# ============================================================================

class TestLocate:
    """Test mapping world points back to cells."""

    @pytest.mark.parametrize(
        "cell_size, gap, rows, columns",
        [(10.0, 2.0, 3, 4), (18.0, 2.0, 20, 20), (7.5, 0.0, 5, 9), (1.0, 3.25, 6, 2)],
    )
    def test_cell_centers_map_back(
        self, cell_size: float, gap: float, rows: int, columns: int
    ) -> None:
        layout = BoardLayout(rows, columns, cell_size=cell_size, gap=gap)
        for row in range(rows):
            for col in range(columns):
                assert layout.locate(*layout.cell_center(row, col)) == (row, col)

    def test_centers_map_back_with_offset(self) -> None:
        layout = BoardLayout(3, 3, cell_size=10.0, gap=2.0, origin_x=-100.0, origin_y=50.0)
        assert layout.locate(*layout.cell_center(2, 1)) == (2, 1)

    def test_cell_corner_belongs_to_cell(self, layout: BoardLayout) -> None:
        assert layout.locate(12.0, 0.0) == (0, 1)

    @pytest.mark.parametrize(
        "point",
        [(11.0, 5.0), (5.0, 11.0), (10.0, 5.0), (23.5, 23.5)],
    )
    def test_gap_points_map_to_none(
        self, layout: BoardLayout, point: tuple
    ) -> None:
        assert layout.locate(*point) is None

    @pytest.mark.parametrize(
        "point",
        [(-0.5, 5.0), (5.0, -0.5), (48.5, 5.0), (5.0, 36.5), (1000.0, 1000.0)],
    )
    def test_points_off_the_grid_map_to_none(
        self, layout: BoardLayout, point: tuple
    ) -> None:
        assert layout.locate(*point) is None


# ============================================================================
# Un-projection Tests
# ============================================================================

class TestWindowToWorld:
    """Test converting window cursor positions to world points."""

    def test_window_center_is_grid_center(self, layout: BoardLayout) -> None:
        assert layout.window_to_world(200.0, 150.0, 400.0, 300.0) == layout.center

    def test_window_y_points_down(self, layout: BoardLayout) -> None:
        center_x, center_y = layout.center
        x, y = layout.window_to_world(210.0, 140.0, 400.0, 300.0)
        assert (x, y) == (center_x + 10.0, center_y + 10.0)

    def test_cursor_resolves_to_cell(self, layout: BoardLayout) -> None:
        """Cursor over the bottom-left cell in a window the grid's size."""
        point = layout.window_to_world(5.0, 29.0, 46.0, 34.0)
        assert layout.locate(*point) == (0, 0)
