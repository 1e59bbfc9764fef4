"""Unit tests for the grid, ant state and run result."""

import pytest
from core.errors import CorruptedGridState, InvalidRunParameters
from langton.direction import Direction
from langton.grid import Cell, Grid
from langton.state import AntState, RunResult


class TestGrid:
    """Tests for Grid class."""

    def test_grid_creation(self):
        """Grid stores its shape and starts all white."""
        grid = Grid(rows=3, cols=4)
        assert grid.shape == (3, 4)
        assert grid.count(Cell.WHITE) == 12
        assert grid.count(Cell.BLACK) == 0

    @pytest.mark.parametrize("rows,cols", [(0, 4), (3, 0), (-1, 2), (2.5, 2), (True, 3), ("3", 3)])
    def test_grid_rejects_bad_dimensions(self, rows, cols):
        """Dimensions must be positive integers."""
        with pytest.raises(InvalidRunParameters):
            Grid(rows, cols)

    def test_contains(self, grid):
        """Bounds are half-open on both axes."""
        assert grid.contains(0, 0)
        assert grid.contains(2, 3)
        assert not grid.contains(-1, 0)
        assert not grid.contains(0, -1)
        assert not grid.contains(3, 0)
        assert not grid.contains(0, 4)

    def test_paint(self, grid):
        """Painting changes exactly one cell."""
        grid.paint(1, 2, Cell.BLACK)
        assert grid.color_at(1, 2) is Cell.BLACK
        assert grid.count(Cell.BLACK) == 1

    @pytest.mark.parametrize("value", ["#", 1, None])
    def test_paint_rejects_non_cells(self, grid, value):
        """Only Cell members may be stored."""
        with pytest.raises(CorruptedGridState):
            grid.paint(0, 0, value)
        assert grid.color_at(0, 0) is Cell.WHITE

    def test_rows_view_is_detached(self, grid):
        """rows_view is a snapshot, not a live view."""
        view = grid.rows_view()
        grid.paint(0, 0, Cell.BLACK)
        assert view[0][0] is Cell.WHITE
        assert isinstance(view, tuple)

    def test_equality(self):
        """Grids compare by contents."""
        a, b = Grid(2, 2), Grid(2, 2)
        assert a == b
        b.paint(1, 1, Cell.BLACK)
        assert a != b


class TestAntState:
    """Tests for AntState."""

    def test_fields(self):
        """AntState exposes position and direction."""
        ant = AntState(1, 2, Direction.DOWN)
        assert ant.position == (1, 2)
        assert ant.direction is Direction.DOWN

    def test_immutable(self):
        """AntState cannot be modified in place."""
        ant = AntState(0, 0, Direction.UP)
        with pytest.raises(AttributeError):
            ant.row = 5

    def test_uses_slots(self):
        """AntState adds no instance dict."""
        assert AntState.__slots__ == ()

    def test_to_dict(self):
        """AntState serializes its glyph."""
        assert AntState(2, 0, Direction.RIGHT).to_dict() == {"row": 2, "col": 0, "direction": ">"}


class TestRunResult:
    """Tests for RunResult."""

    def test_to_dict(self):
        """RunResult carries grid lines and ant."""
        cells = ((".", "#"), ("^", "."))
        result = RunResult(steps=3, ant=AntState(1, 0, Direction.UP), cells=cells, black_cells=1)
        d = result.to_dict()
        assert d["grid"] == [".#", "^."]
        assert d["rows"] == 2 and d["cols"] == 2
        assert d["steps"] == 3
        assert d["black_cells"] == 1
        assert d["ant"]["direction"] == "^"
        assert len(d["id"]) == 27
        assert "T" in d["timestamp"]

    def test_uses_slots(self):
        """RunResult uses __slots__."""
        assert hasattr(RunResult, "__slots__")
