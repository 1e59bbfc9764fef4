"""Fixed-size two-colour grid the ant walks on."""

from enum import Enum

from core.errors import CorruptedGridState, InvalidRunParameters


class Cell(Enum):
    WHITE = "."
    BLACK = "#"


class Grid:
    """``rows x cols`` cells, every one WHITE or BLACK. Never resized."""

    __slots__ = ("rows", "cols", "_cells")

    def __init__(self, rows, cols):
        for name, value in (("rows", rows), ("cols", cols)):
            if isinstance(value, bool) or not isinstance(value, int) or value <= 0:
                raise InvalidRunParameters(f"{name} must be a positive integer, got {value!r}",
                                           parameter=name, value=value)
        self.rows = rows
        self.cols = cols
        self._cells = [[Cell.WHITE] * cols for _ in range(rows)]

    @property
    def shape(self):
        return self.rows, self.cols

    def contains(self, row, col):
        return 0 <= row < self.rows and 0 <= col < self.cols

    def color_at(self, row, col):
        return self._cells[row][col]

    def paint(self, row, col, cell):
        if not isinstance(cell, Cell):
            raise CorruptedGridState((row, col), cell)
        self._cells[row][col] = cell

    def count(self, cell):
        return sum(row.count(cell) for row in self._cells)

    def rows_view(self):
        """Row-major tuples; a detached copy of the current colours."""
        return tuple(tuple(row) for row in self._cells)

    def __eq__(self, other):
        if not isinstance(other, Grid):
            return NotImplemented
        return self._cells == other._cells

    __hash__ = None

    def __repr__(self):
        return f"Grid(rows={self.rows}, cols={self.cols}, black={self.count(Cell.BLACK)})"
