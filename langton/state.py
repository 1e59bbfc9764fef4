from collections import namedtuple

from langton.render import render_lines
from utils.ksuid import generate_ksuid
from utils.timestamp import format_timestamp


class AntState(namedtuple("AntState", ("row", "col", "direction"))):
    """Immutable ant snapshot. Each step yields a new one."""

    __slots__ = ()

    @property
    def position(self):
        return self.row, self.col

    def to_dict(self):
        return {"row": self.row, "col": self.col, "direction": self.direction.glyph}


class RunResult:
    __slots__ = ("id", "timestamp", "steps", "ant", "cells", "black_cells")

    def __init__(self, steps, ant, cells, black_cells, id=None, timestamp=None):
        self.id = id or generate_ksuid()
        self.timestamp = timestamp or format_timestamp()
        self.steps = steps
        self.ant = ant
        self.cells = cells
        self.black_cells = black_cells

    @property
    def rows(self):
        return len(self.cells)

    @property
    def cols(self):
        return len(self.cells[0]) if self.cells else 0

    def lines(self):
        return render_lines(self.cells)

    def to_dict(self):
        return {
            "id": self.id,
            "timestamp": self.timestamp,
            "steps": self.steps,
            "rows": self.rows,
            "cols": self.cols,
            "ant": self.ant.to_dict(),
            "black_cells": self.black_cells,
            "grid": self.lines(),
        }
