from core.errors import BaseSimError, BoundaryViolation, CorruptedGridState, InvalidRunParameters
from internal.logging import get_logger
from langton.direction import CLOCKWISE, COUNTER_CLOCKWISE, Direction, rotate, step_vector
from langton.grid import Cell, Grid
from langton.render import render
from langton.state import AntState, RunResult
from utils.ksuid import generate_ksuid

# colour under the ant -> (colour it becomes, turn)
RULE = {
    Cell.WHITE: (Cell.BLACK, CLOCKWISE),
    Cell.BLACK: (Cell.WHITE, COUNTER_CLOCKWISE),
}


def advance(grid, ant, step=None):
    """Apply one Langton's Ant transition and return the ant's next state.

    Order is fixed: flip the colour under the ant, turn, then move one cell.
    When the move would leave the grid the flip stays applied and
    BoundaryViolation is raised with the already rotated direction.
    """
    row, col = ant.row, ant.col
    current = grid.color_at(row, col)
    try:
        flipped, turn = RULE[current]
    except (KeyError, TypeError):
        raise CorruptedGridState((row, col), current, step=step) from None

    grid.paint(row, col, flipped)
    direction = rotate(ant.direction, turn)
    d_row, d_col = step_vector(direction)
    target = (row + d_row, col + d_col)
    if not grid.contains(*target):
        raise BoundaryViolation((row, col), target, direction, step=step)
    return AntState(target[0], target[1], direction)


def _require_int(name, value, minimum):
    if isinstance(value, bool) or not isinstance(value, int) or value < minimum:
        raise InvalidRunParameters(f"{name} must be an integer >= {minimum}, got {value!r}",
                                   parameter=name, value=value)


class Simulator:
    """Owns one grid and one ant for a single run."""

    def __init__(self, rows, cols, ant, logger=None):
        self._grid = Grid(rows, cols)
        _require_int("ant_row", ant.row, 0)
        _require_int("ant_col", ant.col, 0)
        if not self._grid.contains(ant.row, ant.col):
            raise InvalidRunParameters(f"Ant start {ant.position} lies outside the {rows}x{cols} grid",
                                       parameter="ant_position", value=list(ant.position))
        self._ant = ant
        self.steps_taken = 0
        self.failure = None
        self.run_id = generate_ksuid()
        self._log = (logger or get_logger()).bind(run_id=self.run_id)

    @property
    def ant(self):
        return self._ant

    @property
    def shape(self):
        return self._grid.shape

    def step(self):
        """Advance one step; a failure aborts the run for good."""
        self._check_intact()
        index = self.steps_taken + 1
        try:
            self._ant = advance(self._grid, self._ant, step=index)
        except BaseSimError as exc:
            self.failure = exc
            if isinstance(exc, BoundaryViolation):
                # the turn is committed even though the move is not
                self._ant = AntState(self._ant.row, self._ant.col, exc.direction)
            self._log.error("run aborted", error=exc, error_id=exc.error_id, step=index,
                            kind=type(exc).__name__)
            raise
        self.steps_taken = index
        return self._ant

    def run(self, steps):
        _require_int("steps", steps, 0)
        rows, cols = self._grid.shape
        self._log.debug("run start", rows=rows, cols=cols, ant=self._ant.to_dict(), steps=steps)
        for _ in range(steps):
            self.step()
        result = self.result()
        self._log.info("run complete", steps=result.steps, ant=result.ant.to_dict(),
                       black_cells=result.black_cells)
        return result

    def _check_intact(self):
        if self.failure is not None:
            raise RuntimeError(f"run {self.run_id} aborted at step {self.failure.step}")

    def render(self):
        self._check_intact()
        return render(self._grid, self._ant)

    def result(self):
        return RunResult(self.steps_taken, self._ant, self.render(),
                         self._grid.count(Cell.BLACK), id=self.run_id)


def simulate(rows, cols, ant_row, ant_col, direction_glyph, steps, logger=None):
    """Run a full simulation and return its RunResult."""
    direction = Direction.from_glyph(direction_glyph)
    _require_int("steps", steps, 0)
    simulator = Simulator(rows, cols, AntState(ant_row, ant_col, direction), logger=logger)
    return simulator.run(steps)


def compute_final_grid(rows, cols, ant_row, ant_col, direction_glyph, steps):
    """Final ``rows x cols`` character grid after ``steps`` moves.

    ``.`` marks white cells, ``#`` black cells, and the ant is drawn with
    its heading at its final cell. Raises InvalidDirectionSymbol,
    InvalidRunParameters, BoundaryViolation or CorruptedGridState; no
    partial grid is ever returned.
    """
    return simulate(rows, cols, ant_row, ant_col, direction_glyph, steps).cells
