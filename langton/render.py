"""Display copy of a grid with the ant drawn on top."""


def render(grid, ant):
    """Return a new rows x cols tuple of one-character strings.

    ``.`` is white, ``#`` is black and the ant's cell shows its heading
    (``^ > v <``). ``grid`` is only read.
    """
    display = [[cell.value for cell in row] for row in grid.rows_view()]
    display[ant.row][ant.col] = ant.direction.glyph
    return tuple(tuple(row) for row in display)


def render_lines(display):
    """Join each rendered row into a string, e.g. for JSON transport."""
    return ["".join(row) for row in display]
