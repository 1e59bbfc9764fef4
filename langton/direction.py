"""Compass directions for the ant and the arithmetic on them."""

from enum import IntEnum

from core.errors import InvalidDirectionSymbol


class Direction(IntEnum):
    """Clockwise order; successor is a right turn."""

    UP = 0
    RIGHT = 1
    DOWN = 2
    LEFT = 3

    @property
    def glyph(self):
        return _GLYPHS[self]

    @classmethod
    def from_glyph(cls, glyph):
        try:
            return _BY_GLYPH[glyph]
        except (KeyError, TypeError):
            raise InvalidDirectionSymbol(glyph) from None


TURNS = len(Direction)
CLOCKWISE = 1
COUNTER_CLOCKWISE = -1

_GLYPHS = {
    Direction.UP: "^",
    Direction.RIGHT: ">",
    Direction.DOWN: "v",
    Direction.LEFT: "<",
}
_BY_GLYPH = {glyph: direction for direction, glyph in _GLYPHS.items()}

# (d_row, d_col); rows grow downwards
_VECTORS = {
    Direction.UP: (-1, 0),
    Direction.RIGHT: (0, 1),
    Direction.DOWN: (1, 0),
    Direction.LEFT: (0, -1),
}


def rotate(direction, delta):
    """Quarter turn: +1 clockwise, -1 counter-clockwise."""
    if isinstance(delta, bool) or delta not in (CLOCKWISE, COUNTER_CLOCKWISE):
        raise ValueError(f"rotation delta must be +1 or -1, got {delta!r}")
    return Direction((direction + delta) % TURNS)


def step_vector(direction):
    return _VECTORS[direction]
