# utils.py
import numbers
from enum import Enum
from typing import Optional, Tuple

import constants as const
from errors import ArgumentOutOfRange, InvalidCoordinate


class Direction(Enum):
    """Cardinal direction between grid cells. Rows grow southward."""

    NORTH = const.DIR_NORTH
    SOUTH = const.DIR_SOUTH
    EAST = const.DIR_EAST
    WEST = const.DIR_WEST

    @property
    def inverse(self) -> "Direction":
        return _INVERSE[self]

    @property
    def delta(self) -> Tuple[int, int]:
        """(d_row, d_col) for one step in this direction."""
        return _DELTA[self]

    @property
    def bit(self) -> int:
        """Bit used for this direction in a per-cell link mask."""
        return _BIT[self]

    @classmethod
    def from_name(cls, name: str) -> "Direction":
        if not isinstance(name, str):
            raise ArgumentOutOfRange(f"expected direction name, got {name!r}")
        try:
            return cls(name.lower())
        except ValueError:
            raise ArgumentOutOfRange(f'expected direction, got "{name}"') from None

    def __str__(self) -> str:
        return self.value


_INVERSE = {
    Direction.NORTH: Direction.SOUTH,
    Direction.SOUTH: Direction.NORTH,
    Direction.EAST: Direction.WEST,
    Direction.WEST: Direction.EAST,
}
_DELTA = {
    Direction.NORTH: (-1, 0),
    Direction.SOUTH: (1, 0),
    Direction.EAST: (0, 1),
    Direction.WEST: (0, -1),
}
_BIT = {
    Direction.NORTH: 0b0001,
    Direction.SOUTH: 0b0010,
    Direction.EAST: 0b0100,
    Direction.WEST: 0b1000,
}


def is_integer(value) -> bool:
    """True for Python and numpy integers, but not for bools."""
    return isinstance(value, numbers.Integral) and not isinstance(value, bool)


def in_bounds(row: int, col: int, rows: int, cols: int) -> bool:
    """Checks if (row, col) lies inside a rows x cols grid."""
    return 0 <= row < rows and 0 <= col < cols


def to_index(row: int, col: int, rows: int, cols: int) -> int:
    """Converts a (row, col) pair to its linear, row-major cell index."""
    if not in_bounds(row, col, rows, cols):
        raise InvalidCoordinate(
            f"cell ({row}, {col}) is outside a {rows}x{cols} grid"
        )
    return row * cols + col


def to_coords(index: int, rows: int, cols: int) -> Tuple[int, int]:
    """Converts a linear cell index back to its (row, col) pair."""
    if not (0 <= index < rows * cols):
        raise InvalidCoordinate(
            f"cell index {index} is outside a {rows}x{cols} grid"
        )
    return divmod(index, cols)


def step(
    row: int, col: int, direction: Direction, rows: int, cols: int
) -> Optional[Tuple[int, int]]:
    """
    Applies the direction's delta to (row, col).
    Returns None if the result falls off the grid.
    """
    d_row, d_col = direction.delta
    new_row, new_col = row + d_row, col + d_col
    if not in_bounds(new_row, new_col, rows, cols):
        return None
    return new_row, new_col
