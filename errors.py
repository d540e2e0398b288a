# errors.py
"""Typed failures raised by the maze engine.

Every error is raised at the point of validation. Each kind also derives
from the closest builtin exception so callers may catch either.
"""


class MazeError(Exception):
    """Base class for all maze engine errors."""


class InvalidDimension(MazeError, ValueError):
    """Non-positive rows/cols (or width/height) at construction."""


class InvalidCoordinate(MazeError, IndexError):
    """A row, column or linear cell index outside the grid bounds."""


InvalidCell = InvalidCoordinate


class NotAdjacent(MazeError, ValueError):
    """link/unlink invoked on two cells that are not geometric neighbours."""


class ArgumentOutOfRange(MazeError, ValueError):
    """Probability outside [0, 1], empty sample set, or malformed range."""


class InvalidPixelFormat(MazeError, ValueError):
    """A pixel string that is not '#rrggbb' or '#rrggbb.aa'."""
