"""
Shared fixtures for the maze test suite.
"""

import matplotlib

matplotlib.use("Agg")  # No display during tests

import pytest

from grid_core import Grid
from maze_gen import MazeAlgorithm, generate_maze
from rand_source import RandomSource


class FirstChoiceSource:
    """
    A scripted random source: always the first option.

    uniform_bool returns `flip`, uniform_int returns `start` and sample_one
    returns the first element, so carving output can be asserted exactly.
    """

    def __init__(self, flip: bool = False):
        self.flip = flip
        self.calls = []

    def uniform_bool(self, prob=0.5):
        self.calls.append(("uniform_bool", prob))
        return self.flip

    def uniform_int(self, start, end=None):
        self.calls.append(("uniform_int", start, end))
        return 0 if end is None else start

    def sample_one(self, items):
        items = list(items)
        self.calls.append(("sample_one", items))
        return items[0]


def parse_text_maze(text: str, rows: int, cols: int, cell_width: int = 3):
    """
    Rebuilds the set of linked (cell, cell) pairs from a text rendering by
    reading which wall positions are open.
    """
    lines = text.rstrip("\n").split("\n")
    assert len(lines) == 2 * rows + 1
    stride = cell_width + 1
    pairs = set()
    for row in range(rows):
        cells_line = lines[1 + 2 * row]
        walls_line = lines[2 + 2 * row]
        for col in range(cols):
            cell = row * cols + col
            if cells_line[(col + 1) * stride] == " ":
                pairs.add((cell, cell + 1))
            if walls_line[col * stride + 1] == " ":
                pairs.add((cell, cell + cols))
    return pairs


@pytest.fixture
def rng():
    """A fixed-seed random source."""
    return RandomSource(seed=1234)


@pytest.fixture
def first_choice():
    return FirstChoiceSource()


@pytest.fixture
def scripted():
    """Factory for scripted sources, e.g. scripted(flip=True)."""
    return FirstChoiceSource


@pytest.fixture
def empty_grid():
    """A 3x5 grid with no links."""
    return Grid(3, 5)


@pytest.fixture
def carved_grid():
    """A 6x8 backtracker maze with a fixed seed."""
    grid = Grid(6, 8)
    generate_maze(grid, MazeAlgorithm.BACKTRACKER, RandomSource(seed=42))
    return grid


@pytest.fixture
def corridor():
    """A 1x4 grid linked end to end: 0 - 1 - 2 - 3."""
    grid = Grid(1, 4)
    grid.link(0, 1)
    grid.link(1, 2)
    grid.link(2, 3)
    return grid
