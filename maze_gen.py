# maze_gen.py
from enum import Enum
from typing import List

# Import from other project modules
import constants as const
from analysis import is_spanning_tree
from errors import ArgumentOutOfRange
from grid_core import Grid
from utils import Direction


def binary_tree_maze(grid: Grid, rng) -> Grid:
    """
    Links every cell to its north or east neighbour, chosen at random.
    Produces a long unbroken corridor along the top row and east column.
    """
    grid.clear()
    for cell in grid.all_cells():
        candidates = [
            c
            for c in (
                grid.cell_in_direction(cell, Direction.NORTH),
                grid.cell_in_direction(cell, Direction.EAST),
            )
            if c is not None
        ]
        if candidates:
            grid.link(cell, rng.sample_one(candidates))
    return grid


def sidewinder_maze(
    grid: Grid, rng, close_probability: float = const.DEFAULT_SIDEWINDER_CLOSE_PROBABILITY
) -> Grid:
    """
    Row by row, grows runs of east-linked cells; each closed run is linked
    north through one of its members. The top row is a single run.
    """
    if not (0.0 <= close_probability <= 1.0):
        raise ArgumentOutOfRange(
            f"expected close probability in [0, 1], got {close_probability}"
        )
    grid.clear()
    for row in range(grid.rows):
        run: List[int] = []
        for col in range(grid.cols):
            cell = grid.cell((row, col))
            run.append(cell)

            at_eastern_boundary = grid.cell_in_direction(cell, Direction.EAST) is None
            at_northern_boundary = grid.cell_in_direction(cell, Direction.NORTH) is None
            should_close_out = at_eastern_boundary or (
                not at_northern_boundary and rng.uniform_bool(close_probability)
            )

            if should_close_out:
                member = rng.sample_one(run)
                north = grid.cell_in_direction(member, Direction.NORTH)
                if north is not None:
                    grid.link(member, north)
                run = []
            else:
                grid.link(cell, grid.cell_in_direction(cell, Direction.EAST))
    return grid


def backtracker_maze(grid: Grid, rng) -> Grid:
    """
    Generates maze passages using the Recursive Backtracking algorithm,
    driven by an explicit stack rather than call recursion.
    """
    grid.clear()
    visited = [False] * grid.size

    # Initialize stack and starting cell
    start_cell = grid.random_cell(rng)
    visited[start_cell] = True
    stack: List[int] = [start_cell]

    # Main loop
    while stack:
        current_cell = stack[-1]
        unvisited_neighbours = [
            c for c in sorted(grid.neighbors(current_cell)) if not visited[c]
        ]

        if unvisited_neighbours:
            next_cell = rng.sample_one(unvisited_neighbours)
            grid.link(current_cell, next_cell)
            visited[next_cell] = True
            stack.append(next_cell)
        else:
            # No unvisited neighbours, backtrack
            stack.pop()
    return grid


def hunt_and_kill_maze(grid: Grid, rng) -> Grid:
    """
    Random walk until stuck, then hunt row-major for the first unvisited
    cell bordering the visited region, link it in and walk on from there.
    """
    grid.clear()
    visited = [False] * grid.size

    current_cell = grid.random_cell(rng)
    visited[current_cell] = True

    while current_cell is not None:
        unvisited_neighbours = [
            c for c in sorted(grid.neighbors(current_cell)) if not visited[c]
        ]

        if unvisited_neighbours:
            next_cell = rng.sample_one(unvisited_neighbours)
            grid.link(current_cell, next_cell)
            visited[next_cell] = True
            current_cell = next_cell
            continue

        # Hunt phase
        current_cell = None
        for cell in grid.all_cells():
            if visited[cell]:
                continue
            visited_neighbours = [c for c in sorted(grid.neighbors(cell)) if visited[c]]
            if visited_neighbours:
                grid.link(cell, rng.sample_one(visited_neighbours))
                visited[cell] = True
                current_cell = cell
                break
    return grid


class MazeAlgorithm(Enum):
    """The available carving algorithms."""

    BINARY_TREE = "binary_tree"
    SIDEWINDER = "sidewinder"
    BACKTRACKER = "backtracker"
    HUNT_AND_KILL = "hunt_and_kill"

    @classmethod
    def from_name(cls, name: str) -> "MazeAlgorithm":
        key = name.lower().replace("-", "_").replace(" ", "_")
        try:
            return cls(key)
        except ValueError:
            choices = ", ".join(a.value for a in cls)
            raise ArgumentOutOfRange(
                f'unknown maze algorithm "{name}", expected one of: {choices}'
            ) from None

    def carve(self, grid: Grid, rng) -> Grid:
        return _CARVERS[self](grid, rng)


_CARVERS = {
    MazeAlgorithm.BINARY_TREE: binary_tree_maze,
    MazeAlgorithm.SIDEWINDER: sidewinder_maze,
    MazeAlgorithm.BACKTRACKER: backtracker_maze,
    MazeAlgorithm.HUNT_AND_KILL: hunt_and_kill_maze,
}


def generate_maze(grid: Grid, algorithm, rng) -> Grid:
    """
    Carves a maze into the grid with the chosen algorithm.
    `algorithm` may be a MazeAlgorithm or its name.
    """
    if not isinstance(algorithm, MazeAlgorithm):
        algorithm = MazeAlgorithm.from_name(algorithm)

    print(f"--- Starting Maze Generation ({algorithm.value}) ---")
    algorithm.carve(grid, rng)
    link_count = grid.link_count()
    print(f"--- Maze Generation Complete: {link_count} links over {grid.size} cells. ---")

    # Sanity check: every cell reachable, no cycles
    if not is_spanning_tree(grid):
        print(
            f"Warning: {algorithm.value} did not produce a spanning tree "
            f"({link_count} links, expected {grid.size - 1})."
        )
    return grid
