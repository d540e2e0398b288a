# analysis.py
from collections import deque
from typing import Dict, List, Optional, Tuple

# Import from other project modules
from grid_core import CellRef, Grid


def _breadth_first(
    grid: Grid, source: CellRef, goal: Optional[int] = None
) -> Tuple[List[int], Dict[int, int], Dict[int, Optional[int]]]:
    """
    Breadth-first search over links from `source`.

    Returns (discovery order, distances, predecessors). Stops as soon as
    `goal` is dequeued, if given.
    """
    start = grid.cell(source)
    queue = deque([start])
    distances: Dict[int, int] = {start: 0}
    predecessor: Dict[int, Optional[int]] = {start: None}
    order: List[int] = [start]

    while queue:
        current_cell = queue.popleft()
        if current_cell == goal:
            break

        # Sorted so discovery order (and therefore tie-breaking) is reproducible
        for neighbour in sorted(grid.links_of(current_cell)):
            if neighbour not in distances:
                distances[neighbour] = distances[current_cell] + 1
                predecessor[neighbour] = current_cell
                order.append(neighbour)
                queue.append(neighbour)

    return order, distances, predecessor


def _walk_back(predecessor: Dict[int, Optional[int]], end: int) -> List[int]:
    path: List[int] = []
    current: Optional[int] = end
    while current is not None:
        path.append(current)
        current = predecessor[current]
    path.reverse()
    return path


def _first_maximum(order: List[int], dists: Dict[int, int]) -> int:
    best = order[0]
    for cell in order:
        if dists[cell] > dists[best]:
            best = cell
    return best


def distances(grid: Grid, source: CellRef) -> Dict[int, int]:
    """
    Computes the shortest link distance from `source` to every reachable cell.
    Unreachable cells are absent from the result.
    """
    _, dists, _ = _breadth_first(grid, source)
    return dists


def farthest(grid: Grid, source: CellRef) -> Tuple[int, int]:
    """
    Returns (cell, distance) for the cell farthest from `source`.
    Ties go to whichever cell the search discovered first.
    """
    order, dists, _ = _breadth_first(grid, source)
    best = _first_maximum(order, dists)
    return best, dists[best]


def shortest_path(grid: Grid, start: CellRef, goal: CellRef) -> List[int]:
    """
    Finds the shortest path between two cells using Breadth-First Search on links.
    The path runs from start to goal inclusive; start == goal gives a single
    cell. Returns an empty list if the goal is unreachable.
    """
    start_cell = grid.cell(start)
    goal_cell = grid.cell(goal)
    _, _, predecessor = _breadth_first(grid, start_cell, goal=goal_cell)
    if goal_cell not in predecessor:
        return []
    return _walk_back(predecessor, goal_cell)


def longest_path(grid: Grid, start: CellRef = 0) -> List[int]:
    """
    Returns the longest path through the maze.

    Two passes: find the cell X farthest from `start`, then the cell Y
    farthest from X, and walk Y's predecessors back to X. This is the
    diameter only when the links form a tree, which every carving algorithm
    guarantees.
    """
    print("--- Finding Longest Path ---")
    end_x, _ = farthest(grid, start)
    order, dists, predecessor = _breadth_first(grid, end_x)
    end_y = _first_maximum(order, dists)
    path = _walk_back(predecessor, end_y)
    print(
        f"  Longest path: {grid.coords(end_x)} -> {grid.coords(end_y)}, "
        f"{len(path) - 1} steps."
    )
    return path


def is_spanning_tree(grid: Grid) -> bool:
    """Checks that the links connect every cell with no cycles."""
    if grid.link_count() != grid.size - 1:
        return False
    return len(distances(grid, 0)) == grid.size
