# geometry.py
from typing import List, Tuple

# Import from other project modules
from grid_core import Grid
from utils import Direction

Point = Tuple[float, float]
Segment = Tuple[Point, Point]


def extract_wall_segments(grid: Grid) -> List[Segment]:
    """
    Extracts 2D wall segments based on the grid structure and links.

    Coordinates are in cell units with x = column and y = row, so (0, 0) is
    the top-left corner and y grows southward. Each segment spans exactly one
    cell edge and is returned as ((x1, y1), (x2, y2)) with x1 <= x2, y1 <= y2.
    The outer boundary is always fully walled.
    """
    wall_segments: List[Segment] = []

    # --- Boundary Walls (North and West edges) ---
    for col in range(grid.cols):
        wall_segments.append(((col, 0), (col + 1, 0)))
    for row in range(grid.rows):
        wall_segments.append(((0, row), (0, row + 1)))

    # --- East and South wall of every cell ---
    # Cells on the east/south boundary have no neighbour there, so are never linked
    for cell in grid.all_cells():
        row, col = grid.coords(cell)
        if not grid.linked_in_direction(cell, Direction.EAST):
            wall_segments.append(((col + 1, row), (col + 1, row + 1)))
        if not grid.linked_in_direction(cell, Direction.SOUTH):
            wall_segments.append(((col, row + 1), (col + 1, row + 1)))

    return wall_segments


def is_horizontal(segment: Segment) -> bool:
    (_, y1), (_, y2) = segment
    return y1 == y2


def cell_center(grid: Grid, cell) -> Point:
    """Center of a cell in the same units as the wall segments."""
    row, col = grid.coords(cell)
    return (col + 0.5, row + 0.5)
