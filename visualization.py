# visualization.py
import matplotlib.pyplot as plt
import numpy as np
from typing import List, Optional, Tuple

# Import from other project modules
import constants as const
from analysis import distances, longest_path, shortest_path
from geometry import cell_center, extract_wall_segments
from grid_core import CellRef, Grid


# --- Visualization Helpers ---
def _setup_plot(grid: Grid) -> Tuple[plt.Figure, plt.Axes]:
    """Creates an axis in cell units with row 0 at the top."""
    fig, ax = plt.subplots(figsize=const.VIS_FIGURE_SIZE)
    margin = 0.25
    ax.set_xlim(-margin, grid.cols + margin)
    ax.set_ylim(grid.rows + margin, -margin)  # Inverted: rows grow downward
    ax.set_aspect("equal")
    ax.set_axis_off()
    return fig, ax


def _draw_walls(ax: plt.Axes, grid: Grid, alpha: float = 1.0) -> int:
    """Draws every wall segment. Returns the number drawn."""
    wall_segments = extract_wall_segments(grid)
    for (x1, y1), (x2, y2) in wall_segments:
        ax.plot(
            [x1, x2],
            [y1, y2],
            const.VIS_WALL_LINE_STYLE,
            lw=const.VIS_WALL_LINE_LW,
            alpha=alpha,
        )
    return len(wall_segments)


def _draw_entry_exit(ax: plt.Axes, grid: Grid, entry: Optional[int], exit_: Optional[int]):
    """Marks entry and exit cells."""
    if entry is not None:
        x, y = cell_center(grid, entry)
        ax.plot(
            x,
            y,
            const.VIS_ENTRY_MARKER,
            markersize=const.VIS_SOLUTION_ENTRY_MARKER_SIZE,
            mfc=const.VIS_SOLUTION_ENTRY_MFC,
            mec=const.VIS_SOLUTION_ENTRY_MEC,
            label="Entry",
        )
    if exit_ is not None:
        x, y = cell_center(grid, exit_)
        ax.plot(
            x,
            y,
            const.VIS_EXIT_MARKER,
            markersize=const.VIS_SOLUTION_EXIT_MARKER_SIZE,
            mfc=const.VIS_SOLUTION_EXIT_MFC,
            mec=const.VIS_SOLUTION_EXIT_MEC,
            label="Exit",
        )


def _save(fig: plt.Figure, filename: str):
    try:
        fig.savefig(filename, dpi=const.VIS_DPI, bbox_inches="tight")
    finally:
        plt.close(fig)


# --- Main Visualization Functions ---

def visualize_maze_walls(grid: Grid, filename: str = "maze_walls.png"):
    """Plots the maze walls."""
    print(f"--- Generating Maze Walls Visualization: {filename} ---")
    fig, ax = _setup_plot(grid)
    wall_count = _draw_walls(ax, grid)
    ax.set_title(f"Maze Walls ({grid.rows}x{grid.cols}, {wall_count} segments)")
    _save(fig, filename)
    print(f"  Walls visualization saved to {filename}")


def visualize_maze_distances(
    grid: Grid,
    source: CellRef = 0,
    filename: str = "maze_distances.png",
    cmap: str = const.DEFAULT_DISTANCE_COLORMAP,
):
    """Colors every cell by its link distance from `source`."""
    print(f"--- Generating Distance Visualization: {filename} ---")
    dists = distances(grid, source)
    print(f"  Distance search reached {len(dists)}/{grid.size} cells.")
    if len(dists) < grid.size:
        print("  Warning: Not all cells are reachable from the source cell!")

    # NaN marks unreachable cells
    field = np.full((grid.rows, grid.cols), np.nan)
    for cell, distance in dists.items():
        field[grid.coords(cell)] = distance

    colormap = plt.get_cmap(cmap).copy()
    colormap.set_bad(const.VIS_CONN_UNREACHABLE_COLOR)

    fig, ax = _setup_plot(grid)
    image = ax.imshow(
        np.ma.masked_invalid(field),
        cmap=colormap,
        extent=(0, grid.cols, grid.rows, 0),
        vmin=0,
        vmax=max(1, max(dists.values())),
    )
    _draw_walls(ax, grid)
    cbar = fig.colorbar(image, ax=ax, shrink=0.7, aspect=20, pad=0.08)
    cbar.set_label(f"Distance from Cell {grid.coords(source)}")
    ax.set_title(f"Maze Distances ({len(dists)}/{grid.size} Reachable)")
    _save(fig, filename)
    print(f"  Distance visualization saved to {filename}")


def visualize_maze_solution(
    grid: Grid,
    start: Optional[CellRef] = None,
    goal: Optional[CellRef] = None,
    filename: str = "maze_solution.png",
) -> List[int]:
    """
    Plots the path between two cells over the maze walls.
    With no endpoints given, the longest path is drawn. Returns the path.
    """
    print(f"--- Generating Maze Solution Visualization: {filename} ---")
    if start is None or goal is None:
        solution_path = longest_path(grid)
    else:
        solution_path = shortest_path(grid, start, goal)
    if not solution_path:
        print("  Could not find solution path, cannot visualize.")
        return solution_path

    fig, ax = _setup_plot(grid)
    _draw_walls(ax, grid, alpha=const.VIS_WALL_LINE_ALPHA)

    print(f"  Visualizing solution path ({len(solution_path)} cells)...")
    centers = [cell_center(grid, cell) for cell in solution_path]
    ax.plot(
        [x for x, _ in centers],
        [y for _, y in centers],
        const.VIS_SOLUTION_LINE_STYLE,
        lw=const.VIS_SOLUTION_LINE_LW,
        alpha=const.VIS_SOLUTION_LINE_ALPHA,
    )
    _draw_entry_exit(ax, grid, solution_path[0], solution_path[-1])

    ax.set_title("Maze Solution Path")
    _save(fig, filename)
    print(f"  Solution visualization saved to {filename}")
    return solution_path
