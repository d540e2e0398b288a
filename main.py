# main.py
import os
import time

# Import project modules
import constants as const
from analysis import distances, longest_path
from grid_core import Grid
from maze_gen import generate_maze
from mesh_builder import create_maze_mesh, export_stl
from rand_source import RandomSource
from rendering import distance_colors, render_pixels, render_text
from visualization import (
    visualize_maze_distances,
    visualize_maze_solution,
    visualize_maze_walls,
)


def run_demo_generation(
    output_dir: str = "output",
    rows: int = 10,
    cols: int = 20,
    algorithm: str = const.DEFAULT_ALGORITHM,
    seed=None,
):
    """Carves one maze, reports on it and writes figures and an STL to output_dir."""
    start_time = time.time()
    os.makedirs(output_dir, exist_ok=True)

    print("\n--- Configuration ---")
    print(f"  Grid: {rows}x{cols}, Algorithm: {algorithm}, Seed: {seed}")

    grid = Grid(rows, cols)
    rng = RandomSource(seed)
    generate_maze(grid, algorithm, rng)

    # --- Analysis ---
    print("\n--- Analysis ---")
    dists = distances(grid, (0, 0))
    dead_ends = grid.dead_ends()
    path = longest_path(grid)
    print(f"  Dead ends: {len(dead_ends)}/{grid.size} cells.")
    print(render_text(grid, labels=dists, auto_width_margin=1))

    # --- Images ---
    image = render_pixels(grid, cell_colors=distance_colors(dists))
    print(f"  Rendered {image.width}x{image.height} pixel buffer.")

    print("\n--- Generating Visualizations ---")
    visualize_maze_walls(grid, filename=os.path.join(output_dir, "maze_walls.png"))
    visualize_maze_distances(
        grid, (0, 0), filename=os.path.join(output_dir, "maze_distances.png")
    )
    visualize_maze_solution(grid, filename=os.path.join(output_dir, "maze_solution.png"))

    # --- Create 2D Flat STL ---
    mesh = create_maze_mesh(grid)
    export_stl(mesh, os.path.join(output_dir, "maze_2d_flat.stl"))

    end_time = time.time()
    print(f"\n--- Total Execution Time: {end_time - start_time:.2f} seconds ---")
    return {
        "grid": grid,
        "distances": dists,
        "dead_ends": dead_ends,
        "longest_path": path,
        "image": image,
        "mesh": mesh,
    }


if __name__ == "__main__":
    run_demo_generation()
