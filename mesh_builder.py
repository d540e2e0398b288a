# mesh_builder.py
import numpy as np
import trimesh
import trimesh.creation
from typing import List

# Import from other project modules
import constants as const
from errors import ArgumentOutOfRange
from geometry import Segment, extract_wall_segments, is_horizontal
from grid_core import Grid


def _wall_box(
    segment: Segment,
    rows: int,
    cell_size: float,
    wall_thickness: float,
    wall_height: float,
) -> trimesh.Trimesh:
    """A box standing on z=0 along one wall segment. North is +Y."""
    (x1, y1), (x2, y2) = segment
    length = (abs(x2 - x1) + abs(y2 - y1)) * cell_size + wall_thickness
    if is_horizontal(segment):
        extents = [length, wall_thickness, wall_height]
    else:
        extents = [wall_thickness, length, wall_height]
    center = [
        (x1 + x2) / 2.0 * cell_size,
        (rows - (y1 + y2) / 2.0) * cell_size,
        wall_height / 2.0,
    ]
    box = trimesh.creation.box(extents=extents)
    box.apply_translation(center)
    return box


def create_maze_mesh(
    grid: Grid,
    cell_size: float = const.MAZE_3D_CELL_SIZE,
    wall_thickness: float = const.MAZE_3D_WALL_THICKNESS,
    wall_height: float = const.MAZE_3D_WALL_HEIGHT,
    base_height: float = const.MAZE_3D_BASE_HEIGHT,
) -> trimesh.Trimesh:
    """
    Builds a printable 3D model of the maze: one extruded box per wall
    segment on top of a solid base slab whose top face is at z=0.
    """
    print("\n--- Generating 3D Maze Mesh ---")
    print(
        f"    Cell={cell_size:.2f}, Wall T/H={wall_thickness:.2f}/{wall_height:.2f}, "
        f"Base H={base_height:.2f}"
    )
    if min(cell_size, wall_thickness, wall_height) <= const.GEOMETRY_TOLERANCE:
        raise ArgumentOutOfRange("Cell size, wall thickness and wall height must be positive.")

    wall_segments = extract_wall_segments(grid)
    all_meshes: List[trimesh.Trimesh] = [
        _wall_box(segment, grid.rows, cell_size, wall_thickness, wall_height)
        for segment in wall_segments
    ]
    print(f"  Extruded {len(all_meshes)} wall segments.")

    if base_height > const.GEOMETRY_TOLERANCE:
        base_mesh = trimesh.creation.box(
            extents=[
                grid.cols * cell_size + wall_thickness,
                grid.rows * cell_size + wall_thickness,
                base_height,
            ]
        )
        base_mesh.apply_translation(
            [grid.cols * cell_size / 2.0, grid.rows * cell_size / 2.0, -base_height / 2.0]
        )
        all_meshes.append(base_mesh)
    else:
        print("  Skipping base creation.")

    combined = trimesh.util.concatenate(all_meshes)
    combined.merge_vertices()
    print(
        f"  Combined mesh: {len(combined.vertices)}V, {len(combined.faces)}F, "
        f"bounds {np.round(combined.bounds, 3).tolist()}"
    )
    return combined


def export_stl(mesh: trimesh.Trimesh, filename: str = "maze.stl"):
    """Exports the 3D maze model as an STL file."""
    print(f"  Exporting maze mesh ({len(mesh.faces)}F) to {filename}...")
    mesh.export(filename)
    print("  Export complete.")
