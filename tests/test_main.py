import os

from analysis import is_spanning_tree
from main import run_demo_generation


def test_demo_writes_all_outputs(tmp_path, capsys):
    output_dir = str(tmp_path / "out")
    result = run_demo_generation(output_dir=output_dir, rows=4, cols=5, algorithm="sidewinder", seed=3)

    for name in ("maze_walls.png", "maze_distances.png", "maze_solution.png", "maze_2d_flat.stl"):
        assert os.path.getsize(os.path.join(output_dir, name)) > 0

    grid = result["grid"]
    assert (grid.rows, grid.cols) == (4, 5)
    assert is_spanning_tree(grid)
    assert len(result["distances"]) == grid.size
    assert result["dead_ends"] == grid.dead_ends()
    assert len(result["longest_path"]) >= 5
    assert (result["image"].width, result["image"].height) == (62, 50)
    assert len(result["mesh"].faces) > 0

    out = capsys.readouterr().out
    assert "Total Execution Time" in out


def test_demo_is_reproducible(tmp_path):
    first = run_demo_generation(output_dir=str(tmp_path / "a"), rows=3, cols=3, seed=11)
    second = run_demo_generation(output_dir=str(tmp_path / "b"), rows=3, cols=3, seed=11)
    assert first["grid"].links() == second["grid"].links()
