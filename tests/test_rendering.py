import pytest

from analysis import distances
from conftest import parse_text_maze
from errors import ArgumentOutOfRange, InvalidCell
from grid_core import Grid
from maze_gen import MazeAlgorithm, generate_maze
from pixel import Pixel
from rand_source import RandomSource
from rendering import distance_colors, image_size, render_pixels, render_text

BLACK = (0, 0, 0, 255)
WHITE = (255, 255, 255, 255)

UNLINKED_3X5 = (
    "+---+---+---+---+---+\n"
    "|   |   |   |   |   |\n"
    "+---+---+---+---+---+\n"
    "|   |   |   |   |   |\n"
    "+---+---+---+---+---+\n"
    "|   |   |   |   |   |\n"
    "+---+---+---+---+---+\n"
)


class TestRenderText:
    def test_unlinked_grid(self, empty_grid):
        assert render_text(empty_grid) == UNLINKED_3X5

    def test_links_open_walls(self, empty_grid):
        empty_grid.link((0, 0), (0, 1))
        empty_grid.link((0, 0), (1, 0))
        lines = render_text(empty_grid).splitlines()
        assert lines[1] == "|       |   |   |   |"
        assert lines[2] == "+   +---+---+---+---+"
        assert lines[3:] == UNLINKED_3X5.splitlines()[3:]

    def test_shape(self):
        text = render_text(Grid(4, 6), cell_width=2)
        lines = text.splitlines()
        assert text.endswith("\n")
        assert len(lines) == 2 * 4 + 1
        assert all(len(line) == 6 * 3 + 1 for line in lines)

    def test_fixed_link_set_is_readable_back(self, empty_grid):
        pairs = {(0, 1), (1, 2), (2, 7), (5, 10), (6, 11), (11, 12), (8, 9), (4, 9), (13, 14)}
        for a, b in pairs:
            empty_grid.link(a, b)
        assert parse_text_maze(render_text(empty_grid), 3, 5) == pairs

    @pytest.mark.parametrize("algorithm", list(MazeAlgorithm))
    def test_carved_maze_is_readable_back(self, algorithm):
        grid = generate_maze(Grid(7, 9), algorithm, RandomSource(17))
        assert parse_text_maze(render_text(grid), 7, 9) == set(grid.links())

    def test_wider_cells(self, corridor):
        assert render_text(corridor, cell_width=5) == (
            "+-----+-----+-----+-----+\n"
            "|" + " " * 23 + "|\n"
            "+-----+-----+-----+-----+\n"
        )

    @pytest.mark.parametrize("cell_width", [0, -3])
    def test_invalid_cell_width(self, empty_grid, cell_width):
        with pytest.raises(ArgumentOutOfRange):
            render_text(empty_grid, cell_width=cell_width)

    def test_invalid_margin(self, empty_grid):
        with pytest.raises(ArgumentOutOfRange):
            render_text(empty_grid, auto_width_margin=-1)


class TestRenderTextLabels:
    def test_mapping_labels_are_centered(self, empty_grid):
        lines = render_text(empty_grid, labels={0: 5, (2, 4): "x"}).splitlines()
        assert lines[1] == "| 5 |   |   |   |   |"
        assert lines[5] == "|   |   |   |   | x |"

    def test_sequence_labels(self):
        grid = Grid(1, 3)
        assert render_text(grid, labels=["a", None, 7]).splitlines()[1] == "| a |   | 7 |"

    def test_sequence_must_cover_every_cell(self, empty_grid):
        with pytest.raises(ArgumentOutOfRange):
            render_text(empty_grid, labels=[1, 2, 3])

    def test_mapping_with_invalid_cell(self, empty_grid):
        with pytest.raises(InvalidCell):
            render_text(empty_grid, labels={(9, 9): "x"})

    def test_long_labels_are_truncated(self):
        grid = Grid(1, 2)
        assert render_text(grid, labels={0: "12345"}).splitlines()[1] == "|123|   |"

    def test_auto_width_fits_longest_label(self):
        grid = Grid(1, 2)
        grid.link(0, 1)
        text = render_text(grid, labels={0: "12345", 1: "7"}, auto_width_margin=1)
        assert text == (
            "+-------+-------+\n"
            "| 12345     7   |\n"
            "+-------+-------+\n"
        )

    def test_auto_width_never_narrows(self, empty_grid):
        text = render_text(empty_grid, labels={0: "1"}, cell_width=3, auto_width_margin=0)
        assert text.splitlines()[0] == UNLINKED_3X5.splitlines()[0]

    def test_distance_labels(self, corridor):
        text = render_text(corridor, labels=distances(corridor, 0))
        assert text.splitlines()[1] == "| 0   1   2   3 |"


class TestRenderPixels:
    def test_dimensions(self, empty_grid):
        assert image_size(empty_grid, 10, 2) == (62, 38)
        image = render_pixels(empty_grid, cell_size=10, border_width=2)
        assert (image.width, image.height) == (62, 38)

    def test_unlinked_walls_and_interiors(self, empty_grid):
        image = render_pixels(empty_grid)
        # Outer border
        assert image.get_pixel(0, 0) == BLACK
        assert image.get_pixel(61, 37) == BLACK
        assert image.get_pixel(5, 0) == BLACK
        assert image.get_pixel(0, 20) == BLACK
        # Interior of cell (0, 0) and the wall east of it
        assert image.get_pixel(5, 5) == WHITE
        assert image.get_pixel(12, 5) == BLACK
        assert image.get_pixel(13, 5) == BLACK
        assert image.get_pixel(14, 5) == WHITE

    def test_linked_walls_are_open_but_corners_stay(self, empty_grid):
        empty_grid.link((0, 0), (0, 1))
        empty_grid.link((0, 0), (1, 0))
        image = render_pixels(empty_grid)
        assert image.get_pixel(12, 5) == WHITE
        assert image.get_pixel(5, 12) == WHITE
        assert image.get_pixel(12, 12) == BLACK
        assert image.get_pixel(13, 13) == BLACK

    def test_every_corner_drawn_in_open_grid(self):
        grid = Grid(2, 2)
        grid.link(0, 1)
        grid.link(1, 3)
        grid.link(3, 2)
        grid.link(2, 0)
        image = render_pixels(grid, cell_size=4, border_width=1)
        assert (image.width, image.height) == (11, 11)
        assert image.get_pixel(5, 5) == BLACK
        assert image.get_pixel(5, 2) == WHITE
        assert image.get_pixel(2, 5) == WHITE

    def test_custom_colors(self, empty_grid):
        image = render_pixels(
            empty_grid,
            border_color="#ff0000",
            background_color=Pixel(0, 0, 255),
            cell_colors={(2, 4): "#00ff00", 0: Pixel(1, 2, 3)},
        )
        assert image.get_pixel(0, 0) == (255, 0, 0, 255)
        assert image.get_pixel(20, 5) == (0, 0, 255, 255)
        assert image.get_pixel(5, 5) == (1, 2, 3, 255)
        x, y = 4 * 12 + 2, 2 * 12 + 2
        assert image.get_pixel(x, y) == (0, 255, 0, 255)
        assert image.get_pixel(x + 9, y + 9) == (0, 255, 0, 255)
        assert image.get_pixel(x + 10, y) == (255, 0, 0, 255)

    def test_single_cell(self):
        image = render_pixels(Grid(1, 1), cell_size=3, border_width=1)
        assert (image.width, image.height) == (5, 5)
        assert image.get_pixel(2, 2) == WHITE
        assert all(image.get_pixel(x, 0) == BLACK for x in range(5))
        assert all(image.get_pixel(4, y) == BLACK for y in range(5))

    @pytest.mark.parametrize("cell_size,border_width", [(0, 2), (10, 0), (-1, 1)])
    def test_invalid_sizes(self, empty_grid, cell_size, border_width):
        with pytest.raises(ArgumentOutOfRange):
            render_pixels(empty_grid, cell_size=cell_size, border_width=border_width)


class TestDistanceColors:
    def test_empty(self):
        assert distance_colors({}) == {}

    def test_endpoints_differ(self, corridor):
        colors = distance_colors(distances(corridor, 0))
        assert set(colors) == {0, 1, 2, 3}
        assert colors[0] != colors[3]
        assert all(c.alpha == 255 for c in colors.values())

    def test_single_cell_does_not_divide_by_zero(self):
        colors = distance_colors({0: 0})
        assert isinstance(colors[0], Pixel)

    def test_max_distance_scales(self):
        clipped = distance_colors({0: 0, 1: 4}, max_distance=4)
        scaled = distance_colors({0: 0, 1: 4}, max_distance=8)
        assert clipped[0] == scaled[0]
        assert clipped[1] != scaled[1]
