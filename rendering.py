# rendering.py
import matplotlib
import matplotlib.colors as mcolors
from collections.abc import Mapping
from typing import Dict, Optional, Union

# Import from other project modules
import constants as const
from errors import ArgumentOutOfRange
from geometry import extract_wall_segments, is_horizontal
from grid_core import Grid
from pixel import Pixel, PixelBuffer
from utils import Direction


# --- Text Rendering ---

def _collect_labels(grid: Grid, labels) -> Dict[int, str]:
    """Normalizes a mapping (cell -> value) or a per-cell sequence to strings."""
    if labels is None:
        return {}
    if isinstance(labels, Mapping):
        items = ((grid.cell(ref), value) for ref, value in labels.items())
    else:
        labels = list(labels)
        if len(labels) != grid.size:
            raise ArgumentOutOfRange(
                f"expected {grid.size} labels, one per cell, got {len(labels)}"
            )
        items = enumerate(labels)
    return {cell: str(value) for cell, value in items if value is not None}


def render_text(
    grid: Grid,
    labels=None,
    cell_width: int = const.DEFAULT_TEXT_CELL_WIDTH,
    auto_width_margin: Optional[int] = None,
) -> str:
    """
    Draws the maze with '+', '-', '|' and spaces.

    `labels` is an optional mapping from cell to value, or a sequence with
    one value per cell; each label is centered in its cell and truncated to
    the cell width. Passing `auto_width_margin` widens the cells instead, to
    fit the longest label plus that margin on each side.
    """
    if cell_width < const.MIN_TEXT_CELL_WIDTH:
        raise ArgumentOutOfRange(
            f"invalid cell width {cell_width}, expected positive integer"
        )
    if auto_width_margin is not None and auto_width_margin < 0:
        raise ArgumentOutOfRange(
            f"invalid auto width margin {auto_width_margin}, expected non-negative integer"
        )

    cell_labels = _collect_labels(grid, labels)
    width = cell_width
    if auto_width_margin is not None:
        longest = max((len(text) for text in cell_labels.values()), default=0)
        width = max(width, longest + 2 * auto_width_margin)

    def wall_below(open_: bool) -> str:
        fill = const.TEXT_OPEN if open_ else const.TEXT_HORIZONTAL_WALL
        return fill * width + const.TEXT_CORNER

    # Top border
    lines = [const.TEXT_CORNER + wall_below(False) * grid.cols]

    for row in range(grid.rows):
        cells_line = const.TEXT_VERTICAL_WALL
        walls_line = const.TEXT_CORNER
        for col in range(grid.cols):
            cell = grid.cell((row, col))
            text = cell_labels.get(cell, "")[:width]
            cells_line += f"{text:^{width}}"
            if grid.linked_in_direction(cell, Direction.EAST):
                cells_line += const.TEXT_OPEN
            else:
                cells_line += const.TEXT_VERTICAL_WALL
            walls_line += wall_below(grid.linked_in_direction(cell, Direction.SOUTH))
        lines.append(cells_line)
        lines.append(walls_line)

    return "\n".join(lines) + "\n"


# --- Pixel Rendering ---

def image_size(
    grid: Grid,
    cell_size: int = const.DEFAULT_IMAGE_CELL_SIZE,
    border_width: int = const.DEFAULT_IMAGE_BORDER_WIDTH,
):
    """(width, height) in pixels of the rendered maze."""
    stride = cell_size + border_width
    return grid.cols * stride + border_width, grid.rows * stride + border_width


def render_pixels(
    grid: Grid,
    cell_size: int = const.DEFAULT_IMAGE_CELL_SIZE,
    border_width: int = const.DEFAULT_IMAGE_BORDER_WIDTH,
    border_color: Union[Pixel, str] = const.DEFAULT_BORDER_COLOR,
    background_color: Union[Pixel, str] = const.DEFAULT_BACKGROUND_COLOR,
    cell_colors: Optional[Mapping] = None,
) -> PixelBuffer:
    """
    Renders the maze into a PixelBuffer.

    Each cell is a cell_size square; walls are border_width thick and drawn
    along every unlinked edge and the outer boundary. Wall corners are
    always drawn. `cell_colors` optionally maps cells to the Pixel used to
    fill that cell's interior.
    """
    if cell_size < 1:
        raise ArgumentOutOfRange(f"invalid cell size {cell_size}, expected positive integer")
    if border_width < 1:
        raise ArgumentOutOfRange(
            f"invalid border width {border_width}, expected positive integer"
        )

    border = Pixel.coerce(border_color)
    stride = cell_size + border_width
    width, height = image_size(grid, cell_size, border_width)
    image = PixelBuffer(width, height, fill=background_color)

    # Cell interiors
    for ref, color in (cell_colors or {}).items():
        row, col = grid.coords(ref)
        x0 = col * stride + border_width
        y0 = row * stride + border_width
        image.fill_rect(x0, y0, x0 + cell_size, y0 + cell_size, color)

    # Walls
    for (x1, y1), (x2, y2) in extract_wall_segments(grid):
        px, py = x1 * stride, y1 * stride
        if is_horizontal(((x1, y1), (x2, y2))):
            image.fill_rect(px, py, x2 * stride + border_width, py + border_width, border)
        else:
            image.fill_rect(px, py, px + border_width, y2 * stride + border_width, border)

    # Lattice corners
    for row in range(grid.rows + 1):
        for col in range(grid.cols + 1):
            x, y = col * stride, row * stride
            image.fill_rect(x, y, x + border_width, y + border_width, border)

    return image


def distance_colors(
    distances: Dict[int, int],
    cmap: str = const.DEFAULT_DISTANCE_COLORMAP,
    max_distance: Optional[int] = None,
) -> Dict[int, Pixel]:
    """Maps each cell of a distance map to a Pixel along a matplotlib colormap."""
    if not distances:
        return {}
    if max_distance is None:
        max_distance = max(distances.values())
    colormap = matplotlib.colormaps[cmap]
    norm = mcolors.Normalize(vmin=0, vmax=max(1, max_distance))  # Normalize distances for color mapping

    colors = {}
    for cell, distance in distances.items():
        r, g, b, a = colormap(norm(distance))
        colors[cell] = Pixel(round(r * 255), round(g * 255), round(b * 255), round(a * 255))
    return colors
