# grid_core.py
import numpy as np
from typing import Iterable, Iterator, List, Optional, Set, Tuple, Union

# Import from other project modules
import constants as const
from errors import InvalidCoordinate, InvalidDimension, NotAdjacent
from utils import Direction, is_integer, step, to_coords, to_index

# A cell is addressed by its linear index or by a (row, col) pair
CellRef = Union[int, Tuple[int, int]]


class Grid:
    """
    A rectangular grid of cells which may be linked to their neighbours.

    Cells are plain integers in [0, rows * cols), numbered row-major; a
    (row, col) pair is accepted anywhere a cell is expected. Link state is a
    per-cell bitmask of open directions, always written on both sides of a
    link. A new grid has no links at all.
    """

    def __init__(self, rows: int, cols: int):
        if not (is_integer(rows) and is_integer(cols)):
            raise InvalidDimension(f"expected integer rows and cols, got {rows!r}x{cols!r}")
        if rows < const.MIN_GRID_DIMENSION or cols < const.MIN_GRID_DIMENSION:
            raise InvalidDimension(
                f"expected a grid of size at least 1x1, got {rows}x{cols}"
            )
        self.rows = int(rows)
        self.cols = int(cols)
        self._links = np.zeros(self.rows * self.cols, dtype=np.uint8)

    # --- Addressing ---

    @property
    def size(self) -> int:
        """Returns the total number of cells in the grid."""
        return self.rows * self.cols

    def cell(self, ref: CellRef) -> int:
        """Normalizes a cell reference to its linear index, validating bounds."""
        if isinstance(ref, (tuple, list)):
            if len(ref) != 2:
                raise InvalidCoordinate(f"expected a (row, col) pair, got {ref!r}")
            row, col = ref
            if not (is_integer(row) and is_integer(col)):
                raise InvalidCoordinate(f"expected integer row and col, got {ref!r}")
            return to_index(int(row), int(col), self.rows, self.cols)
        if not is_integer(ref):
            raise InvalidCoordinate(f"expected a cell index or (row, col) pair, got {ref!r}")
        index = int(ref)
        to_coords(index, self.rows, self.cols)  # Bounds check only
        return index

    def coords(self, ref: CellRef) -> Tuple[int, int]:
        """Returns the (row, col) pair of a cell."""
        return to_coords(self.cell(ref), self.rows, self.cols)

    def contains(self, ref: CellRef) -> bool:
        try:
            self.cell(ref)
        except InvalidCoordinate:
            return False
        return True

    def all_cells(self) -> Iterator[int]:
        """Iterates over every cell in row-major order."""
        yield from range(self.size)

    def to_pairs(self, cells: Iterable[CellRef]) -> List[Tuple[int, int]]:
        """Converts cells to (row, col) pairs, preserving order."""
        return [self.coords(c) for c in cells]

    def random_cell(self, rng) -> int:
        """Returns a cell chosen with the given random source."""
        return rng.uniform_int(0, self.size)

    # --- Adjacency ---

    def cell_in_direction(self, ref: CellRef, direction: Direction) -> Optional[int]:
        """Gets the neighbour in the given direction, or None at the boundary."""
        row, col = self.coords(ref)
        target = step(row, col, direction, self.rows, self.cols)
        if target is None:
            return None
        return target[0] * self.cols + target[1]

    def neighbors(self, ref: CellRef) -> Set[int]:
        """All in-bounds cells adjacent to this one, regardless of links."""
        return {c for _, c in self._neighbours_by_direction(self.cell(ref))}

    def _neighbours_by_direction(self, cell: int) -> List[Tuple[Direction, int]]:
        found = []
        for direction in Direction:
            other = self.cell_in_direction(cell, direction)
            if other is not None:
                found.append((direction, other))
        return found

    def _direction_between(self, a: int, b: int) -> Optional[Direction]:
        for direction, other in self._neighbours_by_direction(a):
            if other == b:
                return direction
        return None

    # --- Links ---

    def link(self, ref_a: CellRef, ref_b: CellRef):
        """Creates a bidirectional link between two neighbouring cells."""
        a, b, direction = self._adjacent_pair(ref_a, ref_b)
        self._links[a] |= direction.bit
        self._links[b] |= direction.inverse.bit

    def unlink(self, ref_a: CellRef, ref_b: CellRef):
        """Removes the link between two neighbouring cells, if any."""
        a, b, direction = self._adjacent_pair(ref_a, ref_b)
        self._links[a] &= ~np.uint8(direction.bit)
        self._links[b] &= ~np.uint8(direction.inverse.bit)

    def _adjacent_pair(self, ref_a: CellRef, ref_b: CellRef) -> Tuple[int, int, Direction]:
        a = self.cell(ref_a)
        b = self.cell(ref_b)
        direction = self._direction_between(a, b)
        if direction is None:
            raise NotAdjacent(
                f"cell {self.coords(b)} is not a neighbour of cell {self.coords(a)}"
            )
        return a, b, direction

    def linked(self, ref_a: CellRef, ref_b: CellRef) -> bool:
        """Checks if two cells are linked. Non-neighbours are never linked."""
        a = self.cell(ref_a)
        b = self.cell(ref_b)
        direction = self._direction_between(a, b)
        return direction is not None and bool(self._links[a] & direction.bit)

    def linked_in_direction(self, ref: CellRef, direction: Direction) -> bool:
        """Checks if the cell is linked to its neighbour in the given direction.
        Returns False if there is no cell in that direction."""
        return bool(self._links[self.cell(ref)] & direction.bit)

    def links_of(self, ref: CellRef) -> Set[int]:
        """Gets the cells currently linked to this cell."""
        cell = self.cell(ref)
        mask = self._links[cell]
        return {
            other
            for direction, other in self._neighbours_by_direction(cell)
            if mask & direction.bit
        }

    def links(self) -> List[Tuple[int, int]]:
        """Every linked pair, each listed once as (lower, higher)."""
        pairs = []
        for cell in self.all_cells():
            for direction in (Direction.SOUTH, Direction.EAST):
                if self._links[cell] & direction.bit:
                    pairs.append((cell, self.cell_in_direction(cell, direction)))
        return pairs

    def link_count(self) -> int:
        """Returns the number of links (passages) in the grid."""
        return len(self.links())

    def clear(self):
        """Returns the grid to its initial state: no cell is linked to any other."""
        self._links[:] = 0

    def dead_ends(self) -> Set[int]:
        """Cells with exactly one link. Isolated cells are not dead ends."""
        return {c for c in self.all_cells() if len(self.links_of(c)) == 1}

    def __repr__(self) -> str:
        return f"Grid({self.rows}x{self.cols})"

    def __str__(self) -> str:
        from rendering import render_text

        return f"{self!r}\n{render_text(self)}"
