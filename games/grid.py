"""
Grid of display cells for the snake game.

The grid is a flat numpy buffer of single-character glyphs, indexed
row by row: index = x + y * width. The outer edge is not a wall; positions
that leave the grid wrap around to the opposite side.
"""
from dataclasses import dataclass
from typing import Dict, Optional

import numpy as np

from .utils import modulo, pick_rand_weighted, rand_index

EMPTY = ' '
BLOCK = 'X'
FOOD = 'O'
BODY = 'S'

# Cells that survive the per-tick redraw
MAP_GLYPHS = (FOOD, BLOCK)

CELL_GLYPHS = {
    'empty': EMPTY,
    'block': BLOCK,
    'food': FOOD,
}

DEFAULT_CELL_PROBABILITIES = {
    'empty': 0.90,
    'block': 0.02,
    'food': 0.08,
}


@dataclass(frozen=True)
class Coordinate:
    """An (x, y) position on the grid."""

    x: int
    y: int


@dataclass(frozen=True)
class GridDims:
    """Width and height of a grid, in cells."""

    width: int = 10
    height: int = 10

    def __post_init__(self):
        for name, value in (('width', self.width), ('height', self.height)):
            if not isinstance(value, int) or value < 1:
                raise ValueError(f"Grid {name} must be a positive integer, got {value!r}")

    @classmethod
    def square(cls, size: int) -> "GridDims":
        return cls(width=size, height=size)

    @property
    def area(self) -> int:
        return self.width * self.height


def wrap_coordinate(coord: Coordinate, dims: GridDims) -> Coordinate:
    """Wrap each axis independently onto the grid (toroidal topology)."""
    x, y = coord.x, coord.y
    if x < 0 or x >= dims.width:
        x = modulo(x, dims.width)
    if y < 0 or y >= dims.height:
        y = modulo(y, dims.height)
    if (x, y) == (coord.x, coord.y):
        return coord
    return Coordinate(x=x, y=y)


class Grid:
    """
    Flat cell buffer with coordinate/index conversion.

    Attributes:
        dims: Grid size
        cells: 1-D numpy array of glyphs, length width * height
    """

    def __init__(self, dims: GridDims, cells: Optional[np.ndarray] = None):
        self.dims = dims
        if cells is None:
            cells = np.full(dims.area, EMPTY, dtype='<U1')
        if cells.shape != (dims.area,):
            raise ValueError(f"Expected {dims.area} cells, got shape {cells.shape}")
        self.cells = cells

    @property
    def width(self) -> int:
        return self.dims.width

    @property
    def height(self) -> int:
        return self.dims.height

    def index_of(self, coord: Coordinate) -> int:
        """Cell index of a coordinate. The coordinate is wrapped first."""
        coord = self.wrap(coord)
        return coord.x + coord.y * self.width

    def coordinate_of(self, index: int) -> Coordinate:
        if not 0 <= index < self.dims.area:
            raise IndexError(f"Cell index {index} outside grid of {self.dims.area} cells")
        return Coordinate(x=index % self.width, y=index // self.width)

    def wrap(self, coord: Coordinate) -> Coordinate:
        return wrap_coordinate(coord, self.dims)

    def glyph_at(self, index: int) -> str:
        return str(self.cells[index])

    def set_glyph(self, index: int, glyph: str):
        self.cells[index] = glyph

    def first_index_of(self, glyph: str) -> Optional[int]:
        """Index of the first cell showing glyph, or None."""
        matches = np.flatnonzero(self.cells == glyph)
        if matches.size == 0:
            return None
        return int(matches[0])

    def count(self, glyph: str) -> int:
        return int(np.count_nonzero(self.cells == glyph))

    def clear_transient(self):
        """Reset every cell that is not food or block back to empty."""
        self.cells[~np.isin(self.cells, MAP_GLYPHS)] = EMPTY

    def random_index_of(self, glyph: str) -> Optional[int]:
        """
        Uniformly random index of a cell showing glyph.

        Indices are resampled until a match is found. Returns None straight
        away when no cell shows the glyph, so a full grid cannot hang the loop.
        """
        if self.count(glyph) == 0:
            return None
        while True:
            index = rand_index(self.cells)
            if self.cells[index] == glyph:
                return index

    def rows(self):
        """Yield each row of glyphs as a list of characters."""
        for row in self.cells.reshape(self.height, self.width):
            yield [str(c) for c in row]


def make_grid(dims: Optional[GridDims] = None,
              probabilities: Optional[Dict[str, float]] = None) -> Grid:
    """
    Generate a grid with every cell drawn independently from the cell types.

    No guarantee is made about the layout (connectivity, spawn safety);
    callers look for a free cell themselves.

    Args:
        dims: Grid size (default 10x10)
        probabilities: Weight per cell type name, merged over the defaults

    Returns:
        Grid with a random layout
    """
    dims = dims or GridDims()
    weights = {**DEFAULT_CELL_PROBABILITIES, **(probabilities or {})}
    options = [{'char': CELL_GLYPHS[name], 'prob': prob} for name, prob in weights.items()]

    cells = np.empty(dims.area, dtype='<U1')
    for i in range(dims.area):
        picked = pick_rand_weighted(options, prepare=True)
        # Degenerate weight sets may pick nothing
        cells[i] = picked['char'] if picked else EMPTY

    return Grid(dims, cells)


def format_grid(grid: Grid, length: int) -> str:
    """
    Bordered text frame for the grid followed by a status line.

    Example (3x2):
          - - -
         |  X  |
         |O    |
          - - -
        Grid (3 x 2)  |  Length: 1
    """
    h_line = f"  {'- ' * grid.width}"
    lines = [h_line]
    for row in grid.rows():
        lines.append(f" |{' '.join(row)}|")
    lines.append(h_line)
    lines.append(f"Grid ({grid.width} x {grid.height})  |  Length: {length}")
    return "\n".join(lines)
