"""
Snake entity and headings.

Headings follow the fixed cycle UP -> RIGHT -> DOWN -> LEFT. Turning right
steps forward through the cycle, turning left steps back.
"""
from dataclasses import dataclass
from enum import Enum
from typing import Union

from .grid import Coordinate, GridDims, wrap_coordinate
from .utils import modulo


class Direction(Enum):
    UP = (0, -1)
    RIGHT = (1, 0)
    DOWN = (0, 1)
    LEFT = (-1, 0)

    @property
    def dx(self) -> int:
        return self.value[0]

    @property
    def dy(self) -> int:
        return self.value[1]


DIRECTION_CYCLE = (Direction.UP, Direction.RIGHT, Direction.DOWN, Direction.LEFT)


class Rotation(Enum):
    LEFT = -1
    RIGHT = 1


HEAD_GLYPHS = {
    Direction.UP: '^',
    Direction.RIGHT: '>',
    Direction.DOWN: 'v',
    Direction.LEFT: '<',
}
UNKNOWN_HEAD = '?'


def _rotation_step(rotation: Union[Rotation, str, None]) -> int:
    if isinstance(rotation, Rotation):
        return rotation.value
    if isinstance(rotation, str) and rotation.upper() in Rotation.__members__:
        return Rotation[rotation.upper()].value
    return 0


def rotate(direction: Direction, rotation: Union[Rotation, str, None]) -> Direction:
    """
    Rotate a heading 90 degrees.

    Args:
        direction: Current heading
        rotation: Rotation.LEFT / Rotation.RIGHT, or their names in any case.
                  Anything else leaves the heading unchanged.

    Returns:
        The new heading
    """
    index = DIRECTION_CYCLE.index(direction)
    return DIRECTION_CYCLE[modulo(index + _rotation_step(rotation), len(DIRECTION_CYCLE))]


def head_glyph(direction) -> str:
    """Arrow glyph for a heading, '?' if it is not one of the four headings."""
    return HEAD_GLYPHS.get(direction, UNKNOWN_HEAD)


@dataclass
class Snake:
    """
    The player's snake.

    Attributes:
        position: Head position
        direction: Current heading
        length: Head plus body segments; only ever grows
        speed: Movement speed multiplier (kept for configuration, unused by the tick rate)
    """

    position: Coordinate
    direction: Direction = Direction.RIGHT
    length: int = 1
    speed: int = 1

    def turn(self, rotation: Union[Rotation, str, None]):
        """Change heading. Does not move the snake."""
        self.direction = rotate(self.direction, rotation)

    def advance(self, dims: GridDims):
        """Move one cell along the heading, wrapping around the grid edges."""
        moved = Coordinate(x=self.position.x + self.direction.dx,
                           y=self.position.y + self.direction.dy)
        self.position = wrap_coordinate(moved, dims)

    def grow(self, amount: int = 1):
        self.length += amount
