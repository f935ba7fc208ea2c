"""
Snake game environment.

Keys (case-insensitive):
    q     = Quit
    left  = Turn left
    right = Turn right

The snake lives on a toroidal grid scattered with blocks and food. Blocks
kill, food makes the snake one segment longer. The body is tracked as a
FIFO of grid indices the head has left behind.
"""
import logging
import random
from collections import deque
from typing import Optional

from .base import GameEnv
from .config import GameConfig
from .entities import Direction, Snake, head_glyph
from .grid import BLOCK, BODY, EMPTY, FOOD, GridDims, make_grid, format_grid

logger = logging.getLogger(__name__)


class SnakeEnv(GameEnv):
    """
    Snake game environment implementing the GameEnv interface.

    One step() is one tick. The snake only moves on ticks that are a
    multiple of tick_rate(), which shrinks as the snake grows, so longer
    snakes move more often.
    """

    def __init__(self, config: GameConfig = None):
        """
        Args:
            config: Game configuration (defaults to GameConfig())
        """
        self.config = config or GameConfig()
        self.dims = GridDims(width=self.config.width, height=self.config.height)

        # Game state
        self.grid = None
        self.snake = None
        self.position_memory = deque()   # Body cell indices, oldest first
        self.tick = 0
        self.game_over = False
        self.reason = None               # 'quit', 'wall' or 'self' once over

        self.reset()

    @property
    def tick_interval_ms(self) -> int:
        return self.config.tick_interval_ms

    def reset(self) -> dict:
        """Generate a new grid and place the snake on the first empty cell."""
        self.grid = make_grid(self.dims, self.config.cell_probabilities)

        spawn_index = self.grid.first_index_of(EMPTY)
        if spawn_index is None:
            raise RuntimeError("Generated grid has no empty cell to spawn the snake on")

        self.snake = Snake(
            position=self.grid.coordinate_of(spawn_index),
            direction=Direction.RIGHT,
            length=self.config.initial_length,
            speed=self.config.initial_speed,
        )
        self.position_memory = deque()
        self.tick = 0
        self.game_over = False
        self.reason = None

        logger.info(f"New game on {self.dims.width}x{self.dims.height} grid, "
                    f"snake spawned at ({self.snake.position.x}, {self.snake.position.y})")
        return self.get_state()

    def tick_rate(self) -> int:
        """Number of ticks between moves."""
        cfg = self.config
        return max(cfg.tick_rate_floor, cfg.tick_rate_base - self.snake.length // cfg.tick_rate_divisor)

    def step(self, key: Optional[str] = None) -> tuple:
        """
        Execute one tick.

        Args:
            key: Name of the key pressed since the last tick, or None

        Returns:
            (state_dict, done, info)
        """
        if self.game_over:
            return self.get_state(), True, {'reason': self.reason}

        self._handle_key(key)
        if self.game_over:
            return self.get_state(), True, {'reason': self.reason}

        # Head and body glyphs are redrawn from scratch every tick
        self.grid.clear_transient()

        head_index = self.grid.index_of(self.snake.position)

        # Moving into a cell has the behavior defined by its glyph
        glyph = self.grid.glyph_at(head_index)
        if glyph == BLOCK:
            return self._end('wall')
        if glyph == FOOD:
            self.snake.grow()
            logger.debug(f"Food eaten at tick {self.tick}, length is now {self.snake.length}")

        if head_index in self.position_memory:
            return self._end('self')

        self.grid.set_glyph(head_index, head_glyph(self.snake.direction))
        for index in self.position_memory:
            self.grid.set_glyph(index, BODY)

        if self.tick % self.tick_rate() == 0:
            self._update_memory(head_index)
            self.snake.advance(self.dims)

        self._maybe_spawn_food()

        self.tick += 1
        return self.get_state(), False, {}

    def _handle_key(self, key: Optional[str]):
        if not key:
            return
        name = key.lower()
        if name == 'q':
            self.game_over = True
            self.reason = 'quit'
            logger.info(f"Player quit at tick {self.tick} with length {self.snake.length}")
        elif name in ('left', 'right'):
            self.snake.turn(name)

    def _update_memory(self, head_index: int):
        """Keep at most length - 1 trailing indices, dropping the oldest first."""
        if len(self.position_memory) > self.snake.length - 2 and self.position_memory:
            self.position_memory.popleft()
        if len(self.position_memory) + 1 < self.snake.length:
            self.position_memory.append(head_index)

    def _maybe_spawn_food(self):
        cfg = self.config
        if self.tick <= cfg.food_spawn_after_tick:
            return
        if random.random() > cfg.food_spawn_chance:
            return

        index = self.grid.random_index_of(EMPTY)
        if index is None:
            logger.warning("No empty cell left to spawn food on")
            return
        self.grid.set_glyph(index, FOOD)

    def _end(self, reason: str) -> tuple:
        self.game_over = True
        self.reason = reason
        logger.info(f"Game over ({reason}) at tick {self.tick} with length {self.snake.length}")
        return self.get_state(), True, {'reason': reason}

    def get_state(self) -> dict:
        """State dict for the front end and for tests."""
        return {
            'tick': self.tick,
            'length': self.snake.length,
            'position': {'x': self.snake.position.x, 'y': self.snake.position.y},
            'direction': self.snake.direction.name,
            'body': list(self.position_memory),
            'game_over': self.game_over,
            'reason': self.reason,
        }

    def render(self) -> str:
        return format_grid(self.grid, self.snake.length)
