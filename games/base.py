"""
Base class for all game environments.

ABC (Abstract Base Class) is Python's way of defining a template that subclasses must follow.
Any class inheriting from GameEnv MUST implement all methods marked with @abstractmethod.

Example:
    class TetrisEnv(GameEnv):
        def reset(self):
            ...  # Must implement this
        def step(self, key):
            ...  # Must implement this
        # etc.
"""
from abc import ABC, abstractmethod
from typing import Optional


class GameEnv(ABC):
    """
    Abstract base class that all terminal games must implement.

    The Session drives any GameEnv one tick at a time, so the front end
    never needs to know which game it is running.
    """

    @abstractmethod
    def reset(self) -> dict:
        """
        Reset the game to its initial state.

        Returns:
            dict: Game state, e.g. {'tick': 0, 'length': 1, 'game_over': False}
        """
        pass

    @abstractmethod
    def step(self, key: Optional[str]) -> tuple:
        """
        Advance the game by one tick.

        Args:
            key: Name of the key pressed since the last tick ('q', 'left', ...),
                 or None when nothing was pressed.

        Returns:
            tuple: (state_dict, done, info)
                - state_dict: Game state after the tick
                - done: True once the game is over
                - info: Dict with extra info, e.g. {'reason': 'wall'}
        """
        pass

    @abstractmethod
    def get_state(self) -> dict:
        """Get the current game state without stepping."""
        pass

    @abstractmethod
    def render(self) -> str:
        """Get the full text frame to draw on the terminal."""
        pass

    @property
    def tick_interval_ms(self) -> int:
        """
        Milliseconds between ticks. Override to change the game speed.
        """
        return 75
