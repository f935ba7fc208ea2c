"""
Player abstractions for different control modes.

The Session only talks to the Player interface, so it does not care
where keys come from. The terminal front end uses a HumanPlayer fed by
the keyboard.
"""
from abc import ABC, abstractmethod
from typing import Optional


class Player(ABC):
    """
    Abstract base class for all player types.

    The Session calls get_action() once per tick without knowing
    what type of player it's dealing with.
    """

    @abstractmethod
    def get_action(self) -> Optional[str]:
        """
        Get the key to apply this tick.

        Returns:
            str: Key name ('q', 'left', 'right', ...) or None for no input
        """
        pass

    def on_result(self, done: bool):
        """Called after game.step(). Players that don't care ignore it."""
        pass


class HumanPlayer(Player):
    """
    Human player - keys come from the keyboard listener.

    Holds a single pending key. A newer key replaces an unread one and
    reading the key clears it, so each press is handled at most once.
    """

    def __init__(self):
        self._pending_key = None

    def set_key(self, key: Optional[str]):
        """
        Record a key press.

        Called by the input listener whenever a key is captured.
        """
        self._pending_key = key

    @property
    def pending_key(self) -> Optional[str]:
        return self._pending_key

    def get_action(self) -> Optional[str]:
        """Return the last key pressed since the previous tick, then forget it."""
        key = self._pending_key
        self._pending_key = None
        return key


def create_player(control_mode: str) -> Player:
    """
    Create a player based on control mode.

    Args:
        control_mode: Only 'human' is supported

    Returns:
        Player instance
    """
    if control_mode == 'human':
        return HumanPlayer()

    raise ValueError(f"Unknown control mode: {control_mode}")
