"""
Game session management.

A Session ties together a Game and a Player, handling:
- Key routing (player -> game)
- Game-over bookkeeping
- Deciding whether the final score should be saved
"""
import logging
from typing import Optional

from games.base import GameEnv
from .players import Player

logger = logging.getLogger(__name__)


class Session:
    """
    Manages one game played by one player.

    The Session owns every piece of mutable loop state (the game, the
    player's key buffer, the outcome), so the scheduler only has to call
    tick() at a fixed interval until it reports game over.
    """

    def __init__(self, game: GameEnv, player: Player, save_on_quit: bool = False):
        """
        Args:
            game: A GameEnv implementation (SnakeEnv, etc.)
            player: A Player implementation (e.g. HumanPlayer)
            save_on_quit: Also offer to save the score when the player quits
        """
        self.game = game
        self.player = player
        self.save_on_quit = save_on_quit
        self.ticks = 0
        self.reason: Optional[str] = None
        self._done = False

    def tick(self) -> dict:
        """
        Execute one game tick.

        1. Get the pending key from the player
        2. Step the game with it
        3. Inform the player of the result
        4. Record the outcome if the game ended

        Returns:
            dict: Game state after the tick
        """
        if self._done:
            return self.game.get_state()

        key = self.player.get_action()
        game_state, done, info = self.game.step(key)
        self.player.on_result(done)
        self.ticks += 1

        if done:
            self._done = True
            self.reason = info.get('reason')
            logger.info(f"Session finished after {self.ticks} ticks: {self.reason}")

        return game_state

    @property
    def done(self) -> bool:
        return self._done

    @property
    def final_length(self) -> int:
        return self.game.get_state()['length']

    @property
    def should_save_score(self) -> bool:
        """Deaths are always offered a save; quitting only if save_on_quit."""
        if not self._done:
            return False
        if self.reason == 'quit':
            return self.save_on_quit
        return True

    @property
    def exit_message(self) -> str:
        if self.reason == 'quit':
            return '==[ QUIT ]=='
        return '==[ YOU DIED! ]=='

    def get_state(self) -> dict:
        """Get current game state without stepping."""
        return self.game.get_state()

    def render(self) -> str:
        return self.game.render()
