"""
Base input source interface for the game loop.
"""

from typing import Optional, Union

from domain.constants import Direction
from domain.game_state import GameState


class Player:
    """
    Base class/interface for whatever steers the snake.

    Each player is polled once per tick and answers with the direction
    to use for the next step.
    """

    def get_move(self, game_state: GameState) -> Optional[Union[Direction, str]]:
        """
        Return the next move given the current game state.

        Args:
            game_state: Current state of the board

        Returns:
            A Direction, QUIT to leave the game, or None to keep the
            current heading.
        """
        raise NotImplementedError
