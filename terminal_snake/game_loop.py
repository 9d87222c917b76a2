"""
Game loop: input -> step -> render -> sleep, once per tick.
"""

import logging
import random
import time
from enum import Enum
from typing import Callable, Optional

from config import GameConfig
from domain.board import Board
from domain.constants import QUIT
from players.base import Player
from services.renderer import TerminalRenderer

logger = logging.getLogger(__name__)


class TickOutcome(str, Enum):
    CONTINUE = "continue"
    DIED = "died"
    QUIT = "quit"


class GameLoop:
    """
    Owns the current Board and drives it with one player and one renderer.

    The loop never exits the process; run() returns an exit status and the
    caller decides what to do with it.
    """

    def __init__(
        self,
        config: GameConfig,
        player: Player,
        renderer: TerminalRenderer,
        sleep: Callable[[float], None] = time.sleep,
        board_factory: Optional[Callable[[], Board]] = None,
        rng: Optional[random.Random] = None,
    ):
        self.config = config
        self.player = player
        self.renderer = renderer
        self.sleep = sleep
        self.rng = rng or random.Random()
        self.board_factory = board_factory or self._new_board
        self.board = self.board_factory()
        self.tick_count = 0
        self.games_played = 1

    def _new_board(self) -> Board:
        return Board(self.config.width, self.config.height, axes=self.config.axes, rng=self.rng)

    def tick(self) -> TickOutcome:
        """
        Run one tick:
          1) Poll the player (may block)
          2) QUIT: stop without stepping
          3) Step the board with the latest direction
          4) Render and sleep the tick interval
        """
        if not self.board.alive:
            return TickOutcome.DIED

        move = self.player.get_move(self.board.snapshot(self.tick_count))
        if move == QUIT:
            logger.info(f"Player quit at tick {self.tick_count} with score {self.board.score}")
            return TickOutcome.QUIT

        alive = self.board.step(move)
        self.tick_count += 1

        if not alive:
            return TickOutcome.DIED

        self.renderer.draw(self.board.snapshot(self.tick_count))
        self.sleep(self.config.tick_seconds)
        return TickOutcome.CONTINUE

    def restart(self):
        """Throw away the dead board and start a fresh one."""
        self.board = self.board_factory()
        self.tick_count = 0
        self.games_played += 1
        logger.info(f"Starting game {self.games_played}")

    def run(self, max_ticks: Optional[int] = None) -> int:
        """
        Play until the player quits, or until death when restarts are off.

        Args:
            max_ticks: stop after this many ticks in total (None = no limit)

        Returns:
            Process exit status (0)
        """
        self.renderer.draw(self.board.snapshot(self.tick_count))
        ticks = 0

        while max_ticks is None or ticks < max_ticks:
            outcome = self.tick()
            ticks += 1

            if outcome == TickOutcome.QUIT:
                break

            if outcome == TickOutcome.DIED:
                state = self.board.snapshot(self.tick_count)
                if not self.config.restart_on_death:
                    self.renderer.draw_game_over(state)
                    break

                self.renderer.draw_game_over(state, self.config.restart_delay_seconds)
                self.sleep(self.config.restart_delay_seconds)
                self.restart()
                self.renderer.draw(self.board.snapshot(self.tick_count))

        return 0
