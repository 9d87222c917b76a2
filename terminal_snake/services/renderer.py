"""
Text renderer for board snapshots.

Turns a GameState into the frame shown each tick:
- status line with head coordinates and score
- the grid, one character per cell and one line per row
- a static help line listing the controls
"""

import sys
from typing import Callable, List, Optional, TextIO

from domain.constants import HELP_LINE
from domain.game_state import GameState
from services.terminal import clear_screen


def status_line(state: GameState) -> str:
    hx, hy = state.head
    return f"X: {hx}, Y: {hy}, Score: {state.score}"


def render_frame(state: GameState) -> str:
    """
    Build the full frame for a snapshot as a single block of text.
    """
    lines: List[str] = [status_line(state)]
    lines.extend("".join(row) for row in state.grid())
    lines.append(HELP_LINE)
    return "\n".join(lines)


def render_game_over(state: GameState, restart_delay: Optional[float] = None) -> str:
    """
    Banner shown once the snake has died.
    Mentions the restart when the loop is about to start a new board.
    """
    lines = [f"GAME OVER! Score: {state.score}"]
    if state.death_reason == "wall":
        lines.append("You hit the wall.")
    elif state.death_reason == "self":
        lines.append("You ran into yourself.")
    if restart_delay is not None:
        lines.append(f"Restarting in {restart_delay:g}s...")
    return "\n".join(lines)


class TerminalRenderer:
    """
    Writes frames to a text stream, clearing the screen first.

    Set clear=False for headless runs where there is no terminal to clear.
    """

    def __init__(
        self,
        stream: Optional[TextIO] = None,
        clear: bool = True,
        clear_fn: Optional[Callable[[], None]] = None,
    ):
        self.stream = stream if stream is not None else sys.stdout
        self.clear = clear
        self.clear_fn = clear_fn

    def _write(self, text: str):
        if self.clear:
            (self.clear_fn or clear_screen)()
        self.stream.write(text + "\n")
        self.stream.flush()

    def draw(self, state: GameState):
        self._write(render_frame(state))

    def draw_game_over(self, state: GameState, restart_delay: Optional[float] = None):
        # Keep the final board visible under the banner
        self._write(render_frame(state) + "\n\n" + render_game_over(state, restart_delay))
