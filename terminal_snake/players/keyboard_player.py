"""
Keyboard player - blocking arrow-key reads from the terminal.
"""

import codecs
import logging
import os
import select
import sys
from typing import Callable, Optional, Union

import readchar

from domain.constants import UP, DOWN, LEFT, RIGHT, QUIT, Direction
from domain.game_state import GameState
from .base import Player

logger = logging.getLogger(__name__)

# How long to wait after ESC for the rest of an escape sequence
ESCAPE_TIMEOUT = 0.05
MAX_SEQUENCE = 16

KEY_MAP = {
    readchar.key.UP: UP,
    readchar.key.DOWN: DOWN,
    readchar.key.LEFT: LEFT,
    readchar.key.RIGHT: RIGHT,
    # Arrow keys in application cursor mode
    "\x1bOA": UP,
    "\x1bOB": DOWN,
    "\x1bOD": LEFT,
    "\x1bOC": RIGHT,
    readchar.key.ESC: QUIT,
    readchar.key.CTRL_C: QUIT,
}


def read_sequence(
    read_char: Callable[[], str],
    pending: Callable[[float], bool],
    timeout: float = ESCAPE_TIMEOUT,
) -> str:
    """
    Read one key, collecting a whole escape sequence when one starts.

    A lone ESC is returned as soon as nothing follows within `timeout`.
    CSI sequences (ESC [) end on their final byte, SS3 sequences (ESC O)
    after one more character.
    """
    ch = read_char()
    if ch != readchar.key.ESC:
        return ch

    sequence = ch
    while len(sequence) < MAX_SEQUENCE and pending(timeout):
        sequence += read_char()
        if len(sequence) == 2:
            if sequence[1] not in "[O":
                break
        elif sequence[1] == "O" or "@" <= sequence[-1] <= "~":
            break
    return sequence


def read_terminal_key() -> str:
    """
    Block until the next key and return it, escape sequences included.

    On POSIX terminals bytes are read straight from the file descriptor in
    cbreak mode so that a lone ESC can be told apart from an arrow key.
    """
    if os.name == "nt":
        return readchar.readkey()

    import termios
    import tty

    fd = sys.stdin.fileno()
    decoder = codecs.getincrementaldecoder("utf-8")(errors="replace")

    def read_char() -> str:
        ch = ""
        while not ch:
            data = os.read(fd, 1)
            if not data:
                raise EOFError("stdin closed")
            ch = decoder.decode(data)
        return ch

    def pending(timeout: float) -> bool:
        return bool(select.select([fd], [], [], timeout)[0])

    if not os.isatty(fd):
        return read_sequence(read_char, pending)

    old_settings = termios.tcgetattr(fd)
    try:
        tty.setcbreak(fd)
        return read_sequence(read_char, pending)
    finally:
        termios.tcsetattr(fd, termios.TCSADRAIN, old_settings)


def key_to_move(key: str) -> Optional[Union[Direction, str]]:
    """
    Map a key to a move. Unknown escape strings that are not cursor-key
    sequences (ESC ESC, Alt+key) count as Escape.
    """
    move = KEY_MAP.get(key)
    if move is None and key.startswith(readchar.key.ESC) and key[1:2] not in ("[", "O"):
        return QUIT
    return move


class KeyboardPlayer(Player):
    """
    Reads one key per tick. Blocks until a key arrives.

    Arrow keys steer, Escape quits, anything else is ignored.
    """

    def __init__(self, read_key: Optional[Callable[[], str]] = None):
        self.read_key = read_key or read_terminal_key

    def get_move(self, game_state: GameState) -> Optional[Union[Direction, str]]:
        try:
            key = self.read_key()
        except KeyboardInterrupt:
            return QUIT
        except (OSError, EOFError, UnicodeDecodeError) as e:
            logger.debug(f"Ignoring failed key read: {e}")
            return None

        return key_to_move(key)
