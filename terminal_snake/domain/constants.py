"""
Game constants for the terminal snake game.
"""

from enum import Enum
from typing import Dict, Tuple


class Direction(str, Enum):
    """Movement directions. No diagonals."""
    UP = "UP"
    DOWN = "DOWN"
    LEFT = "LEFT"
    RIGHT = "RIGHT"


# Movement directions
UP = Direction.UP
DOWN = Direction.DOWN
LEFT = Direction.LEFT
RIGHT = Direction.RIGHT
VALID_MOVES = {UP, DOWN, LEFT, RIGHT}

# Returned by an input source when the player asks to leave
QUIT = "QUIT"

# Axis conventions: (d_column, d_row) for each direction
SCREEN = "screen"
TRANSPOSED = "transposed"
AXIS_DELTAS: Dict[str, Dict[Direction, Tuple[int, int]]] = {
    # UP => row - 1, row 0 is the top line of the screen
    SCREEN: {
        UP: (0, -1),
        DOWN: (0, 1),
        LEFT: (-1, 0),
        RIGHT: (1, 0),
    },
    # UP/DOWN walk along the column axis, LEFT/RIGHT along the row axis
    TRANSPOSED: {
        UP: (-1, 0),
        DOWN: (1, 0),
        LEFT: (0, -1),
        RIGHT: (0, 1),
    },
}

# Render symbols
EMPTY_SYMBOL = '*'
FRUIT_SYMBOL = '■'
HEAD_SYMBOL = '&'
BODY_SYMBOL = 'o'

HELP_LINE = "ESC = Quit | LEFT, RIGHT, UP, DOWN"
