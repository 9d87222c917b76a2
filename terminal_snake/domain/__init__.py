"""
Domain entities for the terminal snake game.

This module contains the core game entities that are independent of
terminal concerns (screen clearing, key reads, sleeping).
"""

from .constants import (
    Direction, UP, DOWN, LEFT, RIGHT, VALID_MOVES, QUIT,
    SCREEN, TRANSPOSED, AXIS_DELTAS,
)
from .snake import Snake
from .game_state import GameState
from .board import Board

__all__ = [
    'Direction', 'UP', 'DOWN', 'LEFT', 'RIGHT', 'VALID_MOVES', 'QUIT',
    'SCREEN', 'TRANSPOSED', 'AXIS_DELTAS',
    'Snake',
    'GameState',
    'Board',
]
