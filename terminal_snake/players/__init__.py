"""
Input sources for the terminal snake game.

A player is polled once per tick by the game loop and returns the
direction for the next step, QUIT, or None.
"""

from .base import Player
from .random_player import RandomPlayer
from .registry import get_player_class, AVAILABLE_PLAYERS

__all__ = [
    'Player',
    'RandomPlayer',
    'get_player_class',
    'AVAILABLE_PLAYERS',
]
