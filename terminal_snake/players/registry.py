"""
Registry of input sources.

Maps player keys ('keyboard', 'random') to the class that builds them.
"""

from typing import Callable, Dict, Optional, Type

from .base import Player


# Lazy imports so the autopilot works without a usable terminal
def _get_keyboard_player() -> Type[Player]:
    from .keyboard_player import KeyboardPlayer
    return KeyboardPlayer


def _get_random_player() -> Type[Player]:
    from .random_player import RandomPlayer
    return RandomPlayer


PLAYER_LOADERS: Dict[str, Callable[[], Type[Player]]] = {
    "keyboard": _get_keyboard_player,
    "random": _get_random_player,
}

AVAILABLE_PLAYERS = list(PLAYER_LOADERS.keys())


def get_player_class(player_key: Optional[str] = None) -> Type[Player]:
    """
    Get the player class for a given key.

    Args:
        player_key: 'keyboard' or 'random'. None or empty means 'keyboard'.

    Returns:
        The player class (subclass of Player).

    Raises:
        ValueError: if the key is unknown
    """
    if not player_key:
        player_key = "keyboard"

    loader = PLAYER_LOADERS.get(player_key)
    if loader is None:
        raise ValueError(
            f"Unknown player '{player_key}'. Available players: {', '.join(AVAILABLE_PLAYERS)}"
        )
    return loader()
