"""
GameState entity - a snapshot of the game at a point in time.
"""

from typing import List, Optional, Tuple

from .constants import Direction, SCREEN, EMPTY_SYMBOL, FRUIT_SYMBOL, HEAD_SYMBOL, BODY_SYMBOL
from .snake import Snake


class GameState:
    """
    A snapshot of the board at a specific tick.

    Attributes:
        tick: how many steps the current board has taken
        snake_positions: list of (column, row), head first
        alive: whether the snake is still alive
        score: fruit eaten so far
        width, height: board dimensions
        fruit: (column, row) of the fruit
        direction: current heading
        axes: axis convention the board moves with
        death_reason: 'wall', 'self' or None
    """

    def __init__(
        self,
        tick: int,
        snake_positions: List[Tuple[int, int]],
        alive: bool,
        score: int,
        width: int,
        height: int,
        fruit: Tuple[int, int],
        direction: Direction,
        axes: str = SCREEN,
        death_reason: Optional[str] = None
    ):
        self.tick = tick
        self.snake_positions = list(snake_positions)
        self.alive = alive
        self.score = score
        self.width = width
        self.height = height
        self.fruit = fruit
        self.direction = direction
        self.axes = axes
        self.death_reason = death_reason

    @property
    def head(self) -> Tuple[int, int]:
        return self.snake_positions[0]

    def grid(self) -> List[List[str]]:
        """
        Returns the board as rows of single characters:
        * = empty cell
        ■ = fruit
        & = snake head
        o = snake body
        The snake is left out once it is dead.
        """
        grid = [[EMPTY_SYMBOL for _ in range(self.width)] for _ in range(self.height)]

        fx, fy = self.fruit
        grid[fy][fx] = FRUIT_SYMBOL

        if self.alive:
            Snake(self.snake_positions).render_into(grid, HEAD_SYMBOL, BODY_SYMBOL)

        return grid

    def __repr__(self):
        return (
            f"<GameState tick={self.tick}, fruit={self.fruit}, "
            f"length={len(self.snake_positions)}, score={self.score}, alive={self.alive}>"
        )
