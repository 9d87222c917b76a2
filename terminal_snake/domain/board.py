"""
Board entity - owns all mutable game state and advances it one tick at a time.
"""

import logging
import random
from typing import Optional, Tuple

from .constants import AXIS_DELTAS, RIGHT, SCREEN, Direction
from .game_state import GameState
from .snake import Snake

logger = logging.getLogger(__name__)

Position = Tuple[int, int]


class Board:
    """
    The grid, the snake, the fruit and the score.

    Attributes:
        width, height: board dimensions
        fruit: (column, row) of the single fruit
        score: fruit eaten so far, never decreases
        alive: False once the snake hit a wall or itself
        direction: direction used by the last step
        snake: the body segment chain, head first
        death_reason: 'wall' or 'self' once dead
    """

    def __init__(
        self,
        width: int,
        height: int,
        axes: str = SCREEN,
        rng: Optional[random.Random] = None,
        fruit: Optional[Position] = None,
    ):
        if not isinstance(width, int) or not isinstance(height, int) or width <= 0 or height <= 0:
            raise ValueError(f"Board dimensions must be positive integers, got {width}x{height}.")
        if axes not in AXIS_DELTAS:
            raise ValueError(f"Unknown axis convention '{axes}'.")

        self.width = width
        self.height = height
        self.axes = axes
        self.rng = rng or random.Random()
        self.score = 0
        self.alive = True
        self.direction = RIGHT
        self.death_reason: Optional[str] = None
        self.snake = Snake([(width // 2, height // 2)])

        self.fruit: Position = (0, 0)
        if fruit is None:
            self.spawn_fruit()
        else:
            self.place_fruit(fruit)

    @classmethod
    def square(cls, size: int, **kwargs) -> "Board":
        """Build a size x size board."""
        return cls(size, size, **kwargs)

    def in_bounds(self, position: Position) -> bool:
        x, y = position
        return 0 <= x < self.width and 0 <= y < self.height

    def place_fruit(self, position: Position):
        """
        Put the fruit at a specific cell.
        Raises ValueError if the cell is off the board.
        """
        position = tuple(position)
        if not self.in_bounds(position):
            raise ValueError(f"Fruit out of bounds at {position}.")
        self.fruit = position

    def spawn_fruit(self) -> Position:
        """
        Move the fruit to a uniformly random cell.

        The cell may be under the snake body; nothing checks for overlap.
        """
        self.fruit = (self.rng.randrange(self.width), self.rng.randrange(self.height))
        return self.fruit

    def step(self, direction: Optional[Direction] = None) -> bool:
        """
        Advance the game by one tick:
          1) Dead board: do nothing
          2) Move the snake in `direction` (or keep the current heading)
          3) Hit own body: die
          4) Left the board: die
          5) On the fruit: grow, score, respawn the fruit
        Returns whether the snake is still alive.
        """
        if not self.alive:
            return False

        if direction is not None:
            self.direction = Direction(direction)

        head = self.snake.advance(self.direction, self.axes)

        if self.snake.collides_with_head(head):
            self._die("self")
            return False

        if not self.in_bounds(head):
            self._die("wall")
            return False

        if head == self.fruit:
            self.snake.grow()
            self.score += 1
            self.spawn_fruit()
            logger.debug(f"Fruit eaten at {head}, score {self.score}, next fruit at {self.fruit}")

        return True

    def _die(self, reason: str):
        self.alive = False
        self.death_reason = reason
        logger.info(f"Snake died ({reason}) at {self.snake.head} with score {self.score}")

    def snapshot(self, tick: int = 0) -> GameState:
        """
        Return a snapshot of the current board as a GameState.
        """
        return GameState(
            tick=tick,
            snake_positions=list(self.snake.positions),
            alive=self.alive,
            score=self.score,
            width=self.width,
            height=self.height,
            fruit=self.fruit,
            direction=self.direction,
            axes=self.axes,
            death_reason=self.death_reason,
        )

    def __repr__(self):
        return (
            f"<Board {self.width}x{self.height} head={self.snake.head}, "
            f"fruit={self.fruit}, score={self.score}, alive={self.alive}>"
        )
