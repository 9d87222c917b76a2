"""
Snake entity: the ordered chain of body segments.
"""

from collections import deque
from typing import Iterator, List, MutableSequence, Tuple

from .constants import AXIS_DELTAS, SCREEN, Direction, HEAD_SYMBOL, BODY_SYMBOL

Position = Tuple[int, int]


class Snake:
    """
    Represents the snake on the board.

    Attributes:
        positions: deque of (column, row) from head at index 0 to tail at the end
    """

    def __init__(self, positions: List[Position]):
        self.positions = deque(positions)

    @property
    def head(self) -> Position:
        """Return the head position (first element)."""
        return self.positions[0]

    @property
    def body(self) -> List[Position]:
        """Every segment except the head, head-side first."""
        return list(self.positions)[1:]

    def __len__(self) -> int:
        return len(self.positions)

    def __iter__(self) -> Iterator[Position]:
        return iter(self.positions)

    def grow(self):
        """
        Append one segment on top of the current tail.

        The new segment separates from the old tail on the next advance.
        """
        if not self.positions:
            return
        self.positions.append(self.positions[-1])

    def advance(self, direction: Direction, axes: str = SCREEN) -> Position:
        """
        Move the snake one cell in `direction` and return the new head.

        Every non-head segment takes the position its predecessor held
        before the move, then the head is displaced.
        """
        dx, dy = AXIS_DELTAS[axes][Direction(direction)]
        hx, hy = self.positions[0]
        # Shift tail-to-head, the old head becomes the first body segment
        self.positions.pop()
        self.positions.appendleft((hx, hy))
        self.positions[0] = (hx + dx, hy + dy)
        return self.positions[0]

    def collides_with_head(self, position: Position) -> bool:
        """True if any segment other than the head occupies `position`."""
        return any(segment == position for segment in self.body)

    def render_into(
        self,
        grid: MutableSequence[MutableSequence[str]],
        head_symbol: str = HEAD_SYMBOL,
        body_symbol: str = BODY_SYMBOL,
    ):
        """
        Stamp the snake into a grid indexed as grid[row][column].

        Head first, then body, so a freshly grown tail sitting on the
        head cell does not hide the head. Off-grid cells are skipped.
        """
        for index, (x, y) in enumerate(self.positions):
            if not (0 <= y < len(grid) and 0 <= x < len(grid[y])):
                continue
            if index == 0:
                grid[y][x] = head_symbol
            elif (x, y) != self.positions[0]:
                grid[y][x] = body_symbol

    def __repr__(self):
        return f"<Snake head={self.head if self.positions else None}, length={len(self)}>"
