"""Snake representation and movement logic."""

from __future__ import annotations

import enum
from collections import deque
from collections.abc import Iterable


class Direction(enum.IntEnum):
    """Cardinal movement directions, encoded 0-3 clockwise from RIGHT."""

    RIGHT = 0
    DOWN = 1
    LEFT = 2
    UP = 3

    @property
    def delta(self) -> tuple[int, int]:
        """Return the ``(row_delta, col_delta)`` of one step."""
        return _DELTAS[self]

    @property
    def opposite(self) -> Direction:
        """Return the direction that would reverse this one."""
        return Direction((self + 2) % 4)

    @classmethod
    def from_delta(cls, dr: int, dc: int) -> Direction:
        """Return the direction matching a unit displacement."""
        for direction, delta in _DELTAS.items():
            if delta == (dr, dc):
                return direction
        raise ValueError(f"({dr}, {dc}) is not a unit displacement.")


_DELTAS: dict[Direction, tuple[int, int]] = {
    Direction.RIGHT: (0, 1),
    Direction.DOWN: (1, 0),
    Direction.LEFT: (0, -1),
    Direction.UP: (-1, 0),
}


class GrowthPolicy(enum.Enum):
    """What happens to the tail when a snake moves."""

    TRUNCATE = "truncate"
    UNBOUNDED = "unbounded"


class Snake:
    """A snake represented as an ordered deque of (row, col) body segments.

    The head is ``body[0]``; the tail is ``body[-1]``. ``direction`` is
    the direction the snake will move on the next tick, ``heading`` the
    direction it actually moved last; reversal checks use ``heading`` so
    two quick turns between ticks cannot fold the snake onto itself.
    """

    def __init__(
        self,
        snake_id: int,
        color: str,
        start_row: int = 0,
        start_col: int = 0,
        direction: Direction = Direction.RIGHT,
        *,
        is_player: bool = False,
    ) -> None:
        self.snake_id = snake_id
        self.color = color
        self.is_player = is_player
        self.body: deque[tuple[int, int]] = deque()
        self.direction = direction
        self.heading = direction
        self.alive = True
        self.reset([(start_row, start_col)], direction)

    @property
    def head(self) -> tuple[int, int]:
        """Return the head coordinate."""
        return self.body[0]

    def reset(
        self, cells: Iterable[tuple[int, int]], direction: Direction,
    ) -> None:
        """Replace the body and revive the snake for a new round."""
        body = deque(tuple(cell) for cell in cells)
        if not body:
            raise ValueError("Snake body must contain at least one cell.")
        self.body = body
        self.direction = direction
        self.heading = direction
        self.alive = True

    def set_direction(self, new_direction: Direction) -> bool:
        """Change direction, ignoring 180° reversals of the last move.

        Returns ``True`` if the change was accepted.
        """
        if new_direction == self.heading.opposite:
            return False
        self.direction = new_direction
        return True

    def next_head(self, direction: Direction | None = None) -> tuple[int, int]:
        """Compute the next head position without moving."""
        dr, dc = (direction if direction is not None else self.direction).delta
        r, c = self.head
        return r + dr, c + dc

    def advance(
        self, new_head: tuple[int, int], policy: GrowthPolicy,
    ) -> tuple[int, int] | None:
        """Move the head to *new_head*.

        Returns the vacated tail cell, or ``None`` if the snake grew.
        """
        self.body.appendleft(new_head)
        self.heading = self.direction
        if policy == GrowthPolicy.UNBOUNDED:
            return None
        return self.body.pop()

    def occupies(self, row: int, col: int) -> bool:
        """Check whether the snake occupies a given cell."""
        return (row, col) in self.body

    def collides_with_self(
        self, cell: tuple[int, int], policy: GrowthPolicy,
    ) -> bool:
        """Check whether moving the head to *cell* hits the snake's own body.

        Under :attr:`GrowthPolicy.TRUNCATE` the tail is about to vacate, so
        it does not count.
        """
        segments = list(self.body)
        if policy == GrowthPolicy.TRUNCATE:
            segments = segments[:-1]
        return cell in segments

    def to_dict(self) -> dict:
        """Serialize snake state to a dictionary."""
        return {
            "snake_id": self.snake_id,
            "color": self.color,
            "is_player": self.is_player,
            "body": [list(seg) for seg in self.body],
            "direction": int(self.direction),
            "alive": self.alive,
        }
