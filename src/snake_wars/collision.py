"""Simultaneous collision resolution for all snakes in a tick."""

from __future__ import annotations

import enum
from collections import Counter
from collections.abc import Mapping, Sequence

from snake_wars.grid import is_out_of_bounds
from snake_wars.snake import GrowthPolicy, Snake


class CollisionCause(enum.Enum):
    """Why a snake died."""

    WALL = "wall"
    SELF = "self"
    BODY = "body"
    HEAD_ON = "head_on"


def resolve_collisions(
    snakes: Sequence[Snake],
    next_heads: Mapping[int, tuple[int, int]],
    grid_size: int,
    policy: GrowthPolicy,
) -> dict[int, CollisionCause]:
    """Decide which snakes die when every snake in *next_heads* moves at once.

    *next_heads* maps ``snake_id`` to the proposed head cell of each snake
    that is moving this tick. Every check runs against the bodies as they
    were before anyone moved, so the result does not depend on the order of
    *snakes*. Returns ``snake_id -> cause`` for each snake that dies; bodies
    are left untouched. Dead snakes in *snakes* never move but their bodies
    still block.
    """
    live = [s for s in snakes if s.alive]

    head_counts: Counter[tuple[int, int]] = Counter(next_heads.values())

    deaths: dict[int, CollisionCause] = {}
    for snake in live:
        head = next_heads.get(snake.snake_id)
        if head is None:
            continue

        if is_out_of_bounds(head, grid_size):
            deaths[snake.snake_id] = CollisionCause.WALL
        elif snake.collides_with_self(head, policy):
            deaths[snake.snake_id] = CollisionCause.SELF
        elif any(
            head in other.body
            for other in snakes
            if other.snake_id != snake.snake_id
        ):
            deaths[snake.snake_id] = CollisionCause.BODY
        elif head_counts[head] > 1:
            deaths[snake.snake_id] = CollisionCause.HEAD_ON

    return deaths
