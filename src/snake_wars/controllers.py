"""Rule-based AI controllers that pick a direction for each AI snake."""

from __future__ import annotations

import enum
import logging
from collections.abc import Sequence

from snake_wars.grid import Grid
from snake_wars.pathfinding import find_path, manhattan
from snake_wars.snake import Direction, Snake

logger = logging.getLogger(__name__)

# Candidate order for the greedy controller; ties go to the earliest entry.
_CANDIDATE_ORDER: tuple[Direction, ...] = (
    Direction.RIGHT,
    Direction.LEFT,
    Direction.DOWN,
    Direction.UP,
)


class AIStrategy(enum.Enum):
    """Available AI move-selection strategies."""

    GREEDY = "greedy"
    PATHFINDING = "pathfinding"


class Controller:
    """Base class for AI controllers.

    Subclasses override :meth:`choose`. ``grid`` must already be painted
    with every body, live or dead, as of the start of the tick.
    Controllers only touch ``snake.direction``.
    """

    def choose(
        self, snake: Snake, player: Snake, rivals: Sequence[Snake], grid: Grid,
    ) -> Direction | None:
        raise NotImplementedError

    def decide(
        self, snake: Snake, player: Snake, rivals: Sequence[Snake], grid: Grid,
    ) -> None:
        """Set ``snake.direction`` from :meth:`choose`, or leave it alone."""
        direction = self.choose(snake, player, rivals, grid)
        if direction is None:
            logger.debug(
                "Snake %d has no move; keeping %s.",
                snake.snake_id, snake.direction.name,
            )
            return
        snake.direction = direction


class GreedyController(Controller):
    """Step onto the free neighbour closest to the player's head."""

    def choose(
        self, snake: Snake, player: Snake, rivals: Sequence[Snake], grid: Grid,
    ) -> Direction | None:
        target = player.head
        best: Direction | None = None
        best_distance = 0
        for direction in _CANDIDATE_ORDER:
            r, c = snake.next_head(direction)
            if not grid.is_free(r, c):
                continue
            distance = manhattan((r, c), target)
            if best is None or distance < best_distance:
                best, best_distance = direction, distance
        return best


class PathfindingController(Controller):
    """Follow the shortest A* path to the nearest head.

    Targets are the player first, then the other live AI snakes in the
    order given; an equally short path to a later target never wins.
    """

    def choose(
        self, snake: Snake, player: Snake, rivals: Sequence[Snake], grid: Grid,
    ) -> Direction | None:
        walkable = grid.walkable()
        targets = [player.head] + [
            other.head for other in rivals
            if other.alive and other.snake_id != snake.snake_id
        ]

        best_path: list[tuple[int, int]] = []
        for target in targets:
            path = find_path(walkable, snake.head, target)
            if path and (not best_path or len(path) < len(best_path)):
                best_path = path

        if not best_path:
            return None
        r, c = snake.head
        nr, nc = best_path[0]
        return Direction.from_delta(nr - r, nc - c)


def make_controller(strategy: AIStrategy) -> Controller:
    """Return a controller instance for *strategy*."""
    if strategy == AIStrategy.PATHFINDING:
        return PathfindingController()
    return GreedyController()
