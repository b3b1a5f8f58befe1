"""Step-based battle engine: one call to :meth:`step` is one tick."""

from __future__ import annotations

import enum
import logging

from snake_wars.collision import CollisionCause, resolve_collisions
from snake_wars.config import GameConfig
from snake_wars.controllers import Controller, make_controller
from snake_wars.world import World

logger = logging.getLogger(__name__)


class Outcome(enum.Enum):
    """How a round ended, from the player's point of view."""

    WIN = "win"
    LOSE = "lose"


class BattleEngine:
    """Runs the per-tick simulation over a :class:`World`.

    Each tick: AI snakes choose directions against the pre-tick board,
    every live snake proposes a next head, collisions are resolved against
    the frozen pre-move bodies, survivors advance, and the round outcome is
    decided.
    """

    def __init__(
        self,
        config: GameConfig | None = None,
        controller: Controller | None = None,
    ) -> None:
        cfg = config or GameConfig()
        self.config = cfg
        self.world = World(cfg)
        self.controller = controller or make_controller(cfg.ai_strategy)
        self.tick = 0
        self.last_deaths: dict[int, CollisionCause] = {}

    def reset(self) -> None:
        """Start a fresh round on the same world."""
        self.world.reset()
        self.tick = 0
        self.last_deaths = {}

    def step(self) -> Outcome | None:
        """Advance one tick. Returns the outcome if the round just ended."""
        world = self.world
        player = world.player
        if not player.alive:
            return Outcome.LOSE

        world.sync_grid()
        live_ai = [s for s in world.ai_snakes if s.alive]
        for snake in live_ai:
            self.controller.decide(snake, player, live_ai, world.grid)

        live = world.live_snakes
        next_heads = {s.snake_id: s.next_head() for s in live}
        deaths = resolve_collisions(
            world.snakes, next_heads,
            world.grid.size, self.config.growth_policy,
        )

        self.tick += 1
        for snake in live:
            if snake.snake_id in deaths:
                snake.alive = False
                logger.info(
                    "Snake %d died (%s) at tick %d.",
                    snake.snake_id, deaths[snake.snake_id].value, self.tick,
                )
            else:
                snake.advance(next_heads[snake.snake_id], self.config.growth_policy)
        self.last_deaths = deaths
        world.sync_grid()

        if not player.alive:
            return Outcome.LOSE
        if not any(s.alive for s in world.ai_snakes):
            return Outcome.WIN
        return None

    def get_state(self) -> dict:
        """Return the full, serializable engine state."""
        state = self.world.get_state()
        state["tick"] = self.tick
        state["deaths"] = {
            str(sid): cause.value for sid, cause in self.last_deaths.items()
        }
        return state
