"""The arena: grid, the player snake and the AI snakes."""

from __future__ import annotations

import logging

import numpy as np

from snake_wars.config import GameConfig
from snake_wars.grid import Grid
from snake_wars.snake import Direction, Snake

logger = logging.getLogger(__name__)

PLAYER_COLOR = "red"
AI_COLORS: tuple[str, ...] = (
    "blue", "green", "yellow", "purple", "orange", "cyan", "magenta",
)


class World:
    """Fixed set of snakes on a fixed-size grid.

    The player is always ``snakes[0]``. Snakes are created once and
    re-used across rounds; :meth:`reset` scatters them on fresh random
    cells with random directions.
    """

    def __init__(self, config: GameConfig | None = None) -> None:
        cfg = config or GameConfig()
        self.config = cfg
        self.rng = np.random.default_rng(cfg.seed)
        self.grid = Grid(cfg.grid_size)

        self.player = Snake(0, PLAYER_COLOR, is_player=True)
        self.ai_snakes = [
            Snake(i + 1, AI_COLORS[i % len(AI_COLORS)])
            for i in range(cfg.ai_count)
        ]
        self.reset()

    @property
    def snakes(self) -> list[Snake]:
        """Every snake, player first, dead ones included."""
        return [self.player, *self.ai_snakes]

    @property
    def live_snakes(self) -> list[Snake]:
        """Snakes still in play this round."""
        return [s for s in self.snakes if s.alive]

    def reset(self) -> None:
        """Revive every snake as a single cell at a distinct random spot."""
        snakes = self.snakes
        cell_ids = self.rng.choice(
            self.grid.size * self.grid.size, size=len(snakes), replace=False,
        )
        directions = self.rng.integers(4, size=len(snakes))
        for snake, cell_id, direction in zip(
            snakes, cell_ids.tolist(), directions.tolist(), strict=True,
        ):
            cell = divmod(int(cell_id), self.grid.size)
            snake.reset([cell], Direction(int(direction)))
        self.sync_grid()

    def sync_grid(self) -> None:
        """Repaint the occupancy grid; dead bodies stay as obstacles."""
        self.grid.paint(
            (s.body for s in self.snakes if s.alive),
            (s.body for s in self.snakes if not s.alive),
        )

    def get_state(self) -> dict:
        """Return the full, serializable world state."""
        return {
            "grid_size": self.grid.size,
            "snakes": [s.to_dict() for s in self.snakes],
        }
