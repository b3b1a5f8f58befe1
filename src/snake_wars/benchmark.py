"""Headless simulation benchmark."""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass, replace

import numpy as np

from snake_wars.config import GameConfig
from snake_wars.engine import BattleEngine, Outcome
from snake_wars.snake import Direction, Snake
from snake_wars.world import World

logger = logging.getLogger(__name__)


@dataclass
class BenchmarkResult:
    """Results from a benchmark run."""

    rounds: int
    wins: int
    losses: int
    unfinished: int
    total_ticks: int
    wall_time_seconds: float
    ticks_per_second: float

    def summary(self) -> str:
        return (
            f"Benchmark: {self.rounds} rounds "
            f"({self.wins} won, {self.losses} lost, "
            f"{self.unfinished} unfinished), {self.total_ticks} ticks in "
            f"{self.wall_time_seconds:.2f}s | "
            f"{self.ticks_per_second:.1f} ticks/s"
        )


def random_safe_direction(
    player: Snake, world: World, rng: np.random.Generator,
) -> Direction:
    """Pick a random non-reversing direction onto a free cell, if any."""
    options = [
        d for d in Direction
        if d != player.heading.opposite
        and world.grid.is_free(*player.next_head(d))
    ]
    if not options:
        return player.direction
    return options[int(rng.integers(len(options)))]


def run_benchmark(
    config: GameConfig | None = None,
    *,
    rounds: int = 100,
    max_ticks: int = 1000,
) -> BenchmarkResult:
    """Play *rounds* rounds with a random safe-move player.

    Rounds still going after *max_ticks* are counted as unfinished.
    """
    cfg = config or GameConfig()
    if cfg.seed is None:
        cfg = replace(cfg, seed=42)
    engine = BattleEngine(cfg)
    rng = np.random.default_rng(cfg.seed)

    wins = losses = unfinished = total_ticks = 0
    start = time.perf_counter()

    for _ in range(rounds):
        engine.reset()
        outcome: Outcome | None = None
        while outcome is None and engine.tick < max_ticks:
            player = engine.world.player
            player.set_direction(random_safe_direction(player, engine.world, rng))
            outcome = engine.step()
        total_ticks += engine.tick
        if outcome == Outcome.WIN:
            wins += 1
        elif outcome == Outcome.LOSE:
            losses += 1
        else:
            unfinished += 1

    elapsed = time.perf_counter() - start
    result = BenchmarkResult(
        rounds=rounds,
        wins=wins,
        losses=losses,
        unfinished=unfinished,
        total_ticks=total_ticks,
        wall_time_seconds=elapsed,
        ticks_per_second=total_ticks / max(elapsed, 1e-9),
    )
    logger.info(result.summary())
    return result
