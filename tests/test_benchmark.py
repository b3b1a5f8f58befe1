"""Tests for the headless benchmark."""

import numpy as np

from snake_wars.benchmark import BenchmarkResult, random_safe_direction, run_benchmark
from snake_wars.config import GameConfig
from snake_wars.controllers import AIStrategy
from snake_wars.snake import Direction
from snake_wars.world import World


class TestBenchmarkResult:
    def test_summary_format(self):
        result = BenchmarkResult(
            rounds=10,
            wins=3,
            losses=6,
            unfinished=1,
            total_ticks=500,
            wall_time_seconds=1.5,
            ticks_per_second=333.3,
        )
        summary = result.summary()
        assert "10 rounds" in summary
        assert "3 won" in summary
        assert "6 lost" in summary
        assert "ticks/s" in summary


class TestRandomSafeDirection:
    def test_avoids_walls_and_reversal(self):
        world = World(GameConfig(grid_size=5, seed=0))
        player = world.player
        player.reset([(0, 0), (0, 1)], Direction.LEFT)
        for ai, cell in zip(world.ai_snakes, [(4, 4), (4, 3), (3, 4)], strict=True):
            ai.reset([cell], Direction.UP)
        world.sync_grid()
        rng = np.random.default_rng(0)
        for _ in range(10):
            assert random_safe_direction(player, world, rng) == Direction.DOWN


class TestRunBenchmark:
    def test_counts_add_up(self):
        result = run_benchmark(GameConfig(grid_size=10), rounds=5, max_ticks=50)
        assert result.rounds == 5
        assert result.wins + result.losses + result.unfinished == 5
        assert result.total_ticks > 0
        assert result.ticks_per_second > 0

    def test_pathfinding_strategy(self):
        cfg = GameConfig(grid_size=8, ai_strategy=AIStrategy.PATHFINDING, seed=3)
        result = run_benchmark(cfg, rounds=3, max_ticks=40)
        assert result.rounds == 3

    def test_max_ticks_caps_rounds(self):
        result = run_benchmark(GameConfig(grid_size=10), rounds=4, max_ticks=1)
        assert result.total_ticks <= 4
