"""Tests for the command-line launcher."""

import json
from unittest.mock import patch

from snake_wars.cli import _build_parser, _load_config, main
from snake_wars.controllers import AIStrategy
from snake_wars.snake import GrowthPolicy


class TestCLIParser:
    def test_no_command_returns_1(self):
        assert main([]) == 1

    def test_play_defaults(self):
        args = _build_parser().parse_args(["play"])
        assert args.command == "play"
        assert args.config is None
        assert args.grid_size is None
        assert args.cell_size == 20

    def test_benchmark_defaults(self):
        args = _build_parser().parse_args(["benchmark"])
        assert args.rounds == 100
        assert args.max_ticks == 1000

    def test_play_with_flags(self):
        args = _build_parser().parse_args([
            "play",
            "--grid-size", "15",
            "--ai-strategy", "pathfinding",
            "--growth", "truncate",
            "--tick-ms", "80",
            "--seed", "4",
        ])
        cfg = _load_config(args)
        assert cfg.grid_size == 15
        assert cfg.ai_strategy == AIStrategy.PATHFINDING
        assert cfg.growth_policy == GrowthPolicy.TRUNCATE
        assert cfg.tick_interval_ms == 80
        assert cfg.seed == 4


class TestConfigLoading:
    def test_flags_override_file(self, tmp_path):
        path = tmp_path / "cfg.json"
        path.write_text(json.dumps({"grid_size": 12, "ai_count": 2}))
        args = _build_parser().parse_args([
            "benchmark", "--config", str(path), "--grid-size", "9",
        ])
        cfg = _load_config(args)
        assert cfg.grid_size == 9
        assert cfg.ai_count == 2


class TestCLICommands:
    def test_benchmark_runs(self, capsys):
        result = main([
            "benchmark",
            "--rounds", "3",
            "--grid-size", "10",
            "--max-ticks", "30",
            "--seed", "1",
        ])
        assert result == 0
        captured = capsys.readouterr()
        assert "Benchmark:" in captured.out

    def test_play_hands_config_to_frontend(self):
        with patch("snake_wars.frontend.run") as run:
            assert main(["play", "--grid-size", "10", "--cell-size", "12"]) == 0
        cfg = run.call_args.args[0]
        assert cfg.grid_size == 10
        assert run.call_args.kwargs["cell_size"] == 12
