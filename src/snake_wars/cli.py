"""Command-line launcher for Snake Wars."""

from __future__ import annotations

import argparse
import logging
import sys

from snake_wars.config import GameConfig
from snake_wars.controllers import AIStrategy
from snake_wars.snake import GrowthPolicy

logger = logging.getLogger(__name__)


def _add_game_flags(p: argparse.ArgumentParser) -> None:
    p.add_argument(
        "--config", type=str, default=None,
        help="Path to a JSON config file; other flags override it.",
    )
    p.add_argument("--grid-size", type=int, default=None)
    p.add_argument(
        "--ai-strategy", type=str, default=None,
        choices=[s.value for s in AIStrategy],
    )
    p.add_argument(
        "--growth", type=str, default=None,
        choices=[g.value for g in GrowthPolicy],
    )
    p.add_argument("--tick-ms", type=int, default=None)
    p.add_argument("--seed", type=int, default=None)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="snake-wars",
        description="Snake Wars: one player against AI snakes.",
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Enable debug logging.",
    )
    sub = parser.add_subparsers(dest="command", help="Available commands.")

    play_p = sub.add_parser("play", help="Open a window and play.")
    _add_game_flags(play_p)
    play_p.add_argument("--cell-size", type=int, default=20)

    bench_p = sub.add_parser(
        "benchmark", help="Run headless rounds with a random player.",
    )
    _add_game_flags(bench_p)
    bench_p.add_argument("--rounds", type=int, default=100)
    bench_p.add_argument("--max-ticks", type=int, default=1000)

    return parser


def _load_config(args: argparse.Namespace) -> GameConfig:
    config = GameConfig.load(args.config) if args.config else GameConfig()

    overrides: dict = {}
    flag_map = {
        "grid_size": "grid_size",
        "ai_strategy": "ai_strategy",
        "growth": "growth_policy",
        "tick_ms": "tick_interval_ms",
        "seed": "seed",
    }
    for cli_name, cfg_name in flag_map.items():
        val = getattr(args, cli_name, None)
        if val is not None:
            overrides[cfg_name] = val

    if overrides:
        d = config.to_dict()
        d.update(overrides)
        config = GameConfig.from_dict(d)
    return config


def _run_play(args: argparse.Namespace) -> int:
    from snake_wars.frontend import run

    run(_load_config(args), cell_size=args.cell_size)
    return 0


def _run_benchmark(args: argparse.Namespace) -> int:
    from snake_wars.benchmark import run_benchmark

    result = run_benchmark(
        _load_config(args), rounds=args.rounds, max_ticks=args.max_ticks,
    )
    print(result.summary())  # noqa: T201
    return 0


def main(argv: list[str] | None = None) -> int:
    """Entry point for the ``snake-wars`` CLI."""
    parser = _build_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
    )

    if args.command is None:
        parser.print_help()
        return 1

    handlers = {
        "play": _run_play,
        "benchmark": _run_benchmark,
    }
    return handlers[args.command](args)


if __name__ == "__main__":
    sys.exit(main())
