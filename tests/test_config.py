"""Tests for GameConfig."""

import json

import pytest

from snake_wars.config import GameConfig
from snake_wars.controllers import AIStrategy
from snake_wars.snake import GrowthPolicy


class TestGameConfig:
    def test_defaults(self):
        cfg = GameConfig()
        assert cfg.grid_size == 30
        assert cfg.ai_count == 3
        assert cfg.tick_interval_ms == 100
        assert cfg.end_message_delay_ms == 3000
        assert cfg.ai_strategy == AIStrategy.GREEDY
        assert cfg.growth_policy == GrowthPolicy.UNBOUNDED
        assert cfg.seed is None

    def test_frozen(self):
        cfg = GameConfig()
        with pytest.raises(AttributeError):
            cfg.grid_size = 10  # type: ignore[misc]

    @pytest.mark.parametrize(
        ("kwargs", "match"),
        [
            ({"grid_size": 0}, "grid_size"),
            ({"ai_count": 0}, "ai_count"),
            ({"grid_size": 1, "ai_count": 3}, "too small"),
            ({"tick_interval_ms": 0}, "tick_interval_ms"),
            ({"end_message_delay_ms": -1}, "end_message_delay_ms"),
        ],
    )
    def test_validation(self, kwargs, match):
        with pytest.raises(ValueError, match=match):
            GameConfig(**kwargs)

    def test_tight_fit_allowed(self):
        cfg = GameConfig(grid_size=2, ai_count=3)
        assert cfg.grid_size == 2


class TestConfigSerialization:
    def test_to_dict_uses_enum_values(self):
        d = GameConfig(ai_strategy=AIStrategy.PATHFINDING).to_dict()
        assert d["ai_strategy"] == "pathfinding"
        assert d["growth_policy"] == "unbounded"
        json.dumps(d)

    def test_save_load_roundtrip(self, tmp_path):
        cfg = GameConfig(
            grid_size=15,
            ai_strategy=AIStrategy.PATHFINDING,
            growth_policy=GrowthPolicy.TRUNCATE,
            seed=7,
        )
        path = tmp_path / "sub" / "config.json"
        cfg.save(path)
        assert GameConfig.load(path) == cfg

    def test_partial_file_uses_defaults(self, tmp_path):
        path = tmp_path / "config.json"
        path.write_text(json.dumps({"grid_size": 12}))
        cfg = GameConfig.load(path)
        assert cfg.grid_size == 12
        assert cfg.ai_count == 3

    def test_unknown_strategy_rejected(self):
        with pytest.raises(ValueError):
            GameConfig.from_dict({"ai_strategy": "telepathy"})
