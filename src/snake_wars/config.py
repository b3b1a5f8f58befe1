"""Game configuration."""

from __future__ import annotations

import json
import logging
from dataclasses import asdict, dataclass
from pathlib import Path

from snake_wars.controllers import AIStrategy
from snake_wars.snake import GrowthPolicy

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class GameConfig:
    """Fixed parameters of a Snake Wars session.

    Supports JSON serialization so a session can be replayed with the same
    seed and rules.
    """

    grid_size: int = 30
    ai_count: int = 3
    tick_interval_ms: int = 100
    end_message_delay_ms: int = 3000
    ai_strategy: AIStrategy = AIStrategy.GREEDY
    growth_policy: GrowthPolicy = GrowthPolicy.UNBOUNDED
    seed: int | None = None

    def __post_init__(self) -> None:
        if self.grid_size < 1:
            raise ValueError("grid_size must be at least 1.")
        if self.ai_count < 1:
            raise ValueError("ai_count must be at least 1.")
        if self.grid_size * self.grid_size < self.ai_count + 1:
            raise ValueError(
                "grid_size is too small to spawn every snake on its own cell."
            )
        if self.tick_interval_ms <= 0:
            raise ValueError("tick_interval_ms must be positive.")
        if self.end_message_delay_ms < 0:
            raise ValueError("end_message_delay_ms must be >= 0.")

    def to_dict(self) -> dict:
        """Serialize to a plain dict (enums become their values)."""
        d = asdict(self)
        d["ai_strategy"] = self.ai_strategy.value
        d["growth_policy"] = self.growth_policy.value
        return d

    def save(self, path: str | Path) -> None:
        """Write config to a JSON file."""
        p = Path(path)
        p.parent.mkdir(parents=True, exist_ok=True)
        p.write_text(json.dumps(self.to_dict(), indent=2))
        logger.info("Config saved to %s", p)

    @classmethod
    def from_dict(cls, raw: dict) -> GameConfig:
        d = dict(raw)
        if "ai_strategy" in d:
            d["ai_strategy"] = AIStrategy(d["ai_strategy"])
        if "growth_policy" in d:
            d["growth_policy"] = GrowthPolicy(d["growth_policy"])
        return cls(**d)

    @classmethod
    def load(cls, path: str | Path) -> GameConfig:
        """Load config from a JSON file."""
        return cls.from_dict(json.loads(Path(path).read_text()))
