"""Snake Wars: a player snake against rule-based AI snakes."""

from snake_wars.collision import CollisionCause, resolve_collisions
from snake_wars.config import GameConfig
from snake_wars.controllers import (
    AIStrategy,
    GreedyController,
    PathfindingController,
)
from snake_wars.engine import BattleEngine, Outcome
from snake_wars.grid import Grid
from snake_wars.loop import GameLoop, LoopState
from snake_wars.pathfinding import find_path
from snake_wars.scheduler import ClockScheduler
from snake_wars.snake import Direction, GrowthPolicy, Snake
from snake_wars.world import World

__all__ = [
    "AIStrategy",
    "BattleEngine",
    "ClockScheduler",
    "CollisionCause",
    "Direction",
    "GameConfig",
    "GameLoop",
    "GreedyController",
    "Grid",
    "GrowthPolicy",
    "LoopState",
    "Outcome",
    "PathfindingController",
    "Snake",
    "World",
    "find_path",
    "resolve_collisions",
]
