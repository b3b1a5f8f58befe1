"""Round lifecycle: start, tick, end, and keyboard handling."""

from __future__ import annotations

import enum
import logging

from snake_wars.config import GameConfig
from snake_wars.engine import BattleEngine, Outcome
from snake_wars.presentation import (
    Overlay,
    RenderSurface,
    ScoreDisplay,
    render_world,
)
from snake_wars.scheduler import ClockScheduler, TimerHandle
from snake_wars.snake import Direction
from snake_wars.world import World

logger = logging.getLogger(__name__)

TITLE = "Snake Wars"
PROMPT = "Press any key to start"

_DIRECTION_MAP: dict[str, Direction] = {
    "up": Direction.UP,
    "down": Direction.DOWN,
    "left": Direction.LEFT,
    "right": Direction.RIGHT,
}


class LoopState(enum.Enum):
    """Lifecycle states of the game loop."""

    NOT_STARTED = "not_started"
    RUNNING = "running"
    ENDED = "ended"


class GameLoop:
    """Owns the engine, the score and the scheduler for one session.

    Presentation is injected: the loop only calls the given surface, score
    display and overlay, and reads time from the given scheduler.
    """

    def __init__(
        self,
        surface: RenderSurface,
        score_display: ScoreDisplay,
        overlay: Overlay,
        config: GameConfig | None = None,
        scheduler: ClockScheduler | None = None,
        engine: BattleEngine | None = None,
    ) -> None:
        cfg = config or GameConfig()
        self.config = cfg
        self.surface = surface
        self.score_display = score_display
        self.overlay = overlay
        self.scheduler = scheduler or ClockScheduler()
        self.engine = engine or BattleEngine(cfg)

        self.state = LoopState.NOT_STARTED
        self.outcome: Outcome | None = None
        self.score = 0
        self._prompt_timer: TimerHandle | None = None

        self.overlay.show(f"{TITLE}\n{PROMPT}")

    @property
    def world(self) -> World:
        return self.engine.world

    @property
    def running(self) -> bool:
        return self.state == LoopState.RUNNING

    def handle_key(self, key: str) -> None:
        """Route a key press: start a round, or steer the player."""
        if not self.running:
            self.start()
            return

        direction = _DIRECTION_MAP.get(key)
        if direction is None:
            return
        if not self.world.player.set_direction(direction):
            logger.debug("Ignored reversal to %s.", direction.name)

    def start(self) -> None:
        """Begin a new round. Does nothing while a round is running."""
        if self.running:
            logger.debug("start() ignored: round already running.")
            return

        if self._prompt_timer is not None:
            self._prompt_timer.cancel()
            self._prompt_timer = None

        self.engine.reset()
        self.score = 0
        self.outcome = None
        self.state = LoopState.RUNNING

        self.overlay.hide()
        self.score_display.show_score(self.score)
        render_world(self.surface, self.world)

        self.scheduler.stop()
        self.scheduler.start(self.config.tick_interval_ms, self.tick)
        logger.info("Round started (%s AI).", self.config.ai_strategy.value)

    def tick(self) -> None:
        """Run one simulation step and update the presentation."""
        if not self.running:
            logger.debug("tick() ignored: loop state is %s.", self.state.value)
            return

        outcome = self.engine.step()
        if outcome is not None:
            self.end(outcome)
            return

        self.score += 1
        render_world(self.surface, self.world)
        self.score_display.show_score(self.score)

    def end(self, outcome: Outcome) -> None:
        """Stop ticking and show the result, then the prompt after a delay."""
        if self.state == LoopState.ENDED:
            return
        self.scheduler.stop()
        self.state = LoopState.ENDED
        self.outcome = outcome

        if outcome == Outcome.WIN:
            self.overlay.show(f"You Win!\nScore: {self.score}")
        else:
            self.overlay.show("You Lose!")
        logger.info(
            "Round ended: %s with score %d after %d ticks.",
            outcome.value, self.score, self.engine.tick,
        )

        self._prompt_timer = self.scheduler.call_later(
            self.config.end_message_delay_ms, self._show_prompt,
        )

    def _show_prompt(self) -> None:
        self._prompt_timer = None
        if self.state == LoopState.ENDED:
            self.overlay.show(f"{TITLE}\n{PROMPT}")
