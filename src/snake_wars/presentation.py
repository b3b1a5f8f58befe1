"""Interfaces the game loop draws through, and the world renderer."""

from __future__ import annotations

from typing import Protocol

from snake_wars.world import World


class RenderSurface(Protocol):
    """A board that can be cleared and painted one grid cell at a time."""

    def clear(self) -> None: ...

    def fill_cell(self, row: int, col: int, color: str) -> None: ...


class ScoreDisplay(Protocol):
    """A sink for the current score."""

    def show_score(self, score: int) -> None: ...


class Overlay(Protocol):
    """A message layer shown over the board."""

    def show(self, text: str) -> None: ...

    def hide(self) -> None: ...


def render_world(surface: RenderSurface, world: World) -> None:
    """Clear *surface* and paint every snake in its own color.

    Dead snakes stay on the board where they died.
    """
    surface.clear()
    for snake in world.snakes:
        for r, c in snake.body:
            surface.fill_cell(r, c, snake.color)
