"""Pygame window hosting a :class:`GameLoop`."""

from __future__ import annotations

import logging

import pygame

from snake_wars.config import GameConfig
from snake_wars.loop import GameLoop

logger = logging.getLogger(__name__)

BACKGROUND = pygame.Color(0, 0, 0)
TEXT_COLOR = pygame.Color(255, 255, 255)
SCORE_BAR_HEIGHT = 32

KEY_NAMES: dict[int, str] = {
    pygame.K_UP: "up",
    pygame.K_w: "up",
    pygame.K_DOWN: "down",
    pygame.K_s: "down",
    pygame.K_LEFT: "left",
    pygame.K_a: "left",
    pygame.K_RIGHT: "right",
    pygame.K_d: "right",
}


def key_name(key: int) -> str:
    """Map a pygame key code to the name the game loop understands."""
    return KEY_NAMES.get(key, "any")


class BoardSurface:
    """Grid-cell painter over an off-screen pygame surface."""

    def __init__(self, grid_size: int, cell_size: int) -> None:
        self.cell_size = cell_size
        side = grid_size * cell_size
        self.image = pygame.Surface((side, side))
        self.image.fill(BACKGROUND)

    def clear(self) -> None:
        self.image.fill(BACKGROUND)

    def fill_cell(self, row: int, col: int, color: str) -> None:
        # One pixel of padding keeps adjacent segments visually distinct.
        size = self.cell_size
        rect = pygame.Rect(col * size, row * size, max(1, size - 1), max(1, size - 1))
        self.image.fill(pygame.Color(color), rect)


class Hud:
    """Score line and overlay text, drawn on top of the board each frame."""

    def __init__(self) -> None:
        self.score = 0
        self.overlay_text: str | None = None

    def show_score(self, score: int) -> None:
        self.score = score

    def show(self, text: str) -> None:
        self.overlay_text = text

    def hide(self) -> None:
        self.overlay_text = None

    def draw(
        self,
        window: pygame.Surface,
        board: pygame.Surface,
        font: pygame.font.Font,
        title_font: pygame.font.Font,
    ) -> None:
        window.fill(BACKGROUND)
        window.blit(board, (0, SCORE_BAR_HEIGHT))
        score = font.render(f"Score: {self.score}", True, TEXT_COLOR)
        window.blit(score, (8, (SCORE_BAR_HEIGHT - score.get_height()) // 2))

        if self.overlay_text is None:
            return
        shade = pygame.Surface(board.get_size(), pygame.SRCALPHA)
        shade.fill((0, 0, 0, 170))
        window.blit(shade, (0, SCORE_BAR_HEIGHT))

        lines = self.overlay_text.split("\n")
        rendered = [title_font.render(lines[0], True, TEXT_COLOR)]
        rendered += [font.render(line, True, TEXT_COLOR) for line in lines[1:]]
        total = sum(r.get_height() for r in rendered) + 8 * (len(rendered) - 1)
        y = SCORE_BAR_HEIGHT + (board.get_height() - total) // 2
        for r in rendered:
            window.blit(r, ((window.get_width() - r.get_width()) // 2, y))
            y += r.get_height() + 8


def run(config: GameConfig | None = None, cell_size: int = 20, fps: int = 60) -> None:
    """Open a window and play until it is closed or Esc is pressed."""
    cfg = config or GameConfig()
    pygame.init()
    try:
        board = BoardSurface(cfg.grid_size, cell_size)
        side = board.image.get_width()
        window = pygame.display.set_mode((side, side + SCORE_BAR_HEIGHT))
        pygame.display.set_caption("Snake Wars")
        font = pygame.font.Font(None, 28)
        title_font = pygame.font.Font(None, 56)
        clock = pygame.time.Clock()

        hud = Hud()
        game = GameLoop(board, hud, hud, config=cfg)
        logger.info("Window opened (%dx%d grid).", cfg.grid_size, cfg.grid_size)

        playing = True
        while playing:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    playing = False
                elif event.type == pygame.KEYDOWN:
                    if event.key == pygame.K_ESCAPE:
                        playing = False
                    else:
                        game.handle_key(key_name(event.key))

            game.scheduler.advance(clock.tick(fps))
            hud.draw(window, board.image, font, title_font)
            pygame.display.flip()
    finally:
        pygame.quit()
