"""
pygame drawing of the board, HUD, on-screen controls and game-over overlay.
"""
from __future__ import annotations

from typing import List, Optional

import pygame

from .config import (
    BG_DARK, BLACK, BUTTON, BUTTON_RIM, CELL_GAP, GRAY, HEAD_GREEN, HUD_HEIGHT,
    NEON_GREEN, NEON_PINK, RESTART_HINT, WHITE,
)
from .controls import Command
from .grid import Cell, Grid
from .hooks import Renderer
from .pad import ButtonPad


class PygameRenderer(Renderer):
    """
    Keeps the latest frame handed over by the game loop and redraws the
    whole window from it in ``draw``.
    """

    def __init__(self, surface: pygame.Surface, grid: Grid, buttons: ButtonPad):
        self.surface = surface
        self.grid = grid
        self.buttons = buttons
        self.snake_cells: List[Cell] = []
        self.food: Optional[Cell] = None
        self.head: Optional[Cell] = None
        self.score = 0
        self.message: Optional[str] = None
        self.muted = False
        self._fonts = None

    # ------------------------ Loop hooks -----------------------------

    def on_frame(self, snake_cells, food, head):
        self.snake_cells = list(snake_cells)
        self.food = food
        self.head = head
        self.message = None

    def on_score_changed(self, score):
        self.score = score

    def on_game_over_display(self, message, score):
        self.message = message
        self.score = score

    def show_restart_affordance(self):
        self.buttons.restart_visible = True

    def hide_restart_affordance(self):
        self.buttons.restart_visible = False

    # --------------------------- Draw --------------------------------

    def _font(self, name: str) -> pygame.font.Font:
        if self._fonts is None:
            pygame.font.init()
            self._fonts = {
                "big": pygame.font.SysFont("verdana", 50),
                "text": pygame.font.SysFont("verdana", 20),
                "small": pygame.font.SysFont("verdana", 16),
            }
        return self._fonts[name]

    def draw(self):
        self.surface.fill(BG_DARK)
        board = pygame.Rect(0, 0, self.grid.pixel_size, self.grid.pixel_size)
        pygame.draw.rect(self.surface, BLACK, board)

        if self.food is not None:
            self._draw_glow(self.food, NEON_PINK, radius=8)
            self.draw_block(self.food, NEON_PINK)
        for cell in self.snake_cells:
            self._draw_glow(cell, NEON_GREEN, radius=5)
        for cell in self.snake_cells:
            self.draw_block(cell, NEON_GREEN)
        if self.head is not None:
            self.draw_block(self.head, HEAD_GREEN)

        if self.message:
            self._draw_game_over(board)
        self._draw_hud()
        self._draw_pad()

    def draw_block(self, cell: Cell, color):
        pygame.draw.rect(self.surface, color, pygame.Rect(self.grid.cell_rect(cell, CELL_GAP)))

    def _draw_glow(self, cell: Cell, color, radius: int):
        left, top, side, _ = self.grid.cell_rect(cell, CELL_GAP)
        glow = pygame.Surface((side + radius * 2, side + radius * 2), pygame.SRCALPHA)
        pygame.draw.rect(glow, (*color, 60), glow.get_rect(), border_radius=radius)
        self.surface.blit(glow, (left - radius, top - radius))

    def _draw_game_over(self, board: pygame.Rect):
        overlay = pygame.Surface(board.size, pygame.SRCALPHA)
        overlay.fill((0, 0, 0, 150))
        self.surface.blit(overlay, board.topleft)

        text = self._font("big").render(self.message, True, WHITE)
        hint = self._font("small").render(RESTART_HINT, True, WHITE)
        self.surface.blit(text, text.get_rect(center=(board.centerx, board.centery - 20)))
        self.surface.blit(hint, hint.get_rect(center=(board.centerx, board.centery + 30)))

        if self.buttons.restart_visible:
            self._draw_button(self.buttons.restart, "Restart")

    def _draw_hud(self):
        top = self.grid.pixel_size
        label = self._font("text").render(f"Score: {self.score}", True, WHITE)
        self.surface.blit(label, (12, top + (HUD_HEIGHT - label.get_height()) // 2))
        self._draw_button(self.buttons.sound, "off" if self.muted else "on", small=True)

    def _draw_pad(self):
        for command, rect in self.buttons.directions.items():
            pygame.draw.rect(self.surface, BUTTON, rect, border_radius=10)
            pygame.draw.rect(self.surface, BUTTON_RIM, rect, width=2, border_radius=10)
            pygame.draw.polygon(self.surface, WHITE, _arrow(rect, command))

    def _draw_button(self, rect: pygame.Rect, label: str, small: bool = False):
        pygame.draw.rect(self.surface, BUTTON, rect, border_radius=8)
        pygame.draw.rect(self.surface, BUTTON_RIM, rect, width=2, border_radius=8)
        surf = self._font("small" if small else "text").render(label, True, WHITE if not small else GRAY)
        self.surface.blit(surf, surf.get_rect(center=rect.center))


def _arrow(rect: pygame.Rect, command: Command):
    """Triangle pointing in the button's direction."""
    cx, cy = rect.center
    r = rect.width // 4
    if command is Command.MOVE_UP:
        return [(cx, cy - r), (cx - r, cy + r), (cx + r, cy + r)]
    if command is Command.MOVE_DOWN:
        return [(cx, cy + r), (cx - r, cy - r), (cx + r, cy - r)]
    if command is Command.MOVE_LEFT:
        return [(cx - r, cy), (cx + r, cy - r), (cx + r, cy + r)]
    return [(cx + r, cy), (cx - r, cy - r), (cx - r, cy + r)]
