"""
pygame-side input adapters: keyboard keys and on-screen buttons to ``Command``.
"""
from __future__ import annotations

from typing import Dict, Optional, Tuple

import pygame

from .config import HUD_HEIGHT
from .controls import Command

# ---------------------------- Keyboard -------------------------------

KEY_COMMANDS: Dict[int, Command] = {
    pygame.K_UP: Command.MOVE_UP,
    pygame.K_w: Command.MOVE_UP,
    pygame.K_DOWN: Command.MOVE_DOWN,
    pygame.K_s: Command.MOVE_DOWN,
    pygame.K_LEFT: Command.MOVE_LEFT,
    pygame.K_a: Command.MOVE_LEFT,
    pygame.K_RIGHT: Command.MOVE_RIGHT,
    pygame.K_d: Command.MOVE_RIGHT,
    pygame.K_SPACE: Command.RESTART,
}


class KeyboardAdapter:
    def translate(self, key: int) -> Optional[Command]:
        return KEY_COMMANDS.get(key)


# ---------------------------- Buttons --------------------------------

class ButtonPad:
    """
    On-screen controls: a direction pad under the board, a restart button
    over the board (only while visible) and a sound toggle in the HUD.
    """

    SIZE = 56
    GAP = 4

    def __init__(self, board_size: int):
        self.board_size = board_size
        self.restart_visible = False

        cx = board_size // 2
        top = board_size + HUD_HEIGHT + self.GAP
        step = self.SIZE + self.GAP
        half = self.SIZE // 2
        self.directions: Dict[Command, pygame.Rect] = {
            Command.MOVE_UP: pygame.Rect(cx - half, top, self.SIZE, self.SIZE),
            Command.MOVE_LEFT: pygame.Rect(cx - half - step, top + step, self.SIZE, self.SIZE),
            Command.MOVE_RIGHT: pygame.Rect(cx - half + step, top + step, self.SIZE, self.SIZE),
            Command.MOVE_DOWN: pygame.Rect(cx - half, top + 2 * step, self.SIZE, self.SIZE),
        }
        self.restart = pygame.Rect(0, 0, 160, 44)
        self.restart.center = (cx, board_size // 2 + 80)
        self.sound = pygame.Rect(board_size - 52, board_size + 6, 44, HUD_HEIGHT - 12)

    def command_at(self, pos: Tuple[int, int]) -> Optional[Command]:
        if self.restart_visible and self.restart.collidepoint(pos):
            return Command.RESTART
        for command, rect in self.directions.items():
            if rect.collidepoint(pos):
                return command
        return None

    def sound_at(self, pos: Tuple[int, int]) -> bool:
        return bool(self.sound.collidepoint(pos))
