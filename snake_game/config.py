"""
Game settings.

Module constants hold the classic values; ``GameConfig`` bundles the ones a
player can override from the command line.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .food import FoodPolicy

# ---------------------------- Board ----------------------------------

CANVAS_SIZE = 400        # playfield width/height in pixels
CELL_SIZE = 20           # pixel size of one cell
CELL_GAP = 2             # each cell is drawn CELL_SIZE - CELL_GAP wide

START_SNAKE = ((10, 10), (9, 10), (8, 10))   # head first
START_FOOD = (15, 15)

# ---------------------------- Timing ---------------------------------

TICK_MS = 100            # one move every 100 ms -> 10 ticks per second
MUSIC_BEAT_MS = 250      # background arpeggio advances one note per beat
FRAME_RATE = 60          # redraws per second of the host window

# ---------------------------- Input ----------------------------------

SWIPE_MIN_DISTANCE = 30  # pixels a swipe must travel on its main axis

# ---------------------------- Layout ---------------------------------

HUD_HEIGHT = 44
PAD_HEIGHT = 176         # on-screen direction buttons under the board

# Colors (R, G, B)
BLACK      = (0, 0, 0)
BG_DARK    = (10, 10, 18)
WHITE      = (240, 240, 240)
GRAY       = (130, 136, 148)
NEON_GREEN = (0, 255, 0)
HEAD_GREEN = (204, 255, 204)
NEON_PINK  = (255, 0, 85)
BUTTON     = (40, 44, 60)
BUTTON_RIM = (0, 255, 0)

GAME_OVER_MESSAGE = "Game Over!"
RESTART_HINT = "Press Space or tap Restart to play again"


@dataclass(frozen=True)
class GameConfig:
    canvas_size: int = CANVAS_SIZE
    cell_size: int = CELL_SIZE
    tick_ms: int = TICK_MS
    swipe_min_distance: int = SWIPE_MIN_DISTANCE
    food_policy: FoodPolicy = FoodPolicy.UNGUARDED
    sound: bool = True
    seed: Optional[int] = None

    def __post_init__(self):
        if self.cell_size <= 0:
            raise ValueError(f"cell_size must be positive, got {self.cell_size}")
        if self.canvas_size <= 0 or self.canvas_size % self.cell_size:
            raise ValueError(
                f"canvas_size {self.canvas_size} is not a positive multiple of cell_size {self.cell_size}"
            )
        if self.tick_ms <= 0:
            raise ValueError(f"tick_ms must be positive, got {self.tick_ms}")
        if self.swipe_min_distance < 0:
            raise ValueError(f"swipe_min_distance must not be negative, got {self.swipe_min_distance}")
        # Accept the plain string form too ("unguarded", "avoid-snake").
        object.__setattr__(self, "food_policy", FoodPolicy(self.food_policy))
        tile_count = self.tile_count
        for x, y in START_SNAKE + (START_FOOD,):
            if not (0 <= x < tile_count and 0 <= y < tile_count):
                raise ValueError(f"a {tile_count}x{tile_count} grid cannot hold the start position {(x, y)}")

    @property
    def tile_count(self) -> int:
        """Cells per side of the square grid."""
        return self.canvas_size // self.cell_size
