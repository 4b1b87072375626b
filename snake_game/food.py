"""
Food placement.
"""
from __future__ import annotations

import logging
import random
from enum import Enum
from typing import Optional

from .grid import Cell
from .snake import Snake

logger = logging.getLogger(__name__)


class FoodPolicy(str, Enum):
    UNGUARDED = "unguarded"      # any cell, even one under the snake
    AVOID_SNAKE = "avoid-snake"  # only cells the snake does not occupy


class FoodSpawner:
    def __init__(self, grid_size: int, policy: FoodPolicy = FoodPolicy.UNGUARDED,
                 rng: Optional[random.Random] = None):
        if grid_size <= 0:
            raise ValueError(f"grid_size must be positive, got {grid_size}")
        self.grid_size = grid_size
        self.policy = FoodPolicy(policy)
        self.rng = rng if rng is not None else random.Random()

    def respawn(self, snake: Optional[Snake] = None) -> Optional[Cell]:
        """
        Pick the cell for the next food item.

        Returns None only under AVOID_SNAKE when the snake fills the board.
        """
        if self.policy is FoodPolicy.UNGUARDED or snake is None:
            food = Cell(self.rng.randrange(self.grid_size), self.rng.randrange(self.grid_size))
        else:
            occupied = set(snake)
            empty = [Cell(x, y) for x in range(self.grid_size) for y in range(self.grid_size)
                     if Cell(x, y) not in occupied]
            if not empty:
                logger.debug("No free cell left for food")
                return None
            food = self.rng.choice(empty)
        logger.debug(f"Food respawned at {food}")
        return food
