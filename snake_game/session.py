"""
GameSession - everything that changes while a game is played.
"""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional

from .collision import Outcome
from .config import START_FOOD, START_SNAKE
from .grid import RIGHT, Cell, Heading
from .snake import Snake


class Phase(Enum):
    RUNNING = "running"
    GAME_OVER = "game_over"


@dataclass
class GameSession:
    """
    State of one game, owned by the loop and replaced wholesale on restart.

    Attributes:
        snake: the snake, head first
        food: cell of the current food item (None when the board is full)
        heading: heading applied by the latest tick
        pending_heading: heading the next tick will apply
        score: food eaten so far
        phase: RUNNING or GAME_OVER
        outcome: how the latest tick ended
        ticks: ticks played since the session started
    """
    snake: Snake
    food: Optional[Cell]
    heading: Heading = RIGHT
    pending_heading: Heading = RIGHT
    score: int = 0
    phase: Phase = Phase.RUNNING
    outcome: Outcome = Outcome.ALIVE
    ticks: int = 0

    @classmethod
    def fresh(cls) -> "GameSession":
        return cls(snake=Snake(Cell(x, y) for x, y in START_SNAKE), food=Cell(*START_FOOD))

    @property
    def running(self) -> bool:
        return self.phase is Phase.RUNNING

    def __repr__(self):
        return (
            f"<GameSession phase={self.phase.value}, score={self.score}, "
            f"ticks={self.ticks}, snake={self.snake!r}, food={self.food}>"
        )
