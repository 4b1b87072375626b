"""
Wall and self collision checks, run on the snake after it advanced.
"""
from enum import Enum

from .snake import Snake


class Outcome(Enum):
    ALIVE = "alive"
    DEAD_WALL = "wall"
    DEAD_SELF = "self"

    @property
    def is_dead(self) -> bool:
        return self is not Outcome.ALIVE


def classify(snake: Snake, grid_size: int) -> Outcome:
    head = snake.head
    if not (0 <= head.x < grid_size and 0 <= head.y < grid_size):
        return Outcome.DEAD_WALL
    if head in snake.body:
        return Outcome.DEAD_SELF
    return Outcome.ALIVE
