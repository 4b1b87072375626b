"""
Classic Snake.

The rule engine (grid, snake, food, collision, session, loop, controls) runs
without a display; ``snake_game.app`` puts it in a pygame window.
"""

from .collision import Outcome, classify
from .config import GameConfig
from .controls import Command, InputRouter
from .food import FoodPolicy, FoodSpawner
from .grid import DOWN, LEFT, RIGHT, UP, Cell, Grid, Heading
from .hooks import Audio, Renderer
from .loop import GameLoop, Ticker
from .session import GameSession, Phase
from .snake import Snake

__all__ = [
    'UP', 'DOWN', 'LEFT', 'RIGHT',
    'Cell', 'Heading', 'Grid',
    'Snake',
    'FoodPolicy', 'FoodSpawner',
    'Outcome', 'classify',
    'GameSession', 'Phase',
    'GameLoop', 'Ticker',
    'Command', 'InputRouter',
    'Audio', 'Renderer',
    'GameConfig',
]
