"""
Player input: commands, the ``InputRouter`` that applies them to the running
game, and swipe gestures. Key and button adapters live in ``pad``.
"""
from __future__ import annotations

import logging
from enum import Enum
from typing import Dict, Optional, Tuple

from .config import SWIPE_MIN_DISTANCE
from .grid import DOWN, LEFT, RIGHT, UP, Heading
from .session import Phase

logger = logging.getLogger(__name__)


class Command(Enum):
    MOVE_UP = "up"
    MOVE_DOWN = "down"
    MOVE_LEFT = "left"
    MOVE_RIGHT = "right"
    RESTART = "restart"


COMMAND_HEADINGS: Dict[Command, Heading] = {
    Command.MOVE_UP: UP,
    Command.MOVE_DOWN: DOWN,
    Command.MOVE_LEFT: LEFT,
    Command.MOVE_RIGHT: RIGHT,
}


class InputRouter:
    """Applies commands to a GameLoop without touching the snake itself."""

    def __init__(self, loop):
        self.loop = loop

    def handle(self, command: Optional[Command]) -> bool:
        """Apply ``command``; returns True if it changed anything."""
        if command is Command.RESTART:
            return self.loop.restart()
        heading = COMMAND_HEADINGS.get(command)
        if heading is None:
            return False
        return self.request_heading(heading)

    def request_heading(self, heading: Heading) -> bool:
        session = self.loop.session
        if session.phase is not Phase.RUNNING:
            return False
        if heading == session.heading.opposite:
            logger.debug(f"Rejected reversal to {heading} while heading {session.heading}")
            return False
        # Last request before the next tick wins.
        session.pending_heading = heading
        return True


# ---------------------------- Swipes ---------------------------------

def swipe_command(dx: float, dy: float, min_distance: float = SWIPE_MIN_DISTANCE) -> Optional[Command]:
    """Direction of a swipe displacement, or None if it is too short."""
    if abs(dx) > abs(dy):
        if abs(dx) > min_distance:
            return Command.MOVE_RIGHT if dx > 0 else Command.MOVE_LEFT
    elif abs(dy) > min_distance:
        return Command.MOVE_DOWN if dy > 0 else Command.MOVE_UP
    return None


class SwipeTracker:
    """Remembers where a touch started and turns its end point into a command."""

    def __init__(self, min_distance: float = SWIPE_MIN_DISTANCE):
        self.min_distance = min_distance
        self._start: Optional[Tuple[float, float]] = None

    @property
    def active(self) -> bool:
        return self._start is not None

    def begin(self, pos: Tuple[float, float]) -> None:
        self._start = pos

    def end(self, pos: Tuple[float, float]) -> Optional[Command]:
        if self._start is None:
            return None
        sx, sy = self._start
        self._start = None
        return swipe_command(pos[0] - sx, pos[1] - sy, self.min_distance)

    def cancel(self) -> None:
        self._start = None
