"""
The game loop: a fixed-period ticker driving the rule engine.
"""
from __future__ import annotations

import logging
import random
from typing import Callable, Optional

from .collision import classify
from .config import GAME_OVER_MESSAGE, MUSIC_BEAT_MS, GameConfig
from .food import FoodSpawner
from .grid import Grid
from .hooks import Audio, Renderer
from .session import GameSession, Phase

logger = logging.getLogger(__name__)


class Ticker:
    """
    Calls ``callback`` once every ``period_ms`` of elapsed time while started.

    The host feeds it elapsed milliseconds through ``advance``. The running
    flag is checked before every call, so a callback that stops the ticker
    also cancels any catch-up calls still owed.
    """

    def __init__(self, period_ms: int, callback: Callable[[], None]):
        if period_ms <= 0:
            raise ValueError(f"period_ms must be positive, got {period_ms}")
        self.period_ms = period_ms
        self.callback = callback
        self._running = False
        self._elapsed = 0.0

    @property
    def running(self) -> bool:
        return self._running

    def start(self) -> None:
        self._running = True
        self._elapsed = 0.0

    def stop(self) -> None:
        self._running = False
        self._elapsed = 0.0

    def advance(self, elapsed_ms: float) -> int:
        """Account for ``elapsed_ms`` of time and return how many periods fired."""
        if not self._running:
            return 0
        self._elapsed += elapsed_ms
        fired = 0
        while self._running and self._elapsed >= self.period_ms:
            self._elapsed -= self.period_ms
            fired += 1
            self.callback()
        return fired


class GameLoop:
    """
    Owns the session and runs one tick per period:
      1) apply the pending heading and advance the snake
      2) classify collisions
      3) on death, stop ticking and announce game over
      4) otherwise handle food, then hand the frame to the renderer
    """

    def __init__(
        self,
        config: Optional[GameConfig] = None,
        renderer: Optional[Renderer] = None,
        audio: Optional[Audio] = None,
        spawner: Optional[FoodSpawner] = None,
    ):
        self.config = config if config is not None else GameConfig()
        self.grid = Grid.from_canvas(self.config.canvas_size, self.config.cell_size)
        self.renderer = renderer if renderer is not None else Renderer()
        self.audio = audio if audio is not None else Audio()
        if spawner is None:
            spawner = FoodSpawner(self.grid.size, self.config.food_policy,
                                  rng=random.Random(self.config.seed))
        self.spawner = spawner
        self.session = GameSession.fresh()
        self.ticker = Ticker(self.config.tick_ms, self.step)
        self.music = Ticker(MUSIC_BEAT_MS, self._beat)

    @property
    def phase(self) -> Phase:
        return self.session.phase

    def start(self) -> None:
        logger.info(f"Game started on a {self.grid.size}x{self.grid.size} grid, one tick every {self.config.tick_ms} ms")
        self._resume()

    def advance_time(self, elapsed_ms: float) -> None:
        self.ticker.advance(elapsed_ms)
        self.music.advance(elapsed_ms)

    def step(self) -> None:
        s = self.session
        if s.phase is not Phase.RUNNING:
            return

        s.heading = s.pending_heading
        s.snake.advance(s.heading)
        s.ticks += 1

        s.outcome = classify(s.snake, self.grid.size)
        if s.outcome.is_dead:
            self._game_over()
            return

        if s.food is not None and s.snake.head == s.food:
            s.score += 1
            s.snake.grow()
            self.audio.on_food_eaten()
            self.renderer.on_score_changed(s.score)
            s.food = self.spawner.respawn(s.snake)

        self._render()

    def restart(self) -> bool:
        """Start a fresh game. Only honoured once the current one is over."""
        if self.session.phase is not Phase.GAME_OVER:
            logger.debug("Restart ignored: game still running")
            return False
        self.session = GameSession.fresh()
        self.renderer.hide_restart_affordance()
        self.audio.start_music()
        logger.info("Game restarted")
        self._resume()
        return True

    def _resume(self) -> None:
        self.ticker.start()
        self.music.start()
        self.renderer.on_score_changed(self.session.score)
        self._render()

    def _game_over(self) -> None:
        s = self.session
        s.phase = Phase.GAME_OVER
        self.ticker.stop()
        self.music.stop()
        self.audio.stop_music()
        self.audio.on_game_over()
        self.renderer.on_game_over_display(GAME_OVER_MESSAGE, s.score)
        self.renderer.show_restart_affordance()
        logger.info(f"Game over ({s.outcome.value}) after {s.ticks} ticks with score {s.score}")

    def _beat(self) -> None:
        if self.session.phase is Phase.RUNNING:
            self.audio.on_music_beat()

    def _render(self) -> None:
        s = self.session
        self.renderer.on_frame(s.snake.cells, s.food, s.snake.head)
