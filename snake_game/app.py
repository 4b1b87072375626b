"""
Classic Snake - pygame host for the rule engine.

Controls:
- Arrow keys / WASD, the on-screen pad or a swipe on the board: move
- Space or the Restart button: play again after a game over
- M or the sound button: mute / unmute
- Esc or window close: quit
"""
from __future__ import annotations

import argparse
import logging
import sys
from typing import List, Optional

# Try to import pygame with a friendly error if missing
try:
    import pygame
except ImportError as e:
    print("This game requires the 'pygame' package. Install it with:\n  pip install pygame\n\nError:", e)
    sys.exit(1)

from .audio import create_audio
from .config import (
    FRAME_RATE, HUD_HEIGHT, PAD_HEIGHT, SWIPE_MIN_DISTANCE, TICK_MS, GameConfig,
)
from .controls import InputRouter, SwipeTracker
from .food import FoodPolicy
from .grid import Grid
from .loop import GameLoop
from .pad import ButtonPad, KeyboardAdapter
from .render import PygameRenderer

logger = logging.getLogger(__name__)


class SnakeApp:
    def __init__(self, config: GameConfig):
        pygame.init()
        pygame.display.set_caption("Snake")
        self.config = config
        self.window_size = (config.canvas_size, config.canvas_size + HUD_HEIGHT + PAD_HEIGHT)
        self.screen = pygame.display.set_mode(self.window_size)
        self.clock = pygame.time.Clock()

        self.buttons = ButtonPad(config.canvas_size)
        self.audio = create_audio(muted=not config.sound)
        grid = Grid.from_canvas(config.canvas_size, config.cell_size)
        self.renderer = PygameRenderer(self.screen, grid, self.buttons)
        self.loop = GameLoop(config, renderer=self.renderer, audio=self.audio)
        self.renderer.muted = self.audio.muted

        self.router = InputRouter(self.loop)
        self.keyboard = KeyboardAdapter()
        self.swipe = SwipeTracker(config.swipe_min_distance)
        self._interacted = False

    # ------------------------ Input ----------------------------------

    def _first_interaction(self):
        # Music waits for the player, like autoplay rules in a browser.
        if not self._interacted:
            self._interacted = True
            if self.loop.session.running:
                self.audio.start_music()

    def _toggle_sound(self):
        self.renderer.muted = self.audio.toggle_mute()
        logger.info(f"Sound {'muted' if self.renderer.muted else 'on'}")

    def _finger_pos(self, event):
        return (event.x * self.window_size[0], event.y * self.window_size[1])

    def handle_input(self) -> bool:
        """Drain the event queue; returns False once the player quits."""
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                return False
            if event.type == pygame.KEYDOWN:
                if event.key == pygame.K_ESCAPE:
                    return False
                self._first_interaction()
                if event.key == pygame.K_m:
                    self._toggle_sound()
                else:
                    self.router.handle(self.keyboard.translate(event.key))
            elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
                self._first_interaction()
                if self.buttons.sound_at(event.pos):
                    self._toggle_sound()
                else:
                    self.router.handle(self.buttons.command_at(event.pos))
            elif event.type == pygame.FINGERDOWN:
                self._first_interaction()
                pos = self._finger_pos(event)
                if self.loop.grid.contains_pixel(pos):
                    self.swipe.begin(pos)
            elif event.type == pygame.FINGERUP:
                self.router.handle(self.swipe.end(self._finger_pos(event)))
        return True

    # ------------------------ Loop -----------------------------------

    def run(self):
        self.loop.start()
        while self.handle_input():
            self.loop.advance_time(self.clock.tick(FRAME_RATE))
            self.renderer.draw()
            pygame.display.flip()
        pygame.quit()


# ---------------------------- Entry ----------------------------------

def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="snake-game", description="Play classic Snake.")
    parser.add_argument("--tick-ms", type=int, default=TICK_MS,
                        help=f"milliseconds between snake moves (default: {TICK_MS})")
    parser.add_argument("--swipe-distance", type=int, default=SWIPE_MIN_DISTANCE,
                        help=f"minimum swipe length in pixels (default: {SWIPE_MIN_DISTANCE})")
    parser.add_argument("--food-policy", choices=[p.value for p in FoodPolicy],
                        default=FoodPolicy.UNGUARDED.value,
                        help="where new food may appear (default: unguarded, even under the snake)")
    parser.add_argument("--seed", type=int, default=None, help="seed for food placement")
    parser.add_argument("--mute", action="store_true", help="start without sound")
    parser.add_argument("--log-level", default="WARNING",
                        choices=["DEBUG", "INFO", "WARNING", "ERROR"], help="logging verbosity")
    return parser


def config_from_args(args: argparse.Namespace) -> GameConfig:
    return GameConfig(
        tick_ms=args.tick_ms,
        swipe_min_distance=args.swipe_distance,
        food_policy=FoodPolicy(args.food_policy),
        sound=not args.mute,
        seed=args.seed,
    )


def main(argv: Optional[List[str]] = None):
    parser = build_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(level=args.log_level, format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    try:
        config = config_from_args(args)
    except ValueError as e:
        parser.error(str(e))
    SnakeApp(config).run()


if __name__ == "__main__":
    main()
