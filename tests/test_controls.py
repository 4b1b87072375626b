"""
Tests for the input router and the keyboard, button and swipe adapters.
"""

from unittest.mock import Mock

import pygame
import pytest

from snake_game.config import HUD_HEIGHT
from snake_game.controls import Command, InputRouter, SwipeTracker, swipe_command
from snake_game.grid import DOWN, LEFT, RIGHT, UP, Cell
from snake_game.hooks import Audio, Renderer
from snake_game.loop import GameLoop
from snake_game.pad import ButtonPad, KeyboardAdapter
from snake_game.session import Phase
from snake_game.snake import Snake


@pytest.fixture
def loop():
    loop = GameLoop(renderer=Mock(spec=Renderer), audio=Mock(spec=Audio))
    loop.start()
    return loop


@pytest.fixture
def router(loop):
    return InputRouter(loop)


class TestInputRouter:
    """Tests for heading requests and restart routing."""

    def test_reversal_rejected(self, router, loop):
        """Heading right, a left request is ignored."""
        assert router.handle(Command.MOVE_LEFT) is False
        assert loop.session.pending_heading == RIGHT

    def test_turn_accepted(self, router, loop):
        assert router.handle(Command.MOVE_UP) is True
        assert loop.session.pending_heading == UP
        assert loop.session.heading == RIGHT

    def test_last_request_wins(self, router, loop):
        """Only the most recent accepted request reaches the tick."""
        router.handle(Command.MOVE_UP)
        router.handle(Command.MOVE_DOWN)
        loop.step()
        assert loop.session.snake.head == Cell(10, 11)

    def test_reversal_checked_against_active_heading(self, router, loop):
        """Up then left within one tick cannot fold the snake back on itself."""
        assert router.handle(Command.MOVE_UP) is True
        assert router.handle(Command.MOVE_LEFT) is False
        assert loop.session.pending_heading == UP

    def test_accepted_heading_never_opposite_of_active(self, router, loop):
        commands = [Command.MOVE_LEFT, Command.MOVE_UP, Command.MOVE_DOWN, Command.MOVE_RIGHT,
                    Command.MOVE_LEFT, Command.MOVE_DOWN, Command.MOVE_UP]
        for command in commands:
            router.handle(command)
            assert loop.session.pending_heading != loop.session.heading.opposite
            loop.step()
            if loop.phase is Phase.GAME_OVER:
                break

    def test_unknown_command_ignored(self, router, loop):
        assert router.handle(None) is False
        assert router.handle("jump") is False
        assert loop.session.pending_heading == RIGHT

    def test_moves_ignored_after_game_over(self, router, loop):
        loop.session.phase = Phase.GAME_OVER
        assert router.handle(Command.MOVE_UP) is False
        assert loop.session.pending_heading == RIGHT

    def test_restart_only_after_game_over(self, router, loop):
        assert router.handle(Command.RESTART) is False

        loop.session.snake = Snake([Cell(19, 10), Cell(18, 10)])
        loop.step()
        assert loop.phase is Phase.GAME_OVER

        assert router.handle(Command.RESTART) is True
        assert loop.phase is Phase.RUNNING
        assert loop.session.snake.head == Cell(10, 10)

    def test_router_follows_restarted_session(self, router, loop):
        """After a restart requests land on the new session."""
        loop.session.phase = Phase.GAME_OVER
        loop.restart()
        router.handle(Command.MOVE_DOWN)
        assert loop.session.pending_heading == DOWN


class TestKeyboardAdapter:
    """Tests for key translation."""

    @pytest.mark.parametrize("key, command", [
        (pygame.K_UP, Command.MOVE_UP),
        (pygame.K_w, Command.MOVE_UP),
        (pygame.K_DOWN, Command.MOVE_DOWN),
        (pygame.K_s, Command.MOVE_DOWN),
        (pygame.K_LEFT, Command.MOVE_LEFT),
        (pygame.K_a, Command.MOVE_LEFT),
        (pygame.K_RIGHT, Command.MOVE_RIGHT),
        (pygame.K_d, Command.MOVE_RIGHT),
        (pygame.K_SPACE, Command.RESTART),
    ])
    def test_mapped_keys(self, key, command):
        assert KeyboardAdapter().translate(key) is command

    def test_unmapped_key(self):
        assert KeyboardAdapter().translate(pygame.K_q) is None


class TestButtonPad:
    """Tests for on-screen button hit testing."""

    def test_direction_buttons(self):
        pad = ButtonPad(400)
        for command, rect in pad.directions.items():
            assert pad.command_at(rect.center) is command

    def test_pad_sits_below_the_board(self):
        pad = ButtonPad(400)
        for rect in pad.directions.values():
            assert rect.top >= 400 + HUD_HEIGHT

    def test_restart_button_only_when_visible(self):
        pad = ButtonPad(400)
        assert pad.command_at(pad.restart.center) is None
        pad.restart_visible = True
        assert pad.command_at(pad.restart.center) is Command.RESTART

    def test_sound_button(self):
        pad = ButtonPad(400)
        assert pad.sound_at(pad.sound.center)
        assert not pad.sound_at((5, 5))

    def test_miss(self):
        assert ButtonPad(400).command_at((5, 5)) is None


class TestSwipe:
    """Tests for swipe gesture derivation."""

    @pytest.mark.parametrize("dx, dy, command", [
        (50, 10, Command.MOVE_RIGHT),
        (-50, 10, Command.MOVE_LEFT),
        (10, 50, Command.MOVE_DOWN),
        (10, -50, Command.MOVE_UP),
    ])
    def test_dominant_axis_and_sign(self, dx, dy, command):
        assert swipe_command(dx, dy) is command

    def test_too_short(self):
        """The main axis must travel more than the threshold."""
        assert swipe_command(30, 0) is None
        assert swipe_command(0, -30) is None
        assert swipe_command(31, 0) is Command.MOVE_RIGHT

    def test_tie_goes_vertical(self):
        assert swipe_command(40, 40) is Command.MOVE_DOWN

    def test_custom_threshold(self):
        assert swipe_command(50, 0, min_distance=60) is None

    def test_tracker(self):
        tracker = SwipeTracker()
        tracker.begin((100, 100))
        assert tracker.active
        assert tracker.end((40, 110)) is Command.MOVE_LEFT
        assert not tracker.active

    def test_end_without_begin(self):
        assert SwipeTracker().end((40, 40)) is None

    def test_cancel(self):
        tracker = SwipeTracker(min_distance=10)
        tracker.begin((0, 0))
        tracker.cancel()
        assert tracker.end((100, 0)) is None
