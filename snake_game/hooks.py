"""
Collaborators the game loop notifies.

Both base classes do nothing, so a loop without a screen or a sound card
plays exactly the same game.
"""
from typing import List, Optional

from .grid import Cell


class Renderer:
    def on_frame(self, snake_cells: List[Cell], food: Optional[Cell], head: Cell) -> None:
        """Called once per live tick, after the state update."""

    def on_score_changed(self, score: int) -> None:
        pass

    def on_game_over_display(self, message: str, score: int) -> None:
        pass

    def show_restart_affordance(self) -> None:
        pass

    def hide_restart_affordance(self) -> None:
        pass


class Audio:
    music_playing = False
    muted = False

    def on_food_eaten(self) -> None:
        pass

    def on_game_over(self) -> None:
        pass

    def on_music_beat(self) -> None:
        pass

    def start_music(self) -> None:
        pass

    def stop_music(self) -> None:
        pass

    def toggle_mute(self) -> bool:
        """Flip the mute switch and return the new state."""
        self.muted = not self.muted
        return self.muted
