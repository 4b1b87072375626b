"""
Grid geometry: cells, headings and the cell-to-pixel mapping.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple


@dataclass(frozen=True)
class Heading:
    dx: int
    dy: int

    @property
    def opposite(self) -> "Heading":
        return Heading(-self.dx, -self.dy)


UP    = Heading(0, -1)
DOWN  = Heading(0, 1)
LEFT  = Heading(-1, 0)
RIGHT = Heading(1, 0)

HEADINGS = (UP, DOWN, LEFT, RIGHT)


@dataclass(frozen=True)
class Cell:
    x: int
    y: int

    def __add__(self, heading: Heading) -> "Cell":
        return Cell(self.x + heading.dx, self.y + heading.dy)


class Grid:
    """A square board of ``size`` x ``size`` cells, each ``cell_size`` pixels wide."""

    def __init__(self, size: int, cell_size: int):
        if size <= 0 or cell_size <= 0:
            raise ValueError(f"grid size and cell size must be positive, got {size} and {cell_size}")
        self.size = size
        self.cell_size = cell_size

    @classmethod
    def from_canvas(cls, canvas_size: int, cell_size: int) -> "Grid":
        return cls(canvas_size // cell_size, cell_size)

    @property
    def pixel_size(self) -> int:
        return self.size * self.cell_size

    def contains_pixel(self, pos: Tuple[float, float]) -> bool:
        return 0 <= pos[0] < self.pixel_size and 0 <= pos[1] < self.pixel_size

    def cell_rect(self, cell: Cell, gap: int = 0) -> Tuple[int, int, int, int]:
        """Pixel region (left, top, width, height) of a cell, shrunk by ``gap`` on the right and bottom."""
        side = max(1, self.cell_size - gap)
        return (cell.x * self.cell_size, cell.y * self.cell_size, side, side)

