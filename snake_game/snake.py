"""
The snake: an ordered chain of cells, head first.
"""
from __future__ import annotations

from typing import Iterable, Iterator, List, Optional

from .grid import Cell, Heading


class Snake:
    """
    Head-first list of cells, moved one cell per tick by ``advance``.

    Attributes:
        pending_growth: when set, the next advance keeps its tail
    """

    def __init__(self, cells: Iterable[Cell]):
        self._cells: List[Cell] = [Cell(*c) if isinstance(c, tuple) else c for c in cells]
        if not self._cells:
            raise ValueError("a snake needs at least one cell")
        self.pending_growth = False
        # Tail removed by the latest advance, kept so growth can restore it.
        self._dropped_tail: Optional[Cell] = None

    @property
    def head(self) -> Cell:
        return self._cells[0]

    @property
    def body(self) -> List[Cell]:
        return self._cells[1:]

    @property
    def cells(self) -> List[Cell]:
        return list(self._cells)

    def __len__(self) -> int:
        return len(self._cells)

    def __iter__(self) -> Iterator[Cell]:
        return iter(self._cells)

    def __contains__(self, cell: object) -> bool:
        return cell in self._cells

    def advance(self, heading: Heading) -> Cell:
        """Move the head one cell along ``heading`` and return the new head."""
        new_head = self.head + heading
        self._cells.insert(0, new_head)
        if self.pending_growth:
            self.pending_growth = False
            self._dropped_tail = None
        else:
            self._dropped_tail = self._cells.pop()
        return new_head

    def grow(self) -> None:
        """Lengthen the snake by one cell.

        The tail dropped by the latest advance comes back straight away; with
        nothing to restore, the next advance keeps its tail instead.
        """
        if self._dropped_tail is not None:
            self._cells.append(self._dropped_tail)
            self._dropped_tail = None
        else:
            self.pending_growth = True

    def __repr__(self):
        return f"<Snake length={len(self)} head={self.head}>"
