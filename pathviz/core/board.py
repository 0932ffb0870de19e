#!/usr/bin/env python3
# pathviz/core/board.py
"""
Board: the one place cell states change.

- Searches call paint(); it refuses to repaint START / END.
- Editors call place(); no such restriction.
- Every real transition is reported to subscribers as fn(cell, state),
  so the renderer never has to be known by the engine.
"""

import logging
from typing import Callable, List, Optional

from pathviz.core.types import Cell, CellState, FIXED_STATES, Grid

LOGGER = logging.getLogger(__name__)

CellListener = Callable[[Cell, CellState], None]


class Board:
    def __init__(self, grid: Grid, listeners: Optional[List[CellListener]] = None):
        self.grid = grid
        self._listeners: List[CellListener] = list(listeners or [])

    # -------------------- observers --------------------

    def subscribe(self, fn: CellListener) -> None:
        if fn not in self._listeners:
            self._listeners.append(fn)

    def unsubscribe(self, fn: CellListener) -> None:
        if fn in self._listeners:
            self._listeners.remove(fn)

    def _notify(self, c: Cell, state: CellState) -> None:
        for fn in list(self._listeners):
            fn(c, state)

    # -------------------- mutation --------------------

    def paint(self, c: Cell, state: CellState) -> bool:
        """Search-side write. Returns False when the cell is START/END or unchanged."""
        current = self.grid.get(c)
        if current in (CellState.START, CellState.END) or current == state:
            return False
        self.grid.set(c, state)
        self._notify(c, state)
        return True

    def place(self, c: Cell, state: CellState) -> bool:
        """Editor-side write; keeps at most one START and one END on the grid."""
        if not self.grid.in_bounds(c):
            return False
        if state in (CellState.START, CellState.END):
            previous = self.grid.find(state)
            if previous == c:
                return False
            if previous is not None:
                self._write(previous, CellState.EMPTY)
        if self.grid.get(c) == state:
            return False
        self._write(c, state)
        return True

    def _write(self, c: Cell, state: CellState) -> None:
        self.grid.set(c, state)
        self._notify(c, state)

    def reset(self) -> int:
        """Repaint every non START/END/WALL cell to EMPTY. Returns how many changed."""
        changed = 0
        for y, row in enumerate(self.grid.cells):
            for x, v in enumerate(row):
                if v in FIXED_STATES or v == CellState.EMPTY:
                    continue
                self._write((x, y), CellState.EMPTY)
                changed += 1
        LOGGER.debug("board reset, %d cells cleared", changed)
        return changed

    def clear(self) -> None:
        """Wipe everything, walls and endpoints included."""
        for y, row in enumerate(self.grid.cells):
            for x, v in enumerate(row):
                if v != CellState.EMPTY:
                    self._write((x, y), CellState.EMPTY)
