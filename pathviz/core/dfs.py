#!/usr/bin/env python3
"""
Depth-first backtracking search.

Per cell:
  mark VISITED -> suspend -> try each direction in order
  first child that reaches the goal   -> cell becomes PATH, stop
  every direction fails               -> cell back to EMPTY -> suspend -> fail

Runs on an explicit stack of frames rather than Python recursion, so a large
open grid cannot blow the interpreter's recursion limit. The first path
found wins; it is not necessarily the shortest.
"""

import logging
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, List, Optional, Tuple

from pathviz.core.board import Board
from pathviz.core.paths import paint_path
from pathviz.core.scheduler import SearchSteps
from pathviz.core.types import Cell, CellState, Direction, SearchResult, StepResult
from pathviz.core.visits import VisitMask

if TYPE_CHECKING:
    from pathviz.core.config import RunConfig

LOGGER = logging.getLogger(__name__)


@dataclass
class _Frame:
    cell: Cell
    directions: Tuple[Direction, ...]
    next_index: int = 0


@dataclass
class DepthFirstSearch:
    name: str = "Depth First Search"

    stack: List[_Frame] = field(default_factory=list)
    visits: Optional[VisitMask] = None
    entered: int = 0
    backtracked: int = 0

    def _enter(self, board: Board, c: Cell, config: "RunConfig") -> StepResult:
        self.visits.mark(c)
        board.paint(c, CellState.VISITED)
        self.stack.append(_Frame(c, tuple(config.directions)))
        self.entered += 1
        return StepResult(status="running", current=c, metrics=self._metrics())

    def search(self, board: Board, start: Cell, goal: Cell, config: "RunConfig") -> SearchSteps:
        grid = board.grid
        self.stack = []
        self.visits = VisitMask.for_grid(grid)
        self.entered = 0
        self.backtracked = 0

        if start == goal:
            return SearchResult(True, start, goal, [], 0, self.name)

        yield self._enter(board, start, config)

        while self.stack:
            frame = self.stack[-1]
            if frame.next_index >= len(frame.directions):
                # dead end: erase the mark and give the observer a beat to see it
                self.stack.pop()
                self.backtracked += 1
                board.paint(frame.cell, CellState.EMPTY)
                yield StepResult(status="running", current=frame.cell, metrics=self._metrics())
                continue

            dx, dy = frame.directions[frame.next_index]
            frame.next_index += 1
            x, y = frame.cell
            nxt = (x + dx, y + dy)
            if not grid.is_walkable(nxt) or nxt in self.visits:
                continue
            if nxt == goal:
                path = [f.cell for f in self.stack[1:]]
                paint_path(board, path)
                LOGGER.debug("%s found a %d-cell path after entering %d cells",
                             self.name, len(path), self.entered)
                return SearchResult(True, start, goal, path, self.entered, self.name)
            yield self._enter(board, nxt, config)

        LOGGER.debug("%s exhausted the grid after entering %d cells", self.name, self.entered)
        return SearchResult(False, start, goal, [], self.entered, self.name)

    def _metrics(self) -> dict:
        return {
            "algo": self.name,
            "expanded": self.entered,
            "open_size": len(self.stack),
            "closed_count": self.backtracked,
            "path_len": 0,
        }
