#!/usr/bin/env python3
"""
Breadth-first search over path prefixes.

The queue holds whole prefixes (tuples of cells starting at start) instead of
bare cells, so the winning route is on hand without a predecessor map.
Neighbors are marked VISITED when enqueued, which keeps a cell from entering
the queue twice.

Start is expanded before the first suspension, so the queue opens with the
one-step prefixes of its walkable neighbors. After that: one suspension per
dequeued prefix.
"""

import logging
from collections import deque
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Deque, List, Optional, Sequence, Tuple

from pathviz.core.board import Board
from pathviz.core.paths import from_prefix, paint_path
from pathviz.core.scheduler import SearchSteps
from pathviz.core.types import Cell, CellState, Direction, SearchResult, StepResult
from pathviz.core.visits import VisitMask

if TYPE_CHECKING:
    from pathviz.core.config import RunConfig

LOGGER = logging.getLogger(__name__)

Prefix = Tuple[Cell, ...]


@dataclass
class BreadthFirstSearch:
    name: str = "Breadth First Search"

    queue: Deque[Prefix] = field(default_factory=deque)
    visits: Optional[VisitMask] = None
    dequeued: int = 0

    def _expand(self, board: Board, prefix: Prefix, goal: Cell,
                directions: Sequence[Direction]) -> Optional[List[Cell]]:
        """Queue the fresh neighbors of the prefix's tail; the path once the goal is adjacent."""
        grid = board.grid
        for n in grid.neighbors(prefix[-1], directions):
            if not grid.is_walkable(n) or n in self.visits:
                continue
            if n == goal:
                return from_prefix(prefix, prefix[0])
            self.visits.mark(n)
            board.paint(n, CellState.VISITED)
            self.queue.append(prefix + (n,))
        return None

    def search(self, board: Board, start: Cell, goal: Cell, config: "RunConfig") -> SearchSteps:
        self.queue = deque()
        self.visits = VisitMask.for_grid(board.grid)
        self.visits.mark(start)
        self.dequeued = 0

        if start == goal:
            return SearchResult(True, start, goal, [], 0, self.name)

        path = self._expand(board, (start,), goal, config.directions)
        while path is None and self.queue:
            prefix = self.queue.popleft()
            self.dequeued += 1
            yield StepResult(status="running", current=prefix[-1], metrics=self._metrics())
            path = self._expand(board, prefix, goal, config.directions)

        if path is None:
            LOGGER.debug("%s emptied its queue after %d dequeues", self.name, self.dequeued)
            return SearchResult(False, start, goal, [], self.dequeued, self.name)

        paint_path(board, path)
        LOGGER.debug("%s found a %d-cell path after %d dequeues",
                     self.name, len(path), self.dequeued)
        return SearchResult(True, start, goal, path, self.dequeued, self.name)

    def _metrics(self) -> dict:
        return {
            "algo": self.name,
            "expanded": self.dequeued,
            "open_size": len(self.queue),
            "closed_count": self.visits.count if self.visits else 0,
            "path_len": 0,
        }
