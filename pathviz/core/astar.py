#!/usr/bin/env python3
"""
A*: one expansion per suspension, for animation.

Search API shared by every algorithm:
- search(board, start, goal, config) -> generator of StepResult, returns SearchResult

Heuristic: Manhattan distance to the goal.
Edge cost: Euclidean distance between the two cells (diagonal = sqrt(2)).

Tie-breaking in the PQ: (f, h, -g, seq, cell): lower f, then lower h,
then deeper g, then FIFO by seq.

A neighbor that is already queued is NOT pushed again when its score
improves (no decrease-key); its queued entry keeps the old priority while
g/f/parent hold the improved values.
"""

import heapq
import logging
from dataclasses import dataclass, field
from math import inf
from typing import TYPE_CHECKING, Dict, List, Optional, Set, Tuple

from pathviz.core.board import Board
from pathviz.core.paths import from_predecessors, paint_path, step_cost
from pathviz.core.scheduler import SearchSteps
from pathviz.core.types import Cell, CellState, SearchResult, StepResult
from pathviz.core.visits import VisitMask

if TYPE_CHECKING:
    from pathviz.core.config import RunConfig

LOGGER = logging.getLogger(__name__)


@dataclass
class AStarSearch:
    name: str = "A*"

    # Internal state, rebuilt by every search()
    open_pq: List[Tuple[float, float, float, int, Cell]] = field(default_factory=list)  # (f, h, -g, seq, cell)
    open_set: Set[Cell] = field(default_factory=set)
    closed: Optional[VisitMask] = None
    g: Dict[Cell, float] = field(default_factory=dict)
    f: Dict[Cell, float] = field(default_factory=dict)
    parent: Dict[Cell, Cell] = field(default_factory=dict)
    popped_count: int = 0
    goal_cell: Optional[Cell] = None
    seq: int = 0  # monotonic counter for PQ stability

    # -------------------- helpers --------------------

    def _bump(self) -> int:
        self.seq += 1
        return self.seq

    def heuristic(self, c: Cell) -> float:
        """Manhattan distance to the goal."""
        (x, y) = c
        (gx, gy) = self.goal_cell
        return abs(gx - x) + abs(gy - y)

    def _push(self, c: Cell) -> None:
        heapq.heappush(self.open_pq, (self.f[c], self.heuristic(c), -self.g[c], self._bump(), c))
        self.open_set.add(c)

    # -------------------- main stepping logic --------------------

    def search(self, board: Board, start: Cell, goal: Cell, config: "RunConfig") -> SearchSteps:
        grid = board.grid
        self.open_pq = []
        self.open_set = set()
        self.closed = VisitMask.for_grid(grid)
        self.g = {}
        self.f = {}
        self.parent = {}
        self.popped_count = 0
        self.goal_cell = goal
        self.seq = 0

        self.g[start] = 0
        self.f[start] = self.heuristic(start)
        self._push(start)

        while self.open_pq:
            _, _, _, _, u = heapq.heappop(self.open_pq)
            self.open_set.discard(u)
            self.popped_count += 1

            if u == goal:
                path = from_predecessors(self.parent, start, goal)
                paint_path(board, path)
                LOGGER.debug("%s reached goal after %d pops, path %d cells",
                             self.name, self.popped_count, len(path))
                return SearchResult(True, start, goal, path, self.popped_count, self.name)

            self.closed.mark(u)
            board.paint(u, CellState.VISITED)
            yield StepResult(status="running", current=u, metrics=self._metrics())

            # Relax neighbors
            for v in grid.neighbors(u, config.directions):
                if not grid.is_walkable(v) or v in self.closed:
                    continue
                alt = self.g[u] + step_cost(u, v)
                if alt < self.g.get(v, inf):
                    self.parent[v] = u
                    self.g[v] = alt
                    self.f[v] = alt + self.heuristic(v)
                    if v not in self.open_set:
                        self._push(v)

        LOGGER.debug("%s exhausted the open set after %d pops", self.name, self.popped_count)
        return SearchResult(False, start, goal, [], self.popped_count, self.name)

    # -------------------- metrics --------------------

    def _metrics(self, path_len: int = 0) -> dict:
        return {
            "algo": self.name,
            "expanded": self.popped_count,
            "open_size": len(self.open_set),
            "closed_count": self.closed.count if self.closed else 0,
            "path_len": path_len,
        }
