#!/usr/bin/env python3
"""
RunController: Idle -> Running -> Idle.

- start(): needs a START and an END and no active run; resets the board,
  then hands the selected algorithm's search to a SearchRun.
- tick():  advance one suspension (frame-loop driving).
- run():   start and drive to completion through a StepScheduler.
- reset(): clear search marks; ignored while running.

Requests that cannot be honoured are dropped, not queued.
"""

import logging
from typing import Optional

from pathviz.core.algorithms import ALGORITHMS, make_algorithm
from pathviz.core.board import Board
from pathviz.core.config import DEFAULT_ALGO, RunConfig
from pathviz.core.scheduler import SearchRun, StepScheduler
from pathviz.core.types import SearchResult, StepResult

LOGGER = logging.getLogger(__name__)

IDLE = "Idle"
RUNNING = "Running"


class RunController:
    def __init__(self, board: Board, config: Optional[RunConfig] = None,
                 algorithm: str = DEFAULT_ALGO):
        self.board = board
        self.config = config or RunConfig()
        self.selected = DEFAULT_ALGO
        self.select(algorithm)
        self.simulating = False
        self.current: Optional[SearchRun] = None
        self.last_result: Optional[SearchResult] = None
        self.last_step: Optional[StepResult] = None

    @property
    def state(self) -> str:
        return RUNNING if self.simulating else IDLE

    def select(self, name: str) -> None:
        if name not in ALGORITHMS:
            raise KeyError(f"unknown algorithm {name!r}")
        self.selected = name

    # -------------------- transitions --------------------

    def start(self, name: Optional[str] = None) -> bool:
        if self.simulating:
            LOGGER.debug("run request ignored: a search is already running")
            return False
        if name is not None:
            self.select(name)
        grid = self.board.grid
        start, goal = grid.start, grid.goal
        if start is None or goal is None:
            LOGGER.debug("run request ignored: start=%s goal=%s", start, goal)
            return False

        self.board.reset()
        algo = make_algorithm(self.selected)
        self.simulating = True
        self.last_result = None
        self.last_step = None
        self.current = SearchRun(algo.search(self.board, start, goal, self.config))
        LOGGER.info("%s started on %dx%d grid, %s -> %s",
                    self.selected, grid.width, grid.height, start, goal)
        return True

    def tick(self) -> Optional[StepResult]:
        """Advance the active run by one suspension. None when idle or just finished."""
        if not self.simulating:
            return None
        try:
            step = self.current.step()
        except BaseException:
            self._abort()
            raise
        if step is not None:
            self.last_step = step
            return step
        self._finish()
        return None

    def run(self, name: Optional[str] = None,
            scheduler: Optional[StepScheduler] = None) -> Optional[SearchResult]:
        if not self.start(name):
            return None
        scheduler = scheduler or StepScheduler(self.config)
        try:
            scheduler.drive(self.current)
        except BaseException:
            self._abort()
            raise
        self._finish()
        return self.last_result

    def _finish(self) -> None:
        result = self.current.result
        self.last_result = result
        self.simulating = False
        if result.found:
            LOGGER.info("%s found a route of %d steps (%d expansions)",
                        result.algo, result.edge_count, result.expanded)
        else:
            LOGGER.info("%s found no route (%d expansions)", result.algo, result.expanded)

    def _abort(self) -> None:
        self.simulating = False
        self.current = None
        LOGGER.warning("%s aborted: the search raised", self.selected)

    def reset(self) -> bool:
        if self.simulating:
            LOGGER.debug("reset ignored: a search is running")
            return False
        self.board.reset()
        self.last_result = None
        self.last_step = None
        return True
