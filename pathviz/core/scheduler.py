#!/usr/bin/env python3
# pathviz/core/scheduler.py
"""
Cooperative pacing of a search.

A search is a generator: every `yield` is a suspension point (a cell was just
marked or un-marked) and the generator's return value is the SearchResult.

- SearchRun.step()      -> advance to the next suspension (viewer frame loop)
- StepScheduler.drive() -> run to completion, sleeping config.step_delay
                           between suspensions (re-read every time)
"""

import time
from typing import TYPE_CHECKING, Callable, Generator, Optional

from pathviz.core.types import SearchResult, StepResult

if TYPE_CHECKING:
    from pathviz.core.config import RunConfig

SearchSteps = Generator[StepResult, None, SearchResult]


class SearchRun:
    def __init__(self, steps: SearchSteps):
        self._steps = steps
        self.result: Optional[SearchResult] = None
        self.last_step: Optional[StepResult] = None
        self.suspensions = 0

    @property
    def done(self) -> bool:
        return self.result is not None

    def step(self) -> Optional[StepResult]:
        """Advance one suspension. Returns None once the search has finished."""
        if self.done:
            return None
        try:
            self.last_step = next(self._steps)
        except StopIteration as stop:
            self.result = stop.value
            return None
        self.suspensions += 1
        return self.last_step


class StepScheduler:
    def __init__(self, config: "RunConfig", sleep: Callable[[float], None] = time.sleep):
        self.config = config
        self._sleep = sleep

    def pause(self) -> None:
        delay = self.config.step_delay
        if delay > 0:
            self._sleep(delay)

    def drive(self, run: SearchRun) -> SearchResult:
        while run.step() is not None:
            self.pause()
        return run.result
