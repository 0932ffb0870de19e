#!/usr/bin/env python3
# pathviz/core/visits.py
from typing import List

from pathviz.core.types import Cell, Grid


class VisitMask:
    """Per-run "already processed" marks. Marks are never cleared."""

    def __init__(self, width: int, height: int):
        self.width = width
        self.height = height
        self._marks: List[List[bool]] = [[False] * width for _ in range(height)]
        self.count = 0

    @classmethod
    def for_grid(cls, grid: Grid) -> "VisitMask":
        return cls(grid.width, grid.height)

    def mark(self, c: Cell) -> None:
        x, y = c
        if not self._marks[y][x]:
            self._marks[y][x] = True
            self.count += 1

    def seen(self, c: Cell) -> bool:
        x, y = c
        return self._marks[y][x]

    __contains__ = seen
