#!/usr/bin/env python3
# pathviz/core/paths.py
import math
from typing import Dict, List, Sequence

from pathviz.core.board import Board
from pathviz.core.types import Cell, CellState


def from_predecessors(parent: Dict[Cell, Cell], start: Cell, goal: Cell) -> List[Cell]:
    """Walk parent links back from goal; return the cells strictly between start and goal."""
    path: List[Cell] = []
    if goal == start:
        return path
    cur = parent[goal]
    while cur != start:
        path.append(cur)
        cur = parent[cur]
    path.reverse()
    return path


def from_prefix(prefix: Sequence[Cell], start: Cell) -> List[Cell]:
    """A BFS prefix begins at start; drop it and keep the rest in order."""
    return [c for c in prefix if c != start]


def paint_path(board: Board, path: Sequence[Cell]) -> None:
    # goal side first, the way a recursive unwind would repaint it
    for c in reversed(path):
        board.paint(c, CellState.PATH)


def step_cost(a: Cell, b: Cell) -> float:
    return math.hypot(b[0] - a[0], b[1] - a[1])


def route_cost(route: Sequence[Cell]) -> float:
    return sum(step_cost(a, b) for a, b in zip(route, route[1:]))
