import random
from collections import deque

import pytest

from pathviz.core.board import Board
from pathviz.core.config import RunConfig
from pathviz.core.directions import FOUR_CONNECTED
from pathviz.core.scheduler import SearchRun, StepScheduler
from pathviz.core.types import CellState, Grid


def _no_sleep(_seconds):
    return None


def _solve(algo, grid, config=None, listeners=()):
    config = config or RunConfig(step_delay=0.0)
    board = Board(grid, list(listeners))
    run = SearchRun(algo.search(board, grid.start, grid.goal, config))
    result = StepScheduler(config, sleep=_no_sleep).drive(run)
    return result, board, run


def _shortest_edges(grid, directions=FOUR_CONNECTED):
    """Plain BFS distance, start to goal; None when unreachable."""
    start, goal = grid.start, grid.goal
    dist = {start: 0}
    queue = deque([start])
    while queue:
        cur = queue.popleft()
        if cur == goal:
            return dist[cur]
        for n in grid.neighbors(cur, directions):
            if grid.is_walkable(n) and n not in dist:
                dist[n] = dist[cur] + 1
                queue.append(n)
    return None


def _random_grid(seed, width=5, height=5, wall_chance=0.3):
    rng = random.Random(seed)
    grid = Grid.empty(width, height)
    for y in range(height):
        for x in range(width):
            if rng.random() < wall_chance:
                grid.set((x, y), CellState.WALL)
    cells = [(x, y) for y in range(height) for x in range(width)]
    start, goal = rng.sample(cells, 2)
    grid.set(start, CellState.START)
    grid.set(goal, CellState.END)
    return grid


@pytest.fixture
def solve():
    return _solve


@pytest.fixture
def shortest_edges():
    return _shortest_edges


@pytest.fixture
def random_grid():
    return _random_grid


@pytest.fixture
def example_grid():
    # 3x3, start (0,0), goal (2,2), wall in the middle
    return Grid.from_rows([
        "S..",
        ".#.",
        "..E",
    ])
