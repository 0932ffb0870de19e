from pathviz.core.bfs import BreadthFirstSearch
from pathviz.core.board import Board
from pathviz.core.config import RunConfig
from pathviz.core.scheduler import SearchRun, StepScheduler
from pathviz.core.types import CellState, Grid


class FakeSleep:
    def __init__(self):
        self.calls = []

    def __call__(self, seconds):
        self.calls.append(seconds)


def _bfs_run(grid, config, listeners=()):
    board = Board(grid, list(listeners))
    return SearchRun(BreadthFirstSearch().search(board, grid.start, grid.goal, config))


def test_drive_sleeps_once_per_suspension():
    config = RunConfig(step_delay=0.25)
    sleep = FakeSleep()
    run = _bfs_run(Grid.from_rows(["S...E"]), config)
    result = StepScheduler(config, sleep=sleep).drive(run)
    assert result.found
    assert run.done
    assert len(sleep.calls) == run.suspensions
    assert set(sleep.calls) == {0.25}


def test_delay_is_read_at_every_suspension():
    config = RunConfig(step_delay=0.5)
    sleep = FakeSleep()

    def speed_up(cell, state):
        if state == CellState.VISITED and cell == (2, 0):
            config.step_delay = 0.1

    run = _bfs_run(Grid.from_rows(["S....E"]), config, [speed_up])
    StepScheduler(config, sleep=sleep).drive(run)
    assert sleep.calls[0] == 0.5
    assert sleep.calls[-1] == 0.1


def test_zero_delay_never_sleeps():
    config = RunConfig(step_delay=0.0)
    sleep = FakeSleep()
    StepScheduler(config, sleep=sleep).drive(_bfs_run(Grid.from_rows(["S..E"]), config))
    assert sleep.calls == []


def test_step_returns_none_after_finishing():
    config = RunConfig(step_delay=0.0)
    run = _bfs_run(Grid.from_rows(["S.E"]), config)
    steps = []
    while True:
        step = run.step()
        if step is None:
            break
        steps.append(step)
    assert steps and all(s.status == "running" for s in steps)
    assert run.result.found
    assert run.step() is None
