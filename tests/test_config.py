import pytest

from pathviz.core.config import (DEFAULT_ALGO, DEFAULT_GRID, DEFAULT_STEP_DELAY,
                                 MAX_STEP_DELAY, RunConfig, load_config)
from pathviz.core.directions import EIGHT_CONNECTED, FOUR_CONNECTED


def test_defaults():
    cfg = load_config([], {})
    assert cfg.run.step_delay == DEFAULT_STEP_DELAY
    assert cfg.run.directions == FOUR_CONNECTED
    assert (cfg.grid_width, cfg.grid_height) == DEFAULT_GRID
    assert cfg.algorithm == DEFAULT_ALGO
    assert cfg.log_level == "INFO"


def test_environment_then_flags():
    env = {
        "PATHVIZ_STEP_DELAY": "0.2",
        "PATHVIZ_DIAGONAL": "yes",
        "PATHVIZ_GRID": "20x10",
        "PATHVIZ_ALGO": "A*",
        "PATHVIZ_LOG_LEVEL": "debug",
    }
    cfg = load_config([], env)
    assert cfg.run.step_delay == 0.2
    assert cfg.run.directions == EIGHT_CONNECTED
    assert (cfg.grid_width, cfg.grid_height) == (20, 10)
    assert cfg.algorithm == "A*"
    assert cfg.log_level == "DEBUG"

    cfg = load_config(["--delay=0", "--diagonal=off", "--grid=8X4", "--algo=Dijkstra", "stray"], env)
    assert cfg.run.step_delay == 0
    assert not cfg.run.diagonal
    assert (cfg.grid_width, cfg.grid_height) == (8, 4)
    assert cfg.algorithm == "Dijkstra"


def test_bare_diagonal_flag():
    assert load_config(["--diagonal"], {}).run.diagonal


@pytest.mark.parametrize("argv", [
    ["--delay=fast"],
    ["--delay=-1"],
    ["--grid=10"],
    ["--grid=0x5"],
    ["--grid=axb"],
    ["--diagonal=maybe"],
])
def test_bad_values_raise(argv):
    with pytest.raises(ValueError):
        load_config(argv, {})


def test_delay_is_capped():
    assert load_config(["--delay=60"], {}).run.step_delay == MAX_STEP_DELAY


def test_bump_delay():
    run = RunConfig(step_delay=0.1)
    assert run.bump_delay(2.0) == pytest.approx(0.2)
    run.step_delay = 0.0
    assert run.bump_delay(0.5) == 0.0
    assert run.bump_delay(2.0) == 0.001
    run.step_delay = MAX_STEP_DELAY
    assert run.bump_delay(2.0) == MAX_STEP_DELAY
