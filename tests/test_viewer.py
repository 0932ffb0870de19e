import os

import pytest

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

pygame = pytest.importorskip("pygame")

from pathviz.app import editor  # noqa: E402
from pathviz.app.viewer import Viewer, build_board, main  # noqa: E402
from pathviz.core.config import RunConfig  # noqa: E402
from pathviz.core.controller import RunController  # noqa: E402
from pathviz.core.types import CellState  # noqa: E402


@pytest.fixture
def view():
    board = build_board(12, 8)
    controller = RunController(board, RunConfig(step_delay=0.0))
    v = Viewer(board, controller)
    yield v
    pygame.quit()


def _pixel(v, cell):
    ox, oy = v._grid_origin
    return (ox + cell[0] * v.cell_size + 1, oy + cell[1] * v.cell_size + 1)


def test_build_board_places_endpoints():
    board = build_board(12, 8)
    assert board.grid.start == (3, 4)
    assert board.grid.goal == (8, 4)


def test_cell_at_maps_pixels_to_cells(view):
    assert view.cell_at(_pixel(view, (5, 2))) == (5, 2)
    assert view.cell_at((0, 0)) is None


def test_mouse_edits_then_run_to_completion(view):
    view._switch_tool(editor.WALL_BRUSH)
    press = pygame.event.Event(pygame.MOUSEBUTTONDOWN, pos=_pixel(view, (5, 5)), button=1)
    view._handle_mouse_edit(press)
    assert view.board.grid.get((5, 5)) == CellState.WALL

    view._handle_key(pygame.K_2)
    assert view.controller.selected == "Breadth First Search"
    view._start_run()
    assert view.controller.simulating

    # edits are locked while the search runs
    view._handle_mouse_edit(pygame.event.Event(pygame.MOUSEBUTTONDOWN,
                                               pos=_pixel(view, (6, 6)), button=1))
    assert view.board.grid.get((6, 6)) == CellState.EMPTY

    while view.controller.simulating:
        view._tick_algorithm()
    assert view.state == "Done"
    assert view._visited_marks > 0
    view._draw()

    view._handle_key(pygame.K_r)
    assert not view.board.grid.cells_in(CellState.VISITED, CellState.PATH)


def test_keyboard_toggles(view):
    view._handle_key(pygame.K_g)
    assert view.config.diagonal
    delay = view.config.step_delay
    view._handle_key(pygame.K_MINUS)
    assert view.config.step_delay >= delay
    view._handle_key(pygame.K_e)
    assert view.tool == editor.ERASER
    view._handle_key(pygame.K_c)
    assert view.board.grid.start is None
    view._draw()


def test_main_exits_on_bad_config():
    with pytest.raises(SystemExit) as exc:
        main(["--grid=nope"])
    assert exc.value.code == 1
