import types

import pytest

from pathviz.core.directions import EIGHT_CONNECTED, FOUR_CONNECTED, directions_for
from pathviz.core.types import CellState, Grid, SearchResult
from pathviz.core.visits import VisitMask


def test_from_rows_reads_glyphs_and_endpoints():
    grid = Grid.from_rows([
        "S.#",
        "v*E",
    ])
    assert (grid.width, grid.height) == (3, 2)
    assert grid.start == (0, 0)
    assert grid.goal == (2, 1)
    assert grid.get((2, 0)) == CellState.WALL
    assert grid.get((0, 1)) == CellState.VISITED
    assert grid.get((1, 1)) == CellState.PATH
    assert grid.to_rows() == ["S.#", "v*E"]


def test_malformed_grids_are_rejected():
    with pytest.raises(ValueError):
        Grid.from_rows(["S..", ".."])
    with pytest.raises(ValueError):
        Grid.from_rows(["S.S", "..E"])
    with pytest.raises(ValueError):
        Grid.from_rows(["S?E"])
    with pytest.raises(ValueError):
        Grid.from_rows([])


def test_bounds_and_walkability():
    grid = Grid.from_rows([
        "S#",
        ".E",
    ])
    assert grid.in_bounds((1, 1))
    assert not grid.in_bounds((2, 0))
    assert not grid.in_bounds((0, -1))
    assert grid.is_walkable((0, 1))
    assert grid.is_walkable((0, 0))
    assert not grid.is_walkable((1, 0))
    assert not grid.is_walkable((-1, 0))


def test_neighbors_are_lazy_and_follow_direction_order():
    grid = Grid.empty(3, 3)
    around = grid.neighbors((1, 1), FOUR_CONNECTED)
    assert isinstance(around, types.GeneratorType)
    assert list(around) == [(0, 1), (2, 1), (1, 0), (1, 2)]
    # out-of-bounds offsets are dropped, walls are kept (walkability is a separate question)
    grid.set((1, 0), CellState.WALL)
    assert list(grid.neighbors((0, 0), EIGHT_CONNECTED)) == [(1, 0), (0, 1), (1, 1)]


def test_directions_for():
    assert directions_for(False) == FOUR_CONNECTED
    assert directions_for(True)[:4] == FOUR_CONNECTED
    assert len(directions_for(True)) == 8


def test_copy_is_independent():
    grid = Grid.from_rows(["S.E"])
    clone = grid.copy()
    clone.set((1, 0), CellState.WALL)
    assert grid.get((1, 0)) == CellState.EMPTY


def test_visit_mask_only_counts_new_marks():
    mask = VisitMask(2, 2)
    assert (1, 1) not in mask
    mask.mark((1, 1))
    mask.mark((1, 1))
    assert mask.seen((1, 1))
    assert mask.count == 1


def test_search_result_route():
    found = SearchResult(True, (0, 0), (2, 0), [(1, 0)])
    assert found.route == [(0, 0), (1, 0), (2, 0)]
    assert found.edge_count == 2
    missing = SearchResult(False, (0, 0), (2, 0))
    assert missing.route == []
    assert missing.edge_count is None
