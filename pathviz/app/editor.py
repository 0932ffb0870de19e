#!/usr/bin/env python3
# pathviz/app/editor.py
"""Pointer tools: what a press or drag on a cell does to the board."""

from pathviz.core.board import Board
from pathviz.core.types import Cell, CellState

POINTER = "pointer"
WALL_BRUSH = "wall"
ERASER = "eraser"

TOOLS = (POINTER, WALL_BRUSH, ERASER)


def _brush(board: Board, cell: Cell, state: CellState) -> bool:
    # brush and eraser leave the endpoints alone
    if board.grid.get(cell) in (CellState.START, CellState.END):
        return False
    return board.place(cell, state)


def primary_press(board: Board, cell: Cell, tool: str) -> bool:
    """Left button. Pointer moves START; brush paints WALL; eraser paints EMPTY."""
    if not board.grid.in_bounds(cell):
        return False
    if tool == POINTER:
        return board.place(cell, CellState.START)
    return drag(board, cell, tool)


def secondary_press(board: Board, cell: Cell, tool: str) -> bool:
    """Right button. Only the pointer reacts: it moves END."""
    if tool != POINTER or not board.grid.in_bounds(cell):
        return False
    return board.place(cell, CellState.END)


def drag(board: Board, cell: Cell, tool: str) -> bool:
    """Motion with the left button held."""
    if not board.grid.in_bounds(cell):
        return False
    if tool == WALL_BRUSH:
        return _brush(board, cell, CellState.WALL)
    if tool == ERASER:
        return _brush(board, cell, CellState.EMPTY)
    return False
