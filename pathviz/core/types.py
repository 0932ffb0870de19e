#!/usr/bin/env python3
# pathviz/core/types.py
from dataclasses import dataclass, field
from enum import IntEnum
from typing import Any, Dict, Iterable, Iterator, List, Optional, Sequence, Tuple

Cell = Tuple[int, int]  # (col, row)
Direction = Tuple[int, int]  # (dx, dy)


class CellState(IntEnum):
    EMPTY = 0
    START = 1
    END = 2
    WALL = 3
    VISITED = 4
    PATH = 5


# Cells the user owns; a search never repaints them.
FIXED_STATES = (CellState.START, CellState.END, CellState.WALL)

_GLYPHS = {
    ".": CellState.EMPTY,
    "S": CellState.START,
    "E": CellState.END,
    "#": CellState.WALL,
    "v": CellState.VISITED,
    "*": CellState.PATH,
}
_GLYPH_OF = {state: glyph for glyph, state in _GLYPHS.items()}


@dataclass
class Grid:
    width: int
    height: int
    cells: List[List[CellState]]       # [row][col]

    def __post_init__(self) -> None:
        if self.width <= 0 or self.height <= 0:
            raise ValueError(f"grid must be at least 1x1, got {self.width}x{self.height}")
        if len(self.cells) != self.height or any(len(r) != self.width for r in self.cells):
            raise ValueError("cells size mismatch")
        self.cells = [[CellState(v) for v in row] for row in self.cells]
        for state in (CellState.START, CellState.END):
            count = sum(row.count(state) for row in self.cells)
            if count > 1:
                raise ValueError(f"grid holds {count} {state.name} cells, at most one allowed")

    # -------------------- construction --------------------

    @classmethod
    def empty(cls, width: int, height: int) -> "Grid":
        return cls(width, height, [[CellState.EMPTY] * width for _ in range(height)])

    @classmethod
    def from_rows(cls, rows: Sequence[str]) -> "Grid":
        """Parse an ASCII picture: S start, E end, # wall, . empty, v visited, * path."""
        cells: List[List[CellState]] = []
        for y, row in enumerate(rows):
            line = []
            for x, ch in enumerate(row):
                if ch not in _GLYPHS:
                    raise ValueError(f"unknown glyph {ch!r} at {(x, y)}")
                line.append(_GLYPHS[ch])
            cells.append(line)
        width = len(cells[0]) if cells else 0
        return cls(width, len(cells), cells)

    def to_rows(self) -> List[str]:
        return ["".join(_GLYPH_OF[v] for v in row) for row in self.cells]

    def copy(self) -> "Grid":
        return Grid(self.width, self.height, [list(row) for row in self.cells])

    # -------------------- queries --------------------

    def in_bounds(self, c: Cell) -> bool:
        x, y = c
        return 0 <= x < self.width and 0 <= y < self.height

    def is_walkable(self, c: Cell) -> bool:
        if not self.in_bounds(c):
            return False
        x, y = c
        return self.cells[y][x] != CellState.WALL

    def neighbors(self, c: Cell, directions: Iterable[Direction]) -> Iterator[Cell]:
        """Yield in-bounds cells offset from c, in direction order."""
        x, y = c
        for dx, dy in directions:
            n = (x + dx, y + dy)
            if self.in_bounds(n):
                yield n

    def get(self, c: Cell) -> CellState:
        x, y = c
        return self.cells[y][x]

    def set(self, c: Cell, state: CellState) -> None:
        x, y = c
        self.cells[y][x] = CellState(state)

    def find(self, state: CellState) -> Optional[Cell]:
        for y, row in enumerate(self.cells):
            for x, v in enumerate(row):
                if v == state:
                    return (x, y)
        return None

    def cells_in(self, *states: CellState) -> List[Cell]:
        return [(x, y)
                for y, row in enumerate(self.cells)
                for x, v in enumerate(row)
                if v in states]

    @property
    def start(self) -> Optional[Cell]:
        return self.find(CellState.START)

    @property
    def goal(self) -> Optional[Cell]:
        return self.find(CellState.END)


@dataclass
class StepResult:
    status: str                   # "running"
    current: Optional[Cell] = None
    metrics: Dict[str, Any] = field(default_factory=dict)


@dataclass
class SearchResult:
    """Outcome of one search.

    ``path`` holds the cells strictly between start and goal, in order. Those
    are exactly the cells painted PATH; ``route`` adds the endpoints back.
    """

    found: bool
    start: Cell
    goal: Cell
    path: List[Cell] = field(default_factory=list)
    expanded: int = 0
    algo: str = ""

    @property
    def route(self) -> List[Cell]:
        if not self.found:
            return []
        if self.start == self.goal:
            return [self.start]
        return [self.start, *self.path, self.goal]

    @property
    def edge_count(self) -> Optional[int]:
        if not self.found:
            return None
        return len(self.route) - 1
