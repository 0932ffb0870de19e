#!/usr/bin/env python3
# pathviz/core/dijkstra.py
from dataclasses import dataclass

from pathviz.core.astar import AStarSearch
from pathviz.core.types import Cell


@dataclass
class UniformCostSearch(AStarSearch):
    """Uniform-cost search: A* with the heuristic pinned to zero."""

    name: str = "Dijkstra"

    def heuristic(self, c: Cell) -> float:
        return 0
