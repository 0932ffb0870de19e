#!/usr/bin/env python3
# pathviz/core/algorithms.py
from typing import Callable, Dict, List

from pathviz.core.astar import AStarSearch
from pathviz.core.bfs import BreadthFirstSearch
from pathviz.core.dfs import DepthFirstSearch
from pathviz.core.dijkstra import UniformCostSearch

# selector order
ALGORITHMS: Dict[str, Callable[[], object]] = {
    "Depth First Search": DepthFirstSearch,
    "Breadth First Search": BreadthFirstSearch,
    "A*": AStarSearch,
    "Dijkstra": UniformCostSearch,
}


def algorithm_names() -> List[str]:
    return list(ALGORITHMS)


def make_algorithm(name: str):
    try:
        factory = ALGORITHMS[name]
    except KeyError:
        raise KeyError(f"unknown algorithm {name!r}; choose from {', '.join(ALGORITHMS)}") from None
    return factory()
