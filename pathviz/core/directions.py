#!/usr/bin/env python3
# pathviz/core/directions.py
"""Neighbor offsets. Order decides DFS/BFS tie-breaks, so keep it stable."""

from typing import Tuple

from pathviz.core.types import Direction

# left, right, up, down
FOUR_CONNECTED: Tuple[Direction, ...] = ((-1, 0), (1, 0), (0, -1), (0, 1))

EIGHT_CONNECTED: Tuple[Direction, ...] = FOUR_CONNECTED + ((-1, -1), (1, -1), (-1, 1), (1, 1))


def directions_for(diagonal: bool) -> Tuple[Direction, ...]:
    return EIGHT_CONNECTED if diagonal else FOUR_CONNECTED
