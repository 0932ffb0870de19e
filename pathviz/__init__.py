"""Grid pathfinding playground: paint walls, watch DFS / BFS / A* / Dijkstra search."""

__version__ = "0.1.0"
