"""Grid pathfinding (A*, Dijkstra, BFS), a search benchmark, and bots driven by a TCP server."""

__version__ = "0.1.0"