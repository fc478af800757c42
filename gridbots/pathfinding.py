"""Path searches over a :class:`GridManager`: A*, Dijkstra and breadth-first."""

from __future__ import annotations

from collections import deque
from enum import Enum
from typing import Callable, Dict, List, Optional, Tuple, Union

from gridbots.grid import GridManager, GridNode, Vector


class Algorithm(Enum):
    ASTAR = "astar"
    DIJKSTRA = "dijkstra"
    BFS = "bfs"

    @property
    def label(self) -> str:
        return {"astar": "A*", "dijkstra": "Dijkstra", "bfs": "BFS"}[self.value]


def _reset(grid: GridManager) -> None:
    for row in grid.rows:
        for node in row:
            node.g_cost = 0.0
            node.h_cost = 0.0
            node.parent = None


def _trace_parents(end: GridNode) -> List[GridNode]:
    path = []
    node: Optional[GridNode] = end
    while node is not None:
        path.append(node)
        node = node.parent
    path.reverse()
    return path


def _best_first(
    grid: GridManager,
    start: Vector,
    end: Vector,
    priority: Callable[[GridNode], Tuple[float, ...]],
    use_heuristic: bool,
) -> List[GridNode]:
    start_node = grid.node_at(start)
    end_node = grid.node_at(end)
    _reset(grid)

    open_list = [start_node]
    open_set = {start_node}
    closed = set()

    while open_list:
        # min() keeps the earliest of equally good nodes.
        current = min(open_list, key=priority)
        open_list.remove(current)
        open_set.discard(current)
        closed.add(current)

        if current is end_node:
            return _trace_parents(end_node)

        for neighbor in grid.neighbors(current):
            if not neighbor.walkable or neighbor in closed:
                continue
            cost = current.g_cost + current.world_position.distance(
                neighbor.world_position
            )
            if cost < neighbor.g_cost or neighbor not in open_set:
                neighbor.g_cost = cost
                if use_heuristic:
                    neighbor.h_cost = neighbor.world_position.distance(
                        end_node.world_position
                    )
                neighbor.parent = current
                if neighbor not in open_set:
                    open_list.append(neighbor)
                    open_set.add(neighbor)
    return []


def astar(grid: GridManager, start: Vector, end: Vector) -> List[GridNode]:
    """Shortest path by A* with a straight-line heuristic; empty if none."""
    return _best_first(
        grid, start, end, lambda n: (n.f_cost(), n.h_cost), use_heuristic=True
    )


def dijkstra(grid: GridManager, start: Vector, end: Vector) -> List[GridNode]:
    """Shortest path by Dijkstra's algorithm; empty if none."""
    return _best_first(grid, start, end, lambda n: (n.g_cost,), use_heuristic=False)


def bfs(grid: GridManager, start: Vector, end: Vector) -> List[GridNode]:
    """Path with the fewest steps by breadth-first search; empty if none."""
    start_node = grid.node_at(start)
    end_node = grid.node_at(end)

    queue = deque([start_node])
    came_from: Dict[GridNode, Optional[GridNode]] = {start_node: None}

    while queue:
        current = queue.popleft()
        if current is end_node:
            path = []
            node: Optional[GridNode] = end_node
            while node is not None:
                path.append(node)
                node = came_from[node]
            path.reverse()
            return path

        for neighbor in grid.neighbors(current):
            if not neighbor.walkable or neighbor in came_from:
                continue
            came_from[neighbor] = current
            queue.append(neighbor)
    return []


_SEARCHES = {
    Algorithm.ASTAR: astar,
    Algorithm.DIJKSTRA: dijkstra,
    Algorithm.BFS: bfs,
}


def find_path(
    grid: GridManager,
    start: Vector,
    end: Vector,
    algorithm: Union[Algorithm, str] = Algorithm.ASTAR,
) -> List[GridNode]:
    """Run the named search; ``algorithm`` may be an :class:`Algorithm` or its value."""
    return _SEARCHES[Algorithm(algorithm)](grid, start, end)