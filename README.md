# gridbots

Pathfinding on a square grid world, and small agents that take their
decisions from a learning server over TCP.

## Install

    pip install .

For the tests:

    pip install ".[test]"
    pytest

## The grid

`gridbots.grid.GridManager(size_x, size_y, node_radius, origin)` lays out
`size_x` × `size_y` nodes (50 × 50 by default) spaced one diameter
(`2 * node_radius`) apart, starting at `origin`. `build(is_blocked=None)`
creates the nodes and returns the manager; `is_blocked`, when given, is
called with each node's world position and marks the node unwalkable when
it returns true. The nodes are kept in `rows`, indexed `rows[y][x]`.

```python
from gridbots.grid import GridManager, Vector

grid = GridManager(10, 10, 100.0, Vector(0.0, 0.0, 0.0))
grid.build(lambda pos: pos.x == 400.0 and pos.y < 800.0)

node = grid.node_at(Vector(250.0, 130.0, 0.0))   # clamped into the grid
around = grid.neighbors(node)                     # up to eight neighbours
```

`node_at` and `neighbors` raise `GridError` when the grid has not been
built. `Vector` is a frozen 3-D point with `distance`, `distance_2d` and
`safe_normal`; each `GridNode` carries its `world_position`, `grid_x`,
`grid_y`, `walkable` flag and the search bookkeeping (`g_cost`, `h_cost`,
`parent`, `f_cost()`).

## Finding paths

```python
from gridbots.pathfinding import Algorithm, astar, bfs, dijkstra, find_path

path = astar(grid, Vector(0.0, 0.0, 0.0), Vector(900.0, 900.0, 0.0))
same = find_path(grid, Vector(0.0, 0.0, 0.0), Vector(900.0, 900.0, 0.0), Algorithm.DIJKSTRA)
```

Each search returns the list of nodes from start to end, both included, or
an empty list when the end cannot be reached. Start and end positions are
mapped to nodes with `node_at`. Moves go to all eight neighbours; `astar`
and `dijkstra` weight them by world distance (A* adds the straight-line
distance to the end as its heuristic), `bfs` counts steps. `find_path`
takes an `Algorithm` or its value (`"astar"`, `"dijkstra"`, `"bfs"`) and
defaults to A*.

## Benchmarking

`gridbots.benchmark.run_benchmark(grid, start, end, algorithm)` times one
search (Dijkstra by default) and returns a `BenchmarkResult` holding the
`algorithm`, the `path` and the elapsed `seconds`. It raises `GridError` if
the grid has not been built.

From the shell, on an open grid at the origin:

    gridbots-benchmark --size-x 50 --size-y 50 --radius 100 \
        --start 0 0 --end 4000 4000 --block 10 10 --algorithm astar

`--block COL ROW` may be repeated to make cells unwalkable. The command
prints the time taken and the number of nodes in the path.

## Talking to a server

`gridbots.tcpclient.TcpClient(timeout=1.0)` wraps one TCP connection and is
a context manager. `connect(host, port)` raises `ConnectionError` when the
server cannot be reached; `send` and `send_json` write UTF-8 text;
`receive` returns whatever the server has sent, or an empty string if
nothing arrives within the timeout; `receive_json` returns a JSON object or
`None`.

## Bots

The bots hold the decision logic only; the caller supplies a client (any
object with `send_json`, and `receive_json` or `receive`) and the agent's
world location.

- `QBot` (`gridbots.qbot`) walks a grid bounded to ±10 towards a goal
  placed up to five cells from its position. `decide()` sends
  `{"state": [x, y]}`, reads an `action` (`Action`: 0 up, 1 down, 2 left,
  3 right), applies it with `step` and sends the reward with
  `state`, `next_state` and `done`: 1 on reaching the goal (a new goal is
  then placed), -1 for leaving the grid (the move is undone), -0.01
  otherwise. Unknown actions leave the bot in place.
- `CriticBot` (`gridbots.criticbot`) does the same on a ±5 grid with goals
  within ±3 of the origin, sends its goal along with its position, and adds
  `"train": true` to its report. `decide(location)` only asks for a move
  once `location` is within 10 units of the last target; every target is
  recorded in `path`.
- `NeuralBot` (`gridbots.neuralbot`) sends `{"input": [x, y, target_x,
  target_y]}` and keeps the `move_x` / `move_y` direction it is given
  (a missing field counts as zero); `movement_input` is that direction
  scaled by 100.
- `TargetBot` (`gridbots.targetbot`) connects to a path server (default
  `127.0.0.1:9000`), sends `path_request(start, end)` and reads the answer
  with `parse_path`, which keeps every `[x, y, z]` entry of a JSON array
  and raises `ValueError` when the answer is not one. `PathFollower`
  returns the unit direction to the current waypoint from `advance` and
  moves on once within 100 units of it.

## What this package does not do

It contains no learning server and no path server: the bots only speak
their side of the exchange. Nor does it move, render or simulate the
agents in a world; callers apply the directions and targets themselves.