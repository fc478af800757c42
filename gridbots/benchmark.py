"""Time a path search over a grid."""

from __future__ import annotations

import argparse
import time
from dataclasses import dataclass
from typing import List, Optional, Sequence, Union

from gridbots.grid import GridError, GridManager, GridNode, Vector
from gridbots.pathfinding import Algorithm, find_path


@dataclass(frozen=True)
class BenchmarkResult:
    algorithm: Algorithm
    path: List[GridNode]
    seconds: float


def run_benchmark(
    grid: GridManager,
    start: Vector,
    end: Vector,
    algorithm: Union[Algorithm, str] = Algorithm.DIJKSTRA,
) -> BenchmarkResult:
    """Run one search and measure how long it took."""
    if not grid.rows:
        raise GridError("grid is still empty; build it first")
    chosen = Algorithm(algorithm)
    began = time.perf_counter()
    path = find_path(grid, start, end, chosen)
    elapsed = time.perf_counter() - began
    return BenchmarkResult(chosen, path, elapsed)


def _parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Time a grid path search.")
    parser.add_argument("--size-x", type=int, default=50)
    parser.add_argument("--size-y", type=int, default=50)
    parser.add_argument("--radius", type=float, default=100.0)
    parser.add_argument("--start", type=float, nargs=2, default=[0.0, 0.0],
                        metavar=("X", "Y"))
    parser.add_argument("--end", type=float, nargs=2, default=[0.0, 0.0],
                        metavar=("X", "Y"))
    parser.add_argument("--block", type=int, nargs=2, action="append", default=[],
                        metavar=("COL", "ROW"), help="mark a cell unwalkable")
    parser.add_argument("--algorithm", choices=[a.value for a in Algorithm],
                        default=Algorithm.DIJKSTRA.value)
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = _parser()
    args = parser.parse_args(argv)
    if args.size_x < 1 or args.size_y < 1:
        parser.error("grid sizes must be positive")
    if args.radius <= 0:
        parser.error("radius must be positive")

    grid = GridManager(args.size_x, args.size_y, args.radius, Vector()).build()
    for col, row in args.block:
        if not (0 <= col < args.size_x and 0 <= row < args.size_y):
            parser.error(f"blocked cell ({col}, {row}) is outside the grid")
        grid.rows[row][col].walkable = False

    result = run_benchmark(
        grid, Vector(*args.start), Vector(*args.end), args.algorithm
    )
    print(f"{result.algorithm.label} finished in {result.seconds:f} seconds")
    print(f"Path: {len(result.path)} node(s)")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())