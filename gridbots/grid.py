"""A rectangular grid of nodes laid out in world space."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Callable, List, Optional

_SMALL_NUMBER = 1e-8


@dataclass(frozen=True)
class Vector:
    """A point or direction in three-dimensional world space."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    def __add__(self, other: Vector) -> Vector:
        return Vector(self.x + other.x, self.y + other.y, self.z + other.z)

    def __sub__(self, other: Vector) -> Vector:
        return Vector(self.x - other.x, self.y - other.y, self.z - other.z)

    def __mul__(self, scale: float) -> Vector:
        return Vector(self.x * scale, self.y * scale, self.z * scale)

    __rmul__ = __mul__

    def __neg__(self) -> Vector:
        return Vector(-self.x, -self.y, -self.z)

    def length(self) -> float:
        return math.sqrt(self.x * self.x + self.y * self.y + self.z * self.z)

    def distance(self, other: Vector) -> float:
        """Euclidean distance to another point."""
        return (self - other).length()

    def distance_2d(self, other: Vector) -> float:
        """Distance to another point ignoring the Z axis."""
        return math.hypot(self.x - other.x, self.y - other.y)

    def safe_normal(self) -> Vector:
        """Unit vector in the same direction, or the zero vector if too short."""
        squared = self.x * self.x + self.y * self.y + self.z * self.z
        if squared < _SMALL_NUMBER:
            return Vector()
        scale = 1.0 / math.sqrt(squared)
        return self * scale


class GridError(RuntimeError):
    """Raised when the grid is used before it has been built."""


@dataclass(eq=False)
class GridNode:
    """One cell of the grid, with the bookkeeping used by path searches."""

    world_position: Vector
    grid_x: int
    grid_y: int
    walkable: bool = True
    g_cost: float = 0.0
    h_cost: float = 0.0
    parent: Optional[GridNode] = field(default=None, repr=False)

    def f_cost(self) -> float:
        return self.g_cost + self.h_cost


class GridManager:
    """Owns a ``size_y`` by ``size_x`` grid of nodes spaced one diameter apart."""

    def __init__(
        self,
        size_x: int = 50,
        size_y: int = 50,
        node_radius: float = 100.0,
        origin: Vector = Vector(),
    ) -> None:
        self.size_x = size_x
        self.size_y = size_y
        self.node_radius = node_radius
        self.origin = origin
        self.rows: List[List[GridNode]] = []

    @property
    def node_diameter(self) -> float:
        return self.node_radius * 2

    def build(
        self, is_blocked: Optional[Callable[[Vector], bool]] = None
    ) -> GridManager:
        """Create every node; a node is unwalkable where ``is_blocked`` says so."""
        diameter = self.node_diameter
        rows = []
        for y in range(self.size_y):
            row = []
            for x in range(self.size_x):
                position = self.origin + Vector(x * diameter, y * diameter, 0.0)
                walkable = not (is_blocked is not None and is_blocked(position))
                row.append(GridNode(position, x, y, walkable))
            rows.append(row)
        self.rows = rows
        return self

    def _require_built(self) -> None:
        if not self.rows or not self.rows[0]:
            raise GridError("grid is not initialized")

    def node_at(self, position: Vector) -> GridNode:
        """The node containing ``position``, clamped to the grid's edges."""
        self._require_built()
        diameter = self.node_diameter
        x = int((position.x - self.origin.x) / diameter)
        y = int((position.y - self.origin.y) / diameter)
        x = min(max(x, 0), self.size_x - 1)
        y = min(max(y, 0), self.size_y - 1)
        return self.rows[y][x]

    def neighbors(self, node: GridNode) -> List[GridNode]:
        """The up to eight nodes around ``node``, row by row from below."""
        self._require_built()
        found = []
        for dy in (-1, 0, 1):
            for dx in (-1, 0, 1):
                if dx == 0 and dy == 0:
                    continue
                x = node.grid_x + dx
                y = node.grid_y + dy
                if 0 <= x < self.size_x and 0 <= y < self.size_y:
                    found.append(self.rows[y][x])
        return found