"""An agent that asks a path server for waypoints and walks along them."""

from __future__ import annotations

import json
import numbers
from typing import List, Optional, Sequence

from gridbots.grid import Vector
from gridbots.tcpclient import TcpClient

DEFAULT_HOST = "127.0.0.1"
DEFAULT_PORT = 9000
REACH_DISTANCE = 100.0


def path_request(start: Vector, end: Vector) -> str:
    """The JSON request naming the start and end of the wanted path."""
    return '{"start": [%f, %f, %f], "end": [%f, %f, %f]}' % (
        start.x, start.y, start.z, end.x, end.y, end.z,
    )


def _is_number(value: object) -> bool:
    return isinstance(value, numbers.Real) and not isinstance(value, bool)


def parse_path(response: str) -> List[Vector]:
    """Waypoints from a JSON array of ``[x, y, z]`` triples.

    Entries that are not three numbers are skipped. Raises :class:`ValueError`
    if the answer is not a JSON array.
    """
    try:
        value = json.loads(response)
    except ValueError as exc:
        raise ValueError(f"path answer is not JSON: {response!r}") from exc
    if not isinstance(value, list):
        raise ValueError(f"path answer is not a JSON array: {response!r}")
    points = []
    for entry in value:
        if isinstance(entry, list) and len(entry) == 3 and all(map(_is_number, entry)):
            points.append(Vector(*(float(c) for c in entry)))
    return points


class PathFollower:
    """Steps through waypoints, moving on once one is within reach."""

    def __init__(
        self, points: Sequence[Vector], reach_distance: float = REACH_DISTANCE
    ) -> None:
        self.points = list(points)
        self.reach_distance = reach_distance
        self.index = 0

    def advance(self, location: Vector) -> Optional[Vector]:
        """Direction towards the current waypoint; None once the path is done."""
        if self.finished():
            return None
        target = self.points[self.index]
        direction = (target - location).safe_normal()
        if location.distance(target) < self.reach_distance:
            self.index += 1
        return direction

    def finished(self) -> bool:
        return self.index >= len(self.points)


class TargetBot:
    """Requests a path from a server and keeps a follower for it."""

    def __init__(self, host: str = DEFAULT_HOST, port: int = DEFAULT_PORT) -> None:
        self.host = host
        self.port = port
        self.points: List[Vector] = []
        self.follower: Optional[PathFollower] = None

    def request_path(self, start: Vector, end: Vector) -> List[Vector]:
        """Ask the server for a path from ``start`` to ``end`` and store it."""
        with TcpClient() as client:
            client.connect(self.host, self.port)
            client.send(path_request(start, end))
            response = client.receive()
        self.points = parse_path(response)
        self.follower = PathFollower(self.points)
        return self.points