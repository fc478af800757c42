"""An agent steered by a neural network server that answers with move directions."""

from __future__ import annotations

import json
from typing import Any, Dict, Optional

from gridbots.grid import Vector

DEFAULT_TARGET = Vector(500.0, 500.0, 0.0)
MOVE_SCALE = 100.0


class NeuralBot:
    """Sends its position and target, and keeps the last direction it was given."""

    def __init__(self, client: Any = None, target: Vector = DEFAULT_TARGET) -> None:
        self.client = client
        self.target = target
        self.direction = Vector()

    def input_message(self, location: Vector) -> Dict[str, Any]:
        """The state the server expects: own X, Y then target X, Y."""
        return {"input": [location.x, location.y, self.target.x, self.target.y]}

    def parse_direction(self, response: str) -> Optional[Vector]:
        """Read ``move_x`` and ``move_y`` from a JSON answer; None if it is not one.

        A missing field counts as zero. A valid answer becomes the bot's direction.
        """
        try:
            value = json.loads(response)
        except ValueError:
            return None
        if not isinstance(value, dict):
            return None
        try:
            move_x = float(value.get("move_x", 0.0))
            move_y = float(value.get("move_y", 0.0))
        except (TypeError, ValueError):
            return None
        self.direction = Vector(move_x, move_y, 0.0)
        return self.direction

    @property
    def movement_input(self) -> Vector:
        """The scaled movement applied each frame while a direction is set."""
        return self.direction * MOVE_SCALE

    def decide(self, location: Vector) -> Optional[Vector]:
        """Send the current state and adopt the direction the server answers with."""
        if self.client is None:
            raise RuntimeError("no client to ask for a direction")
        self.client.send_json(self.input_message(location))
        response = self.client.receive()
        if not response:
            return None
        return self.parse_direction(response)