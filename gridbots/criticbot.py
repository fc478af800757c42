"""A grid agent trained by an actor-critic server over TCP."""

from __future__ import annotations

import random
from typing import Any, Dict, List, Optional

from gridbots.grid import Vector
from gridbots.qbot import (
    GOAL_REWARD,
    INVALID_REWARD,
    STEP_REWARD,
    Action,
    Position,
    Transition,
)


class CriticBot:
    """Walks a grid bounded at ±5 towards goals placed within ±3 of the origin."""

    BOUND = 5
    GOAL_SPREAD = 3
    CLOSE_DISTANCE = 10.0

    def __init__(
        self,
        client: Any = None,
        grid_size: float = 200.0,
        rng: Optional[random.Random] = None,
    ) -> None:
        self.client = client
        self.grid_size = grid_size
        self.rng = rng if rng is not None else random.Random()
        self.position: Position = (0, 0)
        self.goal: Position = (0, 0)
        self.target: Optional[Vector] = None
        self.path: List[Vector] = []
        self.new_goal()

    def new_goal(self) -> Position:
        """Place a goal anywhere within three cells of the origin."""
        self.goal = (
            self.rng.randint(-self.GOAL_SPREAD, self.GOAL_SPREAD),
            self.rng.randint(-self.GOAL_SPREAD, self.GOAL_SPREAD),
        )
        return self.goal

    def state_message(self) -> Dict[str, Any]:
        return {"state": [*self.position, *self.goal]}

    def step(self, action: int, location: Vector) -> Transition:
        """Apply ``action`` from world ``location`` and set the next target."""
        previous = self.position
        try:
            dx, dy = Action(action).delta
        except ValueError:
            dx, dy = 0, 0
        self.position = (previous[0] + dx, previous[1] + dy)

        if any(abs(value) > self.BOUND for value in self.position):
            self.position = previous
            reward, done = INVALID_REWARD, True
        elif self.position == self.goal:
            reward, done = GOAL_REWARD, True
            self.new_goal()
        else:
            reward, done = STEP_REWARD, False

        offset = Vector(
            (self.position[0] - previous[0]) * self.grid_size,
            (self.position[1] - previous[1]) * self.grid_size,
            0.0,
        )
        self.target = location + offset
        self.path.append(self.target)
        return Transition(previous, self.position, reward, done)

    def training_message(self, reward: float, done: bool) -> Dict[str, Any]:
        message = self.state_message()
        message.update(reward=reward, done=done, train=True)
        return message

    def is_close_to_target(self, location: Vector) -> bool:
        if self.target is None:
            return True
        return location.distance_2d(self.target) < self.CLOSE_DISTANCE

    def decide(self, location: Vector) -> Optional[Transition]:
        """Ask for and take an action once the previous target is reached."""
        if self.client is None:
            raise RuntimeError("no client to ask for a decision")
        if not self.is_close_to_target(location):
            return None
        self.client.send_json(self.state_message())
        response = self.client.receive_json()
        if not response or "action" not in response:
            return None
        try:
            action = int(response["action"])
        except (TypeError, ValueError):
            return None
        transition = self.step(action, location)
        self.client.send_json(self.training_message(transition.reward, transition.done))
        return transition