"""A grid agent that asks a Q-learning server for moves and reports rewards."""

from __future__ import annotations

import random
from dataclasses import dataclass
from enum import IntEnum
from typing import Any, Dict, Optional, Tuple

from gridbots.grid import Vector

Position = Tuple[int, int]

STEP_REWARD = -0.01
GOAL_REWARD = 1.0
INVALID_REWARD = -1.0


class Action(IntEnum):
    UP = 0
    DOWN = 1
    LEFT = 2
    RIGHT = 3

    @property
    def delta(self) -> Position:
        return {
            Action.UP: (0, 1),
            Action.DOWN: (0, -1),
            Action.LEFT: (-1, 0),
            Action.RIGHT: (1, 0),
        }[self]


@dataclass(frozen=True)
class Transition:
    """The outcome of one move: where the agent was, where it is, and the reward."""

    previous: Position
    state: Position
    reward: float
    done: bool


def _moved(position: Position, action: int) -> Position:
    try:
        dx, dy = Action(action).delta
    except ValueError:
        dx, dy = 0, 0
    return position[0] + dx, position[1] + dy


class QBot:
    """Walks a grid bounded at ±10 towards goals placed near its position."""

    BOUND = 10
    GOAL_SPREAD = 5

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
        self.new_goal()

    def new_goal(self) -> Position:
        """Place a goal up to five cells away from the current position."""
        dx = self.rng.randint(-self.GOAL_SPREAD, self.GOAL_SPREAD)
        dy = self.rng.randint(-self.GOAL_SPREAD, self.GOAL_SPREAD)
        self.goal = (self.position[0] + dx, self.position[1] + dy)
        return self.goal

    def state_message(self) -> Dict[str, Any]:
        return {"state": list(self.position)}

    def _out_of_bounds(self, position: Position) -> bool:
        return any(abs(value) > self.BOUND for value in position)

    def step(self, action: int) -> Transition:
        """Apply ``action``; unknown actions leave the agent where it is."""
        previous = self.position
        self.position = _moved(previous, action)
        reward = STEP_REWARD
        done = False
        if self.position == self.goal:
            reward = GOAL_REWARD
            done = True
            self.new_goal()
        elif self._out_of_bounds(self.position):
            reward = INVALID_REWARD
            self.position = previous
            done = True
        return Transition(previous, self.position, reward, done)

    def reward_message(self, transition: Transition) -> Dict[str, Any]:
        """The report of a move; ``state`` and ``next_state`` both hold the new position."""
        return {
            "state": list(transition.state),
            "next_state": list(transition.state),
            "reward": transition.reward,
            "done": transition.done,
        }

    def target_location(self, z: float = 0.0) -> Vector:
        """World location of the current cell at height ``z``."""
        return Vector(
            self.position[0] * self.grid_size, self.position[1] * self.grid_size, z
        )

    def decide(self) -> Optional[Transition]:
        """Ask the server for an action, take it and report the reward."""
        if self.client is None:
            raise RuntimeError("no client to ask for a decision")
        self.client.send_json(self.state_message())
        response = self.client.receive_json()
        if not response or "action" not in response:
            return None
        try:
            action = int(response["action"])
        except (TypeError, ValueError):
            return None
        transition = self.step(action)
        self.client.send_json(self.reward_message(transition))
        return transition