import random

import pytest

from gridbots.criticbot import CriticBot
from gridbots.grid import Vector
from gridbots.qbot import Action


class FakeClient:
    def __init__(self, responses=()):
        self.sent = []
        self.responses = list(responses)

    def send_json(self, payload):
        self.sent.append(payload)

    def receive_json(self):
        return self.responses.pop(0) if self.responses else None


def make_bot(client=None, seed=3):
    return CriticBot(client, 200.0, random.Random(seed))


def test_goals_stay_within_three_cells():
    bot = make_bot()
    assert all(-3 <= v <= 3 for v in bot.goal)
    for _ in range(50):
        assert all(-3 <= v <= 3 for v in bot.new_goal())


def test_state_message_holds_position_and_goal():
    bot = make_bot()
    bot.position = (1, 2)
    bot.goal = (-3, 0)
    assert bot.state_message() == {"state": [1, 2, -3, 0]}


def test_normal_step_sets_target_one_cell_away():
    bot = make_bot()
    bot.goal = (3, 3)
    origin = Vector(10.0, 20.0, 5.0)
    transition = bot.step(Action.UP, origin)
    assert bot.position == (0, 1)
    assert transition.reward == -0.01
    assert transition.done is False
    assert bot.target == origin + Vector(0.0, 200.0, 0.0)
    assert bot.path == [bot.target]


def test_out_of_bounds_step_is_reverted():
    bot = make_bot()
    bot.position = (5, 0)
    bot.goal = (0, 0)
    location = Vector(1.0, 1.0, 0.0)
    transition = bot.step(Action.RIGHT, location)
    assert bot.position == (5, 0)
    assert transition.reward == -1.0
    assert transition.done is True
    assert bot.target == location


def test_goal_step_rewards_and_resets_goal():
    bot = make_bot()
    bot.goal = (1, 0)
    transition = bot.step(Action.RIGHT, Vector())
    assert transition.reward == 1.0
    assert transition.done is True
    assert bot.position == (1, 0)
    assert all(-3 <= v <= 3 for v in bot.goal)


def test_training_message_fields():
    bot = make_bot()
    bot.goal = (2, 2)
    assert bot.training_message(-1.0, True) == {
        "state": [0, 0, 2, 2],
        "reward": -1.0,
        "done": True,
        "train": True,
    }


def test_decide_sends_state_then_training_data():
    client = FakeClient([{"action": int(Action.LEFT)}])
    bot = make_bot(client)
    bot.goal = (3, 3)
    transition = bot.decide(Vector())
    assert transition.state == (-1, 0)
    assert client.sent[0] == {"state": [0, 0, 3, 3]}
    assert client.sent[1] == bot.training_message(transition.reward, transition.done)


def test_decide_waits_until_target_reached():
    client = FakeClient([{"action": int(Action.UP)}, {"action": int(Action.UP)}])
    bot = make_bot(client)
    bot.goal = (3, 3)
    bot.decide(Vector())
    assert bot.decide(Vector()) is None
    assert len(client.sent) == 2
    assert bot.decide(bot.target).state == (0, 2)


def test_decide_without_client_raises():
    with pytest.raises(RuntimeError):
        make_bot().decide(Vector())