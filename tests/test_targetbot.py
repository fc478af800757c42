import json
import socket
import threading

import pytest

from gridbots.grid import Vector
from gridbots.targetbot import PathFollower, TargetBot, parse_path, path_request


def test_path_request_format():
    text = path_request(Vector(1.0, 2.0, 3.0), Vector(4.0, 5.0, 6.0))
    assert text == (
        '{"start": [1.000000, 2.000000, 3.000000], '
        '"end": [4.000000, 5.000000, 6.000000]}'
    )


def test_path_request_is_json():
    start, end = Vector(1.5, -2.0, 0.0), Vector(10.0, 20.0, 30.0)
    decoded = json.loads(path_request(start, end))
    assert decoded == {"start": [1.5, -2.0, 0.0], "end": [10.0, 20.0, 30.0]}


def test_parse_path_reads_triples():
    points = parse_path("[[1, 2, 3], [4.5, 5, 6]]")
    assert points == [Vector(1.0, 2.0, 3.0), Vector(4.5, 5.0, 6.0)]


def test_parse_path_skips_invalid_entries():
    points = parse_path('[[1, 2], "x", [1, "a", 3], [true, 1, 2], [7, 8, 9]]')
    assert points == [Vector(7.0, 8.0, 9.0)]


@pytest.mark.parametrize("text", ["", "garbage", '{"path": []}'])
def test_parse_path_rejects_non_arrays(text):
    with pytest.raises(ValueError):
        parse_path(text)


def test_follower_advances_through_points():
    follower = PathFollower([Vector(0.0, 0.0, 0.0), Vector(1000.0, 0.0, 0.0)])
    assert follower.advance(Vector(50.0, 0.0, 0.0)) == Vector(-1.0, 0.0, 0.0)
    assert follower.index == 1
    assert follower.advance(Vector(0.0, 0.0, 0.0)) == Vector(1.0, 0.0, 0.0)
    assert not follower.finished()
    follower.advance(Vector(950.0, 0.0, 0.0))
    assert follower.finished()
    assert follower.advance(Vector()) is None


def test_follower_stays_when_far():
    follower = PathFollower([Vector(500.0, 0.0, 0.0)], reach_distance=10.0)
    follower.advance(Vector())
    assert follower.index == 0


def test_empty_follower_is_finished():
    assert PathFollower([]).finished()


def _serve_once(answer, received):
    server = socket.socket(socket.AF_INET, socket.SOCK_STREAM)
    server.bind(("127.0.0.1", 0))
    server.listen(1)

    def run():
        conn, _ = server.accept()
        with conn:
            received.append(conn.recv(8192).decode("utf-8"))
            conn.sendall(answer.encode("utf-8"))
        server.close()

    thread = threading.Thread(target=run, daemon=True)
    thread.start()
    return server.getsockname()[1], thread


def test_request_path_over_tcp():
    received = []
    port, thread = _serve_once("[[0, 0, 0], [200, 0, 0]]", received)
    bot = TargetBot("127.0.0.1", port)
    start, end = Vector(0.0, 0.0, 0.0), Vector(200.0, 0.0, 0.0)
    points = bot.request_path(start, end)
    thread.join(timeout=5)
    assert received == [path_request(start, end)]
    assert points == [Vector(0.0, 0.0, 0.0), Vector(200.0, 0.0, 0.0)]
    assert bot.follower.points == points
    assert bot.follower.index == 0


def test_request_path_connection_refused():
    probe = socket.socket()
    probe.bind(("127.0.0.1", 0))
    port = probe.getsockname()[1]
    probe.close()
    with pytest.raises(ConnectionError):
        TargetBot("127.0.0.1", port).request_path(Vector(), Vector())