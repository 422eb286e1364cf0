import math

import pytest

from wolfcast.config import Direction
from wolfcast.player import Player

BOX = [[1, 1, 1], [1, 0, 1], [1, 1, 1]]


@pytest.mark.parametrize(
    "direction, vectors",
    [
        (Direction.NORTH, (0, -1, 0.66, 0)),
        (Direction.SOUTH, (0, 1, -0.66, 0)),
        (Direction.EAST, (1, 0, 0, 0.66)),
        (Direction.WEST, (-1, 0, 0, -0.66)),
    ],
)
def test_start_vectors(direction, vectors):
    player = Player.from_start(3, 7, direction)
    assert (player.dx, player.dy, player.px, player.py) == pytest.approx(vectors)


def test_start_position_is_cell_centre():
    player = Player.from_start(3, 7, Direction.NORTH)
    assert (player.x, player.y) == (7.5, 3.5)
    assert player.is_moving is False


def test_forward_step_is_capped():
    player = Player.from_start(1, 1, Direction.NORTH)
    start_y = player.y
    player.move_forward(BOX)
    assert player.y == pytest.approx(start_y - 0.1)
    assert player.x == pytest.approx(1.5)


def test_forward_blocked_by_wall():
    player = Player.from_start(1, 1, Direction.NORTH)
    player.y = 1.05
    player.move_forward(BOX)
    assert player.y == 1.05


def test_backward_uses_move_speed():
    player = Player.from_start(1, 1, Direction.NORTH)
    start_y = player.y
    player.move_backward(BOX)
    assert player.y == pytest.approx(start_y + player.move_speed)


def test_backward_blocked_by_wall():
    player = Player.from_start(1, 1, Direction.EAST)
    player.x = 1.9
    player.move_backward(BOX)
    assert player.x == pytest.approx(1.7)
    player.x = 1.1
    player.move_backward(BOX)
    assert player.x == 1.1


def test_turns_cancel_out():
    player = Player.from_start(1, 1, Direction.EAST)
    player.turn_right()
    player.turn_left()
    assert (player.dx, player.dy, player.px, player.py) == pytest.approx((1, 0, 0, 0.66))


def test_turn_keeps_lengths_and_right_angle():
    player = Player.from_start(1, 1, Direction.SOUTH)
    for _ in range(7):
        player.turn_right()
    assert math.hypot(player.dx, player.dy) == pytest.approx(1)
    assert math.hypot(player.px, player.py) == pytest.approx(0.66)
    assert player.dx * player.px + player.dy * player.py == pytest.approx(0)


def test_turn_speed_is_capped():
    fast = Player.from_start(1, 1, Direction.NORTH, )
    fast.rot_speed = 5.0
    capped = Player.from_start(1, 1, Direction.NORTH)
    capped.rot_speed = 0.6
    fast.turn_left()
    capped.turn_left()
    assert (fast.dx, fast.dy) == pytest.approx((capped.dx, capped.dy))
    assert (fast.px, fast.py) == pytest.approx((capped.px, capped.py))