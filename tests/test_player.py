import pytest

from dodgefall.player import Direction, Player


def test_left_moves_by_step():
    player = Player(x=40, y=40)
    assert player.move(Direction.LEFT, 500, 500) is True
    assert player.x == 40 - Player.STEP
    assert player.y == 40


def test_left_blocked_at_edge():
    player = Player(x=0, y=10)
    assert player.move(Direction.LEFT, 500, 500) is False
    assert player.x == 0


def test_right_moves_and_is_blocked_at_far_edge():
    player = Player(width=50, x=100, y=0)
    assert player.move(Direction.RIGHT, 500, 500) is True
    assert player.x == 100 + Player.STEP

    edge = Player(width=50, x=450, y=0)
    assert edge.move(Direction.RIGHT, 500, 500) is False
    assert edge.x == 450


def test_up_and_down():
    player = Player(height=50, x=0, y=100)
    assert player.move(Direction.UP, 500, 500) is True
    assert player.y == 100 - Player.STEP
    assert player.move(Direction.DOWN, 500, 500) is True
    assert player.y == 100


def test_up_blocked_at_top_and_down_blocked_at_bottom():
    top = Player(y=0)
    assert top.move(Direction.UP, 500, 500) is False
    assert top.y == 0

    bottom = Player(height=50, y=450)
    assert bottom.move(Direction.DOWN, 500, 500) is False
    assert bottom.y == 450


def test_step_is_twenty():
    player = Player(x=100, y=100)
    player.move(Direction.LEFT, 500, 500)
    assert player.x == 80


def test_place_sets_position():
    player = Player()
    player.place(12, 34)
    assert (player.x, player.y) == (12, 34)


def test_direction_accepts_value():
    player = Player(x=40)
    assert player.move("left", 500, 500) is True
    assert player.x == 40 - Player.STEP


def test_negative_size_rejected():
    with pytest.raises(ValueError):
        Player(width=-1)