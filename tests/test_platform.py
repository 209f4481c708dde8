import random

import pytest

from dodgefall.platform import FallingPlatform, spawn_platform
from dodgefall.player import Player


@pytest.mark.parametrize("seed", range(200))
def test_spawn_within_source_ranges(seed):
    platform = spawn_platform(random.Random(seed), 7)
    assert 50 <= platform.width <= 350
    assert 0 <= platform.x <= 690
    assert platform.y == -10
    assert platform.height == 13
    assert platform.speed == 7


def test_spawn_is_reproducible_with_seed():
    a = spawn_platform(random.Random(42), 5)
    b = spawn_platform(random.Random(42), 5)
    assert a == b


def test_fall_adds_speed():
    platform = FallingPlatform(x=10, y=-10, width=100, speed=15)
    platform.fall()
    platform.fall()
    assert platform.y == -10 + 2 * 15


@pytest.mark.parametrize(
    "x, y, gone",
    [
        (0, 580, False),
        (0, 581, True),
        (900, 0, False),
        (901, 0, True),
        (-50, 0, False),
        (-51, 0, True),
    ],
)
def test_is_gone_limits(x, y, gone):
    assert FallingPlatform(x=x, y=y, width=60).is_gone() is gone


def test_hits_overlapping_player():
    player = Player(width=50, height=50, x=100, y=100)
    platform = FallingPlatform(x=80, y=120, width=60)
    assert platform.hits(player) is True


def test_misses_distant_player():
    player = Player(width=50, height=50, x=100, y=100)
    platform = FallingPlatform(x=300, y=120, width=60)
    assert platform.hits(player) is False


def test_touching_edges_do_not_hit():
    player = Player(width=50, height=50, x=100, y=100)
    above = FallingPlatform(x=100, y=100 - 13, width=50)
    assert above.hits(player) is False
    above.y += 1
    assert above.hits(player) is True