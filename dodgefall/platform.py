"""Platforms that drop from the top of the field."""

from __future__ import annotations

import random
from dataclasses import dataclass

from dodgefall.player import Player

MIN_WIDTH = 50
MAX_WIDTH = 350
MAX_SPAWN_X = 690
SPAWN_Y = -10
HEIGHT = 13
DEFAULT_SPEED = 5

BOTTOM_LIMIT = 580
RIGHT_LIMIT = 900
LEFT_LIMIT = -50


@dataclass
class FallingPlatform:
    """A bar that moves down by *speed* each tick."""

    x: float
    y: float
    width: float
    height: float = HEIGHT
    speed: float = DEFAULT_SPEED

    def fall(self) -> None:
        """Move one tick down."""
        self.y += self.speed

    def is_gone(self) -> bool:
        """True once the platform has left the field."""
        return self.y > BOTTOM_LIMIT or self.x > RIGHT_LIMIT or self.x < LEFT_LIMIT

    def hits(self, player: Player) -> bool:
        """True when the platform overlaps the player."""
        return (
            self.x < player.x + player.width
            and player.x < self.x + self.width
            and self.y < player.y + player.height
            and player.y < self.y + self.height
        )


def spawn_platform(rng: random.Random, speed: float) -> FallingPlatform:
    """Create a platform of random width at a random spot above the field."""
    width = rng.randint(MIN_WIDTH, MAX_WIDTH)
    x = rng.randint(0, MAX_SPAWN_X)
    return FallingPlatform(x=x, y=SPAWN_Y, width=width, speed=speed)