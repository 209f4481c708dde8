"""The player's block and how it moves inside the play field."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class Direction(Enum):
    """A direction the player can be pushed in."""

    LEFT = "left"
    RIGHT = "right"
    UP = "up"
    DOWN = "down"


@dataclass
class Player:
    """An axis-aligned block controlled by the arrow keys."""

    width: float = 50
    height: float = 50
    x: float = 0
    y: float = 0

    STEP = 20

    def __post_init__(self) -> None:
        if self.width < 0 or self.height < 0:
            raise ValueError("player size must not be negative")

    def place(self, x: float, y: float) -> None:
        """Put the player's top-left corner at (x, y)."""
        self.x = x
        self.y = y

    def move(self, direction: Direction, bounds_width: float, bounds_height: float) -> bool:
        """Take one step in *direction* if the field allows it.

        Returns True when the player moved.
        """
        direction = Direction(direction)
        if direction is Direction.LEFT:
            if self.x > 0:
                self.x -= self.STEP
                return True
        elif direction is Direction.RIGHT:
            if self.x + self.width < bounds_width:
                self.x += self.STEP
                return True
        elif direction is Direction.UP:
            if self.y > 0:
                self.y -= self.STEP
                return True
        elif direction is Direction.DOWN:
            if self.y + self.height < bounds_height:
                self.y += self.STEP
                return True
        return False