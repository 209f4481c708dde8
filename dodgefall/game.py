"""Game state: the player, falling platforms, score and health."""

from __future__ import annotations

import random
from dataclasses import dataclass, field
from typing import Callable, List, Optional

from dodgefall.platform import FallingPlatform, spawn_platform
from dodgefall.player import Direction, Player

SPAWN_INTERVAL_MS = 1000
SCORE_INTERVAL_MS = 3000
FALL_INTERVAL_MS = 50
START_HP = 100
HP_LOSS = 2
START_SPEED = 5
PLAYER_BOTTOM_MARGIN = 100

_SPEED_STEPS = ((100, 30), (80, 25), (60, 20), (40, 15), (20, 10))


def speed_for_score(score: int) -> int:
    """Platform speed for a given score."""
    for threshold, speed in _SPEED_STEPS:
        if score > threshold:
            return speed
    return START_SPEED


@dataclass
class IntervalTimer:
    """A repeating timer driven by explicitly supplied elapsed time."""

    interval_ms: float
    active: bool = False
    remaining: float = field(init=False)

    def __post_init__(self) -> None:
        if self.interval_ms <= 0:
            raise ValueError("interval must be positive")
        self.remaining = self.interval_ms

    def start(self) -> None:
        self.active = True
        self.remaining = self.interval_ms

    def stop(self) -> None:
        self.active = False

    def advance(self, elapsed_ms: float) -> int:
        """Let *elapsed_ms* pass and return how many times the timer fired."""
        if elapsed_ms < 0:
            raise ValueError("elapsed time must not be negative")
        if not self.active:
            return 0
        if elapsed_ms < self.remaining:
            self.remaining -= elapsed_ms
            return 0
        left = elapsed_ms - self.remaining
        fired = 1 + int(left // self.interval_ms)
        self.remaining = self.interval_ms - left % self.interval_ms
        return fired


class Game:
    """One round of dodging platforms."""

    def __init__(
        self,
        width: float = 890,
        height: float = 570,
        player: Optional[Player] = None,
        rng: Optional[random.Random] = None,
        on_over: Optional[Callable[[int], None]] = None,
        on_ended: Optional[Callable[[], None]] = None,
    ) -> None:
        self.width = width
        self.height = height
        self.player = player if player is not None else Player()
        self.rng = rng if rng is not None else random.Random()
        self.on_over = on_over
        self.on_ended = on_ended
        self.platforms: List[FallingPlatform] = []
        self.score = 0
        self.hp = START_HP
        self.speed = START_SPEED
        self.ended = False
        self._spawn_timer = IntervalTimer(SPAWN_INTERVAL_MS)
        self._fall_timer = IntervalTimer(FALL_INTERVAL_MS)
        self._score_timer = IntervalTimer(SCORE_INTERVAL_MS)

    @property
    def running(self) -> bool:
        return not self.ended and self._score_timer.active

    def start(self) -> None:
        """Clear the field, place the player and start the timers."""
        self.ended = False
        self.platforms.clear()
        self.player.place(
            self.width / 2 - self.player.width / 2,
            self.height - PLAYER_BOTTOM_MARGIN - self.player.height,
        )
        self._spawn_timer.start()
        self._fall_timer.start()
        self._score_timer.start()

    def press(self, direction: Direction) -> bool:
        """Move the player one step; True if it moved."""
        return self.player.move(direction, self.width, self.height)

    def advance(self, elapsed_ms: float) -> None:
        """Let time pass, firing timers in the order they come due."""
        if elapsed_ms < 0:
            raise ValueError("elapsed time must not be negative")
        left = elapsed_ms
        while left > 0 and self.running:
            timers = [t for t in (self._spawn_timer, self._fall_timer, self._score_timer) if t.active]
            if not timers:
                break
            step = min(left, *(t.remaining for t in timers))
            left -= step
            spawn = self._spawn_timer.advance(step)
            fall = self._fall_timer.advance(step)
            score = self._score_timer.advance(step)
            if spawn:
                self.generate_platform()
            if fall and self.running:
                self.step_platforms()
            if score and self.running:
                self.increase_score()

    def generate_platform(self) -> Optional[FallingPlatform]:
        """Drop a new platform at the current speed, unless the game is over."""
        if self.ended:
            return None
        platform = spawn_platform(self.rng, self.speed)
        self.platforms.append(platform)
        return platform

    def step_platforms(self) -> None:
        """Move every platform one tick and apply collisions."""
        for platform in list(self.platforms):
            if self.ended:
                break
            platform.fall()
            if platform.is_gone():
                self.platforms.remove(platform)
            elif platform.hits(self.player):
                self.decrease_hp()

    def increase_score(self) -> None:
        self.score += 1
        self.speed = max(self.speed, speed_for_score(self.score))

    def decrease_hp(self) -> None:
        self.hp -= HP_LOSS
        if self.hp <= 0:
            self.end()

    def end(self) -> None:
        """Finish the round once, report the score and reset."""
        if self.ended:
            return
        self.ended = True
        self.platforms.clear()
        self._spawn_timer.stop()
        self._fall_timer.stop()
        self._score_timer.stop()
        if self.on_over is not None:
            self.on_over(self.score)
        self.restart()

    def restart(self) -> None:
        if self.on_ended is not None:
            self.on_ended()
        self.score = 0
        self.hp = 0