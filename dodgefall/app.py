"""The game window: a start button, the play field, score and health."""

from __future__ import annotations

import os
import random
from pathlib import Path
from typing import Optional, Sequence, Tuple

os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")

import pygame  # noqa: E402

from dodgefall.game import START_HP, Game  # noqa: E402
from dodgefall.player import Direction, Player  # noqa: E402

WINDOW_TITLE = "Уворачивайся!"
WINDOW_SIZE = (900, 580)
FIELD_ORIGIN = (5, 5)
FIELD_SIZE = (890, 570)
PLAYER_IMAGE = "cub1.jpg"
FPS = 60

_GAME_OVER_TEXT = "Игра окончена!\nВы набрали следующее кол-во очков: "
_BUTTON_RECT = pygame.Rect(15, 15, 140, 36)
_HP_RECT = pygame.Rect(720, 45, 160, 18)
_INK = (20, 20, 20)

_KEY_DIRECTIONS = {
    pygame.K_LEFT: Direction.LEFT,
    pygame.K_RIGHT: Direction.RIGHT,
    pygame.K_UP: Direction.UP,
    pygame.K_DOWN: Direction.DOWN,
}


def direction_for_key(key: int) -> Optional[Direction]:
    """The direction an arrow key moves the player in, or None for other keys."""
    return _KEY_DIRECTIONS.get(key)


def end_message(score: int) -> str:
    """The text shown when a round is over."""
    return f"{_GAME_OVER_TEXT}{score}"


class App:
    """Holds the window state and starts a new game on each button press."""

    def __init__(
        self,
        rng: Optional[random.Random] = None,
        player_size: Optional[Tuple[float, float]] = None,
    ) -> None:
        self.rng = rng
        self.game: Optional[Game] = None
        self.started = False
        self.button_enabled = True
        self.message: Optional[str] = None
        self._player_size = player_size

    def start_clicked(self) -> bool:
        """Start a new game; a click while one is running is ignored."""
        if self.started:
            return False
        self.started = True
        self.button_enabled = False
        self.message = None
        player = Player(*self._player_size) if self._player_size else Player()
        self.game = Game(
            width=FIELD_SIZE[0],
            height=FIELD_SIZE[1],
            player=player,
            rng=self.rng,
            on_over=self._game_over,
            on_ended=self.game_ended,
        )
        self.game.start()
        return True

    def game_ended(self) -> None:
        """Let the start button be used again."""
        self.started = False
        self.button_enabled = True

    def _game_over(self, score: int) -> None:
        self.message = end_message(score)

    def _handle(self, event: pygame.event.Event) -> None:
        if self.message is not None:
            # The message box is modal: any key or click dismisses it.
            if event.type in (pygame.KEYDOWN, pygame.MOUSEBUTTONDOWN):
                self.message = None
            return
        if event.type == pygame.KEYDOWN:
            direction = direction_for_key(event.key)
            if direction is not None and self.game is not None and self.game.running:
                self.game.press(direction)
        elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
            if self.button_enabled and _BUTTON_RECT.collidepoint(event.pos):
                self.start_clicked()

    def _draw(self, screen: pygame.Surface, font: pygame.font.Font,
              image: Optional[pygame.Surface]) -> None:
        screen.fill((235, 235, 235))
        field = screen.subsurface(pygame.Rect(FIELD_ORIGIN, FIELD_SIZE))
        field.fill((255, 255, 255))
        game = self.game
        if game is not None:
            for p in game.platforms:
                pygame.draw.rect(field, (0, 100, 0), (p.x, p.y, p.width, p.height))
            if not game.ended:
                pl = game.player
                if image is not None:
                    field.blit(image, (pl.x, pl.y))
                else:
                    pygame.draw.rect(field, (40, 80, 200), (pl.x, pl.y, pl.width, pl.height))

        pygame.draw.rect(screen, (200, 200, 200) if self.button_enabled else (225, 225, 225),
                         _BUTTON_RECT)
        label = font.render("Старт", True, _INK)
        screen.blit(label, label.get_rect(center=_BUTTON_RECT.center))

        score = game.score if game is not None else 0
        hp = game.hp if game is not None else START_HP
        screen.blit(font.render(str(score), True, _INK), (720, 15))
        filled = _HP_RECT.copy()
        filled.width = int(_HP_RECT.width * max(0, min(START_HP, hp)) / START_HP)
        pygame.draw.rect(screen, (60, 170, 60), filled)
        pygame.draw.rect(screen, _INK, _HP_RECT, 1)

        if self.message is not None:
            y = 220
            for line in self.message.splitlines():
                text = font.render(line, True, _INK)
                screen.blit(text, (260, y))
                y += text.get_height() + 4

    def run(self) -> None:
        """Open the window and run until it is closed."""
        pygame.init()
        try:
            screen = pygame.display.set_mode(WINDOW_SIZE)
            pygame.display.set_caption(WINDOW_TITLE)
            font = pygame.font.Font(None, 26)
            try:
                image = pygame.image.load(str(Path(PLAYER_IMAGE).resolve())).convert()
                if self._player_size is None:
                    self._player_size = image.get_size()
            except (pygame.error, OSError):
                image = None
            clock = pygame.time.Clock()
            while True:
                elapsed = clock.tick(FPS)
                for event in pygame.event.get():
                    if event.type == pygame.QUIT:
                        return
                    self._handle(event)
                if self.game is not None and self.game.running and self.message is None:
                    self.game.advance(elapsed)
                self._draw(screen, font, image)
                pygame.display.flip()
        finally:
            pygame.quit()


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Start the game window."""
    App().run()
    return 0