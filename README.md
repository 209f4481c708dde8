# dodgefall

A small arcade game. Green platforms of random width drop from the top of
the field, and you have to keep your block out of their way. On every tick
(50 ms) a platform that overlaps you costs 2 hit points. You start with 100.
Every three seconds you survive earns a point. As the score grows, new
platforms fall faster. A new platform appears every second.

## Installing

```
pip install .
```

This pulls in `pygame`, which draws the window.

## Playing

```
dodgefall
```

The window is 900 × 580 pixels. Its texts are in Russian. Click **Старт**
(Start) to begin. A click while a round is running is ignored. Steer with
the arrow keys:

| Key   | Move               |
|-------|--------------------|
| Left  | 20 px to the left  |
| Right | 20 px to the right |
| Up    | 20 px up           |
| Down  | 20 px down         |

A step is refused once the block has reached the edge of the field in that
direction. The score is shown at the top right, with a bar for the hit
points below it.

When your hit points reach zero, the platforms vanish and a message shows
your score. Press any key or click to dismiss it. The Start button is then
active again. Closing the window quits the game.

If a file named `cub1.jpg` is in the current directory, it is used as the
player's picture, and the block takes the picture's size. Otherwise the
player is a plain 50 × 50 blue block.

### How the speed grows

Each platform keeps the speed it had when it appeared.

| Score      | Fall speed (px per tick) |
|------------|--------------------------|
| up to 20   | 5                        |
| 21 – 40    | 10                       |
| 41 – 60    | 15                       |
| 61 – 80    | 20                       |
| 81 – 100   | 25                       |
| over 100   | 30                       |

## Using the game logic directly

The rules in `dodgefall.game`, `dodgefall.platform` and `dodgefall.player`
do not depend on any window, so you can drive them yourself. The example
below runs the game without showing anything:

```python
import random

from dodgefall.game import Game, speed_for_score
from dodgefall.player import Direction

game = Game(rng=random.Random(1))
game.start()
game.press(Direction.LEFT)
game.advance(3000)          # milliseconds of game time
print(game.score, game.hp)
print(speed_for_score(45))  # 15
```

`Game` accepts `on_over(score)` and `on_ended()` callbacks. They are called
when the hit points run out. After that, `score` and `hp` are reset to 0.

`dodgefall.platform.spawn_platform(rng, speed)` creates a single falling
platform. `FallingPlatform.fall()` moves it. `is_gone()` tells you when it
has left the field. `hits(player)` checks whether it overlaps the player.
`Player.move(direction, bounds_width, bounds_height)` takes one step and
returns whether it moved.

## Running the tests

```
pip install ".[test]"
pytest
```