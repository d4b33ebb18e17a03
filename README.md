# pixelpong

A two-player Pong game for one keyboard. Every frame is drawn into a 1280×720
framebuffer of 32-bit pixels: the white border, the two paddles, the rounded ball
and the block-digit scoreboard. The finished frame is shown in a pygame window.

## Installing

```
pip install .
```

## Playing

```
pixelpong
pixelpong --fps 120
```

`--fps` sets the frame rate (default 200); it must be positive. The speed of the
game is tied to the frame rate, since the ball and paddles move a fixed distance
per frame.

| Key        | Action                                      |
|------------|---------------------------------------------|
| `W` / `S`  | Left paddle up / down                       |
| `↑` / `↓`  | Right paddle up / down                      |
| `Space`    | Serve the first ball                        |
| `Tab`      | Pause or resume                             |
| `Esc`      | Quit                                        |

When a ball passes a paddle and leaves the court, the other player scores and the
ball returns to the centre. It stays hidden there for 200 frames and is then
served in a random direction. Hitting the ball while your paddle moves against the
ball's vertical direction sends it back faster and at a steeper angle. The game
ends when a player reaches 30 points, when `Esc` is pressed or when the window is
closed; the command then prints `Thank you for playing!` and exits with status 0.
If no window can be opened, it reports the error and exits with status 1.

## Using the pieces

The rules and the drawing do not need a window and can be driven directly:

```python
import random

from pixelpong.framebuffer import Framebuffer
from pixelpong.render import render_frame
from pixelpong.state import HEIGHT, WIDTH, GameOver, GameState, Key

state = GameState(random.Random(0))
state.press(Key.SERVE)
buffer = Framebuffer(WIDTH, HEIGHT)
try:
    for _ in range(100):
        state.step()
        render_frame(buffer, state)
except GameOver as over:
    print(over.score_p1, over.score_p2)

print(hex(buffer.get_pixel(0, 0)))   # 0xffffff, part of the border
```

- `pixelpong.state` holds `GameState` with `press`, `release`, `move_paddles`,
  `check_collision`, `reset_round`, `move_ball` and `step`, the `Key` and `Phase`
  enums, and `GameOver`, which is raised when a player reaches 30 points or when
  `Key.QUIT` is pressed.
- `pixelpong.framebuffer.Framebuffer` stores the pixels; `put_pixel`, `get_pixel`
  and `fill` work on single pixels or the whole buffer, and `pixels` is a
  `(height, width)` numpy view.
- `pixelpong.render` draws the field (`render_frame`, `render_background`,
  `render_limit`, `render_players`, `render_ball`, `render_ball_mask`).
- `pixelpong.digits` draws the score digits (`digit_mask`, `draw_digit`,
  `draw_score`).

## What it does not do

There is no computer opponent, no sound, and no saving of scores or settings;
both paddles are played from the same keyboard.

## Running the tests

```
pip install .[test]
pytest
```