"""Drawing the playing field, the paddles, the ball and the score."""

import numpy as np

from pixelpong.digits import draw_score
from pixelpong.framebuffer import BLACK, WHITE
from pixelpong.state import BAR_HEIGHT, BAR_WIDTH, HEIGHT, WIDTH

BORDER = 10
BALL_BOX = 16

_CX = WIDTH // 2
_CY = HEIGHT // 2


def paint_ball(x, y):
    """Tell whether (x, y) lies in the ball's box but outside its rounded shape.

    Works on plain numbers and, element by element, on numpy arrays.
    """
    top = y < _CY - 12
    upper = y < _CY - 8
    bottom = y > _CY + 11
    lower = y > _CY + 7
    return (
        ((x < _CX - 8) & top)
        | ((x > _CX + 7) & top)
        | ((x < _CX - 12) & upper)
        | ((x > _CX + 11) & upper)
        | ((x < _CX - 12) & lower)
        | ((x < _CX - 8) & bottom)
        | ((x > _CX + 7) & bottom)
        | ((x > _CX + 11) & lower)
    )


_BALL_ROWS, _BALL_COLS = np.mgrid[
    _CY - BALL_BOX:_CY + BALL_BOX, _CX - BALL_BOX:_CX + BALL_BOX
]
_BALL_COLORS = np.where(paint_ball(_BALL_COLS, _BALL_ROWS), BLACK, WHITE).astype(
    np.uint32
)

_BAR_ROWS, _BAR_COLS = np.meshgrid(
    np.arange(HEIGHT // 2 - BAR_HEIGHT // 2 + 1, HEIGHT // 2 + BAR_HEIGHT // 2),
    np.arange(BAR_WIDTH),
    indexing="ij",
)


def _put_pixels(buffer, xs, ys, colors):
    """Write many pixels at once with the buffer's linear addressing."""
    cols = np.trunc(np.asarray(xs, dtype=float)).astype(np.int64)
    rows = np.trunc(np.asarray(ys, dtype=float)).astype(np.int64)
    index = (rows * buffer.width + cols).ravel()
    if index.size and (index.min() < 0 or index.max() >= buffer.width * buffer.height):
        raise IndexError("drawing reaches outside the framebuffer")
    values = np.broadcast_to(np.asarray(colors, dtype=np.uint32), rows.shape).ravel()
    buffer.pixels.reshape(-1)[index] = values


def render_background(buffer):
    """Paint the whole buffer black."""
    buffer.fill(BLACK)


def render_limit(buffer):
    """Paint the white frame around the field."""
    pixels = buffer.pixels
    height, width = pixels.shape
    pixels[:BORDER, :] = WHITE
    pixels[height - BORDER + 1:, :] = WHITE
    pixels[:, :BORDER] = WHITE
    pixels[:, width - BORDER + 1:] = WHITE


def render_ball(buffer, state):
    """Draw the round ball at its current position."""
    _put_pixels(
        buffer, _BALL_COLS + state.ball_x, _BALL_ROWS + state.ball_y, _BALL_COLORS
    )


def render_ball_mask(buffer, state):
    """Blank out the ball's whole box, hiding it."""
    _put_pixels(buffer, _BALL_COLS + state.ball_x, _BALL_ROWS + state.ball_y, BLACK)


def render_players(buffer, state):
    """Draw both paddles at their current offsets."""
    _put_pixels(
        buffer, _BAR_COLS + state.offset_bar, _BAR_ROWS + state.offset_p1, WHITE
    )
    _put_pixels(
        buffer,
        _BAR_COLS - state.offset_bar - BAR_WIDTH,
        _BAR_ROWS + state.offset_p2,
        WHITE,
    )


def render_frame(buffer, state):
    """Draw a complete frame for ``state``."""
    render_background(buffer)
    render_limit(buffer)
    draw_score(buffer, state.score_p1, state.score_p2)
    render_players(buffer, state)
    render_ball(buffer, state)
    if state.ball_hidden:
        render_ball_mask(buffer, state)