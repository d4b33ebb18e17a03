"""Seven-segment style score digits drawn as 20x40 pixel blocks."""

import numpy as np

from pixelpong.framebuffer import BLACK, WHITE

DIGIT_WIDTH = 20
DIGIT_HEIGHT = 40
SCORE_Y = 60
P1_POSITIONS = (540, 580)
P2_POSITIONS = (700, 740)

_b, _a = np.mgrid[0:DIGIT_HEIGHT, 0:DIGIT_WIDTH]
_RING = (_a < 5) | (_b < 5) | (_a > 14) | (_b > 34)
_EIGHT = _RING | ((_b > 14) & (_b < 20))
_UPPER = (_b > 4) & (_b < 15)
_LOWER = (_b > 19) & (_b < 35)
_LEFT = _a < 5
_RIGHT = _a > 14


def _build_masks():
    masks = (
        _RING,
        _a >= 15,
        _EIGHT & ~((_LEFT & _UPPER) | (_RIGHT & _LOWER)),
        _EIGHT & ~(_LEFT & (_UPPER | _LOWER)),
        _EIGHT & ~((_LEFT & (_b > 19)) | ((_a < 15) & (_b > 34)) | ((_a > 4) & (_a < 15) & (_b < 5))),
        _EIGHT & ~((_LEFT & _LOWER) | (_RIGHT & _UPPER)),
        _EIGHT & ~(((_a > 4) & (_b < 5)) | (_RIGHT & _UPPER)),
        ~((_a < 15) & (_b > 5)),
        _EIGHT,
        _EIGHT & ~((_LEFT & (_b > 19)) | ((_a < 15) & (_b > 34))),
    )
    frozen = []
    for mask in masks:
        mask = mask.copy()
        mask.flags.writeable = False
        frozen.append(mask)
    return tuple(frozen)


_MASKS = _build_masks()


def digit_mask(digit):
    """Return a (40, 20) boolean array, True where the digit is lit."""
    if not isinstance(digit, (int, np.integer)) or not 0 <= digit <= 9:
        raise ValueError(f"not a decimal digit: {digit!r}")
    return _MASKS[digit].copy()


def draw_digit(buffer, digit, x, y):
    """Draw ``digit`` with its top-left corner at (x, y)."""
    colors = np.where(digit_mask(digit), WHITE, BLACK).astype(np.uint32)
    inside = (
        0 <= x
        and x + DIGIT_WIDTH <= buffer.width
        and 0 <= y
        and y + DIGIT_HEIGHT <= buffer.height
    )
    if inside:
        buffer.pixels[y:y + DIGIT_HEIGHT, x:x + DIGIT_WIDTH] = colors
        return
    for (row, col), color in np.ndenumerate(colors):
        buffer.put_pixel(x + col, y + row, int(color))


def draw_score(buffer, score_p1, score_p2):
    """Draw both two-digit scores at the top of the field."""
    for score, positions in ((score_p1, P1_POSITIONS), (score_p2, P2_POSITIONS)):
        for digit, x in zip(divmod(score, 10), positions):
            draw_digit(buffer, digit, x, SCORE_Y)