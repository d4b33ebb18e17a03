import numpy as np
import pytest

from pixelpong.digits import (
    DIGIT_HEIGHT,
    DIGIT_WIDTH,
    P1_POSITIONS,
    P2_POSITIONS,
    SCORE_Y,
    digit_mask,
    draw_digit,
    draw_score,
)
from pixelpong.framebuffer import BLACK, WHITE, Framebuffer


def _region(buffer, x, y):
    return buffer.pixels[y:y + DIGIT_HEIGHT, x:x + DIGIT_WIDTH]


@pytest.mark.parametrize("digit", range(10))
def test_mask_shape(digit):
    assert digit_mask(digit).shape == (DIGIT_HEIGHT, DIGIT_WIDTH)


def test_all_masks_distinct():
    masks = {digit_mask(d).tobytes() for d in range(10)}
    assert len(masks) == 10


def test_zero_is_hollow():
    mask = digit_mask(0)
    assert not mask[20, 10]
    assert mask[0, 0] and mask[39, 19]


def test_eight_is_zero_with_middle_bar():
    eight = digit_mask(8)
    zero = digit_mask(0)
    assert bool((eight >= zero).all())
    assert eight[17, 10] and not zero[17, 10]


def test_one_lights_only_right_column():
    mask = digit_mask(1)
    assert bool(mask[:, 15:].all())
    assert not mask[:, :15].any()


def test_seven_has_top_bar_and_right_column():
    mask = digit_mask(7)
    assert bool(mask[:6, :].all())
    assert bool(mask[:, 15:].all())
    assert not mask[6:, :15].any()


@pytest.mark.parametrize("digit", [3, 9])
def test_nine_and_three_share_right_column(digit):
    column = digit_mask(digit)[:, 15:]
    assert int(np.count_nonzero(column)) == 40 * 5
    assert int(np.count_nonzero(~column)) == 0


def test_mask_is_a_copy():
    mask = digit_mask(0)
    mask[:] = False
    assert digit_mask(0)[0, 0]


@pytest.mark.parametrize("digit", [-1, 10, 2.5, "3"])
def test_invalid_digit_raises(digit):
    with pytest.raises(ValueError):
        digit_mask(digit)


@pytest.mark.parametrize("digit", range(10))
def test_draw_digit_matches_mask(digit):
    fb = Framebuffer(64, 64)
    draw_digit(fb, digit, 10, 12)
    region = _region(fb, 10, 12)
    mask = digit_mask(digit)
    white_mismatches = int(np.count_nonzero((region == WHITE) != mask))
    black_mismatches = int(np.count_nonzero((region == BLACK) != ~mask))
    assert white_mismatches == 0
    assert black_mismatches == 0
    assert int(np.count_nonzero(region == WHITE)) == int(mask.sum())


def test_draw_digit_leaves_surroundings():
    fb = Framebuffer(64, 64)
    draw_digit(fb, 8, 10, 12)
    assert fb.get_pixel(9, 12) == BLACK
    assert fb.get_pixel(30, 12) == BLACK
    assert int(np.count_nonzero(fb.pixels)) == int(digit_mask(8).sum())


def test_draw_digit_overwrites_background():
    fb = Framebuffer(30, 50)
    fb.fill(WHITE)
    draw_digit(fb, 1, 0, 0)
    assert fb.get_pixel(0, 0) == BLACK
    assert fb.get_pixel(15, 0) == WHITE


def test_draw_digit_spilling_past_edge_wraps_rows():
    fb = Framebuffer(30, 50)
    draw_digit(fb, 0, 25, 0)
    assert fb.get_pixel(25, 0) == WHITE
    assert fb.get_pixel(0, 1) == WHITE


def test_draw_digit_invalid_raises():
    fb = Framebuffer(30, 50)
    with pytest.raises(ValueError):
        draw_digit(fb, 10, 0, 0)


@pytest.mark.parametrize(
    "position, digit",
    [
        (P1_POSITIONS[0], 1),
        (P1_POSITIONS[1], 2),
        (P2_POSITIONS[0], 0),
        (P2_POSITIONS[1], 7),
    ],
)
def test_draw_score_places_all_four_digits(position, digit):
    fb = Framebuffer(1280, 720)
    draw_score(fb, 12, 7)
    region = _region(fb, position, SCORE_Y)
    mask = digit_mask(digit)
    assert int(np.count_nonzero((region == WHITE) != mask)) == 0
    assert int(np.count_nonzero(region == WHITE)) == int(mask.sum())


def test_draw_score_rejects_three_digit_score():
    fb = Framebuffer(1280, 720)
    with pytest.raises(ValueError):
        draw_score(fb, 100, 0)