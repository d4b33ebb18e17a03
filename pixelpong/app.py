"""The game window: input handling and the frame loop."""

import argparse
import random
import sys

import pygame

from pixelpong.framebuffer import Framebuffer
from pixelpong.render import render_frame
from pixelpong.state import HEIGHT, WIDTH, GameOver, GameState, Key

EXIT_OK = 0
EXIT_DISPLAY_ERROR = 1
DEFAULT_FPS = 200
TITLE = "Pong"
FAREWELL = "Thank you for playing!"

_KEYMAP = {
    pygame.K_ESCAPE: Key.QUIT,
    pygame.K_w: Key.P1_UP,
    pygame.K_s: Key.P1_DOWN,
    pygame.K_UP: Key.P2_UP,
    pygame.K_DOWN: Key.P2_DOWN,
    pygame.K_SPACE: Key.SERVE,
    pygame.K_TAB: Key.PAUSE,
}


def key_from_pygame(key):
    """Return the game key bound to a pygame key code, or None."""
    return _KEYMAP.get(key)


def _parse_args(argv):
    parser = argparse.ArgumentParser(prog="pixelpong", description="Two-player pong.")
    parser.add_argument(
        "--fps",
        type=int,
        default=DEFAULT_FPS,
        help=f"frames per second (default {DEFAULT_FPS})",
    )
    args = parser.parse_args(argv)
    if args.fps <= 0:
        parser.error("--fps must be positive")
    return args


def _handle_event(state, event):
    if event.type == pygame.QUIT:
        raise GameOver(state.score_p1, state.score_p2)
    if event.type not in (pygame.KEYDOWN, pygame.KEYUP):
        return
    key = key_from_pygame(event.key)
    if key is None:
        return
    if event.type == pygame.KEYDOWN:
        state.press(key)
    else:
        state.release(key)


def main(argv=None):
    """Open the window and play until someone quits or wins."""
    args = _parse_args(argv)
    try:
        pygame.display.init()
        screen = pygame.display.set_mode((WIDTH, HEIGHT))
        canvas = pygame.Surface((WIDTH, HEIGHT), 0, 32)
    except pygame.error as exc:
        print(f"pixelpong: cannot open window: {exc}", file=sys.stderr)
        pygame.quit()
        return EXIT_DISPLAY_ERROR
    try:
        pygame.display.set_caption(TITLE)
        state = GameState(random.Random())
        buffer = Framebuffer(WIDTH, HEIGHT)
        clock = pygame.time.Clock()
        try:
            while True:
                for event in pygame.event.get():
                    _handle_event(state, event)
                state.step()
                render_frame(buffer, state)
                pygame.surfarray.blit_array(canvas, buffer.pixels.T)
                screen.blit(canvas, (0, 0))
                pygame.display.flip()
                clock.tick(args.fps)
        except GameOver:
            print(FAREWELL)
            return EXIT_OK
    finally:
        pygame.quit()


if __name__ == "__main__":
    raise SystemExit(main())