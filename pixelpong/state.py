"""Game state and rules: paddles, ball physics, scoring and serving."""

import random
from enum import Enum

WIDTH = 1280
HEIGHT = 720
BAR_HEIGHT = 100
BAR_WIDTH = 20

PADDLE_LIMIT = 300
PADDLE_STEP = 5
PADDLE_REACH = 74
WALL_Y = 332
GOAL_X = 610
PADDLE_ZONE = (471, 506)
WINNING_SCORE = 30
SERVE_DELAY = 200
COLLISION_COOLDOWN = 150
SERVE_X_SPEED = 2.1
MAX_X_SPEED = 3.6
MAX_Y_SPEED = 9.0

_SIGNS = (1, -1)


class Key(Enum):
    """Logical inputs the game reacts to."""

    P1_UP = "p1_up"
    P1_DOWN = "p1_down"
    P2_UP = "p2_up"
    P2_DOWN = "p2_down"
    SERVE = "serve"
    PAUSE = "pause"
    QUIT = "quit"


class Phase(Enum):
    """Whether the ball is waiting, in play, or about to be served."""

    WAITING = "waiting"
    PLAYING = "playing"
    SERVING = "serving"


class GameOver(Exception):
    """Raised when the game ends, by a winning score or by quitting."""

    def __init__(self, score_p1, score_p2):
        super().__init__(f"game over at {score_p1}-{score_p2}")
        self.score_p1 = score_p1
        self.score_p2 = score_p2


def interpolation(num, new_min, new_max, old_max):
    """Map ``num`` from the range [0, old_max] onto [new_min, new_max]."""
    return (new_max - new_min) * num / old_max + new_min


class GameState:
    """Everything that changes while a game is played."""

    def __init__(self, rng=None):
        self.rng = rng if rng is not None else random.Random()
        self.offset_p1 = 0
        self.offset_p2 = 0
        self.offset_bar = WIDTH // 10
        self.ball_x = 0.0
        self.ball_y = 0.0
        self.old_y = 0.0
        self.score_p1 = 0
        self.score_p2 = 0
        self.x_speed = 0.0
        self.y_speed = 0.0
        self.phase = Phase.WAITING
        self.held = set()
        self.ball_x_sign = self.rng.choice(_SIGNS)
        self.ball_y_sign = self.rng.choice(_SIGNS)
        self.collision = True
        self.ball_hidden = False
        self._cooldown_ticks = 0
        self._serve_ticks = 0

    def _random_y_speed(self):
        return interpolation(self.rng.randrange(31), 1.2, 1.8, 30)

    def press(self, key):
        """React to a key going down."""
        if key is Key.QUIT:
            raise GameOver(self.score_p1, self.score_p2)
        if key in (Key.P1_UP, Key.P1_DOWN, Key.P2_UP, Key.P2_DOWN):
            self.held.add(key)
        if key is Key.SERVE and self.phase is Phase.WAITING:
            self.y_speed = self._random_y_speed()
            self.x_speed = SERVE_X_SPEED
            self.phase = Phase.PLAYING
        if key is Key.PAUSE:
            if self.phase is Phase.PLAYING:
                self.phase = Phase.WAITING
            else:
                self.phase = Phase.PLAYING

    def release(self, key):
        """React to a key going up."""
        self.held.discard(key)

    def _nudge(self, offset, up, down):
        if up in self.held and offset > -PADDLE_LIMIT:
            offset -= PADDLE_STEP
        if down in self.held and offset < PADDLE_LIMIT:
            offset += PADDLE_STEP
        return offset

    def move_paddles(self):
        """Move each paddle one step for every direction key held."""
        self.offset_p1 = self._nudge(self.offset_p1, Key.P1_UP, Key.P1_DOWN)
        self.offset_p2 = self._nudge(self.offset_p2, Key.P2_UP, Key.P2_DOWN)

    def _pivot(self, up, down):
        rising = self.ball_y - self.old_y
        if (up in self.held and rising > 0) or (down in self.held and rising < 0):
            self.x_speed = min(self.x_speed * 1.05, MAX_X_SPEED)
            self.y_speed = min(self.y_speed + self.x_speed / 4.2, MAX_Y_SPEED)
            self.ball_y_sign *= -1
        self.ball_x_sign *= -1
        self.x_speed = min(self.x_speed * 1.02, MAX_X_SPEED)
        self.collision = False

    def check_collision(self):
        """Bounce the ball off walls and paddles and score goals."""
        contact_1 = self.offset_p1 - self.ball_y
        contact_2 = self.offset_p2 - self.ball_y
        if self.ball_y >= WALL_Y - self.y_speed:
            self.ball_y_sign *= -1
        elif self.ball_y <= -WALL_Y + self.y_speed:
            self.ball_y_sign *= -1
        near, far = PADDLE_ZONE
        if -far < self.ball_x < -near and -PADDLE_REACH <= contact_1 <= PADDLE_REACH and self.collision:
            self._pivot(Key.P1_UP, Key.P1_DOWN)
        elif near < self.ball_x < far and -PADDLE_REACH <= contact_2 <= PADDLE_REACH and self.collision:
            self._pivot(Key.P2_UP, Key.P2_DOWN)
        if self.ball_x >= GOAL_X:
            self.reset_round(1)
        if self.ball_x <= -GOAL_X:
            self.reset_round(2)

    def reset_round(self, scorer):
        """Award a point to player ``scorer`` (1 or 2) and prepare a serve."""
        if scorer == 1:
            self.score_p1 += 1
        elif scorer == 2:
            self.score_p2 += 1
        else:
            raise ValueError(f"no such player: {scorer!r}")
        if WINNING_SCORE in (self.score_p1, self.score_p2):
            raise GameOver(self.score_p1, self.score_p2)
        self.phase = Phase.SERVING
        self.collision = True
        self.ball_x = 0.0
        self.ball_y = 0.0
        self.y_speed = self._random_y_speed()
        self.x_speed = SERVE_X_SPEED
        self.ball_x_sign = self.rng.choice(_SIGNS)
        self.ball_y_sign = self.rng.choice(_SIGNS)

    def move_ball(self):
        """Advance the ball one frame and re-arm paddle collisions in time."""
        if not self.collision:
            self._cooldown_ticks += 1
            if self._cooldown_ticks == COLLISION_COOLDOWN:
                self._cooldown_ticks = 0
                self.collision = True
        self.old_y = self.ball_y
        self.ball_x += self.x_speed * self.ball_x_sign
        self.ball_y += self.y_speed * self.ball_y_sign

    def step(self):
        """Advance the whole game by one frame."""
        self.check_collision()
        self.move_paddles()
        if self.phase is Phase.PLAYING:
            self.move_ball()
        self.ball_hidden = self.phase is Phase.SERVING
        if self.ball_hidden:
            self._serve_ticks += 1
            if self._serve_ticks == SERVE_DELAY:
                self._serve_ticks = 0
                self.phase = Phase.PLAYING