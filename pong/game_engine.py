import logging
from collections import namedtuple

import pygame

from .ball import LEFT, RIGHT, Ball
from .config import (
    BALL_RADIUS,
    LEFT_PADDLE_X,
    PADDLE_HEIGHT,
    PADDLE_START_Y,
    PADDLE_STEP,
    PADDLE_WIDTH,
    RIGHT_PADDLE_X,
    SERVE_SPEED,
)
from .paddle import Paddle

logger = logging.getLogger(__name__)

# The five logical signals the simulation reads each frame
InputSignals = namedtuple(
    "InputSignals", ["left_up", "left_down", "right_up", "right_down", "pause"]
)
NO_INPUT = InputSignals(False, False, False, False, False)

KEY_LEFT_UP = pygame.K_w
KEY_LEFT_DOWN = pygame.K_s
KEY_RIGHT_UP = pygame.K_UP
KEY_RIGHT_DOWN = pygame.K_DOWN
KEY_PAUSE = pygame.K_p
KEY_QUIT = pygame.K_ESCAPE


def read_input(events, keys):
    """
    Map one frame of pygame input to (signals, quit_requested).

    `keys` is anything indexable by key code, normally the result of
    pygame.key.get_pressed(). Pause is edge triggered, so it comes from
    KEYDOWN events rather than the held-key table.
    """
    pause = False
    quit_requested = False
    for event in events:
        if event.type == pygame.QUIT:
            quit_requested = True
        elif event.type == pygame.KEYDOWN:
            if event.key == KEY_PAUSE:
                pause = True
            elif event.key == KEY_QUIT:
                quit_requested = True

    signals = InputSignals(
        left_up=bool(keys[KEY_LEFT_UP]),
        left_down=bool(keys[KEY_LEFT_DOWN]),
        right_up=bool(keys[KEY_RIGHT_UP]),
        right_down=bool(keys[KEY_RIGHT_DOWN]),
        pause=pause,
    )
    return signals, quit_requested


class GameEngine:
    def __init__(self, width, height, play_top):
        self.width = width
        self.height = height
        self.play_top = play_top

        # Entities
        self.left = Paddle(LEFT_PADDLE_X, PADDLE_START_Y, PADDLE_WIDTH, PADDLE_HEIGHT)
        self.right = Paddle(RIGHT_PADDLE_X, PADDLE_START_Y, PADDLE_WIDTH, PADDLE_HEIGHT)
        self.ball = Ball(0.5 * width, 0.5 * height, BALL_RADIUS, vx=-SERVE_SPEED)

        # Scoreboard
        self.left_score = 0
        self.right_score = 0

        self.paused = False

    # ---------- Input ----------
    def _move_paddles(self, signals):
        if signals.left_up:
            self.left.move(-PADDLE_STEP, self.play_top, self.height)
        if signals.left_down:
            self.left.move(PADDLE_STEP, self.play_top, self.height)
        if signals.right_up:
            self.right.move(-PADDLE_STEP, self.play_top, self.height)
        if signals.right_down:
            self.right.move(PADDLE_STEP, self.play_top, self.height)

    # ---------- Update ----------
    def step(self, signals, dt: float):
        # Pause is checked before the gate so it can always be toggled
        if signals.pause:
            self.paused = not self.paused
            logger.info("Game %s", "paused" if self.paused else "resumed")

        if self.paused:
            return

        self._move_paddles(signals)

        self.ball.advance(max(0.0, dt))

        # Only the paddle the ball is heading towards can be hit
        if self.ball.vx < 0:
            if self.ball.collides_with(self.left):
                self.ball.deflect(self.left, LEFT)
        elif self.ball.collides_with(self.right):
            self.ball.deflect(self.right, RIGHT)

        self.ball.bounce_walls(self.play_top, self.height)

        if self.ball.x < 0:
            self.right_score += 1
            self.ball.reset(-SERVE_SPEED)
            logger.info("Right scores: %d - %d", self.left_score, self.right_score)
        elif self.ball.x > self.width:
            self.left_score += 1
            self.ball.reset(SERVE_SPEED)
            logger.info("Left scores: %d - %d", self.left_score, self.right_score)
