import math

# Screen
SCREEN_WIDTH, SCREEN_HEIGHT = 1080, 720
PLAY_START_HEIGHT = 50  # header strip above the playfield
TITLE = "Pong"
FPS = 60

# Colors
BLACK = (0, 0, 0)
WHITE = (255, 255, 255)

# Paddles
PADDLE_WIDTH = 0.01 * SCREEN_WIDTH
PADDLE_HEIGHT = 0.2 * SCREEN_HEIGHT
LEFT_PADDLE_X = 0.05 * SCREEN_WIDTH
RIGHT_PADDLE_X = 0.95 * SCREEN_WIDTH
PADDLE_START_Y = 0.40 * SCREEN_HEIGHT
PADDLE_STEP = 10.0  # pixels per frame while a key is held

# Ball
BALL_RADIUS = 0.015 * SCREEN_HEIGHT
SERVE_SPEED = 300.0  # pixels/sec
SPEED_UP = 1.05  # on paddle hit, compounding
MAX_BOUNCE_ANGLE = math.pi / 4  # full span, centered on horizontal

# HUD
HEADER_Y = 17
HEADER_FONT_SIZE = 30
PAUSE_FONT_SIZE = 40
