import logging
import math

from .config import MAX_BOUNCE_ANGLE, SPEED_UP

logger = logging.getLogger(__name__)

LEFT = "left"
RIGHT = "right"


class Ball:
    def __init__(self, x, y, radius, vx=0.0, vy=0.0):
        self.spawn_x = x
        self.spawn_y = y
        self.x = float(x)
        self.y = float(y)
        self.radius = radius

        # Velocities in pixels/sec
        self.vx = float(vx)
        self.vy = float(vy)

    def speed(self):
        return math.hypot(self.vx, self.vy)

    def advance(self, dt: float):
        # Single explicit Euler step, no substeps
        self.x += self.vx * dt
        self.y += self.vy * dt

    def collides_with(self, paddle) -> bool:
        """Circle vs axis-aligned rectangle, touching counts as a hit."""
        closest_x = max(paddle.x, min(self.x, paddle.x + paddle.width))
        closest_y = max(paddle.y, min(self.y, paddle.y + paddle.height))
        dx = self.x - closest_x
        dy = self.y - closest_y
        return dx * dx + dy * dy <= self.radius * self.radius

    def deflect(self, paddle, side):
        # Where on the paddle we hit: 0 = top edge, 1 = bottom edge
        hit_pos = (self.y - paddle.y) / paddle.height
        hit_pos = max(0.0, min(1.0, hit_pos))

        angle = (hit_pos - 0.5) * MAX_BOUNCE_ANGLE
        if side == RIGHT:
            angle = math.pi - angle

        # No speed cap: every hit compounds
        speed = self.speed() * SPEED_UP
        self.vx = speed * math.cos(angle)
        self.vy = speed * math.sin(angle)
        logger.debug("%s paddle hit at %.2f, speed now %.1f", side, hit_pos, speed)

    def bounce_walls(self, top, bottom):
        if self.vy > 0:
            if self.y >= bottom - self.radius:
                self.vy = -self.vy
                self.y = bottom - self.radius
        elif self.y <= top + self.radius:
            self.vy = -self.vy
            self.y = top + self.radius

    def reset(self, vx):
        self.x = float(self.spawn_x)
        self.y = float(self.spawn_y)
        self.vx = float(vx)
        self.vy = 0.0
