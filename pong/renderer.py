import pygame

from .config import (
    BLACK,
    HEADER_FONT_SIZE,
    HEADER_Y,
    PAUSE_FONT_SIZE,
    TITLE,
    WHITE,
)


class Renderer:
    """Draws the engine state; reads it, never changes it."""

    def __init__(self, width, height, play_top):
        self.width = width
        self.height = height
        self.play_top = play_top

        # UI
        self.font = pygame.font.SysFont("Arial", HEADER_FONT_SIZE)
        self.pause_font = pygame.font.SysFont("Arial", PAUSE_FONT_SIZE)

    def draw(self, screen, engine):
        screen.fill(BLACK)

        # Field & entities
        pygame.draw.rect(screen, WHITE, engine.left.rect())
        pygame.draw.rect(screen, WHITE, engine.right.rect())
        pygame.draw.circle(
            screen, WHITE, (int(engine.ball.x), int(engine.ball.y)), int(engine.ball.radius)
        )

        self._draw_header(screen, engine)

        if engine.paused:
            self._draw_pause(screen)

    def _draw_header(self, screen, engine):
        # Title centered by its measured width
        title = self.font.render(TITLE, True, WHITE)
        screen.blit(title, ((self.width - title.get_width()) // 2, HEADER_Y))

        left_text = self.font.render(str(engine.left_score), True, WHITE)
        right_text = self.font.render(str(engine.right_score), True, WHITE)
        screen.blit(left_text, (int(0.1 * self.width), HEADER_Y))
        screen.blit(right_text, (int(0.9 * self.width), HEADER_Y))

        pygame.draw.line(screen, WHITE, (0, self.play_top), (self.width, self.play_top))

    def _draw_pause(self, screen):
        text = self.pause_font.render("Paused", True, BLACK)
        x = (self.width - text.get_width()) // 2
        box = pygame.Rect(x - 10, self.height // 2 - 30, text.get_width() + 20, 60)
        pygame.draw.rect(screen, WHITE, box)
        screen.blit(text, (x, self.height // 2 - 20))
