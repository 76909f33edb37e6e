import logging
import sys

import pygame

from pong.config import FPS, PLAY_START_HEIGHT, SCREEN_HEIGHT, SCREEN_WIDTH, TITLE
from pong.game_engine import GameEngine, read_input
from pong.renderer import Renderer

logger = logging.getLogger(__name__)


def main():
    logging.basicConfig(
        level=logging.INFO, format="%(asctime)s %(levelname)s %(name)s: %(message)s"
    )

    # Initialize pygame/Start application
    pygame.init()
    try:
        screen = pygame.display.set_mode((SCREEN_WIDTH, SCREEN_HEIGHT))
    except pygame.error:
        logger.exception("Could not open the game window")
        pygame.quit()
        raise
    pygame.display.set_caption(TITLE)

    clock = pygame.time.Clock()
    engine = GameEngine(SCREEN_WIDTH, SCREEN_HEIGHT, PLAY_START_HEIGHT)
    renderer = Renderer(SCREEN_WIDTH, SCREEN_HEIGHT, PLAY_START_HEIGHT)
    logger.info("Starting %s at %dx%d", TITLE, SCREEN_WIDTH, SCREEN_HEIGHT)

    running = True
    while running:
        dt = clock.tick(FPS) / 1000.0  # seconds since last frame
        signals, quit_requested = read_input(pygame.event.get(), pygame.key.get_pressed())
        if quit_requested:
            running = False
            continue

        # Update, then render
        engine.step(signals, dt)
        renderer.draw(screen, engine)
        pygame.display.flip()

    logger.info("Final score %d - %d", engine.left_score, engine.right_score)
    pygame.quit()
    return 0


if __name__ == "__main__":
    sys.exit(main())
