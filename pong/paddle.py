import pygame


class Paddle:
    def __init__(self, x, y, width, height):
        self.x = x
        self.y = y
        self.width = width
        self.height = height

    def move(self, dy, top, bottom):
        # x is fixed; only y moves, kept inside [top, bottom - height]
        self.y += dy
        self.y = max(top, min(self.y, bottom - self.height))

    def rect(self):
        return pygame.Rect(int(self.x), int(self.y), int(self.width), int(self.height))
