"""The player's mermaid."""

from __future__ import annotations

import logging

import pygame

from .fish import Fish

SCREEN_WIDTH = 1000
SCREEN_HEIGHT = 600

logger = logging.getLogger(__name__)

_MOVES = {
    pygame.K_UP: (0, -1),
    pygame.K_DOWN: (0, 1),
    pygame.K_LEFT: (-1, 0),
    pygame.K_RIGHT: (1, 0),
}


class Mermaid(Fish):
    """The player sprite: moves with the arrow keys, keeps lives and a score."""

    ANIMATION_MS = 300

    def __init__(self, x, y):
        super().__init__(x, y, 51, 29, 3, 104)
        self.src_rect = pygame.Rect(3, 104, 51, 28)
        self.speed = 40
        self.lives = 3
        self.score = 0
        self.facing_right = False
        self.frame = 0

    def handle_input(self, event):
        """Move by one step for an arrow key press, staying on screen."""
        if event.type != pygame.KEYDOWN or event.key not in _MOVES:
            return
        dx, dy = _MOVES[event.key]
        if dx:
            self.facing_right = dx > 0
        moved = self.rect.move(dx * self.speed, dy * self.speed)
        if (
            moved.x >= 0
            and moved.right <= SCREEN_WIDTH
            and moved.y >= 0
            and moved.bottom <= SCREEN_HEIGHT
        ):
            self.rect = moved

    def update(self, ticks):
        """Pick the animation frame from the elapsed milliseconds ``ticks``."""
        self.frame = (ticks // self.ANIMATION_MS) % 3
        if self.facing_right:
            self.src_rect = pygame.Rect(3 + self.frame * 53, 104, 51, 28)
        else:
            self.src_rect = pygame.Rect(2 + self.frame * 53, 58, 53, 29)
        logger.debug(
            "frame %d, facing right %s, source x %d",
            self.frame,
            self.facing_right,
            self.src_rect.x,
        )

    def draw(self, surface, assets):
        if self.facing_right:
            self.src_rect = pygame.Rect(3, 104, 51, 28)
        else:
            self.src_rect = pygame.Rect(114, 58, 53, 29)
        super().draw(surface, assets)

    def check_collision(self, rect1, rect2):
        """Return whether two rectangles overlap (touching edges do not count)."""
        return (
            rect1.x < rect2.x + rect2.w
            and rect1.x + rect1.w > rect2.x
            and rect1.y < rect2.y + rect2.h
            and rect1.y + rect1.h > rect2.y
        )

    def decrease_lives(self):
        """Lose one life, never going below zero."""
        if self.lives > 0:
            self.lives -= 1

    def increase_score(self, points):
        self.score += points

    def __iadd__(self, points):
        self.score += points
        return self