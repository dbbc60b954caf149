"""Fish that swim across the screen: the base sprite and the two enemy kinds."""

from __future__ import annotations

import random

import pygame

SCREEN_HEIGHT = 600


def _render_copy(surface, assets, src, dest):
    """Copy ``src`` of ``assets`` (or all of it) onto ``surface``, scaled to ``dest``."""
    image = assets.subsurface(src) if src is not None else assets
    if image.get_size() != dest.size:
        image = pygame.transform.scale(image, dest.size)
    surface.blit(image, dest.topleft)


class Fish:
    """A sprite with a source rectangle in a sheet and a position on screen."""

    def __init__(self, x, y, width, height, src_x, src_y):
        self.src_rect = pygame.Rect(src_x, src_y, width, height)
        self.rect = pygame.Rect(x, y, width, height)

    def update(self):
        """Advance the fish one step to the right."""
        self.rect.x += 5

    def draw(self, surface, assets):
        """Draw the current frame of the fish onto ``surface``."""
        _render_copy(surface, assets, self.src_rect, self.rect)


class KillerFish(Fish):
    """A dangerous fish that enters on the left edge and swims right."""

    SPEED = 10
    _FRAMES = {
        1: pygame.Rect(257, 98, 61, 38),
        2: pygame.Rect(320, 98, 62, 38),
    }

    def __init__(self, rng=None):
        rng = rng if rng is not None else random
        super().__init__(0, rng.randrange(SCREEN_HEIGHT), 50, 50, 201, 97)
        self.src_rect = pygame.Rect(201, 97, 49, 39)
        self.frame = 0

    def update(self):
        """Move right and advance the three-frame animation."""
        self.rect.x += self.SPEED
        self.frame = (self.frame + 1) % 3

    def draw(self, surface, assets):
        frame_rect = self._FRAMES.get(self.frame)
        if frame_rect is not None:
            self.src_rect = frame_rect.copy()
        super().draw(surface, assets)


class HarmlessFish(Fish):
    """A harmless fish that enters on the right edge and swims left."""

    SPEED = 10
    _FRAMES = {
        1: pygame.Rect(199, 265, 34, 17),
        2: pygame.Rect(151, 263, 33, 19),
    }

    def __init__(self, rng=None):
        rng = rng if rng is not None else random
        super().__init__(1000, rng.randrange(SCREEN_HEIGHT), 34, 17, 247, 265)
        self.frame = 0

    def update(self):
        """Move left and advance the three-frame animation."""
        self.rect.x -= self.SPEED
        self.frame = (self.frame + 1) % 3

    def draw(self, surface, assets):
        frame_rect = self._FRAMES.get(self.frame)
        if frame_rect is not None:
            self.src_rect = frame_rect.copy()
        super().draw(surface, assets)