"""Things lying on the sea floor and on the status bar: flowers, shells, swords, hearts."""

from __future__ import annotations

from abc import ABC

import pygame


def _render_copy(surface, assets, dest):
    """Copy the whole of ``assets`` onto ``surface``, scaled to ``dest``."""
    image = assets
    if image.get_size() != dest.size:
        image = pygame.transform.scale(image, dest.size)
    surface.blit(image, dest.topleft)


class CrownComponent(ABC):
    """An item drawn from a whole texture at a fixed size.

    Subclasses set the initial rectangle and decide where :meth:`create`
    places them.
    """

    INITIAL = (0, 0, 0, 0)

    def __init__(self):
        self.rect = pygame.Rect(self.INITIAL)

    def create(self, x, y):
        """Place the item's top-left corner at ``(x, y)``."""
        self.rect.topleft = (x, y)
        return self

    def draw(self, surface, assets):
        """Draw the whole of ``assets`` scaled into the item's rectangle."""
        _render_copy(surface, assets, self.rect)


class Flower(CrownComponent):
    """A flower worth one point."""

    INITIAL = (4, 30, 50, 50)

    def create(self, x, y):
        """Place the flower at ``(x, y)``, 90 pixels lower."""
        return super().create(x, y + 90)

    def draw(self, surface, assets):
        super().draw(surface, assets)


class Seashell(CrownComponent):
    """A seashell worth five points."""

    INITIAL = (0, 0, 73, 93)

    def create(self, x, y):
        """Place the seashell at ``(x, y)``, 90 pixels lower."""
        return super().create(x, y + 90)

    def draw(self, surface, assets):
        super().draw(surface, assets)


class Sword(CrownComponent):
    """A sword that lets the mermaid defeat one killer fish."""

    INITIAL = (0, 0, 73, 73)

    def create(self, x, y):
        """Place the sword at ``(x, y)``."""
        return super().create(x, y)

    def draw(self, surface, assets):
        super().draw(surface, assets)


class Heart(CrownComponent):
    """One of the remaining lives shown in the corner."""

    INITIAL = (-50, -74, 20, 20)

    def create(self, x, y):
        """Place the heart at ``(x, y)``."""
        return super().create(x, y)

    def draw(self, surface, assets):
        super().draw(surface, assets)