import pygame
import pytest

from mermaidgame.collectibles import CrownComponent, Flower, Heart, Seashell, Sword

RED = (255, 0, 0)


def test_base_is_abstract():
    with pytest.raises(TypeError):
        CrownComponent()


def test_initial_rects():
    assert Flower().rect == pygame.Rect(4, 30, 50, 50)
    assert Seashell().rect == pygame.Rect(0, 0, 73, 93)
    assert Sword().rect == pygame.Rect(0, 0, 73, 73)
    assert Heart().rect == pygame.Rect(-50, -74, 20, 20)


def test_flower_and_seashell_are_shifted_down():
    assert Flower().create(0, 0).rect == pygame.Rect(0, 90, 50, 50)
    assert Seashell().create(0, 0).rect == pygame.Rect(0, 90, 73, 93)


@pytest.mark.parametrize("cls", [Sword, Heart])
def test_sword_and_heart_placed_exactly(cls):
    item = cls().create(910, 40)
    assert item.rect.topleft == (910, 40)
    assert item.rect.size == pygame.Rect(cls.INITIAL).size


@pytest.mark.parametrize("cls", [Flower, Seashell, Sword, Heart])
def test_create_keeps_size_and_is_translation(cls):
    a = cls().create(10, 20)
    b = cls().create(35, 70)
    assert a.rect.size == b.rect.size == pygame.Rect(cls.INITIAL).size
    assert (b.rect.x - a.rect.x, b.rect.y - a.rect.y) == (25, 50)


@pytest.mark.parametrize("cls", [Flower, Seashell, Sword, Heart])
def test_draw_scales_whole_texture(cls):
    texture = pygame.Surface((7, 5))
    texture.fill(RED)
    screen = pygame.Surface((400, 400))
    item = cls().create(100, 100)
    item.draw(screen, texture)
    assert tuple(screen.get_at(item.rect.topleft))[:3] == RED
    assert tuple(screen.get_at((item.rect.right - 1, item.rect.bottom - 1)))[:3] == RED
    assert tuple(screen.get_at((item.rect.right + 1, item.rect.centery)))[:3] == (0, 0, 0)