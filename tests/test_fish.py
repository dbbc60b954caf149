import random

import pygame
import pytest

from mermaidgame.fish import Fish, HarmlessFish, KillerFish

RED = (255, 0, 0)
BLUE = (0, 0, 255)


@pytest.fixture
def sheet():
    surface = pygame.Surface((400, 300))
    surface.fill(RED)
    return surface


@pytest.fixture
def screen():
    surface = pygame.Surface((1100, 700))
    surface.fill((0, 0, 0))
    return surface


def test_fish_update_moves_right():
    fish = Fish(10, 20, 30, 40, 0, 0)
    fish.update()
    fish.update()
    assert fish.rect.y == 20
    assert fish.rect.x > 10
    assert fish.rect.size == (30, 40)


def test_fish_draw_fills_destination(sheet, screen):
    fish = Fish(100, 100, 30, 40, 0, 0)
    fish.draw(screen, sheet)
    assert tuple(screen.get_at(fish.rect.center))[:3] == RED
    assert tuple(screen.get_at((fish.rect.right + 2, fish.rect.centery)))[:3] == (0, 0, 0)


def test_killer_fish_starts_on_left_edge():
    for seed in range(20):
        fish = KillerFish(random.Random(seed))
        assert fish.rect.x == 0
        assert 0 <= fish.rect.y < 600
        assert fish.rect.size == (50, 50)
        assert fish.src_rect == pygame.Rect(201, 97, 49, 39)


def test_killer_fish_update_moves_right_and_cycles_frames():
    fish = KillerFish(random.Random(1))
    frames = []
    for _ in range(6):
        fish.update()
        frames.append(fish.frame)
    assert fish.rect.x == 6 * KillerFish.SPEED
    assert frames == [1, 2, 0, 1, 2, 0]


def test_killer_fish_draw_uses_frame_sprite(sheet, screen):
    sheet.fill(BLUE, pygame.Rect(257, 98, 61, 38))
    fish = KillerFish(random.Random(3))
    fish.rect.topleft = (200, 200)
    fish.update()
    fish.draw(screen, sheet)
    assert fish.src_rect == pygame.Rect(257, 98, 61, 38)
    assert tuple(screen.get_at(fish.rect.center))[:3] == BLUE


def test_killer_fish_frame_zero_keeps_previous_sprite(sheet, screen):
    fish = KillerFish(random.Random(3))
    fish.update()
    fish.update()
    fish.draw(screen, sheet)
    fish.update()
    fish.draw(screen, sheet)
    assert fish.frame == 0
    assert fish.src_rect == pygame.Rect(320, 98, 62, 38)


def test_harmless_fish_starts_on_right_edge():
    for seed in range(20):
        fish = HarmlessFish(random.Random(seed))
        assert fish.rect.x == 1000
        assert 0 <= fish.rect.y < 600
        assert fish.src_rect == pygame.Rect(247, 265, 34, 17)


def test_harmless_fish_update_moves_left():
    fish = HarmlessFish(random.Random(2))
    start = fish.rect.x
    for _ in range(3):
        fish.update()
    assert fish.rect.x == start - 3 * HarmlessFish.SPEED
    assert fish.frame == 0


def test_harmless_fish_draw_uses_frame_sprite(sheet, screen):
    sheet.fill(BLUE, pygame.Rect(151, 263, 33, 19))
    fish = HarmlessFish(random.Random(4))
    fish.rect.topleft = (500, 300)
    fish.update()
    fish.update()
    fish.draw(screen, sheet)
    assert fish.src_rect == pygame.Rect(151, 263, 33, 19)
    assert tuple(screen.get_at(fish.rect.center))[:3] == BLUE