import os

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")

import pygame

from src.platformer.config import COLOR_PLAT, COLOR_SKY, HEIGHT, WIDTH
from src.platformer.draw import draw_background, draw_frame
from src.platformer.player import Player
from src.platformer.world import World


def test_frame_paints_ground_platform():
    surf = pygame.Surface((WIDTH, HEIGHT))
    draw_frame(surf, World.from_level(1), 0.0, Player())
    assert tuple(surf.get_at((50, 580)))[:3] == COLOR_PLAT


def test_frame_without_background_fills_sky():
    world = World.from_level(2)
    world.background = None
    surf = pygame.Surface((WIDTH, HEIGHT))
    draw_frame(surf, world, 0.0)
    assert tuple(surf.get_at((WIDTH - 1, 0)))[:3] == COLOR_SKY


def test_background_draws_when_scrolled():
    world = World.from_level(5)
    surf = pygame.Surface((WIDTH, HEIGHT))
    draw_background(surf, world.background, 500.0)
    assert surf.get_size() == (WIDTH, HEIGHT)
