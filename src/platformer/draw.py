from __future__ import annotations
import math
from typing import Optional, Tuple

import pygame

from .background import (
    BackgroundBlueprint, Cloud, GeometricShape, Mountain, Star, parallax_offset,
)
from .collision import Rect
from .config import (
    COLOR_SKY, COLOR_PLAT, COLOR_PLAT_EDGE, COLOR_MOVING_PLAT, COLOR_COIN, COLOR_EXTRA_LIFE,
    COLOR_ENEMY, COLOR_PLASMA, COLOR_JUMPER, COLOR_PROJECTILE, COLOR_FLAG,
)
from .level import CollectibleKind, EnemyKind

ENEMY_COLORS = {
    EnemyKind.GROUND: COLOR_ENEMY,
    EnemyKind.PLASMA: COLOR_PLASMA,
    EnemyKind.JUMPING: COLOR_JUMPER,
}

_POLYGON_SIDES = {"triangle": 3, "square": 4, "hexagon": 6}


def _screen_rect(r: Rect, camera_x: float) -> pygame.Rect:
    return pygame.Rect(int(r.x - camera_x), int(r.y), int(r.width), int(r.height))


def _rgba(color: str, alpha: float) -> Tuple[int, int, int, int]:
    c = pygame.Color(color)
    return (c.r, c.g, c.b, max(0, min(255, int(255 * alpha))))


def _regular_polygon(cx: float, cy: float, radius: float, sides: int, rotation: float):
    return [
        (cx + radius * math.cos(rotation + 2 * math.pi * k / sides),
         cy + radius * math.sin(rotation + 2 * math.pi * k / sides))
        for k in range(sides)
    ]


def draw_background(surf: pygame.Surface, background: BackgroundBlueprint, camera_x: float):
    """Sky fill, then layers far to near, each shifted by camera_x * depth."""
    surf.fill(COLOR_SKY)
    width = surf.get_width()
    for layer in background.layers:
        offset = parallax_offset(camera_x, layer)
        overlay = pygame.Surface(surf.get_size(), pygame.SRCALPHA)
        for el in layer.elements:
            sx = el.x - offset
            if isinstance(el, Star):
                if -el.size <= sx <= width + el.size:
                    pygame.draw.circle(overlay, _rgba(layer.color, el.brightness),
                                       (int(sx), int(el.y)), max(1, int(el.size)))
            elif isinstance(el, Cloud):
                if sx + el.width >= 0 and sx <= width:
                    pygame.draw.ellipse(overlay, _rgba(layer.color, el.opacity),
                                        pygame.Rect(int(sx), int(el.y), int(el.width), int(el.height)))
            elif isinstance(el, Mountain):
                if sx + el.width >= 0 and sx <= width:
                    pts = [(sx, el.y), (sx + el.width / 2, el.y - el.height), (sx + el.width, el.y)]
                    pygame.draw.polygon(overlay, _rgba(layer.color, el.opacity), pts)
            elif isinstance(el, GeometricShape):
                if -el.size <= sx <= width + el.size:
                    rgba = _rgba(layer.color, el.opacity)
                    if el.shape == "circle":
                        pygame.draw.circle(overlay, rgba, (int(sx), int(el.y)), max(1, int(el.size / 2)))
                    else:
                        pts = _regular_polygon(sx, el.y, el.size / 2, _POLYGON_SIDES[el.shape], el.rotation)
                        pygame.draw.polygon(overlay, rgba, pts)
        surf.blit(overlay, (0, 0))


def draw_world(surf: pygame.Surface, world, camera_x: float, player=None):
    """Debug view of a live World (platforms, pickups, enemies, bolts, flag, player)."""
    for r in world.static_rects:
        sr = _screen_rect(r, camera_x)
        pygame.draw.rect(surf, COLOR_PLAT, sr)
        pygame.draw.rect(surf, COLOR_PLAT_EDGE, sr, width=2)

    for mp in world.moving_platforms:
        pygame.draw.rect(surf, COLOR_MOVING_PLAT, _screen_rect(mp.rect, camera_x))

    for item in world.collectibles:
        sr = _screen_rect(item.rect, camera_x)
        color = COLOR_COIN if item.kind is CollectibleKind.COIN else COLOR_EXTRA_LIFE
        pygame.draw.circle(surf, color, sr.center, sr.width // 2)

    for enemy in world.enemies:
        pygame.draw.rect(surf, ENEMY_COLORS[enemy.kind], _screen_rect(enemy.rect, camera_x))

    for bolt in world.projectiles:
        sr = _screen_rect(bolt.rect, camera_x)
        pygame.draw.circle(surf, COLOR_PROJECTILE, sr.center, max(1, sr.width // 2))

    flag = _screen_rect(world.blueprint.end_flag, camera_x)
    pygame.draw.rect(surf, (0, 0, 0), pygame.Rect(flag.x, flag.y, 5, flag.height))
    pygame.draw.rect(surf, COLOR_FLAG, pygame.Rect(flag.x + 5, flag.y, flag.width - 5, 30))

    if player is not None:
        pygame.draw.rect(surf, (255, 255, 255), _screen_rect(player.rect, camera_x), width=2)


def draw_frame(surf: pygame.Surface, world, camera_x: float, player=None,
               background: Optional[BackgroundBlueprint] = None):
    background = background or world.background
    if background is not None:
        draw_background(surf, background, camera_x)
    else:
        surf.fill(COLOR_SKY)
    draw_world(surf, world, camera_x, player)
