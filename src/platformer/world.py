from __future__ import annotations
import logging
from dataclasses import dataclass
from enum import Enum
from typing import List, Optional

from .background import BackgroundBlueprint, generate_background
from .collision import CollisionOutcome, Rect
from .config import WORLD_HEIGHT, RUNTIME_SEED_FACTOR, ENEMY_DEFEAT_POINTS
from .enemies import Enemy, PatrolPath, Projectile, spawn_enemy
from .level import (
    CollectibleKind, EnemyKind, LevelBlueprint, MovingPlatformSpec, generate_level,
)
from .rng import SeededValueSource

logger = logging.getLogger(__name__)


class MovingPlatform:
    """Horizontal shuttle; turns at its span ends exactly like a ground patroller."""

    def __init__(self, x: float, y: float, width: float, height: float,
                 start_x: float, end_x: float, speed: float, direction: int = 1):
        self.x = float(x)
        self.y = float(y)
        self.width = width
        self.height = height
        self.path = PatrolPath(start_x, end_x)
        self.speed = speed
        self.direction = direction

    @classmethod
    def from_spec(cls, spec: MovingPlatformSpec) -> "MovingPlatform":
        return cls(spec.x, spec.y, spec.width, spec.height, spec.start_x, spec.end_x, spec.speed)

    @property
    def rect(self) -> Rect:
        return Rect(self.x, self.y, self.width, self.height)

    def update(self) -> float:
        """Advance one frame; returns the horizontal displacement."""
        dx = self.speed * self.direction
        self.x += dx
        self.direction = self.path.bounce(self.x, self.direction)
        return dx


class EventKind(Enum):
    ENEMY_DEFEATED = "enemy_defeated"
    PLAYER_DAMAGED = "player_damaged"
    COIN_COLLECTED = "coin_collected"
    EXTRA_LIFE_COLLECTED = "extra_life_collected"
    LEVEL_COMPLETE = "level_complete"


@dataclass(frozen=True)
class FrameEvent:
    """Something the host has to apply: score, lives, bounce, effects."""
    kind: EventKind
    x: float
    y: float
    points: int = 0


class World:
    """
    Live level state seeded from a blueprint.
    Owns the enemies, the shared projectile pool, the moving platforms and the
    remaining pickups. step(player) runs one frame and returns the events of
    that frame; it never moves the player and never touches score or lives.
    """
    def __init__(self, blueprint: LevelBlueprint,
                 background: Optional[BackgroundBlueprint] = None,
                 rng: Optional[SeededValueSource] = None):
        self.blueprint = blueprint
        self.background = background
        self.bounds = Rect(0, 0, blueprint.level_width, WORLD_HEIGHT)
        # runtime draws (jump timers, jump impulses) get their own source so replays match
        self.rng = rng or SeededValueSource(blueprint.level_number * RUNTIME_SEED_FACTOR)

        self.static_rects: List[Rect] = [p.rect for p in blueprint.platforms]
        self.moving_platforms = [MovingPlatform.from_spec(s) for s in blueprint.moving_platforms]
        self.enemies: List[Enemy] = [spawn_enemy(spec, self.rng, self.bounds) for spec in blueprint.enemies]
        self.projectiles: List[Projectile] = []
        self.collectibles = list(blueprint.collectibles)
        self.completed = False
        self.frame = 0

    @classmethod
    def from_level(cls, level_number: int) -> "World":
        blueprint = generate_level(level_number)
        return cls(blueprint, background=generate_background(blueprint.level_number))

    def platform_rects(self) -> List[Rect]:
        return self.static_rects + [m.rect for m in self.moving_platforms]

    def step(self, player) -> List[FrameEvent]:
        events: List[FrameEvent] = []

        for mp in self.moving_platforms:
            riding = player.grounded and self._standing_on(player, mp.rect)
            dx = mp.update()
            if riding:
                player.x += dx

        rects = self.platform_rects()
        for enemy in self.enemies:
            if enemy.kind is EnemyKind.PLASMA:
                enemy.update(player, self.projectiles)
            else:
                enemy.update(rects)

        for bolt in self.projectiles:
            bolt.update()

        for enemy in self.enemies:
            outcome = enemy.collide(player)
            if outcome is CollisionOutcome.DEFEAT:
                events.append(FrameEvent(EventKind.ENEMY_DEFEATED, enemy.x, enemy.y, ENEMY_DEFEAT_POINTS))
            elif outcome is CollisionOutcome.DAMAGE:
                events.append(FrameEvent(EventKind.PLAYER_DAMAGED, player.x, player.y))

        for bolt in self.projectiles:
            if bolt.collide(player) is CollisionOutcome.DAMAGE:
                events.append(FrameEvent(EventKind.PLAYER_DAMAGED, player.x, player.y))

        events.extend(self._collect_pickups(player))

        if not self.completed and player.rect.overlaps(self.blueprint.end_flag):
            self.completed = True
            logger.info("Level %d complete at frame %d", self.blueprint.level_number, self.frame)
            events.append(FrameEvent(EventKind.LEVEL_COMPLETE, player.x, player.y))

        # rebuild instead of removing while iterating
        self.enemies = [e for e in self.enemies if e.alive]
        self.projectiles = [b for b in self.projectiles if b.active]
        self.frame += 1
        return events

    def _collect_pickups(self, player) -> List[FrameEvent]:
        events: List[FrameEvent] = []
        remaining = []
        pr = player.rect
        for item in self.collectibles:
            if not pr.overlaps(item.rect):
                remaining.append(item)
                continue
            kind = (EventKind.COIN_COLLECTED if item.kind is CollectibleKind.COIN
                    else EventKind.EXTRA_LIFE_COLLECTED)
            events.append(FrameEvent(kind, item.x, item.y, item.points))
        self.collectibles = remaining
        return events

    @staticmethod
    def _standing_on(player, rect: Rect) -> bool:
        return (abs((player.y + player.height) - rect.top) < 1e-6 and
                player.x + player.width > rect.left and player.x < rect.right)


def host_frame(world: World, player) -> List[FrameEvent]:
    """
    One frame for a player without input: physics, world step, then the
    player-side reactions (bounce after a stomp, back to the start after a hit).
    """
    player.update_physics(world.platform_rects())
    if player.out_of_world():
        player.respawn()
    events = world.step(player)
    for ev in events:
        if ev.kind is EventKind.ENEMY_DEFEATED:
            player.bounce()
        elif ev.kind is EventKind.PLAYER_DAMAGED:
            player.respawn()
    return events
