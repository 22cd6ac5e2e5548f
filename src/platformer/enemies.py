from __future__ import annotations
import logging
import math
from typing import List, Optional, Sequence

from .collision import CollisionOutcome, Rect, classify_contact, resolve_landing
from .config import (
    WIDTH, WORLD_HEIGHT, KILL_PLANE_Y, GRAVITY,
    ENEMY_W, ENEMY_H, MIN_PATROL_SPAN,
    PROJECTILE_SPEED, PROJECTILE_SIZE, PROJECTILE_MARGIN,
    JUMP_HORIZONTAL_RANGE, JUMP_FRICTION,
)
from .level import EnemyKind, EnemySpec
from .rng import SeededValueSource

logger = logging.getLogger(__name__)


class PatrolPath:
    """
    Closed horizontal span [start, end] with start < end.
    Reversed spans are swapped and empty ones widened by MIN_PATROL_SPAN,
    so an entity never runs a malformed span.
    """
    def __init__(self, start: float, end: float):
        if start > end:
            logger.warning("Patrol span [%s, %s] is reversed, swapping", start, end)
            start, end = end, start
        if start == end:
            logger.warning("Patrol span at %s is empty, widening by %s", start, MIN_PATROL_SPAN)
            end = start + MIN_PATROL_SPAN
        self.start = float(start)
        self.end = float(end)

    def bounce(self, x: float, direction: int) -> int:
        """Direction after moving to `x`: reaching or passing a boundary turns back inward."""
        if x >= self.end:
            return -1
        if x <= self.start:
            return 1
        return direction

    def __repr__(self) -> str:
        return f"PatrolPath({self.start}, {self.end})"


class Enemy:
    """Common body for every enemy kind: AABB, velocity, liveness, gravity."""
    kind: EnemyKind

    def __init__(self, x: float, y: float, width: float = ENEMY_W, height: float = ENEMY_H):
        self.x = float(x)
        self.y = float(y)
        self.width = width
        self.height = height
        self.vx = 0.0
        self.vy = 0.0
        self.grounded = False
        self.alive = True
        self.fell = False   # removed by the kill plane rather than defeated

    @property
    def rect(self) -> Rect:
        return Rect(self.x, self.y, self.width, self.height)

    def _apply_gravity(self, platforms: Sequence[Rect]):
        prev_bottom = self.y + self.height
        self.vy += GRAVITY
        self.y += self.vy
        self.grounded = False
        resolve_landing(self, prev_bottom, platforms)
        if self.y > KILL_PLANE_Y:
            self.alive = False
            self.fell = True
            logger.debug("%s fell out of the world at x=%.1f", self.kind.value, self.x)

    def collide(self, player) -> Optional[CollisionOutcome]:
        """Stomp rule against the player; a DEFEAT kills this enemy."""
        if not self.alive:
            return None
        outcome = classify_contact(player.rect, player.vy, self.rect)
        if outcome is CollisionOutcome.DEFEAT:
            self.alive = False
        return outcome


class GroundPatroller(Enemy):
    kind = EnemyKind.GROUND

    def __init__(self, x: float, y: float, patrol_start: float, patrol_end: float,
                 speed: float, width: float = ENEMY_W, height: float = ENEMY_H,
                 direction: int = 1):
        super().__init__(x, y, width, height)
        self.path = PatrolPath(patrol_start, patrol_end)
        self.speed = speed
        self.direction = 1 if direction >= 0 else -1

    @property
    def patrol_start(self) -> float:
        return self.path.start

    @property
    def patrol_end(self) -> float:
        return self.path.end

    def update(self, platforms: Sequence[Rect]):
        if not self.alive:
            return
        self.x += self.speed * self.direction
        self.direction = self.path.bounce(self.x, self.direction)
        self._apply_gravity(platforms)


class Projectile:
    """Straight-line plasma bolt; dies once outside `bounds` grown by PROJECTILE_MARGIN."""

    def __init__(self, x: float, y: float, velocity_x: float, velocity_y: float,
                 bounds: Rect, width: float = PROJECTILE_SIZE, height: float = PROJECTILE_SIZE):
        self.x = float(x)
        self.y = float(y)
        self.width = width
        self.height = height
        self.velocity_x = velocity_x
        self.velocity_y = velocity_y
        self.bounds = bounds
        self.active = True

    @property
    def rect(self) -> Rect:
        return Rect(self.x, self.y, self.width, self.height)

    def update(self):
        if not self.active:
            return
        self.x += self.velocity_x
        self.y += self.velocity_y
        limits = self.bounds.inflate(PROJECTILE_MARGIN)
        if (self.x < limits.left or self.x > limits.right or
                self.y < limits.top or self.y > limits.bottom):
            self.active = False

    def collide(self, player) -> Optional[CollisionOutcome]:
        """Any hit on the player is damage and spends the projectile."""
        if not self.active or not player.rect.overlaps(self.rect):
            return None
        self.active = False
        return CollisionOutcome.DAMAGE


class PlasmaShooter(Enemy):
    kind = EnemyKind.PLASMA

    def __init__(self, x: float, y: float, fire_range: float, fire_rate: int,
                 world_bounds: Optional[Rect] = None,
                 width: float = ENEMY_W, height: float = ENEMY_H):
        super().__init__(x, y, width, height)
        self.fire_range = fire_range
        if int(fire_rate) < 1:
            logger.warning("Fire rate %s is below one frame, clamping to 1", fire_rate)
        self.fire_rate = max(1, int(fire_rate))
        self.fire_timer = 0
        self.world_bounds = world_bounds or Rect(0, 0, WIDTH, WORLD_HEIGHT)

    def in_range(self, player) -> bool:
        px, _ = player.rect.center
        sx, _ = self.rect.center
        return abs(px - sx) <= self.fire_range

    def update(self, player, projectiles: List[Projectile]) -> Optional[Projectile]:
        """Stationary turret: counts frames while the player is in range, then fires at it."""
        if not self.alive or not self.in_range(player):
            return None
        self.fire_timer += 1
        if self.fire_timer < self.fire_rate:
            return None
        self.fire_timer = 0

        px, py = player.rect.center
        sx, sy = self.rect.center
        dx, dy = px - sx, py - sy
        dist = math.hypot(dx, dy)
        if dist == 0.0:
            # no direction to aim along; skip this shot
            return None
        bolt = Projectile(
            x=sx - PROJECTILE_SIZE / 2,
            y=sy - PROJECTILE_SIZE / 2,
            velocity_x=dx / dist * PROJECTILE_SPEED,
            velocity_y=dy / dist * PROJECTILE_SPEED,
            bounds=self.world_bounds,
        )
        projectiles.append(bolt)
        return bolt


class JumpingEnemy(Enemy):
    kind = EnemyKind.JUMPING

    def __init__(self, x: float, y: float, jump_interval_min: int, jump_interval_max: int,
                 jump_power: float, rng: SeededValueSource,
                 width: float = ENEMY_W, height: float = ENEMY_H):
        super().__init__(x, y, width, height)
        if jump_interval_min > jump_interval_max:
            logger.warning("Jump interval [%s, %s] is reversed, swapping",
                           jump_interval_min, jump_interval_max)
            jump_interval_min, jump_interval_max = jump_interval_max, jump_interval_min
        self.jump_interval_min = int(jump_interval_min)
        self.jump_interval_max = int(jump_interval_max)
        self.jump_power = jump_power
        self.rng = rng
        self.jump_timer = self._draw_timer()

    def _draw_timer(self) -> int:
        return self.rng.randint(self.jump_interval_min, self.jump_interval_max)

    def update(self, platforms: Sequence[Rect]):
        if not self.alive:
            return
        self.jump_timer -= 1
        if self.jump_timer <= 0 and self.grounded:
            self.vy = -self.jump_power
            self.vx = self.rng.uniform(-JUMP_HORIZONTAL_RANGE, JUMP_HORIZONTAL_RANGE)
            self.grounded = False
            self.jump_timer = self._draw_timer()

        self.x += self.vx
        self.vx *= JUMP_FRICTION
        # landing leaves jump_timer alone; it keeps counting down
        self._apply_gravity(platforms)


def spawn_enemy(spec: EnemySpec, rng: SeededValueSource, world_bounds: Optional[Rect] = None) -> Enemy:
    """Live entity for a blueprint descriptor."""
    if spec.kind is EnemyKind.GROUND:
        return GroundPatroller(spec.x, spec.y, spec.patrol_start, spec.patrol_end, spec.speed,
                               width=spec.width, height=spec.height)
    if spec.kind is EnemyKind.PLASMA:
        return PlasmaShooter(spec.x, spec.y, spec.fire_range, spec.fire_rate,
                             world_bounds=world_bounds, width=spec.width, height=spec.height)
    if spec.kind is EnemyKind.JUMPING:
        return JumpingEnemy(spec.x, spec.y, spec.jump_interval_min, spec.jump_interval_max,
                            spec.jump_power, rng, width=spec.width, height=spec.height)
    raise ValueError(f"Unknown enemy kind: {spec.kind!r}")
