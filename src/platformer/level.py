from __future__ import annotations
import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import List, Tuple, Union

from .collision import Rect
from .config import (
    MAX_LEVEL, LEVEL_SEED_FACTOR, BACKGROUND_SEED_FACTOR,
    BASE_PLATFORM_COUNT, PLATFORM_MIN_W, PLATFORM_MAX_W,
    GROUND_Y, GROUND_HEIGHT, RAISED_HEIGHT, RAISED_Y_MIN, RAISED_Y_MAX, RAISED_CHANCE,
    GAP_BASE, GAP_PER_DIFFICULTY, GAP_JITTER, FINAL_PLATFORM_W,
    END_FLAG_W, END_FLAG_H, END_FLAG_INSET,
    MOVING_PLATFORM_W, MOVING_PLATFORM_H, MOVING_PLATFORM_Y, MOVING_PLATFORM_MIN_GAP,
    MOVING_PLATFORM_CHANCE, MOVING_PLATFORM_SPEED,
    ENEMY_W, ENEMY_H, ENEMY_MIN_PLATFORM_W, ENEMY_EDGE_MARGIN,
    PLASMA_MIN_DIFFICULTY, PLASMA_BASE_CHANCE, PLASMA_CHANCE_PER_DIFFICULTY, JUMPING_SHARE,
    GROUND_SPEED_MIN, GROUND_SPEED_JITTER,
    PLASMA_RANGE_BASE, PLASMA_RANGE_PER_DIFFICULTY, PLASMA_RANGE_JITTER,
    PLASMA_FIRE_RATE_BASE, PLASMA_FIRE_RATE_PER_DIFFICULTY, PLASMA_FIRE_RATE_JITTER,
    PLASMA_FIRE_RATE_MIN,
    JUMP_INTERVAL_MIN_BASE, JUMP_INTERVAL_MIN_PER_DIFFICULTY,
    JUMP_INTERVAL_MAX_BASE, JUMP_INTERVAL_MAX_PER_DIFFICULTY,
    JUMP_POWER_BASE, JUMP_POWER_PER_DIFFICULTY,
    COIN_SIZE, COIN_LIFT, COIN_MIN_PER_PLATFORM, COIN_MAX_PER_PLATFORM,
    COIN_SKIP_BASE, COIN_SKIP_PER_DIFFICULTY,
    EXTRA_LIFE_SIZE, EXTRA_LIFE_LIFT, EXTRA_LIFE_FEW_DIFFICULTY,
    COIN_POINTS, EXTRA_LIFE_POINTS,
)
from .rng import SeededValueSource

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Platform:
    x: float
    y: float
    width: float
    height: float

    @property
    def rect(self) -> Rect:
        return Rect(self.x, self.y, self.width, self.height)

    @property
    def right(self) -> float:
        return self.x + self.width

    @property
    def is_ground(self) -> bool:
        return self.y >= GROUND_Y


@dataclass(frozen=True)
class MovingPlatformSpec:
    """A shuttle that oscillates horizontally over [start_x, end_x]."""
    x: float
    y: float
    width: float
    height: float
    start_x: float
    end_x: float
    speed: float


class EnemyKind(Enum):
    GROUND = "ground"
    PLASMA = "plasma"
    JUMPING = "jumping"


@dataclass(frozen=True)
class GroundEnemySpec:
    x: float
    y: float
    patrol_start: float
    patrol_end: float
    speed: float
    width: float = ENEMY_W
    height: float = ENEMY_H
    kind: EnemyKind = field(default=EnemyKind.GROUND, init=False)


@dataclass(frozen=True)
class PlasmaEnemySpec:
    x: float
    y: float
    fire_range: float
    fire_rate: int          # frames between shots while the player is in range
    width: float = ENEMY_W
    height: float = ENEMY_H
    kind: EnemyKind = field(default=EnemyKind.PLASMA, init=False)


@dataclass(frozen=True)
class JumpingEnemySpec:
    x: float
    y: float
    jump_interval_min: int
    jump_interval_max: int
    jump_power: float
    width: float = ENEMY_W
    height: float = ENEMY_H
    kind: EnemyKind = field(default=EnemyKind.JUMPING, init=False)


EnemySpec = Union[GroundEnemySpec, PlasmaEnemySpec, JumpingEnemySpec]


class CollectibleKind(Enum):
    COIN = "coin"
    EXTRA_LIFE = "extra_life"


@dataclass(frozen=True)
class Collectible:
    kind: CollectibleKind
    x: float
    y: float
    width: float
    height: float
    points: int

    @property
    def rect(self) -> Rect:
        return Rect(self.x, self.y, self.width, self.height)


@dataclass(frozen=True)
class LevelBlueprint:
    level_number: int
    difficulty: float
    platforms: Tuple[Platform, ...]
    moving_platforms: Tuple[MovingPlatformSpec, ...]
    enemies: Tuple[EnemySpec, ...]
    collectibles: Tuple[Collectible, ...]
    end_flag: Rect
    background_seed: int

    @property
    def final_platform(self) -> Platform:
        return self.platforms[-1]

    @property
    def level_width(self) -> float:
        return self.final_platform.right


def resolve_level_number(level_number) -> int:
    """Level numbers outside [1, MAX_LEVEL] fall back to 1 with a warning."""
    valid = (isinstance(level_number, int) and not isinstance(level_number, bool)
             and 1 <= level_number <= MAX_LEVEL)
    if not valid:
        logger.warning("Level %r is outside 1..%d, falling back to level 1", level_number, MAX_LEVEL)
        return 1
    return level_number


def difficulty_for_level(level_number: int) -> float:
    """Affine ramp: 1.0 at level 1, 2.0 at MAX_LEVEL."""
    return 1.0 + (level_number - 1) / (MAX_LEVEL - 1) * 1.0


class LevelGen:
    """
    Builds one level's blueprint from a fresh source seeded with
    level_number * LEVEL_SEED_FACTOR.
    Draw order is part of the contract (platforms, enemies, collectibles,
    moving platforms): reordering changes every level.
    """
    def __init__(self, level_number: int):
        self.level_number = resolve_level_number(level_number)
        self.difficulty = difficulty_for_level(self.level_number)
        self.rng = SeededValueSource(self.level_number * LEVEL_SEED_FACTOR)

    def build(self) -> LevelBlueprint:
        platforms = self._generate_platforms()
        enemies = self._generate_enemies(platforms)
        collectibles = self._generate_collectibles(platforms)
        moving = self._generate_moving_platforms(platforms)
        final = platforms[-1]
        end_flag = Rect(final.right - END_FLAG_INSET, final.y - END_FLAG_H, END_FLAG_W, END_FLAG_H)
        logger.debug(
            "Level %d: difficulty=%.3f platforms=%d enemies=%d collectibles=%d moving=%d",
            self.level_number, self.difficulty, len(platforms), len(enemies),
            len(collectibles), len(moving),
        )
        return LevelBlueprint(
            level_number=self.level_number,
            difficulty=self.difficulty,
            platforms=tuple(platforms),
            moving_platforms=tuple(moving),
            enemies=tuple(enemies),
            collectibles=tuple(collectibles),
            end_flag=end_flag,
            background_seed=self.level_number * BACKGROUND_SEED_FACTOR,
        )

    # --- platforms ---

    def platform_count(self) -> int:
        return BASE_PLATFORM_COUNT - int(self.difficulty * 2)

    def _generate_platforms(self) -> List[Platform]:
        platforms: List[Platform] = []
        x = 0.0
        for index in range(self.platform_count()):
            width = PLATFORM_MIN_W + int(self.rng.next() * (PLATFORM_MAX_W - PLATFORM_MIN_W))
            # the coin is always drawn so the sequence does not depend on the index
            coin = self.rng.next()
            if index > 0 and coin < RAISED_CHANCE:
                y = RAISED_Y_MIN + int(self.rng.next() * (RAISED_Y_MAX - RAISED_Y_MIN))
                height = RAISED_HEIGHT
            else:
                y = GROUND_Y
                height = GROUND_HEIGHT
            platforms.append(Platform(x=x, y=y, width=width, height=height))

            gap = GAP_BASE + GAP_PER_DIFFICULTY * (self.difficulty - 1) + self.rng.next() * GAP_JITTER
            x += width + gap

        # landing pad for the exit flag
        platforms.append(Platform(x=x, y=GROUND_Y, width=FINAL_PLATFORM_W, height=GROUND_HEIGHT))
        return platforms

    # --- enemies ---

    def enemy_count(self) -> int:
        return int(2 + (self.difficulty - 1) * 3)

    def _plasma_chance(self) -> float:
        if self.difficulty < PLASMA_MIN_DIFFICULTY:
            return 0.0
        return PLASMA_BASE_CHANCE + PLASMA_CHANCE_PER_DIFFICULTY * (self.difficulty - 1)

    def _generate_enemies(self, platforms: List[Platform]) -> List[EnemySpec]:
        candidates = [p for p in platforms[:-1] if p.width > ENEMY_MIN_PLATFORM_W]
        if not candidates:
            logger.info("Level %d: no platform wide enough for enemies", self.level_number)
            return []

        plasma_chance = self._plasma_chance()
        jumping_cut = plasma_chance + (1.0 - plasma_chance) * JUMPING_SHARE
        enemies: List[EnemySpec] = []
        for _ in range(self.enemy_count()):
            plat = self.rng.pick(candidates)
            roll = self.rng.next()
            if roll < plasma_chance:
                enemies.append(self._plasma_spec(plat))
            elif roll < jumping_cut:
                enemies.append(self._jumping_spec(plat))
            else:
                enemies.append(self._ground_spec(plat))
        return enemies

    def _ground_spec(self, plat: Platform) -> GroundEnemySpec:
        start = plat.x + ENEMY_EDGE_MARGIN
        end = plat.right - ENEMY_W - ENEMY_EDGE_MARGIN
        x = start + self.rng.next() * (end - start)
        speed = (GROUND_SPEED_MIN + self.rng.next() * GROUND_SPEED_JITTER) * self.difficulty
        return GroundEnemySpec(x=x, y=plat.y - ENEMY_H, patrol_start=start, patrol_end=end, speed=speed)

    def _plasma_spec(self, plat: Platform) -> PlasmaEnemySpec:
        d = self.difficulty - 1
        fire_range = PLASMA_RANGE_BASE + PLASMA_RANGE_PER_DIFFICULTY * d + self.rng.next() * PLASMA_RANGE_JITTER
        fire_rate = max(
            PLASMA_FIRE_RATE_MIN,
            int(PLASMA_FIRE_RATE_BASE - PLASMA_FIRE_RATE_PER_DIFFICULTY * d
                - self.rng.next() * PLASMA_FIRE_RATE_JITTER),
        )
        return PlasmaEnemySpec(
            x=plat.x + plat.width / 2 - ENEMY_W / 2,
            y=plat.y - ENEMY_H,
            fire_range=fire_range,
            fire_rate=fire_rate,
        )

    def _jumping_spec(self, plat: Platform) -> JumpingEnemySpec:
        d = self.difficulty - 1
        x = plat.x + self.rng.next() * (plat.width - ENEMY_W)
        return JumpingEnemySpec(
            x=x,
            y=plat.y - ENEMY_H,
            jump_interval_min=int(JUMP_INTERVAL_MIN_BASE - JUMP_INTERVAL_MIN_PER_DIFFICULTY * d),
            jump_interval_max=int(JUMP_INTERVAL_MAX_BASE - JUMP_INTERVAL_MAX_PER_DIFFICULTY * d),
            jump_power=JUMP_POWER_BASE + JUMP_POWER_PER_DIFFICULTY * d,
        )

    # --- collectibles ---

    def _generate_collectibles(self, platforms: List[Platform]) -> List[Collectible]:
        items: List[Collectible] = []
        skip_chance = COIN_SKIP_BASE + COIN_SKIP_PER_DIFFICULTY * (self.difficulty - 1)
        for plat in platforms:
            if self.rng.chance(skip_chance):
                continue
            count = self.rng.randint(COIN_MIN_PER_PLATFORM, COIN_MAX_PER_PLATFORM)
            spacing = plat.width / (count + 1)
            for i in range(count):
                items.append(Collectible(
                    kind=CollectibleKind.COIN,
                    x=plat.x + spacing * (i + 1) - COIN_SIZE / 2,
                    y=plat.y - COIN_LIFT,
                    width=COIN_SIZE,
                    height=COIN_SIZE,
                    points=COIN_POINTS,
                ))

        lives = 2 if self.difficulty < EXTRA_LIFE_FEW_DIFFICULTY else 1
        raised = [p for p in platforms if not p.is_ground]
        for _ in range(lives):
            if not raised:
                break
            plat = raised.pop(int(self.rng.next() * len(raised)))
            items.append(Collectible(
                kind=CollectibleKind.EXTRA_LIFE,
                x=plat.x + plat.width / 2 - EXTRA_LIFE_SIZE / 2,
                y=plat.y - EXTRA_LIFE_LIFT,
                width=EXTRA_LIFE_SIZE,
                height=EXTRA_LIFE_SIZE,
                points=EXTRA_LIFE_POINTS,
            ))
        return items

    # --- moving platforms ---

    def _generate_moving_platforms(self, platforms: List[Platform]) -> List[MovingPlatformSpec]:
        chance = MOVING_PLATFORM_CHANCE + 0.2 * (self.difficulty - 1)
        moving: List[MovingPlatformSpec] = []
        for left, right in zip(platforms, platforms[1:]):
            if right.x - left.right < MOVING_PLATFORM_MIN_GAP:
                continue
            if not self.rng.chance(chance):
                continue
            start = left.right
            end = right.x - MOVING_PLATFORM_W
            moving.append(MovingPlatformSpec(
                x=start, y=MOVING_PLATFORM_Y,
                width=MOVING_PLATFORM_W, height=MOVING_PLATFORM_H,
                start_x=start, end_x=end, speed=MOVING_PLATFORM_SPEED,
            ))
        return moving


def generate_level(level_number: int) -> LevelBlueprint:
    """Deterministic blueprint for `level_number` (invalid numbers -> level 1)."""
    return LevelGen(level_number).build()
