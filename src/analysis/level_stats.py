# src/analysis/level_stats.py
from __future__ import annotations
from typing import Iterable, Optional, Tuple

import numpy as np

from src.platformer.config import MAX_LEVEL
from src.platformer.level import CollectibleKind, EnemyKind, LevelBlueprint, generate_level

FEATURE_NAMES: Tuple[str, ...] = (
    "difficulty",
    "platform_count",
    "average_gap",
    "enemy_count",
    "plasma_count",
    "coin_count",
    "extra_life_count",
)


def platform_gaps(blueprint: LevelBlueprint) -> np.ndarray:
    """Horizontal distance between each platform's right edge and the next one's left edge."""
    plats = sorted(blueprint.platforms, key=lambda p: p.x)
    if len(plats) < 2:
        return np.zeros(0, dtype=np.float64)
    lefts = np.array([p.x for p in plats], dtype=np.float64)
    rights = np.array([p.x + p.width for p in plats], dtype=np.float64)
    return lefts[1:] - rights[:-1]


def average_gap(blueprint: LevelBlueprint) -> float:
    gaps = platform_gaps(blueprint)
    return float(gaps.mean()) if gaps.size else 0.0


def level_features(blueprint: LevelBlueprint) -> np.ndarray:
    """
    Fixed (7,) float64 vector, in FEATURE_NAMES order:
      [ difficulty, platform_count, average_gap,
        enemy_count, plasma_count, coin_count, extra_life_count ]
    """
    plasma = sum(1 for e in blueprint.enemies if e.kind is EnemyKind.PLASMA)
    coins = sum(1 for c in blueprint.collectibles if c.kind is CollectibleKind.COIN)
    lives = sum(1 for c in blueprint.collectibles if c.kind is CollectibleKind.EXTRA_LIFE)
    feats = [
        blueprint.difficulty,
        len(blueprint.platforms),
        average_gap(blueprint),
        len(blueprint.enemies),
        plasma,
        coins,
        lives,
    ]
    return np.asarray(feats, dtype=np.float64)


def difficulty_profile(levels: Optional[Iterable[int]] = None) -> np.ndarray:
    """Stack level_features for each level -> shape (n_levels, len(FEATURE_NAMES))."""
    if levels is None:
        levels = range(1, MAX_LEVEL + 1)
    rows = [level_features(generate_level(n)) for n in levels]
    return np.vstack(rows) if rows else np.zeros((0, len(FEATURE_NAMES)), dtype=np.float64)


def column(profile: np.ndarray, name: str) -> np.ndarray:
    return profile[:, FEATURE_NAMES.index(name)]
