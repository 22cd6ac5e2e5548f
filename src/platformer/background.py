from __future__ import annotations
import logging
import math
from dataclasses import dataclass
from enum import Enum
from typing import List, Tuple, Union

from .config import (
    HEIGHT, BACKGROUND_SEED_FACTOR, BACKGROUND_WIDTH,
    STAR_COUNT_MIN, STAR_COUNT_MAX, CLOUD_COUNT_MIN, CLOUD_COUNT_MAX,
    MOUNTAIN_COUNT_MIN, MOUNTAIN_COUNT_MAX, GEOMETRIC_COUNT_MIN, GEOMETRIC_COUNT_MAX,
    GEOMETRIC_SHAPES, LAYER_PALETTES,
)
from .level import resolve_level_number
from .rng import SeededValueSource

logger = logging.getLogger(__name__)


class ElementType(Enum):
    STARS = "stars"
    CLOUDS = "clouds"
    MOUNTAINS = "mountains"
    GEOMETRIC = "geometric"


@dataclass(frozen=True)
class Star:
    x: float
    y: float
    size: float
    brightness: float


@dataclass(frozen=True)
class Cloud:
    x: float
    y: float
    width: float
    height: float
    opacity: float


@dataclass(frozen=True)
class Mountain:
    x: float
    y: float        # base line; the peak sits at y - height
    width: float
    height: float
    opacity: float


@dataclass(frozen=True)
class GeometricShape:
    x: float
    y: float
    shape: str
    size: float
    opacity: float
    rotation: float  # radians


Element = Union[Star, Cloud, Mountain, GeometricShape]


@dataclass(frozen=True)
class ParallaxLayer:
    depth: float            # 0 = pinned to the screen, 1 = moves with the world
    color: str
    element_type: ElementType
    elements: Tuple[Element, ...]


@dataclass(frozen=True)
class BackgroundBlueprint:
    level_number: int
    layers: Tuple[ParallaxLayer, ...]


def parallax_offset(camera_x: float, layer: ParallaxLayer) -> float:
    """Horizontal scroll of a layer for a given camera position."""
    return camera_x * layer.depth


def layer_depth(index: int) -> float:
    return 0.1 + (index / 4) * 0.4


_ALL_TYPES = (ElementType.STARS, ElementType.CLOUDS, ElementType.MOUNTAINS, ElementType.GEOMETRIC)


class BackgroundGen:
    """
    Parallax backdrop for one level, drawn from its own source seeded with
    level_number * BACKGROUND_SEED_FACTOR (independent of the level layout).
    """
    def __init__(self, level_number: int):
        self.level_number = resolve_level_number(level_number)
        self.rng = SeededValueSource(self.level_number * BACKGROUND_SEED_FACTOR)

    def build(self) -> BackgroundBlueprint:
        layer_count = 3 + int(self.rng.next() * 2)
        layers = tuple(self._generate_layer(i) for i in range(layer_count))
        logger.debug("Background %d: %d layers (%s)", self.level_number, layer_count,
                     ", ".join(l.element_type.value for l in layers))
        return BackgroundBlueprint(level_number=self.level_number, layers=layers)

    def _pick_type(self, index: int) -> ElementType:
        # far layers lean to sky details, the next one to landscape
        if index == 0:
            return ElementType.STARS if self.rng.next() < 0.5 else ElementType.GEOMETRIC
        if index == 1:
            return ElementType.CLOUDS if self.rng.next() < 0.5 else ElementType.MOUNTAINS
        return self.rng.pick(_ALL_TYPES)

    def _generate_layer(self, index: int) -> ParallaxLayer:
        element_type = self._pick_type(index)
        color = self.rng.pick(LAYER_PALETTES[element_type.value])
        builders = {
            ElementType.STARS: self._stars,
            ElementType.CLOUDS: self._clouds,
            ElementType.MOUNTAINS: self._mountains,
            ElementType.GEOMETRIC: self._geometric,
        }
        elements = builders[element_type]()
        return ParallaxLayer(
            depth=layer_depth(index),
            color=color,
            element_type=element_type,
            elements=tuple(elements),
        )

    def _stars(self) -> List[Star]:
        count = self.rng.randint(STAR_COUNT_MIN, STAR_COUNT_MAX)
        return [
            Star(
                x=self.rng.uniform(0, BACKGROUND_WIDTH),
                y=self.rng.uniform(0, HEIGHT * 0.6),
                size=self.rng.uniform(1, 3),
                brightness=self.rng.uniform(0.5, 1.0),
            )
            for _ in range(count)
        ]

    def _clouds(self) -> List[Cloud]:
        count = self.rng.randint(CLOUD_COUNT_MIN, CLOUD_COUNT_MAX)
        return [
            Cloud(
                x=self.rng.uniform(0, BACKGROUND_WIDTH),
                y=self.rng.uniform(20, 250),
                width=self.rng.uniform(80, 200),
                height=self.rng.uniform(30, 60),
                opacity=self.rng.uniform(0.3, 0.7),
            )
            for _ in range(count)
        ]

    def _mountains(self) -> List[Mountain]:
        count = self.rng.randint(MOUNTAIN_COUNT_MIN, MOUNTAIN_COUNT_MAX)
        return [
            Mountain(
                x=self.rng.uniform(0, BACKGROUND_WIDTH),
                y=float(HEIGHT),
                width=self.rng.uniform(200, 500),
                height=self.rng.uniform(100, 300),
                opacity=self.rng.uniform(0.4, 0.8),
            )
            for _ in range(count)
        ]

    def _geometric(self) -> List[GeometricShape]:
        count = self.rng.randint(GEOMETRIC_COUNT_MIN, GEOMETRIC_COUNT_MAX)
        return [
            GeometricShape(
                x=self.rng.uniform(0, BACKGROUND_WIDTH),
                y=self.rng.uniform(0, HEIGHT),
                shape=self.rng.pick(GEOMETRIC_SHAPES),
                size=self.rng.uniform(10, 50),
                opacity=self.rng.uniform(0.1, 0.4),
                rotation=self.rng.uniform(0, 2 * math.pi),
            )
            for _ in range(count)
        ]


def generate_background(level_number: int) -> BackgroundBlueprint:
    """Deterministic parallax backdrop for `level_number` (invalid numbers -> level 1)."""
    return BackgroundGen(level_number).build()
