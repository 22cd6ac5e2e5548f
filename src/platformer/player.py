from __future__ import annotations
from dataclasses import dataclass
from typing import Sequence

from .collision import Rect, resolve_landing
from .config import (
    PLAYER_W, PLAYER_H, PLAYER_GRAVITY, PLAYER_START_X, PLAYER_START_Y,
    STOMP_BOUNCE_VY, WORLD_HEIGHT,
)


@dataclass
class Player:
    """
    Player body as seen by the enemy core:
    - position/size for overlap tests,
    - vy for the stomp rule (positive = falling),
    - gravity + platform-top landing so a host can drive it headless.
    Steering (vx) comes from the host; input is not handled here.
    """
    x: float = float(PLAYER_START_X)
    y: float = float(PLAYER_START_Y)
    vx: float = 0.0
    vy: float = 0.0
    width: float = PLAYER_W
    height: float = PLAYER_H
    grounded: bool = False

    @property
    def rect(self) -> Rect:
        return Rect(self.x, self.y, self.width, self.height)

    def update_physics(self, platforms: Sequence[Rect]) -> bool:
        """Integrate one frame and land on platform tops. Returns grounded."""
        prev_bottom = self.y + self.height
        self.vy += PLAYER_GRAVITY
        self.x += self.vx
        self.y += self.vy
        self.grounded = False
        resolve_landing(self, prev_bottom, platforms)
        return self.grounded

    def bounce(self):
        """Upward kick after stomping an enemy."""
        self.vy = STOMP_BOUNCE_VY
        self.grounded = False

    def out_of_world(self) -> bool:
        return self.y > WORLD_HEIGHT

    def respawn(self):
        self.x, self.y = float(PLAYER_START_X), float(PLAYER_START_Y)
        self.vx = self.vy = 0.0
        self.grounded = False
