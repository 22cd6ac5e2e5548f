from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
from typing import Iterable, Optional, Tuple

from .config import STOMP_TOLERANCE


@dataclass(frozen=True)
class Rect:
    """Axis-aligned float rectangle (y grows downward, like screen space)."""
    x: float
    y: float
    width: float
    height: float

    @property
    def left(self) -> float:
        return self.x

    @property
    def right(self) -> float:
        return self.x + self.width

    @property
    def top(self) -> float:
        return self.y

    @property
    def bottom(self) -> float:
        return self.y + self.height

    @property
    def center(self) -> Tuple[float, float]:
        return (self.x + self.width / 2, self.y + self.height / 2)

    def overlaps(self, other: "Rect") -> bool:
        """Strict AABB test: touching edges do not count."""
        return (self.left < other.right and self.right > other.left and
                self.top < other.bottom and self.bottom > other.top)

    def inflate(self, margin: float) -> "Rect":
        return Rect(self.x - margin, self.y - margin,
                    self.width + 2 * margin, self.height + 2 * margin)

    def contains_point(self, px: float, py: float) -> bool:
        return self.left <= px <= self.right and self.top <= py <= self.bottom


class CollisionOutcome(Enum):
    DEFEAT = "defeat"   # stomped from above: enemy dies, player bounces
    DAMAGE = "damage"   # any other overlap: player loses a life


def classify_contact(player_rect: Rect, player_vy: float, enemy_rect: Rect) -> Optional[CollisionOutcome]:
    """
    Shared stomp rule for every enemy kind.
    None when the rectangles do not overlap. DEFEAT when the player is falling
    and its bottom edge *before this step* (bottom - vy) was at or above the
    enemy top plus STOMP_TOLERANCE. DAMAGE otherwise.
    """
    if not player_rect.overlaps(enemy_rect):
        return None
    prev_bottom = player_rect.bottom - player_vy
    if player_vy > 0 and prev_bottom <= enemy_rect.top + STOMP_TOLERANCE:
        return CollisionOutcome.DEFEAT
    return CollisionOutcome.DAMAGE


def resolve_landing(body, prev_bottom: float, platforms: Iterable[Rect]) -> bool:
    """
    Vertical-only landing on platform tops.
    `body` needs x, y, width, height, vy and grounded. Lands when the body
    overlaps a platform horizontally, was above its top before the step and
    is at or below it now. Landing snaps the body onto the top, zeroes vy and
    sets grounded. Returns True on landing.
    """
    if body.vy < 0:
        return False
    left, right = body.x, body.x + body.width
    bottom = body.y + body.height
    for pr in platforms:
        if right <= pr.left or left >= pr.right:
            continue
        if prev_bottom <= pr.top and bottom >= pr.top:
            body.y = pr.top - body.height
            body.vy = 0.0
            body.grounded = True
            return True
    return False
