from __future__ import annotations
from dataclasses import dataclass, field
from typing import Sequence, TypeVar

T = TypeVar("T")

LCG_MULTIPLIER = 9301
LCG_INCREMENT = 49297
LCG_MODULUS = 233280


@dataclass
class SeededValueSource:
    """
    Linear-congruential float source:
        state = (state * 9301 + 49297) % 233280
        value = state / 233280          -> [0, 1)
    Two sources built from the same seed yield the same infinite sequence.
    A new seed means a new instance; there is no reseed().
    """
    seed: int
    state: int = field(init=False)

    def __post_init__(self):
        assert isinstance(self.seed, int), "seed must be an integer"
        self.state = self.seed

    def next(self) -> float:
        self.state = (self.state * LCG_MULTIPLIER + LCG_INCREMENT) % LCG_MODULUS
        return self.state / LCG_MODULUS

    # --- helpers (each consumes exactly one draw) ---

    def uniform(self, lo: float, hi: float) -> float:
        return lo + self.next() * (hi - lo)

    def randint(self, lo: int, hi: int) -> int:
        """Integer in [lo, hi], both ends inclusive."""
        return lo + int(self.next() * (hi - lo + 1))

    def chance(self, p: float) -> bool:
        return self.next() < p

    def pick(self, items: Sequence[T]) -> T:
        return items[int(self.next() * len(items))]
