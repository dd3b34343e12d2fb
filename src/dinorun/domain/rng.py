from __future__ import annotations
from typing import Protocol


class RandomSource(Protocol):
    def random(self) -> float:  # returns in [0.0, 1.0)
        ...


def uniform(rng: RandomSource, low: float, high: float) -> float:
    """Uniform draw in [low, high) from any RandomSource."""
    return low + rng.random() * (high - low)
