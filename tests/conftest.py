from __future__ import annotations

import pytest

from dinorun.domain.tuning import Tuning


class FixedRandom:
    """RandomSource that always returns the same draw."""

    def __init__(self, value: float = 0.5) -> None:
        self.value = value
        self.calls = 0

    def random(self) -> float:
        self.calls += 1
        return self.value


@pytest.fixture
def tuning() -> Tuning:
    return Tuning()


@pytest.fixture
def fixed_rng() -> FixedRandom:
    return FixedRandom(0.5)


@pytest.fixture
def rng_factory():
    return FixedRandom
