from __future__ import annotations

from dataclasses import dataclass

from dinorun.domain.obstacles import Obstacle, make_obstacle
from dinorun.domain.rng import RandomSource
from dinorun.domain.tuning import Tuning


@dataclass(frozen=True)
class SpawnState:
    timer_ms: float      # time since the last spawn
    interval_ms: float   # wait before the next spawn


def initial_spawn_state(tuning: Tuning) -> SpawnState:
    return SpawnState(timer_ms=0.0, interval_ms=tuning.base_spawn_interval_ms)


def next_spawn_interval(score: float, rng: RandomSource, tuning: Tuning) -> float:
    """
    Random base in [min, min + range), shortened by score up to the cap,
    never below the floor.
    """
    base = tuning.spawn_base_min_ms + rng.random() * tuning.spawn_base_range_ms
    difficulty = min(tuning.spawn_difficulty_cap_ms, score * tuning.spawn_difficulty_factor)
    return max(tuning.spawn_floor_ms, base - difficulty)


def tick_spawner(
    state: SpawnState,
    dt: float,
    score: float,
    rng: RandomSource,
    tuning: Tuning,
) -> tuple[SpawnState, Obstacle | None]:
    timer = state.timer_ms + dt * 1000.0
    if timer < state.interval_ms:
        return SpawnState(timer_ms=timer, interval_ms=state.interval_ms), None

    interval = next_spawn_interval(score, rng, tuning)
    obstacle = make_obstacle(rng, tuning)
    return SpawnState(timer_ms=0.0, interval_ms=interval), obstacle
