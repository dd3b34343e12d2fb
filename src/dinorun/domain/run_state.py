from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from dinorun.domain.character import Character, character_at_rest
from dinorun.domain.obstacles import Obstacle
from dinorun.domain.progress import Progress, initial_progress
from dinorun.domain.spawner import SpawnState, initial_spawn_state
from dinorun.domain.tuning import Tuning


class RunPhase(Enum):
    IDLE = "idle"
    RUNNING = "running"
    ENDED = "ended"


@dataclass(frozen=True)
class RunState:
    phase: RunPhase
    character: Character
    obstacles: tuple[Obstacle, ...]
    spawner: SpawnState
    progress: Progress


def fresh_run_state(tuning: Tuning, phase: RunPhase = RunPhase.RUNNING) -> RunState:
    """State at the start of a run: empty field, zero score, character at rest."""
    return RunState(
        phase=phase,
        character=character_at_rest(tuning),
        obstacles=(),
        spawner=initial_spawn_state(tuning),
        progress=initial_progress(tuning),
    )
