from __future__ import annotations

from dataclasses import dataclass

from dinorun.domain.collision import Box
from dinorun.domain.run_state import RunPhase


@dataclass(frozen=True)
class RunOutcome:
    final_score: int
    previous_high_score: int
    new_high_score: bool


@dataclass(frozen=True)
class Snapshot:
    """Read-only view of everything the presentation draws for one frame."""
    phase: RunPhase
    character_box: Box
    character_frame: int
    grounded: bool
    obstacle_boxes: tuple[Box, ...]
    score: int
    high_score: int
    muted: bool
    outcome: RunOutcome | None
