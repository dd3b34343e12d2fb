from __future__ import annotations

import math
from dataclasses import dataclass

from dinorun.domain.tuning import Tuning


@dataclass(frozen=True)
class Progress:
    """Score, difficulty and the milestone debounce for one run."""
    score: float
    scroll_speed: float
    elapsed_ms: float                 # simulated run time, sum of clamped dt
    last_milestone_ms: float | None   # elapsed_ms when the milestone cue last fired

    @property
    def display_score(self) -> int:
        return math.floor(self.score)


def initial_progress(tuning: Tuning) -> Progress:
    return Progress(
        score=0.0,
        scroll_speed=tuning.base_scroll_speed,
        elapsed_ms=0.0,
        last_milestone_ms=None,
    )


def advance_progress(p: Progress, dt: float, tuning: Tuning) -> tuple[Progress, bool]:
    """
    Accrue score and speed for one tick.
    Returns the new progress and whether the milestone cue should fire.
    """
    score = p.score + dt * tuning.score_rate
    speed = p.scroll_speed + dt * tuning.scroll_ramp
    if tuning.max_scroll_speed is not None:
        speed = min(speed, max(p.scroll_speed, tuning.max_scroll_speed))
    elapsed = p.elapsed_ms + dt * 1000.0

    crossed = milestones_crossed(p.score, score, tuning.milestone_step) > 0
    fire = crossed and (
        p.last_milestone_ms is None
        or elapsed - p.last_milestone_ms > tuning.milestone_debounce_ms
    )

    return (
        Progress(
            score=score,
            scroll_speed=speed,
            elapsed_ms=elapsed,
            last_milestone_ms=elapsed if fire else p.last_milestone_ms,
        ),
        fire,
    )


def milestones_crossed(before: float, after: float, step: int) -> int:
    """How many multiples of `step` the floored score passed going from before to after."""
    return max(0, math.floor(after) // step - math.floor(before) // step)
