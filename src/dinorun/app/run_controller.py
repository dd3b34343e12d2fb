from __future__ import annotations

import logging
import math
from collections.abc import Callable
from dataclasses import replace

from dinorun.domain.events import SimEvent
from dinorun.domain.exceptions import CharacterCrashed
from dinorun.domain.rng import RandomSource
from dinorun.domain.run_state import RunPhase, RunState, fresh_run_state
from dinorun.domain.snapshot import RunOutcome, Snapshot
from dinorun.domain.tuning import Tuning
from dinorun.domain.world import World

logger = logging.getLogger(__name__)

Events = tuple[SimEvent, ...]


class RunController:
    """
    Owns the one mutable run state and multiplexes the single trigger input:
    start when idle or ended, jump while running.
    """

    def __init__(
        self,
        *,
        tuning: Tuning,
        rng: RandomSource,
        high_score: int = 0,
        muted: bool = False,
    ) -> None:
        self.tuning = tuning
        self.world = World(tuning, rng)
        self.state: RunState = fresh_run_state(tuning, phase=RunPhase.IDLE)
        self.high_score = high_score
        self.muted = muted
        self.outcome: RunOutcome | None = None

        self._on_trigger: dict[RunPhase, Callable[[], Events]] = {
            RunPhase.IDLE: self.start,
            RunPhase.RUNNING: self._jump,
            RunPhase.ENDED: self.start,
        }

    @property
    def phase(self) -> RunPhase:
        return self.state.phase

    def trigger(self) -> Events:
        return self._on_trigger[self.state.phase]()

    def restart(self) -> Events:
        if self.state.phase is RunPhase.RUNNING:
            return ()
        return self.start()

    def start(self) -> Events:
        self.state = fresh_run_state(self.tuning, phase=RunPhase.RUNNING)
        self.outcome = None
        logger.info("Run started (high score %d)", self.high_score)
        return (SimEvent.RUN_STARTED,)

    def tick(self, dt: float) -> Events:
        """Advance one frame; `dt` must already be clamped. No-op unless running."""
        if self.state.phase is not RunPhase.RUNNING:
            return ()
        try:
            self.state, events = self.world.step(self.state, dt)
        except CharacterCrashed as crash:
            return self._end(crash.state)
        return events

    def toggle_mute(self) -> bool:
        self.muted = not self.muted
        logger.info("Sound %s", "muted" if self.muted else "unmuted")
        return self.muted

    def snapshot(self) -> Snapshot:
        s = self.state
        return Snapshot(
            phase=s.phase,
            character_box=s.character.box,
            character_frame=s.character.frame,
            grounded=s.character.grounded,
            obstacle_boxes=tuple(o.box for o in s.obstacles),
            score=s.progress.display_score,
            high_score=self.high_score,
            muted=self.muted,
            outcome=self.outcome,
        )

    def _jump(self) -> Events:
        self.state, events = self.world.jump(self.state)
        return events

    def _end(self, final: RunState) -> Events:
        self.state = replace(final, phase=RunPhase.ENDED)
        final_score = math.floor(final.progress.score)
        previous = self.high_score
        record = final_score > previous
        if record:
            self.high_score = final_score

        self.outcome = RunOutcome(final_score=final_score, previous_high_score=previous, new_high_score=record)
        logger.info("Run ended: score %d (high %d)", final_score, self.high_score)

        events: list[SimEvent] = [SimEvent.COLLISION, SimEvent.GAME_OVER]
        if record:
            logger.info("New high score %d (was %d)", final_score, previous)
            events.append(SimEvent.NEW_HIGH_SCORE)
        return tuple(events)
