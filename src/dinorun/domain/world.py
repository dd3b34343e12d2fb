from __future__ import annotations

from dataclasses import replace

from dinorun.domain.character import animate, jump, update_body
from dinorun.domain.collision import first_hit
from dinorun.domain.events import SimEvent
from dinorun.domain.exceptions import CharacterCrashed
from dinorun.domain.obstacles import advance_obstacles
from dinorun.domain.progress import advance_progress
from dinorun.domain.rng import RandomSource
from dinorun.domain.run_state import RunState
from dinorun.domain.spawner import tick_spawner
from dinorun.domain.tuning import Tuning


class World:
    def __init__(self, tuning: Tuning, rng: RandomSource) -> None:
        self.tuning = tuning
        self.rng = rng

    def step(self, state: RunState, dt: float) -> tuple[RunState, tuple[SimEvent, ...]]:
        """
        Advance a running simulation by `dt` seconds (already clamped).
        Raises CharacterCrashed when the character hits an obstacle.
        """
        t = self.tuning
        events: list[SimEvent] = []

        # ----- Body -----
        character = update_body(state.character, t, dt)
        character = animate(character, t, dt)

        # ----- Obstacle field -----
        obstacles = advance_obstacles(state.obstacles, dt, state.progress.scroll_speed, t.despawn_margin)

        # ----- Spawn -----
        spawner, spawned = tick_spawner(state.spawner, dt, state.progress.score, self.rng, t)
        if spawned is not None:
            obstacles = obstacles + (spawned,)

        moved = replace(state, character=character, obstacles=obstacles, spawner=spawner)

        # ----- Collision (score stays frozen at its pre-tick value) -----
        hitbox = character.hitbox(t)
        if first_hit(hitbox, (o.box for o in obstacles)) is not None:
            raise CharacterCrashed(moved)

        # ----- Score & difficulty -----
        progress, milestone = advance_progress(state.progress, dt, t)
        if milestone:
            events.append(SimEvent.MILESTONE)

        return replace(moved, progress=progress), tuple(events)

    def jump(self, state: RunState) -> tuple[RunState, tuple[SimEvent, ...]]:
        character, jumped = jump(state.character, self.tuning.jump_impulse)
        if not jumped:
            return state, ()
        return replace(state, character=character), (SimEvent.JUMP,)
