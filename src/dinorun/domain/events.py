from __future__ import annotations

from enum import Enum


class SimEvent(Enum):
    """Side-effect signals produced by the simulation for downstream sinks."""

    RUN_STARTED = "run_started"
    JUMP = "jump"
    MILESTONE = "milestone"
    COLLISION = "collision"
    GAME_OVER = "game_over"
    NEW_HIGH_SCORE = "new_high_score"


# Events that map to an audio cue.
AUDIO_CUES = frozenset({SimEvent.JUMP, SimEvent.MILESTONE, SimEvent.COLLISION})
