from __future__ import annotations

import logging
from collections.abc import Callable, Iterable
from typing import Any, Protocol

from dinorun.domain.events import AUDIO_CUES, SimEvent
from dinorun.infra.exceptions import PreferencesSaveError
from dinorun.infra.preferences import save_high_score, save_muted
from dinorun.infra.store import KeyValueStore

logger = logging.getLogger(__name__)


class AudioSink(Protocol):
    muted: bool

    def init(self) -> bool:
        ...

    def play(self, event: SimEvent) -> None:
        ...

    def close(self) -> None:
        ...


class EventDispatcher:
    """Routes simulation events to the audio sink and the preference store."""

    def __init__(self, *, audio: AudioSink, store: KeyValueStore) -> None:
        self.audio = audio
        self.store = store

    def dispatch(self, events: Iterable[SimEvent], *, high_score: int) -> None:
        for event in events:
            if event in AUDIO_CUES:
                self.audio.play(event)
            if event is SimEvent.NEW_HIGH_SCORE:
                self._persist(save_high_score, high_score)

    def set_muted(self, muted: bool) -> None:
        self.audio.muted = muted
        self._persist(save_muted, muted)

    def _persist(self, save: Callable[[KeyValueStore, Any], None], value: Any) -> None:
        # A failed write never reaches the game loop.
        try:
            save(self.store, value)
        except PreferencesSaveError as e:
            logger.warning("%s", e)
