from __future__ import annotations

import logging
from dataclasses import dataclass

from dinorun.infra.store import KeyValueStore

logger = logging.getLogger(__name__)

HIGH_SCORE_KEY = "high_score"
MUTED_KEY = "muted"

_TRUE = ("1", "true")
_FALSE = ("0", "false")


@dataclass(frozen=True)
class Preferences:
    high_score: int = 0
    muted: bool = False


def load_preferences(store: KeyValueStore) -> Preferences:
    return Preferences(
        high_score=parse_high_score(store.get(HIGH_SCORE_KEY)),
        muted=parse_muted(store.get(MUTED_KEY)),
    )


def parse_high_score(raw: str | None) -> int:
    """Integer high score; anything missing, non-numeric or negative reads as 0."""
    if raw is None:
        return 0
    try:
        value = int(raw.strip())
    except ValueError:
        logger.warning("Ignoring non-numeric high score %r", raw)
        return 0
    return max(0, value)


def parse_muted(raw: str | None) -> bool:
    if raw is None:
        return False
    value = raw.strip().lower()
    if value in _TRUE:
        return True
    if value not in _FALSE:
        logger.warning("Ignoring unknown mute flag %r", raw)
    return False


def save_high_score(store: KeyValueStore, high_score: int) -> None:
    store.set(HIGH_SCORE_KEY, str(int(high_score)))


def save_muted(store: KeyValueStore, muted: bool) -> None:
    store.set(MUTED_KEY, "1" if muted else "0")
