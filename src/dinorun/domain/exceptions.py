from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from dinorun.domain.run_state import RunState


class CharacterCrashed(Exception):
    """Raised by the world step when the character hits an obstacle; the run is over."""

    def __init__(self, state: RunState) -> None:
        super().__init__("character hit an obstacle")
        self.state = state  # run state frozen at the moment of impact
