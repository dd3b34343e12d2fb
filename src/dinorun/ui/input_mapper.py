from __future__ import annotations
import tkinter as tk
from dinorun.domain.input_state import InputState


class TkInputMapper:
    """Reduces keyboard and pointer input to edge-triggered logical actions."""

    _TRIGGER_KEYS = ("space", "Up")

    def __init__(self, root: tk.Misc) -> None:
        self._held: set[str] = set()
        self._trigger_edge = False
        self._restart_edge = False
        self._mute_edge = False

        for key in self._TRIGGER_KEYS:
            root.bind(f"<KeyPress-{key}>", self._on_trigger_down)
            root.bind(f"<KeyRelease-{key}>", self._on_key_up)
        root.bind("<ButtonPress-1>", self._on_pointer)
        root.bind("<KeyPress-r>", self._on_restart)
        root.bind("<KeyPress-m>", self._on_mute)

        # Helps ensure root gets key events.
        root.focus_set()

    def _on_trigger_down(self, evt: tk.Event) -> None:
        # Auto-repeat sends KeyPress without a KeyRelease in between.
        if evt.keysym not in self._held:
            self._trigger_edge = True
        self._held.add(evt.keysym)

    def _on_key_up(self, evt: tk.Event) -> None:
        self._held.discard(evt.keysym)

    def _on_pointer(self, _evt: tk.Event) -> None:
        self._trigger_edge = True

    def _on_restart(self, _evt: tk.Event) -> None:
        self._restart_edge = True

    def _on_mute(self, _evt: tk.Event) -> None:
        self._mute_edge = True

    def sample(self) -> InputState:
        # “Pressed this frame” semantics.
        state = InputState(
            trigger_pressed=self._trigger_edge,
            restart_pressed=self._restart_edge,
            mute_pressed=self._mute_edge,
        )
        self._trigger_edge = False
        self._restart_edge = False
        self._mute_edge = False
        return state
