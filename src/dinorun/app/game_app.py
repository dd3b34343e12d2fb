from __future__ import annotations

import logging
import random
import tkinter as tk
from pathlib import Path

from dinorun.app.event_dispatcher import AudioSink, EventDispatcher
from dinorun.app.game_loop import GameLoop
from dinorun.app.run_controller import Events, RunController
from dinorun.domain.tuning import Tuning
from dinorun.infra.audio import NullAudio, SynthAudio
from dinorun.infra.preferences import load_preferences
from dinorun.infra.store import JsonFileStore
from dinorun.ui.input_mapper import TkInputMapper
from dinorun.ui.tk_canvas_view import TkCanvasView

logger = logging.getLogger(__name__)

PREFS_FILENAME = "dinorun.json"


class GameApp:
    def __init__(
        self,
        *,
        data_dir: Path,
        tuning: Tuning | None = None,
        seed: int | None = None,
        fps: int = 60,
        force_mute: bool = False,
    ) -> None:
        self.tuning = tuning or Tuning()

        store = JsonFileStore(data_dir / PREFS_FILENAME)
        prefs = load_preferences(store)
        logger.info("Loaded preferences: high score %d, muted=%s", prefs.high_score, prefs.muted)

        self.controller = RunController(
            tuning=self.tuning,
            rng=random.Random(seed),
            high_score=prefs.high_score,
            muted=prefs.muted,
        )

        audio: AudioSink = SynthAudio(muted=self.controller.muted)
        if not audio.init():
            audio = NullAudio(muted=self.controller.muted)
        self.audio = audio
        self.events = EventDispatcher(audio=audio, store=store)

        if force_mute and not self.controller.muted:
            self.events.set_muted(self.controller.toggle_mute())

        self.root = tk.Tk()
        self.root.title("Dino Run")
        self.root.resizable(False, False)

        self.view = TkCanvasView(
            self.root,
            width=int(self.tuning.width),
            height=int(self.tuning.height),
            ground_y=self.tuning.ground_y,
        )
        self.input = TkInputMapper(self.root)

        self.loop = GameLoop(
            root=self.root,
            update_fn=self._update,
            render_fn=self._render,
            fps=fps,
            max_dt=self.tuning.max_dt,
        )
        self.root.protocol("WM_DELETE_WINDOW", self._on_close)

    def run(self) -> None:
        self._render()
        self.loop.start()
        self.root.mainloop()

    # ---------- Game loop ----------

    def _update(self, dt: float) -> None:
        inp = self.input.sample()

        if inp.mute_pressed:
            self.events.set_muted(self.controller.toggle_mute())
        if inp.trigger_pressed:
            self._dispatch(self.controller.trigger())
        elif inp.restart_pressed:
            self._dispatch(self.controller.restart())

        self._dispatch(self.controller.tick(dt))

    def _render(self) -> None:
        self.view.render(self.controller.snapshot())

    def _dispatch(self, events: Events) -> None:
        self.events.dispatch(events, high_score=self.controller.high_score)

    def _on_close(self) -> None:
        self.loop.stop()
        self.audio.close()
        self.root.destroy()
