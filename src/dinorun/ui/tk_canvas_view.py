import time
import tkinter as tk

from dinorun.domain.run_state import RunPhase
from dinorun.domain.snapshot import Snapshot

SKY = "#fff"
GROUND = "#e9e9e9"
DASH = "#d1d1d1"
INK = "#222"
OBSTACLE = "#6a6a6a"

DASH_SPACING = 24
DASH_LENGTH = 12


class TkCanvasView:
    def __init__(self, root: tk.Misc, *, width: int, height: int, ground_y: float) -> None:
        self._w = width
        self._h = height
        self._gy = ground_y

        self.canvas = tk.Canvas(root, width=width, height=height, highlightthickness=0, bg=SKY)
        self.canvas.pack(fill="both", expand=True)

        self.canvas.create_rectangle(0, ground_y, width, height, outline="", fill=GROUND)
        self._score_id = self.canvas.create_text(width - 10, 10, anchor="ne", text="", fill=INK,
                                                 font=("TkFixedFont", 12))
        self._high_id = self.canvas.create_text(width - 10, 28, anchor="ne", text="", fill="#888",
                                                font=("TkFixedFont", 10))
        self._mute_id = self.canvas.create_text(10, 10, anchor="nw", text="", fill="#888",
                                                font=("TkDefaultFont", 10))
        self._overlay_id = self.canvas.create_text(width / 2, height / 2 - 20, text="", fill=INK,
                                                   font=("TkDefaultFont", 14, "bold"), justify="center")

    def render(self, snap: Snapshot) -> None:
        self.canvas.delete("dynamic")
        self._draw_ground_dashes()
        self._draw_character(snap)

        for b in snap.obstacle_boxes:
            self.canvas.create_rectangle(b.left, b.top, b.right, b.bottom,
                                         fill=OBSTACLE, outline="", tags=("dynamic",))

        self.canvas.itemconfigure(self._score_id, text=f"Score: {snap.score}")
        self.canvas.itemconfigure(self._high_id, text=f"High: {snap.high_score}")
        self.canvas.itemconfigure(self._mute_id, text="muted (M)" if snap.muted else "sound on (M)")
        self.canvas.itemconfigure(self._overlay_id, text=self._overlay_text(snap))
        self.canvas.tag_raise(self._overlay_id)

    def _draw_ground_dashes(self) -> None:
        y = self._gy + 14
        off = (time.monotonic() * 1000 / 6) % DASH_SPACING
        for x in range(0, self._w, DASH_SPACING):
            self.canvas.create_line(x - off, y, x - off + DASH_LENGTH, y,
                                    fill=DASH, width=2, tags=("dynamic",))

    def _draw_character(self, snap: Snapshot) -> None:
        b = snap.character_box
        y = round(b.top)
        body_bottom = y + b.h * 0.8
        self.canvas.create_rectangle(b.left, y, b.right, body_bottom, fill=INK, outline="", tags=("dynamic",))

        # Legs: alternate with the run frame, tucked together in the air.
        leg_w = b.w * 0.18
        front, back = b.left + b.w * 0.6, b.left + b.w * 0.2
        if not snap.grounded:
            lift = (0.0, 0.0)
        elif snap.character_frame % 2 == 0:
            lift = (0.0, b.h * 0.1)
        else:
            lift = (b.h * 0.1, 0.0)
        for lx, dy in zip((back, front), lift):
            self.canvas.create_rectangle(lx, body_bottom, lx + leg_w, y + b.h - dy,
                                         fill=INK, outline="", tags=("dynamic",))

        # Eye
        ex, ey = b.right - b.w * 0.3, y + b.h * 0.15
        self.canvas.create_rectangle(ex, ey, ex + 4, ey + 4, fill=SKY, outline="", tags=("dynamic",))

    @staticmethod
    def _overlay_text(snap: Snapshot) -> str:
        if snap.phase is RunPhase.IDLE:
            return "Press Space / tap to start"
        if snap.phase is RunPhase.ENDED and snap.outcome is not None:
            text = f"Game over - Score: {snap.outcome.final_score}"
            if snap.outcome.new_high_score:
                text += "  New High!"
            return text + "\nSpace / tap / R to restart"
        return ""
