from __future__ import annotations

from dataclasses import dataclass

from dinorun.domain.collision import Box
from dinorun.domain.tuning import Tuning


@dataclass(frozen=True)
class Character:
    x: float
    y: float
    vy: float
    width: float
    height: float
    grounded: bool

    # Presentation only; never read by physics or collision.
    frame: int = 0
    frame_timer_ms: float = 0.0

    @property
    def box(self) -> Box:
        """Full sprite box, used for drawing."""
        return Box(x=self.x, y=self.y, w=self.width, h=self.height)

    def hitbox(self, tuning: Tuning) -> Box:
        return self.box.inset(*tuning.hitbox_inset)


def character_at_rest(tuning: Tuning) -> Character:
    """Grounded, motionless character standing on the ground line."""
    return Character(
        x=tuning.character_x,
        y=tuning.ground_y - tuning.character_height,
        vy=0.0,
        width=tuning.character_width,
        height=tuning.character_height,
        grounded=True,
    )


def apply_gravity(c: Character, gravity: float, dt: float) -> Character:
    return _with_motion(c, y=c.y, vy=c.vy + gravity * dt, grounded=c.grounded)


def integrate_position(c: Character, dt: float) -> Character:
    return _with_motion(c, y=c.y + c.vy * dt, vy=c.vy, grounded=c.grounded)


def clamp_to_ground(c: Character, ground_y: float) -> Character:
    floor_y = ground_y - c.height
    if c.y >= floor_y:
        return _with_motion(c, y=floor_y, vy=0.0, grounded=True)
    return _with_motion(c, y=c.y, vy=c.vy, grounded=False)


def update_body(c: Character, tuning: Tuning, dt: float) -> Character:
    """One physics tick: gravity, then integration, then the ground clamp."""
    c = apply_gravity(c, tuning.gravity, dt)
    c = integrate_position(c, dt)
    return clamp_to_ground(c, tuning.ground_y)


def jump(c: Character, jump_impulse: float) -> tuple[Character, bool]:
    """
    Single-jump policy: only a grounded character can jump.
    Returns the new character and whether a jump actually happened.
    """
    if not c.grounded:
        return c, False
    return _with_motion(c, y=c.y, vy=jump_impulse, grounded=False), True


def animate(c: Character, tuning: Tuning, dt: float) -> Character:
    if not c.grounded:
        return Character(
            x=c.x, y=c.y, vy=c.vy, width=c.width, height=c.height, grounded=c.grounded,
            frame=tuning.air_frame, frame_timer_ms=c.frame_timer_ms,
        )

    frame = c.frame
    timer = c.frame_timer_ms + dt * 1000.0
    if timer > tuning.frame_period_ms:
        frame = (frame + 1) % tuning.run_frames
        timer = 0.0
    return Character(
        x=c.x, y=c.y, vy=c.vy, width=c.width, height=c.height, grounded=c.grounded,
        frame=frame, frame_timer_ms=timer,
    )


def _with_motion(c: Character, *, y: float, vy: float, grounded: bool) -> Character:
    return Character(
        x=c.x, y=y, vy=vy, width=c.width, height=c.height, grounded=grounded,
        frame=c.frame, frame_timer_ms=c.frame_timer_ms,
    )
