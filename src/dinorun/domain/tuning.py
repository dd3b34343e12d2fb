from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Tuning:
    """
    Every gameplay constant in one place.
    Distances are logical playfield units, speeds are units/second and
    anything suffixed `_ms` is milliseconds.
    """

    # Playfield
    width: float = 800.0
    height: float = 200.0
    ground_offset: float = 30.0  # ground line sits this far above the bottom edge

    # Character
    character_x: float = 60.0
    character_width: float = 44.0
    character_height: float = 44.0
    gravity: float = 1400.0
    jump_impulse: float = -520.0

    # Hitbox inset (left, top, right, bottom)
    hitbox_inset: tuple[float, float, float, float] = (6.0, 6.0, 6.0, 6.0)

    # Animation (cosmetic only)
    frame_period_ms: float = 120.0
    run_frames: int = 2
    air_frame: int = 0

    # Scroll speed
    base_scroll_speed: float = 300.0
    scroll_ramp: float = 6.0
    max_scroll_speed: float | None = None

    # Score
    score_rate: float = 60.0
    milestone_step: int = 100
    milestone_debounce_ms: float = 900.0

    # Spawning
    base_spawn_interval_ms: float = 1500.0
    spawn_base_min_ms: float = 900.0
    spawn_base_range_ms: float = 1200.0
    spawn_difficulty_cap_ms: float = 700.0
    spawn_difficulty_factor: float = 3.0
    spawn_floor_ms: float = 650.0

    # Obstacles
    obstacle_base_width: float = 24.0
    obstacle_base_height: float = 34.0
    obstacle_scale_min: float = 0.9
    obstacle_scale_max: float = 2.1
    spawn_x_offset: float = 20.0   # spawn just beyond the right edge
    despawn_margin: float = 50.0   # removed once the right edge is this far left of x=0

    # Clock
    max_dt: float = 0.040

    def __post_init__(self) -> None:
        if self.width <= 0 or self.height <= 0:
            raise ValueError("playfield width/height must be > 0")
        if not 0 <= self.ground_offset < self.height:
            raise ValueError("ground_offset must lie inside the playfield")
        if self.character_width <= 0 or self.character_height <= 0:
            raise ValueError("character size must be > 0")
        if self.gravity <= 0:
            raise ValueError("gravity must be > 0 (down is +y)")
        if self.jump_impulse >= 0:
            raise ValueError("jump_impulse must be < 0 (up is -y)")
        left, top, right, bottom = self.hitbox_inset
        if left + right >= self.character_width or top + bottom >= self.character_height:
            raise ValueError("hitbox inset leaves no hitbox")
        if self.run_frames < 1 or self.frame_period_ms <= 0:
            raise ValueError("animation needs at least one frame and a positive period")
        if self.base_scroll_speed < 0 or self.scroll_ramp < 0:
            raise ValueError("scroll speed and ramp must be >= 0")
        if self.max_scroll_speed is not None and self.max_scroll_speed < self.base_scroll_speed:
            raise ValueError("max_scroll_speed must be >= base_scroll_speed")
        if self.milestone_step <= 0:
            raise ValueError("milestone_step must be > 0")
        if self.spawn_floor_ms <= 0 or self.base_spawn_interval_ms <= 0:
            raise ValueError("spawn intervals must be > 0")
        if self.spawn_base_range_ms < 0 or self.spawn_difficulty_cap_ms < 0:
            raise ValueError("spawn range/cap must be >= 0")
        if self.spawn_floor_ms > self.spawn_base_min_ms + self.spawn_base_range_ms:
            raise ValueError("spawn_floor_ms lies above the random spawn range")
        if not 0 < self.obstacle_scale_min <= self.obstacle_scale_max:
            raise ValueError("obstacle scale range is inverted or non-positive")
        if self.max_dt <= 0:
            raise ValueError("max_dt must be > 0")

    @property
    def ground_y(self) -> float:
        return self.height - self.ground_offset

