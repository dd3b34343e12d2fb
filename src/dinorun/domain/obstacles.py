from __future__ import annotations

from dataclasses import dataclass

from dinorun.domain.collision import Box
from dinorun.domain.rng import RandomSource, uniform
from dinorun.domain.tuning import Tuning


@dataclass(frozen=True)
class Obstacle:
    x: float
    y: float
    w: float
    h: float

    @property
    def box(self) -> Box:
        # Obstacles collide with their full drawn box.
        return Box(x=self.x, y=self.y, w=self.w, h=self.h)


def make_obstacle(rng: RandomSource, tuning: Tuning) -> Obstacle:
    """New obstacle just beyond the right edge, standing on the ground, size drawn once."""
    scale = uniform(rng, tuning.obstacle_scale_min, tuning.obstacle_scale_max)
    w = float(round(tuning.obstacle_base_width * scale))
    h = float(round(tuning.obstacle_base_height * scale))
    return Obstacle(x=tuning.width + tuning.spawn_x_offset, y=tuning.ground_y - h, w=w, h=h)


def advance_obstacles(
    obstacles: tuple[Obstacle, ...],
    dt: float,
    scroll_speed: float,
    despawn_margin: float,
) -> tuple[Obstacle, ...]:
    """Scroll every obstacle left and drop the ones whose right edge passed -despawn_margin."""
    dx = scroll_speed * dt
    moved = (Obstacle(x=o.x - dx, y=o.y, w=o.w, h=o.h) for o in obstacles)
    return tuple(o for o in moved if o.x + o.w >= -despawn_margin)
