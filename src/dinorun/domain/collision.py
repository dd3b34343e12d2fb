from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass


@dataclass(frozen=True)
class Box:
    """Axis-aligned box; y grows downwards."""
    x: float
    y: float
    w: float
    h: float

    @property
    def left(self) -> float:
        return self.x

    @property
    def top(self) -> float:
        return self.y

    @property
    def right(self) -> float:
        return self.x + self.w

    @property
    def bottom(self) -> float:
        return self.y + self.h

    def inset(self, left: float, top: float, right: float, bottom: float) -> Box:
        return Box(x=self.x + left, y=self.y + top, w=self.w - left - right, h=self.h - top - bottom)


def intersects(a: Box, b: Box) -> bool:
    # Touching edges count as a hit.
    separated = (
        a.right < b.left
        or a.left > b.right
        or a.bottom < b.top
        or a.top > b.bottom
    )
    return not separated


def first_hit(hitbox: Box, boxes: Iterable[Box]) -> Box | None:
    """Return the first box overlapping `hitbox`, or None. Stops at the first hit."""
    for box in boxes:
        if intersects(hitbox, box):
            return box
    return None
