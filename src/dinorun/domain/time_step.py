from __future__ import annotations


def clamp_dt(raw: float, ceiling: float) -> float:
    """
    Clamp a measured frame gap (seconds) to [0, ceiling].
    A stalled frame is treated as exactly `ceiling` so physics and score never jump.
    """
    if raw <= 0.0:
        return 0.0
    if raw > ceiling:
        return ceiling
    return raw
