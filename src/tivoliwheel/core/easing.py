from __future__ import annotations


def clamp(value: float, low: float, high: float) -> float:
    if value < low:
        return low
    if value > high:
        return high
    return value


def ease_out_cubic(progress: float) -> float:
    """Fast start, smooth deceleration; maps [0, 1] onto [0, 1]."""

    t = clamp(progress, 0.0, 1.0)
    return 1.0 - (1.0 - t) ** 3
