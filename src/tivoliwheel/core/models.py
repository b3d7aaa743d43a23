from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


@dataclass(frozen=True)
class Sector:
    index: int
    start_angle: float
    end_angle: float
    label: str
    # Palette slot; the renderer maps it to an actual color
    color: int = 0

    @property
    def span(self) -> float:
        return self.end_angle - self.start_angle

    @property
    def mid_angle(self) -> float:
        return (self.start_angle + self.end_angle) / 2.0

    def contains(self, angle: float) -> bool:
        return self.start_angle <= angle < self.end_angle


class SpinStatus(str, Enum):
    IDLE = "idle"
    SPINNING = "spinning"
    RESOLVED = "resolved"


@dataclass
class SpinState:
    """Mutable record of one spin, owned by a single engine."""

    status: SpinStatus = SpinStatus.IDLE
    labels: tuple[str, ...] = ()
    duration_ms: float = 0.0
    start_time: float = 0.0
    # Full turns, fractional part drawn from the random source
    total_rotation: float = 0.0
    # Radians
    current_rotation: float = 0.0
    progress: float = 0.0
    winner: str | None = None
    winner_index: int | None = None


@dataclass(frozen=True)
class SpinSample:
    """Structured outcome returned by each poll of a spin."""

    rotation: float
    progress: float
    done: bool = False
    winner: str | None = None
    winner_index: int | None = None
