from __future__ import annotations

from collections.abc import Sequence
from typing import Protocol, runtime_checkable

from .models import Sector, SpinSample


@runtime_checkable
class RandomSource(Protocol):
    """Anything with ``random.Random.uniform`` semantics."""

    def uniform(self, a: float, b: float) -> float: ...


class Clock(Protocol):
    """Returns the current time in milliseconds."""

    def __call__(self) -> float: ...


class Renderer(Protocol):
    def draw_wheel(self, sectors: Sequence[Sector]) -> None: ...

    def show_rotation(self, sample: SpinSample) -> None: ...

    def show_winner(self, sample: SpinSample) -> None: ...
