"""Spin engine primitives.

The engine owns the timeline of one spin at a time.  It never schedules
anything itself: the caller's loop (a render frame, a timer, or a test with
synthetic timestamps) drives it through :meth:`SpinHandle.poll`.  Randomness
and time are injected so a seeded source and a fake clock make every spin
reproducible.
"""

from __future__ import annotations

import itertools
import logging
import random
import time
from collections.abc import Callable, Iterator, Sequence
from dataclasses import replace

from . import config as config_module
from .config import WheelConfig
from .easing import clamp, ease_out_cubic
from .errors import AlreadySpinning
from .interfaces import Clock, RandomSource
from .models import SpinSample, SpinState, SpinStatus
from .partition import TAU, check_label_count, resolve_index

__all__ = ["SpinEngine", "SpinHandle", "monotonic_ms"]

logger = logging.getLogger(__name__)

ResolvedCallback = Callable[[SpinSample], None]


def monotonic_ms() -> float:
    return time.monotonic() * 1000.0


class SpinHandle:
    """Caller-side view of a single spin."""

    def __init__(
        self,
        state: SpinState,
        clock: Clock,
        on_resolved: ResolvedCallback | None = None,
    ) -> None:
        self._state = state
        self._clock = clock
        self._on_resolved = on_resolved
        self._final: SpinSample | None = None

    @property
    def state(self) -> SpinState:
        return self._state

    @property
    def done(self) -> bool:
        return self._final is not None

    @property
    def winner(self) -> str | None:
        return self._state.winner

    def poll(self, now: float | None = None) -> SpinSample:
        if self._final is not None:
            return self._final

        state = self._state
        current = self._clock() if now is None else now
        progress = clamp((current - state.start_time) / state.duration_ms, 0.0, 1.0)
        rotation = state.total_rotation * TAU * ease_out_cubic(progress)
        state.current_rotation = rotation
        state.progress = progress
        if progress < 1.0:
            return SpinSample(rotation=rotation, progress=progress)

        index = resolve_index(rotation, len(state.labels))
        state.winner_index = index
        state.winner = state.labels[index]
        state.status = SpinStatus.RESOLVED
        self._final = SpinSample(
            rotation=rotation,
            progress=1.0,
            done=True,
            winner=state.winner,
            winner_index=index,
        )
        logger.info(
            "Spin resolved to %r",
            state.winner,
            extra={"winner_index": index, "rotation": rotation, "sectors": len(state.labels)},
        )
        if self._on_resolved is not None:
            self._on_resolved(self._final)
        return self._final

    def samples(self, clock: Clock | None = None) -> Iterator[SpinSample]:
        """Poll with ``clock`` until, and including, the resolved sample."""

        source = clock or self._clock
        while True:
            sample = self.poll(source())
            yield sample
            if sample.done:
                return

    def frames(self, fps: float = 60.0) -> Iterator[SpinSample]:
        """Poll at evenly spaced synthetic timestamps, one per frame."""

        if fps <= 0:
            raise ValueError(f"fps must be positive; got {fps}")
        step = 1000.0 / fps
        for frame in itertools.count():
            sample = self.poll(self._state.start_time + frame * step)
            yield sample
            if sample.done:
                return


class SpinEngine:
    """Owns at most one spin in flight and resolves it when it finishes."""

    def __init__(
        self,
        *,
        clock: Clock = monotonic_ms,
        config: WheelConfig | None = None,
    ) -> None:
        self.clock = clock
        self.config = config or config_module.load()
        self._state = SpinState()
        self._handle: SpinHandle | None = None

    @property
    def state(self) -> SpinState:
        return self._state

    @property
    def status(self) -> SpinStatus:
        return self._state.status

    @property
    def winner(self) -> str | None:
        return self._state.winner

    @property
    def handle(self) -> SpinHandle | None:
        return self._handle

    def start(
        self,
        labels: Sequence[str],
        duration_ms: float | None = None,
        rng: RandomSource | None = None,
        *,
        on_resolved: ResolvedCallback | None = None,
    ) -> SpinHandle:
        if self._state.status is SpinStatus.SPINNING:
            raise AlreadySpinning()
        frozen = tuple(labels)
        check_label_count(len(frozen), self.config.min_sectors, self.config.max_sectors)
        duration = self.config.duration_ms if duration_ms is None else float(duration_ms)
        if not duration > 0:
            raise ValueError(f"duration_ms must be positive; got {duration_ms}")

        source = rng if rng is not None else random.Random()
        total_rotation = self.config.base_rotations + source.uniform(0.0, 1.0)
        state = SpinState(
            status=SpinStatus.SPINNING,
            labels=frozen,
            duration_ms=duration,
            start_time=self.clock(),
            total_rotation=total_rotation,
        )
        self._state = state
        self._handle = SpinHandle(state, self.clock, on_resolved)
        logger.debug(
            "Spin started",
            extra={"sectors": len(frozen), "duration_ms": duration, "total_rotation": total_rotation},
        )
        return self._handle

    def snapshot(self) -> SpinState:
        return replace(self._state)
