from __future__ import annotations

import logging
import random
import secrets
import time
from collections.abc import Callable, Sequence

from .core.engine import SpinEngine, monotonic_ms
from .core.interfaces import Clock, Renderer
from .core.models import SpinSample
from .core.partition import partition, shuffle_labels

logger = logging.getLogger(__name__)

DEFAULT_LABELS: tuple[str, ...] = ("Pizza", "Pasta", "Salad", "Soup", "Steak")


def run_spin(
    renderer: Renderer,
    labels: Sequence[str] = DEFAULT_LABELS,
    *,
    duration_ms: float | None = None,
    seed: int | None = None,
    fps: float = 30.0,
    shuffle: bool = False,
    clock: Clock = monotonic_ms,
    _sleep: Callable[[float], None] = time.sleep,
) -> SpinSample:
    """Spin once, drawing every frame, and return the resolved sample."""

    if fps <= 0:
        raise ValueError(f"fps must be positive; got {fps}")
    # Choose a random seed when none is provided for varied spins
    actual_seed = seed if seed is not None else secrets.randbits(32)
    rng = random.Random(actual_seed)
    ordered = shuffle_labels(labels, rng) if shuffle else list(labels)
    sectors = partition(ordered)
    renderer.draw_wheel(sectors)

    engine = SpinEngine(clock=clock)
    handle = engine.start(ordered, duration_ms, rng)
    logger.debug("Running spin", extra={"seed": actual_seed, "sectors": len(sectors)})
    frame = 1.0 / fps
    for sample in handle.samples():
        if sample.done:
            renderer.show_winner(sample)
            return sample
        renderer.show_rotation(sample)
        _sleep(frame)
    raise RuntimeError("spin ended without resolving")  # pragma: no cover - samples() ends on done
