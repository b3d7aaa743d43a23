"""Deterministic fairness check for the spin engine.

Runs many seeded spins through the real engine with a synthetic clock and
compares how often each sector wins against the uniform expectation.  Sector
probabilities are meant to be equal, so a large chi-square value points at a
bias in the rotation draw or the resolver.
"""

from __future__ import annotations

import random
from collections import Counter
from collections.abc import Sequence
from dataclasses import dataclass

from ..core.config import WheelConfig
from ..core.engine import SpinEngine
from ..core.partition import check_label_count


@dataclass(frozen=True)
class FairnessConfig:
    sectors: int = 8
    spins: int = 2_000
    seed: int = 101
    duration_ms: float = 1_000.0

    def labels(self) -> list[str]:
        return [f"S{i}" for i in range(self.sectors)]


@dataclass(frozen=True)
class FairnessResult:
    config: FairnessConfig
    counts: tuple[int, ...]
    chi_square: float

    @property
    def expected(self) -> float:
        return self.config.spins / self.config.sectors

    @property
    def max_deviation_pct(self) -> float:
        expected = self.expected
        return max(abs(count - expected) for count in self.counts) / expected * 100.0


class _ManualClock:
    def __init__(self) -> None:
        self.now = 0.0

    def __call__(self) -> float:
        return self.now


def chi_square(counts: Sequence[int]) -> float:
    total = sum(counts)
    if not counts or total == 0:
        return 0.0
    expected = total / len(counts)
    return sum((count - expected) ** 2 / expected for count in counts)


def run_fairness(config: FairnessConfig) -> FairnessResult:
    if config.spins < 1:
        raise ValueError("spins must be positive")
    labels = config.labels()
    check_label_count(len(labels))
    rng = random.Random(config.seed)
    clock = _ManualClock()
    engine = SpinEngine(clock=clock, config=WheelConfig(duration_ms=config.duration_ms))
    wins: Counter[int] = Counter()
    for _ in range(config.spins):
        handle = engine.start(labels, rng=rng)
        clock.now += config.duration_ms
        sample = handle.poll()
        assert sample.winner_index is not None
        wins[sample.winner_index] += 1
    counts = tuple(wins.get(i, 0) for i in range(len(labels)))
    return FairnessResult(config=config, counts=counts, chi_square=chi_square(counts))
