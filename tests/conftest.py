from __future__ import annotations

import sys
from pathlib import Path

import pytest

# Ensure "src" is on sys.path for imports in tests
PROJECT_ROOT = Path(__file__).resolve().parents[1]
SRC_DIR = PROJECT_ROOT / "src"
if str(SRC_DIR) not in sys.path:
    sys.path.insert(0, str(SRC_DIR))


class FakeClock:
    """Millisecond clock that only moves when told to."""

    def __init__(self, start: float = 1_000.0) -> None:
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, ms: float) -> float:
        self.now += ms
        return self.now


class FixedRandom:
    """Random source whose uniform draw always lands on the same fraction."""

    def __init__(self, fraction: float) -> None:
        self.fraction = fraction
        self.calls = 0

    def uniform(self, a: float, b: float) -> float:
        self.calls += 1
        return a + (b - a) * self.fraction


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def fixed_rng() -> FixedRandom:
    return FixedRandom(0.25)


@pytest.fixture(autouse=True)
def _clear_wheel_env(monkeypatch):
    monkeypatch.delenv("TIVOLIWHEEL_DURATION_MS", raising=False)
    monkeypatch.delenv("TIVOLIWHEEL_BASE_ROTATIONS", raising=False)
