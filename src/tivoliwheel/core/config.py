"""Engine configuration.

The defaults mirror the behaviour of the wheel as shipped: a ten second spin
that always travels at least ten full turns before the random fraction.  A
couple of knobs can be tuned through environment variables, and tests can
temporarily override any field via a context manager.

Usage::

    from tivoliwheel.core import config

    cfg = config.load()
    with config.override(duration_ms=250):
        ...

``TIVOLIWHEEL_DURATION_MS`` and ``TIVOLIWHEEL_BASE_ROTATIONS`` accept
numbers.  Invalid values raise ``ValueError`` when the configuration is
loaded rather than being silently clamped.
"""

from __future__ import annotations

import math
import os
from collections.abc import Mapping
from contextlib import contextmanager
from dataclasses import dataclass, fields, replace
from typing import Any, Final

__all__ = [
    "DEFAULT_DURATION_MS",
    "MAX_SECTORS",
    "MIN_BASE_ROTATIONS",
    "MIN_SECTORS",
    "POINTER_ANGLE",
    "WheelConfig",
    "load",
    "override",
]

MIN_SECTORS: Final = 2
MAX_SECTORS: Final = 100
MIN_BASE_ROTATIONS: Final = 10.0
DEFAULT_DURATION_MS: Final = 10_000.0
# Top of the circle in screen coordinates (y grows downward)
POINTER_ANGLE: Final = 3.0 * math.pi / 2.0

_DURATION_ENV: Final = "TIVOLIWHEEL_DURATION_MS"
_ROTATIONS_ENV: Final = "TIVOLIWHEEL_BASE_ROTATIONS"


@dataclass(frozen=True)
class WheelConfig:
    duration_ms: float = DEFAULT_DURATION_MS
    base_rotations: float = MIN_BASE_ROTATIONS
    min_sectors: int = MIN_SECTORS
    max_sectors: int = MAX_SECTORS

    def __post_init__(self) -> None:
        if not self.duration_ms > 0:
            raise ValueError(f"duration_ms must be positive; got {self.duration_ms}")
        if self.base_rotations < MIN_BASE_ROTATIONS:
            raise ValueError(
                f"base_rotations must be at least {MIN_BASE_ROTATIONS:g}; got {self.base_rotations}"
            )
        if not (MIN_SECTORS <= self.min_sectors <= self.max_sectors <= MAX_SECTORS):
            raise ValueError("sector bounds must satisfy 2 <= min_sectors <= max_sectors <= 100")

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> WheelConfig:
        env = os.environ if environ is None else environ
        values: dict[str, Any] = {}
        duration = _parse_number(env.get(_DURATION_ENV), _DURATION_ENV)
        if duration is not None:
            values["duration_ms"] = duration
        rotations = _parse_number(env.get(_ROTATIONS_ENV), _ROTATIONS_ENV)
        if rotations is not None:
            values["base_rotations"] = rotations
        return cls(**values)


def _parse_number(raw: str | None, name: str) -> float | None:
    if raw is None or not raw.strip():
        return None
    try:
        return float(raw.strip())
    except ValueError as exc:
        raise ValueError(f"{name} must be a number; got {raw!r}") from exc


_OVERRIDE_STACK: list[dict[str, Any]] = []
_FIELD_NAMES: Final = frozenset(f.name for f in fields(WheelConfig))


def load() -> WheelConfig:
    """Return the environment configuration with any active overrides applied."""

    cfg = WheelConfig.from_env()
    merged: dict[str, Any] = {}
    for layer in _OVERRIDE_STACK:
        merged.update(layer)
    return replace(cfg, **merged) if merged else cfg


@contextmanager
def override(**values: Any):
    """Temporarily override configuration fields within the context.

    Overrides are stacked, so nested contexts behave predictably.
    """

    unknown = set(values) - _FIELD_NAMES
    if unknown:
        raise TypeError(f"unknown config fields: {', '.join(sorted(unknown))}")
    _OVERRIDE_STACK.append(dict(values))
    try:
        yield
    finally:
        _OVERRIDE_STACK.pop()
