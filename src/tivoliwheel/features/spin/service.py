from __future__ import annotations

import logging
import random
import secrets
import string
import threading
from collections.abc import Sequence
from dataclasses import dataclass, field

from ...core import config as config_module
from ...core.config import POINTER_ANGLE, WheelConfig
from ...core.engine import SpinEngine, monotonic_ms
from ...core.errors import AlreadySpinning
from ...core.interfaces import Clock
from ...core.models import Sector, SpinSample, SpinStatus
from ...core.palette import DEFAULT_PALETTE, hex_color
from ...core.partition import check_label_count, partition, shuffle_labels
from ...render.svg import render_wheel_svg
from .concurrency import run_blocking
from .schemas import SamplePayload, SectorPayload, SpinPayload, WheelPayload

__all__ = [
    "SpinManager",
    "WheelSpec",
    "WheelState",
]

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class WheelSpec:
    """Configuration for one wheel."""

    labels: Sequence[str]
    duration_ms: float | None = None
    seed: int | None = None


@dataclass
class WheelState:
    labels: list[str]
    duration_ms: float
    seed: int
    rng: random.Random
    engine: SpinEngine
    winners: list[str] = field(default_factory=list)

    def sectors(self) -> list[Sector]:
        return partition(self.labels)


class SpinManager:
    """Owns wheel lifecycle independent of the presentation layer."""

    def __init__(self, *, clock: Clock = monotonic_ms, config: WheelConfig | None = None) -> None:
        self._wheels: dict[str, WheelState] = {}
        self._lock = threading.Lock()
        self._clock = clock
        self._config = config

    def create_wheel(self, spec: WheelSpec) -> str:
        labels = list(spec.labels)
        cfg = self._config or config_module.load()
        check_label_count(len(labels), cfg.min_sectors, cfg.max_sectors)
        duration = float(spec.duration_ms) if spec.duration_ms is not None else cfg.duration_ms
        if not duration > 0:
            raise ValueError(f"duration_ms must be positive; got {spec.duration_ms}")
        seed = spec.seed if spec.seed is not None else secrets.SystemRandom().getrandbits(32)
        state = WheelState(
            labels=labels,
            duration_ms=duration,
            seed=seed,
            rng=random.Random(seed),
            engine=SpinEngine(clock=self._clock, config=cfg),
        )
        wheel_id = _wid()
        with self._lock:
            self._wheels[wheel_id] = state
        logger.debug("Wheel created", extra={"wheel_id": wheel_id, "sectors": len(labels)})
        return wheel_id

    async def create_wheel_async(self, spec: WheelSpec) -> str:
        return await run_blocking(self.create_wheel, spec)

    def layout(self, wheel_id: str) -> WheelPayload:
        with self._lock:
            state = self._require_wheel(wheel_id)
            return _wheel_payload(wheel_id, state)

    async def layout_async(self, wheel_id: str) -> WheelPayload:
        return await run_blocking(self.layout, wheel_id)

    def spin(self, wheel_id: str) -> SpinPayload:
        with self._lock:
            state = self._require_wheel(wheel_id)
            handle = state.engine.start(
                state.labels,
                state.duration_ms,
                state.rng,
                on_resolved=lambda sample: state.winners.append(sample.winner or ""),
            )
            spin_state = handle.state
            logger.debug("Wheel spin started", extra={"wheel_id": wheel_id})
            return SpinPayload(
                wheel_id=wheel_id,
                status=spin_state.status.value,
                duration_ms=spin_state.duration_ms,
                start_time=spin_state.start_time,
                total_rotation=spin_state.total_rotation,
            )

    async def spin_async(self, wheel_id: str) -> SpinPayload:
        return await run_blocking(self.spin, wheel_id)

    def poll(self, wheel_id: str, now: float | None = None) -> SamplePayload:
        with self._lock:
            state = self._require_wheel(wheel_id)
            handle = state.engine.handle
            if handle is None:
                sample = SpinSample(rotation=0.0, progress=0.0)
            else:
                sample = handle.poll(now)
            return _sample_payload(wheel_id, state.engine.status, sample)

    async def poll_async(self, wheel_id: str, now: float | None = None) -> SamplePayload:
        return await run_blocking(self.poll, wheel_id, now)

    def shuffle(self, wheel_id: str) -> WheelPayload:
        with self._lock:
            state = self._require_wheel(wheel_id)
            if state.engine.status is SpinStatus.SPINNING:
                raise AlreadySpinning()
            state.labels = shuffle_labels(state.labels, state.rng)
            return _wheel_payload(wheel_id, state)

    async def shuffle_async(self, wheel_id: str) -> WheelPayload:
        return await run_blocking(self.shuffle, wheel_id)

    def svg(self, wheel_id: str, rotation: float | None = None) -> str:
        with self._lock:
            state = self._require_wheel(wheel_id)
            angle = state.engine.state.current_rotation if rotation is None else rotation
            return render_wheel_svg(state.sectors(), angle)

    async def svg_async(self, wheel_id: str, rotation: float | None = None) -> str:
        return await run_blocking(self.svg, wheel_id, rotation)

    def discard(self, wheel_id: str) -> None:
        with self._lock:
            self._require_wheel(wheel_id)
            del self._wheels[wheel_id]
        logger.debug("Wheel discarded", extra={"wheel_id": wheel_id})

    async def discard_async(self, wheel_id: str) -> None:
        await run_blocking(self.discard, wheel_id)

    def _require_wheel(self, wheel_id: str) -> WheelState:
        state = self._wheels.get(wheel_id)
        if state is None:
            raise KeyError(f"wheel '{wheel_id}' not found")
        return state


def _wid(length: int = 10) -> str:
    alphabet = string.ascii_lowercase + string.digits
    return "".join(secrets.choice(alphabet) for _ in range(length))


def _sector_payloads(sectors: Sequence[Sector]) -> list[SectorPayload]:
    return [
        SectorPayload(
            index=sector.index,
            label=sector.label,
            start_angle=sector.start_angle,
            end_angle=sector.end_angle,
            color=sector.color,
            fill=hex_color(DEFAULT_PALETTE[sector.color]),
        )
        for sector in sectors
    ]


def _wheel_payload(wheel_id: str, state: WheelState) -> WheelPayload:
    return WheelPayload(
        wheel_id=wheel_id,
        status=state.engine.status.value,
        labels=list(state.labels),
        sectors=_sector_payloads(state.sectors()),
        pointer_angle=POINTER_ANGLE,
        duration_ms=state.duration_ms,
        spins=len(state.winners),
        last_winner=state.winners[-1] if state.winners else None,
    )


def _sample_payload(wheel_id: str, status: SpinStatus, sample: SpinSample) -> SamplePayload:
    return SamplePayload(
        wheel_id=wheel_id,
        status=status.value,
        rotation=sample.rotation,
        progress=sample.progress,
        done=sample.done,
        winner=sample.winner,
        winner_index=sample.winner_index,
    )
