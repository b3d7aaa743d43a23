from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field

__all__ = [
    "SamplePayload",
    "SectorPayload",
    "SpinPayload",
    "WheelPayload",
]


class _APIModel(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    def to_dict(self) -> dict[str, Any]:
        return self.model_dump(by_alias=True, exclude_none=True)


class SectorPayload(_APIModel):
    index: int
    label: str
    start_angle: float
    end_angle: float
    color: int
    fill: str


class WheelPayload(_APIModel):
    wheel_id: str = Field(..., alias="wheel")
    status: str
    labels: list[str]
    sectors: list[SectorPayload]
    pointer_angle: float
    duration_ms: float
    spins: int = 0
    last_winner: str | None = None


class SpinPayload(_APIModel):
    wheel_id: str = Field(..., alias="wheel")
    status: str
    duration_ms: float
    start_time: float
    total_rotation: float


class SamplePayload(_APIModel):
    wheel_id: str = Field(..., alias="wheel")
    status: str
    rotation: float
    progress: float
    done: bool
    winner: str | None = None
    winner_index: int | None = None
