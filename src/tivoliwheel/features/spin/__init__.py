"""Spin feature: wheel registry service, schemas, and API router."""

from .router import create_spin_router
from .schemas import SamplePayload, SectorPayload, SpinPayload, WheelPayload
from .service import SpinManager, WheelSpec

__all__ = [
    "SamplePayload",
    "SectorPayload",
    "SpinManager",
    "SpinPayload",
    "WheelPayload",
    "WheelSpec",
    "create_spin_router",
]
