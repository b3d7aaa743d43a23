"""Spin-and-resolve engine: sector geometry, easing and the spin state machine."""

from .config import MAX_SECTORS, MIN_BASE_ROTATIONS, MIN_SECTORS, POINTER_ANGLE, WheelConfig
from .easing import ease_out_cubic
from .engine import SpinEngine, SpinHandle
from .errors import AlreadySpinning, InvalidLabelCount, WheelError
from .models import Sector, SpinSample, SpinState, SpinStatus
from .partition import color_of, normalize_rotation, partition, resolve, resolve_index, shuffle_labels

__all__ = [
    "MAX_SECTORS",
    "MIN_BASE_ROTATIONS",
    "MIN_SECTORS",
    "POINTER_ANGLE",
    "AlreadySpinning",
    "InvalidLabelCount",
    "Sector",
    "SpinEngine",
    "SpinHandle",
    "SpinSample",
    "SpinState",
    "SpinStatus",
    "WheelConfig",
    "WheelError",
    "color_of",
    "ease_out_cubic",
    "normalize_rotation",
    "partition",
    "resolve",
    "resolve_index",
    "shuffle_labels",
]
