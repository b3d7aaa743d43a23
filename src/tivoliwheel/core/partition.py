"""Sector geometry for the wheel.

Sector ``i`` of ``N`` covers ``[i/N * 2π, (i+1)/N * 2π)`` measured clockwise
on screen from the positive x axis.  The pointer sits at ``3π/2``, the top of
the wheel.  Rotating the wheel by ``r`` is the same as rotating the pointer by
``-r`` relative to the wheel, so the winner is the un-rotated sector that
contains ``POINTER_ANGLE - r``.  ``partition`` and ``resolve`` both derive
from :func:`sector_at`, which keeps drawing and resolution in lockstep.
"""

from __future__ import annotations

import math
from collections.abc import Sequence

from .config import MAX_SECTORS, MIN_SECTORS, POINTER_ANGLE
from .errors import InvalidLabelCount
from .interfaces import RandomSource
from .models import Sector
from .palette import DEFAULT_PALETTE_SIZE

__all__ = [
    "TAU",
    "check_label_count",
    "color_of",
    "normalize_rotation",
    "partition",
    "resolve",
    "resolve_index",
    "sector_at",
    "shuffle_labels",
    "slice_angle",
]

TAU = 2.0 * math.pi


def check_label_count(count: int, minimum: int = MIN_SECTORS, maximum: int = MAX_SECTORS) -> None:
    if count < minimum or count > maximum:
        raise InvalidLabelCount(count, minimum, maximum)


def slice_angle(count: int) -> float:
    check_label_count(count)
    return TAU / count


def color_of(index: int, palette_size: int) -> int:
    if palette_size < 1:
        raise ValueError(f"palette_size must be positive; got {palette_size}")
    return index % palette_size


def normalize_rotation(rotation: float) -> float:
    """Reduce ``rotation`` into ``[0, 2π)``, negative input included."""

    value = ((rotation % TAU) + TAU) % TAU
    # Tiny negative inputs round up to exactly 2π
    return 0.0 if value >= TAU else value


def partition(labels: Sequence[str], palette_size: int = DEFAULT_PALETTE_SIZE) -> list[Sector]:
    count = len(labels)
    check_label_count(count)
    return [
        Sector(
            index=i,
            start_angle=(i / count) * TAU,
            end_angle=((i + 1) / count) * TAU,
            label=label,
            color=color_of(i, palette_size),
        )
        for i, label in enumerate(labels)
    ]


def sector_at(angle: float, count: int) -> int:
    """Index of the un-rotated sector containing ``angle``."""

    width = slice_angle(count)
    return math.floor(normalize_rotation(angle) / width) % count


def resolve_index(final_rotation: float, count: int) -> int:
    check_label_count(count)
    normalized = normalize_rotation(final_rotation)
    return sector_at(POINTER_ANGLE - normalized + TAU, count)


def resolve(final_rotation: float, labels: Sequence[str]) -> str:
    """Return the label that sits under the pointer after ``final_rotation``."""

    return labels[resolve_index(final_rotation, len(labels))]


def shuffle_labels(labels: Sequence[str], rng: RandomSource) -> list[str]:
    shuffled = list(labels)
    for i in range(len(shuffled) - 1, 0, -1):
        j = min(i, int(rng.uniform(0.0, 1.0) * (i + 1)))
        shuffled[i], shuffled[j] = shuffled[j], shuffled[i]
    return shuffled
