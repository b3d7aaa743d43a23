"""Screen geometry for drawing a wheel.

Coordinates follow the canvas convention: x grows to the right, y grows
downward, and angles run clockwise from the positive x axis.  With that
convention ``POINTER_ANGLE`` (3π/2) is the top of the wheel.
"""

from __future__ import annotations

import math
from collections.abc import Sequence
from dataclasses import dataclass
from typing import NamedTuple

from ..core.config import POINTER_ANGLE
from ..core.models import Sector
from ..core.palette import DEFAULT_PALETTE, hex_color
from ..core.partition import TAU, normalize_rotation

CANVAS_SIZE = 500
RADIUS = 200.0
POINTER_GAP = 10.0
POINTER_WIDTH = 20.0
POINTER_HEIGHT = 20.0
LABEL_FONT_SIZE = 12


class Point(NamedTuple):
    x: float
    y: float


@dataclass(frozen=True)
class Wedge:
    sector: Sector
    start: Point
    end: Point
    label_anchor: Point
    fill: str

    @property
    def large_arc(self) -> bool:
        return self.sector.span > math.pi


@dataclass(frozen=True)
class WheelLayout:
    width: int
    height: int
    center: Point
    radius: float
    wedges: tuple[Wedge, ...]
    pointer: tuple[Point, Point, Point]

    @property
    def pointer_tip(self) -> Point:
        return self.pointer[2]


def polar(center: Point, radius: float, angle: float) -> Point:
    return Point(center.x + radius * math.cos(angle), center.y + radius * math.sin(angle))


def rotate_point(point: Point, center: Point, rotation: float) -> Point:
    cos_r = math.cos(rotation)
    sin_r = math.sin(rotation)
    dx = point.x - center.x
    dy = point.y - center.y
    return Point(center.x + dx * cos_r - dy * sin_r, center.y + dx * sin_r + dy * cos_r)


def pointer_polygon(center: Point, radius: float) -> tuple[Point, Point, Point]:
    """Downward triangle above the rim whose tip lies on the pointer angle."""

    top = center.y - radius - POINTER_GAP
    half = POINTER_WIDTH / 2.0
    return (
        Point(center.x - half, top),
        Point(center.x + half, top),
        Point(center.x, top + POINTER_HEIGHT),
    )


def build_layout(
    sectors: Sequence[Sector],
    *,
    size: int = CANVAS_SIZE,
    radius: float = RADIUS,
    palette: Sequence[int] = DEFAULT_PALETTE,
) -> WheelLayout:
    if radius <= 0:
        raise ValueError(f"radius must be positive; got {radius}")
    center = Point(size / 2.0, size / 2.0)
    wedges = tuple(
        Wedge(
            sector=sector,
            start=polar(center, radius, sector.start_angle),
            end=polar(center, radius, sector.end_angle),
            label_anchor=polar(center, radius / 2.0, sector.mid_angle),
            fill=hex_color(palette[sector.color % len(palette)]),
        )
        for sector in sectors
    )
    return WheelLayout(
        width=size,
        height=size,
        center=center,
        radius=radius,
        wedges=wedges,
        pointer=pointer_polygon(center, radius),
    )


def angle_of(point: Point, center: Point) -> float:
    return normalize_rotation(math.atan2(point.y - center.y, point.x - center.x))


def sector_under_point(layout: WheelLayout, point: Point, rotation: float) -> Sector:
    """Sector drawn under ``point`` once the wheel is rotated by ``rotation``.

    Works purely from the drawn geometry, undoing the wheel rotation on the
    point rather than consulting the resolver.
    """

    local = rotate_point(point, layout.center, -rotation)
    angle = angle_of(local, layout.center)
    for wedge in layout.wedges:
        if wedge.sector.contains(angle):
            return wedge.sector
    raise ValueError("layout has no wedges")


def pointer_sector(layout: WheelLayout, rotation: float) -> Sector:
    tip = polar(layout.center, layout.radius - POINTER_GAP, POINTER_ANGLE)
    return sector_under_point(layout, tip, rotation)


def rotation_degrees(rotation: float) -> float:
    return math.degrees(rotation % TAU)
