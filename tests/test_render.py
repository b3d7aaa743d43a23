from __future__ import annotations

import math
import random

import pytest

from tivoliwheel.core import POINTER_ANGLE, partition, resolve_index
from tivoliwheel.core.partition import TAU
from tivoliwheel.render import build_layout, pointer_sector, render_wheel_svg
from tivoliwheel.render.layout import (
    CANVAS_SIZE,
    POINTER_GAP,
    RADIUS,
    Point,
    angle_of,
    polar,
    rotate_point,
    sector_under_point,
)

LABELS = ["Pizza", "Pasta", "Salad", "Soup", "Steak"]


def test_layout_matches_canvas_constants() -> None:
    layout = build_layout(partition(LABELS))
    assert layout.width == layout.height == CANVAS_SIZE
    assert layout.center == Point(250.0, 250.0)
    assert layout.radius == RADIUS
    assert len(layout.wedges) == len(LABELS)
    assert layout.wedges[0].fill == "#ff6b6b"


def test_label_anchor_sits_at_mid_angle_and_mid_radius() -> None:
    layout = build_layout(partition(LABELS))
    for wedge in layout.wedges:
        anchor = wedge.label_anchor
        distance = math.hypot(anchor.x - layout.center.x, anchor.y - layout.center.y)
        assert distance == pytest.approx(RADIUS / 2)
        assert angle_of(anchor, layout.center) == pytest.approx(wedge.sector.mid_angle)


def test_pointer_is_above_the_wheel_pointing_down() -> None:
    layout = build_layout(partition(LABELS))
    base_left, base_right, tip = layout.pointer
    assert base_left.y == base_right.y == layout.center.y - RADIUS - POINTER_GAP
    assert tip.x == layout.center.x
    assert tip.y > base_left.y
    assert angle_of(tip, layout.center) == pytest.approx(POINTER_ANGLE)


def test_rotate_point_is_clockwise_on_screen() -> None:
    center = Point(0.0, 0.0)
    turned = rotate_point(Point(1.0, 0.0), center, math.pi / 2)
    # +x turns toward +y, which is downward on screen
    assert turned.x == pytest.approx(0.0, abs=1e-12)
    assert turned.y == pytest.approx(1.0)


def test_drawn_sector_under_pointer_matches_resolver() -> None:
    rng = random.Random(11)
    for count in (2, 3, 4, 5, 7, 12, 37, 100):
        sectors = partition([f"S{i}" for i in range(count)])
        layout = build_layout(sectors)
        width = TAU / count
        for _ in range(50):
            rotation = rng.uniform(0.0, 11.0 * TAU)
            offset = ((POINTER_ANGLE - rotation) % TAU) % width
            if offset < 1e-6 or width - offset < 1e-6:
                continue
            assert pointer_sector(layout, rotation).index == resolve_index(rotation, count)


def test_sector_under_point_undoes_rotation() -> None:
    layout = build_layout(partition(["A", "B", "C", "D"]))
    # a point at angle 0 (right side) sees sector 0 before rotating
    right = polar(layout.center, 100.0, 0.1)
    assert sector_under_point(layout, right, 0.0).label == "A"
    # after a quarter turn clockwise, sector 3 has moved over to the right
    assert sector_under_point(layout, right, math.pi / 2).label == "D"


def test_build_layout_rejects_bad_radius() -> None:
    with pytest.raises(ValueError):
        build_layout(partition(LABELS), radius=0)


def test_svg_contains_wedges_labels_and_pointer() -> None:
    svg = render_wheel_svg(partition(LABELS), rotation=math.pi / 2, title="Dinner")
    assert svg.startswith("<svg")
    assert svg.count("<path") == len(LABELS)
    for label in LABELS:
        assert f">{label}</text>" in svg
    assert 'class="pointer"' in svg
    assert "rotate(90.0000 250.00 250.00)" in svg
    assert "<title>Dinner</title>" in svg


def test_svg_escapes_labels() -> None:
    svg = render_wheel_svg(partition(["<b>bold</b>", "Fish & Chips"]))
    assert "&lt;b&gt;bold&lt;/b&gt;" in svg
    assert "Fish &amp; Chips" in svg
    assert "<b>" not in svg
