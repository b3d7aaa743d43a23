"""Drawing helpers for the wheel: screen geometry and an SVG renderer."""

from .layout import WheelLayout, build_layout, pointer_sector
from .svg import SVG_MEDIA_TYPE, render_layout_svg, render_wheel_svg

__all__ = [
    "SVG_MEDIA_TYPE",
    "WheelLayout",
    "build_layout",
    "pointer_sector",
    "render_layout_svg",
    "render_wheel_svg",
]
