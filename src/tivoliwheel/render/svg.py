from __future__ import annotations

from collections.abc import Sequence
from functools import lru_cache

from jinja2 import Environment, PackageLoader

from ..core.models import Sector
from ..core.palette import DEFAULT_PALETTE
from .layout import CANVAS_SIZE, LABEL_FONT_SIZE, RADIUS, WheelLayout, build_layout, rotation_degrees

__all__ = ["SVG_MEDIA_TYPE", "render_layout_svg", "render_wheel_svg"]

SVG_MEDIA_TYPE = "image/svg+xml"


@lru_cache(maxsize=1)
def _environment() -> Environment:
    return Environment(
        loader=PackageLoader("tivoliwheel.render", "templates"),
        autoescape=True,
        trim_blocks=True,
        keep_trailing_newline=True,
    )


def render_layout_svg(layout: WheelLayout, rotation: float = 0.0, *, title: str | None = None) -> str:
    template = _environment().get_template("wheel.svg.j2")
    return template.render(
        layout=layout,
        rotation=rotation,
        degrees=rotation_degrees(rotation),
        font_size=LABEL_FONT_SIZE,
        title=title,
    )


def render_wheel_svg(
    sectors: Sequence[Sector],
    rotation: float = 0.0,
    *,
    size: int = CANVAS_SIZE,
    radius: float = RADIUS,
    palette: Sequence[int] = DEFAULT_PALETTE,
    title: str | None = None,
) -> str:
    """Draw ``sectors`` as an SVG document, turned clockwise by ``rotation`` radians."""

    layout = build_layout(sectors, size=size, radius=radius, palette=palette)
    return render_layout_svg(layout, rotation, title=title)
