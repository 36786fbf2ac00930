"""Part builders for shapes drawn in a 64×64 native box."""

from __future__ import annotations

from patternforge.engine.config import NATIVE_BOX
from patternforge.engine.context import DrawablePart
from patternforge.engine.transforms import Transform

HALF_BOX = NATIVE_BOX / 2


def native_path(
    d: str,
    cx: float,
    cy: float,
    size: float,
    flip_h: int = 1,
    flip_v: int = 1,
    slot: int | None = None,
) -> DrawablePart:
    """Path in native coordinates, placed and mirrored by its transform."""
    scale = size / NATIVE_BOX
    return DrawablePart(
        kind="path",
        attrs={"d": d},
        color_slot=slot,
        transform=Transform.positioned(cx, cy, scale * flip_h, scale * flip_v, HALF_BOX),
    )


def native_rect(
    x: float,
    y: float,
    width: float,
    height: float,
    cx: float,
    cy: float,
    size: float,
    flip_h: int = 1,
    flip_v: int = 1,
    slot: int | None = None,
) -> DrawablePart:
    """Axis-aligned native rect mapped to screen coordinates (no transform)."""
    scale = size / NATIVE_BOX
    x0 = (x - HALF_BOX) * scale * flip_h
    x1 = (x + width - HALF_BOX) * scale * flip_h
    y0 = (y - HALF_BOX) * scale * flip_v
    y1 = (y + height - HALF_BOX) * scale * flip_v
    return DrawablePart(
        kind="rect",
        attrs={
            "x": cx + min(x0, x1),
            "y": cy + min(y0, y1),
            "width": width * scale,
            "height": height * scale,
        },
        color_slot=slot,
    )


def native_circle(
    x: float,
    y: float,
    r: float,
    cx: float,
    cy: float,
    size: float,
    flip_h: int = 1,
    flip_v: int = 1,
    slot: int | None = None,
) -> DrawablePart:
    scale = size / NATIVE_BOX
    return DrawablePart(
        kind="circle",
        attrs={
            "cx": cx + (x - HALF_BOX) * scale * flip_h,
            "cy": cy + (y - HALF_BOX) * scale * flip_v,
            "r": r * scale,
        },
        color_slot=slot,
    )
