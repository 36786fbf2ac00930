"""Signal-flag style shapes: multi-color, one part per color slot.

Slot 1 is always the full-box background; slots 2+ are drawn over it.
"""

from __future__ import annotations

from patternforge.catalog.parts import native_circle, native_path, native_rect
from patternforge.catalog.registry import shape, shape_set
from patternforge.engine.context import DrawablePart

shape_set(
    id="flags",
    name="Signal Flags",
    description="Two- and three-color flag tiles",
    multi_color=True,
)


def _background(cx: float, cy: float, size: float, flip_h: int, flip_v: int) -> DrawablePart:
    return native_rect(0, 0, 64, 64, cx, cy, size, flip_h, flip_v, slot=1)


@shape(id="flag_cross_01", shape_set="flags", multi_color=True)
def flag_cross(cx: float, cy: float, size: float, flip_h: int = 1, flip_v: int = 1) -> list[DrawablePart]:
    return [
        _background(cx, cy, size, flip_h, flip_v),
        native_path("M24 0H40V24H64V40H40V64H24V40H0V24H24Z", cx, cy, size, flip_h, flip_v, slot=2),
    ]


@shape(id="flag_diagonal_01", shape_set="flags", multi_color=True)
def flag_diagonal(cx: float, cy: float, size: float, flip_h: int = 1, flip_v: int = 1) -> list[DrawablePart]:
    return [
        _background(cx, cy, size, flip_h, flip_v),
        native_path("M0 0H64L0 64Z", cx, cy, size, flip_h, flip_v, slot=2),
    ]


@shape(id="flag_quarters_01", shape_set="flags", multi_color=True)
def flag_quarters(cx: float, cy: float, size: float, flip_h: int = 1, flip_v: int = 1) -> list[DrawablePart]:
    return [
        _background(cx, cy, size, flip_h, flip_v),
        native_path("M0 0H32V32H0ZM32 32H64V64H32Z", cx, cy, size, flip_h, flip_v, slot=2),
    ]


@shape(id="flag_border_01", shape_set="flags", multi_color=True)
def flag_border(cx: float, cy: float, size: float, flip_h: int = 1, flip_v: int = 1) -> list[DrawablePart]:
    return [
        _background(cx, cy, size, flip_h, flip_v),
        native_rect(16, 16, 32, 32, cx, cy, size, flip_h, flip_v, slot=2),
    ]


@shape(id="flag_disc_01", shape_set="flags", multi_color=True)
def flag_disc(cx: float, cy: float, size: float, flip_h: int = 1, flip_v: int = 1) -> list[DrawablePart]:
    return [
        _background(cx, cy, size, flip_h, flip_v),
        native_circle(32, 32, 16, cx, cy, size, flip_h, flip_v, slot=2),
    ]


@shape(id="flag_pennant_01", shape_set="flags", multi_color=True)
def flag_pennant(cx: float, cy: float, size: float, flip_h: int = 1, flip_v: int = 1) -> list[DrawablePart]:
    return [
        _background(cx, cy, size, flip_h, flip_v),
        native_path("M0 21.333H64V42.667H0Z", cx, cy, size, flip_h, flip_v, slot=2),
        native_circle(16, 16, 8, cx, cy, size, flip_h, flip_v, slot=3),
    ]
