"""Primitive shapes: circle, square, hexagon, triangles."""

from __future__ import annotations

from patternforge.catalog.parts import native_path
from patternforge.catalog.registry import shape, shape_set
from patternforge.engine.context import DrawablePart

shape_set(id="primitives", name="Primitives", description="Basic geometric shapes")


# Circle and square are symmetric: flips are ignored

@shape(id="circle_01", shape_set="primitives")
def circle(cx: float, cy: float, size: float, flip_h: int = 1, flip_v: int = 1) -> DrawablePart:
    return DrawablePart(kind="circle", attrs={"cx": cx, "cy": cy, "r": size / 2})


@shape(id="square_01", shape_set="primitives")
def square(cx: float, cy: float, size: float, flip_h: int = 1, flip_v: int = 1) -> DrawablePart:
    return DrawablePart(
        kind="rect",
        attrs={"x": cx - size / 2, "y": cy - size / 2, "width": size, "height": size},
    )


@shape(id="hexagon_01", shape_set="primitives")
def hexagon(cx: float, cy: float, size: float, flip_h: int = 1, flip_v: int = 1) -> DrawablePart:
    return native_path("M32 0L59.7128 16V48L32 64L4.28719 48V16L32 0Z", cx, cy, size, flip_h, flip_v)


@shape(id="triangle_01", shape_set="primitives")
def triangle(cx: float, cy: float, size: float, flip_h: int = 1, flip_v: int = 1) -> DrawablePart:
    return native_path("M32 0L0 64H64L32 0Z", cx, cy, size, flip_h, flip_v)


@shape(id="triangledouble_01", shape_set="primitives")
def triangle_double(cx: float, cy: float, size: float, flip_h: int = 1, flip_v: int = 1) -> DrawablePart:
    return native_path("M64 64H0L32 32L64 64ZM64 32H0L32 0L64 32Z", cx, cy, size, flip_h, flip_v)
