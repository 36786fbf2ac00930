"""Shape catalog: every shape is a pure function registered via decorator.

Usage:
    @shape(id="circle_01", shape_set="primitives")
    def circle(cx, cy, size, flip_h=1, flip_v=1) -> DrawablePart:
        return DrawablePart("circle", {"cx": cx, "cy": cy, "r": size / 2})

Single-part shapes return one DrawablePart, multi-part shapes (multi_color=True)
return a list of color-slotted parts. `ShapeCatalog.render` always returns a
list, so the engine never has to tell the two apart.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import dataclass
from typing import Callable, Union

from patternforge.engine.context import DrawablePart
from patternforge.errors import UnknownShapeError

logger = logging.getLogger(__name__)

SingleShapeFn = Callable[[float, float, float, int, int], DrawablePart]
MultiShapeFn = Callable[[float, float, float, int, int], Sequence[DrawablePart]]


@dataclass(frozen=True)
class ShapeSet:
    id: str
    name: str
    description: str = ""
    multi_color: bool = False
    enabled: bool = True


@dataclass(frozen=True)
class SinglePartShape:
    id: str
    shape_set: str
    fn: SingleShapeFn

    multi_color = False

    def render(self, cx: float, cy: float, size: float, flip_h: int, flip_v: int) -> list[DrawablePart]:
        return [self.fn(cx, cy, size, flip_h, flip_v)]


@dataclass(frozen=True)
class MultiPartShape:
    id: str
    shape_set: str
    fn: MultiShapeFn

    multi_color = True

    def render(self, cx: float, cy: float, size: float, flip_h: int, flip_v: int) -> list[DrawablePart]:
        return list(self.fn(cx, cy, size, flip_h, flip_v))


ShapeSpec = Union[SinglePartShape, MultiPartShape]


class ShapeCatalog:
    """Registry of shapes and the sets that group them."""

    def __init__(self) -> None:
        self._shapes: dict[str, ShapeSpec] = {}
        self._sets: dict[str, ShapeSet] = {}

    def register_set(self, shape_set: ShapeSet) -> None:
        if shape_set.id in self._sets:
            raise ValueError(f"Duplicate shape set ID: {shape_set.id}")
        self._sets[shape_set.id] = shape_set

    def register(self, spec: ShapeSpec) -> None:
        if spec.id in self._shapes:
            raise ValueError(f"Duplicate shape ID: {spec.id}")
        if spec.shape_set not in self._sets:
            raise ValueError(f"Shape {spec.id} registered in unknown set {spec.shape_set!r}")
        self._shapes[spec.id] = spec
        logger.debug("Registered shape %s (%s)", spec.id, spec.shape_set)

    def get(self, shape_id: str) -> ShapeSpec:
        try:
            return self._shapes[shape_id]
        except KeyError:
            raise UnknownShapeError(f"Unknown shape: {shape_id!r}") from None

    def __contains__(self, shape_id: object) -> bool:
        return shape_id in self._shapes

    def __len__(self) -> int:
        return len(self._shapes)

    def ids(self) -> list[str]:
        return list(self._shapes)

    def sets(self) -> list[ShapeSet]:
        return list(self._sets.values())

    def shapes_in_set(self, set_id: str) -> list[ShapeSpec]:
        return [s for s in self._shapes.values() if s.shape_set == set_id]

    def enabled_ids(self) -> list[str]:
        enabled = {s.id for s in self._sets.values() if s.enabled}
        return [s.id for s in self._shapes.values() if s.shape_set in enabled]

    def render(
        self,
        shape_id: str,
        cx: float,
        cy: float,
        size: float,
        flip_h: int = 1,
        flip_v: int = 1,
    ) -> list[DrawablePart]:
        return self.get(shape_id).render(cx, cy, size, flip_h, flip_v)

    @property
    def count(self) -> int:
        return len(self._shapes)


# Module-level singleton
_catalog = ShapeCatalog()


def get_catalog() -> ShapeCatalog:
    return _catalog


def shape_set(
    *,
    id: str,
    name: str,
    description: str = "",
    multi_color: bool = False,
    enabled: bool = True,
    catalog: ShapeCatalog | None = None,
) -> ShapeSet:
    spec = ShapeSet(id=id, name=name, description=description, multi_color=multi_color, enabled=enabled)
    (_catalog if catalog is None else catalog).register_set(spec)
    return spec


def shape(
    *,
    id: str,
    shape_set: str,
    multi_color: bool = False,
    catalog: ShapeCatalog | None = None,
):
    """Decorator to register a shape function."""

    def decorator(fn):
        cls = MultiPartShape if multi_color else SinglePartShape
        (_catalog if catalog is None else catalog).register(cls(id=id, shape_set=shape_set, fn=fn))
        return fn

    return decorator
