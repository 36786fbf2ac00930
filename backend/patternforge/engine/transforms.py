"""Structured SVG transforms.

A transform is an ordered tuple of typed operations. It is composed
programmatically and only turned into text by the serializer. SVG applies
the operations right-to-left to a point, which is the same as multiplying
their matrices left-to-right.

Usage:
    t = Transform.positioned(cx, cy, sx, sy, half=32)
    t.to_svg()   # "translate(cx, cy) scale(sx, sy) translate(-32, -32)"
    t.apply(32, 32)  # -> (cx, cy)
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union

import numpy as np
from numpy.typing import NDArray

from patternforge.utils.math_helpers import (
    format_number,
    rotation_matrix,
    scale_matrix,
    translation_matrix,
)


@dataclass(frozen=True)
class Translate:
    x: float
    y: float = 0.0

    def to_svg(self) -> str:
        return f"translate({format_number(self.x)}, {format_number(self.y)})"

    def matrix(self) -> NDArray[np.float64]:
        return translation_matrix(self.x, self.y)


@dataclass(frozen=True)
class Scale:
    x: float
    y: float

    def to_svg(self) -> str:
        return f"scale({format_number(self.x)}, {format_number(self.y)})"

    def matrix(self) -> NDArray[np.float64]:
        return scale_matrix(self.x, self.y)


@dataclass(frozen=True)
class Rotate:
    """Rotation in degrees, about the origin or about an explicit pivot."""

    angle: float
    cx: float | None = None
    cy: float | None = None

    @property
    def has_pivot(self) -> bool:
        return self.cx is not None and self.cy is not None

    def to_svg(self) -> str:
        if self.has_pivot:
            return (
                f"rotate({format_number(self.angle)} "
                f"{format_number(self.cx)} {format_number(self.cy)})"
            )
        return f"rotate({format_number(self.angle)})"

    def matrix(self) -> NDArray[np.float64]:
        if self.has_pivot:
            return (
                translation_matrix(self.cx, self.cy)
                @ rotation_matrix(self.angle)
                @ translation_matrix(-self.cx, -self.cy)
            )
        return rotation_matrix(self.angle)


TransformOp = Union[Translate, Scale, Rotate]


@dataclass(frozen=True)
class Transform:
    ops: tuple[TransformOp, ...] = ()

    @classmethod
    def positioned(cls, cx: float, cy: float, sx: float, sy: float, half: float) -> Transform:
        """Place a native-box shape: re-center, scale (with flips), move to (cx, cy)."""
        return cls((Translate(cx, cy), Scale(sx, sy), Translate(-half, -half)))

    def __bool__(self) -> bool:
        return bool(self.ops)

    def __len__(self) -> int:
        return len(self.ops)

    def then(self, op: TransformOp) -> Transform:
        """Append an operation (it applies first to points, being rightmost)."""
        return Transform(self.ops + (op,))

    def insert(self, index: int, op: TransformOp) -> Transform:
        return Transform(self.ops[:index] + (op,) + self.ops[index:])

    def is_positioned_shape(self) -> bool:
        """True for the translate -> scale -> translate form built by `positioned`."""
        return tuple(type(op) for op in self.ops) == (Translate, Scale, Translate)

    def first_translate(self) -> Translate | None:
        for op in self.ops:
            if isinstance(op, Translate):
                return op
        return None

    def matrix(self) -> NDArray[np.float64]:
        m = np.eye(3)
        for op in self.ops:
            m = m @ op.matrix()
        return m

    def apply(self, x: float, y: float) -> tuple[float, float]:
        px, py, _ = self.matrix() @ np.array([x, y, 1.0])
        return (float(px), float(py))

    def to_svg(self) -> str:
        return " ".join(op.to_svg() for op in self.ops)
