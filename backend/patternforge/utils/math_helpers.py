"""Math helpers: number formatting, rotation matrices. No engine imports."""

from __future__ import annotations

import math

import numpy as np
from numpy.typing import NDArray


def format_number(value: float) -> str:
    """Shortest text form of a number: 186.0 -> "186", 2.90625 -> "2.90625"."""
    v = float(value)
    if math.isfinite(v) and v.is_integer():
        return str(int(v))
    return repr(v)


def rotation_matrix(degrees: float) -> NDArray[np.float64]:
    """3x3 homogeneous rotation about the origin (SVG angle convention)."""
    rad = math.radians(degrees)
    c, s = math.cos(rad), math.sin(rad)
    return np.array([[c, -s, 0.0], [s, c, 0.0], [0.0, 0.0, 1.0]])


def translation_matrix(tx: float, ty: float) -> NDArray[np.float64]:
    return np.array([[1.0, 0.0, tx], [0.0, 1.0, ty], [0.0, 0.0, 1.0]])


def scale_matrix(sx: float, sy: float) -> NDArray[np.float64]:
    return np.array([[sx, 0.0, 0.0], [0.0, sy, 0.0], [0.0, 0.0, 1.0]])
